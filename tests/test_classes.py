from docmap.models import ProjectReflection, ReflectionGroup, ReflectionKind as K
from docmap.output.classes import (
    apply_classes,
    get_group_classes,
    get_reflection_classes,
)
from docmap.utils import to_style_class


def test_to_style_class():
    assert to_style_class("tsd-kind-ExternalModule") == "tsd-kind-external-module"
    assert to_style_class("tsd-kind-CallSignature") == "tsd-kind-call-signature"
    assert to_style_class("tsd-kind-Class") == "tsd-kind-class"


def test_static_private_class(add):
    project = ProjectReflection("demo")
    foo = add(project, "foo", K.Class, is_static=True, is_private=True)

    assert get_reflection_classes(foo) == (
        "tsd-kind-class tsd-is-private tsd-is-static tsd-is-not-exported"
    )


def test_exported_class_has_only_kind_token(add):
    project = ProjectReflection("demo")
    foo = add(project, "Foo", K.Class, is_exported=True)

    assert get_reflection_classes(foo) == "tsd-kind-class"


def test_parent_kind_token(project, lookup):
    assert get_reflection_classes(lookup("a.Foo")) == "tsd-kind-class tsd-parent-kind-module"
    assert get_reflection_classes(lookup("a.Foo.count")) == (
        "tsd-kind-property tsd-parent-kind-class tsd-is-static tsd-is-not-exported"
    )
    assert get_reflection_classes(lookup("b")) == (
        "tsd-kind-external-module tsd-is-external tsd-is-not-exported"
    )


def test_accessor_tokens(add):
    project = ProjectReflection("demo")
    cls = add(project, "Foo", K.Class, is_exported=True)

    setter_only = add(cls, "a", K.Accessor, is_exported=True)
    add(setter_only, "a", K.SetSignature)
    getter_only = add(cls, "b", K.Accessor, is_exported=True)
    add(getter_only, "b", K.GetSignature)
    both = add(cls, "c", K.Accessor, is_exported=True)
    add(both, "c", K.GetSignature)
    add(both, "c", K.SetSignature)

    assert get_reflection_classes(setter_only).split()[0] == "tsd-kind-set-signature"
    assert get_reflection_classes(getter_only).split()[0] == "tsd-kind-get-signature"
    assert get_reflection_classes(both) == "tsd-kind-accessor tsd-parent-kind-class"


def test_type_parameter_token(add):
    project = ProjectReflection("demo")
    box = add(project, "Box", K.Class, is_exported=True)
    add(box, "T", K.TypeParameter)
    method = add(box, "map", K.Method, is_exported=True)
    signature = add(method, "map", K.CallSignature)
    add(signature, "U", K.TypeParameter)
    plain = add(box, "size", K.Method, is_exported=True)
    add(plain, "size", K.CallSignature)

    assert get_reflection_classes(box) == "tsd-kind-class tsd-has-type-parameter"
    assert "tsd-has-type-parameter" in get_reflection_classes(method).split()
    assert "tsd-has-type-parameter" not in get_reflection_classes(plain).split()


def test_token_order(add):
    project = ProjectReflection("demo")
    cls = add(project, "Foo", K.Class, is_exported=True)
    member = add(
        cls, "m", K.Method,
        is_private=True, is_protected=True, is_static=True, is_external=True,
    )
    member.overwrites = "Base.m"
    member.inherited_from = "Base.m"
    add(member, "T", K.TypeParameter)

    assert get_reflection_classes(member).split() == [
        "tsd-kind-method",
        "tsd-parent-kind-class",
        "tsd-has-type-parameter",
        "tsd-is-overwrite",
        "tsd-is-inherited",
        "tsd-is-private",
        "tsd-is-protected",
        "tsd-is-static",
        "tsd-is-external",
        "tsd-is-not-exported",
    ]


def test_group_classes(add):
    project = ProjectReflection("demo")
    first = add(project, "a", K.Variable, is_private=True, is_external=True)
    second = add(project, "b", K.Variable, is_private=True, is_external=True)
    first.inherited_from = second.inherited_from = "Base"

    group = ReflectionGroup("Variables", K.Variable, [first, second])

    assert get_group_classes(group) == (
        "tsd-is-inherited tsd-is-private tsd-is-private-protected "
        "tsd-is-external tsd-is-not-exported"
    )


def test_group_classes_require_uniform_flags(add):
    project = ProjectReflection("demo")
    private = add(project, "a", K.Variable, is_private=True, is_exported=True)
    protected = add(project, "b", K.Variable, is_protected=True)

    group = ReflectionGroup("Variables", K.Variable, [private, protected])

    assert get_group_classes(group) == "tsd-is-private-protected"


def test_apply_classes(project, lookup):
    a = lookup("a")
    a.groups = [ReflectionGroup("Classes", K.Class, [lookup("a.Foo")])]
    project.groups = [ReflectionGroup("Modules", K.Module, [a, lookup("c")])]

    count = apply_classes(project)

    assert count == 10
    assert a.css_classes == "tsd-kind-module"
    assert lookup("a.Foo.bar.bar").css_classes == ""
    assert a.groups[0].css_classes == ""
    assert project.groups[0].css_classes == ""
