import pytest

from docmap.models import (
    Comment,
    CommentTag,
    ProjectReflection,
    Reflection,
    ReflectionKind,
    reset_reflection_ids,
)


def _add(parent, name, kind, comment=None, **flags):
    reflection = Reflection(name, kind)
    for flag, value in flags.items():
        setattr(reflection.flags, flag, value)
    if comment is not None:
        reflection.comment = comment

    if reflection.is_signature():
        parent.add_signature(reflection)
    elif kind == ReflectionKind.Parameter:
        parent.add_parameter(reflection)
    elif kind == ReflectionKind.TypeParameter:
        parent.add_type_parameter(reflection)
    else:
        parent.add_child(reflection)
    return reflection


def _comment(*tags, short_text="Some text."):
    return Comment(short_text, "", [CommentTag(*tag) for tag in tags])


@pytest.fixture(autouse=True)
def fresh_ids():
    reset_reflection_ids()
    yield


@pytest.fixture
def add():
    """Attach a new reflection to a parent, routed by its kind."""
    return _add


@pytest.fixture
def comment():
    """Build a comment from (tag, param, text) tuples."""
    return _comment


@pytest.fixture
def project():
    """
    A small project::

        demo
          a (module)
            Foo (class)
              bar (method) -> bar (call signature) -> x (parameter)
              count (static property)
            IThing (interface)
              size (property)
            helper (function) -> helper (call signature)
          b (external module)
            Ext (class)
          c (module)
    """
    K = ReflectionKind
    root = ProjectReflection("demo")

    a = _add(root, "a", K.Module, is_exported=True)
    foo = _add(a, "Foo", K.Class, is_exported=True)
    bar = _add(foo, "bar", K.Method)
    bar_signature = _add(bar, "bar", K.CallSignature)
    _add(bar_signature, "x", K.Parameter)
    _add(foo, "count", K.Property, is_static=True)
    thing = _add(a, "IThing", K.Interface, is_exported=True)
    _add(thing, "size", K.Property)
    helper = _add(a, "helper", K.Function)
    _add(helper, "helper", K.CallSignature)

    b = _add(root, "b", K.ExternalModule, is_external=True)
    _add(b, "Ext", K.Class, is_external=True)

    _add(root, "c", K.Module)
    return root


def find(project, dotted_name):
    """Resolve a dotted name below the project, failing loudly."""
    reflection = project.get_child_by_name(dotted_name)
    assert reflection is not None, dotted_name
    return reflection


@pytest.fixture
def lookup(project):
    return lambda dotted_name: find(project, dotted_name)
