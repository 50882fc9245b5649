from docmap.models import ProjectReflection, ReflectionKind as K
from docmap.output.mappings import DEFAULT_MAPPINGS, TemplateMapping, get_mapping
from docmap.output.urls import apply_anchor_url, get_url, get_urls


def _documents(urls):
    return [(mapping.url, mapping.model.name, mapping.template) for mapping in urls]


def test_mapping_table_first_match(project, lookup):
    assert get_mapping(lookup("a.Foo")).directory == "classes"
    assert get_mapping(lookup("a.IThing")).directory == "interfaces"
    assert get_mapping(lookup("a")).directory == "modules"
    assert get_mapping(lookup("b")).directory == "modules"
    assert get_mapping(lookup("a.helper")) is None
    assert all(not mapping.is_leaf for mapping in DEFAULT_MAPPINGS)


def test_documents_with_readme(project):
    urls = get_urls(project, project, has_readme=True)

    assert _documents(urls) == [
        ("globals.html", "demo", "reflection.hbs"),
        ("index.html", "demo", "index.hbs"),
        ("modules/a.html", "a", "reflection.hbs"),
        ("classes/a.foo.html", "Foo", "reflection.hbs"),
        ("interfaces/a.ithing.html", "IThing", "reflection.hbs"),
        ("modules/b.html", "b", "reflection.hbs"),
        ("classes/b.ext.html", "Ext", "reflection.hbs"),
        ("modules/c.html", "c", "reflection.hbs"),
    ]
    assert project.url == "globals.html"
    assert project.has_own_document


def test_documents_without_readme(project):
    urls = get_urls(project, project, has_readme=False)

    assert _documents(urls)[0] == ("index.html", "demo", "reflection.hbs")
    assert "globals.html" not in [mapping.url for mapping in urls]
    assert project.url == "index.html"


def test_anchor_urls(project, lookup):
    get_urls(project, project)

    bar = lookup("a.Foo.bar")
    assert bar.url == "classes/a.foo.html#bar"
    assert bar.anchor == "bar"
    assert not bar.has_own_document

    helper = lookup("a.helper")
    assert helper.url == "modules/a.html#helper"

    size = lookup("a.IThing.size")
    assert size.url == "interfaces/a.ithing.html#size"


def test_static_anchor_prefix(project, lookup):
    get_urls(project, project)

    count = lookup("a.Foo.count")
    assert count.anchor == "static-count"
    assert count.url == "classes/a.foo.html#static-count"


def test_signatures_and_parameters_get_anchors(project, lookup):
    get_urls(project, project)

    signature = lookup("a.Foo.bar.bar")
    parameter = lookup("a.Foo.bar.bar.x")
    assert signature.url == "classes/a.foo.html#bar.bar-1"
    assert parameter.url == "classes/a.foo.html#bar.bar-1.x"


def test_partition_totality(project):
    get_urls(project, project)

    owners = {mapping.model.url: mapping.model for mapping in get_urls(project, project)}
    for reflection in project.walk():
        assert reflection.url, reflection
        if reflection.has_own_document:
            assert reflection.anchor == ""
            assert "#" not in reflection.url
        else:
            document_url, _, anchor = reflection.url.partition("#")
            assert anchor == reflection.anchor
            assert document_url in owners
            assert reflection.anchor.startswith("static-") == reflection.flags.is_static


def test_partition_is_deterministic(project):
    first = _documents(get_urls(project, project))
    first_urls = [(r.id, r.url, r.anchor) for r in project.walk()]

    second = _documents(get_urls(project, project))

    assert first == second
    assert [(r.id, r.url, r.anchor) for r in project.walk()] == first_urls


def test_entry_point_subtree(project, lookup):
    a = lookup("a")

    urls = get_urls(project, a, has_readme=False)

    assert _documents(urls) == [
        ("index.html", "a", "reflection.hbs"),
        ("classes/a.foo.html", "Foo", "reflection.hbs"),
        ("interfaces/a.ithing.html", "IThing", "reflection.hbs"),
    ]
    assert a.url == "index.html"
    assert lookup("a.helper").url == "index.html#helper"
    assert project.url == "index.html"


def test_leaf_mapping_turns_children_into_anchors(project, lookup):
    mappings = (TemplateMapping((K.Module,), True, "modules", "module.hbs"),)

    urls = get_urls(project, project, mappings=mappings)

    assert [mapping.url for mapping in urls] == [
        "globals.html",
        "index.html",
        "modules/a.html",
        "modules/c.html",
    ]
    assert lookup("a.Foo").url == "modules/a.html#foo"
    assert lookup("a.Foo.bar").url == "modules/a.html#foo.bar"
    # No rule for external modules: anchored on the globals page
    assert lookup("b").url == "globals.html#b"
    assert lookup("b.Ext").url == "globals.html#b.ext"


def test_get_url_relative(project, lookup):
    bar = lookup("a.Foo.bar")
    foo = lookup("a.Foo")

    assert get_url(bar) == "a.foo.bar"
    assert get_url(bar, foo) == "bar"
    assert get_url(bar, separator="/") == "a/foo/bar"


def test_apply_anchor_url_recurses(add):
    project = ProjectReflection("demo")
    project.url = "index.html"
    project.has_own_document = True
    ns = add(project, "ns", K.ObjectLiteral)
    inner = add(ns, "inner", K.Property)

    apply_anchor_url(ns, project)

    assert ns.url == "index.html#ns"
    assert inner.url == "index.html#ns.inner"
    assert inner.anchor == "ns.inner"
