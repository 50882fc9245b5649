import json

from docmap import DocumentationPipeline
from docmap.models import Comment, CommentTag, load_project


def _snapshot(project):
    return [
        (
            reflection.id,
            reflection.url,
            reflection.anchor,
            reflection.has_own_document,
            reflection.css_classes,
            [(t.tag_name, t.param_name, t.text) for t in reflection.comment.tags]
            if reflection.comment else None,
        )
        for reflection in [project, *project.walk()]
    ]


def test_run_moves_comments_and_maps_urls(project, lookup):
    lookup("a.Foo").comment = Comment("Foo.", "", [CommentTag("param", "bar.x", "desc")])

    result = DocumentationPipeline(project).run()

    assert result.moved_comments == 1
    assert lookup("a.Foo.bar.bar.x").comment.tags[0].text == "desc"
    assert result.urls[0].url == "globals.html"
    assert lookup("a.Foo").css_classes == "tsd-kind-class tsd-parent-kind-module"
    assert [child.title for child in result.navigation.children][:2] == ["Globals", "Internals"]


def test_second_run_is_a_no_op(project, lookup):
    lookup("a.Foo").comment = Comment("Foo.", "", [CommentTag("param", "bar.x", "desc")])
    first = DocumentationPipeline(project).run()
    snapshot = _snapshot(project)

    second = DocumentationPipeline(project).run()

    assert second.moved_comments == 0
    assert _snapshot(project) == snapshot
    assert [(m.url, m.model.id, m.template) for m in second.urls] == [
        (m.url, m.model.id, m.template) for m in first.urls
    ]
    assert second.navigation.to_dict() == first.navigation.to_dict()


def test_config_theme_options(project):
    config = {"theme": {"entry_point": "a", "readme": "none"}}

    result = DocumentationPipeline(project, config).run()

    assert [mapping.url for mapping in result.urls] == [
        "index.html",
        "classes/a.foo.html",
        "interfaces/a.ithing.html",
    ]


def test_to_dict_is_json_serializable(project):
    result = DocumentationPipeline(project).run()

    data = json.loads(json.dumps(result.to_dict()))

    assert data["meta"]["project"] == "demo"
    assert data["meta"]["document_count"] == len(result.urls)
    assert data["documents"][2] == {
        "url": "modules/a.html",
        "id": 1,
        "name": "a",
        "template": "reflection.hbs",
    }
    foo = data["reflections"]["2"]
    assert foo["url"] == "classes/a.foo.html"
    assert foo["hasOwnDocument"] is True
    assert foo["parent"] == 1
    assert foo["flags"] == {"is_exported": True}
    assert data["options"] == {"ga_id": "", "ga_site": "auto", "hide_generator": False}
    assert data["navigation"]["title"] == "Index"


def test_loaded_tree_end_to_end():
    tree = {
        "name": "demo",
        "children": [
            {
                "name": "Foo",
                "kind": "Class",
                "flags": {"isStatic": True, "isPrivate": True},
                "comment": {"shortText": "Foo.", "tags": [{"tag": "param", "paramName": "bar.x", "text": "desc"}]},
                "children": [
                    {
                        "name": "bar",
                        "kind": "Method",
                        "signatures": [
                            {
                                "name": "bar",
                                "kind": "CallSignature",
                                "parameters": [{"name": "x", "kind": "Parameter"}],
                            }
                        ],
                    }
                ],
                "groups": [{"title": "Methods", "kind": "Method", "children": [2]}],
            }
        ],
        "groups": [{"title": "Classes", "kind": "Class", "children": [1]}],
    }
    project = load_project(tree)

    data = DocumentationPipeline(project).run().to_dict()

    foo = data["reflections"]["1"]
    assert foo["url"] == "classes/foo.html"
    assert foo["cssClasses"] == "tsd-kind-class tsd-is-private tsd-is-static tsd-is-not-exported"
    assert foo["comment"]["tags"] == []
    assert data["reflections"]["4"]["comment"]["tags"] == [{"tag": "", "text": "desc"}]
    assert data["reflections"]["2"]["url"] == "classes/foo.html#bar"
    assert foo["groups"][0]["cssClasses"] == "tsd-is-not-exported"
    assert data["reflections"]["0"]["groups"][0]["cssClasses"] == (
        "tsd-is-private tsd-is-private-protected tsd-is-not-exported"
    )
