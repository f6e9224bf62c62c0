"""Write-then-read tests over whole collections."""

import io

import pytest

from bug_platform.collection import SortedBugCollection
from bug_platform.project import Project


def _snapshot(collection):
    return {
        "bugs": list(collection),
        "app_classes": [(name, collection.is_interface(name)) for name in collection.application_classes()],
        "errors": list(collection.errors()),
        "missing_classes": list(collection.missing_classes()),
    }


def _reload(collection, project):
    sink = io.BytesIO()
    collection.write_xml(sink, project)
    sink.seek(0)

    loaded = SortedBugCollection()
    loaded_project = Project()
    loaded.read_xml(sink, loaded_project)
    return loaded, loaded_project


@pytest.mark.parametrize("count", [0, 1, 4])
def test_round_trip_preserves_collection(count, make_bug, sample_bug):
    collection = SortedBugCollection()
    for i in range(count):
        collection.add(make_bug(f"com.example.C{i}", priority=1 + i % 3, source_file=f"C{i}.java"))
        collection.add_application_class(f"com.example.C{i}", i % 2 == 0)
        collection.add_error(f"error {i}")
        collection.add_missing_class(f"org.lib.Missing{i}")
    if count:
        collection.add(sample_bug)

    loaded, _ = _reload(collection, Project())

    assert _snapshot(loaded) == _snapshot(collection)


def test_round_trip_preserves_project():
    project = Project(filename="demo.fb", jars=["a.jar", "b.jar"], aux_classpath=["dep.jar"], src_dirs=["src"])

    _, loaded_project = _reload(SortedBugCollection(), project)

    assert loaded_project == Project(
        filename="demo.fb", jars=["a.jar", "b.jar"], aux_classpath=["dep.jar"], src_dirs=["src"],
        modified=False,
    )


def test_round_trip_of_unknown_source_file(make_bug):
    collection = SortedBugCollection()
    collection.add(make_bug("com.example.A", source_file=None))

    loaded, _ = _reload(collection, Project())

    assert next(iter(loaded)).annotations[1].source_file is None


def test_round_trip_of_special_characters():
    collection = SortedBugCollection()
    collection.add_error('Unexpected <token> & "quote" in Foo$Inner')
    collection.add_application_class("com.example.Outer$Inner", False)

    loaded, _ = _reload(collection, Project())

    assert _snapshot(loaded) == _snapshot(collection)
