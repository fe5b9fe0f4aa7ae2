"""Tests for resource discovery and merging."""

import json

import pytest

from portal_bundler.errors import ResourceConflictError, ResourceParseError
from portal_bundler.resources import ResourceMerger, discover_resources, load_document, merge
from portal_bundler.models import ResourceDocument

from conftest import write_tree


def test_two_directories_merge(tmp_path):
    write_tree(tmp_path, {
        "src/strings.json": '{"x": 1}',
        "src/utils/strings.json": '{"y": 2}',
    })
    merged = merge([tmp_path / "src", tmp_path / "src" / "utils"])
    assert merged.data == {"x": 1, "y": 2}
    assert list(merged.data) == ["x", "y"]
    assert merged.origins["y"] == tmp_path / "src" / "utils" / "strings.json"


def test_suffix_match_and_sorted_within_directory(tmp_path):
    write_tree(tmp_path, {
        "src/ui.strings.json": '{"ui": {"title": "T"}}',
        "src/game.strings.json": '{"game": [1, 2]}',
        "src/config.json": '{"ignored": true}',
    })
    paths = discover_resources([tmp_path / "src"], "strings.json")
    assert [p.name for p in paths] == ["game.strings.json", "ui.strings.json"]

    merged = merge([tmp_path / "src"])
    assert list(merged.data) == ["game", "ui"]
    assert merged.data["ui"] == {"title": "T"}


def test_same_directory_listed_twice_is_processed_once(tmp_path):
    write_tree(tmp_path, {"src/strings.json": '{"x": 1}'})
    merged = merge([tmp_path / "src", tmp_path / "src"])
    assert merged.data == {"x": 1}
    assert len(merged.documents) == 1


def test_conflict_names_key_and_both_documents(tmp_path):
    write_tree(tmp_path, {
        "a/strings.json": '{"shared": 1, "a": 2}',
        "b/strings.json": '{"b": 3, "shared": 4}',
    })
    with pytest.raises(ResourceConflictError) as excinfo:
        merge([tmp_path / "a", tmp_path / "b"])

    err = excinfo.value
    assert err.key == "shared"
    assert err.path == tmp_path / "b" / "strings.json"
    assert err.previous_path == tmp_path / "a" / "strings.json"
    assert '"shared"' in str(err)


def test_conflict_never_overwrites(tmp_path):
    merger = ResourceMerger()
    merger.add(ResourceDocument(tmp_path / "one.json", {"k": "first"}))
    with pytest.raises(ResourceConflictError):
        merger.add(ResourceDocument(tmp_path / "two.json", {"new": 1, "k": "second"}))
    assert merger.merged.data == {"k": "first"}


def test_invalid_json_is_fatal(tmp_path):
    write_tree(tmp_path, {"src/strings.json": '{"x": 1,'})
    with pytest.raises(ResourceParseError) as excinfo:
        merge([tmp_path / "src"])
    assert excinfo.value.path == tmp_path / "src" / "strings.json"


def test_non_object_top_level_is_fatal(tmp_path):
    write_tree(tmp_path, {"strings.json": json.dumps(["x"])})
    with pytest.raises(ResourceParseError):
        load_document(tmp_path / "strings.json")


def test_nested_values_are_kept_unchanged(tmp_path):
    value = {"deep": {"list": [1, {"two": 2}], "none": None}}
    write_tree(tmp_path, {"strings.json": json.dumps({"root": value})})
    assert merge([tmp_path]).data == {"root": value}
