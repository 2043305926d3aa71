import json
from dataclasses import dataclass, field

import pytest

from bridgr.builder import (
    build_spec,
    extract_path_param,
    field_type_by_json_tag,
    filterable_field_names,
)
from bridgr.registry import clear_paths, register_path


@dataclass
class Item:
    id: int = field(default=0, metadata={"json": "id"})
    name: str = field(default="", metadata={"json": "name"})
    price: float = 0.0
    done: bool = False

    @classmethod
    def generic_filtering(cls):
        return True


@dataclass
class Memo:
    id: int = field(default=0, metadata={"json": "id"})
    title: str = field(default="", metadata={"json": "title"})
    body: str = field(default="", metadata={"json": "body"})

    @classmethod
    def filterable_fields(cls):
        return ["title"]


@dataclass
class Broken:
    id: int = 0

    @classmethod
    def filterable_fields(cls):
        return ["nope"]


@dataclass
class Plain:
    id: int = 0
    label: str = ""


@pytest.fixture(autouse=True)
def _empty_registry():
    clear_paths()
    yield
    clear_paths()


def _register_crud(base, model):
    register_path("get", base, model)
    register_path("post", base, model)
    register_path("get", base + "/{id}", model)
    register_path("put", base + "/{id}", model)
    register_path("delete", base + "/{id}", model)


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/items/{id}", "id"),
        ("/items", ""),
        ("/items/{}", ""),
        ("/items/{id", ""),
        ("/a/{x}/b/{y}", "x"),
    ],
)
def test_extract_path_param(path, expected):
    assert extract_path_param(path) == expected


def test_generic_filtering_allows_all_fields():
    assert filterable_field_names(Item) == ["id", "name", "price", "done"]


def test_filterable_fields_are_listed():
    assert filterable_field_names(Memo) == ["title"]


def test_unknown_filterable_field_raises():
    with pytest.raises(ValueError, match="nope"):
        filterable_field_names(Broken)


def test_model_without_filtering_has_no_fields():
    assert filterable_field_names(Plain) == []


@pytest.mark.parametrize(
    "tag, expected",
    [
        ("price", "number"),
        ("done", "boolean"),
        ("id", "integer"),
        ("name", "string"),
        ("missing", "string"),
    ],
)
def test_field_type_by_json_tag(tag, expected):
    assert field_type_by_json_tag(Item, tag) == expected


def test_spec_header():
    doc = json.loads(build_spec())
    assert doc["openapi"] == "3.0.0"
    assert doc["info"] == {"title": "Bridgr API", "version": "1.0.0"}
    assert doc["paths"] == {}


def test_post_body_has_no_id():
    _register_crud("/items", Item)
    doc = json.loads(build_spec())
    props = doc["paths"]["/items"]["post"]["requestBody"]["content"][
        "application/json"
    ]["schema"]["properties"]
    assert "id" not in props
    assert props["name"] == {"type": "string"}


def test_put_marks_id_read_only():
    _register_crud("/items", Item)
    doc = json.loads(build_spec())
    schema = doc["paths"]["/items/{id}"]["put"]["requestBody"]["content"][
        "application/json"
    ]["schema"]
    assert schema["type"] == "object"
    assert schema["properties"]["id"] == {"type": "integer", "readOnly": True}


def test_item_paths_have_path_parameter():
    _register_crud("/items", Item)
    doc = json.loads(build_spec())
    expected = [
        {"name": "id", "in": "path", "required": True, "schema": {"type": "string"}}
    ]
    for method in ("get", "put", "delete"):
        assert doc["paths"]["/items/{id}"][method]["parameters"] == expected
    assert "requestBody" not in doc["paths"]["/items/{id}"]["delete"]


def test_list_has_query_parameters():
    _register_crud("/memos", Memo)
    doc = json.loads(build_spec())
    params = doc["paths"]["/memos"]["get"]["parameters"]
    assert params == [
        {
            "name": "title",
            "in": "query",
            "required": False,
            "schema": {"type": "string"},
        }
    ]
    assert "parameters" not in doc["paths"]["/memos"]["post"]


def test_every_operation_has_summary_and_response():
    _register_crud("/items", Item)
    doc = json.loads(build_spec())
    operations = [op for item in doc["paths"].values() for op in item.values()]
    assert len(operations) == 5
    for op in operations:
        assert op["summary"] == "Autogenerated by Bridgr"
        assert op["responses"] == {"200": {"description": "Success"}}


def test_output_is_sorted_indented_json():
    _register_crud("/items", Item)
    _register_crud("/memos", Memo)
    text = build_spec()
    assert json.dumps(json.loads(text), indent=2, sort_keys=True) == text