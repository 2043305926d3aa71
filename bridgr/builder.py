"""Build the OpenAPI document from the registered paths."""

import json

from .registry import get_paths
from .schema import _model_class, _model_fields, json_name, reflect_model


def extract_path_param(path):
    """Return the name inside the first ``{...}`` of a path, or an empty string."""
    start = -1
    for i, char in enumerate(path):
        if char == "{":
            start = i + 1
        elif char == "}" and start != -1:
            return path[start:i] if i > start else ""
    return ""


def _flag(model, name):
    method = getattr(_model_class(model), name, None)
    return method() if callable(method) else None


def filterable_field_names(model):
    """Names a list endpoint of the model may be filtered on.

    A model whose ``generic_filtering()`` returns true allows every field;
    otherwise ``filterable_fields()`` lists them, each of which must exist.
    """
    cls = _model_class(model)
    all_fields = list(dict.fromkeys(json_name(f) for f, _ in _model_fields(cls)))
    if _flag(cls, "generic_filtering") is True:
        return all_fields
    declared = _flag(cls, "filterable_fields")
    if declared is None:
        return []
    names = []
    for name in declared:
        if name not in all_fields:
            raise ValueError(
                f"FilterableFields error: field '{name}' does not exist "
                f"in struct {cls.__name__}"
            )
        names.append(name)
    return names


def field_type_by_json_tag(model, json_tag):
    """OpenAPI type of the field with the given JSON name; ``string`` by default."""
    types = {bool: "boolean", int: "integer", float: "number", str: "string"}
    for f, tp in _model_fields(model):
        if json_name(f) == json_tag and tp in types:
            return types[tp]
    return "string"


def build_spec():
    """Return the OpenAPI 3.0 document for every registered path, as JSON text."""
    paths = {}
    for info in get_paths():
        props = reflect_model(info.model)
        if info.method == "post":
            props.pop("id", None)
        if info.method == "put" and "id" in props:
            props["id"] = {"type": props["id"]["type"], "readOnly": True}

        path_item = paths.setdefault(info.path, {})

        parameters = []
        param_name = extract_path_param(info.path)
        if param_name:
            parameters.append(
                {
                    "name": param_name,
                    "in": "path",
                    "required": True,
                    "schema": {"type": "string"},
                }
            )
        if info.method == "get" and not param_name:
            parameters.extend(
                {
                    "name": name,
                    "in": "query",
                    "required": False,
                    "schema": {"type": field_type_by_json_tag(info.model, name)},
                }
                for name in filterable_field_names(info.model)
            )

        method_spec = {
            "summary": "Autogenerated by Bridgr",
            "responses": {"200": {"description": "Success"}},
        }
        if parameters:
            method_spec["parameters"] = parameters
        if info.method in ("post", "put"):
            method_spec["requestBody"] = {
                "content": {
                    "application/json": {
                        "schema": {"type": "object", "properties": props}
                    }
                }
            }
        path_item[info.method] = method_spec

    doc = {
        "openapi": "3.0.0",
        "info": {"title": "Bridgr API", "version": "1.0.0"},
        "paths": paths,
    }
    return json.dumps(doc, indent=2, sort_keys=True)