"""Describe dataclass models as OpenAPI object properties."""

import dataclasses
import types
import typing

_UNIONS = (typing.Union, getattr(types, "UnionType", typing.Union))

_BUILTIN_NAMES = {
    "bool": bool,
    "int": int,
    "float": float,
    "str": str,
    "None": type(None),
    "NoneType": type(None),
}

_OPTIONAL_PREFIXES = ("typing.Optional[", "Optional[")


def _model_class(model):
    return model if isinstance(model, type) else type(model)


def _resolve_annotation(text):
    """Resolve a string annotation of a simple or optional scalar type.

    Anything that is not recognised is returned unchanged, which maps to the
    generic ``object`` type.
    """
    text = text.strip()
    for prefix in _OPTIONAL_PREFIXES:
        if text.startswith(prefix) and text.endswith("]"):
            return _resolve_annotation(text[len(prefix):-1])
    if "|" in text and "[" not in text:
        parts = [part.strip() for part in text.split("|")]
        concrete = [part for part in parts if part not in ("None", "NoneType")]
        if len(concrete) == 1:
            return _resolve_annotation(concrete[0])
        return text
    return _BUILTIN_NAMES.get(text, text)


def _unwrap_optional(tp):
    if isinstance(tp, str):
        tp = _resolve_annotation(tp)
    if typing.get_origin(tp) in _UNIONS:
        args = [a for a in typing.get_args(tp) if a is not type(None)]
        if len(args) == 1:
            return _unwrap_optional(args[0])
    return tp


def _model_fields(model):
    """Return (field, resolved type) pairs of a dataclass model or instance."""
    cls = _model_class(model)
    if not dataclasses.is_dataclass(cls):
        raise TypeError(f"{cls.__name__} is not a dataclass model")
    return [(f, _unwrap_optional(f.type)) for f in dataclasses.fields(cls)]


def json_name(field):
    """The JSON name of a dataclass field: its ``json`` metadata or its name."""
    return field.metadata.get("json", "") or field.name


def map_type(tp):
    """Map a Python type to an OpenAPI type name."""
    names = {bool: "boolean", int: "integer", float: "number", str: "string"}
    return names.get(_unwrap_optional(tp), "object")


def reflect_model(model):
    """Return the OpenAPI properties of a dataclass model, keyed by JSON name."""
    return {json_name(f): {"type": map_type(tp)} for f, tp in _model_fields(model)}