"""Register CRUD routes for a model."""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol

from .errors import InvalidFilterFieldError
from .orm import SqlModel
from .registry import register_path
from .response import json_response
from .schema import _model_class, _model_fields, json_name


class BridgrModel(Protocol):
    """Storage behind the CRUD routes."""

    def list(self, filters): ...

    def get(self, id): ...

    def create(self, input): ...

    def update(self, id, input): ...

    def delete(self, id): ...


@dataclass
class BridgrOptions:
    """Middlewares wrap every handler; ``validate`` raises to reject input;
    ``auth`` returns false to refuse a request."""

    middlewares: List[Callable] = field(default_factory=list)
    validate: Optional[Callable] = None
    auth: Optional[Callable] = None


def _type_ok(tp, value):
    if tp is bool:
        return isinstance(value, bool)
    if tp is int:
        return isinstance(value, int) and not isinstance(value, bool)
    if tp is float:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if tp is str:
        return isinstance(value, str)
    return True


def _decode(model, request):
    data = request.json()
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    kwargs = {}
    for f, tp in _model_fields(model):
        value = data.get(json_name(f))
        if value is None:
            continue
        if not _type_ok(tp, value):
            raise ValueError(f"bad value for {json_name(f)}")
        kwargs[f.name] = value
    return model(**kwargs)


def _error(status, message):
    return json_response(status, {"error": message})


def register_crud_routes(router, path, model, store, opts=None):
    """Add list, create, get, update and delete routes under ``/path``."""
    opts = opts or BridgrOptions()
    model = _model_class(model)
    base = "/" + path
    item = base + "/{id}"

    for method, route in (
        ("get", base), ("post", base), ("get", item), ("put", item), ("delete", item)
    ):
        register_path(method, route, model)

    def guarded(handler):
        def run(request):
            if opts.auth is not None and not opts.auth(request):
                return _error(403, "Unauthorized")
            return handler(request)

        for middleware in reversed(opts.middlewares):
            run = middleware(run)
        return run

    def read_input(request):
        try:
            value = _decode(model, request)
        except (ValueError, TypeError):
            return None, _error(400, "Invalid input")
        if opts.validate is not None:
            try:
                opts.validate(value)
            except Exception as exc:  # noqa: BLE001 - reported to the client
                return None, _error(422, str(exc))
        return value, None

    def list_items(request):
        try:
            items = store.list(request.query)
        except InvalidFilterFieldError as exc:
            return _error(400, str(exc))
        except Exception as exc:  # noqa: BLE001
            return _error(500, str(exc))
        return json_response(200, items)

    def create_item(request):
        value, failure = read_input(request)
        if failure:
            return failure
        try:
            return json_response(201, store.create(value))
        except Exception as exc:  # noqa: BLE001
            return _error(500, str(exc))

    def get_item(request):
        try:
            return json_response(200, store.get(request.params["id"]))
        except Exception:  # noqa: BLE001
            return _error(404, "Not found")

    def update_item(request):
        value, failure = read_input(request)
        if failure:
            return failure
        try:
            return json_response(200, store.update(request.params["id"], value))
        except Exception as exc:  # noqa: BLE001
            return _error(500, str(exc))

    def delete_item(request):
        try:
            store.delete(request.params["id"])
        except Exception as exc:  # noqa: BLE001
            return _error(500, str(exc))
        return json_response(204, None)

    router.add_route("GET", base, guarded(list_items))
    router.add_route("POST", base, guarded(create_item))
    router.add_route("GET", item, guarded(get_item))
    router.add_route("PUT", item, guarded(update_item))
    router.add_route("DELETE", item, guarded(delete_item))


def register_crud(router, path, engine, model, opts=None):
    """Add CRUD routes for a model stored in SQL tables through ``engine``."""
    register_crud_routes(router, path, model, SqlModel(engine, model), opts)