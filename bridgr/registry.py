"""Registry of API paths used to build the OpenAPI document."""

import threading
from dataclasses import dataclass
from typing import Any

_routes = {}
_lock = threading.Lock()


@dataclass
class PathInfo:
    """One documented operation: an HTTP method on a path for a model."""

    method: str
    path: str
    model: Any


def register_path(method, path, model):
    """Record an operation; a later registration of the same method and path wins."""
    with _lock:
        _routes[f"{method} {path}"] = PathInfo(method=method, path=path, model=model)


def get_paths():
    """Return every registered operation."""
    with _lock:
        return list(_routes.values())


def clear_paths():
    """Forget every registered operation."""
    with _lock:
        _routes.clear()