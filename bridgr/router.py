"""A small path router that is also a WSGI application."""

from dataclasses import dataclass
from typing import Callable
from urllib.parse import parse_qs

from .messages import Request, Response


@dataclass
class Route:
    """A handler bound to an HTTP method and a path pattern."""

    method: str
    path: str
    handler: Callable


def match_route(pattern, path):
    """Match a path against a pattern with ``{name}`` segments; return (matched, params)."""
    pattern_parts = pattern.split("/")
    path_parts = path.split("/")
    if len(pattern_parts) != len(path_parts):
        return False, None
    params = {}
    for part, value in zip(pattern_parts, path_parts):
        if part.startswith("{") and part.endswith("}"):
            params[part[1:-1]] = value
        elif part != value:
            return False, None
    return True, params


class Router:
    """Dispatches requests to the first route matching both path and method."""

    def __init__(self):
        self.routes = []

    def add_route(self, method, path, handler):
        self.routes.append(Route(method, path, handler))

    def dispatch(self, request):
        """Run the matching handler, or answer 404."""
        for route in self.routes:
            matched, params = match_route(route.path, request.path)
            if matched and request.method == route.method:
                request.params = params
                return route.handler(request)
        return Response(
            status=404,
            headers={"Content-Type": "text/plain; charset=utf-8", "X-Content-Type-Options": "nosniff"},
            body=b"404 page not found\n",
        )

    def __call__(self, environ, start_response):
        try:
            length = int(environ.get("CONTENT_LENGTH") or 0)
        except ValueError:
            length = 0
        headers = {
            key[5:].replace("_", "-").title(): value
            for key, value in environ.items()
            if key.startswith("HTTP_")
        }
        if environ.get("CONTENT_TYPE"):
            headers["Content-Type"] = environ["CONTENT_TYPE"]
        request = Request(
            method=environ.get("REQUEST_METHOD", "GET"),
            path=environ.get("PATH_INFO") or "/",
            query=parse_qs(environ.get("QUERY_STRING", ""), keep_blank_values=True),
            headers=headers,
            body=environ["wsgi.input"].read(length) if length > 0 else b"",
        )
        response = self.dispatch(request)
        start_response(response.status_line(), list(response.headers.items()))
        return [response.body]