"""Serve a router over HTTP, with the API documentation routes."""

import logging
from wsgiref.simple_server import make_server

from .builder import build_spec
from .messages import Response
from .swaggerui import swagger_ui_handler

log = logging.getLogger(__name__)


def _openapi(request):
    try:
        text = build_spec()
    except Exception as exc:  # noqa: BLE001 - reported to the client
        return Response(status=500, body=str(exc).encode("utf-8"))
    return Response(status=200, headers={"Content-Type": "application/json"}, body=text.encode("utf-8"))


def add_docs_routes(router):
    """Add ``GET /openapi.json`` and ``GET /docs`` to the router."""
    router.add_route("GET", "/openapi.json", _openapi)
    router.add_route("GET", "/docs", swagger_ui_handler())


def start_server(router, port):
    """Add the documentation routes and serve the router forever on ``port``."""
    log.info("Bridgr API running on port %s...", port)
    add_docs_routes(router)
    with make_server("", int(port), router) as server:
        server.serve_forever()