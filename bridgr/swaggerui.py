"""Handler serving the interactive API documentation page."""

import json

from .messages import Response

_ASSETS = "https://unpkg.com/swagger-ui-dist"
_SPEC_URL = "/openapi.json"
_TITLE = "Bridgr Swagger"
_MOUNT_ID = "swagger-ui"


def _render_page():
    """Build the HTML document that boots Swagger UI against the spec URL."""
    config = json.dumps({"url": _SPEC_URL, "dom_id": "#" + _MOUNT_ID})
    head = (
        f"<title>{_TITLE}</title>"
        f'<link rel="stylesheet" href="{_ASSETS}/swagger-ui.css">'
    )
    body = (
        f'<div id="{_MOUNT_ID}"></div>'
        f'<script src="{_ASSETS}/swagger-ui-bundle.js"></script>'
        f"<script>SwaggerUIBundle({config});</script>"
    )
    document = f"<!DOCTYPE html>\n<html><head>{head}</head><body>{body}</body></html>\n"
    return document.encode("utf-8")


_PAGE = _render_page()


def swagger_ui_handler():
    """Return a handler that serves the Swagger UI page for ``/openapi.json``."""

    def handler(request):
        return Response(
            status=200,
            headers={"Content-Type": "text/html; charset=utf-8"},
            body=_PAGE,
        )

    return handler