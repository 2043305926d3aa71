"""JSON responses."""

import dataclasses
import json

from .messages import Response
from .schema import json_name


def _encode(obj):
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {json_name(f): getattr(obj, f.name) for f in dataclasses.fields(obj)}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def json_response(status, data):
    """Build a response carrying ``data`` as JSON, followed by a newline."""
    body = b""
    if not (100 <= status < 200 or status in (204, 304)):
        body = (json.dumps(data, default=_encode, ensure_ascii=False) + "\n").encode("utf-8")
    return Response(status=status, headers={"Content-Type": "application/json"}, body=body)