"""Request and response values passed to route handlers."""

import json
from dataclasses import dataclass, field
from http import HTTPStatus


@dataclass
class Request:
    """An incoming HTTP request, with the path parameters of the matched route."""

    method: str
    path: str
    query: dict = field(default_factory=dict)
    headers: dict = field(default_factory=dict)
    body: bytes = b""
    params: dict = field(default_factory=dict)

    def json(self):
        """Decode the body as JSON; raises ``ValueError`` if it is not valid JSON."""
        return json.loads(self.body)


@dataclass
class Response:
    """An outgoing HTTP response."""

    status: int = 200
    headers: dict = field(default_factory=dict)
    body: bytes = b""

    def status_line(self):
        """The status code with its reason phrase."""
        try:
            phrase = HTTPStatus(self.status).phrase
        except ValueError:
            phrase = "Unknown Status"
        return f"{self.status} {phrase}"