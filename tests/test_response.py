import json
from dataclasses import dataclass, field

import pytest

from bridgr.response import json_response


@dataclass
class Entry:
    ID: int = field(default=0, metadata={"json": "id"})
    Title: str = field(default="", metadata={"json": "title"})


def test_status_and_content_type():
    resp = json_response(201, {"ok": True})
    assert resp.status == 201
    assert resp.headers["Content-Type"] == "application/json"


def test_body_round_trip():
    data = {"error": "Not found", "items": [1, 2, 3]}
    resp = json_response(404, data)
    assert json.loads(resp.body) == data


def test_body_ends_with_newline():
    assert json_response(200, [1]).body.endswith(b"\n")


def test_none_encodes_as_null():
    assert json.loads(json_response(200, None).body) is None


def test_no_content_has_empty_body():
    resp = json_response(204, None)
    assert resp.status == 204
    assert resp.body == b""


def test_dataclass_uses_json_names():
    resp = json_response(200, [Entry(ID=7, Title="milk")])
    assert json.loads(resp.body) == [{"id": 7, "title": "milk"}]


def test_non_ascii_is_utf8():
    resp = json_response(200, {"title": "café"})
    assert json.loads(resp.body.decode("utf-8")) == {"title": "café"}


def test_unserialisable_raises():
    with pytest.raises(TypeError):
        json_response(200, {"value": object()})