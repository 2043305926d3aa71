import pytest

from bridgr.messages import Request, Response


def test_request_json_round_trip():
    req = Request("POST", "/items", body=b'{"name": "pen", "count": 3}')
    assert req.json() == {"name": "pen", "count": 3}


def test_request_invalid_json_raises():
    req = Request("POST", "/items", body=b"{not json")
    with pytest.raises(ValueError):
        req.json()


def test_request_empty_body_raises():
    with pytest.raises(ValueError):
        Request("PUT", "/items/1").json()


def test_request_defaults_are_independent():
    first = Request("GET", "/a")
    first.params["id"] = "1"
    assert Request("GET", "/a").params == {}


def test_status_line_ok():
    assert Response(200).status_line() == "200 OK"


def test_status_line_not_found():
    assert Response(404).status_line() == "404 Not Found"


def test_status_line_unknown_code_keeps_number():
    assert Response(599).status_line().startswith("599 ")