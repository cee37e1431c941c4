from __future__ import annotations

from starlette.requests import Request

from http_toolkit.api.middleware import get_client_ip

from tests.unit.fakes.requests import make_request


def test_client_ip_from_connection():
    assert get_client_ip(make_request(b"")) == "127.0.0.1"


def test_client_ip_first_forwarded_entry():
    request = make_request(b"", headers={"X-Forwarded-For": "198.51.100.1,198.51.100.2"})

    assert get_client_ip(request) == "198.51.100.1"


def test_client_ip_unknown_peer():
    request = Request({"type": "http", "method": "GET", "path": "/", "headers": []})

    assert get_client_ip(request) == ""
