"""Pruebas del cliente HTTP de usuarios."""

from __future__ import annotations

import socket
from urllib.error import URLError

import pytest

from door_access.infrastructure.api_client import APIClient, HttpStatusError, TransportError


def test_get_users_request_shape(config, json_opener, make_payload) -> None:
    opener = json_opener(make_payload(3))
    client = APIClient(config, opener=opener)

    usuarios = client.obtener_usuarios()

    assert [item["id"] for item in usuarios] == [1, 2, 3]
    (request,) = opener.requests
    assert request.full_url == "https://api.test/users"
    assert request.get_method() == "GET"
    assert request.data is None
    assert request.get_header("Accept") == "application/json"
    assert request.get_header("Authorization") is None
    assert opener.timeouts == [3.0]


def test_http_error_becomes_status_error(config, status_opener) -> None:
    client = APIClient(config, opener=status_opener(404))

    with pytest.raises(HttpStatusError) as excinfo:
        client.obtener_usuarios()

    assert excinfo.value.code == 404


def test_non_success_status_without_exception(config, json_opener) -> None:
    client = APIClient(config, opener=json_opener([], status=204))
    assert client.obtener_usuarios() == []

    client = APIClient(config, opener=json_opener({"detail": "moved"}, status=302))
    with pytest.raises(HttpStatusError) as excinfo:
        client.obtener_usuarios()
    assert excinfo.value.code == 302


@pytest.mark.parametrize(
    "exc",
    [
        URLError(ConnectionRefusedError(111, "Connection refused")),
        URLError(socket.timeout("timed out")),
        TimeoutError("read timed out"),
        ConnectionResetError(104, "reset"),
    ],
)
def test_transport_failures(config, failing_opener, exc) -> None:
    client = APIClient(config, opener=failing_opener(exc))

    with pytest.raises(TransportError):
        client.obtener_usuarios()


def test_malformed_json_is_transport_error(config, raw_opener) -> None:
    client = APIClient(config, opener=raw_opener(b"<html>nope</html>"))

    with pytest.raises(TransportError):
        client.obtener_usuarios()


def test_null_body_is_empty_list(config, raw_opener) -> None:
    client = APIClient(config, opener=raw_opener(b"null"))
    assert client.obtener_usuarios() == []


@pytest.mark.parametrize("body", [b'{"users": []}', b"[1, 2, 3]", b'"text"'])
def test_unexpected_shape_is_transport_error(config, raw_opener, body) -> None:
    client = APIClient(config, opener=raw_opener(body))

    with pytest.raises(TransportError):
        client.obtener_usuarios()
