from __future__ import annotations

import pytest

from door_access.infrastructure.api_client import APIClient, TransportError
from door_access.infrastructure.repositories import UserRepository
from door_access.models.user import User


def _repository(config, opener) -> UserRepository:
    return UserRepository(APIClient(config, opener=opener))


def test_maps_payload_in_response_order(config, json_opener) -> None:
    payload = [
        {"id": 7, "name": "Grace", "email": "grace@example.com", "phone": "123", "address": {}},
        {"id": 3, "name": "Alan", "email": "alan@example.com", "avatar": "https://img/3"},
    ]

    usuarios = _repository(config, json_opener(payload)).obtener_usuarios()

    assert usuarios == [
        User(id=7, name="Grace", email="grace@example.com", avatar=""),
        User(id=3, name="Alan", email="alan@example.com", avatar="https://img/3"),
    ]


def test_duplicate_ids_are_not_deduplicated(config, json_opener) -> None:
    payload = [
        {"id": 1, "name": "A", "email": "a@x"},
        {"id": 1, "name": "B", "email": "b@x"},
    ]

    usuarios = _repository(config, json_opener(payload)).obtener_usuarios()

    assert [usuario.name for usuario in usuarios] == ["A", "B"]


@pytest.mark.parametrize(
    "entry",
    [
        {"name": "No id", "email": "x@x"},
        {"id": "5", "name": "String id", "email": "x@x"},
        {"id": True, "name": "Bool id", "email": "x@x"},
        {"id": 5, "email": "x@x"},
        {"id": 5, "name": "No email"},
    ],
)
def test_invalid_entries_raise_parse_error(config, json_opener, entry) -> None:
    with pytest.raises(TransportError):
        _repository(config, json_opener([entry])).obtener_usuarios()
