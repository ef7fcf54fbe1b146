"""Fixtures compartidas: transporte HTTP falso y aplicación Qt sin pantalla."""

from __future__ import annotations

import io
import json
import os
from typing import Any, Callable, List
from urllib.error import HTTPError

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from door_access.config import ApiConfig  # noqa: E402
from door_access.infrastructure.api_client import APIClient  # noqa: E402
from door_access.infrastructure.repositories import UserRepository  # noqa: E402
from door_access.core.services import UserService  # noqa: E402


class FakeResponse(io.BytesIO):
    def __init__(self, body: bytes, status: int = 200) -> None:
        super().__init__(body)
        self.status = status


class FakeOpener:
    """Sustituye a ``urlopen`` registrando las peticiones recibidas."""

    def __init__(self, action: Callable[[Any], Any]) -> None:
        self._action = action
        self.requests: List[Any] = []
        self.timeouts: List[float] = []

    def __call__(self, request, timeout=None):
        self.requests.append(request)
        self.timeouts.append(timeout)
        return self._action(request)


def _sample_payload(count: int) -> list[dict]:
    return [
        {
            "id": index,
            "name": f"User {index}",
            "username": f"user{index}",
            "email": f"user{index}@example.com",
        }
        for index in range(1, count + 1)
    ]


@pytest.fixture
def make_payload() -> Callable[[int], list[dict]]:
    return _sample_payload


@pytest.fixture
def json_opener() -> Callable[[Any], FakeOpener]:
    def _factory(payload: Any, status: int = 200) -> FakeOpener:
        body = json.dumps(payload).encode("utf-8")
        return FakeOpener(lambda request: FakeResponse(body, status))

    return _factory


@pytest.fixture
def raw_opener() -> Callable[[bytes], FakeOpener]:
    def _factory(body: bytes) -> FakeOpener:
        return FakeOpener(lambda request: FakeResponse(body))

    return _factory


@pytest.fixture
def status_opener() -> Callable[[int], FakeOpener]:
    def _factory(code: int) -> FakeOpener:
        def _raise(request):
            raise HTTPError(request.full_url, code, "error", hdrs=None, fp=None)

        return FakeOpener(_raise)

    return _factory


@pytest.fixture
def failing_opener() -> Callable[[BaseException], FakeOpener]:
    def _factory(exc: BaseException) -> FakeOpener:
        def _raise(request):
            raise exc

        return FakeOpener(_raise)

    return _factory


@pytest.fixture
def config() -> ApiConfig:
    return ApiConfig(base_url="https://api.test/", timeout=3.0)


@pytest.fixture
def service_for(config: ApiConfig) -> Callable[[FakeOpener], UserService]:
    def _factory(opener: FakeOpener) -> UserService:
        return UserService(UserRepository(APIClient(config, opener=opener)))

    return _factory


@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
