from __future__ import annotations

import logging

import pytest

from door_access.config import DEFAULT_API_BASE, DEFAULT_TIMEOUT, ApiConfig


def test_defaults_without_environment() -> None:
    config = ApiConfig.from_env({})

    assert config.base_url == DEFAULT_API_BASE
    assert config.users_url == "https://jsonplaceholder.typicode.com/users"
    assert config.timeout == DEFAULT_TIMEOUT
    assert config.log_level == "INFO"
    assert config.load_images is True


def test_environment_overrides() -> None:
    config = ApiConfig.from_env(
        {
            "DOOR_ACCESS_API_BASE": "http://localhost:8080/",
            "DOOR_ACCESS_TIMEOUT": "2.5",
            "DOOR_ACCESS_LOG_LEVEL": "debug",
            "DOOR_ACCESS_LOAD_IMAGES": "0",
        }
    )

    assert config.users_url == "http://localhost:8080/users"
    assert config.timeout == 2.5
    assert config.log_level == "DEBUG"
    assert config.load_images is False


def test_invalid_timeout_falls_back(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="door_access.config"):
        assert ApiConfig.from_env({"DOOR_ACCESS_TIMEOUT": "soon"}).timeout == DEFAULT_TIMEOUT
        assert ApiConfig.from_env({"DOOR_ACCESS_TIMEOUT": "-1"}).timeout == DEFAULT_TIMEOUT

    assert len(caplog.records) == 2


@pytest.mark.parametrize("raw", ["nan", "inf", "-inf", "1e400"])
def test_non_finite_timeout_falls_back(raw) -> None:
    assert ApiConfig.from_env({"DOOR_ACCESS_TIMEOUT": raw}).timeout == DEFAULT_TIMEOUT
