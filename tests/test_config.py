"""Settings - tests for environment driven configuration."""

import dataclasses

import pytest

from promise_queue.core.config import QueueConfig, Settings


def test_defaults(monkeypatch):
    for name in (
        "QUEUE_ID_PREFIX",
        "QUEUE_ID_LENGTH",
        "TOKEN_SERVICE_NAME",
        "TOKEN_REFRESH_URL",
        "TOKEN_REFRESH_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.queue.id_prefix == "promise-"
    assert settings.queue.id_length == 6
    assert settings.token.service_name == "tao"
    assert settings.token.refresh_token_url == ""
    assert settings.token.refresh_timeout == 3.0


def test_values_come_from_environment(monkeypatch):
    monkeypatch.setenv("QUEUE_ID_PREFIX", "entry-")
    monkeypatch.setenv("QUEUE_ID_LENGTH", "10")
    monkeypatch.setenv("TOKEN_SERVICE_NAME", "lti")
    monkeypatch.setenv("TOKEN_REFRESH_URL", "https://auth.example.test/token")
    monkeypatch.setenv("TOKEN_REFRESH_TIMEOUT", "1.5")

    settings = Settings()

    assert settings.queue.id_prefix == "entry-"
    assert settings.queue.id_length == 10
    assert settings.token.service_name == "lti"
    assert settings.token.refresh_token_url == "https://auth.example.test/token"
    assert settings.token.refresh_timeout == 1.5


def test_config_groups_are_immutable():
    config = QueueConfig()

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.id_length = 3


def test_version_matches_package_version():
    import promise_queue

    assert Settings().version == promise_queue.__version__
