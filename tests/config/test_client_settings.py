"""Tests for TOML-backed client settings and the immutable client config."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from tunekit.config.config import ClientConfig, ClientSettings
from tunekit.config.paths import default_config_path, default_log_file
from tunekit.config.settings import DEFAULT_BASE_URL, DEFAULT_MAX_RETRY_ATTEMPTS
from tunekit.platform.http.transport import SessionTransport


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "tunekit.toml"
    _ = path.write_text(body, encoding="utf-8")
    return path


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    settings = ClientSettings.load(tmp_path / "absent.toml", env={})

    assert settings == ClientSettings()
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.auto_retry is False
    assert settings.max_retry_duration is None
    assert settings.max_retry_attempts == DEFAULT_MAX_RETRY_ATTEMPTS


def test_client_table_is_read(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        "\n".join(
            [
                "[client]",
                'base_url = "https://catalog.example.test/v2"',
                "auto_retry = true",
                "max_retry_duration = 30",
                "max_retry_attempts = 3",
                'accept_language = "de"',
                "timeout = 4.5",
            ]
        ),
    )

    settings = ClientSettings.load(path, env={})

    assert settings.base_url == "https://catalog.example.test/v2/"
    assert settings.auto_retry is True
    assert settings.max_retry_duration == 30.0
    assert settings.max_retry_attempts == 3
    assert settings.accept_language == "de"
    assert settings.timeout == 4.5


def test_environment_overrides_file(tmp_path: Path) -> None:
    path = _write_config(tmp_path, "[client]\nauto_retry = false\n")
    env = {
        "TUNEKIT_AUTO_RETRY": "yes",
        "TUNEKIT_MAX_RETRY_DURATION": "12.5",
        "TUNEKIT_ACCEPT_LANGUAGE": "fr",
        "TUNEKIT_BASE_URL": "http://localhost:8080/v1",
    }

    settings = ClientSettings.load(path, env=env)

    assert settings.auto_retry is True
    assert settings.max_retry_duration == 12.5
    assert settings.accept_language == "fr"
    assert settings.base_url == "http://localhost:8080/v1/"


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    path = _write_config(tmp_path, '[client]\ncolour = "blue"\n')

    assert ClientSettings.load(path, env={}) == ClientSettings()


@pytest.mark.parametrize(
    "body",
    [
        '[client]\nauto_retry = "maybe"\n',
        "[client]\nmax_retry_duration = -1\n",
        "[client]\nmax_retry_attempts = 1.5\n",
        '[client]\nbase_url = ""\n',
        'client = "flat"\n',
    ],
)
def test_invalid_values_raise(tmp_path: Path, body: str) -> None:
    path = _write_config(tmp_path, body)

    with pytest.raises(ValueError):
        _ = ClientSettings.load(path, env={})


def test_config_path_honours_environment(tmp_path: Path) -> None:
    target = tmp_path / "custom.toml"

    assert default_config_path({"TUNEKIT_CONFIG": str(target)}) == target.resolve()


def test_log_file_is_opt_in(tmp_path: Path) -> None:
    assert default_log_file({}) is None
    assert default_log_file({"TUNEKIT_LOG_FILE": str(tmp_path / "t.log")}) == (tmp_path / "t.log").resolve()


def test_client_config_from_settings() -> None:
    settings = ClientSettings(auto_retry=True, max_retry_duration=9, timeout=2.0)

    config = ClientConfig.from_settings(settings)

    assert config.auto_retry is True
    assert config.max_retry_duration == 9.0
    assert isinstance(config.transport, SessionTransport)
    assert config.transport.timeout == 2.0


def test_client_config_is_frozen() -> None:
    config = ClientConfig(base_url="https://api.example.test/v1")

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.auto_retry = True  # pyright: ignore[reportAttributeAccessIssue]

    assert config.base_url == "https://api.example.test/v1/"
    assert config.with_overrides(auto_retry=True).auto_retry is True
    assert config.auto_retry is False
