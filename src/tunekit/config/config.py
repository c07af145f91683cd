"""Configuration management for tunekit clients."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Final

from tunekit.config.paths import default_config_path
from tunekit.config.settings import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_RETRY_ATTEMPTS,
    DEFAULT_TIMEOUT_SECONDS,
)
from tunekit.platform.http.transport import SessionTransport, Transport
from tunekit.platform.logging import logger

_CLIENT_TABLE: Final[str] = "client"

# Environment variables override values read from the TOML file.
_ENV_OVERRIDES: Final[dict[str, str]] = {
    "TUNEKIT_BASE_URL": "base_url",
    "TUNEKIT_AUTO_RETRY": "auto_retry",
    "TUNEKIT_MAX_RETRY_DURATION": "max_retry_duration",
    "TUNEKIT_ACCEPT_LANGUAGE": "accept_language",
}

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


@dataclass(slots=True)
class ClientSettings:
    """User-editable client settings, as persisted in ``tunekit.toml``."""

    base_url: str = DEFAULT_BASE_URL
    auto_retry: bool = False
    # Seconds; ``None`` means any advertised wait is honoured.
    max_retry_duration: float | None = None
    max_retry_attempts: int = DEFAULT_MAX_RETRY_ATTEMPTS
    accept_language: str | None = None
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        self.base_url = _normalize_base_url(self.base_url)
        self.auto_retry = _coerce_bool("auto_retry", self.auto_retry)
        if self.max_retry_duration is not None:
            self.max_retry_duration = _coerce_seconds("max_retry_duration", self.max_retry_duration)
        self.max_retry_attempts = _coerce_attempts(self.max_retry_attempts)
        self.timeout = _coerce_seconds("timeout", self.timeout)
        if self.accept_language is not None:
            self.accept_language = str(self.accept_language).strip() or None

    @classmethod
    def load(
        cls,
        path: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> "ClientSettings":
        """Load settings from the ``[client]`` table and apply environment overrides.

        Args:
            path: Explicit TOML file. Defaults to ``default_config_path``.
            env: Environment mapping, ``os.environ`` when omitted.

        Returns:
            ClientSettings: Validated settings; defaults when the file is absent.

        Raises:
            ValueError: If a value cannot be interpreted for its key.
        """
        mapping = env if env is not None else os.environ
        config_file = path if path is not None else default_config_path(mapping)

        values: dict[str, Any] = {}
        if config_file.exists():
            with open(config_file, "rb") as f:
                document = tomllib.load(f)
            table = document.get(_CLIENT_TABLE, {})
            if not isinstance(table, dict):
                raise ValueError(f"[{_CLIENT_TABLE}] in {config_file} must be a table")
            known = set(cls.__dataclass_fields__)
            for key, value in table.items():
                if key not in known:
                    logger.warning("Ignoring unknown client setting '%s' in %s", key, config_file)
                    continue
                values[key] = value
            logger.debug("Client settings loaded from %s", config_file)

        for env_var, key in _ENV_OVERRIDES.items():
            raw = (mapping.get(env_var) or "").strip()
            if raw:
                values[key] = raw

        return cls(**values)


@dataclass(slots=True, frozen=True)
class ClientConfig:
    """Immutable per-client configuration shared by every call the client makes."""

    transport: Transport = field(default_factory=SessionTransport)
    base_url: str = DEFAULT_BASE_URL
    auto_retry: bool = False
    max_retry_duration: float | None = None
    accept_language: str | None = None
    max_retry_attempts: int = DEFAULT_MAX_RETRY_ATTEMPTS

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", _normalize_base_url(self.base_url))
        object.__setattr__(self, "max_retry_attempts", _coerce_attempts(self.max_retry_attempts))
        if self.max_retry_duration is not None:
            object.__setattr__(
                self,
                "max_retry_duration",
                _coerce_seconds("max_retry_duration", self.max_retry_duration),
            )

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        transport: Transport | None = None,
    ) -> "ClientConfig":
        """Build a config from persisted settings and an optional signing transport."""

        resolved = transport if transport is not None else SessionTransport(timeout=settings.timeout)
        return cls(
            transport=resolved,
            base_url=settings.base_url,
            auto_retry=settings.auto_retry,
            max_retry_duration=settings.max_retry_duration,
            accept_language=settings.accept_language,
            max_retry_attempts=settings.max_retry_attempts,
        )

    def with_overrides(self, **changes: Any) -> "ClientConfig":
        """Return a copy with selected fields replaced."""

        return replace(self, **changes)


def _normalize_base_url(value: object) -> str:
    text = str(value).strip()
    if not text:
        raise ValueError("base_url must not be empty")
    return text if text.endswith("/") else f"{text}/"


def _coerce_bool(key: str, value: object) -> bool:
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"{key} must be a boolean, got {value!r}")


def _coerce_seconds(key: str, value: object) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be a number of seconds, got {value!r}")
    try:
        seconds = float(value)  # pyright: ignore[reportArgumentType]
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{key} must be a number of seconds, got {value!r}") from exc
    if seconds < 0:
        raise ValueError(f"{key} must not be negative, got {value!r}")
    return seconds


def _coerce_attempts(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"max_retry_attempts must be a non-negative integer, got {value!r}")
    return value


__all__ = ["ClientConfig", "ClientSettings"]
