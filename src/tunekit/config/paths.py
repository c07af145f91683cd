"""Shared path utilities for configuration and log locations.

Policy (portable by default):
- Config: repository-root ``<repo_root>/config/tunekit.toml`` unless
  overridden by ``TUNEKIT_CONFIG``.
- Logs: no log file unless ``TUNEKIT_LOG_FILE`` names one.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final


ENV_CONFIG_PATH: Final[str] = "TUNEKIT_CONFIG"
ENV_LOG_FILE: Final[str] = "TUNEKIT_LOG_FILE"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = (mapping.get(env_var) or "").strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    return default_factory().expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up parents.

    Looks for markers like ``pyproject.toml`` or ``.git``.

    Args:
        start: Starting path. Defaults to this file's directory.

    Returns:
        Path: Detected repository root, or the current working directory
        if no marker is found.
    """
    here = (start or Path(__file__).resolve()).parent
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return Path.cwd()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the client TOML config file."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=ENV_CONFIG_PATH,
        default_factory=lambda: _detect_repo_root() / "config" / "tunekit.toml",
    )


def default_log_file(env: Mapping[str, str] | None = None) -> Path | None:
    """Return the log file requested through the environment, if any."""

    mapping = env if env is not None else os.environ
    candidate = (mapping.get(ENV_LOG_FILE) or "").strip()
    if not candidate:
        return None
    return Path(candidate).expanduser().resolve()


__all__ = [
    "ENV_CONFIG_PATH",
    "ENV_LOG_FILE",
    "default_config_path",
    "default_log_file",
    "resolve_overridable_path",
]
