"""Where: src/tunekit/config/settings.py
What: Validated runtime defaults shared by the HTTP core and configuration loader.
Why: Keep protocol constants in one place without file I/O.
"""

from __future__ import annotations

from typing import Final

# Remote service -------------------------------------------------------------

DEFAULT_BASE_URL: Final[str] = "https://api.spotify.com/v1/"

# Seconds to wait before retrying when the service omits ``Retry-After``.
DEFAULT_RETRY_AFTER_SECONDS: Final[float] = 5.0

# Upper bound on retries for a single call, regardless of the advertised waits.
DEFAULT_MAX_RETRY_ATTEMPTS: Final[int] = 10

# Timeout applied to every request: (connect, read).
DEFAULT_TIMEOUT_SECONDS: Final[float] = 15.0

# Error bodies embedded into diagnostics are truncated to this many characters.
ERROR_BODY_PREVIEW_LIMIT: Final[int] = 256


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_MAX_RETRY_ATTEMPTS",
    "DEFAULT_RETRY_AFTER_SECONDS",
    "DEFAULT_TIMEOUT_SECONDS",
    "ERROR_BODY_PREVIEW_LIMIT",
]
