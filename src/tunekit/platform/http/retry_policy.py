"""Where: src/tunekit/platform/http/retry_policy.py
What: Rules deciding whether a response is retried and how long to wait first.
Why: Keep rate-limit etiquette separate from request execution.
"""

from __future__ import annotations

import threading
from http import HTTPStatus
from typing import Final

import requests

from tunekit.config.settings import DEFAULT_RETRY_AFTER_SECONDS

# 202 is the service's "temporarily unavailable, try again" marker.
RETRYABLE_STATUSES: Final[frozenset[int]] = frozenset(
    {HTTPStatus.ACCEPTED, HTTPStatus.TOO_MANY_REQUESTS}
)


def should_retry(status: int) -> bool:
    """Return True when ``status`` signals a transient condition."""

    return status in RETRYABLE_STATUSES


def parse_retry_after(value: str | None) -> int | None:
    """Parse a ``Retry-After`` header holding a whole number of seconds."""

    if value is None:
        return None
    stripped = value.strip()
    if not (stripped.isascii() and stripped.isdigit()):
        return None
    return int(stripped)


def retry_duration(response: requests.Response) -> float:
    """Return the wait in seconds before re-issuing the request."""

    seconds = parse_retry_after(response.headers.get("Retry-After"))
    if seconds is None:
        return DEFAULT_RETRY_AFTER_SECONDS
    return float(seconds)


def within_retry_budget(delay: float, max_retry_duration: float | None) -> bool:
    """Return True if ``delay`` does not exceed the configured ceiling.

    Delays longer than ``threading.TIMEOUT_MAX`` cannot be waited on and are
    always over budget.
    """

    if delay > threading.TIMEOUT_MAX:
        return False
    return max_retry_duration is None or delay <= max_retry_duration


def wait_for_retry(delay: float, cancel: threading.Event | None = None) -> bool:
    """Block for ``delay`` seconds unless ``cancel`` fires first.

    Returns:
        bool: ``True`` when the full delay elapsed, ``False`` when cancelled.
    """

    signal = cancel if cancel is not None else threading.Event()
    return not signal.wait(timeout=max(0.0, delay))


__all__ = [
    "RETRYABLE_STATUSES",
    "parse_retry_after",
    "retry_duration",
    "should_retry",
    "wait_for_retry",
    "within_retry_budget",
]
