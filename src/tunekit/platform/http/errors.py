"""Where: src/tunekit/platform/http/errors.py
What: Error taxonomy for the request engine and the decoder for failed responses.
Why: Every failure reaches callers as one of a few typed exceptions.
"""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from http import HTTPStatus
from typing import Any, Final

import requests

from tunekit.config.settings import ERROR_BODY_PREVIEW_LIMIT

from .retry_policy import parse_retry_after

MISSING_BODY_MESSAGE: Final[str] = "server response without body"
MISSING_DESCRIPTION_MESSAGE: Final[str] = "server response without error description"


class TunekitError(Exception):
    """Base class for every error raised by tunekit."""


class TransportError(TunekitError):
    """The HTTP round trip itself failed (DNS, connection, TLS, timeout)."""


class ResponseDecodeError(TunekitError):
    """A successful response body could not be decoded into the requested target."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status: int | None = status


class RequestCancelledError(TunekitError):
    """The caller's cancel signal fired before the request could be re-issued."""


class NoMorePagesError(TunekitError):
    """The requested direction has no further page."""

    def __init__(self, message: str = "no more pages") -> None:
        super().__init__(message)


class PageTargetError(TunekitError, TypeError):
    """A pagination call received something other than a fetched page."""


class ServiceError(TunekitError):
    """An error reported by the remote service.

    Instances are immutable; ``status`` always carries the HTTP status code of
    the response the error was decoded from.
    """

    message: str
    status: int
    retry_after: datetime | None

    def __init__(self, message: str, status: int, retry_after: datetime | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.retry_after = retry_after
        self._sealed = True

    def __setattr__(self, name: str, value: Any) -> None:
        # Exception bookkeeping (__notes__, __cause__, ...) stays writable.
        if getattr(self, "_sealed", False) and not name.startswith("__"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if not name.startswith("__"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__delattr__(name)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.message, self.status, self.retry_after))

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"ServiceError(status={self.status}, message={self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ServiceError):
            return NotImplemented
        return (self.message, self.status, self.retry_after) == (
            other.message,
            other.status,
            other.retry_after,
        )

    def __hash__(self) -> int:
        return hash((self.message, self.status, self.retry_after))


def reason_phrase(status: int) -> str:
    """Return the standard reason phrase for ``status``."""

    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return f"HTTP {status}"


def decode_error(response: requests.Response, *, now: datetime | None = None) -> ServiceError:
    """Turn a failed response into a ``ServiceError``.

    Never raises: malformed bodies become diagnostic messages.

    Args:
        response: Response whose status was not accepted as success.
        now: Reference time for ``retry_after``; current UTC time when omitted.

    Returns:
        ServiceError: Error stamped with the response's actual status code.
    """
    status = int(response.status_code)
    body = response.text or ""
    content_type = response.headers.get("Content-Type")

    if not content_type:
        message = body if body else reason_phrase(status)
    elif not body:
        message = MISSING_BODY_MESSAGE
    else:
        message = _message_from_envelope(body, len(response.content or b""))

    if not message:
        message = MISSING_DESCRIPTION_MESSAGE

    retry_after: datetime | None = None
    seconds = parse_retry_after(response.headers.get("Retry-After"))
    if seconds is not None:
        reference = now if now is not None else datetime.now(timezone.utc)
        try:
            retry_after = reference + timedelta(seconds=seconds)
        except OverflowError:
            # Past datetime.max; keep the error without a retry time.
            retry_after = None

    return ServiceError(message, status, retry_after)


def _message_from_envelope(body: str, size: int) -> str:
    try:
        document = json.loads(body)
        envelope = document["error"]
        message = envelope.get("message", "")
    except (ValueError, KeyError, TypeError, AttributeError):
        return f"couldn't decode error: ({size} bytes) {_preview(body)}"

    if message is None:
        return ""
    return str(message)


def _preview(body: str) -> str:
    if len(body) <= ERROR_BODY_PREVIEW_LIMIT:
        return body
    return body[:ERROR_BODY_PREVIEW_LIMIT] + "…"


__all__ = [
    "MISSING_BODY_MESSAGE",
    "MISSING_DESCRIPTION_MESSAGE",
    "NoMorePagesError",
    "PageTargetError",
    "RequestCancelledError",
    "ResponseDecodeError",
    "ServiceError",
    "TransportError",
    "TunekitError",
    "decode_error",
    "reason_phrase",
]
