"""Where: src/tunekit/platform/http/executor.py
What: Single chokepoint issuing HTTP calls with retry, error decoding and JSON decoding.
Why: Endpoint wrappers share one success/failure contract instead of re-implementing it.
"""

from __future__ import annotations

import copy
import threading
from http import HTTPStatus
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable
from urllib.parse import urljoin, urlsplit

import requests

from tunekit.platform.logging import logger

from . import retry_policy
from .errors import (
    RequestCancelledError,
    ResponseDecodeError,
    TransportError,
    decode_error,
)

if TYPE_CHECKING:
    from tunekit.config.config import ClientConfig


@runtime_checkable
class JSONTarget(Protocol):
    """Objects that absorb a decoded JSON payload in place."""

    def apply_payload(self, payload: Any) -> None:
        ...


class RequestExecutor:
    """Issue requests for one client configuration.

    The executor keeps no per-request state; the configuration it reads is
    immutable, so one instance may serve concurrent calls.
    """

    def __init__(self, config: "ClientConfig") -> None:
        self._config = config

    @property
    def config(self) -> "ClientConfig":
        return self._config

    def resolve_url(self, url: str) -> str:
        """Return ``url`` unchanged when absolute, else join it to the base URL."""

        if urlsplit(url).scheme:
            return url
        return urljoin(self._config.base_url, url.lstrip("/"))

    def get(
        self,
        url: str,
        target: object | None = None,
        *,
        cancel: threading.Event | None = None,
    ) -> Any:
        """Issue a GET for ``url``; only 200 counts as success (204 still short-circuits)."""

        return self._run(requests.Request("GET", url), target, frozenset(), cancel, strict=True)

    def execute(
        self,
        request: requests.Request,
        target: object | None = None,
        *acceptable_status: int,
        cancel: threading.Event | None = None,
    ) -> Any:
        """Send ``request`` and decode the outcome.

        Args:
            request: Request to send. Relative URLs are resolved against the
                configured base URL on a copy; ``request`` itself is not modified.
            target: Optional ``dict``, ``list`` or ``JSONTarget`` receiving the
                decoded body in place.
            *acceptable_status: Extra status codes this call treats as success.
                Declaring 202 here turns off the transient-unavailable retry.
            cancel: Event that aborts a pending retry wait when set.

        Returns:
            Any: The decoded payload, or ``None`` when nothing was decoded.

        Raises:
            ServiceError: The service reported a failure.
            TransportError: The round trip failed.
            ResponseDecodeError: A successful body did not fit ``target``.
            RequestCancelledError: ``cancel`` fired before a retry.
        """
        return self._run(request, target, frozenset(acceptable_status), cancel, strict=False)

    def _run(
        self,
        original: requests.Request,
        target: object | None,
        accepted: frozenset[int],
        cancel: threading.Event | None,
        *,
        strict: bool,
    ) -> Any:
        _check_target(target)
        config = self._config
        request = copy.copy(original)
        request.url = self.resolve_url(original.url)
        request.headers = dict(original.headers or {})
        if config.accept_language:
            request.headers["Accept-Language"] = config.accept_language

        retries = 0
        while True:
            if cancel is not None and cancel.is_set():
                raise RequestCancelledError(f"{request.method} {request.url} cancelled")

            response = self._send(request)
            status = int(response.status_code)
            declared = status in accepted

            if config.auto_retry and not declared and retry_policy.should_retry(status):
                delay = retry_policy.retry_duration(response)
                if retries < config.max_retry_attempts and retry_policy.within_retry_budget(
                    delay, config.max_retry_duration
                ):
                    logger.warning(
                        "Service busy (status=%s). Retrying %s in %.1fs.",
                        status,
                        request.url,
                        delay,
                        extra=_event("http.retry", request, status=status),
                    )
                    if not retry_policy.wait_for_retry(delay, cancel):
                        logger.info(
                            "Retry of %s cancelled.",
                            request.url,
                            extra=_event("http.cancelled", request, status=status),
                        )
                        raise RequestCancelledError(
                            f"{request.method} {request.url} cancelled while waiting to retry"
                        )
                    retries += 1
                    continue

                logger.warning(
                    "Service busy (status=%s). Giving up on %s after %d retries.",
                    status,
                    request.url,
                    retries,
                    extra=_event("http.error", request, status=status),
                )
                raise decode_error(response)

            if status == HTTPStatus.NO_CONTENT:
                return None

            if not declared and not _is_success(status, strict=strict):
                error = decode_error(response)
                logger.debug(
                    "Service error (status=%s): %s",
                    status,
                    error.message,
                    extra=_event("http.error", request, status=status),
                )
                raise error

            if target is None:
                return None
            return _decode_into(response, target)

    def _send(self, request: requests.Request) -> requests.Response:
        logger.debug(
            "%s %s",
            request.method,
            request.url,
            extra=_event("http.request", request),
        )
        try:
            return self._config.transport.send(request)
        except requests.RequestException as exc:
            raise TransportError(f"{request.method} {request.url} failed: {exc}") from exc


def _is_success(status: int, *, strict: bool) -> bool:
    if strict:
        return status == HTTPStatus.OK
    return 200 <= status < 300


def _check_target(target: object | None) -> None:
    if target is None or isinstance(target, (dict, list, JSONTarget)):
        return
    raise TypeError(
        f"target must be a dict, a list or implement apply_payload(), got {type(target).__name__}"
    )


def _decode_into(response: requests.Response, target: object) -> Any:
    status = int(response.status_code)
    try:
        payload = response.json()
    except ValueError as exc:
        raise ResponseDecodeError(f"couldn't decode response body: {exc}", status=status) from exc

    if isinstance(target, dict):
        if not isinstance(payload, dict):
            raise ResponseDecodeError(
                f"expected a JSON object, got {type(payload).__name__}", status=status
            )
        target.clear()
        target.update(payload)
    elif isinstance(target, list):
        if not isinstance(payload, list):
            raise ResponseDecodeError(
                f"expected a JSON array, got {type(payload).__name__}", status=status
            )
        target[:] = payload
    else:
        try:
            target.apply_payload(payload)  # pyright: ignore[reportAttributeAccessIssue]
        except (KeyError, TypeError, ValueError) as exc:
            raise ResponseDecodeError(
                f"couldn't decode response into {type(target).__name__}: {exc}", status=status
            ) from exc
    return payload


def _event(name: str, request: requests.Request, *, status: int | None = None) -> dict[str, Any]:
    return {
        "http_event": name,
        "http_method": request.method,
        "http_url": request.url,
        "http_status": status,
    }


__all__ = ["JSONTarget", "RequestExecutor"]
