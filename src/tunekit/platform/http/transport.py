"""Where: src/tunekit/platform/http/transport.py
What: HTTP transport capability used by the request executor.
Why: Authentication lives in the session handed to us, not in the core.
"""

from __future__ import annotations

from typing import Protocol

import requests

from tunekit.config.settings import DEFAULT_TIMEOUT_SECONDS


class Transport(Protocol):
    """Protocol for objects able to perform one HTTP round trip."""

    def send(self, request: requests.Request) -> requests.Response:
        ...


class SessionTransport:
    """Send requests through a ``requests.Session``.

    Any session subclass works, including OAuth2 sessions that sign each
    request before it leaves the process.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.session: requests.Session = session if session is not None else requests.Session()
        self.timeout: float = timeout

    def send(self, request: requests.Request) -> requests.Response:
        return self.session.request(
            request.method or "GET",
            request.url,
            params=request.params or None,
            data=request.data or None,
            json=request.json,
            headers=dict(request.headers) if request.headers else None,
            timeout=self.timeout,
        )

    def close(self) -> None:
        self.session.close()


__all__ = ["SessionTransport", "Transport"]
