"""Shared pytest fixtures for exercising the request engine without a network."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from tunekit.client import CatalogClient
from tunekit.config.config import ClientConfig
from tunekit.platform.http import retry_policy
from tunekit.platform.http.executor import RequestExecutor

BASE_URL = "https://api.example.test/v1/"

ResponseFactory = Callable[..., requests.Response]


def _build_response(
    status: int,
    body: str | bytes = b"",
    headers: dict[str, str] | None = None,
    url: str = BASE_URL,
) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response._content = body.encode("utf-8") if isinstance(body, str) else body  # pyright: ignore[reportPrivateUsage]
    response.headers = CaseInsensitiveDict(headers or {})
    response.encoding = "utf-8"
    response.url = url
    return response


def _build_json_response(
    status: int,
    payload: Any,
    headers: dict[str, str] | None = None,
) -> requests.Response:
    merged = {"Content-Type": "application/json"}
    merged.update(headers or {})
    return _build_response(status, json.dumps(payload), merged)


class FakeTransport:
    """Replay queued responses and record every request sent."""

    def __init__(self, *outcomes: requests.Response | Exception) -> None:
        self.outcomes: list[requests.Response | Exception] = list(outcomes)
        self.sent: list[tuple[str, str, dict[str, str]]] = []
        self.closed: bool = False

    def send(self, request: requests.Request) -> requests.Response:
        self.sent.append((request.method, request.url, dict(request.headers)))
        if not self.outcomes:
            raise AssertionError(f"unexpected request: {request.method} {request.url}")
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def make_response() -> ResponseFactory:
    """Build a ``requests.Response`` with the given status, body and headers."""

    return _build_response


@pytest.fixture
def json_response() -> Callable[..., requests.Response]:
    """Build a JSON ``requests.Response``."""

    return _build_json_response


@pytest.fixture
def make_executor() -> Callable[..., tuple[RequestExecutor, FakeTransport]]:
    """Create an executor backed by a ``FakeTransport`` replaying ``outcomes``."""

    def _factory(
        *outcomes: requests.Response | Exception,
        **overrides: Any,
    ) -> tuple[RequestExecutor, FakeTransport]:
        transport = FakeTransport(*outcomes)
        config = ClientConfig(transport=transport, base_url=BASE_URL, **overrides)
        return RequestExecutor(config), transport

    return _factory


@pytest.fixture
def recorded_waits(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    """Replace the retry wait with an instant one and record requested delays."""

    waits: list[float] = []

    def _instant_wait(delay: float, cancel: Any = None) -> bool:
        waits.append(delay)
        return True

    monkeypatch.setattr(retry_policy, "wait_for_retry", _instant_wait)
    return waits


@pytest.fixture
def make_client() -> Callable[..., tuple[CatalogClient, FakeTransport]]:
    """Create a ``CatalogClient`` backed by a ``FakeTransport``."""

    def _factory(
        *outcomes: requests.Response | Exception,
        **overrides: Any,
    ) -> tuple[CatalogClient, FakeTransport]:
        transport = FakeTransport(*outcomes)
        config = ClientConfig(transport=transport, base_url=BASE_URL, **overrides)
        return CatalogClient(config=config), transport

    return _factory
