"""Where: src/tunekit/client.py
What: Client facade owning one immutable configuration and its request executor.
Why: Endpoint wrappers receive an explicit client instead of a process-wide default.

The facade delegates to focused collaborators:
- ``platform.http.executor`` issues requests with retry and error decoding
- ``features.paging`` walks offset and cursor pages in place
- ``shared.request_options`` builds query strings
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any, TypeVar

import requests

from tunekit.config.config import ClientConfig, ClientSettings
from tunekit.features.paging import walker
from tunekit.platform.http.executor import JSONTarget, RequestExecutor
from tunekit.platform.http.transport import SessionTransport, Transport
from tunekit.shared.request_options import RequestOption, with_query

PageT = TypeVar("PageT", bound=JSONTarget)


class CatalogClient:
    """Entry point for calls against the music-catalog service.

    Pass a signing ``requests.Session`` (for example an OAuth2 session) to
    authenticate; the client itself never acquires tokens.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        config: ClientConfig | None = None,
        **overrides: Any,
    ) -> None:
        if config is None:
            config = ClientConfig(transport=SessionTransport(session))
        elif session is not None:
            overrides["transport"] = SessionTransport(session)
        if overrides:
            config = config.with_overrides(**overrides)
        self.config: ClientConfig = config
        self.executor: RequestExecutor = RequestExecutor(config)

    @classmethod
    def from_settings(
        cls,
        path: Path | None = None,
        *,
        transport: Transport | None = None,
    ) -> "CatalogClient":
        """Create a client from ``tunekit.toml`` and environment overrides."""

        settings = ClientSettings.load(path)
        return cls(config=ClientConfig.from_settings(settings, transport))

    def url_for(self, path: str, *options: RequestOption) -> str:
        """Resolve ``path`` against the base URL and append query options."""

        return with_query(self.executor.resolve_url(path), options)

    def execute(
        self,
        request: requests.Request,
        target: object | None = None,
        *acceptable_status: int,
        cancel: threading.Event | None = None,
    ) -> Any:
        return self.executor.execute(request, target, *acceptable_status, cancel=cancel)

    def get(
        self,
        url: str,
        target: object | None = None,
        *,
        cancel: threading.Event | None = None,
    ) -> Any:
        return self.executor.get(url, target, cancel=cancel)

    def next_page(self, page: JSONTarget | None, *, cancel: threading.Event | None = None) -> None:
        """Overwrite ``page`` with the following page.

        Raises ``NoMorePagesError`` at the end of the result set.
        """

        walker.next_page(self.executor, page, cancel=cancel)

    def previous_page(
        self,
        page: JSONTarget | None,
        *,
        cancel: threading.Event | None = None,
    ) -> None:
        walker.previous_page(self.executor, page, cancel=cancel)

    def iter_pages(
        self,
        page: PageT,
        *,
        cancel: threading.Event | None = None,
    ) -> Iterator[PageT]:
        return walker.iter_pages(self.executor, page, cancel=cancel)

    def close(self) -> None:
        close = getattr(self.config.transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "CatalogClient":
        return self

    def __exit__(self, *_exc_info: object) -> None:
        self.close()


def collect_items(pages: Iterable[Any]) -> list[Any]:
    """Copy the items of every page yielded by ``pages`` into one list."""

    collected: list[Any] = []
    for page in pages:
        collected.extend(page.items)
    return collected


__all__ = ["CatalogClient", "collect_items"]
