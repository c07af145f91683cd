"""
Summary: Fetch the page adjacent to a previously fetched page, overwriting it in place.
Why: Callers keep their page reference while walking a paginated result set.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from enum import Enum
from typing import TypeVar

from tunekit.platform.http.errors import NoMorePagesError, PageTargetError
from tunekit.platform.http.executor import JSONTarget, RequestExecutor
from tunekit.platform.logging import logger

PageT = TypeVar("PageT", bound=JSONTarget)


class PageDirection(str, Enum):
    """Which link of a page to follow."""

    NEXT = "next"
    PREVIOUS = "previous"


def advance(
    executor: RequestExecutor,
    page: JSONTarget | None,
    direction: PageDirection | str,
    *,
    cancel: threading.Event | None = None,
) -> None:
    """Replace the contents of ``page`` with the page in ``direction``.

    Pages are fetched one at a time; each request depends on a link taken
    from the previous response.

    Raises:
        PageTargetError: If ``page`` is ``None`` or not a page object.
        NoMorePagesError: If the link for ``direction`` is empty. No request
            is issued in that case.
    """

    if page is None or not isinstance(page, JSONTarget):
        raise PageTargetError("page must be a previously fetched Page or CursorPage")

    step = PageDirection(direction)
    url = getattr(page, step.value, "") or ""
    if not url:
        raise NoMorePagesError(f"no {step.value} page")

    logger.debug(
        "Fetching %s page",
        step.value,
        extra={"http_event": "http.page", "http_method": "GET", "http_url": url, "http_status": None},
    )
    executor.get(url, page, cancel=cancel)


def next_page(
    executor: RequestExecutor,
    page: JSONTarget | None,
    *,
    cancel: threading.Event | None = None,
) -> None:
    """Advance ``page`` forward in place."""

    advance(executor, page, PageDirection.NEXT, cancel=cancel)


def previous_page(
    executor: RequestExecutor,
    page: JSONTarget | None,
    *,
    cancel: threading.Event | None = None,
) -> None:
    """Move ``page`` backward in place."""

    advance(executor, page, PageDirection.PREVIOUS, cancel=cancel)


def iter_pages(
    executor: RequestExecutor,
    page: PageT,
    *,
    cancel: threading.Event | None = None,
) -> Iterator[PageT]:
    """Yield ``page`` and then the same object after each forward step."""

    yield page
    while True:
        try:
            next_page(executor, page, cancel=cancel)
        except NoMorePagesError:
            return
        yield page


__all__ = ["PageDirection", "advance", "iter_pages", "next_page", "previous_page"]
