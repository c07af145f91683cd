"""
Summary: Offset-based and cursor-based paging objects decoded from service responses.
Why: Pages are rewritten in place when the walker fetches an adjacent page.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, cast

T = TypeVar("T")

ItemFactory = Callable[[Any], T]


@dataclass(slots=True)
class Page(Generic[T]):
    """A batch of results plus links to the adjacent batches.

    ``next`` and ``previous`` are absolute URLs, or empty strings when there
    is no page in that direction. ``total`` always reflects the most recently
    fetched page.
    """

    endpoint: str = ""
    limit: int = 0
    offset: int = 0
    total: int = 0
    next: str = ""
    previous: str = ""
    items: list[T] = field(default_factory=list)
    item_factory: ItemFactory[T] | None = field(default=None, repr=False, compare=False)

    @classmethod
    def from_payload(
        cls,
        payload: Any,
        item_factory: ItemFactory[T] | None = None,
    ) -> "Page[T]":
        """Build a page from a decoded page envelope."""

        page: Page[T] = cls(item_factory=item_factory)
        page.apply_payload(payload)
        return page

    def apply_payload(self, payload: Any) -> None:
        """Overwrite every field from ``payload``; absent keys reset to defaults.

        Raises:
            TypeError: If the envelope or one of its fields has the wrong type.
            ValueError: If ``item_factory`` rejects an item.
        """

        data = _require_mapping(payload, "page")
        endpoint = _text(data, "href")
        limit = _integer(data, "limit")
        offset = _integer(data, "offset")
        total = _integer(data, "total")
        next_url = _text(data, "next")
        previous_url = _text(data, "previous")
        items = _items(data, self.item_factory)

        self.endpoint = endpoint
        self.limit = limit
        self.offset = offset
        self.total = total
        self.next = next_url
        self.previous = previous_url
        self.items = items


@dataclass(slots=True)
class CursorPage(Generic[T]):
    """A forward-only batch of results addressed by an opaque cursor.

    Cursor pages do not support random access and carry no previous link.
    """

    endpoint: str = ""
    limit: int = 0
    total: int = 0
    next: str = ""
    cursor_after: str = ""
    items: list[T] = field(default_factory=list)
    item_factory: ItemFactory[T] | None = field(default=None, repr=False, compare=False)

    @classmethod
    def from_payload(
        cls,
        payload: Any,
        item_factory: ItemFactory[T] | None = None,
    ) -> "CursorPage[T]":
        page: CursorPage[T] = cls(item_factory=item_factory)
        page.apply_payload(payload)
        return page

    def apply_payload(self, payload: Any) -> None:
        data = _require_mapping(payload, "cursor page")
        endpoint = _text(data, "href")
        limit = _integer(data, "limit")
        total = _integer(data, "total")
        next_url = _text(data, "next")
        cursors = data.get("cursors")
        cursor_after = (
            _text(_require_mapping(cursors, "cursors"), "after") if cursors is not None else ""
        )
        items = _items(data, self.item_factory)

        self.endpoint = endpoint
        self.limit = limit
        self.total = total
        self.next = next_url
        self.cursor_after = cursor_after
        self.items = items


def _require_mapping(value: Any, label: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise TypeError(f"{label} must be a JSON object, got {type(value).__name__}")
    return cast(Mapping[str, Any], value)


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _integer(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"'{key}' must be an integer, got {type(value).__name__}")
    return value


def _items(data: Mapping[str, Any], item_factory: ItemFactory[T] | None) -> list[T]:
    raw = data.get("items")
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise TypeError(f"'items' must be an array, got {type(raw).__name__}")
    raw_items = cast(list[Any], raw)
    if item_factory is None:
        return cast(list[T], list(raw_items))
    return [item_factory(item) for item in raw_items]


__all__ = ["CursorPage", "Page"]
