"""
Summary: Exercise decoding and in-place overwrite of paging objects.
Why: The walker relies on ``apply_payload`` replacing every field atomically.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from tunekit.features.paging import CursorPage, Page

PAGE_PAYLOAD: dict[str, Any] = {
    "href": "https://api.example.test/v1/me/tracks?offset=0&limit=2",
    "limit": 2,
    "offset": 0,
    "total": 5,
    "next": "https://api.example.test/v1/me/tracks?offset=2&limit=2",
    "previous": None,
    "items": [{"id": "a"}, {"id": "b"}],
}


@dataclass(frozen=True)
class _Track:
    track_id: str

    @classmethod
    def from_json(cls, raw: Any) -> "_Track":
        return cls(track_id=raw["id"])


def test_from_payload_reads_envelope() -> None:
    page: Page[dict[str, str]] = Page.from_payload(PAGE_PAYLOAD)

    assert page.endpoint == PAGE_PAYLOAD["href"]
    assert (page.limit, page.offset, page.total) == (2, 0, 5)
    assert page.next.endswith("offset=2&limit=2")
    assert page.previous == ""
    assert page.items == [{"id": "a"}, {"id": "b"}]


def test_item_factory_converts_items_and_survives_overwrite() -> None:
    page = Page.from_payload(PAGE_PAYLOAD, item_factory=_Track.from_json)

    page.apply_payload({"total": 1, "items": [{"id": "z"}]})

    assert page.items == [_Track("z")]
    assert page.item_factory is not None


def test_apply_payload_resets_absent_fields() -> None:
    page: Page[Any] = Page.from_payload(PAGE_PAYLOAD)

    page.apply_payload({"total": 100})

    assert page.total == 100
    assert page.next == ""
    assert page.items == []
    assert page.endpoint == ""


@pytest.mark.parametrize(
    "payload",
    [
        [],
        "page",
        {"total": "5"},
        {"total": True},
        {"next": 3},
        {"items": {"id": "a"}},
    ],
)
def test_invalid_payload_leaves_page_untouched(payload: Any) -> None:
    page: Page[Any] = Page.from_payload(PAGE_PAYLOAD)

    with pytest.raises(TypeError):
        page.apply_payload(payload)

    assert page.total == 5
    assert page.items == [{"id": "a"}, {"id": "b"}]


def test_cursor_page_reads_cursor_token() -> None:
    page: CursorPage[Any] = CursorPage.from_payload(
        {
            "href": "https://api.example.test/v1/me/following?type=artist",
            "limit": 20,
            "total": 41,
            "next": "https://api.example.test/v1/me/following?type=artist&after=0I2XqVXqHScXjHhk6AYYRe",
            "cursors": {"after": "0I2XqVXqHScXjHhk6AYYRe"},
            "items": [{"name": "Low"}],
        }
    )

    assert page.cursor_after == "0I2XqVXqHScXjHhk6AYYRe"
    assert page.total == 41
    assert not hasattr(page, "previous")


def test_cursor_page_without_cursors() -> None:
    page: CursorPage[Any] = CursorPage.from_payload({"total": 0, "cursors": None})

    assert page.cursor_after == ""
    assert page.next == ""
