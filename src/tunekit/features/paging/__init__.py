"""
Summary: Paging objects and the walker that moves them between pages.
Why: Offer one import path for offset pages, cursor pages and navigation.
"""

from __future__ import annotations

from .page import CursorPage, Page
from .walker import PageDirection, advance, iter_pages, next_page, previous_page

__all__ = [
    "CursorPage",
    "Page",
    "PageDirection",
    "advance",
    "iter_pages",
    "next_page",
    "previous_page",
]
