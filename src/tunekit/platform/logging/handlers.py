"""Rich console handler styling HTTP lifecycle events.

Where: platform/logging/handlers.py
What: Render records tagged with ``http_event`` as compact one-line summaries.
Why: Retry and error traffic should stand out from ordinary debug output.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override
from urllib.parse import urlsplit

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class RequestEventRichHandler(RichHandler):
    """Rich handler rendering ``http_event`` records with icons and colours."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "http.request": ("→", "blue"),
        "http.retry": ("⏳", "yellow"),
        "http.error": ("⛔", "red"),
        "http.cancelled": ("✋", "magenta"),
        "http.page": ("📄", "cyan"),
    }
    _QUERY_LIMIT: ClassVar[int] = 40

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @classmethod
    def compact_url(cls, url: str) -> str:
        """Drop scheme and host and shorten long query strings."""

        parts = urlsplit(url)
        compact = parts.path or "/"
        if parts.query:
            query = parts.query
            if len(query) > cls._QUERY_LIMIT:
                query = query[: cls._QUERY_LIMIT] + "…"
            compact += f"?{query}"
        return compact

    def _render_http_event(self, record: logging.LogRecord, message: str) -> Text | None:
        event = getattr(record, "http_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        method = getattr(record, "http_method", None)
        url = getattr(record, "http_url", None)
        status = getattr(record, "http_status", None)
        if method:
            _ = text.append(f"{method} ", style=Style(color=color, bold=True))
        if url:
            _ = text.append(self.compact_url(str(url)), style=Style(color="white"))
        if isinstance(status, int):
            _ = text.append(f" [{status}]", style=Style(color=color))
        if event != "http.request" and message:
            _ = text.append(f" {message}", style=Style(color=color))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        rendered = self._render_http_event(record, message)
        if rendered is not None:
            return rendered
        return super().render_message(record, message)


__all__ = ["RequestEventRichHandler"]
