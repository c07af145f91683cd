"""Where: src/tunekit/shared/request_options.py
What: Query-string options accepted by catalog endpoints and URL assembly helpers.
Why: Endpoint wrappers compose URLs the same way without repeating encoding rules.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from urllib.parse import urlencode, urlsplit, urlunsplit

RequestOption = tuple[str, str]


class TimeRange(str, Enum):
    """Period used by personalisation endpoints."""

    LONG_TERM = "long_term"  # several years of data
    MEDIUM_TERM = "medium_term"  # roughly the last six months
    SHORT_TERM = "short_term"  # roughly the last four weeks


class AdditionalType(str, Enum):
    """Item types a client understands besides tracks."""

    EPISODE = "episode"
    TRACK = "track"


def limit(amount: int) -> RequestOption:
    """Maximum number of entries to return."""

    return ("limit", str(amount))


def offset(amount: int) -> RequestOption:
    """Index of the first entry to return."""

    return ("offset", str(amount))


def market(code: str) -> RequestOption:
    """ISO 3166-1 alpha-2 market; enables track relinking."""

    return ("market", code)


def country(code: str) -> RequestOption:
    return ("country", code)


def locale(code: str) -> RequestOption:
    """Language and country joined by an underscore, e.g. ``es_MX``."""

    return ("locale", code)


def timestamp(value: str) -> RequestOption:
    """User's local time as ``yyyy-MM-ddTHH:mm:ss``."""

    return ("timestamp", value)


def after(cursor: str) -> RequestOption:
    """Last ID retrieved by the previous cursor request."""

    return ("after", cursor)


def fields(selection: str) -> RequestOption:
    """Comma-separated field filter, e.g. ``tracks.items(track(name,href))``."""

    return ("fields", selection)


def time_range(value: TimeRange | str) -> RequestOption:
    return ("time_range", TimeRange(value).value)


def additional_types(*types: AdditionalType | str) -> RequestOption:
    return ("additional_types", ",".join(AdditionalType(t).value for t in types))


def encode_options(options: Iterable[RequestOption]) -> str:
    """Encode options as a query string; later options override earlier ones."""

    params: dict[str, str] = {}
    for key, value in options:
        params[key] = value
    return urlencode(params)


def with_query(url: str, options: Iterable[RequestOption]) -> str:
    """Append encoded ``options`` to ``url``, keeping any existing query."""

    query = encode_options(options)
    if not query:
        return url
    parts = urlsplit(url)
    combined = f"{parts.query}&{query}" if parts.query else query
    return urlunsplit((parts.scheme, parts.netloc, parts.path, combined, parts.fragment))


__all__ = [
    "AdditionalType",
    "RequestOption",
    "TimeRange",
    "additional_types",
    "after",
    "country",
    "encode_options",
    "fields",
    "limit",
    "locale",
    "market",
    "offset",
    "time_range",
    "timestamp",
    "with_query",
]
