"""tunekit: request engine for a music-catalog web API.

Public entry points are re-exported here; see ``tunekit.client`` for the
facade and ``tunekit.platform.http`` for the engine itself.
"""

from __future__ import annotations

from tunekit.client import CatalogClient, collect_items
from tunekit.config.config import ClientConfig, ClientSettings
from tunekit.features.paging import CursorPage, Page, PageDirection
from tunekit.platform.http.errors import (
    NoMorePagesError,
    PageTargetError,
    RequestCancelledError,
    ResponseDecodeError,
    ServiceError,
    TransportError,
    TunekitError,
)
from tunekit.platform.http.executor import JSONTarget, RequestExecutor
from tunekit.platform.http.transport import SessionTransport, Transport

__version__ = "0.1.0"

__all__ = [
    "CatalogClient",
    "ClientConfig",
    "ClientSettings",
    "CursorPage",
    "JSONTarget",
    "NoMorePagesError",
    "Page",
    "PageDirection",
    "PageTargetError",
    "RequestCancelledError",
    "RequestExecutor",
    "ResponseDecodeError",
    "ServiceError",
    "SessionTransport",
    "Transport",
    "TransportError",
    "TunekitError",
    "collect_items",
]
