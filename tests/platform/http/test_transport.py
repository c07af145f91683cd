"""Tests for the session-backed transport."""

from __future__ import annotations

import requests

from tunekit.platform.http.transport import SessionTransport


def test_send_forwards_request_through_session(mocker) -> None:
    session = mocker.create_autospec(requests.Session, instance=True)
    session.request.return_value = sentinel = requests.Response()
    transport = SessionTransport(session, timeout=3.0)

    request = requests.Request(
        "PUT",
        "https://api.example.test/v1/me/player",
        json={"device_ids": ["abc"], "play": True},
        headers={"Accept-Language": "en"},
    )
    response = transport.send(request)

    assert response is sentinel
    session.request.assert_called_once_with(
        "PUT",
        "https://api.example.test/v1/me/player",
        params=None,
        data=None,
        json={"device_ids": ["abc"], "play": True},
        headers={"Accept-Language": "en"},
        timeout=3.0,
    )


def test_close_closes_session(mocker) -> None:
    session = mocker.create_autospec(requests.Session, instance=True)

    SessionTransport(session).close()

    session.close.assert_called_once_with()
