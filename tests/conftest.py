"""Pytest shared fixtures for SDK tests."""
import json
import pathlib
import sys
from collections import deque
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from urllib.parse import urlparse

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from onelogin import OneLoginClient


START = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class StubResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload=None, status_code: int = 200, text: str = None):
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)

    def json(self):
        return json.loads(self.text)


class FakeTransport:
    """Scripted transport: responses are queued per (method, path) and consumed in order."""

    def __init__(self):
        self.calls = []
        self._routes = {}

    def queue(self, method: str, path: str, *responses):
        self._routes.setdefault((method, path), deque()).extend(responses)

    def calls_to(self, path: str):
        return [call for call in self.calls if call.path == path]

    def do_request(self, method, url, headers, params=None, body=None):
        path = urlparse(url).path
        self.calls.append(SimpleNamespace(
            method=method,
            url=url,
            path=path,
            headers=dict(headers),
            params=dict(params) if params is not None else None,
            body=body,
        ))
        pending = self._routes.get((method, path))
        if not pending:
            raise AssertionError(f"Unexpected HTTP {method} {url}")
        response = pending.popleft()
        if isinstance(response, Exception):
            raise response
        return response


class FakeClock:
    def __init__(self, now: datetime = START):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


def _iso(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%dT%H:%M:%S.000Z")


@pytest.fixture()
def transport():
    return FakeTransport()


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def stub_response():
    return StubResponse


@pytest.fixture()
def token_response():
    """Factory for a successful /auth/oauth2/token response."""
    def _make(access_token="access-1", refresh_token="refresh-1", created_at=START, expires_in=3600):
        return StubResponse({
            "status": {"error": False, "code": 200, "type": "success", "message": "Success"},
            "data": [{
                "access_token": access_token,
                "created_at": _iso(created_at),
                "expires_in": expires_in,
                "refresh_token": refresh_token,
                "token_type": "bearer",
                "account_id": 555555,
            }],
        })
    return _make


@pytest.fixture()
def page():
    """Factory for a paginated list envelope."""
    def _make(items, after_cursor=None):
        return StubResponse({
            "status": {"error": False, "code": 200, "type": "success", "message": "Success"},
            "pagination": {"before_cursor": None, "after_cursor": after_cursor, "previous_link": None, "next_link": None},
            "data": items,
        })
    return _make


@pytest.fixture()
def success_envelope():
    def _make(data=None):
        return StubResponse({
            "status": {"error": False, "code": 200, "type": "success", "message": "Success"},
            "data": data if data is not None else [],
        })
    return _make


@pytest.fixture()
def client(transport, clock):
    """OneLogin client wired to the fake transport and clock."""
    return OneLoginClient("test-client-id", "test-client-secret", "us", transport=transport, clock=clock)


@pytest.fixture()
def authed_client(client, transport, token_response):
    """Client whose first token acquisition is already queued."""
    transport.queue("POST", "/auth/oauth2/token", token_response())
    return client
