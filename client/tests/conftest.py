"""
Pytest configuration and shared fakes for the client core tests.

Force AnyIO onto asyncio; the core uses asyncio.to_thread and asyncio.Lock.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import pytest

from attendance_core.session_store import SessionStore, JsonFileStorage


@pytest.fixture
def anyio_backend():
    return "asyncio"


class FakeResponse:
    """Just enough of requests.Response for RequestClient."""

    def __init__(self, status_code: int, body: Any = None, text: Optional[str] = None) -> None:
        self.status_code = status_code
        self._body = body
        self.text = text if text is not None else json.dumps(body)

    def json(self) -> Any:
        if self._body is None:
            raise ValueError("No JSON object could be decoded")
        return self._body


class FakeHTTP:
    """Stands in for requests.Session: records calls, replays queued outcomes."""

    def __init__(self, *outcomes: Any) -> None:
        self.outcomes: List[Any] = list(outcomes)
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def request(self, method, url, **kwargs):  # type: ignore[no-untyped-def]
        self.calls.append({"method": method, "url": url, **kwargs})
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    def close(self) -> None:
        self.closed = True

    def sent_json(self, index: int = -1) -> Any:
        data = self.calls[index]["data"]
        return json.loads(data) if data is not None else None


@pytest.fixture
def store(tmp_path):
    return SessionStore(JsonFileStorage(tmp_path / "session.json"))
