"""
Summary: Shared fixtures providing an in-memory requests transport.
Why: Exercise the full request pipeline without touching the network.
"""

from __future__ import annotations

import io
import json
from collections.abc import Callable, Iterator
from typing import Any, Protocol

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from music163 import Client
from music163.platform.logging import reset_logger


class TrackedResponse(requests.Response):
    """A real ``requests.Response`` that counts ``close`` calls."""

    def __init__(self) -> None:
        super().__init__()
        self.close_calls: int = 0

    def close(self) -> None:
        self.close_calls += 1
        super().close()


class ResponseFactory(Protocol):
    def __call__(
        self,
        status: int,
        body: bytes | str | dict[str, Any] | list[Any] = b"",
        *,
        headers: dict[str, str] | None = None,
        reason: str = "",
        raw: Any = None,
    ) -> TrackedResponse:
        ...


def _make_response(
    status: int,
    body: bytes | str | dict[str, Any] | list[Any] = b"",
    *,
    headers: dict[str, str] | None = None,
    reason: str = "",
    raw: Any = None,
) -> TrackedResponse:
    if isinstance(body, (dict, list)):
        payload = json.dumps(body).encode("utf-8")
    elif isinstance(body, str):
        payload = body.encode("utf-8")
    else:
        payload = body

    response = TrackedResponse()
    response.status_code = status
    response.reason = reason
    response.headers = CaseInsensitiveDict(headers or {})
    response.raw = raw if raw is not None else io.BytesIO(payload)
    return response


class FakeSession:
    """Stand-in for ``requests.Session`` replaying queued responses in order."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.queued: list[requests.Response] = []
        self.error: Exception | None = None
        self.closed: bool = False

    def queue(
        self,
        status: int,
        body: bytes | str | dict[str, Any] | list[Any] = b"",
        **kwargs: Any,
    ) -> TrackedResponse:
        response = _make_response(status, body, **kwargs)
        self.queued.append(response)
        return response

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.queued.pop(0)

    def close(self) -> None:
        self.closed = True


class BrokenStream:
    """Raw stream that yields ``first`` and then fails like a dropped connection."""

    def __init__(self, first: bytes = b"") -> None:
        self._first: bytes = first
        self._sent: bool = False
        self.closed: bool = False

    def read(self, _size: int = -1) -> bytes:
        if not self._sent:
            self._sent = True
            return self._first
        raise requests.exceptions.ChunkedEncodingError("connection reset by peer")

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def make_response() -> ResponseFactory:
    return _make_response


@pytest.fixture
def broken_stream() -> Callable[[bytes], BrokenStream]:
    return BrokenStream


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session: FakeSession) -> Client:
    return Client(transport=session)


@pytest.fixture
def restore_logger() -> Iterator[None]:
    """Detach handlers attached by tests that call ``setup_logger``."""

    yield
    _ = reset_logger()
