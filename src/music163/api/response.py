"""Where: src/music163/api/response.py
What: Response envelope and the three destinations a response body can be routed to.
Why: Callers state up front whether a body is decoded, copied or discarded.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Final, Generic, Protocol, TypeVar

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_CHUNK_SIZE: Final[int] = 64 * 1024

SUCCESS_MIN: Final[int] = 200
SUCCESS_MAX: Final[int] = 299


def is_success(status_code: int) -> bool:
    """Return True for statuses in the inclusive range [200, 299]."""

    return SUCCESS_MIN <= status_code <= SUCCESS_MAX


@dataclass(frozen=True, slots=True)
class Response(Generic[T]):
    """Status, headers and (optionally) decoded data of a finished call.

    The transport stream behind it is already closed by the time callers see
    this object.
    """

    status_code: int
    reason: str
    headers: Mapping[str, str]
    method: str
    url: str
    data: T | None = None

    @property
    def ok(self) -> bool:
        return is_success(self.status_code)

    def with_data(self, data: U) -> Response[U]:
        return replace(self, data=data)  # pyright: ignore[reportReturnType]


class BinarySink(Protocol):
    """Anything with a ``write(bytes)`` method, such as binary files or ``BytesIO``."""

    def write(self, data: bytes, /) -> object:
        ...


@dataclass(frozen=True, slots=True)
class Discard:
    """Drain and close the body without keeping it."""


@dataclass(frozen=True, slots=True)
class StreamTo:
    """Copy the raw body bytes into ``sink`` unchanged."""

    sink: BinarySink
    chunk_size: int = DEFAULT_CHUNK_SIZE


@dataclass(frozen=True, slots=True)
class DecodeInto(Generic[T]):
    """Decode the JSON body and validate it as ``shape``.

    ``shape`` may be any type pydantic can validate: models, dataclasses,
    ``TypedDict`` classes or builtin generics such as ``list[int]``.
    """

    shape: Any


Destination = Discard | StreamTo | DecodeInto[Any]


__all__ = [
    "BinarySink",
    "DEFAULT_CHUNK_SIZE",
    "DecodeInto",
    "Destination",
    "Discard",
    "Response",
    "SUCCESS_MAX",
    "SUCCESS_MIN",
    "StreamTo",
    "is_success",
]
