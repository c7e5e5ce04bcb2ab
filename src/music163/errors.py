"""Where: src/music163/errors.py
What: Exception hierarchy shared by the request pipeline, services and config.
Why: Give callers a single family to catch while keeping failure kinds distinct.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from music163.api.response import Response


class Music163Error(Exception):
    """Base class for every error raised by the client."""


class ParseError(Music163Error, ValueError):
    """Caller input (a path, URL, HTTP method or ID list) is malformed."""


class EncodingError(Music163Error, TypeError):
    """An options value could not be turned into query parameters."""


class SerializationError(Music163Error, TypeError):
    """A request body could not be encoded as JSON."""


class ConfigError(Music163Error):
    """Configuration could not be read or failed validation."""


class TransportError(Music163Error):
    """The HTTP exchange could not complete (DNS, TLS, connection, timeout).

    ``response`` is set when the failure happened after headers arrived, for
    example while copying the body to a sink.
    """

    def __init__(self, message: str, *, response: Response[Any] | None = None) -> None:
        self.response: Response[Any] | None = response
        super().__init__(message)


class DecodingError(Music163Error):
    """A successful response body was not valid JSON for the requested shape."""

    def __init__(self, message: str, *, response: Response[Any]) -> None:
        self.response: Response[Any] = response
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return self.response.status_code


@dataclass(frozen=True, slots=True)
class FieldError:
    """One field-level problem reported inside an API error envelope."""

    resource: str = ""
    field: str = ""
    code: str = ""

    def __str__(self) -> str:
        return f"{self.code} error caused by {self.field} field on {self.resource} resource"


class APIError(Music163Error):
    """A response whose status fell outside 2xx.

    The rendered message carries the request method and URL, the status code,
    the server message and every sub-error in server order.
    """

    def __init__(
        self,
        response: Response[Any],
        message: str = "",
        errors: Iterable[FieldError] = (),
    ) -> None:
        self.response: Response[Any] = response
        self.message: str = message
        self.errors: tuple[FieldError, ...] = tuple(errors)
        super().__init__(self._render())

    @property
    def status_code(self) -> int:
        return self.response.status_code

    def _render(self) -> str:
        details = ", ".join(str(error) for error in self.errors)
        return (
            f"{self.response.method} {self.response.url}: "
            f"{self.response.status_code} {self.message} [{details}]"
        )


__all__ = [
    "APIError",
    "ConfigError",
    "DecodingError",
    "EncodingError",
    "FieldError",
    "Music163Error",
    "ParseError",
    "SerializationError",
    "TransportError",
]
