"""
Summary: Shared GET-and-decode helper used by every endpoint service.
Why: Keep each service a thin declaration of path, options and result shape.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar, cast

from music163.api.query import add_options
from music163.api.response import DecodeInto, Response

if TYPE_CHECKING:
    from music163.client import Client

T = TypeVar("T")


class Service:
    """Base for endpoint facades holding a reference to their client."""

    def __init__(self, client: Client) -> None:
        self._client: Client = client

    def _get(self, path: str, options: object | None, shape: type[T]) -> tuple[T, Response[T]]:
        url = add_options(path, options)
        request = self._client.new_request("GET", url)
        response = self._client.execute(request, DecodeInto(shape))
        return cast(T, response.data), cast(Response[T], response)


__all__ = ["Service"]
