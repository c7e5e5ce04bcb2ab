"""Album details, including the album's track list."""

from __future__ import annotations

from typing import Final

from music163.api.response import Response

from .base import Service
from .models import AlbumResult

ALBUM_PATH: Final[str] = "album/"


class AlbumService(Service):
    def get(self, album_id: int) -> tuple[AlbumResult, Response[AlbumResult]]:
        """Fetch ``album/{album_id}``."""

        return self._get(f"{ALBUM_PATH}{int(album_id)}", None, AlbumResult)


__all__ = ["ALBUM_PATH", "AlbumService"]
