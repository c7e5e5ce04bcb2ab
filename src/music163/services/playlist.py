"""Playlist details with tracks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Final

from music163.api.query import QueryField, param
from music163.api.response import Response

from .base import Service
from .models import PlaylistResult

PLAYLIST_PATH: Final[str] = "playlist/detail"


@dataclass(frozen=True, slots=True)
class PlaylistOptions:
    playlist_id: int

    QUERY_FIELDS: ClassVar[tuple[QueryField, ...]] = (param("id", "playlist_id"),)


class PlaylistService(Service):
    """Playlist lookups via ``playlist/detail``."""

    def get(self, playlist_id: int) -> tuple[PlaylistResult, Response[PlaylistResult]]:
        return self._get(PLAYLIST_PATH, PlaylistOptions(playlist_id=int(playlist_id)), PlaylistResult)


__all__ = ["PLAYLIST_PATH", "PlaylistOptions", "PlaylistService"]
