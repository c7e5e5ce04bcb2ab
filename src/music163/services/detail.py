"""Song detail lookups for one or more song IDs."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar, Final

from music163.api.query import QueryField
from music163.api.response import Response
from music163.errors import ParseError

from .base import Service
from .models import SongDetailResult

DETAIL_PATH: Final[str] = "song/detail"


def _ids_literal(options: SongDetailOptions) -> str:
    # The endpoint expects a JSON array literal, e.g. ids=[1,2].
    return json.dumps(list(options.ids), separators=(",", ":"))


@dataclass(frozen=True, slots=True)
class SongDetailOptions:
    ids: tuple[int, ...]

    QUERY_FIELDS: ClassVar[tuple[QueryField, ...]] = (
        QueryField("id", lambda options: options.ids[0] if options.ids else None, omit_empty=True),
        QueryField("ids", _ids_literal),
    )


class DetailService(Service):
    """Song metadata from ``song/detail``."""

    def get(self, song_ids: int | Iterable[int]) -> tuple[SongDetailResult, Response[SongDetailResult]]:
        ids = (song_ids,) if isinstance(song_ids, int) else tuple(song_ids)
        if not ids:
            raise ParseError("at least one song id is required")
        options = SongDetailOptions(ids=tuple(int(song_id) for song_id in ids))
        return self._get(DETAIL_PATH, options, SongDetailResult)


__all__ = ["DETAIL_PATH", "DetailService", "SongDetailOptions"]
