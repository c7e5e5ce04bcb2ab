"""Search-suggestion lookups (songs, albums, artists and playlists matching a keyword)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Final

from music163.api.query import QueryField, param
from music163.api.response import Response

from .base import Service
from .models import SearchResult

SEARCH_PATH: Final[str] = "search/suggest/web"


@dataclass(frozen=True, slots=True)
class SearchOptions:
    keyword: str
    limit: int = 10

    QUERY_FIELDS: ClassVar[tuple[QueryField, ...]] = (
        param("s", "keyword"),
        param("limit", "limit", omit_empty=True),
    )


class SearchService(Service):
    """Keyword suggestions from ``search/suggest/web``."""

    def suggest(self, keyword: str, *, limit: int = 10) -> tuple[SearchResult, Response[SearchResult]]:
        return self._get(SEARCH_PATH, SearchOptions(keyword=keyword, limit=limit), SearchResult)


__all__ = ["SEARCH_PATH", "SearchOptions", "SearchService"]
