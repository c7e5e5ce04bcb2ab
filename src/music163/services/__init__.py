# Path: `src/music163/services/__init__.py`
# Summary: Export endpoint services, their options types and result models.
# Why: Provide a stable import surface for the client and tests.

from .album import ALBUM_PATH, AlbumService
from .detail import DETAIL_PATH, DetailService, SongDetailOptions
from .dj import DJ_PROGRAM_PATH, DjProgramOptions, DjService
from .models import (
    Album,
    AlbumResult,
    AlbumSummary,
    Artist,
    DjProgram,
    DjProgramResult,
    Playlist,
    PlaylistResult,
    SearchResult,
    SearchSuggestion,
    Song,
    SongDetailResult,
)
from .playlist import PLAYLIST_PATH, PlaylistOptions, PlaylistService
from .search import SEARCH_PATH, SearchOptions, SearchService

__all__ = [
    "ALBUM_PATH",
    "DETAIL_PATH",
    "DJ_PROGRAM_PATH",
    "PLAYLIST_PATH",
    "SEARCH_PATH",
    "Album",
    "AlbumResult",
    "AlbumService",
    "AlbumSummary",
    "Artist",
    "DetailService",
    "DjProgram",
    "DjProgramOptions",
    "DjProgramResult",
    "DjService",
    "Playlist",
    "PlaylistOptions",
    "PlaylistResult",
    "PlaylistService",
    "SearchOptions",
    "SearchResult",
    "SearchService",
    "SearchSuggestion",
    "Song",
    "SongDetailOptions",
    "SongDetailResult",
]
