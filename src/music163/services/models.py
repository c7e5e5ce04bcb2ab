"""Where: src/music163/services/models.py
What: Result shapes returned by the endpoint services.
Why: Give callers typed access to the commonly used fields while keeping the rest.

Only the identifying fields are modelled. Every model allows extra keys, so
fields NetEase adds or that are not listed here stay available through
``model_extra``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _Payload(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Artist(_Payload):
    id: int
    name: str = ""


class AlbumSummary(_Payload):
    id: int
    name: str = ""
    pic_url: str | None = Field(default=None, alias="picUrl")


class Song(_Payload):
    id: int
    name: str = ""
    artists: list[Artist] = Field(default_factory=list)
    album: AlbumSummary | None = None
    duration: int | None = None
    mp3_url: str | None = Field(default=None, alias="mp3Url")


class Album(AlbumSummary):
    artists: list[Artist] = Field(default_factory=list)
    songs: list[Song] = Field(default_factory=list)
    publish_time: int | None = Field(default=None, alias="publishTime")


class Playlist(_Payload):
    id: int
    name: str = ""
    track_count: int | None = Field(default=None, alias="trackCount")
    tracks: list[Song] = Field(default_factory=list)


class DjProgram(_Payload):
    id: int
    name: str = ""
    description: str | None = None
    main_song: Song | None = Field(default=None, alias="mainSong")
    songs: list[Song] = Field(default_factory=list)


class SearchSuggestion(_Payload):
    songs: list[Song] = Field(default_factory=list)
    albums: list[AlbumSummary] = Field(default_factory=list)
    artists: list[Artist] = Field(default_factory=list)
    playlists: list[Playlist] = Field(default_factory=list)
    order: list[str] = Field(default_factory=list)


class SearchResult(_Payload):
    result: SearchSuggestion = Field(default_factory=SearchSuggestion)
    code: int = 200


class AlbumResult(_Payload):
    album: Album | None = None
    code: int = 200


class SongDetailResult(_Payload):
    songs: list[Song] = Field(default_factory=list)
    code: int = 200


class PlaylistResult(_Payload):
    result: Playlist | None = None
    code: int = 200


class DjProgramResult(_Payload):
    program: DjProgram | None = None
    code: int = 200


__all__ = [
    "Album",
    "AlbumResult",
    "AlbumSummary",
    "Artist",
    "DjProgram",
    "DjProgramResult",
    "Playlist",
    "PlaylistResult",
    "SearchResult",
    "SearchSuggestion",
    "Song",
    "SongDetailResult",
]
