"""Where: src/music163/client.py
What: Client facade owning configuration, transport and the endpoint services.
Why: One object callers construct and share across threads.
"""

from __future__ import annotations

from enum import Enum
from types import TracebackType
from typing import Any, Final, Self

import requests

from music163.api.dispatch import Timeout, Transport, execute
from music163.api.request import Request, build_request
from music163.api.response import Destination, Response
from music163.config import ClientConfig
from music163.services import (
    AlbumService,
    DetailService,
    DjService,
    PlaylistService,
    SearchService,
)


class _ConfigDefault(Enum):
    TIMEOUT = "timeout"


# Default for ``Client.execute(timeout=...)``: use ``ClientConfig.timeout``.
USE_CONFIG_TIMEOUT: Final = _ConfigDefault.TIMEOUT


class Client:
    """Manage communication with the NetEase Cloud Music web API.

    Args:
        transport: A ``requests.Session`` (or compatible object). When omitted
            the client creates and owns its own session.
        config: Endpoint, header and timeout settings. Defaults to
            ``ClientConfig()``.

    The configuration is frozen, so a single client may serve concurrent
    callers as long as the transport tolerates concurrent use.
    """

    def __init__(
        self,
        transport: Transport | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        self._owns_transport: bool = transport is None
        self._transport: Transport = transport if transport is not None else requests.Session()
        self._config: ClientConfig = config if config is not None else ClientConfig()

        self.search: SearchService = SearchService(self)
        self.album: AlbumService = AlbumService(self)
        self.detail: DetailService = DetailService(self)
        self.playlist: PlaylistService = PlaylistService(self)
        self.dj: DjService = DjService(self)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def user_agent(self) -> str:
        return self._config.user_agent

    def new_request(self, method: str, path: str, body: object | None = None) -> Request:
        """Build a request for ``path`` relative to the base endpoint."""

        return build_request(self._config, method, path, body)

    def execute(
        self,
        request: Request,
        destination: Destination | None = None,
        *,
        timeout: Timeout | _ConfigDefault = USE_CONFIG_TIMEOUT,
    ) -> Response[Any]:
        """Send ``request`` and route its body into ``destination``.

        ``timeout`` overrides the configured default for this call only;
        ``None`` disables it.
        """

        effective = self._config.timeout if isinstance(timeout, _ConfigDefault) else timeout
        return execute(self._transport, request, destination, timeout=effective)

    def close(self) -> None:
        """Close the session if this client created it."""

        if self._owns_transport and isinstance(self._transport, requests.Session):
            self._transport.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["USE_CONFIG_TIMEOUT", "Client"]
