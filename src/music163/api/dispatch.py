"""Where: src/music163/api/dispatch.py
What: Execute a built request and route the body to a sink, a decoder, or nowhere.
Why: Guarantee every response stream is closed and every failure surfaces as a typed error.

Each call is a straight line: send, classify, then decode, copy or discard.
Nothing here retries; the caller owns that policy.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Protocol

import requests
from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError
from requests.structures import CaseInsensitiveDict

from music163.errors import APIError, DecodingError, TransportError
from music163.platform.logging import logger

from .classify import check_response
from .request import Request
from .response import DecodeInto, Destination, Discard, Response, StreamTo

Timeout = float | tuple[float, float] | None


class Transport(Protocol):
    """The subset of ``requests.Session`` the dispatcher relies on.

    Implementations shared between threads must be safe for concurrent use.
    """

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        ...


@lru_cache(maxsize=128)
def _cached_adapter(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(shape)


def _adapter_for(shape: Any) -> TypeAdapter[Any]:
    try:
        _ = hash(shape)
    except TypeError:
        # Unhashable shapes, e.g. Annotated with dict metadata, skip the cache.
        return TypeAdapter(shape)
    return _cached_adapter(shape)


def _envelope(request: Request, raw: requests.Response) -> Response[Any]:
    return Response(
        status_code=int(raw.status_code),
        reason=str(raw.reason or ""),
        headers=CaseInsensitiveDict(raw.headers),
        method=request.method,
        url=request.url,
    )


def _log_extra(event: str, request: Request, status: int | None = None) -> dict[str, object]:
    extra: dict[str, object] = {
        "http_event": event,
        "http_method": request.method,
        "http_url": request.url,
    }
    if status is not None:
        extra["http_status"] = status
    return extra


def _copy_body(raw: requests.Response, response: Response[Any], target: StreamTo) -> None:
    try:
        for chunk in raw.iter_content(chunk_size=target.chunk_size):
            _ = target.sink.write(chunk)
    except (requests.RequestException, OSError, TypeError) as exc:
        # TypeError: the sink does not accept bytes (e.g. a text stream).
        raise TransportError(
            f"{response.method} {response.url}: body copy failed: {exc}",
            response=response,
        ) from exc


def _drain_body(raw: requests.Response, response: Response[Any]) -> None:
    try:
        for _chunk in raw.iter_content(chunk_size=64 * 1024):
            pass
    except requests.RequestException as exc:
        raise TransportError(
            f"{response.method} {response.url}: failed to drain body: {exc}",
            response=response,
        ) from exc


def _decode_body(
    raw: requests.Response,
    response: Response[Any],
    target: DecodeInto[Any],
) -> Response[Any]:
    try:
        body = raw.content or b""
    except requests.RequestException as exc:
        raise TransportError(
            f"{response.method} {response.url}: failed to read body: {exc}",
            response=response,
        ) from exc

    try:
        adapter = _adapter_for(target.shape)
    except PydanticSchemaGenerationError as exc:
        raise DecodingError(
            f"{response.method} {response.url}: cannot decode into {target.shape!r}: {exc}",
            response=response,
        ) from exc

    try:
        value = adapter.validate_json(body)
    except ValidationError as exc:
        raise DecodingError(
            f"{response.method} {response.url}: cannot decode body: {exc}",
            response=response,
        ) from exc
    return response.with_data(value)


def execute(
    transport: Transport,
    request: Request,
    destination: Destination | None = None,
    *,
    timeout: Timeout = None,
) -> Response[Any]:
    """Send ``request`` and route a successful body into ``destination``.

    Args:
        transport: Session used for the exchange.
        request: Request produced by ``build_request``.
        destination: ``Discard()`` (the default when ``None``), ``StreamTo``
            or ``DecodeInto``.
        timeout: Seconds, or a ``(connect, read)`` pair, passed to the
            transport.

    Returns:
        Response: Status and headers; ``data`` holds the decoded value for
        ``DecodeInto`` and is ``None`` otherwise.

    Raises:
        TransportError: The exchange failed, the body could not be read, or
            the sink rejected a chunk.
        APIError: The status was outside [200, 299]. The destination is not
            touched.
        DecodingError: The body did not validate against the requested shape,
            or pydantic cannot build a validator for the shape.
    """

    target: Destination = destination if destination is not None else Discard()

    logger.debug(
        "%s %s",
        request.method,
        request.url,
        extra=_log_extra("http.request", request),
    )

    try:
        raw = transport.request(
            request.method,
            request.url,
            headers=dict(request.headers),
            data=request.body or None,
            stream=True,
            timeout=timeout,
        )
    except requests.RequestException as exc:
        logger.warning(
            "%s %s failed: %s",
            request.method,
            request.url,
            exc,
            extra=_log_extra("http.transport.error", request),
        )
        raise TransportError(f"{request.method} {request.url}: {exc}") from exc

    with raw:
        response = _envelope(request, raw)
        try:
            check_response(response, raw)
        except APIError:
            logger.info(
                "%s %s returned %s",
                request.method,
                request.url,
                response.status_code,
                extra=_log_extra("http.response.error", request, response.status_code),
            )
            raise

        logger.debug(
            "%s %s returned %s",
            request.method,
            request.url,
            response.status_code,
            extra=_log_extra("http.response.success", request, response.status_code),
        )

        try:
            if isinstance(target, StreamTo):
                _copy_body(raw, response, target)
                return response
            if isinstance(target, DecodeInto):
                return _decode_body(raw, response, target)
            _drain_body(raw, response)
            return response
        except (TransportError, DecodingError) as exc:
            event = "http.decode.error" if isinstance(exc, DecodingError) else "http.transport.error"
            logger.warning("%s", exc, extra=_log_extra(event, request, response.status_code))
            raise


__all__ = ["Timeout", "Transport", "execute"]
