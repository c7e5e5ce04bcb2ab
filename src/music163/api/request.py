"""Where: src/music163/api/request.py
What: Build outbound API requests: resolve paths, encode JSON bodies, decorate headers.
Why: Keep request construction pure so it can be inspected and tested without I/O.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Final

from pydantic_core import PydanticSerializationError, to_jsonable_python

from music163.config import ClientConfig
from music163.errors import ParseError, SerializationError

from .urls import resolve_reference

# RFC 9110 token characters.
_METHOD_TOKEN: Final[re.Pattern[str]] = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")

JSON_CONTENT_TYPE: Final[str] = "application/json"


@dataclass(frozen=True, slots=True)
class Request:
    """A fully-formed request ready for dispatch. Never mutated after build."""

    method: str
    url: str
    headers: dict[str, str]
    body: bytes = b""


def encode_body(body: object) -> bytes:
    """Serialize ``body`` to compact UTF-8 JSON.

    Dataclasses, pydantic models, mappings, sequences and JSON scalars are
    supported; NaN and infinities are rejected.

    Raises:
        SerializationError: If the value has no JSON representation.
    """

    try:
        text = json.dumps(
            body,
            default=to_jsonable_python,
            allow_nan=False,
            ensure_ascii=False,
            separators=(",", ":"),
        )
    except (TypeError, ValueError, PydanticSerializationError) as exc:
        raise SerializationError(f"cannot encode request body: {exc}") from exc
    return text.encode("utf-8")


def build_request(
    config: ClientConfig,
    method: str,
    path: str,
    body: object | None = None,
) -> Request:
    """Create a request for ``path`` resolved against ``config.base_url``.

    Args:
        config: Client settings supplying base URL, referer and user agent.
        method: HTTP method, e.g. ``"GET"``.
        path: Relative path (joined beneath the base) or absolute URL.
        body: Optional value encoded as the JSON payload.

    Returns:
        Request: The constructed request. No network I/O happens here.

    Raises:
        ParseError: If ``method`` is not a valid token or ``path`` is malformed.
        SerializationError: If ``body`` cannot be encoded.
    """

    if not _METHOD_TOKEN.fullmatch(method):
        raise ParseError(f"invalid HTTP method {method!r}")

    url = resolve_reference(config.base_url, path)

    headers = {
        "Referer": config.referer,
        "User-Agent": config.user_agent,
    }

    payload = b""
    if body is not None:
        payload = encode_body(body)
        headers["Content-Type"] = JSON_CONTENT_TYPE

    return Request(method=method.upper(), url=url, headers=headers, body=payload)


__all__ = ["JSON_CONTENT_TYPE", "Request", "build_request", "encode_body"]
