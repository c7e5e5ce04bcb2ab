"""Where: src/music163/api/classify.py
What: Decide whether a response succeeded and build the API error envelope when it did not.
Why: Non-2xx handling must be uniform and must never be masked by a malformed error body.
"""

from __future__ import annotations

import json
from typing import Any, cast

import requests

from music163.errors import APIError, FieldError
from music163.platform.logging import logger

from .response import Response, is_success


def _text(value: object) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def parse_error_envelope(body: bytes) -> tuple[str, list[FieldError]]:
    """Best-effort parse of ``{"message": ..., "errors": [...]}``.

    Malformed JSON, unexpected types and missing keys leave the corresponding
    parts empty instead of raising.
    """

    if not body:
        return "", []
    try:
        payload = json.loads(body)
    except (UnicodeDecodeError, ValueError):
        return "", []
    if not isinstance(payload, dict):
        return "", []

    data = cast(dict[str, Any], payload)
    message = _text(data.get("message"))

    errors: list[FieldError] = []
    errors_raw = data.get("errors")
    if isinstance(errors_raw, list):
        for entry in cast(list[object], errors_raw):
            if not isinstance(entry, dict):
                continue
            item = cast(dict[str, Any], entry)
            errors.append(
                FieldError(
                    resource=_text(item.get("resource")),
                    field=_text(item.get("field")),
                    code=_text(item.get("code")),
                )
            )
    return message, errors


def _read_error_body(raw: requests.Response) -> bytes:
    try:
        return raw.content or b""
    except requests.RequestException as exc:
        logger.debug("Could not read error body from %s: %s", raw.url, exc)
        return b""


def check_response(response: Response[Any], raw: requests.Response) -> None:
    """Raise ``APIError`` when ``response`` is not a success.

    On failure the whole body of ``raw`` is read and parsed as an error
    envelope. Successful responses are left unread.
    """

    if is_success(response.status_code):
        return

    message, errors = parse_error_envelope(_read_error_body(raw))
    raise APIError(response, message, errors)


__all__ = [
    "check_response",
    "is_success",
    "parse_error_envelope",
]
