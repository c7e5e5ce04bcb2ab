"""Where: src/music163/api/urls.py
What: Strict URL-reference parsing and resolution against the base endpoint.
Why: ``urllib.parse`` accepts almost anything; callers need malformed input rejected early.
"""

from __future__ import annotations

import re
from typing import Final
from urllib.parse import SplitResult, urljoin, urlsplit

from music163.errors import ParseError

_CONTROL_CHARS: Final[re.Pattern[str]] = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE: Final[re.Pattern[str]] = re.compile(r"%(?![0-9A-Fa-f]{2})")
# Characters that can never appear in an authority, even an internationalised one.
_BAD_AUTHORITY: Final[re.Pattern[str]] = re.compile(r"[\s\"<>\\^`{|}]")


def parse_reference(raw: str) -> SplitResult:
    """Split ``raw`` into URL components, rejecting malformed references.

    Rejects control characters, broken percent-escapes, unbalanced IPv6
    brackets, non-numeric ports and authorities containing whitespace or
    delimiters such as ``<`` or ``{``.

    Raises:
        ParseError: If ``raw`` is not a syntactically valid URL reference.
    """

    if _CONTROL_CHARS.search(raw):
        raise ParseError(f"invalid control character in URL {raw!r}")
    if _BAD_ESCAPE.search(raw):
        raise ParseError(f"invalid percent-escape in URL {raw!r}")

    try:
        parts = urlsplit(raw)
        _ = parts.port
    except ValueError as exc:
        raise ParseError(f"cannot parse URL {raw!r}: {exc}") from exc
    if parts.netloc and _BAD_AUTHORITY.search(parts.netloc):
        raise ParseError(f"invalid authority {parts.netloc!r} in URL {raw!r}")
    return parts


def resolve_reference(base_url: str, reference: str) -> str:
    """Resolve ``reference`` against ``base_url`` (RFC 3986 section 5).

    Relative references are joined beneath the base; absolute ones replace
    its scheme and host.
    """

    _ = parse_reference(reference)
    return urljoin(base_url, reference)


__all__ = ["parse_reference", "resolve_reference"]
