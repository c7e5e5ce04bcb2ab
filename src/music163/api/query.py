"""Where: src/music163/api/query.py
What: Encode endpoint options values as URL query strings.
Why: Each options type declares its query parameters explicitly, so encoding
     stays deterministic and free of attribute introspection.

An options type lists its parameters in a ``QUERY_FIELDS`` class attribute::

    @dataclass(frozen=True)
    class SearchOptions:
        keyword: str
        limit: int = 10

        QUERY_FIELDS: ClassVar[tuple[QueryField, ...]] = (
            param("s", "keyword"),
            param("limit", "limit", omit_empty=True),
        )

Plain ``Mapping[str, ...]`` values are accepted as well; ``None`` entries in a
mapping are skipped.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from operator import attrgetter, itemgetter
from typing import Any, ClassVar, Protocol, runtime_checkable
from urllib.parse import urlencode, urlunsplit

from music163.errors import EncodingError

from .urls import parse_reference


@dataclass(frozen=True, slots=True)
class QueryField:
    """One ``(key, accessor)`` pair in an options type's query mapping."""

    key: str
    accessor: Callable[[Any], object]
    omit_empty: bool = False


def param(key: str, attribute: str, *, omit_empty: bool = False) -> QueryField:
    """Declare a query parameter read from ``attribute`` on the options value."""

    return QueryField(key=key, accessor=attrgetter(attribute), omit_empty=omit_empty)


@runtime_checkable
class QueryOptions(Protocol):
    """Any value that declares its query parameters."""

    QUERY_FIELDS: ClassVar[tuple[QueryField, ...]]


def _is_empty(value: object) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (str, bytes, list, tuple)):
        return len(value) == 0
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return False


def _scalar(key: str, value: object) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, str)):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise EncodingError(
        f"query parameter '{key}' has unsupported type {type(value).__name__}"
    )


def _encode_value(key: str, value: object) -> list[str]:
    if value is None:
        return [""]
    if isinstance(value, (list, tuple)):
        return [_scalar(key, item) for item in value]
    return [_scalar(key, value)]


def _collect_pairs(options: object) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []

    if isinstance(options, Mapping):
        for key, value in options.items():
            if not isinstance(key, str):
                raise EncodingError(f"query keys must be strings, got {type(key).__name__}")
            if value is None:
                continue
            pairs.extend((key, encoded) for encoded in _encode_value(key, value))
        return pairs

    declared = getattr(type(options), "QUERY_FIELDS", None)
    if not isinstance(declared, tuple):
        raise EncodingError(
            f"{type(options).__name__} does not declare QUERY_FIELDS"
        )

    for entry in declared:
        if not isinstance(entry, QueryField):
            raise EncodingError(f"{type(options).__name__}.QUERY_FIELDS must hold QueryField entries")
        try:
            value = entry.accessor(options)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise EncodingError(f"cannot read query parameter '{entry.key}': {exc}") from exc
        if entry.omit_empty and _is_empty(value):
            continue
        pairs.extend((entry.key, encoded) for encoded in _encode_value(entry.key, value))
    return pairs


def encode_query(options: object) -> str:
    """Return the percent-encoded query string for ``options``, sorted by key.

    Raises:
        EncodingError: If ``options`` declares no mapping or holds an
        unsupported value type.
    """

    pairs = _collect_pairs(options)
    pairs.sort(key=itemgetter(0))
    return urlencode(pairs)


def add_options(path: str, options: object | None) -> str:
    """Append ``options`` to ``path`` as its query string.

    ``None`` returns ``path`` untouched. Otherwise any existing query on
    ``path`` is replaced.

    Raises:
        ParseError: If ``path`` is not a valid URL reference.
        EncodingError: If ``options`` cannot be encoded.
    """

    if options is None:
        return path

    parts = parse_reference(path)
    query = encode_query(options)
    return urlunsplit(parts._replace(query=query))


__all__ = [
    "QueryField",
    "QueryOptions",
    "add_options",
    "encode_query",
    "param",
]
