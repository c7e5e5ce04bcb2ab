"""Where: src/music163/api/__init__.py
What: Export the request/response pipeline shared by every endpoint service.
Why: Services and callers import the pipeline from one place.
"""

from .classify import check_response, parse_error_envelope
from .dispatch import Timeout, Transport, execute
from .query import QueryField, QueryOptions, add_options, encode_query, param
from .request import Request, build_request, encode_body
from .response import (
    BinarySink,
    DecodeInto,
    Destination,
    Discard,
    Response,
    StreamTo,
    is_success,
)
from .urls import parse_reference, resolve_reference

__all__ = [
    "BinarySink",
    "DecodeInto",
    "Destination",
    "Discard",
    "QueryField",
    "QueryOptions",
    "Request",
    "Response",
    "StreamTo",
    "Timeout",
    "Transport",
    "add_options",
    "build_request",
    "check_response",
    "encode_body",
    "encode_query",
    "execute",
    "is_success",
    "param",
    "parse_error_envelope",
    "parse_reference",
    "resolve_reference",
]
