"""Typed client for the NetEase Cloud Music (music.163.com) web API."""

from music163.api import DecodeInto, Discard, Request, Response, StreamTo
from music163.client import Client
from music163.config import ClientConfig
from music163.errors import (
    APIError,
    ConfigError,
    DecodingError,
    EncodingError,
    FieldError,
    Music163Error,
    ParseError,
    SerializationError,
    TransportError,
)

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "Client",
    "ClientConfig",
    "ConfigError",
    "DecodeInto",
    "DecodingError",
    "Discard",
    "EncodingError",
    "FieldError",
    "Music163Error",
    "ParseError",
    "Request",
    "Response",
    "SerializationError",
    "StreamTo",
    "TransportError",
]
