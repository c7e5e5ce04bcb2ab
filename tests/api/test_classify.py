"""Tests for success detection and error-envelope parsing."""

from __future__ import annotations

from typing import Any

import pytest

from music163.api.classify import check_response, parse_error_envelope
from music163.api.response import Response, is_success
from music163.errors import APIError, FieldError

NOT_FOUND_BODY: dict[str, Any] = {
    "message": "not found",
    "errors": [{"resource": "song", "field": "id", "code": "missing"}],
}


def _info(status: int) -> Response[Any]:
    return Response(
        status_code=status,
        reason="",
        headers={},
        method="GET",
        url="http://music.163.com/api/song/detail?ids=%5B1%5D",
    )


class _UnreadableStream:
    def read(self, _size: int = -1) -> bytes:
        raise AssertionError("successful responses must not be read by the classifier")

    def close(self) -> None:
        pass


@pytest.mark.parametrize(
    ("status", "expected"),
    [(199, False), (200, True), (204, True), (299, True), (300, False), (302, False), (404, False), (503, False)],
)
def test_is_success_uses_inclusive_2xx_range(status: int, expected: bool) -> None:
    assert is_success(status) is expected


@pytest.mark.parametrize("status", [200, 201, 299])
def test_success_does_not_read_body_or_raise(make_response: Any, status: int) -> None:
    raw = make_response(status, raw=_UnreadableStream())

    check_response(_info(status), raw)


def test_failure_renders_method_url_status_message_and_sub_errors(make_response: Any) -> None:
    raw = make_response(404, NOT_FOUND_BODY)

    with pytest.raises(APIError) as excinfo:
        check_response(_info(404), raw)

    err = excinfo.value
    text = str(err)
    assert text.startswith("GET http://music.163.com/api/song/detail?ids=%5B1%5D: 404 not found")
    assert "missing error caused by id field on song resource" in text
    assert err.status_code == 404
    assert err.message == "not found"
    assert err.errors == (FieldError(resource="song", field="id", code="missing"),)


def test_sub_errors_keep_server_order_and_duplicates() -> None:
    body = (
        b'{"message":"bad","errors":['
        b'{"resource":"b","field":"f2","code":"invalid"},'
        b'{"resource":"a","field":"f1","code":"missing"},'
        b'{"resource":"b","field":"f2","code":"invalid"}]}'
    )

    message, errors = parse_error_envelope(body)

    assert message == "bad"
    assert [e.resource for e in errors] == ["b", "a", "b"]


@pytest.mark.parametrize(
    "body",
    [b"", b"<html>502 Bad Gateway</html>", b"[1, 2]", b'"oops"', b"\xff\xfe\x00"],
)
def test_unparseable_error_bodies_yield_empty_envelope(body: bytes) -> None:
    assert parse_error_envelope(body) == ("", [])


def test_partial_envelope_is_tolerated() -> None:
    body = b'{"errors": [{"field": "id"}, "junk", {"code": 7}], "message": null}'

    message, errors = parse_error_envelope(body)

    assert message == ""
    assert errors == [FieldError(field="id"), FieldError(code="7")]


def test_html_error_page_still_raises_api_error(make_response: Any) -> None:
    raw = make_response(502, b"<html>Bad Gateway</html>")

    with pytest.raises(APIError) as excinfo:
        check_response(_info(502), raw)

    assert excinfo.value.message == ""
    assert excinfo.value.errors == ()
    assert ": 502  []" in str(excinfo.value)


def test_unreadable_error_body_does_not_mask_failure(make_response: Any, broken_stream: Any) -> None:
    raw = make_response(500, raw=broken_stream(b'{"message": "par'))

    with pytest.raises(APIError) as excinfo:
        check_response(_info(500), raw)

    assert excinfo.value.status_code == 500


def test_redirect_status_is_failure(make_response: Any) -> None:
    raw = make_response(301, b"", headers={"Location": "http://music.163.com/"})

    with pytest.raises(APIError):
        check_response(_info(301), raw)


def test_field_error_rendering() -> None:
    assert str(FieldError("album", "name", "invalid")) == (
        "invalid error caused by name field on album resource"
    )
