from datetime import timedelta

import pytest

from saffron.response import HttpResponse


def make_response(status=200, headers=None, body=b""):
    return HttpResponse(
        status,
        "Test",
        headers or {},
        body,
        timedelta(milliseconds=100),
        "https://example.com",
    )


def test_response_new():
    response = HttpResponse(
        200,
        "OK",
        {"Content-Type": "application/json"},
        b"test body",
        timedelta(milliseconds=150),
        "https://example.com",
    )
    assert response.status == 200
    assert response.status_text == "OK"
    assert response.body == b"test body"
    assert response.elapsed == timedelta(milliseconds=150)
    assert response.url == "https://example.com"


@pytest.mark.parametrize("status,expected", [(200, True), (299, True), (199, False), (300, False)])
def test_response_is_success(status, expected):
    assert make_response(status).is_success() is expected


@pytest.mark.parametrize(
    "status,expected", [(301, True), (302, True), (399, True), (299, False), (400, False)]
)
def test_response_is_redirect(status, expected):
    assert make_response(status).is_redirect() is expected


@pytest.mark.parametrize(
    "status,expected", [(400, True), (404, True), (499, True), (399, False), (500, False)]
)
def test_response_is_client_error(status, expected):
    assert make_response(status).is_client_error() is expected


@pytest.mark.parametrize(
    "status,expected", [(500, True), (503, True), (599, True), (499, False), (600, False)]
)
def test_response_is_server_error(status, expected):
    assert make_response(status).is_server_error() is expected


def test_response_body_as_string():
    assert make_response(body=b"Hello, World!").body_as_string() == "Hello, World!"


def test_response_body_as_string_invalid_utf8():
    with pytest.raises(UnicodeDecodeError):
        make_response(body=bytes([0xFF, 0xFE, 0xFD])).body_as_string()


def test_response_body_as_str():
    assert make_response(body=b"Test content").body_as_str() == "Test content"


def test_response_body_as_str_invalid_utf8():
    assert make_response(body=bytes([0xFF, 0xFE, 0xFD])).body_as_str() is None


def test_response_content_type():
    response = make_response(headers={"Content-Type": "application/json"})
    assert response.content_type() == "application/json"


def test_response_content_type_case_insensitive():
    response = make_response(headers={"content-type": "text/html"})
    assert response.content_type() == "text/html"


def test_response_get_header():
    response = make_response(
        headers={"X-Custom-Header": "custom-value", "Authorization": "Bearer token"}
    )
    assert response.get_header("X-Custom-Header") == "custom-value"
    assert response.get_header("Authorization") == "Bearer token"
    assert response.get_header("Missing") is None


def test_response_get_header_case_insensitive():
    response = make_response(headers={"Content-Type": "application/json"})
    assert response.get_header("content-type") == "application/json"
    assert response.get_header("CONTENT-TYPE") == "application/json"


def test_response_is_json():
    assert make_response(headers={"Content-Type": "application/json"}).is_json()


def test_response_is_json_with_charset():
    response = make_response(headers={"Content-Type": "application/json; charset=utf-8"})
    assert response.is_json()


def test_response_is_json_without_content_type():
    assert make_response().is_json() is False


def test_response_is_html():
    assert make_response(headers={"Content-Type": "text/html"}).is_html()


def test_response_is_xml():
    assert make_response(headers={"Content-Type": "application/xml"}).is_xml()


def test_response_content_length():
    assert make_response(headers={"Content-Length": "1234"}).content_length() == 1234


def test_response_content_length_invalid():
    assert make_response(headers={"Content-Length": "invalid"}).content_length() is None


def test_response_content_length_missing():
    assert make_response().content_length() is None