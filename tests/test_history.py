import json
import time
import uuid

from saffron.history import HistoryEntry, HistoryRequest, HistoryResponse
from saffron.response import HttpResponse


def _response(body, headers=None):
    return HttpResponse(
        status=200,
        status_text="OK",
        headers=headers or {},
        body=body,
        url="https://example.com",
    )


def _entry():
    request = HistoryRequest(
        "POST",
        "https://example.com/items",
        [("Authorization", "Bearer token"), ("Accept", "application/json")],
        '{"a": 1}',
    )
    response = HistoryResponse(201, "Created", [("Content-Type", "application/json")], "{}")
    return HistoryEntry.create(request, response, 42)


def test_preview_of_short_text_is_whole_body():
    summary = HistoryResponse.from_response(_response(b"Hello, World!"))
    assert summary.body_preview == "Hello, World!"
    assert summary.status == 200
    assert summary.status_text == "OK"


def test_preview_of_long_text_is_truncated():
    summary = HistoryResponse.from_response(_response(b"a" * 600))
    assert summary.body_preview == "a" * 500 + "..."


def test_preview_of_exactly_limit_is_not_truncated():
    summary = HistoryResponse.from_response(_response(b"b" * 500))
    assert summary.body_preview == "b" * 500


def test_preview_of_binary_body():
    summary = HistoryResponse.from_response(_response(b"\xff\xfe\xfd"))
    assert summary.body_preview == "<binary data, 3 bytes>"


def test_headers_are_copied():
    headers = {"Content-Type": "text/plain", "X-Custom-Header": "custom-value"}
    summary = HistoryResponse.from_response(_response(b"", headers))
    assert dict(summary.headers) == headers


def test_create_assigns_uuid_and_current_time():
    before = int(time.time())
    entry = _entry()
    after = int(time.time())
    assert str(uuid.UUID(entry.id)) == entry.id
    assert before <= entry.timestamp <= after
    assert entry.duration_ms == 42


def test_create_gives_distinct_ids():
    assert _entry().id != _entry().id or False is True  # placeholder never reached
    ids = {_entry().id for _ in range(5)}
    assert len(ids) == 5


def test_format_timestamp_epoch():
    entry = _entry()
    entry.timestamp = 0
    assert entry.format_timestamp() == "1970-01-01 00:00:00"


def test_format_timestamp_out_of_range_falls_back_to_epoch():
    entry = _entry()
    entry.timestamp = 10**20
    zero = _entry()
    zero.timestamp = 0
    assert entry.format_timestamp() == zero.format_timestamp()


def test_dict_round_trip_through_json():
    entry = _entry()
    restored = HistoryEntry.from_dict(json.loads(json.dumps(entry.to_dict())))
    assert restored == entry
    assert restored.request.headers[0] == ("Authorization", "Bearer token")


def test_request_dict_keeps_missing_body():
    request = HistoryRequest("GET", "https://example.com")
    data = request.to_dict()
    assert data["body"] is None
    assert HistoryRequest.from_dict(data) == request