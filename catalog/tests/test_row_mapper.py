from datetime import datetime, timedelta, timezone

import pytest

from catalog.domain.models import Status
from catalog.errors import ScanError
from catalog.repository.row_mapper import parse_timestamp, scan_row, scan_rows, status_for

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


def test_status_open_strictly_in_future():
    assert status_for(NOW + timedelta(microseconds=1), NOW) is Status.OPEN
    assert status_for(NOW + timedelta(days=1), NOW) is Status.OPEN


def test_status_closed_at_boundary_and_past():
    assert status_for(NOW, NOW) is Status.CLOSED
    assert status_for(NOW - timedelta(seconds=1), NOW) is Status.CLOSED


def test_scan_row_decodes_fields():
    r = scan_row((1, 2, "North Dakota foes", 3, 1, "2024-06-01T13:00:00Z"), NOW)
    assert (r.id, r.meeting_id, r.name, r.number, r.visible) == (1, 2, "North Dakota foes", 3, True)
    assert r.advertised_start_time == datetime(2024, 6, 1, 13, tzinfo=timezone.utc)
    assert r.status is Status.OPEN


def test_scan_row_accepts_string_numbers_and_naive_datetime():
    r = scan_row(("1", "2", "Vermont owls", "3", False, datetime(2024, 6, 1, 12, 0, 0)), NOW)
    assert r.id == 1 and r.meeting_id == 2 and r.number == 3
    assert r.visible is False
    # naive values are UTC, so this equals NOW exactly
    assert r.status is Status.CLOSED


def test_parse_timestamp_formats():
    assert parse_timestamp("2024-06-01 12:00:00") == NOW
    assert parse_timestamp("2024-06-01T14:00:00+02:00") == NOW


@pytest.mark.parametrize("row", [
    (1, 2, "x", 3, 1),
    (1, 2, "x", 3, 1, "2024-06-01T13:00:00Z", "extra"),
    (None, 2, "x", 3, 1, "2024-06-01T13:00:00Z"),
    (1, "two", "x", 3, 1, "2024-06-01T13:00:00Z"),
    (1, 2, None, 3, 1, "2024-06-01T13:00:00Z"),
    (1, 2, "x", 3, "maybe", "2024-06-01T13:00:00Z"),
    (1, 2, "x", 3, 1, "not a time"),
    (1, 2, "x", 3, 1, None),
])
def test_malformed_rows_raise_scan_error(row):
    with pytest.raises(ScanError):
        scan_row(row, NOW)


def test_scan_rows_keeps_order_and_fails_whole_batch():
    good = [
        (2, 1, "b", 1, 1, "2024-06-01T10:00:00Z"),
        (1, 1, "a", 2, 1, "2024-06-01T14:00:00Z"),
    ]
    out = scan_rows(good, NOW)
    assert [r.id for r in out] == [2, 1]
    assert [r.status for r in out] == [Status.CLOSED, Status.OPEN]

    with pytest.raises(ScanError):
        scan_rows(good + [(3, 1, "c", 1, 1, "garbage")], NOW)


def test_scan_rows_empty_is_empty_list():
    assert scan_rows([], NOW) == []


def test_record_wire_shape():
    r = scan_row((7, 5, "Ohio hawks", 4, 1, "2024-06-01T12:00:00Z"), NOW)
    assert r.to_dict() == {
        "id": 7,
        "meetingId": 5,
        "name": "Ohio hawks",
        "number": 4,
        "visible": True,
        "advertisedStartTime": "2024-06-01T12:00:00Z",
        "status": "CLOSED",
    }
