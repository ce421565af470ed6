from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Sequence

from ..domain.models import Record, Status
from ..errors import ScanError


def status_for(advertised_start_time: datetime, now: datetime) -> Status:
    """OPEN while the start is strictly in the future; the start instant itself is CLOSED."""
    return Status.OPEN if now < advertised_start_time else Status.CLOSED


def parse_timestamp(value) -> datetime:
    if isinstance(value, datetime):
        ts = value
    elif isinstance(value, str) and value.strip():
        s = value.strip()
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        ts = datetime.fromisoformat(s)
    else:
        raise ValueError(f"unsupported timestamp value {value!r}")
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


def _to_int(value) -> int:
    if value is None or isinstance(value, (bool, float)):
        raise ValueError(f"expected integer, got {value!r}")
    return int(value)


def _to_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        v = value.strip().lower()
        if v in ("1", "true", "t"):
            return True
        if v in ("0", "false", "f"):
            return False
    raise ValueError(f"expected boolean, got {value!r}")


def scan_row(row: Sequence, now: datetime) -> Record:
    try:
        record_id, meeting_id, name, number, visible, start = tuple(row)
        if name is None:
            raise ValueError("name is NULL")
        advertised = parse_timestamp(start)
        return Record(
            id=_to_int(record_id),
            meeting_id=_to_int(meeting_id),
            name=str(name),
            number=_to_int(number),
            visible=_to_bool(visible),
            advertised_start_time=advertised,
            status=status_for(advertised, now),
        )
    except (TypeError, ValueError) as e:
        raise ScanError(f"unexpected error occurred scanning row: {e}") from e


def scan_rows(rows: Iterable[Sequence], now: datetime) -> list[Record]:
    """Map rows in store order; the first bad row fails the whole batch."""
    return [scan_row(r, now) for r in rows]
