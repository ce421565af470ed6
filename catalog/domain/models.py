from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class Status(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"


@dataclass(frozen=True)
class CatalogKind:
    """Everything that differs between the races and sports catalogs."""
    name: str            # table name and plural response key
    singular: str        # single-record response key
    package: str         # RPC service path prefix, e.g. racing.Racing
    list_method: str
    get_method: str

    @property
    def list_path(self) -> str:
        return f"/{self.package}/{self.list_method}"

    @property
    def get_path(self) -> str:
        return f"/{self.package}/{self.get_method}"


RACING = CatalogKind(
    name="races", singular="race", package="racing.Racing",
    list_method="ListRaces", get_method="GetRace",
)
SPORTING = CatalogKind(
    name="sports", singular="sport", package="sporting.Sporting",
    list_method="ListSports", get_method="GetSport",
)
KINDS = {k.name: k for k in (RACING, SPORTING)}


@dataclass(frozen=True)
class Record:
    id: int
    meeting_id: int
    name: str
    number: int
    visible: bool
    advertised_start_time: datetime
    status: Status

    def to_dict(self) -> dict:
        """Wire shape (camelCase, RFC 3339 start time)."""
        ts = self.advertised_start_time.astimezone(timezone.utc)
        return {
            "id": self.id,
            "meetingId": self.meeting_id,
            "name": self.name,
            "number": self.number,
            "visible": self.visible,
            "advertisedStartTime": ts.isoformat().replace("+00:00", "Z"),
            "status": self.status.value,
        }


@dataclass
class ListFilter:
    # visible=False means "no constraint", not "hidden only"
    meeting_ids: list[int] = field(default_factory=list)
    visible: bool = False


@dataclass
class OrderBy:
    attribute_name: str = ""
    direction: str = "ASC"
