from __future__ import annotations

from ..domain.models import CatalogKind

LIST = "list"
GET = "get"

_COLUMNS = "id, meeting_id, name, number, visible, advertised_start_time"


def get_queries(kind: CatalogKind) -> dict[str, str]:
    return {
        LIST: f"SELECT {_COLUMNS} FROM {kind.name}",
        GET: f"SELECT {_COLUMNS} FROM {kind.name} WHERE id = ?",
    }


def table_ddl(kind: CatalogKind) -> str:
    return (
        f"CREATE TABLE IF NOT EXISTS {kind.name} ("
        "id INTEGER PRIMARY KEY, "
        "meeting_id INTEGER, "
        "name TEXT, "
        "number INTEGER, "
        "visible INTEGER, "
        "advertised_start_time DATETIME"
        ")"
    )


def insert_sql(kind: CatalogKind) -> str:
    return (
        f"INSERT OR IGNORE INTO {kind.name}({_COLUMNS}) "
        "VALUES(?,?,?,?,?,?)"
    )
