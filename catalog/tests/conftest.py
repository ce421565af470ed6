import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from catalog.db import Store  # noqa: E402
from catalog.domain.models import RACING, SPORTING  # noqa: E402
from catalog.repository.catalog_repo import CatalogRepo  # noqa: E402
from catalog.repository.queries import insert_sql, table_ddl  # noqa: E402

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)

# id, meeting_id, name, number, visible, advertised_start_time
RACE_ROWS = [
    (1, 5, "North Dakota foes", 3, 0, "2024-06-01T13:00:00Z"),
    (2, 6, "Vermont owls", 1, 1, "2024-06-01T11:00:00Z"),
    (3, 7, "Utah comets", 2, 1, "2024-06-02T09:30:00Z"),
    (4, 5, "Ohio hawks", 4, 1, "2024-06-01T12:00:00Z"),
]


class FakeStore:
    """Store double: returns canned rows or raises, and records the last query."""

    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.calls = []

    def query(self, sql, args=()):
        self.calls.append((sql, list(args)))
        if self.error is not None:
            raise self.error
        return list(self.rows)


def fill(store: Store, kind, rows):
    with store.connect() as conn:
        conn.execute(table_ddl(kind))
        conn.executemany(insert_sql(kind), rows)


@pytest.fixture
def race_store(tmp_path):
    store = Store(str(tmp_path / "racing.db"))
    fill(store, RACING, RACE_ROWS)
    return store


@pytest.fixture
def sport_store(tmp_path):
    store = Store(str(tmp_path / "sporting.db"))
    fill(store, SPORTING, [
        (1, 2, "Vermont Tennis", 1, 1, "2024-06-03T10:00:00Z"),
        (2, 3, "Kansas Golf", 2, 0, "2024-05-30T10:00:00Z"),
    ])
    return store


@pytest.fixture
def races_repo(race_store):
    # seeding is a no-op: the table is already filled
    return CatalogRepo(RACING, race_store, seed=lambda: None, clock=lambda: NOW)


@pytest.fixture
def sports_repo(sport_store):
    return CatalogRepo(SPORTING, sport_store, seed=lambda: None, clock=lambda: NOW)
