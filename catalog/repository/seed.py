from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone
from sqlite3 import Connection
from typing import Optional

from ..domain.models import CatalogKind
from .queries import insert_sql, table_ddl

SEED_COUNT = 100

_RACE_PLACES = [
    "North Dakota", "Rhode Island", "Vermont", "Nevada", "Oregon", "Kansas",
    "Maine", "Utah", "Delaware", "Montana", "Ohio", "Georgia",
]
_RACE_NOUNS = ["foes", "rebels", "giants", "wizards", "owls", "horses", "comets", "hawks"]
_SPORTS = ["Football", "Tennis", "Cricket", "Basketball", "Rugby", "Golf", "Hockey", "Boxing"]


def _demo_name(kind: CatalogKind, rng: random.Random) -> str:
    if kind.name == "sports":
        return f"{rng.choice(_RACE_PLACES)} {rng.choice(_SPORTS)}"
    return f"{rng.choice(_RACE_PLACES)} {rng.choice(_RACE_NOUNS)}"


def demo_rows(kind: CatalogKind, rng: random.Random, now: datetime, count: int = SEED_COUNT):
    window = timedelta(days=3).total_seconds()
    start_from = now - timedelta(days=1)
    for i in range(1, count + 1):
        start = start_from + timedelta(seconds=rng.uniform(0, window))
        yield (
            i,
            rng.randint(1, 10),
            _demo_name(kind, rng),
            rng.randint(1, 12),
            rng.randint(0, 1),
            start.astimezone(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z"),
        )


def seed_catalog(
    kind: CatalogKind,
    conn: Connection,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> int:
    """Create the table and insert demonstration records; existing ids are left alone."""
    rng = rng or random.Random()
    now = now or datetime.now(timezone.utc)
    conn.execute(table_ddl(kind))
    rows = list(demo_rows(kind, rng, now))
    conn.execute("BEGIN")
    try:
        conn.executemany(insert_sql(kind), rows)
        conn.execute("COMMIT")
    except Exception:
        conn.execute("ROLLBACK")
        raise
    return len(rows)
