from __future__ import annotations

import logging
import sqlite3
import threading
from datetime import datetime, timezone
from typing import Callable, Optional

from ..db import Store
from ..domain.models import CatalogKind, ListFilter, OrderBy, Record
from ..errors import NotFound, QueryExecutionError, ScanError, SeedError
from . import queries
from .query_builder import apply_filter, apply_order_by
from .row_mapper import scan_rows
from .seed import seed_catalog

_log = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CatalogRepo:
    """
    Read access to one catalog table (races or sports).

    list()/get() issue exactly one SELECT each. init() seeds demonstration
    data once per instance, however many threads call it.
    """

    def __init__(
        self,
        kind: CatalogKind,
        store: Store,
        seed: Optional[Callable[[], object]] = None,
        clock: Callable[[], datetime] = utc_now,
        logger: Optional[logging.Logger] = None,
    ):
        self.kind = kind
        self.store = store
        self.clock = clock
        self.log = logger or _log
        self._seed = seed or self._seed_store
        self._queries = queries.get_queries(kind)
        self._init_lock = threading.Lock()
        self._init_done = False
        self._init_error: Optional[BaseException] = None

    def _seed_store(self) -> int:
        with self.store.connect() as conn:
            return seed_catalog(self.kind, conn)

    def init(self) -> None:
        with self._init_lock:
            if not self._init_done:
                try:
                    self._seed()
                except Exception as e:
                    self._init_error = e
                    self.log.error("seeding %s failed: %s", self.kind.name, e)
                finally:
                    self._init_done = True
        if self._init_error is not None:
            raise SeedError(f"seeding {self.kind.name} failed: {self._init_error}") from self._init_error

    def _query(self, sql: str, args: list) -> list[Record]:
        try:
            rows = self.store.query(sql, args)
        except (sqlite3.Error, OSError) as e:
            err = QueryExecutionError(f"unexpected error in call to database query: {e}")
            self.log.error("%s", err, exc_info=e)
            raise err from e
        try:
            return scan_rows(rows, self.clock())
        except ScanError as e:
            self.log.error("%s", e)
            raise

    def list(self, flt: Optional[ListFilter] = None, order: Optional[OrderBy] = None) -> list[Record]:
        query, args = apply_filter(self._queries[queries.LIST], flt, self.log)
        query = apply_order_by(query, order, self.log)
        return self._query(query, args)

    def get(self, record_id: int) -> Record:
        records = self._query(self._queries[queries.GET], [record_id])
        if len(records) != 1:
            raise NotFound(self.kind.singular, record_id)
        return records[0]
