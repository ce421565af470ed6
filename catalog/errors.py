from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog failures."""


class QueryExecutionError(CatalogError):
    """The store rejected or failed to run the assembled query."""


class ScanError(CatalogError):
    """A result row could not be decoded into a record."""


class SeedError(CatalogError):
    """The one-time demonstration seed failed; the cause is chained."""


class NotFound(CatalogError):
    """get() matched zero (or more than one) rows for the id."""

    def __init__(self, kind: str, record_id: int):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} with id {record_id} not found")
