from __future__ import annotations

import logging
from typing import Any, Optional

from ..domain.models import CatalogKind
from ..errors import CatalogError
from ..repository.catalog_repo import CatalogRepo
from ..schemas import GetRequest, ListRequest

_log = logging.getLogger(__name__)


class CatalogService:
    """RPC handlers for one catalog: request models in, response dicts out."""

    def __init__(self, kind: CatalogKind, repo: CatalogRepo, logger: Optional[logging.Logger] = None):
        self.kind = kind
        self.repo = repo
        self.log = logger or _log

    def list_records(self, request: ListRequest) -> dict[str, Any]:
        flt = request.filter.to_domain() if request.filter is not None else None
        order = request.order.to_domain() if request.order is not None else None
        try:
            records = self.repo.list(flt, order)
        except CatalogError as e:
            self.log.error("unexpected error occurred in call to repo list: %s", e)
            raise
        self.log.debug("%d %s were returned to the caller", len(records), self.kind.name)
        return {self.kind.name: [r.to_dict() for r in records]}

    def get_record(self, request: GetRequest) -> dict[str, Any]:
        try:
            record = self.repo.get(request.id)
        except CatalogError as e:
            self.log.error("unexpected error occurred in call to repo get: %s", e)
            raise
        return {self.kind.singular: record.to_dict()}
