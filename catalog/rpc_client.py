from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from .domain.models import CatalogKind

_log = logging.getLogger(__name__)


class RpcError(Exception):
    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"{status_code}: {detail}")


class RpcClient:
    """Calls one catalog's RPC endpoints over HTTP."""

    def __init__(self, kind: CatalogKind, http: httpx.Client, logger: Optional[logging.Logger] = None):
        self.kind = kind
        self.http = http
        self.log = logger or _log

    @classmethod
    def from_endpoint(cls, kind: CatalogKind, endpoint: str, timeout: float = 5.0) -> "RpcClient":
        base = endpoint if "://" in endpoint else f"http://{endpoint}"
        return cls(kind, httpx.Client(base_url=base, timeout=timeout))

    def _call(self, path: str, payload: dict) -> dict[str, Any]:
        try:
            res = self.http.post(path, json=payload)
        except httpx.RequestError as e:
            self.log.error("rpc %s unreachable: %s", path, e)
            raise RpcError(503, f"{self.kind.package} unavailable: {e}") from e
        if res.status_code >= 400:
            try:
                detail = res.json().get("detail", res.text)
            except ValueError:
                detail = res.text
            raise RpcError(res.status_code, str(detail))
        return res.json()

    def list_records(self, payload: dict) -> dict[str, Any]:
        return self._call(self.kind.list_path, payload)

    def get_record(self, record_id: int) -> dict[str, Any]:
        return self._call(self.kind.get_path, {"id": record_id})

    def close(self) -> None:
        self.http.close()
