from __future__ import annotations

from fastapi import APIRouter, HTTPException

from ..errors import CatalogError, NotFound
from ..logs import OperationLogContext
from ..schemas import GetRequest, ListRequest
from ..services.catalog_svc import CatalogService


def build_router(service: CatalogService) -> APIRouter:
    """RPC endpoints for one catalog, e.g. POST /racing.Racing/ListRaces."""
    kind = service.kind
    router = APIRouter()

    @router.post(kind.list_path, name=kind.list_method)
    def rpc_list(body: ListRequest):
        log = OperationLogContext(kind.list_method.upper())
        log.set_payload(body.to_payload())
        try:
            out = service.list_records(body)
            log.set_result_count(len(out[kind.name]))
            log.write("OK")
            return out
        except CatalogError as e:
            log.write("ERROR", str(e))
            raise HTTPException(status_code=500, detail=str(e))

    @router.post(kind.get_path, name=kind.get_method)
    def rpc_get(body: GetRequest):
        log = OperationLogContext(kind.get_method.upper())
        log.set_entity(kind.singular, body.id)
        try:
            out = service.get_record(body)
            log.write("OK")
            return out
        except NotFound as e:
            log.write("NOT_FOUND", str(e))
            raise HTTPException(status_code=404, detail=str(e))
        except CatalogError as e:
            log.write("ERROR", str(e))
            raise HTTPException(status_code=500, detail=str(e))

    return router
