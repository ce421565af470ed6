from __future__ import annotations

from fastapi import APIRouter, HTTPException

from ..rpc_client import RpcClient, RpcError
from ..schemas import ListRequest


def build_router(racing: RpcClient, sporting: RpcClient) -> APIRouter:
    """REST endpoints translated onto the racing / sporting RPC services."""
    router = APIRouter(prefix="/v1")

    def _forward(call, *args):
        try:
            return call(*args)
        except RpcError as e:
            raise HTTPException(status_code=e.status_code, detail=e.detail)

    @router.post("/list-races")
    def list_races(body: ListRequest):
        return _forward(racing.list_records, body.to_payload())

    @router.get("/races/{race_id}")
    def get_race(race_id: int):
        return _forward(racing.get_record, race_id)

    @router.post("/list-sports")
    def list_sports(body: ListRequest):
        return _forward(sporting.list_records, body.to_payload())

    @router.get("/sports/{sport_id}")
    def get_sport(sport_id: int):
        return _forward(sporting.get_record, sport_id)

    return router
