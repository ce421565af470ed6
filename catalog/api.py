"""
FastAPI app entry points.

  uvicorn catalog.api:racing_app    RPC service for races
  uvicorn catalog.api:sporting_app  RPC service for sports
  uvicorn catalog.api:app           REST gateway in front of both
"""
from __future__ import annotations

import logging

from fastapi import FastAPI

from .config import Settings, load_settings
from .db import Store
from .domain.models import RACING, SPORTING, CatalogKind
from .logs import configure_logging
from .repository.catalog_repo import CatalogRepo
from .routes import base as base_routes
from .routes import catalog_rpc as rpc_routes
from .routes import gateway as gateway_routes
from .rpc_client import RpcClient
from .services.catalog_svc import CatalogService

logger = logging.getLogger(__name__)


def create_service_app(
    kind: CatalogKind,
    repo: CatalogRepo | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    settings = settings or load_settings()
    repo = repo or CatalogRepo(kind, Store(settings.db_path_for(kind.name)))
    app_name = f"{kind.package.split('.')[0]}-rpc"
    app = FastAPI(title=app_name, version="0.1.0")
    app.state.repo = repo

    @app.on_event("startup")
    def on_startup():
        configure_logging(settings.log_level)
        repo.init()
        logger.info("%s service ready (%s)", kind.package, settings.endpoint_for(kind.name))

    app.include_router(base_routes.build_router(app_name))
    app.include_router(rpc_routes.build_router(CatalogService(kind, repo)))
    return app


def create_gateway_app(
    racing: RpcClient | None = None,
    sporting: RpcClient | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    settings = settings or load_settings()
    racing = racing or RpcClient.from_endpoint(RACING, settings.racing_endpoint, settings.rpc_timeout_seconds)
    sporting = sporting or RpcClient.from_endpoint(SPORTING, settings.sporting_endpoint, settings.rpc_timeout_seconds)
    app = FastAPI(title="catalog-api", version="0.1.0")

    @app.on_event("startup")
    def on_startup():
        configure_logging(settings.log_level)
        logger.info("API gateway ready (%s)", settings.api_endpoint)

    @app.on_event("shutdown")
    def on_shutdown():
        racing.close()
        sporting.close()

    app.include_router(base_routes.build_router("catalog-api"))
    app.include_router(gateway_routes.build_router(racing, sporting))
    return app


racing_app = create_service_app(RACING)
sporting_app = create_service_app(SPORTING)
app = create_gateway_app()
