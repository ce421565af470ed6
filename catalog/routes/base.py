from fastapi import APIRouter

from .. import __version__


def build_router(app_name: str) -> APIRouter:
    router = APIRouter()

    @router.get("/health")
    def health():
        return {"status": "ok"}

    @router.get("/version")
    def version():
        return {"app": app_name, "version": __version__}

    return router
