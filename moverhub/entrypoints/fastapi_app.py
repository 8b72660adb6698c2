# moverhub/entrypoints/fastapi_app.py
from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..config import Settings, settings as default_settings
from ..domain.errors import EmptyCollection, MoverConflict, MoverNotFound, RatingOutOfRange
from ..service_layer.demo_seed import seed_demo
from ..service_layer.unit_of_work import InMemoryUnitOfWork, UnitOfWork
from .api.routers import health, movers

log = logging.getLogger(__name__)


def _register_error_handlers(app: FastAPI) -> None:
    # Domain errors -> status codes. Core code never builds responses.

    @app.exception_handler(RequestValidationError)
    async def _malformed(request: Request, exc: RequestValidationError) -> JSONResponse:
        if any(err.get("loc", ("",))[0] == "path" for err in exc.errors()):
            return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": "Conversion error"})
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Invalid JSON"})

    @app.exception_handler(MoverNotFound)
    async def _not_found(request: Request, exc: MoverNotFound) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": exc.message})

    @app.exception_handler(EmptyCollection)
    async def _empty(request: Request, exc: EmptyCollection) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": exc.message})

    @app.exception_handler(MoverConflict)
    async def _conflict(request: Request, exc: MoverConflict) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"error": exc.message})

    @app.exception_handler(RatingOutOfRange)
    async def _out_of_range(request: Request, exc: RatingOutOfRange) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_417_EXPECTATION_FAILED, content={"error": exc.message})


def create_app(
    uow: UnitOfWork | None = None,
    *,
    app_settings: Settings | None = None,
    seed: bool | None = None,
) -> FastAPI:
    cfg = app_settings or default_settings
    app = FastAPI(title="MoverHub - Moving Company Ratings")

    app.state.settings = cfg
    app.state.uow = uow if uow is not None else InMemoryUnitOfWork()

    do_seed = cfg.SEED_DEMO if seed is None else seed

    @app.on_event("startup")
    async def _startup() -> None:
        if do_seed:
            result = await seed_demo(app.state.uow)
            log.info("demo seed: %s", result)

    _register_error_handlers(app)

    # Routers
    app.include_router(health.router)
    app.include_router(movers.router)

    return app
