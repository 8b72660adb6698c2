# moverhub/entrypoints/api/deps.py
from __future__ import annotations

from fastapi import Header, HTTPException, Request

from ...config import Settings
from ...service_layer.unit_of_work import UnitOfWork


def get_uow(request: Request) -> UnitOfWork:
    # one store per app instance, set up in create_app()
    return request.app.state.uow


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def require_api_key(
    request: Request,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
) -> None:
    # only the /debug routes are guarded; no key configured means open
    api_key = request.app.state.settings.API_KEY
    if api_key:
        if not x_api_key or x_api_key != api_key:
            raise HTTPException(status_code=401, detail="Invalid API key")
