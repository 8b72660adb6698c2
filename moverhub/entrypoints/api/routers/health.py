# moverhub/entrypoints/api/routers/health.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from ..deps import get_settings, require_api_key
from ....config import Settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/debug/config", dependencies=[Depends(require_api_key)])
def debug_config(settings: Settings = Depends(get_settings)) -> dict[str, Any]:
    return {
        "ENV": settings.ENV,
        "HOST": settings.HOST,
        "PORT": settings.PORT,
        "LOG_LEVEL": settings.LOG_LEVEL,
        "SEED_DEMO": settings.SEED_DEMO,
        "EMPTY_LIST_IS_ERROR": settings.EMPTY_LIST_IS_ERROR,
        "VALIDATE_RATING_ON_CREATE": settings.VALIDATE_RATING_ON_CREATE,
        "API_KEY_SET": bool(settings.API_KEY),
    }
