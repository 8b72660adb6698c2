from __future__ import annotations

import logging

import uvicorn

from .config import settings
from .entrypoints.fastapi_app import create_app

app = create_app()


def _configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(levelname)s:%(name)s:%(message)s",
    )

    # Quiet the usual offenders
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def run() -> None:
    _configure_logging()
    logging.getLogger(__name__).info("MoverHub listening on %s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
