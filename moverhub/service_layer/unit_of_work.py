# moverhub/service_layer/unit_of_work.py
from __future__ import annotations

import asyncio
from typing import Protocol

from ..adapters.repos.movers import InMemoryMoverRepository


class UnitOfWork(Protocol):
    movers: InMemoryMoverRepository

    async def __aenter__(self) -> "UnitOfWork": ...
    async def __aexit__(self, exc_type, exc, tb) -> None: ...


class InMemoryUnitOfWork:
    """
    Owns the mover store and serializes access to it.

    Every use case runs inside ``async with uow:`` so the read-modify-write
    of a review can't interleave with another request.
    """

    def __init__(self, movers: InMemoryMoverRepository | None = None) -> None:
        self.movers = movers if movers is not None else InMemoryMoverRepository()
        self._lock = asyncio.Lock()

    async def __aenter__(self) -> "InMemoryUnitOfWork":
        await self._lock.acquire()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self._lock.release()

    @property
    def locked(self) -> bool:
        return self._lock.locked()
