# moverhub/adapters/repos/movers.py
from __future__ import annotations

from typing import Iterable, Iterator

from ...domain.types import Mover


class InMemoryMoverRepository:
    """
    Ordered, process-local store of movers.

    Insertion order is the canonical order; nothing here sorts. Lookups are
    linear scans and the first match wins when ids repeat.
    """

    def __init__(self, movers: Iterable[Mover] | None = None):
        self._movers: list[Mover] = list(movers or [])

    def __len__(self) -> int:
        return len(self._movers)

    def __iter__(self) -> Iterator[Mover]:
        return iter(self._movers)

    def all(self) -> list[Mover]:
        # live list; callers must not reorder it
        return self._movers

    def snapshot(self) -> list[Mover]:
        return list(self._movers)

    def add(self, mover: Mover) -> Mover:
        self._movers.append(mover)
        return mover

    def remove_at(self, index: int) -> Mover:
        return self._movers.pop(index)

    def find_by_id(self, mover_id: int) -> Mover | None:
        for m in self._movers:
            if m.id == mover_id:
                return m
        return None

    def find_index_by_id(self, mover_id: int) -> int | None:
        for index, m in enumerate(self._movers):
            if m.id == mover_id:
                return index
        return None
