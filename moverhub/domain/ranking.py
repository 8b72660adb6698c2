# moverhub/domain/ranking.py
from __future__ import annotations

from typing import Iterable

from .types import Mover


def rank_key(mover: Mover) -> tuple[float, int]:
    # best rating first, lower id wins ties
    return (-mover.rating, mover.id)


def rank_movers(movers: Iterable[Mover]) -> list[Mover]:
    """
    Display order for a listing.

    Always returns a new list; the caller's sequence keeps its order.
    """
    return sorted(movers, key=rank_key)
