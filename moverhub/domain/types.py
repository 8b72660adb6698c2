# moverhub/domain/types.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Mover:
    """
    A moving company tracked by the service.

    Mutable on purpose: reviews update rating/jobs_done in place.
    """

    id: int
    name: str
    rating: float
    phone_number: str
    jobs_done: int = 0
