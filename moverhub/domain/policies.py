# moverhub/domain/policies.py
from __future__ import annotations

from typing import Iterable

from .types import Mover


def creation_conflict(existing: Iterable[Mover], candidate: Mover) -> str | None:
    """
    Returns the conflict reason for a new mover, or None when it can be added.

    Identity (id or name) is checked over the whole store before the phone number.
    """
    movers = list(existing)

    for m in movers:
        if m.id == candidate.id or m.name == candidate.name:
            return "Mover already exists"

    for m in movers:
        if m.phone_number == candidate.phone_number:
            return "Tel. number is occupied"

    return None
