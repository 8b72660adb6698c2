# moverhub/service_layer/demo_seed.py
from __future__ import annotations

from typing import Any

from ..domain.types import Mover
from .unit_of_work import UnitOfWork

# (id, name, rating, phone, jobs_done)
DEMO_MOVERS: list[tuple[int, str, float, str, int]] = [
    (1, "San Francisco MOV", 4.6, "+15615557689", 3780),
    (2, "Rapid Movers", 4.2, "+15617384568", 1240),
    (3, "Reliable Relocations", 4.7, "+14155538692", 2050),
    (4, "City Express Movers", 4.5, "+18025559482", 1870),
    (5, "Pro Mover Co.", 4.8, "+17024457893", 2500),
    (6, "MoveOn Solutions", 4.4, "+19025548765", 1730),
    (7, "All Star Moving", 4.3, "+13125587612", 1290),
    (8, "Swift Relocation", 4.6, "+12026758741", 3100),
    (9, "Speedy Transport", 4.5, "+14027759832", 1980),
    (10, "Premier Movers", 4.7, "+15022556478", 2300),
    (11, "Ace Relocators", 4.3, "+16024457812", 1670),
    (12, "Trusted Movers Co.", 4.6, "+17024459874", 2890),
    (13, "Urban Move", 4.5, "+18024458736", 3200),
    (14, "FastTrack Movers", 4.7, "+13027758495", 2150),
    (15, "Metro Moving Solutions", 4.4, "+14028854721", 1390),
]


def demo_movers() -> list[Mover]:
    return [
        Mover(id=i, name=name, rating=rating, phone_number=phone, jobs_done=jobs)
        for i, name, rating, phone, jobs in DEMO_MOVERS
    ]


async def seed_demo(uow: UnitOfWork) -> dict[str, Any]:
    """
    Idempotent demo seed:
    - adds the demo movers whose id isn't in the store yet
    - safe to run multiple times
    """
    added = 0
    async with uow:
        for m in demo_movers():
            if uow.movers.find_by_id(m.id) is None:
                uow.movers.add(m)
                added += 1

    return {"seeded": added, "total": len(DEMO_MOVERS)}
