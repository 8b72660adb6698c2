# moverhub/entrypoints/api/routers/movers.py
from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ..deps import get_settings, get_uow
from ....config import Settings
from ....schemas import MessageOut, MoverIn, MoverOut, ReviewIn
from ....service_layer import movers as use_cases
from ....service_layer.unit_of_work import UnitOfWork

router = APIRouter(tags=["movers"])


@router.get("/movers", response_model=list[MoverOut])
async def get_movers(
    uow: UnitOfWork = Depends(get_uow),
    settings: Settings = Depends(get_settings),
) -> list[MoverOut]:
    """Movers sorted by rating, best first; equal ratings by id."""
    ranked = await use_cases.list_ranked(uow, empty_is_error=settings.EMPTY_LIST_IS_ERROR)
    return [MoverOut.from_domain(m) for m in ranked]


@router.post("/movers", response_model=MoverOut, status_code=status.HTTP_201_CREATED)
async def add_mover(
    body: MoverIn,
    uow: UnitOfWork = Depends(get_uow),
    settings: Settings = Depends(get_settings),
) -> MoverOut:
    mover = await use_cases.create_mover(
        uow,
        body.to_domain(),
        validate_rating=settings.VALIDATE_RATING_ON_CREATE,
    )
    return MoverOut.from_domain(mover)


@router.delete("/movers/{mover_id}", response_model=MessageOut)
async def delete_mover(mover_id: int, uow: UnitOfWork = Depends(get_uow)) -> MessageOut:
    await use_cases.delete_mover(uow, mover_id)
    return MessageOut(message="Mover deleted successfully")


@router.post("/movers/{mover_id}/review", response_model=MoverOut)
async def review_mover(
    mover_id: int,
    body: ReviewIn,
    uow: UnitOfWork = Depends(get_uow),
) -> MoverOut:
    """Fold a customer's rating into the mover's running average."""
    mover = await use_cases.review_mover(uow, mover_id, body.rating)
    return MoverOut.from_domain(mover)
