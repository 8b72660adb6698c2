# moverhub/service_layer/movers.py
from __future__ import annotations

import logging

from ..domain.errors import EmptyCollection, MoverConflict, MoverNotFound, RatingOutOfRange
from ..domain.policies import creation_conflict
from ..domain.ranking import rank_movers
from ..domain.rating import apply_review, check_rating
from ..domain.types import Mover
from .unit_of_work import UnitOfWork

log = logging.getLogger(__name__)


async def list_ranked(uow: UnitOfWork, *, empty_is_error: bool = True) -> list[Mover]:
    async with uow:
        if len(uow.movers) == 0:
            if empty_is_error:
                log.warning("listing requested on an empty store")
                raise EmptyCollection()
            return []
        return rank_movers(uow.movers.snapshot())


async def create_mover(
    uow: UnitOfWork,
    candidate: Mover,
    *,
    validate_rating: bool = False,
) -> Mover:
    """
    Append a caller-built mover after the uniqueness checks.

    The 0..5 rating range is only enforced here when validate_rating is set;
    by default creation trusts the caller's rating.
    """
    async with uow:
        reason = creation_conflict(uow.movers, candidate)
        if reason is not None:
            log.warning("rejecting mover id=%s name=%r: %s", candidate.id, candidate.name, reason)
            raise MoverConflict(reason)

        if validate_rating:
            try:
                check_rating(candidate.rating)
            except RatingOutOfRange:
                log.warning("rejecting mover id=%s: rating %s out of range", candidate.id, candidate.rating)
                raise

        uow.movers.add(candidate)
        log.info("added mover id=%s name=%r", candidate.id, candidate.name)
        return candidate


async def delete_mover(uow: UnitOfWork, mover_id: int) -> Mover:
    async with uow:
        index = uow.movers.find_index_by_id(mover_id)
        if index is None:
            log.warning("delete: mover id=%s not found", mover_id)
            raise MoverNotFound(mover_id)

        removed = uow.movers.remove_at(index)
        log.info("deleted mover id=%s (%d left)", mover_id, len(uow.movers))
        return removed


async def review_mover(uow: UnitOfWork, mover_id: int, rating: float) -> Mover:
    async with uow:
        mover = uow.movers.find_by_id(mover_id)
        if mover is None:
            log.warning("review: mover id=%s not found", mover_id)
            raise MoverNotFound(mover_id)

        try:
            apply_review(mover, rating)
        except RatingOutOfRange:
            log.warning("review: rating %s for mover id=%s out of range", rating, mover_id)
            raise

        log.info("review %.2f for mover id=%s -> rating=%.4f jobs_done=%d", rating, mover_id, mover.rating, mover.jobs_done)
        return mover
