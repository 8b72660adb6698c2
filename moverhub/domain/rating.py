# moverhub/domain/rating.py
from __future__ import annotations

import math

from .errors import RatingOutOfRange
from .types import Mover

RATING_MIN = 0.0
RATING_MAX = 5.0


def check_rating(value: float) -> None:
    if not (RATING_MIN <= value <= RATING_MAX):
        raise RatingOutOfRange(value)


def apply_review(mover: Mover, new_rating: float) -> Mover:
    """
    Fold one review into the mover's running average.

    jobs_done doubles as the sample count, so every past job counts as one
    review at the current average. The record is only touched once the
    rating passes the range check.
    """
    check_rating(new_rating)

    total_jobs = mover.jobs_done
    mover.rating = (mover.rating * float(total_jobs) + new_rating) / (float(total_jobs) + 1)
    mover.jobs_done += 1
    return mover


def display_rating(value: float) -> float:
    # one decimal, halves away from zero; output only
    scaled = abs(value) * 10
    if not math.isfinite(scaled):
        return value
    return math.copysign(math.floor(scaled + 0.5), value) / 10
