# moverhub/domain/errors.py
from __future__ import annotations


class MoverError(Exception):
    """Base for every failure the core reports to the API layer."""

    message: str = "mover error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


class MoverNotFound(MoverError):
    message = "Mover not found"

    def __init__(self, mover_id: int) -> None:
        super().__init__()
        self.mover_id = mover_id


class RatingOutOfRange(MoverError):
    message = "Provided rate should be in range between 0 and 5"

    def __init__(self, rating: float) -> None:
        super().__init__()
        self.rating = rating


class MoverConflict(MoverError):
    message = "Mover already exists"


class EmptyCollection(MoverError):
    message = "movers list is empty"
