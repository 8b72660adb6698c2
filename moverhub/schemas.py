from pydantic import BaseModel, Field, field_serializer

from .domain.rating import display_rating
from .domain.types import Mover


class MoverIn(BaseModel):
    # ids and counters must arrive as JSON integers, not "5" or 5.0
    id: int = Field(..., strict=True)
    name: str
    rating: float = Field(0.0, allow_inf_nan=False)
    telephone_number: str
    jobs_done: int = Field(0, ge=0, strict=True)

    def to_domain(self) -> Mover:
        return Mover(
            id=self.id,
            name=self.name,
            rating=self.rating,
            phone_number=self.telephone_number,
            jobs_done=self.jobs_done,
        )


class MoverOut(BaseModel):
    id: int
    name: str
    rating: float
    telephone_number: str
    jobs_done: int

    @field_serializer("rating")
    def _round_rating(self, rating: float) -> float:
        # stored value keeps full precision
        return display_rating(rating)

    @classmethod
    def from_domain(cls, m: Mover) -> "MoverOut":
        return cls(
            id=m.id,
            name=m.name,
            rating=m.rating,
            telephone_number=m.phone_number,
            jobs_done=m.jobs_done,
        )


class ReviewIn(BaseModel):
    rating: float = Field(..., allow_inf_nan=False)


class MessageOut(BaseModel):
    message: str
