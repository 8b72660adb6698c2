import pytest

from moverhub.domain.errors import RatingOutOfRange
from moverhub.domain.rating import apply_review, display_rating
from moverhub.domain.types import Mover


def _mover(rating=4.0, jobs_done=0):
    return Mover(id=1, name="Acme", rating=rating, phone_number="+1", jobs_done=jobs_done)


def test_running_average_two_reviews():
    m = _mover(rating=4.0, jobs_done=0)

    out = apply_review(m, 5.0)
    assert out is m
    assert m.rating == 5.0
    assert m.jobs_done == 1

    apply_review(m, 3.0)
    assert m.rating == 4.0
    assert m.jobs_done == 2


@pytest.mark.parametrize("bad", [5.1, -0.1])
def test_out_of_range_leaves_record_untouched(bad):
    m = _mover(rating=4.2, jobs_done=7)
    with pytest.raises(RatingOutOfRange):
        apply_review(m, bad)
    assert m.rating == 4.2
    assert m.jobs_done == 7


@pytest.mark.parametrize("edge", [0.0, 5.0])
def test_bounds_are_inclusive(edge):
    m = _mover(rating=2.5, jobs_done=1)
    apply_review(m, edge)
    assert m.jobs_done == 2


def test_full_precision_is_kept_between_reviews():
    m = _mover(rating=4.6, jobs_done=3780)
    apply_review(m, 5.0)
    assert m.rating == pytest.approx((4.6 * 3780 + 5.0) / 3781)
    assert m.rating != 4.6

    expected = (m.rating * 3781 + 1.0) / 3782
    apply_review(m, 1.0)
    assert m.rating == pytest.approx(expected)


def test_display_rating_rounds_half_away_from_zero():
    assert display_rating(4.600105) == 4.6
    assert display_rating(4.25) == 4.3
    assert display_rating(4.75) == 4.8
    assert display_rating(0.0) == 0.0
    assert display_rating(-1.25) == -1.3


def test_display_rating_passes_huge_values_through():
    assert display_rating(1e308) == 1e308
    assert display_rating(-1e308) == -1e308
