"""Tests for the overlap detector."""

from datetime import datetime, timezone
from itertools import permutations

import pytest

from eventbook.domain.models import Interval
from eventbook.services.conflicts import intervals_overlap, overlaps


def at(hour: int, minute: int = 0) -> datetime:
    return datetime(2026, 3, 2, hour, minute, tzinfo=timezone.utc)


def make_interval(begin: datetime, end: datetime) -> Interval:
    return Interval(owner_id="owner", begin=begin, end=end)


def test_no_overlap():
    """Disjoint intervals should not overlap."""
    existing = [make_interval(at(8), at(9))]
    assert overlaps(make_interval(at(10), at(11)), existing) is False


def test_partial_overlap():
    existing = [make_interval(at(9), at(10, 30))]
    assert overlaps(make_interval(at(10), at(11)), existing) is True


def test_exact_boundary_no_conflict():
    """When existing.end == new.begin, there is no overlap (boundary touch)."""
    existing = [make_interval(at(9), at(10))]
    assert overlaps(make_interval(at(10), at(11)), existing) is False


def test_touching_either_side():
    a = make_interval(at(9), at(10))
    b = make_interval(at(10), at(11))
    assert intervals_overlap(a, b) is False
    assert intervals_overlap(b, a) is False


def test_identical_bounds_overlap():
    a = make_interval(at(9), at(10))
    assert overlaps(a, [a]) is True
    assert overlaps(a, [make_interval(at(9), at(10))]) is True


@pytest.mark.parametrize(
    "outer, inner",
    [
        ((at(9), at(12)), (at(10), at(11))),
        ((at(9), at(12)), (at(9), at(10))),
        ((at(9), at(12)), (at(11), at(12))),
    ],
)
def test_containment_overlaps_both_ways(outer, inner):
    big = make_interval(*outer)
    small = make_interval(*inner)
    assert overlaps(small, [big]) is True
    assert overlaps(big, [small]) is True


@pytest.mark.parametrize(
    "first, second",
    [
        ((at(9), at(10)), (at(9, 30), at(11))),
        ((at(9), at(10)), (at(10), at(11))),
        ((at(9), at(13)), (at(10), at(11))),
        ((at(9), at(10)), (at(12), at(13))),
        ((at(9), at(10)), (at(8), at(9, 1))),
    ],
)
def test_symmetry(first, second):
    a = make_interval(*first)
    b = make_interval(*second)
    assert overlaps(a, [b]) == overlaps(b, [a])


def test_empty_existing_never_overlaps():
    assert overlaps(make_interval(at(9), at(10)), []) is False


def test_result_independent_of_order():
    candidate = make_interval(at(10), at(11))
    existing = [
        make_interval(at(8), at(9)),
        make_interval(at(10, 30), at(12)),
        make_interval(at(11), at(12)),
    ]
    results = {overlaps(candidate, list(order)) for order in permutations(existing)}
    assert results == {True}

    no_match = existing[:1] + existing[2:]
    results = {overlaps(candidate, list(order)) for order in permutations(no_match)}
    assert results == {False}


def test_accepts_any_iterable():
    candidate = make_interval(at(10), at(11))
    assert overlaps(candidate, (i for i in [make_interval(at(10, 59), at(12))])) is True
