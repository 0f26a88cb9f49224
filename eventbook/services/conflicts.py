"""Service for detecting scheduling conflicts between intervals."""

from __future__ import annotations

from collections.abc import Iterable

from eventbook.domain.models import Interval


def intervals_overlap(first: Interval, second: Interval) -> bool:
    """Return True when two half-open intervals share any instant.

    Overlap rule: first.begin < second.end AND second.begin < first.end.
    Exact boundary touches (end == begin) are NOT considered overlaps, while
    identical bounds and containment in either direction are.
    """
    return first.begin < second.end and second.begin < first.end


def overlaps(candidate: Interval, existing: Iterable[Interval]) -> bool:
    """Return True if *candidate* overlaps at least one of *existing*.

    The caller is responsible for passing only intervals of the candidate's
    owner and, on update, for leaving out the interval being replaced.
    """
    return any(intervals_overlap(candidate, interval) for interval in existing)
