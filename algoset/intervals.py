"""Operations on closed integer intervals given as ``[start, end]`` pairs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching intervals, returning them sorted."""
    merged: list[list[int]] = []
    for start, end in sorted(list(pair) for pair in intervals):
        if merged and merged[-1][1] >= start:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def insert_interval(
    intervals: Iterable[Sequence[int]], new_interval: Sequence[int]
) -> list[list[int]]:
    """Insert ``new_interval`` into sorted disjoint intervals, merging as needed."""
    start, end = new_interval
    before: list[list[int]] = []
    after: list[list[int]] = []
    for current_start, current_end in intervals:
        if after or current_start > end:
            after.append([current_start, current_end])
        elif current_end < start:
            before.append([current_start, current_end])
        else:
            start = min(start, current_start)
            end = max(end, current_end)
    return before + [[start, end]] + after


def erase_overlap_intervals(intervals: Iterable[Sequence[int]]) -> int:
    """Return the fewest intervals to remove so the rest do not overlap."""
    ordered = sorted(list(pair) for pair in intervals)
    if not ordered:
        return 0
    removed = 0
    end = ordered[0][1]
    for next_start, next_end in ordered[1:]:
        if next_start >= end:
            end = next_end
        else:
            removed += 1
            end = min(end, next_end)
    return removed