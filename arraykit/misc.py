"""Assorted sequence algorithms: runs, dynamic programming and intervals."""

from collections.abc import Iterable, Sequence


def longest_consecutive(nums: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers among ``nums``."""
    values = set(nums)
    longest = 0
    for value in values:
        if value - 1 not in values:
            length = 1
            while value + length in values:
                length += 1
            longest = max(longest, length)
    return longest


def rob(nums: Iterable[int]) -> int:
    """Largest total obtainable from ``nums`` without taking two neighbours."""
    before_previous, previous = 0, 0
    for value in nums:
        before_previous, previous = previous, max(previous, before_previous + value)
    return previous


def climb_stairs(n: int) -> int:
    """Number of ways to climb ``n`` steps taking one or two at a time."""
    if n < 0:
        return 0
    ways, next_ways = 1, 1
    for _ in range(n):
        ways, next_ways = next_ways, ways + next_ways
    return ways


def insert_interval(
    intervals: Iterable[Sequence[int]], new_interval: Sequence[int]
) -> list[list[int]]:
    """Insert an interval into sorted, disjoint intervals, merging overlaps."""
    start, end = new_interval
    result: list[list[int]] = []
    for low, high in intervals:
        if high < start:
            result.append([low, high])
        elif low > end:
            result.append([start, end])
            start, end = low, high
        else:
            start = min(low, start)
            end = max(high, end)
    result.append([start, end])
    return result