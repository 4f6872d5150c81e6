"""Sliding-window algorithms over sequences of integers and strings."""

from collections import Counter
from collections.abc import Sequence


def _count_at_most(weights: Sequence[int], limit: int) -> int:
    """Count contiguous subarrays whose total weight does not exceed ``limit``."""
    if limit < 0:
        return 0
    total = 0
    left = 0
    count = 0
    for right, weight in enumerate(weights):
        total += weight
        while total > limit:
            total -= weights[left]
            left += 1
        count += right - left + 1
    return count


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Length of the longest run of ones after flipping at most ``k`` zeros."""
    if k < 0:
        raise ValueError("k must not be negative")
    left = 0
    zeros = 0
    best = 0
    for right, value in enumerate(nums):
        if value == 0:
            zeros += 1
        while zeros > k:
            if nums[left] == 0:
                zeros -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def count_nice_subarrays(nums: Sequence[int], k: int) -> int:
    """Number of contiguous subarrays holding exactly ``k`` odd numbers."""
    odd_flags = [value % 2 for value in nums]
    return _count_at_most(odd_flags, k) - _count_at_most(odd_flags, k - 1)


def longest_subarray_after_deletion(nums: Sequence[int]) -> int:
    """Longest run of ones left after deleting exactly one element."""
    left = 0
    zeros = 0
    best = 0
    for right, value in enumerate(nums):
        if value == 0:
            zeros += 1
        while zeros > 1:
            if nums[left] == 0:
                zeros -= 1
            left += 1
        best = max(best, right - left)
    return best


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Length of the shortest subarray whose sum is at least ``target``, or 0."""
    best: int | None = None
    total = 0
    left = 0
    for right, value in enumerate(nums):
        total += value
        while total >= target and left <= right:
            width = right - left + 1
            best = width if best is None else min(best, width)
            total -= nums[left]
            left += 1
    return 0 if best is None else best


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(s):
        previous = last_seen.get(char, -1)
        if previous >= start:
            start = previous + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def character_replacement(s: str, k: int) -> int:
    """Longest substring of one repeated letter after at most ``k`` replacements."""
    freqs: Counter[str] = Counter()
    best = 0
    left = 0
    max_freq = 0
    for right, char in enumerate(s):
        freqs[char] += 1
        max_freq = max(max_freq, freqs[char])
        while (right - left + 1) - max_freq > k:
            freqs[s[left]] -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def count_subarrays_with_sum(nums: Sequence[int], goal: int) -> int:
    """Number of contiguous subarrays of a binary sequence summing to ``goal``."""
    return _count_at_most(nums, goal) - _count_at_most(nums, goal - 1)


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one later sale, or 0."""
    profit = 0
    lowest: int | None = None
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        profit = max(profit, price - lowest)
    return profit