"""Two-pointer algorithms over integer sequences."""

import heapq
from collections.abc import MutableSequence, Sequence


def max_area(height: Sequence[int]) -> int:
    """Largest water area held between two of the given vertical lines."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, (right - left) * min(height[left], height[right]))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """All distinct sorted triples from ``nums`` that sum to zero, in order."""
    ordered = sorted(nums)
    found: set[tuple[int, int, int]] = set()
    for i, first in enumerate(ordered[:-2]):
        j, k = i + 1, len(ordered) - 1
        while j < k:
            total = first + ordered[j] + ordered[k]
            if total == 0:
                found.add((first, ordered[j], ordered[k]))
                j += 1
                k -= 1
            elif total < 0:
                j += 1
            else:
                k -= 1
    return [list(triple) for triple in sorted(found)]


def two_sum_sorted(numbers: Sequence[int], target: int) -> tuple[int, int]:
    """1-based positions of two entries of a sorted sequence adding up to ``target``.

    Raises ValueError when no such pair exists.
    """
    i, j = 0, len(numbers) - 1
    while i <= j:
        total = numbers[i] + numbers[j]
        if total == target:
            return i + 1, j + 1
        if total < target:
            i += 1
        else:
            j -= 1
    raise ValueError(f"no pair sums to {target}")


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted sequence in place so its first entries are unique.

    Returns how many unique entries now lead the sequence.
    """
    if not nums:
        return 0
    count = 1
    for value in nums[1:]:
        if value != nums[count - 1]:
            nums[count] = value
            count += 1
    return count


def trap(height: Sequence[int]) -> int:
    """Units of rain water trapped by an elevation map."""
    left, right = 0, len(height) - 1
    left_max = right_max = 0
    water = 0
    while left < right:
        left_max = max(left_max, height[left])
        right_max = max(right_max, height[right])
        if left_max < right_max:
            water += left_max - height[left]
            left += 1
        else:
            water += right_max - height[right]
            right -= 1
    return water


def merge_sorted(nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` entries of ``nums2`` into ``nums1`` in place.

    ``nums1`` holds ``m`` sorted entries followed by room for ``n`` more.
    """
    if m < 0 or n < 0 or len(nums1) < m + n or len(nums2) < n:
        raise ValueError("sizes do not fit the given sequences")
    nums1[: m + n] = list(heapq.merge(nums1[:m], nums2[:n]))