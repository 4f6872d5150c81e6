"""Binary-search algorithms over sorted, rotated and monotone sequences."""

from bisect import bisect_left, bisect_right
from collections.abc import Callable, Sequence


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def _find_in_range(nums: Sequence[int], target: int, lo: int, hi: int) -> int:
    """Index of ``target`` within the sorted slice ``nums[lo:hi]``, or -1."""
    index = bisect_left(nums, target, lo, hi)
    if index < hi and nums[index] == target:
        return index
    return -1


def smallest_divisor(nums: Sequence[int], threshold: int) -> int:
    """Smallest divisor keeping the sum of rounded-up quotients within ``threshold``.

    When no divisor up to ``max(nums)`` works, ``max(nums) + 1`` is returned.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    low, high = 1, max(nums)
    while low <= high:
        mid = (low + high) // 2
        if sum(_ceil_div(value, mid) for value in nums) > threshold:
            low = mid + 1
        else:
            high = mid - 1
    return low


def find_min_rotated(nums: Sequence[int]) -> int:
    """Smallest value of a rotated ascending sequence of distinct values."""
    if not nums:
        raise ValueError("nums must not be empty")
    left, right = 0, len(nums) - 1
    while left < right:
        mid = left + (right - left) // 2
        if nums[mid] > nums[mid + 1]:
            return nums[mid + 1]
        if nums[mid] > nums[left]:
            left = mid + 1
        else:
            right = mid
    return nums[0]


def _bouquets(bloom_day: Sequence[int], day: int, k: int) -> int:
    """Bouquets of ``k`` adjacent flowers that can be made on ``day``."""
    made = 0
    run = 0
    for bloom in bloom_day:
        run = run + 1 if bloom <= day else 0
        if run == k:
            made += 1
            run = 0
    return made


def min_days(bloom_day: Sequence[int], m: int, k: int) -> int:
    """Fewest days to wait before ``m`` bouquets of ``k`` adjacent flowers exist.

    Raises ValueError when that many bouquets can never be made.
    """
    if k <= 0:
        raise ValueError("k must be positive")
    if not bloom_day:
        raise ValueError("bloom_day must not be empty")
    low, high = min(bloom_day), max(bloom_day)
    answer: int | None = None
    while low <= high:
        mid = (low + high) // 2
        if _bouquets(bloom_day, mid, k) >= m:
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    if answer is None:
        raise ValueError(f"{m} bouquets of {k} flowers cannot be made")
    return answer


def find_peak_element(nums: Sequence[int]) -> int:
    """Index of an element greater than its neighbours (edges count as lower)."""
    n = len(nums)
    if n <= 1:
        return 0
    left, right = 0, n - 1
    while left <= right:
        mid = left + (right - left) // 2
        if mid == 0:
            return 0 if nums[0] > nums[1] else 1
        if mid == n - 1:
            return n - 1 if nums[n - 1] > nums[n - 2] else n - 2
        if nums[mid - 1] < nums[mid] > nums[mid + 1]:
            return mid
        if nums[mid] < nums[mid - 1]:
            right = mid - 1
        else:
            left = mid + 1
    return 0


def first_bad_version(n: int, is_bad: Callable[[int], bool]) -> int:
    """First version in ``1..n`` for which ``is_bad`` holds.

    Versions are assumed bad from some point on. Raises ValueError when none is.
    """
    low, high = 1, n
    answer: int | None = None
    while low <= high:
        mid = low + (high - low) // 2
        if is_bad(mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    if answer is None:
        raise ValueError(f"no bad version among 1..{n}")
    return answer


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated ascending sequence of distinct values, or -1."""
    if not nums:
        return -1
    left, right = 0, len(nums) - 1
    pivot = 0
    while left < right:
        mid = left + (right - left) // 2
        if nums[mid + 1] < nums[mid]:
            pivot = mid
            break
        if nums[mid] > nums[left]:
            left = mid + 1
        else:
            right = mid
    found = _find_in_range(nums, target, 0, pivot + 1)
    if found != -1:
        return found
    return _find_in_range(nums, target, pivot + 1, len(nums))


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """First and last index of ``target`` in a sorted sequence, or ``(-1, -1)``."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return -1, -1
    return first, bisect_right(nums, target) - 1


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a sorted sequence, or where it would be inserted."""
    return bisect_left(nums, target)


def single_non_duplicate(nums: Sequence[int]) -> int:
    """The one value appearing once in a sorted sequence where all others pair up."""
    if not nums:
        raise ValueError("nums must not be empty")
    left, right = 0, len(nums) - 1
    while left < right:
        mid = left + (right - left) // 2
        if mid % 2 == 1:
            mid -= 1
        if nums[mid] != nums[mid + 1]:
            right = mid
        else:
            left = mid + 2
    return nums[left]


def binary_search(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a sorted sequence, or -1 when it is absent."""
    return _find_in_range(nums, target, 0, len(nums))


def min_eating_speed(piles: Sequence[int], target_hours: int) -> int:
    """Slowest whole eating speed that finishes all ``piles`` within ``target_hours``.

    Raises ValueError when even the fastest useful speed is too slow.
    """
    if not piles:
        raise ValueError("piles must not be empty")
    low, high = 1, max(piles)
    answer: int | None = None
    while low <= high:
        mid = low + (high - low) // 2
        hours = sum(_ceil_div(pile, mid) for pile in piles)
        if hours <= target_hours:
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    if answer is None:
        raise ValueError(f"piles cannot be eaten within {target_hours} hours")
    return answer