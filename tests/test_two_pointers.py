import pytest
from hypothesis import given, strategies as st

from arraykit.two_pointers import (
    max_area,
    merge_sorted,
    remove_duplicates,
    three_sum,
    trap,
    two_sum_sorted,
)

heights = st.lists(st.integers(min_value=0, max_value=100), max_size=30)


def test_max_area_worked_example():
    assert max_area([1, 8, 6, 2, 5, 4, 8, 3, 7]) == 49


@given(st.integers(min_value=0, max_value=100), st.integers(min_value=0, max_value=100))
def test_max_area_two_lines(a, b):
    assert max_area([a, b]) == min(a, b)


@given(heights)
def test_max_area_symmetric_and_bounded(height):
    result = max_area(height)
    assert result == max_area(list(reversed(height)))
    if len(height) >= 2:
        assert result >= min(height[0], height[-1]) * (len(height) - 1)
        assert result <= max(height) * (len(height) - 1)


def test_three_sum_worked_example():
    assert three_sum([-1, 0, 1, 2, -1, -4]) == [[-1, -1, 2], [-1, 0, 1]]


@given(st.lists(st.integers(min_value=-10, max_value=10), max_size=20))
def test_three_sum_invariants(nums):
    result = three_sum(nums)
    assert result == sorted(result)
    assert len({tuple(t) for t in result}) == len(result)
    for triple in result:
        assert sum(triple) == 0
        assert triple == sorted(triple)
        for value in set(triple):
            assert triple.count(value) <= nums.count(value)


@given(st.lists(st.integers(), max_size=2))
def test_three_sum_too_short(nums):
    assert three_sum(nums) == []


def test_three_sum_leaves_input_alone():
    nums = [3, -3, 0, 1]
    three_sum(nums)
    assert nums == [3, -3, 0, 1]


def test_two_sum_sorted_worked_example():
    assert two_sum_sorted([2, 7, 11, 15], 9) == (1, 2)


@given(
    st.lists(st.integers(min_value=-50, max_value=50), min_size=2, max_size=20).map(sorted),
    st.data(),
)
def test_two_sum_sorted_finds_a_valid_pair(numbers, data):
    a, b = sorted(data.draw(st.lists(st.sampled_from(range(len(numbers))), min_size=2, max_size=2, unique=True)))
    target = numbers[a] + numbers[b]
    i, j = two_sum_sorted(numbers, target)
    assert 1 <= i <= j <= len(numbers)
    assert numbers[i - 1] + numbers[j - 1] == target


def test_two_sum_sorted_missing_pair():
    with pytest.raises(ValueError):
        two_sum_sorted([1, 2, 3], 100)
    with pytest.raises(ValueError):
        two_sum_sorted([], 0)


@given(st.lists(st.integers(min_value=-20, max_value=20), max_size=30).map(sorted))
def test_remove_duplicates(nums):
    expected = sorted(set(nums))
    original_length = len(nums)
    count = remove_duplicates(nums)
    assert count == len(expected)
    assert nums[:count] == expected
    assert len(nums) == original_length


def test_trap_worked_example():
    assert trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6


@given(heights)
def test_trap_monotone_holds_nothing(height):
    assert trap(sorted(height)) == trap([])
    assert trap(sorted(height, reverse=True)) == trap([])


@given(heights)
def test_trap_symmetric_and_bounded(height):
    result = trap(height)
    assert result == trap(list(reversed(height)))
    if height:
        assert result <= (max(height) - min(height)) * len(height)


@given(
    st.lists(st.integers(min_value=-100, max_value=100), max_size=20).map(sorted),
    st.lists(st.integers(min_value=-100, max_value=100), max_size=20).map(sorted),
)
def test_merge_sorted(a, b):
    nums1 = a + [0] * len(b)
    merge_sorted(nums1, len(a), b, len(b))
    assert nums1 == sorted(a + b)


def test_merge_sorted_rejects_short_buffer():
    with pytest.raises(ValueError):
        merge_sorted([1, 2], 2, [3], 1)