# arraykit

A small library of classic algorithms over lists of integers and strings,
grouped by technique. It uses only the standard library.

## Modules

- `arraykit.sliding_window`: `longest_ones`, `count_nice_subarrays`,
  `longest_subarray_after_deletion`, `min_subarray_len`,
  `length_of_longest_substring`, `character_replacement`,
  `count_subarrays_with_sum`, `max_profit`
- `arraykit.two_pointers`: `max_area`, `three_sum`, `two_sum_sorted`,
  `remove_duplicates`, `trap`, `merge_sorted`
- `arraykit.searching`: `binary_search`, `search_insert`, `search_range`,
  `search_rotated`, `find_min_rotated`, `find_peak_element`,
  `single_non_duplicate`, `first_bad_version`, `smallest_divisor`,
  `min_days`, `min_eating_speed`
- `arraykit.misc`: `longest_consecutive`, `rob`, `climb_stairs`,
  `insert_interval`

## Examples

```python
from arraykit.sliding_window import longest_ones, length_of_longest_substring
from arraykit.two_pointers import trap, three_sum, two_sum_sorted
from arraykit.searching import search_range, first_bad_version
from arraykit.misc import insert_interval, climb_stairs

longest_ones([1, 1, 1, 0, 0, 0, 1, 1, 1, 1, 0], 2)     # 6
length_of_longest_substring("abcabcbb")                # 3
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])             # 6
three_sum([-1, 0, 1, 2, -1, -4])                       # [[-1, -1, 2], [-1, 0, 1]]
two_sum_sorted([2, 7, 11, 15], 9)                      # (1, 2)
search_range([5, 7, 7, 8, 8, 10], 8)                   # (3, 4)
search_range([5, 7, 7, 8, 8, 10], 6)                   # (-1, -1)
first_bad_version(5, lambda version: version >= 4)     # 4
insert_interval([[1, 3], [6, 9]], [2, 5])              # [[1, 5], [6, 9]]
climb_stairs(5)                                        # 8
```

## Behaviour worth knowing

- `first_bad_version(n, is_bad)` takes the check as a callable and searches
  versions `1..n`.
- Where no answer exists, these functions raise `ValueError`:
  `two_sum_sorted` (no pair), `first_bad_version` (no bad version),
  `min_days` (the bouquets can never be made), `min_eating_speed` (no speed
  is fast enough). `min_days`, `min_eating_speed`, `smallest_divisor`,
  `find_min_rotated` and `single_non_duplicate` also raise `ValueError` on
  an empty input, and `min_days` on a non-positive `k`.
- `smallest_divisor` returns `max(nums) + 1` when no divisor up to
  `max(nums)` keeps the sum within the threshold.
- `binary_search` and `search_rotated` return `-1` for a missing target;
  `search_insert` returns the insertion index.
- `min_subarray_len` returns `0` when no subarray reaches the target.
- `longest_ones` raises `ValueError` for a negative `k`.
- `remove_duplicates` compacts a sorted list in place and returns how many
  unique values now lead it. `merge_sorted(nums1, m, nums2, n)` writes the
  merged result into `nums1` and returns `None`; it raises `ValueError` when
  the sizes do not fit the lists.

## Running the tests

Install the test extra and run pytest:

```
pip install -e ".[test]"
pytest
```