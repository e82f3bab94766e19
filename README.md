# dsadrills

Short solutions to classic recursion and array exercises. Each one is a plain
Python function that takes ordinary values (integers, strings, sequences) and
returns a result; invalid input raises `ValueError`.

## Installation

```
pip install .
```

## Modules

- `dsadrills.recursion`: `factorial`, `fibonacci`, `digit_sum`, `power`
  (repeated squaring) and `power_linear`, `render_elements`, `max_element`,
  `array_sum`, `mth_summation` (repeated summation of the first n naturals),
  `is_palindrome_number`, `remove_occurrences`, `increasing_sequence`,
  `k_multiples`, `alternating_sum` and `gcd`.
- `dsadrills.recursion_problems`: `armstrong_sum` and `is_armstrong`,
  `frog_min_cost` (least cost for a frog jumping one or two stones),
  `contains`, `count_grid_paths` (right/down paths across a grid),
  `subsequences`, `subset_sums`, `pattern` (down by five past zero and back
  up) and `is_prime`.
- `dsadrills.arrays`: `min_max`, `reversed_array`, `second_largest` and
  `second_smallest` (both return `None` when no such value exists),
  `is_sorted`, `remove_duplicates` for sorted data, `left_rotate` and
  `left_rotate_by`, `linear_search` (index or `None`), `move_zeros_to_end`,
  and `sorted_union` and `sorted_intersection` of sorted sequences.
- `dsadrills.array_algorithms`: `missing_number`, `max_consecutive_ones`,
  `single_number`, `longest_subarray_with_sum`, `has_pair_with_sum` and
  `pair_indices_with_sum`, `sort_zeros_ones_twos` (Dutch national flag),
  `majority_element` (Moore voting), `max_subarray_sum` and
  `max_subarray_bounds` (Kadane), and `rearrange_by_sign` and
  `rearrange_alternating`.

Functions that return arrays return new lists; the input is never modified.

## Example

```python
from dsadrills.recursion import factorial, gcd
from dsadrills.recursion_problems import count_grid_paths, is_prime
from dsadrills.arrays import sorted_union
from dsadrills.array_algorithms import max_subarray_sum

factorial(5)                          # 120
gcd(12, 18)                           # 6
count_grid_paths(3, 3)                # 6
is_prime(13)                          # True
sorted_union([1, 2, 3], [2, 3, 4])    # [1, 2, 3, 4]
max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])  # 6
```

## What it does not do

The package is a library only. It has no command-line program and does not
read numbers from standard input; call the functions from your own code.

## Running the tests

```
pip install .[test]
pytest
```