# bisectkit

Small, dependency-free helpers built on one idea: binary search over a
monotone yes/no question. The package covers the classic searches and a set
of "binary search on the answer" problems. It needs Python 3.10 or later.

## Installation

```
pip install bisectkit
```

For the test suite:

```
pip install "bisectkit[test]"
pytest
```

## Modules

### `bisectkit.searching`

- `first_true(lo, hi, predicate, default=None)` /
  `last_true(lo, hi, predicate, default=None)`: the generic searches the
  other modules are built on. They return the first (or last) integer in
  `[lo, hi]` where `predicate` holds, or `default` when it holds nowhere.
  `first_true` expects a predicate that is false and then true;
  `last_true` one that is true and then false.
- `lower_bound(values, x)` / `upper_bound(values, x)`: the index of the first
  element not less than (greater than) `x` in a sorted sequence, or
  `len(values)` when there is none.
- `rotation_point(values)`: the index of the smallest element of a rotated
  ascending sequence; 0 when it is not rotated.
- `bitonic_peak(values)`: the index of the maximum of a strictly
  increasing-then-decreasing sequence.
- `bitonic_find(values, x)`: the indices of `x` in a bitonic sequence, the one
  in the rising part first and the one in the falling part second; an empty
  list when `x` is absent.

`rotation_point` and `bitonic_peak` raise `ValueError` for an empty sequence.

```python
from bisectkit.searching import lower_bound, bitonic_peak

lower_bound([1, 3, 3, 7], 3)      # 1
bitonic_peak([1, 4, 9, 6, 2])     # 2
```

### `bisectkit.allocation`

- `painter_partition(lengths, painters)`: the least time in which the given
  number of painters, each taking a contiguous run of boards and painting one
  unit per second, can cover all boards.
- `array_division(values, parts)`: the smallest possible maximum sum when a
  sequence is split into at most `parts` contiguous pieces.
- `factory_time(machine_times, target)`: the least time for machines working
  in parallel, machine `i` needing `machine_times[i]` seconds per product, to
  make `target` products.

`painter_partition` and `array_division` raise `ValueError` when asked for
fewer than one painter or part; `factory_time` does so for an empty list of
machines or a machine time that is not positive.

### `bisectkit.gaps`

- `min_max_gap(values, insertions)`: the smallest largest gap between
  ascending values that can be reached by inserting up to `insertions` new
  points. Candidate gaps run from 1 to `MAX_GAP` (10**9).
- `max_min_distance(positions, count)`: the largest minimum distance at which
  `count` items can be placed on the given positions (sorted internally).

Both raise `ValueError` when no answer exists in their range, and for a
negative number of insertions or an empty list of positions.

### `bisectkit.kth`

- `kth_pair_sum(first, second, k)`: the k-th smallest (counting from 1) of all
  sums `a + b` with `a` taken from the first sequence and `b` from the second.
- `multiplication_table_median(n)`: the median of the `n × n` multiplication
  table; for an even number of cells, the lower of the two middle values.

Both raise `ValueError` for empty inputs, a `k` outside the number of pairs,
or `n` below 1.

### `bisectkit.windows`

- `longest_ones_with_flips(bits, flips)`: the longest run of ones once at
  most `flips` zeros have been turned into ones.
- `longest_subarray_sum_at_most(values, limit)`: the length of the longest
  contiguous stretch of non-negative values whose sum does not exceed `limit`.
- `count_subarrays_at_most_k_distinct(values, k)`: how many contiguous
  subarrays hold at most `k` distinct values.

```python
from bisectkit.windows import count_subarrays_at_most_k_distinct

count_subarrays_at_most_k_distinct([1, 2, 2, 3], 2)   # 9
```

## What it does not do

bisectkit is a library only. It has no command-line program and does not read
problem input from standard input or files; every function takes Python
sequences and numbers and returns its answer.