# partasks

A collection of small data-parallel computations. Most of them come as a
plain sequential function and a parallel function that splits its input into
`workers` partitions the way a scatter/reduce job would, computes a partial
result for each partition on a thread pool and then combines the partials.
Every parallel function takes `workers` (default 4) and raises `ValueError`
when it is less than 1.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it computes |
| --- | --- |
| `partasks.min_matrix` | minimum of a flat row-major matrix (`linear_min`, `parallel_min`, `random_matrix`) |
| `partasks.find_matrix_min` | minimum of a matrix given as a list of rows, split by bands of rows (`single_find_minimum`, `parallel_find_minimum`, `fill_random_matrix`) |
| `partasks.matrix_min_line` | minimum of every row of a flat matrix (`sequential_row_minima`, `parallel_row_minima`, `min_search`, `random_vector`) |
| `partasks.trapezoid` | composite trapezoidal-rule integral (`sequential_integral`, `parallel_integral`) |
| `partasks.alternations` | number of sign changes between neighbours (`count_alternations`, `count_alternations_signbit`, `parallel_count`, `random_nonzero_values`) |
| `partasks.sentences` | number of sentence endings in a text (`sequential_count`, `parallel_count`, `sample_text`) |
| `partasks.max_element` | maximum of a vector (`parallel_max`, `random_vector`) |
| `partasks.col_sum` | sum of a matrix, columns dealt out round-robin (`sequential_sum`, `parallel_sum`, `random_matrix`, `random_vector`) |
| `partasks.unique_chars` | distinct characters found in only one of two strings (`unique_chars_sequential`, `unique_chars_parallel`, `count_unique`, `distribute_jobs`, `split_comm`, `random_string`) |

## Examples

```python
import math

from partasks.min_matrix import linear_min, parallel_min, random_matrix
from partasks.trapezoid import sequential_integral, parallel_integral
from partasks.unique_chars import unique_chars_sequential, unique_chars_parallel

values = random_matrix(10, 10)
assert parallel_min(values, 10, 10, workers=4) == linear_min(values)

area = sequential_integral(0, 10, 100, math.sin)
assert math.isclose(parallel_integral(0, 10, 100, math.sin, workers=3), area)

assert unique_chars_sequential("apple", "orange") == 6
assert unique_chars_parallel("apple", "orange", workers=4) == 6
```

## Edge cases worth knowing

- `linear_min` and `single_find_minimum` raise `ValueError` on empty input;
  `parallel_min` and `parallel_find_minimum` raise it when a partition is
  left without elements or rows.
- `parallel_max` does not raise on an empty vector or on empty partitions:
  an empty partition contributes the smallest 32-bit integer, which is also
  the result for an empty vector.
- Row minima start from 101, so a row never reports a minimum above 101;
  `parallel_row_minima` raises `ValueError` for a non-empty matrix with fewer
  rows than workers.
- `alternations.parallel_count` counts sign-bit changes, like
  `count_alternations_signbit`, where zero counts as non-negative;
  `count_alternations` ignores zeros.
- `sentences.parallel_count` raises `ValueError` when there are more workers
  than characters in the text.
- Functions that build random inputs use a fresh random generator on every
  call and raise `ValueError` for negative sizes.

## What the package does not do

Partitions run on threads inside a single process; nothing is distributed
across processes or machines, and there is no command-line tool. The package
is a library of functions only.