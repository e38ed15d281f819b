# hungarian

A small library for solving square assignment problems with the Hungarian
method. You give it an `n × n` matrix in which entry `[i][j]` is the cost (or
profit) of giving task `j` to worker `i`. It returns the task chosen for each
worker and the total.

## Installation

```
pip install .
```

The package has no runtime dependencies.

## Usage

```python
from hungarian.solver import HungarianAlgorithm

costs = [
    [9, 2, 7, 8],
    [6, 4, 3, 7],
    [5, 8, 1, 8],
    [7, 6, 9, 4],
]

solver = HungarianAlgorithm(costs)
assignment, total = solver.solve()
# assignment[i] is the task given to worker i; total is the summed cost
```

To maximise the total profit instead, call `solve_maximization()`. It returns
the assignment together with the sum of the original matrix entries it picks:

```python
profits = [[5, 2, 1], [1, 4, 3], [3, 1, 2]]
solver = HungarianAlgorithm(profits)
assignment, total = solver.solve_maximization()
```

The matrix must be square and non-empty; anything else raises `ValueError`.
Entries are converted to `float`. A value counts as zero when its absolute
value is below `1e-10`.

### Text output

- `format_matrix()` returns the matrix under a `Cost Matrix:` heading, each
  value right-aligned in eight columns with two decimals.
- `format_assignment(assignment, cost)` returns an `Assignment Result:`
  heading, one `Worker i -> Task j (Cost: c)` line per assigned worker, and a
  final `Total Cost:` line, all amounts with two decimals.
- `print_matrix()` and `print_assignment(assignment, cost)` write that same
  text to standard output and also return it.

## Demo

The package installs a command that solves three sample problems (two
minimum-cost, one maximum-profit) and prints each matrix and result:

```
hungarian-demo
```

The same demo runs with `python -m hungarian.demo`.

## Limitations

- Only square matrices are accepted; rectangular problems are not padded.
- Covering the zeros with lines is done greedily, picking the row or column
  with the most uncovered zeros each time, so the cover is not guaranteed to
  be minimal.

## Running the tests

```
pip install ".[test]"
pytest
```