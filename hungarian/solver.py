"""Assignment-problem solver based on the Hungarian method."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence

_ZERO_TOLERANCE = 1e-10

Matrix = list[list[float]]


def _is_zero(value: float) -> bool:
    return abs(value) < _ZERO_TOLERANCE


class HungarianAlgorithm:
    """Solves square assignment problems for minimum cost or maximum profit.

    ``cost_matrix[i][j]`` is the cost of giving task ``j`` to worker ``i``.
    """

    def __init__(self, cost_matrix: Sequence[Sequence[float]]) -> None:
        matrix = [[float(value) for value in row] for row in cost_matrix]
        size = len(matrix)
        if size == 0 or any(len(row) != size for row in matrix):
            raise ValueError("Cost matrix must be square and non-empty")
        self.matrix: Matrix = matrix
        self.size = size

    def solve(self) -> tuple[list[int], float]:
        """Return the minimum-cost assignment and its total cost.

        ``assignment[i]`` is the task given to worker ``i``.
        """
        return self._run(self.matrix)

    def solve_maximization(self) -> tuple[list[int], float]:
        """Return the maximum-profit assignment and its total profit."""
        max_value = max(max(row) for row in self.matrix)
        min_matrix = [[max_value - value for value in row] for row in self.matrix]
        assignment, _ = self._run(min_matrix)
        return assignment, self._total(self.matrix, assignment)

    def format_matrix(self) -> str:
        """Render the cost matrix as text."""
        return "\n".join(self._matrix_lines()) + "\n\n"

    def format_assignment(self, assignment: Sequence[int], cost: float) -> str:
        """Render an assignment and its total cost as text."""
        return "\n".join(self._assignment_lines(assignment, cost)) + "\n"

    def print_matrix(self) -> str:
        """Write the cost matrix to standard output and return the text written."""
        text = self.format_matrix()
        sys.stdout.write(text)
        sys.stdout.flush()
        return text

    def print_assignment(self, assignment: Sequence[int], cost: float) -> str:
        """Write an assignment and its total cost to standard output.

        Returns the text written.
        """
        text = self.format_assignment(assignment, cost)
        sys.stdout.write(text)
        sys.stdout.flush()
        return text

    # -- internals -----------------------------------------------------------

    def _matrix_lines(self) -> Iterator[str]:
        yield "Cost Matrix:"
        for row in self.matrix:
            yield "".join(f"{value:8.2f} " for value in row)

    def _assignment_lines(
        self, assignment: Sequence[int], cost: float
    ) -> Iterator[str]:
        yield "Assignment Result:"
        for worker, task in enumerate(assignment[: self.size]):
            if task != -1:
                yield (
                    f"Worker {worker} -> Task {task} "
                    f"(Cost: {self.matrix[worker][task]:.2f})"
                )
        yield f"Total Cost: {cost:.2f}"

    def _run(self, matrix: Matrix) -> tuple[list[int], float]:
        work = self._reduced(matrix)
        while (assignment := self._greedy_assignment(work)).count(-1):
            zeros = [[_is_zero(value) for value in row] for row in work]
            rows, cols = self._minimal_lines(zeros)
            self._adjust(work, rows, cols)
        return assignment, self._total(matrix, assignment)

    @staticmethod
    def _total(matrix: Matrix, assignment: Sequence[int]) -> float:
        return sum(
            matrix[worker][task]
            for worker, task in enumerate(assignment)
            if task != -1
        )

    @staticmethod
    def _reduced(matrix: Matrix) -> Matrix:
        work = [[value - min(row) for value in row] for row in matrix]
        col_minima = [min(column) for column in zip(*work)]
        return [
            [value - col_min for value, col_min in zip(row, col_minima)]
            for row in work
        ]

    def _greedy_assignment(self, matrix: Matrix) -> list[int]:
        assignment = [-1] * self.size
        used_cols: set[int] = set()
        for worker, row in enumerate(matrix):
            task = next(
                (
                    col
                    for col, value in enumerate(row)
                    if _is_zero(value) and col not in used_cols
                ),
                None,
            )
            if task is not None:
                assignment[worker] = task
                used_cols.add(task)
        return assignment

    def _minimal_lines(self, zeros: list[list[bool]]) -> tuple[list[bool], list[bool]]:
        """Greedily pick rows and columns until every zero is covered."""
        rows_covered = [False] * self.size
        cols_covered = [False] * self.size
        row_zeros = [sum(row) for row in zeros]
        col_zeros = [sum(column) for column in zip(*zeros)]

        while True:
            max_zeros = 0
            best_row: int | None = None
            best_col: int | None = None
            for i, count in enumerate(row_zeros):
                if not rows_covered[i] and count > max_zeros:
                    max_zeros, best_row, best_col = count, i, None
            for j, count in enumerate(col_zeros):
                if not cols_covered[j] and count > max_zeros:
                    max_zeros, best_row, best_col = count, None, j
            if max_zeros == 0:
                break

            if best_row is not None:
                rows_covered[best_row] = True
                for j, is_zero in enumerate(zeros[best_row]):
                    if is_zero:
                        row_zeros[best_row] -= 1
                        col_zeros[j] -= 1
            elif best_col is not None:
                cols_covered[best_col] = True
                for i, row in enumerate(zeros):
                    if row[best_col]:
                        row_zeros[i] -= 1
                        col_zeros[best_col] -= 1

        return rows_covered, cols_covered

    @staticmethod
    def _adjust(matrix: Matrix, rows: list[bool], cols: list[bool]) -> None:
        uncovered = [
            value
            for i, row in enumerate(matrix)
            if not rows[i]
            for j, value in enumerate(row)
            if not cols[j]
        ]
        min_uncovered = min(uncovered, default=sys.float_info.max)
        for i, row in enumerate(matrix):
            for j in range(len(row)):
                if rows[i] and cols[j]:
                    row[j] += min_uncovered
                elif not rows[i] and not cols[j]:
                    row[j] -= min_uncovered