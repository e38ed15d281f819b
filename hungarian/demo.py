"""Demonstration of the assignment solver on a few sample matrices."""

from __future__ import annotations

from collections.abc import Sequence

from hungarian.solver import HungarianAlgorithm

_EXAMPLES = (
    (
        "示例1: 最小费用分配问题",
        "Example 1: Minimum Cost Assignment Problem",
        [[9, 2, 7, 8], [6, 4, 3, 7], [5, 8, 1, 8], [7, 6, 9, 4]],
        False,
    ),
    (
        "示例2: 最大收益分配问题",
        "Example 2: Maximum Profit Assignment Problem",
        [[5, 2, 1], [1, 4, 3], [3, 1, 2]],
        True,
    ),
    (
        "示例3: 另一个3x3矩阵",
        "Example 3: Another 3x3 Matrix",
        [[4, 1, 3], [2, 0, 5], [3, 2, 2]],
        False,
    ),
)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration and print each result."""
    print("=== 匈牙利算法演示程序 ===")
    print("Hungarian Algorithm Demo")
    print()

    for index, (title, subtitle, matrix, maximize) in enumerate(_EXAMPLES):
        if index:
            print()
        print(title)
        print(subtitle)
        solver = HungarianAlgorithm(matrix)
        solver.print_matrix()
        assignment, total = (
            solver.solve_maximization() if maximize else solver.solve()
        )
        solver.print_assignment(assignment, total)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())