import pytest

from hungarian.solver import HungarianAlgorithm


def test_basic_functionality():
    result = HungarianAlgorithm([[1, 2], [3, 0]]).solve()
    assert result[0] == [0, 1]
    assert abs(result[1] - 1.0) < 1e-10


def test_maximization():
    assignment, total = HungarianAlgorithm([[5, 2], [1, 4]]).solve_maximization()
    assert assignment == [0, 1]
    assert abs(total - 9.0) < 1e-10


def test_3x3_matrix():
    assignment, total = HungarianAlgorithm([[4, 1, 3], [2, 0, 5], [3, 2, 2]]).solve()
    assert assignment == [1, 0, 2]
    assert abs(total - 5.0) < 1e-10


def test_assignment_is_permutation():
    matrix = [[9, 2, 7, 8], [6, 4, 3, 7], [5, 8, 1, 8], [7, 6, 9, 4]]
    assignment, total = HungarianAlgorithm(matrix).solve()
    assert sorted(assignment) == [0, 1, 2, 3]
    assert total == pytest.approx(sum(matrix[i][j] for i, j in enumerate(assignment)))


def test_single_element():
    assignment, total = HungarianAlgorithm([[7]]).solve()
    assert assignment == [0]
    assert total == 7


def test_input_not_mutated():
    matrix = [[4, 1, 3], [2, 0, 5], [3, 2, 2]]
    solver = HungarianAlgorithm(matrix)
    solver.solve()
    solver.solve_maximization()
    assert matrix == [[4, 1, 3], [2, 0, 5], [3, 2, 2]]
    assert solver.matrix == [[4.0, 1.0, 3.0], [2.0, 0.0, 5.0], [3.0, 2.0, 2.0]]


def test_maximization_not_worse_than_minimization():
    matrix = [[5, 2, 1], [1, 4, 3], [3, 1, 2]]
    solver = HungarianAlgorithm(matrix)
    _, low = solver.solve()
    assignment, high = solver.solve_maximization()
    assert sorted(assignment) == [0, 1, 2]
    assert high >= low


@pytest.mark.parametrize("matrix", [[], [[1, 2]], [[1, 2], [3]], [[1], [2]]])
def test_rejects_non_square(matrix):
    with pytest.raises(ValueError, match="square and non-empty"):
        HungarianAlgorithm(matrix)


def test_format_matrix():
    text = HungarianAlgorithm([[1, 2], [3, 0]]).format_matrix()
    assert text == "Cost Matrix:\n    1.00     2.00 \n    3.00     0.00 \n\n"


def test_format_assignment():
    solver = HungarianAlgorithm([[1, 2], [3, 0]])
    text = solver.format_assignment([0, 1], 1.0)
    assert text == (
        "Assignment Result:\n"
        "Worker 0 -> Task 0 (Cost: 1.00)\n"
        "Worker 1 -> Task 1 (Cost: 0.00)\n"
        "Total Cost: 1.00\n"
    )


def test_format_assignment_skips_unassigned():
    solver = HungarianAlgorithm([[1, 2], [3, 0]])
    text = solver.format_assignment([-1, 1], 0.0)
    assert "Worker 0" not in text
    assert "Worker 1 -> Task 1" in text


def test_print_functions(capsys):
    solver = HungarianAlgorithm([[1, 2], [3, 0]])
    solver.print_matrix()
    solver.print_assignment([0, 1], 1.0)
    out = capsys.readouterr().out
    assert out == solver.format_matrix() + solver.format_assignment([0, 1], 1.0)