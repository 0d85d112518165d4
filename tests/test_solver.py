"""
Tests for the propagation loop.

Scenarios
---------
1. Single full row in a 5x5 grid -> SOLVED
2. Box outline that needs a second round -> SOLVED and matches the goal
3. Two-diagonal ambiguity -> STUCK (no infinite loop, nothing guessed)
4. Filtering empties a column -> CONTRADICTION (no-candidates)
5. Column consensus disagrees with a row-determined cell -> CONTRADICTION
6. Constraint longer than its line -> INFEASIBLE
7. Re-solving the same grid -> identical outcome and cells
8. Round cap
"""

import numpy as np
import pytest

from nonogram import solve, solve_text
from nonogram.csp.propagation import Solver
from nonogram.grid.model import build_grid
from nonogram.grid.parser import parse_puzzle
from nonogram.postprocess.render_result import check_against_goal
from nonogram.types import CellState, LineRef, SolveStatus

U = CellState.UNDECIDED
E = CellState.EMPTY
F = CellState.FILLED


def test_single_filled_row():
    rows = [[], [], [5], [], []]
    cols = [[1]] * 5
    grid = build_grid(5, 5, rows, cols)

    result = solve(grid)

    assert result.status is SolveStatus.SOLVED
    assert result.undecided == 0
    for y in range(5):
        expected = F if y == 2 else E
        assert all(grid[x, y] == expected for x in range(5))


def test_box_needs_two_rounds(box_text):
    grid, result = solve_text(box_text)

    assert result.status is SolveStatus.SOLVED
    assert result.rounds == 2
    assert np.array_equal(grid.cells, grid.goal)
    assert check_against_goal(grid) == []


def test_plus_sign(plus_text):
    grid, result = solve_text(plus_text)
    assert result.status is SolveStatus.SOLVED
    assert grid.as_matrix().tolist() == [[E, F, E], [F, F, F], [E, F, E]]


def test_ambiguous_puzzle_gets_stuck(ambiguous_text):
    grid, result = solve_text(ambiguous_text)

    assert result.status is SolveStatus.STUCK
    assert not result.round_limit_reached
    assert result.rounds == 1
    assert result.undecided == 4
    assert grid.undecided_count() == 4
    assert not result.is_error


def test_partial_deduction_then_stuck():
    # Columns 2 and 3 are forced; columns 0 and 1 hold the ambiguous diagonal pair
    grid = build_grid(4, 2, rows=[[1, 1], [1, 1]], cols=[[1], [1], [], [2]])
    result = solve(grid)

    assert result.status is SolveStatus.STUCK
    assert result.rounds == 2
    assert grid.column(2).tolist() == [E, E]
    assert grid.column(3).tolist() == [F, F]
    assert grid.undecided_count() == 4


def test_filtered_to_empty_is_a_contradiction():
    grid = build_grid(2, 2, rows=[[2], [2]], cols=[[1], [1]])
    result = solve(grid)

    assert result.status is SolveStatus.CONTRADICTION
    assert result.rule == "no-candidates"
    assert result.line == LineRef("column", 0)
    assert result.is_error


def test_consensus_conflict_is_a_contradiction():
    # Rows force the bottom row empty, columns force every cell filled
    grid = build_grid(2, 2, rows=[[2], []], cols=[[2], [2]])
    result = solve(grid)

    assert result.status is SolveStatus.CONTRADICTION
    assert result.rule == "consensus-conflict"
    assert result.line == LineRef("column", 0)
    # the determined cell was not overwritten
    assert grid[0, 1] == E


def test_infeasible_constraint():
    grid = build_grid(2, 2, rows=[[3], []], cols=[[1], [1]])
    result = solve(grid)

    assert result.status is SolveStatus.INFEASIBLE
    assert result.rule == "infeasible"
    assert result.line == LineRef("row", 0)
    assert result.rounds == 0


def test_infeasible_column():
    grid = build_grid(1, 2, rows=[[1], [1]], cols=[[1, 1]])
    result = solve(grid)
    assert result.status is SolveStatus.INFEASIBLE
    assert result.line == LineRef("column", 0)


@pytest.mark.parametrize("fixture_name", ["box_text", "ambiguous_text"])
def test_resolving_is_idempotent(request, fixture_name):
    grid = parse_puzzle(request.getfixturevalue(fixture_name))
    solver = Solver(grid)

    first = solver.solve()
    first_cells = grid.cells.copy()
    first_counts = solver.candidate_counts()

    # scribble on the grid; solve() must reset it
    grid.cells[:] = F
    second = solver.solve()

    assert second == first
    assert np.array_equal(grid.cells, first_cells)
    assert solver.candidate_counts() == first_counts

    # a fresh solver on the same grid agrees too
    third = solve(grid)
    assert third.status is first.status
    assert np.array_equal(grid.cells, first_cells)


def test_candidate_sets_only_shrink(box_text):
    grid = parse_puzzle(box_text)
    solver = Solver(grid)
    grid.clear_solution()

    before = solver.candidate_counts()
    solver.consensus_step()
    solver.filter_step()
    after = solver.candidate_counts()

    for kind in ("rows", "columns"):
        assert all(a <= b for a, b in zip(after[kind], before[kind]))
    assert after["rows"][1] == 1


def test_round_limit(box_text):
    grid = parse_puzzle(box_text)
    result = solve(grid, max_rounds=1)

    assert result.status is SolveStatus.STUCK
    assert result.round_limit_reached
    assert result.rounds == 1
    assert 0 < result.undecided < 25


def test_empty_puzzle_is_solved_in_one_round():
    grid = build_grid(3, 2, rows=[[], []], cols=[[], [], []])
    result = solve(grid)
    assert result.status is SolveStatus.SOLVED
    assert result.rounds == 1
    assert np.all(grid.cells == E)
