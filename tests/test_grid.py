"""
Tests for the Grid data model and the build_grid validation step.
"""

import numpy as np
import pytest

from nonogram.errors import GridErrorReason, GridValidationError
from nonogram.grid.model import build_grid
from nonogram.types import CellState

U = CellState.UNDECIDED
E = CellState.EMPTY
F = CellState.FILLED


def make_grid():
    # 3 wide, 2 high
    return build_grid(3, 2, rows=[[1], [2]], cols=[[1], [1], []])


def test_new_grid_is_undecided():
    grid = make_grid()
    assert grid.width == 3
    assert grid.height == 2
    assert grid.undecided_count() == 6
    assert not grid.is_complete()
    assert grid.rows == ((1,), (2,))
    assert grid.cols == ((1,), (1,), ())


def test_indexing_is_row_major():
    grid = make_grid()
    grid[2, 1] = F
    assert grid.xy_to_index(2, 1) == 5
    assert grid.cells[5] == F
    assert grid[2, 1] is F


def test_row_is_a_view():
    grid = make_grid()
    row = grid.row(1)
    row[0] = E
    assert grid[0, 1] == E


def test_column_is_a_copy():
    grid = make_grid()
    grid[1, 0] = F
    col = grid.column(1)
    assert col.tolist() == [F, U]
    col[1] = E
    assert grid[1, 1] == U


def test_set_column_scatters_values():
    grid = make_grid()
    grid.set_column(2, [E, F])
    assert grid[2, 0] == E
    assert grid[2, 1] == F
    assert grid.row(0).tolist() == [U, U, E]


def test_set_column_rejects_wrong_length():
    grid = make_grid()
    with pytest.raises(ValueError):
        grid.set_column(0, [E])


def test_out_of_range_access():
    grid = make_grid()
    with pytest.raises(IndexError):
        grid.row(2)
    with pytest.raises(IndexError):
        grid.column(3)
    with pytest.raises(IndexError):
        grid[3, 0]


def test_clear_solution():
    grid = make_grid()
    grid.cells[:] = F
    assert grid.is_complete()
    grid.clear_solution()
    assert grid.undecided_count() == 6


def test_as_matrix_shape():
    grid = make_grid()
    grid[1, 1] = F
    m = grid.as_matrix()
    assert m.shape == (2, 3)
    assert m[1, 1] == F


@pytest.mark.parametrize(
    "kwargs, reason",
    [
        (dict(width=None, height=1, rows=[[]], cols=[]), GridErrorReason.MISSING_WIDTH),
        (dict(width=1, height=None, rows=[], cols=[[]]), GridErrorReason.MISSING_HEIGHT),
        (dict(width=0, height=1, rows=[[]], cols=[]), GridErrorReason.BAD_DIMENSION),
        (dict(width=2, height=2, rows=[[1]], cols=[[1], [1]]), GridErrorReason.ROW_COUNT_MISMATCH),
        (dict(width=2, height=1, rows=[[1]], cols=[[1]]), GridErrorReason.COLUMN_COUNT_MISMATCH),
        (dict(width=2, height=1, rows=[[0]], cols=[[], []]), GridErrorReason.BAD_RUN),
        (dict(width=2, height=1, rows=[[1]], cols=[[1], []], goal=[F]), GridErrorReason.GOAL_LENGTH_MISMATCH),
    ],
)
def test_build_grid_reports_failed_check(kwargs, reason):
    with pytest.raises(GridValidationError) as excinfo:
        build_grid(**kwargs)
    assert excinfo.value.reason is reason


def test_build_grid_does_not_check_fit():
    # fit is checked when candidates are generated, not here
    grid = build_grid(2, 1, rows=[[5]], cols=[[1], [1]])
    assert grid.rows == ((5,),)


def test_goal_is_stored():
    grid = build_grid(2, 1, rows=[[1]], cols=[[1], []], goal=[F, E])
    assert isinstance(grid.goal, np.ndarray)
    assert grid.goal.tolist() == [F, E]
