"""
Tests for candidate placement generation.

Masks are compared as sets of tuples since enumeration order is not part of
the contract.
"""

import itertools

import numpy as np
import pytest

from nonogram.csp.candidates import (
    count_candidates,
    gap_assignments,
    generate,
    into_mask,
    required_cells,
)
from nonogram.errors import InfeasibleConstraint
from nonogram.types import CellState, LineRef

E = CellState.EMPTY
F = CellState.FILLED


def as_set(masks):
    return {tuple(int(v) for v in m) for m in masks}


def test_gap_assignments_respect_inner_minimum():
    # 2 blanks over 3 gaps, the middle one needs at least 1
    assert sorted(gap_assignments(2, 3)) == [[0, 1, 1], [0, 2, 0], [1, 1, 0]]


def test_one_two_in_five_cells():
    """[1, 2] in 5 cells: 4 cells are required, so the single spare blank goes in one of 3 gaps."""
    masks = generate([1, 2], 5)
    expected = {
        (F, E, F, F, E),
        (F, E, E, F, F),
        (E, F, E, F, F),
    }
    assert masks.shape == (3, 5)
    assert as_set(masks) == as_set(expected)


def test_one_two_in_six_cells():
    """The listing from the solver docs: [1, 2] in a 6-wide line has 6 placements."""
    masks = generate([1, 2], 6)
    expected = {
        (F, E, F, F, E, E),
        (F, E, E, F, F, E),
        (F, E, E, E, F, F),
        (E, F, E, F, F, E),
        (E, F, E, E, F, F),
        (E, E, F, E, F, F),
    }
    assert masks.shape == (6, 6)
    assert as_set(masks) == as_set(expected)


def test_empty_constraint_is_single_empty_line():
    masks = generate([], 4)
    assert masks.shape == (1, 4)
    assert np.all(masks == E)


def test_full_line():
    masks = generate([4], 4)
    assert masks.shape == (1, 4)
    assert np.all(masks == F)


def test_tight_fit_has_single_candidate():
    masks = generate([2, 1, 1], 6)
    assert as_set(masks) == {(F, F, E, F, E, F)}


@pytest.mark.parametrize("capacity", range(1, 9))
def test_mask_length_and_count(capacity):
    for k in range(0, 4):
        for runs in itertools.product(range(1, 4), repeat=k):
            if required_cells(runs) > capacity:
                continue
            masks = generate(runs, capacity)
            assert masks.shape[1] == capacity
            assert masks.shape[0] == count_candidates(runs, capacity)
            # distinct by construction
            assert len(as_set(masks)) == masks.shape[0]
            # every mask actually spells the constraint
            for m in masks:
                filled_runs = [len(list(g)) for v, g in itertools.groupby(m) if v == F]
                assert tuple(filled_runs) == tuple(runs)


def test_infeasible_when_runs_exceed_capacity():
    with pytest.raises(InfeasibleConstraint) as excinfo:
        generate([3, 3], 5)
    assert excinfo.value.constraint == (3, 3)
    assert excinfo.value.capacity == 5


def test_infeasible_when_separator_does_not_fit():
    # 5 filled cells fit, but not with the mandatory gap between the runs
    with pytest.raises(InfeasibleConstraint):
        generate([3, 2], 5)


def test_infeasible_carries_line_reference():
    line = LineRef("column", 3)
    with pytest.raises(InfeasibleConstraint) as excinfo:
        generate([4], 2, line=line)
    assert excinfo.value.line == line
    assert "column 3" in str(excinfo.value)


def test_into_mask_layout():
    mask = into_mask([1, 2, 0], [2, 1])
    assert [int(v) for v in mask] == [E, F, F, E, E, F]
