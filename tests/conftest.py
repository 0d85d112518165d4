"""Shared puzzle fixtures for the nonogram tests."""

import pytest

# 5x5 square outline with a dot in the middle; needs two propagation rounds
BOX_PUZZLE = """\
title "box"
by "tests"
width 5
height 5

rows
5
1,1
1,1,1
1,1
5

columns
5
1,1
1,1,1
1,1
5

goal "1111110001101011000111111"
"""

# 3x3 plus sign, no blank line after the last block
PLUS_PUZZLE = """\
width 3
height 3
rows
1
3
1
columns
1
3
1
goal "010111010"
"""

# Two distinct solutions (the two diagonals); line-local deduction cannot choose
AMBIGUOUS_PUZZLE = """\
width 2
height 2
rows
1
1

columns
1
1
"""


@pytest.fixture
def box_text():
    return BOX_PUZZLE


@pytest.fixture
def plus_text():
    return PLUS_PUZZLE


@pytest.fixture
def ambiguous_text():
    return AMBIGUOUS_PUZZLE
