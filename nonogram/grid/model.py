# -*- coding: utf-8 -*-
"""
盤面データ構造 Grid を定義するモジュールです。

- セルは行優先（row-major）の 1次元 numpy 配列で保持します。
  座標 (x, y) のセルは cells[y * width + x] です。
- 行は連続領域なので row(y) はビュー（スライス）を返します。
- 列は連続していないため column(x) はコピーを返し、
  書き戻しは set_column(x, values) で1マスずつ行います。

Grid の構造（幅・高さ・制約）は構築後に変わりません。
solver が書き換えるのはセルの値だけです。
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..errors import GridErrorReason, GridValidationError
from ..types import CELL_DTYPE, CellState, Constraint


class Grid:
    """
    幅 x 高さのセル行列と、行・列ごとの制約を持つ盤面です。

    直接コンストラクタを呼ぶより、検証付きの :func:`build_grid` を使ってください。
    """

    def __init__(
        self,
        width: int,
        height: int,
        rows: Sequence[Constraint],
        cols: Sequence[Constraint],
        goal: Optional[np.ndarray] = None,
    ) -> None:
        self._width = width
        self._height = height
        self.rows: Tuple[Constraint, ...] = tuple(tuple(r) for r in rows)
        self.cols: Tuple[Constraint, ...] = tuple(tuple(c) for c in cols)
        self.cells: np.ndarray = np.full(
            width * height, CellState.UNDECIDED, dtype=CELL_DTYPE
        )
        # 既知の正解（任意）。検証用で、solve の入力には使わない。
        self.goal: Optional[np.ndarray] = goal

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """(width, height) を返します。"""
        return self._width, self._height

    def xy_to_index(self, x: int, y: int) -> int:
        return y * self._width + x

    def _check_xy(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"cell ({x}, {y}) is outside a {self._width}x{self._height} grid")

    def __getitem__(self, xy: Tuple[int, int]) -> CellState:
        x, y = xy
        self._check_xy(x, y)
        return CellState(int(self.cells[self.xy_to_index(x, y)]))

    def __setitem__(self, xy: Tuple[int, int], value: CellState) -> None:
        x, y = xy
        self._check_xy(x, y)
        self.cells[self.xy_to_index(x, y)] = CellState(value)

    def row(self, y: int) -> np.ndarray:
        """
        y 行目のビューを返します。

        返り値は cells のスライスなので、書き換えると盤面にも反映されます。
        """
        if not 0 <= y < self._height:
            raise IndexError(f"row {y} is outside a grid of height {self._height}")
        start = self.xy_to_index(0, y)
        return self.cells[start:start + self._width]

    def column(self, x: int) -> np.ndarray:
        """
        x 列目のコピーを返します。

        列はメモリ上で連続していないため、ビューではなく
        新しい配列に集めて返します（書き換えても盤面は変わりません）。
        """
        if not 0 <= x < self._width:
            raise IndexError(f"column {x} is outside a grid of width {self._width}")
        return self.cells[x::self._width].copy()

    def set_column(self, x: int, values: Iterable[CellState]) -> None:
        """x 列目に values を1マスずつ書き戻します。"""
        values = list(values)
        if len(values) != self._height:
            raise ValueError(
                f"column needs {self._height} values, got {len(values)}"
            )
        for y, v in enumerate(values):
            self[x, y] = v

    def undecided_count(self) -> int:
        return int(np.count_nonzero(self.cells == CellState.UNDECIDED))

    def is_complete(self) -> bool:
        """UNDECIDED のマスが1つも残っていなければ True。"""
        return self.undecided_count() == 0

    def clear_solution(self) -> None:
        """すべてのセルを UNDECIDED に戻します。"""
        self.cells.fill(CellState.UNDECIDED)

    def as_matrix(self) -> np.ndarray:
        """shape = (height, width) の 2次元ビューを返します。"""
        return self.cells.reshape(self._height, self._width)

    def __repr__(self) -> str:
        return (
            f"Grid(width={self._width}, height={self._height}, "
            f"undecided={self.undecided_count()})"
        )


def _normalize_constraints(lines: Sequence[Sequence[int]], kind: str) -> List[Constraint]:
    out: List[Constraint] = []
    for i, runs in enumerate(lines):
        runs = tuple(runs)
        for n in runs:
            # bool は int のサブクラスなので明示的に弾く
            if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n <= 0:
                raise GridValidationError(
                    GridErrorReason.BAD_RUN, f"{kind} {i}: {list(runs)}"
                )
        out.append(tuple(int(n) for n in runs))
    return out


def build_grid(
    width: Optional[int],
    height: Optional[int],
    rows: Sequence[Sequence[int]],
    cols: Sequence[Sequence[int]],
    goal: Optional[Sequence[CellState]] = None,
) -> Grid:
    """
    幅・高さ・制約をまとめて検証し、Grid を作ります。

    検証はこの関数で一度に行い、失敗した場合は
    どの検査で落ちたかを reason に持つ GridValidationError を送出します。

    制約がライン長に収まるかどうかはここでは検査しません。
    それは候補生成時に InfeasibleConstraint として検出されます。

    Parameters
    ----------
    width, height : int or None
        盤面の幅と高さ。None は「未指定」として扱います。
    rows : sequence of sequence of int
        height 個の行制約。
    cols : sequence of sequence of int
        width 個の列制約。
    goal : sequence of CellState, optional
        既知の正解（行優先、width * height 個）。

    Returns
    -------
    Grid
    """
    if width is None:
        raise GridValidationError(GridErrorReason.MISSING_WIDTH)
    if height is None:
        raise GridValidationError(GridErrorReason.MISSING_HEIGHT)
    if width <= 0 or height <= 0:
        raise GridValidationError(
            GridErrorReason.BAD_DIMENSION, f"{width}x{height}"
        )
    if len(rows) != height:
        raise GridValidationError(
            GridErrorReason.ROW_COUNT_MISMATCH,
            f"height {height}, {len(rows)} row constraints",
        )
    if len(cols) != width:
        raise GridValidationError(
            GridErrorReason.COLUMN_COUNT_MISMATCH,
            f"width {width}, {len(cols)} column constraints",
        )

    row_constraints = _normalize_constraints(rows, "row")
    col_constraints = _normalize_constraints(cols, "column")

    goal_arr: Optional[np.ndarray] = None
    if goal is not None:
        goal_arr = np.asarray([CellState(v) for v in goal], dtype=CELL_DTYPE)
        if goal_arr.size != width * height:
            raise GridValidationError(
                GridErrorReason.GOAL_LENGTH_MISMATCH,
                f"expected {width * height}, got {goal_arr.size}",
            )

    return Grid(width, height, row_constraints, col_constraints, goal=goal_arr)
