# -*- coding: utf-8 -*-
"""
solve の結果をもとに表示用の情報を構築するモジュールです。
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from ..config import MASK_CHARS, RENDER_CHARS
from ..grid.model import Grid
from ..types import CellState, SolveResult


def cell_char(state: int, chars: Dict[str, str] = RENDER_CHARS) -> str:
    return chars[CellState(int(state)).name]


def format_mask(mask: np.ndarray) -> str:
    """
    1ライン分のマスクを1行の文字列にします（デバッグ用）。

    例: [FILLED, EMPTY, UNDECIDED] -> "█_?"
    """
    return "".join(cell_char(v, MASK_CHARS) for v in mask)


def grid_to_frame(grid: Grid) -> pd.DataFrame:
    """
    盤面を、各マスの表示文字を持つ DataFrame（行 = y, 列 = x）に変換します。
    """
    matrix = grid.as_matrix()
    symbols = [[cell_char(v) for v in row] for row in matrix]
    return pd.DataFrame(
        symbols,
        index=pd.RangeIndex(grid.height, name="y"),
        columns=pd.RangeIndex(grid.width, name="x"),
    )


def render_lines(grid: Grid) -> List[str]:
    frame = grid_to_frame(grid)
    return ["".join(row) for row in frame.values.tolist()]


def render_text(grid: Grid) -> str:
    """
    盤面を人が読める文字列にします。

    ' ' = 空白, '█' = 塗り, '?' = 未確定。1行につき盤面の1行です。
    """
    return "".join(line + "\n" for line in render_lines(grid))


def check_against_goal(grid: Grid, goal: Optional[np.ndarray] = None) -> List[Tuple[int, int]]:
    """
    確定済みのマスのうち、既知の正解（goal）と食い違うマスの座標 (x, y) を返します。

    UNDECIDED のマスは食い違いとはみなしません。
    goal が無い場合は空リストを返します。
    """
    if goal is None:
        goal = grid.goal
    if goal is None:
        return []

    decided = grid.cells != CellState.UNDECIDED
    wrong = np.flatnonzero(decided & (grid.cells != goal))
    return [(int(i % grid.width), int(i // grid.width)) for i in wrong]


def build_result(grid: Grid, result: SolveResult) -> Dict[str, Any]:
    """
    solve の結果を JSON にできる dict にまとめます（API / CLI 用）。
    """
    out: Dict[str, Any] = {
        "status": result.status.value,
        "rounds": result.rounds,
        "shape": (grid.width, grid.height),
        "board": render_lines(grid),
        "undecided": result.undecided,
        "line": None,
        "rule": result.rule,
        "message": result.message,
        "round_limit_reached": result.round_limit_reached,
    }
    if result.line is not None:
        out["line"] = {"kind": result.line.kind, "index": result.line.index}
    if grid.goal is not None:
        out["goal_mismatches"] = [list(xy) for xy in check_against_goal(grid)]
    return out
