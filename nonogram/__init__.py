# -*- coding: utf-8 -*-
"""
nonogram パッケージの入口となるモジュールです。

cli.py や api_proto/local_api.py などから:

    from nonogram import solve

と呼び出されることを想定しています。

ここでは、盤面（Grid）を受け取り、
1. 各行・各列の配置候補の列挙
2. 共通部分（consensus）による確定マスの書き込み
3. 盤面と矛盾する候補の除外
4. 2〜3 を不動点まで繰り返す
を順番に行い、SolveResult を返します。
"""

from __future__ import annotations

from typing import Tuple

from .config import MAX_ROUNDS
from .errors import (
    Contradiction,
    GridValidationError,
    InfeasibleConstraint,
    NonogramError,
    ParseError,
)
from .grid.model import Grid, build_grid
from .grid.parser import parse_file, parse_puzzle, parse_stream
from .logging_utils import get_logger
from .csp.propagation import Solver
from .types import CellState, LineRef, SolveResult, SolveStatus

__version__ = "0.1.0"

logger = get_logger()


def solve(grid: Grid, max_rounds: int = MAX_ROUNDS) -> SolveResult:
    """
    盤面を解くメイン関数です。

    盤面は最初にリセットされるので、同じ Grid に対して
    何度呼んでも同じ結果になります。
    """
    logger.info("=== solve() START ===")
    result = Solver(grid, max_rounds=max_rounds).solve()
    logger.info("=== solve() END (%s) ===", result.status.value)
    return result


def solve_text(source: str, max_rounds: int = MAX_ROUNDS) -> Tuple[Grid, SolveResult]:
    """パズル定義の文字列を読み込んで解きます。"""
    grid = parse_puzzle(source)
    return grid, solve(grid, max_rounds=max_rounds)


__all__ = [
    "CellState",
    "Contradiction",
    "Grid",
    "GridValidationError",
    "InfeasibleConstraint",
    "LineRef",
    "NonogramError",
    "ParseError",
    "SolveResult",
    "SolveStatus",
    "Solver",
    "build_grid",
    "parse_file",
    "parse_puzzle",
    "parse_stream",
    "solve",
    "solve_text",
]
