# -*- coding: utf-8 -*-
"""
nonogram で使う例外クラスをまとめたモジュールです。

- InfeasibleConstraint : 制約がそもそもライン長に収まらない（入力の誤り）
- Contradiction        : 伝播中に矛盾を検出した
- GridValidationError  : 盤面の構築時の検証エラー
- ParseError           : パズルファイルの読み込みエラー
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence

from .types import LineRef


class NonogramError(Exception):
    """nonogram パッケージの例外の基底クラスです。"""


class InfeasibleConstraint(NonogramError):
    """連と必須の区切り空白がライン長に収まらないときに送出されます。"""

    def __init__(
        self,
        constraint: Sequence[int],
        capacity: int,
        line: Optional[LineRef] = None,
    ) -> None:
        self.constraint = tuple(constraint)
        self.capacity = capacity
        self.line = line
        needed = sum(self.constraint) + max(len(self.constraint) - 1, 0)
        where = f" in {line}" if line is not None else ""
        super().__init__(
            f"Constraint {list(self.constraint)}{where} needs {needed} cells "
            f"but the line only has {capacity}"
        )


class Contradiction(NonogramError):
    """
    伝播中に、あるラインの制約が盤面と両立しなくなったときに送出されます。

    rule は "no-candidates"（候補がゼロになった）か
    "consensus-conflict"（確定済みマスと異なる値を書こうとした）です。
    """

    def __init__(
        self,
        line: LineRef,
        rule: str,
        position: Optional[int] = None,
    ) -> None:
        self.line = line
        self.rule = rule
        self.position = position
        if rule == "consensus-conflict":
            detail = f"consensus disagrees with a determined cell at position {position}"
        else:
            detail = "no candidate placement is compatible with the grid"
        super().__init__(f"Contradiction in {line}: {detail}")


class GridErrorReason(Enum):
    MISSING_WIDTH = "missing width"
    MISSING_HEIGHT = "missing height"
    BAD_DIMENSION = "width and height must be positive"
    ROW_COUNT_MISMATCH = "row constraint count does not match height"
    COLUMN_COUNT_MISMATCH = "column constraint count does not match width"
    BAD_RUN = "run lengths must be positive integers"
    GOAL_LENGTH_MISMATCH = "goal length does not match width*height"


class GridValidationError(NonogramError, ValueError):
    """build_grid() の検証に失敗したときに送出されます。"""

    def __init__(self, reason: GridErrorReason, detail: str = "") -> None:
        self.reason = reason
        self.detail = detail
        msg = reason.value
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class ParseError(NonogramError):
    """パズルファイルの読み込み・解釈に失敗したときに送出されます。"""

    def __init__(self, message: str, line_no: Optional[int] = None) -> None:
        self.message = message
        self.line_no = line_no
        if line_no is not None:
            super().__init__(f"line {line_no}: {message}")
        else:
            super().__init__(message)
