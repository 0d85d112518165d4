# -*- coding: utf-8 -*-
"""
nonogram solver で使う主なデータ構造（型）をまとめたモジュールです。

dataclass / Enum を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。

盤面・候補マスクは numpy の int8 配列で持ち、
各要素には CellState の値（0, 1, 2）が入ります。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple

import numpy as np

# 1ライン分の制約（連の長さの並び）。空タプルは「全マス空白」を表す。
Constraint = Tuple[int, ...]

# 候補マスク（1次元）と候補マスク集合（2次元: 候補数 x ライン長）
CandidateMask = np.ndarray
CandidateMaskSet = np.ndarray

# 盤面・マスクの numpy dtype
CELL_DTYPE = np.int8


class CellState(IntEnum):
    """
    1マスの状態を表す列挙型です。

    UNDECIDED は「まだ何も分かっていない」状態で、
    EMPTY / FILLED はそのマスについての最終的な値です。
    """

    UNDECIDED = 0
    EMPTY = 1
    FILLED = 2

    def consensus_eq(self, other: "CellState") -> "CellState":
        """
        候補マスクを畳み込んで共通部分を求めるための二項演算です。

        等しければその値を、異なれば UNDECIDED を返します。
        """
        if self == other:
            return self
        return CellState.UNDECIDED

    def accepts(self, other: "CellState") -> bool:
        """
        盤面のマス（self）が候補のマス（other）を受け入れるかを判定します。

        self が UNDECIDED なら何でも受け入れ、
        確定済みなら同じ値だけを受け入れます。
        """
        return self == CellState.UNDECIDED or self == other


@dataclass(frozen=True)
class LineRef:
    """
    盤面上の1ライン（行または列）を指す参照です。

    Attributes
    ----------
    kind : str
        "row" または "column"。
    index : int
        行なら y、列なら x（0 始まり）。
    """

    kind: str  # "row" or "column"
    index: int

    def __str__(self) -> str:
        return f"{self.kind} {self.index}"


class SolveStatus(Enum):
    """solve() の終端状態です。"""

    SOLVED = "solved"
    STUCK = "stuck"
    CONTRADICTION = "contradiction"
    INFEASIBLE = "infeasible"


@dataclass
class SolveResult:
    """
    solve() の結果をまとめたクラスです。

    Attributes
    ----------
    status : SolveStatus
        終端状態。
    rounds : int
        実行した伝播ラウンド数。
    undecided : int
        終了時点で UNDECIDED のまま残っているマスの数。
    line : LineRef or None
        矛盾・実現不能を検出したライン。
    rule : str or None
        破られた規則（"infeasible", "no-candidates", "consensus-conflict"）。
    message : str
        人間向けの説明。
    round_limit_reached : bool
        ラウンド上限に達して打ち切った場合に True。
    """

    status: SolveStatus
    rounds: int = 0
    undecided: int = 0
    line: Optional[LineRef] = None
    rule: Optional[str] = None
    message: str = ""
    round_limit_reached: bool = False

    @property
    def is_error(self) -> bool:
        return self.status in (SolveStatus.CONTRADICTION, SolveStatus.INFEASIBLE)
