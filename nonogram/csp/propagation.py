# -*- coding: utf-8 -*-
"""
ライン単位の制約伝播を不動点まで繰り返すモジュールです。

流れ
----
1. 構築時に、各行・各列の制約とライン長だけから
   すべての配置候補を列挙しておく（candidates.generate）
2. solve() では盤面をリセットしたうえで、1ラウンドごとに
   a. 各行の候補の共通部分を求め、確定したマスを盤面に書く
   b. 各列について同じことをする
   c. 各行の候補を、更新された盤面と矛盾しないものに絞る
   d. 各列について同じことをする
3. 新しく確定したマスも、除外された候補もないラウンドが来たら打ち切る

ここで行うのは「1ラインだけを見て分かること」の推論だけです。
仮定を置いて試す探索（バックトラック）は行わないため、
推論だけでは解き切れない盤面は STUCK で終わります。

候補集合は縮む一方なので、ラウンド数は
（マス数 + 候補総数）で抑えられ、必ず停止します。
"""

from __future__ import annotations

from typing import Dict, List, Optional

import numpy as np

from ..config import MAX_ROUNDS
from ..errors import Contradiction, InfeasibleConstraint
from ..grid.model import Grid
from ..logging_utils import get_logger
from ..types import CandidateMaskSet, CellState, LineRef, SolveResult, SolveStatus
from .candidates import generate
from .consensus import find_consensus
from .filtering import filter_candidates

logger = get_logger()


class Solver:
    """
    1つの Grid を解くための solver です。

    solve() の実行中、盤面はこの solver だけが書き換えます。

    Parameters
    ----------
    grid : Grid
        解く盤面。セルの値だけが書き換えられます。
    max_rounds : int
        伝播ラウンド数の上限。
    """

    def __init__(self, grid: Grid, max_rounds: int = MAX_ROUNDS) -> None:
        self.grid = grid
        self.max_rounds = max_rounds
        self.infeasible: Optional[InfeasibleConstraint] = None

        self._initial_rows: List[CandidateMaskSet] = []
        self._initial_cols: List[CandidateMaskSet] = []
        try:
            for y, constraint in enumerate(grid.rows):
                self._initial_rows.append(
                    generate(constraint, grid.width, LineRef("row", y))
                )
            for x, constraint in enumerate(grid.cols):
                self._initial_cols.append(
                    generate(constraint, grid.height, LineRef("column", x))
                )
        except InfeasibleConstraint as e:
            logger.warning("Infeasible puzzle: %s", e)
            self.infeasible = e

        self.rows: List[CandidateMaskSet] = list(self._initial_rows)
        self.cols: List[CandidateMaskSet] = list(self._initial_cols)

    def candidate_counts(self) -> Dict[str, List[int]]:
        """各ラインに残っている候補数を返します。"""
        return {
            "rows": [int(c.shape[0]) for c in self.rows],
            "columns": [int(c.shape[0]) for c in self.cols],
        }

    def solve(self) -> SolveResult:
        """
        盤面をリセットしてから、不動点まで伝播を繰り返します。

        Returns
        -------
        SolveResult
            SOLVED / STUCK / CONTRADICTION / INFEASIBLE のいずれか。
        """
        self.grid.clear_solution()

        if self.infeasible is not None:
            return SolveResult(
                status=SolveStatus.INFEASIBLE,
                rounds=0,
                undecided=self.grid.undecided_count(),
                line=self.infeasible.line,
                rule="infeasible",
                message=str(self.infeasible),
            )

        # 何度呼んでも同じ結果になるよう、候補集合も初期状態から始める
        self.rows = list(self._initial_rows)
        self.cols = list(self._initial_cols)

        logger.info(
            "Solving %dx%d grid (%d row / %d column candidates)",
            self.grid.width, self.grid.height,
            sum(c.shape[0] for c in self.rows), sum(c.shape[0] for c in self.cols),
        )

        rounds = 0
        try:
            while True:
                if rounds >= self.max_rounds:
                    logger.warning("Round limit (%d) reached", self.max_rounds)
                    return self._finish(SolveStatus.STUCK, rounds, round_limit_reached=True)

                rounds += 1
                determined = self.consensus_step()
                eliminated = self.filter_step()
                logger.debug(
                    "Round %d: %d cells determined, %d candidates eliminated, %d undecided",
                    rounds, determined, eliminated, self.grid.undecided_count(),
                )

                if self.grid.is_complete():
                    return self._finish(SolveStatus.SOLVED, rounds)
                if determined == 0 and eliminated == 0:
                    return self._finish(SolveStatus.STUCK, rounds)
        except Contradiction as e:
            logger.warning("%s (round %d)", e, rounds)
            return SolveResult(
                status=SolveStatus.CONTRADICTION,
                rounds=rounds,
                undecided=self.grid.undecided_count(),
                line=e.line,
                rule=e.rule,
                message=str(e),
            )

    def _finish(
        self,
        status: SolveStatus,
        rounds: int,
        round_limit_reached: bool = False,
    ) -> SolveResult:
        undecided = self.grid.undecided_count()
        logger.info("Finished: %s after %d rounds (%d undecided)", status.value, rounds, undecided)
        if status == SolveStatus.SOLVED:
            message = "solved"
        elif round_limit_reached:
            message = f"round limit {self.max_rounds} reached with {undecided} cells undecided"
        else:
            message = f"line-local deduction stalled with {undecided} cells undecided"
        return SolveResult(
            status=status,
            rounds=rounds,
            undecided=undecided,
            message=message,
            round_limit_reached=round_limit_reached,
        )

    def _write_line(self, line: LineRef, current: np.ndarray, consensus: np.ndarray) -> int:
        """
        consensus の確定マスを current に書き込み、新しく確定したマス数を返します。

        current が既に別の値で確定していたら矛盾です（上書きはしない）。
        """
        decided = consensus != CellState.UNDECIDED
        conflict = decided & (current != CellState.UNDECIDED) & (current != consensus)
        if np.any(conflict):
            raise Contradiction(line, "consensus-conflict", int(np.argmax(conflict)))

        newly = decided & (current == CellState.UNDECIDED)
        current[newly] = consensus[newly]
        return int(np.count_nonzero(newly))

    def consensus_step(self) -> int:
        """
        各行・各列の候補の共通部分を盤面に書き込みます。

        共通部分は「制約だけから（盤面を見ずに）必ず決まる」マスです。
        戻り値は新しく確定したマスの数です。
        """
        determined = 0

        # Rows: row() はビューなので、そのまま書き込める
        for y, cands in enumerate(self.rows):
            determined += self._write_line(
                LineRef("row", y), self.grid.row(y), find_consensus(cands)
            )

        # Columns: コピーに書き込んでから1マスずつ書き戻す
        for x, cands in enumerate(self.cols):
            column = self.grid.column(x)
            newly = self._write_line(LineRef("column", x), column, find_consensus(cands))
            if newly:
                self.grid.set_column(x, column)
            determined += newly

        return determined

    def filter_step(self) -> int:
        """
        各行・各列について、盤面と矛盾する候補を取り除きます。

        戻り値は除外した候補の数です。
        候補がゼロになったラインがあれば Contradiction を送出します。
        """
        eliminated = 0

        # Rows
        for y in range(self.grid.height):
            eliminated += self._filter_line(LineRef("row", y), self.rows, y, self.grid.row(y))

        # Columns
        for x in range(self.grid.width):
            eliminated += self._filter_line(LineRef("column", x), self.cols, x, self.grid.column(x))

        return eliminated

    def _filter_line(
        self,
        line: LineRef,
        sets: List[CandidateMaskSet],
        index: int,
        known: np.ndarray,
    ) -> int:
        before = sets[index]
        after = filter_candidates(before, known)
        if after.shape[0] == 0:
            raise Contradiction(line, "no-candidates")
        sets[index] = after
        return int(before.shape[0] - after.shape[0])
