# -*- coding: utf-8 -*-
"""
1ライン分の制約とライン長から、すべての配置候補を列挙するモジュールです。

例えば 5マスのラインに制約 [1, 2] を置く場合、候補は次の3通りです::

    █_██_
    █__██
    _█_██

考え方
------
連が k 個あるとき、空白の「すき間」は k+1 か所あります
（先頭、連と連の間、末尾）。

- 先頭と末尾のすき間は 0 マスでもよい
- 連と連の間のすき間は最低 1 マス必要

空白の総数 blanks = capacity - sum(constraint) を、
この下限を守りながら k+1 か所に配る方法を再帰的に列挙し、
それぞれをマスクに展開します（いわゆる stars and bars）。
"""

from __future__ import annotations

from math import comb
from typing import List, Optional, Sequence

import numpy as np

from ..config import MAX_CANDIDATES_WARNING
from ..errors import InfeasibleConstraint
from ..logging_utils import get_logger
from ..types import CELL_DTYPE, CandidateMask, CandidateMaskSet, CellState, LineRef

logger = get_logger()


def required_cells(constraint: Sequence[int]) -> int:
    """連の合計と、連の間に必須の空白1マスずつを足したマス数を返します。"""
    return sum(constraint) + max(len(constraint) - 1, 0)


def count_candidates(constraint: Sequence[int], capacity: int) -> int:
    """
    列挙せずに候補数を計算します。

    余裕のマス数 slack = capacity - required_cells を k+1 か所に配る
    組み合わせの数 C(slack + k, k) です。収まらない場合は 0。
    """
    slack = capacity - required_cells(constraint)
    if slack < 0:
        return 0
    k = len(constraint)
    return comb(slack + k, k)


def gap_assignments(blanks: int, total_gaps: int) -> List[List[int]]:
    """
    blanks 個の空白を total_gaps 個のすき間に配る方法をすべて返します。

    先頭と末尾のすき間は 0 以上、それ以外は 1 以上です。
    """
    results: List[List[int]] = []
    _make_gaps(blanks, 0, total_gaps, [], results)
    return results


def _make_gaps(
    blanks: int,
    nth_gap: int,
    total_gaps: int,
    base: List[int],
    results: List[List[int]],
) -> None:
    if nth_gap == total_gaps:
        if blanks == 0:
            results.append(base)
        return

    lower = 0 if nth_gap == 0 or nth_gap == total_gaps - 1 else 1
    # 残りの内側のすき間に最低限必要な空白を確保しておく
    remaining_inner = max(total_gaps - nth_gap - 2, 0)
    upper = blanks - remaining_inner
    if nth_gap == total_gaps - 1:
        # 最後のすき間は残りをすべて受け取る
        lower = upper = blanks

    for size in range(lower, upper + 1):
        _make_gaps(blanks - size, nth_gap + 1, total_gaps, base + [size], results)


def into_mask(gaps: Sequence[int], constraint: Sequence[int]) -> CandidateMask:
    """
    すき間の長さの並びと制約から、マスク（1次元配列）を作ります。

    Empty x gaps[0], Filled x constraint[0], Empty x gaps[1], ... , Empty x gaps[k]
    """
    assert len(gaps) == len(constraint) + 1
    parts: List[np.ndarray] = []
    for i, gap in enumerate(gaps):
        parts.append(np.full(gap, CellState.EMPTY, dtype=CELL_DTYPE))
        if i < len(constraint):
            parts.append(np.full(constraint[i], CellState.FILLED, dtype=CELL_DTYPE))
    return np.concatenate(parts)


def generate(
    constraint: Sequence[int],
    capacity: int,
    line: Optional[LineRef] = None,
) -> CandidateMaskSet:
    """
    制約 constraint を長さ capacity のラインに置く、すべての候補マスクを返します。

    Parameters
    ----------
    constraint : sequence of int
        連の長さの並び。空なら全マス空白の1候補だけになります。
    capacity : int
        ラインの長さ（行なら幅、列なら高さ）。
    line : LineRef, optional
        エラーメッセージ・ログ用のライン参照。

    Returns
    -------
    numpy.ndarray
        shape = (候補数, capacity) の int8 配列。各行が1つの候補マスク。

    Raises
    ------
    InfeasibleConstraint
        連と必須の区切り空白が capacity に収まらない場合。
    """
    constraint = tuple(constraint)
    k = len(constraint)

    if required_cells(constraint) > capacity:
        raise InfeasibleConstraint(constraint, capacity, line)

    if k == 0:
        return np.full((1, capacity), CellState.EMPTY, dtype=CELL_DTYPE)

    expected = count_candidates(constraint, capacity)
    if expected > MAX_CANDIDATES_WARNING:
        logger.warning(
            "%s: constraint %s in %d cells yields %d candidates",
            line or "line", list(constraint), capacity, expected,
        )

    blanks = capacity - sum(constraint)
    masks = np.empty((expected, capacity), dtype=CELL_DTYPE)
    for i, gaps in enumerate(gap_assignments(blanks, k + 1)):
        mask = into_mask(gaps, constraint)
        assert mask.size == capacity, f"mask length {mask.size} != capacity {capacity}"
        masks[i] = mask

    logger.debug("%s: %d candidates for %s", line or "line", expected, list(constraint))
    return masks
