# -*- coding: utf-8 -*-
"""
候補マスク集合の「共通部分」（consensus）を求めるモジュールです。

すべての候補で同じ値になっている位置はその値に、
候補によって値が異なる位置は UNDECIDED になります。

これは二項演算 consensus_eq による左畳み込みと同じ結果になります。
consensus_eq は結合的かつ可換なので、畳み込みの順序には依存しません。
"""

from __future__ import annotations

import numpy as np

from ..types import CandidateMask, CandidateMaskSet, CellState


def consensus_eq(a: CandidateMask, b: CandidateMask) -> CandidateMask:
    """
    2つのマスクの位置ごとの「等しければその値、違えば UNDECIDED」です。
    """
    if a.shape != b.shape:
        raise ValueError(f"mask shapes differ: {a.shape} vs {b.shape}")
    return np.where(a == b, a, CellState.UNDECIDED).astype(a.dtype, copy=False)


def find_consensus(masks: CandidateMaskSet) -> CandidateMask:
    """
    候補マスク集合の共通部分を返します。

    Parameters
    ----------
    masks : numpy.ndarray
        shape = (候補数, ライン長)。候補数は 1 以上であること。

    Returns
    -------
    numpy.ndarray
        長さ = ライン長 の 1次元配列。

    Raises
    ------
    ValueError
        候補が1つもない場合。空集合の共通部分は定義されないため、
        呼び出し側で先に矛盾として扱う必要があります。
    """
    if masks.ndim != 2 or masks.shape[0] == 0:
        raise ValueError("consensus of an empty candidate set is undefined")

    first = masks[0]
    agree = np.all(masks == first, axis=0)
    return np.where(agree, first, CellState.UNDECIDED).astype(masks.dtype, copy=False)
