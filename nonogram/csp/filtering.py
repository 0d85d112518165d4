# -*- coding: utf-8 -*-
"""
盤面の既知マスと矛盾する候補マスクを取り除くモジュールです。

盤面のマスが UNDECIDED ならどの候補も受け入れ、
確定済み（EMPTY / FILLED）なら同じ値の候補だけを受け入れます。
判定は常に「盤面が候補を受け入れるか」の向きで行います。
これは CellState.accepts を配列全体に適用したものと同じです。
"""

from __future__ import annotations

import numpy as np

from ..types import CandidateMask, CandidateMaskSet, CellState


def accepted(known: np.ndarray, masks: np.ndarray) -> np.ndarray:
    """
    known の各マスが masks の対応するマスを受け入れるかを、位置ごとに返します。

    masks は1つのマスク（1次元）でも、マスク集合（2次元）でも構いません。
    """
    return (known == CellState.UNDECIDED) | (masks == known)


def can_place(known: np.ndarray, mask: CandidateMask) -> bool:
    """
    盤面のライン known に候補 mask を置けるか（矛盾するマスがないか）を返します。
    """
    return bool(np.all(accepted(known, mask)))


def filter_candidates(masks: CandidateMaskSet, known: np.ndarray) -> CandidateMaskSet:
    """
    known と両立する候補（can_place が True になるもの）だけを残した部分集合を返します。

    結果が空になることもあります。その場合、このラインの制約は
    現在の盤面では満たせない（矛盾）ということなので、
    呼び出し側で検出してください。
    """
    if masks.shape[0] == 0:
        return masks
    return masks[np.all(accepted(known, masks), axis=1)]
