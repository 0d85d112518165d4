# -*- coding: utf-8 -*-
"""
nonogram.csp パッケージ

ライン単位の制約伝播に関する処理をまとめています。

主に以下の役割を持つモジュールから構成されています。
- candidates.py  : 制約とライン長から、すべての配置候補（マスク）を列挙
- consensus.py   : 候補マスク集合の位置ごとの共通部分
- filtering.py   : 盤面の既知マスと矛盾する候補の除外
- propagation.py : 上記を不動点まで繰り返す伝播ループ（Solver）
"""

from .candidates import generate
from .consensus import consensus_eq, find_consensus
from .filtering import can_place, filter_candidates
from .propagation import Solver

__all__ = [
    "generate",
    "consensus_eq",
    "find_consensus",
    "can_place",
    "filter_candidates",
    "Solver",
]
