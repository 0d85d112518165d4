# -*- coding: utf-8 -*-
"""
nonogram.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- model.py  : 盤面データ構造 Grid と、その構築・検証
- parser.py : テキスト形式のパズル定義から Grid への変換
"""

from .model import Grid, build_grid
from .parser import parse_file, parse_puzzle, parse_stream

__all__ = ["Grid", "build_grid", "parse_file", "parse_puzzle", "parse_stream"]
