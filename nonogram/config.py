# -*- coding: utf-8 -*-
"""
nonogram 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- 伝播ラウンド数の上限
- 候補数が多すぎるラインの警告しきい値
- 表示用の文字
- ログレベル
などを簡単に変更できます。

一部の値は環境変数で上書きできます（NONOGRAM_MAX_ROUNDS など）。
"""

from __future__ import annotations

import os
from typing import Dict

# ==== 伝播ループ関連 =======================================================

# 1回の solve() で実行する伝播ラウンドの上限。
# 候補集合は単調に縮むので通常はこの上限より早く収束しますが、
# 巨大な盤面や不正な入力に対する最悪ケースの歯止めとして使います。
MAX_ROUNDS: int = int(os.getenv("NONOGRAM_MAX_ROUNDS", "10000"))

# 1ラインの候補マスク数がこれを超えたら警告ログを出す。
# （短い連が少なく、ラインが長いと二項係数的に候補が増えるため）
MAX_CANDIDATES_WARNING: int = 200_000

# ==== 表示関連 =============================================================

# 盤面表示用の文字（CellState の名前 -> 文字）
RENDER_CHARS: Dict[str, str] = {
    "UNDECIDED": "?",
    "EMPTY": " ",
    "FILLED": "█",
}

# 候補マスク（1ライン）のデバッグ表示用の文字
MASK_CHARS: Dict[str, str] = {
    "UNDECIDED": "?",
    "EMPTY": "_",
    "FILLED": "█",
}

# ==== ログ関連 =============================================================

# nonogram パッケージ共通で使うロガー名
LOGGER_NAME: str = "nonogram"

# 既定のログレベル
LOG_LEVEL: str = os.getenv("NONOGRAM_LOG_LEVEL", "WARNING")
