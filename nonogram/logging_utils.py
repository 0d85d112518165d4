# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

初学者向けポイント:
- 「ログ」とは、プログラムの実行状況を記録するメッセージのことです。
- 伝播が何ラウンド回ったか、どのラインで矛盾が出たかなどを
  確認するのに役立ちます。
"""

from __future__ import annotations

import logging
from typing import Union

from .config import LOGGER_NAME, LOG_LEVEL


def get_logger() -> logging.Logger:
    """
    nonogram 全体で共通して使う logger を返します。

    すでに handler（出力先）が設定されていない場合は、
    標準エラー出力に LOG_LEVEL 以上のログを表示するように設定します。
    """
    logger = logging.getLogger(LOGGER_NAME)

    # まだハンドラが設定されていなければ、簡単な設定を行う
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(LOG_LEVEL)

    return logger


def set_log_level(level: Union[int, str]) -> None:
    """CLI などから共通 logger のレベルを変更します。"""
    if isinstance(level, str):
        level = level.upper()
    get_logger().setLevel(level)
