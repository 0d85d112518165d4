# -*- coding: utf-8 -*-
"""
nonogram.postprocess パッケージ

solve 後の盤面を表示用・API 応答用の形に整えるモジュールをまとめています。
"""
