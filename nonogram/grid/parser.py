# -*- coding: utf-8 -*-
"""
テキスト形式のパズル定義を読み込み、Grid に変換するモジュールです。

対応している形式（nonogram-db 形式）の例::

    width 5
    height 3
    rows
    2
    1,1
    0

    columns
    1
    1
    ...
    goal "110001010000000"

- "rows" / "columns" の後の各行が、1ライン分の連の長さ（カンマ区切り）です。
- 空行、または次のヘッダキーワードでブロックが終わります。
- "0" だけの行は「そのラインは全マス空白」を表します。
- goal は既知の正解（0=空白, 1=塗り, 左上から行優先）で、検証用にのみ使います。
- title / by / copyright など、それ以外のヘッダは読み飛ばします。
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, List, Optional, Tuple

from ..errors import GridValidationError, ParseError
from ..logging_utils import get_logger
from ..types import CellState, Constraint
from .model import Grid, build_grid

logger = get_logger()

HEADER_KEYWORDS = (
    "width",
    "height",
    "rows",
    "columns",
    "goal",
    "title",
    "by",
    "copyright",
    "license",
    "catalogue",
    "color",
)

# 読み込み中のモード
MODE_MAIN = "main"
MODE_ROWS = "rows"
MODE_COLS = "columns"


def unquote(s: str) -> str:
    """前後のダブルクォートを取り除きます。"""
    if len(s) >= 2 and s.startswith('"') and s.endswith('"'):
        return s[1:-1]
    return s


def split_header(line: str) -> Tuple[str, str]:
    """ "width 5" -> ("width", "5") のように、キーワードと引数に分けます。"""
    parts = line.strip().split(None, 1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()


def parse_constraint(text: str, line_no: Optional[int] = None) -> Constraint:
    """
    "1,2,3" のようなカンマ区切りの連の長さを Constraint に変換します。

    "0" 単独は空の制約（全マス空白）として扱います。
    """
    try:
        runs = [int(tok.strip()) for tok in text.split(",")]
    except ValueError:
        raise ParseError(f"malformed constraint: {text!r}", line_no) from None

    if runs == [0]:
        return ()
    if any(n <= 0 for n in runs):
        raise ParseError(f"run lengths must be positive: {text!r}", line_no)
    return tuple(runs)


def parse_goal(text: str, line_no: Optional[int] = None) -> List[CellState]:
    """goal のビット列を CellState のリストに変換します。"""
    bits = unquote(text.strip())
    goal: List[CellState] = []
    for ch in bits:
        if ch == "0":
            goal.append(CellState.EMPTY)
        elif ch == "1":
            goal.append(CellState.FILLED)
        else:
            raise ParseError(f"cannot parse goal character {ch!r}", line_no)
    return goal


class PuzzleParser:
    """
    1行ずつ読み進めながら、幅・高さ・制約・goal を集めるパーサです。

    集めた値の検証は最後に build_grid() で一度だけ行います。
    """

    def __init__(self) -> None:
        self.width: Optional[int] = None
        self.height: Optional[int] = None
        self.rows: List[Constraint] = []
        self.cols: List[Constraint] = []
        self.goal: Optional[List[CellState]] = None
        self.mode = MODE_MAIN
        self.line_no = 0

    def parse(self, source: str) -> Grid:
        for line in source.splitlines():
            self.line_no += 1
            if self.mode == MODE_MAIN:
                self._parse_header_line(line)
            else:
                self._parse_constraint_line(line)

        try:
            return build_grid(self.width, self.height, self.rows, self.cols, goal=self.goal)
        except GridValidationError as e:
            raise ParseError(str(e)) from e

    def _parse_int(self, keyword: str, args: str) -> int:
        try:
            return int(args)
        except ValueError:
            raise ParseError(f"malformed integer for {keyword}: {args!r}", self.line_no) from None

    def _parse_header_line(self, line: str) -> None:
        keyword, args = split_header(line)
        if keyword == "columns":
            self.mode = MODE_COLS
        elif keyword == "rows":
            self.mode = MODE_ROWS
        elif keyword == "width":
            if self.width is not None:
                raise ParseError("width is already set", self.line_no)
            self.width = self._parse_int(keyword, args)
        elif keyword == "height":
            if self.height is not None:
                raise ParseError("height is already set", self.line_no)
            self.height = self._parse_int(keyword, args)
        elif keyword == "goal":
            self.goal = parse_goal(args, self.line_no)
        elif keyword:
            logger.debug("line %d: skipping header %r", self.line_no, keyword)

    def _parse_constraint_line(self, line: str) -> None:
        stripped = line.strip()
        if not stripped:
            self.mode = MODE_MAIN
            return

        # 最後のブロックの後に空行がないこともあるので、
        # ヘッダキーワードが来たらそのままヘッダとして扱う
        keyword, _ = split_header(stripped)
        if keyword in HEADER_KEYWORDS:
            self.mode = MODE_MAIN
            self._parse_header_line(stripped)
            return

        constraint = parse_constraint(stripped, self.line_no)
        if self.mode == MODE_ROWS:
            self.rows.append(constraint)
        else:
            self.cols.append(constraint)


def parse_puzzle(source: str) -> Grid:
    """
    パズル定義の文字列から Grid を作ります。

    Raises
    ------
    ParseError
        形式が不正な場合、または幅・高さと制約数が合わない場合。
    """
    return PuzzleParser().parse(source)


def parse_stream(fp: IO[str]) -> Grid:
    """ファイルオブジェクト（標準入力など）から読み込みます。"""
    try:
        source = fp.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"cannot read input: {e}") from e
    return parse_puzzle(source)


def parse_file(path: str | Path) -> Grid:
    """パズル定義ファイルを読み込みます。"""
    p = Path(path)
    try:
        source = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"cannot read {p}: {e}") from e
    return parse_puzzle(source)
