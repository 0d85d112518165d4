# -*- coding: utf-8 -*-
"""
コマンドラインからパズルファイルを解くためのモジュールです。

使い方::

    nonogram-solve puzzle1.non puzzle2.non
    cat puzzle.non | nonogram-solve

ファイルごとに、寸法・解く前の盤面・解いた後の盤面を表示します。
あるファイルでエラーが出ても、メッセージを表示して次のファイルに進みます。
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Dict, IO, List, Optional

import pandas as pd

from . import solve
from .config import LOG_LEVEL, MAX_ROUNDS
from .errors import NonogramError
from .grid.parser import parse_file, parse_stream
from .logging_utils import get_logger, set_log_level
from .postprocess.render_result import check_against_goal, render_text
from .types import SolveStatus

logger = get_logger()


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nonogram-solve",
        description="Solve nonograms by line-local constraint propagation.",
    )
    parser.add_argument("files", nargs="*", help="puzzle files (default: read stdin)")
    parser.add_argument(
        "--max-rounds", type=int, default=MAX_ROUNDS,
        help="upper bound on propagation rounds per puzzle (default: %(default)s)",
    )
    parser.add_argument("--log-level", default=LOG_LEVEL, help="logging level (default: %(default)s)")
    parser.add_argument(
        "--summary", action="store_true",
        help="print a table of outcomes after all inputs",
    )
    return parser


def solve_one(name: str, grid_source, max_rounds: int, out: IO[str]) -> Dict[str, Any]:
    """
    1つの入力を読み込んで解き、結果を表示します。

    Returns
    -------
    dict
        サマリー表用の1行分（input, status, rounds, undecided）。
    """
    grid = grid_source()
    print(f"Dimensions (w×h) = {grid.width}×{grid.height}", file=out)
    print(render_text(grid), file=out)

    result = solve(grid, max_rounds=max_rounds)
    print(render_text(grid), file=out)

    if result.status == SolveStatus.SOLVED:
        print("Status: solved", file=out)
    else:
        print(f"Status: {result.status.value} ({result.message})", file=out)

    if grid.goal is not None:
        mismatches = check_against_goal(grid)
        if mismatches:
            print(f"Goal: {len(mismatches)} cells disagree with the goal", file=out)
        else:
            print("Goal: consistent", file=out)

    return {
        "input": name,
        "status": result.status.value,
        "rounds": result.rounds,
        "undecided": result.undecided,
    }


def main(argv: Optional[List[str]] = None, out: Optional[IO[str]] = None) -> int:
    """
    CLI のエントリポイントです。

    1つでもエラーになった入力があれば 1、そうでなければ 0 を返します。
    """
    if out is None:
        out = sys.stdout
    args = build_arg_parser().parse_args(argv)
    set_log_level(args.log_level)

    rows: List[Dict[str, Any]] = []
    failed = 0

    if args.files:
        inputs = [(fname, lambda fname=fname: parse_file(fname)) for fname in args.files]
    else:
        inputs = [("<stdin>", lambda: parse_stream(sys.stdin))]

    for name, source in inputs:
        if args.files:
            print(f"File: {name}", file=out)
        try:
            rows.append(solve_one(name, source, args.max_rounds, out))
        except NonogramError as e:
            failed += 1
            logger.debug("Failed on %s", name, exc_info=True)
            print(f"Error: {e}", file=out)
            rows.append({"input": name, "status": "error", "rounds": 0, "undecided": None})

    if args.summary:
        summary = pd.DataFrame(rows, columns=["input", "status", "rounds", "undecided"])
        print(summary.to_string(index=False), file=out)

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
