from __future__ import annotations

import argparse
import logging
from pathlib import Path

from nrow.ai.minimax_agent import MinimaxAgent
from nrow.config import COLS, ROWS, SEARCH_DEPTH, WIN_LENGTH, GameConfig
from nrow.engine import Engine
from nrow.notation import format_board, parse_board, parse_cell, parse_occupant
from nrow.scripts.bench import bench


def _parse_depths(raw: str) -> list[int]:
    try:
        depths = [int(p) for p in raw.split(",") if p.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid depth list {raw!r}. Use e.g. 2,3,4.") from None
    if not depths:
        raise argparse.ArgumentTypeError("Depth list is empty.")
    return depths


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="nrow", description="N-in-a-row move search and rule checks.")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-v info, -vv debug)")
    sub = ap.add_subparsers(dest="cmd", required=True)

    best = sub.add_parser("best-move", help="Pick the computer's (O) move on a board")
    best.add_argument("--board", required=True, help='Board text, rows split by "/" e.g. "XX./.O./..."')
    best.add_argument("--win-length", type=int, default=WIN_LENGTH, help="Marks in a row needed to win")
    best.add_argument("--depth", type=int, default=SEARCH_DEPTH, help="Search depth in plies")
    best.add_argument("--all", action="store_true", help="Print the score of every candidate move")
    best.add_argument("--no-prune", action="store_true", help="Disable alpha-beta pruning")

    cls = sub.add_parser("classify", help="Classify a mark already placed on a board")
    cls.add_argument("--board", required=True, help="Board text")
    cls.add_argument("--cell", required=True, help="row,col of the mark (0-based)")
    cls.add_argument("--occupant", required=True, help="X (human) or O (computer)")
    cls.add_argument("--win-length", type=int, default=WIN_LENGTH, help="Marks in a row needed to win")

    b = sub.add_parser("bench", help="Time pruned vs unpruned search on random positions")
    b.add_argument("--rows", type=int, default=ROWS)
    b.add_argument("--cols", type=int, default=COLS)
    b.add_argument("--win-length", type=int, default=WIN_LENGTH)
    b.add_argument("--depths", type=_parse_depths, default=[2, 3, 4], help="Comma separated depths")
    b.add_argument("--positions", type=int, default=5, help="Random positions to search")
    b.add_argument("--plies", type=int, default=2, help="Marks placed on each random position")
    b.add_argument("--seed", type=int, default=None)
    b.add_argument("--out", type=str, default="data/results", help="Output directory for the CSV")

    return ap


def _best_move(args: argparse.Namespace) -> int:
    board = parse_board(args.board)
    cfg = GameConfig.from_args(args, rows=board.rows, cols=board.cols)
    agent = MinimaxAgent(cfg, prune=not args.no_prune)

    print(format_board(board))
    print()

    if args.all:
        for move, score in agent.score_moves(board):
            print(f"  ({move.row}, {move.col})  score={score}")

    move = agent.choose_move(board)
    if not move.is_valid():
        print("No move possible: board is full.")
        return 0

    info = agent.last_info
    print(
        f"Best move: ({move.row}, {move.col}) | eval={info['eval']} | d={info['depth']} | "
        f"nodes={info['nodes']} | cut={info['cutoffs']} | {info['time_ms']:.1f}ms"
    )
    return 0


def _classify(args: argparse.Namespace) -> int:
    board = parse_board(args.board)
    row, col = parse_cell(args.cell)
    if not board.in_bounds(row, col):
        raise ValueError(f"Cell ({row}, {col}) is outside the {board.rows}x{board.cols} board.")
    occupant = parse_occupant(args.occupant)
    if board.grid[row][col] is not occupant:
        raise ValueError(f"Cell ({row}, {col}) does not hold {occupant.value}.")

    engine = Engine(GameConfig.from_args(args, rows=board.rows, cols=board.cols))
    result = engine.evaluate_move(board, occupant, row, col)
    print(result.value)
    return 0


def _bench(args: argparse.Namespace) -> int:
    for d in args.depths:
        GameConfig(args.rows, args.cols, args.win_length, d).validate()
    bench(
        args.rows,
        args.cols,
        args.win_length,
        args.depths,
        positions=args.positions,
        plies=args.plies,
        seed=args.seed,
        outdir=Path(args.out),
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    handlers = {"best-move": _best_move, "classify": _classify, "bench": _bench}
    try:
        return handlers[args.cmd](args)
    except ValueError as e:
        print(f"Error: {e}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
