# src/nrow/scripts/bench.py

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence
import csv
import logging
import random
import time

from nrow.ai.minimax_agent import MinimaxAgent
from nrow.config import GameConfig
from nrow.core.board import Board
from nrow.core.rules import classify_move
from nrow.notation import format_board
from nrow.types import MoveResult, Occupant

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "position", "board",
    "rows", "cols", "win_length", "depth", "pruned",
    "move_row", "move_col", "score",
    "nodes", "cutoffs", "time_ms",
]


@dataclass(slots=True)
class BenchRow:
    position: int
    board: str
    rows: int
    cols: int
    win_length: int
    depth: int
    pruned: bool
    move_row: int
    move_col: int
    score: float
    nodes: int
    cutoffs: int
    time_ms: float

    def as_list(self) -> list:
        return [
            self.position, self.board,
            self.rows, self.cols, self.win_length, self.depth, int(self.pruned),
            self.move_row, self.move_col, self.score,
            self.nodes, self.cutoffs, round(self.time_ms, 3),
        ]


def random_position(rows: int, cols: int, win_length: int, plies: int, rng: random.Random) -> Board | None:
    """
    Alternate human and computer marks on random free cells, human first.
    Returns None if the game ended on the way (the position is not worth searching).
    """
    board = Board(rows, cols)
    side = Occupant.HUMAN
    for _ in range(plies):
        free = board.free_cells()
        if not free:
            return None
        r, c = rng.choice(free)
        board.place(r, c, side)
        if classify_move(board, side, r, c, win_length) is not MoveResult.ONGOING:
            return None
        side = side.other()
    return board


def make_positions(rows: int, cols: int, win_length: int, plies: int, count: int, seed: int | None, max_tries: int = 1000) -> List[Board]:
    rng = random.Random(seed)
    out: List[Board] = []
    tries = 0
    while len(out) < count and tries < max_tries:
        tries += 1
        board = random_position(rows, cols, win_length, plies, rng)
        if board is not None:
            out.append(board)
    if len(out) < count:
        logger.warning("Only generated %d/%d positions after %d tries", len(out), count, tries)
    return out


def run_bench(boards: Sequence[Board], win_length: int, depths: Sequence[int]) -> List[BenchRow]:
    rows: List[BenchRow] = []
    for i, board in enumerate(boards):
        for depth in depths:
            cfg = GameConfig(board.rows, board.cols, win_length, depth).validate()
            for prune in (True, False):
                agent = MinimaxAgent(cfg, name=f"Minimax d{depth}", prune=prune)
                move = agent.choose_move(board)
                info = agent.last_info
                rows.append(BenchRow(
                    position=i,
                    board=format_board(board, sep="/"),
                    rows=board.rows,
                    cols=board.cols,
                    win_length=win_length,
                    depth=depth,
                    pruned=prune,
                    move_row=move.row,
                    move_col=move.col,
                    score=info["eval"],
                    nodes=info["nodes"],
                    cutoffs=info["cutoffs"],
                    time_ms=info["time_ms"],
                ))
            logger.info("position %d depth %d done", i, depth)
    return rows


def write_csv(rows: Sequence[BenchRow], outdir: Path) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = outdir / f"bench_results_{ts}.csv"

    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        for row in rows:
            w.writerow(row.as_list())

    return out_path


def bench(
    rows: int,
    cols: int,
    win_length: int,
    depths: Sequence[int],
    positions: int = 5,
    plies: int = 2,
    seed: int | None = None,
    outdir: Path = Path("data/results"),
) -> Path:
    boards = make_positions(rows, cols, win_length, plies, positions, seed)
    results = run_bench(boards, win_length, depths)
    out_path = write_csv(results, outdir)

    print(f"Positions: {len(boards)}  Depths: {', '.join(str(d) for d in depths)}  Runs: {len(results)}")
    print(f"Wrote CSV: {out_path}")
    return out_path
