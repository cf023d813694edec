# src/nrow/ai/minimax_agent.py

from __future__ import annotations
from dataclasses import dataclass, field
from math import inf
from typing import List, Tuple
import logging
import time

from nrow.ai.search import MinimaxSearch
from nrow.config import GameConfig
from nrow.core.board import Board
from nrow.core.snapshot import BoardSnapshot
from nrow.types import Move, Occupant, Piece

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MinimaxAgent:
    """
    Picks the computer's move: every free cell is tried as the computer's
    first mark and scored by the search, starting with the human to reply.
    The first cell with the best score wins ties (row-major order).
    """

    config: GameConfig = field(default_factory=GameConfig)
    name: str = "Minimax AI"
    prune: bool = True

    # Stats
    last_info: dict = field(default_factory=dict)

    def _score_root(self, board: Board) -> Tuple[List[Tuple[Move, float]], MinimaxSearch]:
        snapshot = BoardSnapshot.from_board(board)
        searcher = MinimaxSearch(self.config, prune=self.prune)

        scored: List[Tuple[Move, float]] = []
        for r, c in snapshot.free_moves:
            snapshot.place(r, c, Occupant.COMPUTER)
            score = searcher.search(snapshot, 0, False, -inf, inf)
            snapshot.undo(r, c)
            scored.append((Move(r, c), score))

        return scored, searcher

    def score_moves(self, board: Board) -> List[Tuple[Move, float]]:
        """Every root candidate with its search score, in free-move order."""
        return self._score_root(board)[0]

    def choose_move(self, board: Board) -> Move:
        start = time.perf_counter()

        scored, searcher = self._score_root(board)

        best_move = Move.invalid()
        best_score = -inf

        for move, score in scored:
            if score > best_score:
                best_score = score
                best_move.update(Piece(move.row, move.col, Occupant.COMPUTER))

        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": self.config.search_depth,
            "nodes": searcher.stats.nodes,
            "cutoffs": searcher.stats.cutoffs,
            "eval": int(best_score) if best_score not in (inf, -inf) else best_score,
            "move": best_move.as_coord(),
            "time_ms": elapsed * 1000,
            "pruned": self.prune,
        }
        logger.debug(
            "%dx%d k=%d d=%d -> %s eval=%s nodes=%d cutoffs=%d %.1fms",
            board.rows, board.cols, self.config.win_length, self.config.search_depth,
            best_move.as_coord(), self.last_info["eval"], searcher.stats.nodes, searcher.stats.cutoffs,
            self.last_info["time_ms"],
        )

        return best_move


def get_best_move(board: Board, config: GameConfig) -> Move:
    return MinimaxAgent(config).choose_move(board)
