# src/nrow/ai/search.py

from __future__ import annotations
from dataclasses import dataclass, field
from math import inf

from nrow.config import GameConfig
from nrow.core.rules import has_winning_run
from nrow.core.scoring import WIN_SCORE, evaluate
from nrow.core.snapshot import BoardSnapshot
from nrow.types import Occupant


@dataclass(slots=True)
class SearchStats:
    nodes: int = 0
    cutoffs: int = 0


@dataclass(slots=True)
class MinimaxSearch:
    """
    Depth-limited minimax over a BoardSnapshot, Computer maximizing.

    Moves are made in place on the snapshot and undone on the way back, so
    one snapshot serves the whole tree. With prune=False the same traversal
    runs without alpha-beta cutoffs (same scores, more nodes).
    """

    config: GameConfig
    prune: bool = True
    stats: SearchStats = field(default_factory=SearchStats)

    def terminal_score(self, snapshot: BoardSnapshot, depth: int) -> int | None:
        """
        Win / tie check over the cells that were free when the snapshot was taken.
        Wins found sooner score higher; losses found later cost less.
        """
        open_spots = 0
        for r, c in snapshot.free_moves:
            occupant = snapshot.occupant(r, c)
            if occupant is Occupant.NONE:
                open_spots += 1
                continue
            if has_winning_run(snapshot, occupant, r, c, self.config.win_length):
                if occupant is Occupant.COMPUTER:
                    return WIN_SCORE - depth
                return -WIN_SCORE + depth
        if open_spots == 0:
            return 0
        return None

    def search(self, snapshot: BoardSnapshot, depth: int, maximizing: bool, alpha: float = -inf, beta: float = inf) -> float:
        self.stats.nodes += 1

        if depth >= self.config.search_depth:
            return evaluate(snapshot, depth)

        term = self.terminal_score(snapshot, depth)
        if term is not None:
            return term

        if maximizing:
            return self._max_value(snapshot, depth, alpha, beta)
        return self._min_value(snapshot, depth, alpha, beta)

    def _max_value(self, snapshot: BoardSnapshot, depth: int, alpha: float, beta: float) -> float:
        best = -inf
        for r, c in snapshot.open_cells():
            snapshot.place(r, c, Occupant.COMPUTER)
            best = max(best, self.search(snapshot, depth + 1, False, alpha, beta))
            snapshot.undo(r, c)

            alpha = max(alpha, best)
            if self.prune and beta <= alpha:
                self.stats.cutoffs += 1
                break
        return best

    def _min_value(self, snapshot: BoardSnapshot, depth: int, alpha: float, beta: float) -> float:
        best = inf
        for r, c in snapshot.open_cells():
            snapshot.place(r, c, Occupant.HUMAN)
            best = min(best, self.search(snapshot, depth + 1, True, alpha, beta))
            snapshot.undo(r, c)

            beta = min(beta, best)
            if self.prune and beta <= alpha:
                self.stats.cutoffs += 1
                break
        return best
