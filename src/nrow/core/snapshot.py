# src/nrow/core/snapshot.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple

from nrow.core.board import Board
from nrow.types import Coord, Occupant


@dataclass(slots=True)
class BoardSnapshot:
    """
    Private copy of a board used for hypothetical play.

    free_moves is computed once at creation and never resynced: it lists the
    cells that were empty when the snapshot was taken (row-major). Search code
    must re-check a cell's current occupant before moving onto it.
    """

    rows: int
    cols: int
    grid: List[List[Occupant]]
    free_moves: Tuple[Coord, ...] = field(default_factory=tuple)

    @classmethod
    def from_board(cls, board: Board) -> "BoardSnapshot":
        return cls.from_grid(board.grid)

    @classmethod
    def from_grid(cls, grid: List[List[Occupant]]) -> "BoardSnapshot":
        rows = len(grid)
        cols = len(grid[0]) if rows else 0
        copy = [list(row) for row in grid]
        free = tuple((r, c) for r in range(rows) for c in range(cols) if copy[r][c] is Occupant.NONE)
        return cls(rows, cols, copy, free)

    def occupant(self, row: int, col: int) -> Occupant:
        return self.grid[row][col]

    def place(self, row: int, col: int, occupant: Occupant) -> None:
        self.grid[row][col] = occupant

    def undo(self, row: int, col: int) -> None:
        self.grid[row][col] = Occupant.NONE

    def open_cells(self) -> List[Coord]:
        # Free moves that are still empty right now. Children undo before the
    # next sibling is tried, so a list taken at the start of a ply stays valid.
        return [(r, c) for (r, c) in self.free_moves if self.grid[r][c] is Occupant.NONE]
