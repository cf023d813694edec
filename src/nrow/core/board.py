# src/nrow/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from nrow.config import ROWS, COLS
from nrow.types import Coord, Occupant, Piece


@dataclass(slots=True)
class Board:
    """The live board of a match. Turn logic mutates it through place()."""

    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Occupant]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[Occupant.NONE for _ in range(self.cols)] for _ in range(self.rows)]
        elif len(self.grid) != self.rows or any(len(row) != self.cols for row in self.grid):
            raise ValueError(f"Grid does not match a {self.rows}x{self.cols} board.")

    @classmethod
    def from_grid(cls, grid: List[List[Occupant]]) -> "Board":
        if not grid or not grid[0]:
            raise ValueError("Grid must have at least one row and one column.")
        return cls(len(grid), len(grid[0]), [row[:] for row in grid])

    def free_cells(self) -> List[Coord]:
        return [(r, c) for r in range(self.rows) for c in range(self.cols) if self.grid[r][c] is Occupant.NONE]

    def pieces_placed(self) -> int:
        return sum(1 for row in self.grid for cell in row if cell is not Occupant.NONE)

    def is_full(self) -> bool:
        return self.pieces_placed() >= self.rows * self.cols

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def place(self, row: int, col: int, occupant: Occupant) -> Piece:
        if occupant is Occupant.NONE:
            raise ValueError("Cannot place an empty mark.")
        if not self.in_bounds(row, col):
            raise ValueError(f"Cell ({row}, {col}) is outside the {self.rows}x{self.cols} board.")
        if self.grid[row][col] is not Occupant.NONE:
            raise ValueError(f"Cell ({row}, {col}) is already taken.")

        self.grid[row][col] = occupant
        return Piece(row, col, occupant)
