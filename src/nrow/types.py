# src/nrow/types.py

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

Coord = Tuple[int, int]  # (row, col)


class Occupant(Enum):
    HUMAN = "X"
    COMPUTER = "O"
    NONE = "."

    def other(self) -> "Occupant":
        if self is Occupant.HUMAN:
            return Occupant.COMPUTER
        if self is Occupant.COMPUTER:
            return Occupant.HUMAN
        return Occupant.NONE


class MoveResult(Enum):
    TIE = "tie"
    WIN = "win"
    ONGOING = "ongoing"


@dataclass(frozen=True, slots=True)
class Piece:
    """A cell of a board: position plus whoever holds it."""

    row: int
    col: int
    occupant: Occupant = Occupant.NONE


@dataclass(slots=True)
class Move:
    row: int = -1
    col: int = -1

    @classmethod
    def invalid(cls) -> "Move":
        return cls(-1, -1)

    def is_valid(self) -> bool:
        return self.row != -1 and self.col != -1

    def update(self, piece: Piece) -> None:
        self.row = piece.row
        self.col = piece.col

    def as_coord(self) -> Coord:
        return (self.row, self.col)
