# src/nrow/notation.py

from __future__ import annotations
from typing import List

from nrow.core.board import Board
from nrow.types import Coord, Occupant

_CELLS = {
    "x": Occupant.HUMAN,
    "o": Occupant.COMPUTER,
    ".": Occupant.NONE,
    "-": Occupant.NONE,
    "_": Occupant.NONE,
}

_OCCUPANTS = {
    "x": Occupant.HUMAN,
    "human": Occupant.HUMAN,
    "o": Occupant.COMPUTER,
    "computer": Occupant.COMPUTER,
    "bot": Occupant.COMPUTER,
}


def parse_board(text: str) -> Board:
    """
    Read a board written one row per line (or rows separated by "/"), e.g. "XX./.O./...".
    X is the human, O the computer, "." "-" "_" are empty. Whitespace is ignored.
    """
    rows = ["".join(r.split()).lower() for r in text.replace("/", "\n").splitlines()]
    rows = [r for r in rows if r]
    if not rows:
        raise ValueError("Board text is empty.")

    width = len(rows[0])
    grid: List[List[Occupant]] = []
    for i, r in enumerate(rows):
        if len(r) != width:
            raise ValueError(f"Row {i + 1} has {len(r)} cells, expected {width}.")
        try:
            grid.append([_CELLS[ch] for ch in r])
        except KeyError as e:
            raise ValueError(f"Unknown cell {e.args[0]!r} in row {i + 1}.") from None

    return Board.from_grid(grid)


def format_board(board: Board, sep: str = "\n") -> str:
    return sep.join("".join(cell.value for cell in row) for row in board.grid)


def parse_cell(raw: str) -> Coord:
    parts = raw.replace(" ", "").split(",")
    if len(parts) != 2 or not all(p.lstrip("-").isdigit() for p in parts):
        raise ValueError(f"Invalid cell {raw!r}. Use row,col (0-based).")
    return int(parts[0]), int(parts[1])


def parse_occupant(raw: str) -> Occupant:
    s = raw.strip().lower()
    if s not in _OCCUPANTS:
        raise ValueError(f"Invalid occupant {raw!r}. Use X (human) or O (computer).")
    return _OCCUPANTS[s]
