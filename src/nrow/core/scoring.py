# src/nrow/core/scoring.py

from __future__ import annotations
from typing import Iterable, List

from nrow.core.rules import GridLike
from nrow.types import Coord, Occupant

WIN_SCORE = 100


def line_owner(board: GridLike, coords: Iterable[Coord]) -> Occupant:
    """
    The only side with marks on this line, ignoring empty cells.
    NONE when the line is empty or contested.
    """
    owner = Occupant.NONE
    for r, c in coords:
        cell = board.grid[r][c]
        if cell is Occupant.NONE:
            continue
        if owner is Occupant.NONE:
            owner = cell
        elif cell is not owner:
            return Occupant.NONE
    return owner


def _first_owner(board: GridLike, lines: Iterable[List[Coord]]) -> Occupant:
    for line in lines:
        owner = line_owner(board, line)
        if owner is not Occupant.NONE:
            return owner
    return Occupant.NONE


def row_owner(board: GridLike) -> Occupant:
    return _first_owner(board, ([(r, c) for c in range(board.cols)] for r in range(board.rows)))


def column_owner(board: GridLike) -> Occupant:
    return _first_owner(board, ([(r, c) for r in range(board.rows)] for c in range(board.cols)))


def diagonal_owner(board: GridLike) -> Occupant:
    """
    Only the two corner diagonals are checked: (0, 0) going down-right and
    (0, cols - 1) going down-left, each min(rows, cols) long. On non-square
    boards this is an approximation on purpose. It is not an offset scan:
    diagonals that start elsewhere on the top row are never looked at.
    """
    n = min(board.rows, board.cols)
    main = [(i, i) for i in range(n)]
    anti = [(i, board.cols - 1 - i) for i in range(n)]
    return _first_owner(board, (main, anti))


def evaluate(board: GridLike, depth: int) -> int:
    """
    Coarse depth-cutoff score from the computer's point of view.

    Any row, column or corner diagonal held only by the computer scores
    WIN_SCORE - depth; otherwise one held only by the human scores
    -WIN_SCORE + depth; otherwise 0.
    """
    owners = (row_owner(board), column_owner(board), diagonal_owner(board))
    if Occupant.COMPUTER in owners:
        return WIN_SCORE - depth
    if Occupant.HUMAN in owners:
        return -WIN_SCORE + depth
    return 0
