# src/nrow/core/rules.py

from __future__ import annotations
from typing import List, Optional, Protocol, Sequence, Tuple

from nrow.types import Coord, MoveResult, Occupant

# (row step, col step) for horizontal, vertical, "\" diagonal, "/" diagonal
AXES: Tuple[Coord, ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


class GridLike(Protocol):
    rows: int
    cols: int
    grid: Sequence[Sequence[Occupant]]


def _scan(board: GridLike, occupant: Occupant, row: int, col: int, dr: int, dc: int) -> List[Coord]:
    """Cells holding `occupant` walking away from (row, col), origin excluded. Stops at the edge."""
    out: List[Coord] = []
    r, c = row + dr, col + dc
    while 0 <= r < board.rows and 0 <= c < board.cols and board.grid[r][c] is occupant:
        out.append((r, c))
        r += dr
        c += dc
    return out


def _held_by_other(board: GridLike, occupant: Occupant, row: int, col: int) -> bool:
    held = board.grid[row][col]
    return held is not Occupant.NONE and held is not occupant


def run_through(board: GridLike, occupant: Occupant, row: int, col: int, dr: int, dc: int) -> List[Coord]:
    """
    The contiguous run of `occupant` along one axis through (row, col).
    The origin counts once, as if `occupant` had just been placed there.
    Callers make sure the origin is empty or already holds `occupant`.
    """
    back = _scan(board, occupant, row, col, -dr, -dc)
    fwd = _scan(board, occupant, row, col, dr, dc)
    return list(reversed(back)) + [(row, col)] + fwd


def has_winning_run(board: GridLike, occupant: Occupant, row: int, col: int, win_length: int) -> bool:
    if occupant is Occupant.NONE or _held_by_other(board, occupant, row, col):
        return False
    for dr, dc in AXES:
        if len(run_through(board, occupant, row, col, dr, dc)) >= win_length:
            return True
    return False


def winning_line(board: GridLike, occupant: Occupant, row: int, col: int, win_length: int) -> Optional[List[Coord]]:
    """Longest qualifying run through the cell, or None. Useful for highlighting."""
    if occupant is Occupant.NONE or _held_by_other(board, occupant, row, col):
        return None
    best: Optional[List[Coord]] = None
    for dr, dc in AXES:
        line = run_through(board, occupant, row, col, dr, dc)
        if len(line) >= win_length and (best is None or len(line) > len(best)):
            best = line
    return best


def is_board_full(board: GridLike) -> bool:
    placed = sum(1 for r in range(board.rows) for c in range(board.cols) if board.grid[r][c] is not Occupant.NONE)
    return placed == board.rows * board.cols


def classify_move(board: GridLike, occupant: Occupant, row: int, col: int, win_length: int) -> MoveResult:
    # A move that completes a run on the last free cell is a win, not a tie.
    if has_winning_run(board, occupant, row, col, win_length):
        return MoveResult.WIN
    if is_board_full(board):
        return MoveResult.TIE
    return MoveResult.ONGOING
