from nrow.core.snapshot import BoardSnapshot
from nrow.notation import parse_board
from nrow.types import Occupant


def test_free_moves_row_major():
    snap = BoardSnapshot.from_board(parse_board("X.O/.X./O.."))
    assert snap.free_moves == ((0, 1), (1, 0), (1, 2), (2, 1), (2, 2))
    assert (snap.rows, snap.cols) == (3, 3)


def test_snapshot_is_independent_of_board():
    board = parse_board("X../.../...")
    snap = BoardSnapshot.from_board(board)

    snap.place(1, 1, Occupant.COMPUTER)
    assert board.grid[1][1] is Occupant.NONE

    board.place(2, 2, Occupant.HUMAN)
    assert snap.occupant(2, 2) is Occupant.NONE


def test_free_moves_are_not_resynced():
    snap = BoardSnapshot.from_board(parse_board(".../.../..."))
    snap.place(0, 0, Occupant.HUMAN)

    assert (0, 0) in snap.free_moves
    assert (0, 0) not in snap.open_cells()

    snap.undo(0, 0)
    assert snap.occupant(0, 0) is Occupant.NONE
    assert len(snap.open_cells()) == 9


def test_full_board_has_no_free_moves():
    snap = BoardSnapshot.from_board(parse_board("XOX/XOO/OXX"))
    assert snap.free_moves == ()
