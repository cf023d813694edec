import pytest

from nrow.core.board import Board
from nrow.types import Move, Occupant, Piece


def test_empty_board():
    board = Board(3, 4)
    assert len(board.grid) == 3 and len(board.grid[0]) == 4
    assert board.pieces_placed() == 0
    assert not board.is_full()
    assert board.free_cells()[0] == (0, 0)


def test_place_and_errors():
    board = Board(3, 3)
    assert board.place(1, 2, Occupant.HUMAN) == Piece(1, 2, Occupant.HUMAN)
    assert board.grid[1][2] is Occupant.HUMAN
    assert (1, 2) not in board.free_cells()

    with pytest.raises(ValueError):
        board.place(1, 2, Occupant.COMPUTER)
    with pytest.raises(ValueError):
        board.place(3, 0, Occupant.COMPUTER)
    with pytest.raises(ValueError):
        board.place(0, 0, Occupant.NONE)


def test_from_grid_copies_rows():
    grid = [[Occupant.HUMAN, Occupant.NONE, Occupant.NONE] for _ in range(3)]
    board = Board.from_grid(grid)
    board.place(0, 1, Occupant.COMPUTER)
    assert grid[0][1] is Occupant.NONE
    assert board.pieces_placed() == 4


def test_grid_shape_is_checked():
    with pytest.raises(ValueError):
        Board(2, 2, [[Occupant.NONE]])


def test_move_sentinel_and_update():
    move = Move.invalid()
    assert not move.is_valid()
    move.update(Piece(2, 1, Occupant.COMPUTER))
    assert move.is_valid()
    assert move.as_coord() == (2, 1)


def test_occupant_other():
    assert Occupant.HUMAN.other() is Occupant.COMPUTER
    assert Occupant.COMPUTER.other() is Occupant.HUMAN
    assert Occupant.NONE.other() is Occupant.NONE
