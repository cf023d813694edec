import pytest

from nrow.ai.minimax_agent import MinimaxAgent, get_best_move
from nrow.config import GameConfig
from nrow.notation import format_board, parse_board
from nrow.scripts.bench import make_positions
from nrow.types import Move, Occupant


@pytest.mark.parametrize("depth", [2, 3, 4])
def test_blocks_two_in_a_row(depth):
    board = parse_board("XX./.../...")
    move = get_best_move(board, GameConfig(3, 3, 3, depth))
    assert move == Move(0, 2)


@pytest.mark.parametrize("depth", [2, 4])
def test_takes_the_win(depth):
    board = parse_board(".../OO./...")
    assert get_best_move(board, GameConfig(3, 3, 3, depth)) == Move(1, 2)


def test_winning_beats_blocking(cfg3_deep):
    board = parse_board("XX./OO./X..")
    assert get_best_move(board, cfg3_deep) == Move(1, 2)


def test_full_board_gives_invalid_move(cfg3):
    move = get_best_move(parse_board("XOX/XOO/OXX"), cfg3)
    assert move == Move.invalid()
    assert not move.is_valid()


def test_board_is_left_untouched(cfg3_deep):
    board = parse_board("X../.O./...")
    before = format_board(board)
    MinimaxAgent(cfg3_deep).choose_move(board)
    assert format_board(board) == before


@pytest.mark.parametrize("rows,cols,win_length", [(3, 3, 3), (4, 4, 3), (3, 5, 3)])
def test_move_is_always_a_free_cell(rows, cols, win_length):
    cfg = GameConfig(rows, cols, win_length, 2)
    for board in make_positions(rows, cols, win_length, plies=3, count=6, seed=11):
        move = get_best_move(board, cfg)
        assert move.is_valid()
        assert board.grid[move.row][move.col] is Occupant.NONE


def test_deterministic(cfg3_deep):
    board = parse_board("X../.../...")
    agent = MinimaxAgent(cfg3_deep)
    first = agent.choose_move(board)
    for _ in range(3):
        assert agent.choose_move(board) == first
    assert MinimaxAgent(cfg3_deep).choose_move(board) == first


def test_first_best_move_is_kept(cfg3):
    board = parse_board(".../.../...")
    agent = MinimaxAgent(cfg3)
    scored = agent.score_moves(board)
    best = max(s for _, s in scored)
    expected = next(m for m, s in scored if s == best)
    assert agent.choose_move(board) == expected


def test_last_info(cfg3):
    agent = MinimaxAgent(cfg3)
    move = agent.choose_move(parse_board("XX./.../..."))
    info = agent.last_info
    assert info["move"] == move.as_coord()
    assert info["depth"] == 2
    assert info["nodes"] > 0
    assert info["pruned"] is True
    assert info["time_ms"] >= 0
