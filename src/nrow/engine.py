# src/nrow/engine.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple
import logging

from nrow.ai.base import Agent
from nrow.ai.minimax_agent import MinimaxAgent
from nrow.config import GameConfig
from nrow.core.board import Board
from nrow.core.rules import classify_move
from nrow.types import Move, MoveResult, Occupant

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Engine:
    """
    The two calls the rest of a game needs: classify a mark that was just
    placed, and pick the computer's next move.
    """

    config: GameConfig = field(default_factory=GameConfig)
    agent: Agent = field(init=False)

    def __post_init__(self) -> None:
        self.config.validate()
        self.agent = MinimaxAgent(self.config)

    def new_board(self) -> Board:
        return Board(self.config.rows, self.config.cols)

    def _check(self, board: Board) -> None:
        if (board.rows, board.cols) != (self.config.rows, self.config.cols):
            raise ValueError(
                f"Board is {board.rows}x{board.cols} but the engine is configured for "
                f"{self.config.rows}x{self.config.cols}."
            )

    def evaluate_move(self, board: Board, occupant: Occupant, row: int, col: int) -> MoveResult:
        self._check(board)
        return classify_move(board, occupant, row, col, self.config.win_length)

    def get_best_move(self, board: Board) -> Move:
        """The computer's move, or the invalid sentinel when no cell is free."""
        self._check(board)
        return self.agent.choose_move(board)

    def play_computer_move(self, board: Board) -> Tuple[Move, Optional[MoveResult]]:
        """
        Pick a move, put it on the live board and classify it.
        Result is None when there was nothing to play.
        """
        move = self.get_best_move(board)
        if not move.is_valid():
            logger.debug("No free cell on %dx%d board", board.rows, board.cols)
            return move, None

        board.place(move.row, move.col, Occupant.COMPUTER)
        return move, self.evaluate_move(board, Occupant.COMPUTER, move.row, move.col)
