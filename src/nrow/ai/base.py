from __future__ import annotations
from typing import Protocol

from nrow.core.board import Board
from nrow.types import Move


class Agent(Protocol):
    name: str

    def choose_move(self, board: Board) -> Move:
        ...
