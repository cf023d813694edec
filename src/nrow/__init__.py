"""N-in-a-row game core: rule checks and a minimax (alpha-beta) computer opponent."""

from nrow.config import ConfigError, GameConfig
from nrow.core.board import Board
from nrow.engine import Engine
from nrow.types import Move, MoveResult, Occupant, Piece

__all__ = ["Board", "ConfigError", "Engine", "GameConfig", "Move", "MoveResult", "Occupant", "Piece"]
