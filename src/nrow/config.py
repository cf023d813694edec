# src/nrow/config.py

from __future__ import annotations
from dataclasses import dataclass

# Supported ranges (both rows and columns use the board size range)
MIN_BOARD_SIZE = 3
MAX_BOARD_SIZE = 10

MIN_WIN_LENGTH = 3
MAX_WIN_LENGTH = 5

# Search depth in plies ("AI accuracy"): lower is faster, higher plays better
MIN_SEARCH_DEPTH = 2
MAX_SEARCH_DEPTH = 10

# Defaults
ROWS = 3
COLS = 3
WIN_LENGTH = 3
SEARCH_DEPTH = 4


class ConfigError(ValueError):
    pass


def max_win_length_for(rows: int, cols: int) -> int:
    return min(MAX_WIN_LENGTH, max(rows, cols))


@dataclass(frozen=True, slots=True)
class GameConfig:
    rows: int = ROWS
    cols: int = COLS
    win_length: int = WIN_LENGTH
    search_depth: int = SEARCH_DEPTH

    def validate(self) -> "GameConfig":
        for label, value in (("rows", self.rows), ("cols", self.cols)):
            if not MIN_BOARD_SIZE <= value <= MAX_BOARD_SIZE:
                raise ConfigError(f"{label} must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}, got {value}.")

        top = max_win_length_for(self.rows, self.cols)
        if not MIN_WIN_LENGTH <= self.win_length <= top:
            raise ConfigError(f"win_length must be between {MIN_WIN_LENGTH} and {top} on a {self.rows}x{self.cols} board, got {self.win_length}.")

        if not MIN_SEARCH_DEPTH <= self.search_depth <= MAX_SEARCH_DEPTH:
            raise ConfigError(f"search_depth must be between {MIN_SEARCH_DEPTH} and {MAX_SEARCH_DEPTH}, got {self.search_depth}.")

        return self

    @classmethod
    def from_args(cls, args, rows: int | None = None, cols: int | None = None) -> "GameConfig":
        """
        Build a config from parsed CLI arguments.
        Board dimensions given explicitly (e.g. taken from a parsed board) win over flags.
        """
        return cls(
            rows=rows if rows is not None else getattr(args, "rows", ROWS),
            cols=cols if cols is not None else getattr(args, "cols", COLS),
            win_length=getattr(args, "win_length", WIN_LENGTH),
            search_depth=getattr(args, "depth", SEARCH_DEPTH),
        ).validate()
