from nrow.ai.base import Agent
from nrow.ai.minimax_agent import MinimaxAgent, get_best_move
from nrow.ai.search import MinimaxSearch, SearchStats

__all__ = ["Agent", "MinimaxAgent", "MinimaxSearch", "SearchStats", "get_best_move"]
