"""Core engine components: board state and minimax search."""

from .board import Board, Mark, new_board, opponent
from .search import SearchEngine, find_best_move, minimax
