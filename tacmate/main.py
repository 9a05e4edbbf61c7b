from typing import List, Optional, Tuple

from tacmate.config import CONFIG
from tacmate.core.board import Board, Coord, Mark
from tacmate.core.errors import GameOverError
from tacmate.core.search import SearchEngine
from tacmate.core.utils import format_move, get_logger

logger = get_logger("engine")


class Engine:
    """One live game: a board plus the search that plays for the computer."""

    def __init__(self, first_mover: Optional[Mark] = None, threads: Optional[int] = None):
        self.board = Board(next_player=first_mover or CONFIG.game.first)
        self.search = SearchEngine(threads=threads or CONFIG.search.threads,
                                   log_info=CONFIG.search.log_info)

    @property
    def next_player(self) -> Mark:
        return self.board.next_player

    def reset(self, first_mover: Optional[Mark] = None):
        self.board = Board(next_player=first_mover or CONFIG.game.first)

    def legal_moves(self) -> List[Coord]:
        return self.board.legal_moves()

    def make_move(self, move: Coord) -> bool:
        """Apply ``move`` for the side to move. Returns False if it is not legal."""
        if self.board.is_ended() or not self.board.is_legal(move):
            return False
        self.board.apply_move(move)
        return True

    def get_best_move(self) -> Tuple[Coord, int]:
        if self.board.is_ended():
            raise GameOverError("Game is already over")
        return self.search.search_best_move(self.board)

    def play_engine_move(self) -> Coord:
        move, score = self.get_best_move()
        logger.debug("%s plays %s (score %d)", self.board.next_player, format_move(move), score)
        self.board.apply_move(move)
        return move

    def is_game_over(self) -> bool:
        return self.board.is_ended()

    def winner(self) -> Optional[Mark]:
        return self.board.get_winner()

    def result(self) -> Optional[str]:
        """"X" / "O" for a win, "draw", or None while the game is running."""
        if not self.board.is_ended():
            return None
        winner = self.board.get_winner()
        return winner.value if winner else "draw"

    def print_board(self):
        print(self.board)
