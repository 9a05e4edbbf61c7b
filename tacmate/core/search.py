import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

from tacmate.core.board import Board, Coord, Mark
from tacmate.core.utils import format_info, get_logger

INF = 1000
WIN_SCORE = 10
LOSS_SCORE = -10
DRAW_SCORE = 0

logger = get_logger("search")


class SearchEngine:
    """Exhaustive minimax over the full remaining game tree.

    Scores are always taken from one perspective mark (+10 win, -10 loss,
    0 draw), held fixed for a whole top-level search while the mover
    alternates. No pruning, no memoisation, no depth discount.
    """

    def __init__(self, threads: int = 1, log_info: bool = True):
        self.threads = max(1, int(threads))
        self.log_info = log_info
        self.nodes = 0

    def evaluate(self, board: Board, mark_to_move: Mark, perspective: Mark, depth: int = 0) -> int:
        self.nodes += 1
        if board.is_ended():
            winner = board.get_winner()
            if winner is None:
                return DRAW_SCORE
            return WIN_SCORE if winner is perspective else LOSS_SCORE

        # depth is carried along but does not bias the score
        if mark_to_move is perspective:
            best = -INF
            for move in board.legal_moves():
                child = board.copy()
                child.apply_move(move)
                best = max(best, self.evaluate(child, mark_to_move.opponent(), perspective, depth + 1))
        else:
            best = INF
            for move in board.legal_moves():
                child = board.copy()
                child.apply_move(move)
                best = min(best, self.evaluate(child, mark_to_move.opponent(), perspective, depth + 1))
        return best

    def _score_move(self, board: Board, move: Coord, mark: Mark) -> int:
        child = board.copy()
        child.apply_move(move)
        return self.evaluate(child, mark.opponent(), mark)

    def score_moves(self, board: Board, mark: Optional[Mark] = None) -> List[Tuple[Coord, int]]:
        """Score every legal move for ``mark``, in row-major order."""
        mark = mark or board.next_player
        moves = board.legal_moves()
        if self.threads == 1 or len(moves) < 2:
            return [(move, self._score_move(board, move, mark)) for move in moves]

        # one engine per root move: workers share no counters and no boards
        workers = [SearchEngine(threads=1, log_info=False) for _ in moves]
        with ThreadPoolExecutor(max_workers=self.threads) as pool:
            scores = list(pool.map(lambda wm: wm[0]._score_move(board, wm[1], mark), zip(workers, moves)))
        self.nodes += sum(w.nodes for w in workers)
        return list(zip(moves, scores))

    def find_best_move(self, board: Board, mark: Optional[Mark] = None) -> Optional[Coord]:
        """Best move for ``mark`` (default: side to move); first of equals wins.

        Returns None when the board has no legal moves. Searching an ended
        board is a caller error.
        """
        move, _ = self._search(board, mark or board.next_player)
        return move

    def search_best_move(self, board: Board) -> Tuple[Optional[Coord], int]:
        return self._search(board, board.next_player)

    def _search(self, board: Board, mark: Mark) -> Tuple[Optional[Coord], int]:
        self.nodes = 0
        start_time = time.time()

        best_score = -INF
        best_move = None
        for move, score in self.score_moves(board, mark):
            if score > best_score:
                best_score = score
                best_move = move

        if best_move is None:
            logger.warning("search requested on an ended board:\n%s", board)
        elif self.log_info:
            logger.info(format_info(mark, best_move, best_score, self.nodes, time.time() - start_time))
        return best_move, best_score


_default_engine = SearchEngine(log_info=False)


def minimax(board: Board, mark_to_move: Mark, perspective: Mark, depth: int = 0) -> int:
    return _default_engine.evaluate(board, mark_to_move, perspective, depth)


def find_best_move(board: Board, mark: Mark) -> Optional[Coord]:
    return _default_engine.find_best_move(board, mark)
