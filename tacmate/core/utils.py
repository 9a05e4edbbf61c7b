import logging
from typing import Optional, Tuple

LOGGER_NAME = "tacmate"


def format_move(move: Optional[Tuple[int, int]]) -> str:
    """(row, col) -> "1a" style; "-" for no move."""
    if move is None:
        return "-"
    return f"{move[0] + 1}{chr(ord('a') + move[1])}"


def format_info(mark, move, score, nodes, elapsed):
    nps = int(nodes / elapsed) if elapsed > 0 else 0
    return (f"info side {mark} bestmove {format_move(move)} score {score} "
            f"nodes {nodes} nps {nps} time {int(elapsed * 1000)}")


def get_logger(name: str = "") -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME)


def configure_logging(level="INFO") -> logging.Logger:
    """Attach a single stream handler to the package logger."""
    logger = get_logger()
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        logger.addHandler(handler)
    return logger
