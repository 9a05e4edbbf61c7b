class TacMateError(Exception):
    """Base class for engine errors."""


class GameOverError(TacMateError):
    """Raised when a move is requested on a board that has already ended."""


class ConfigError(TacMateError, ValueError):
    """Raised for invalid configuration values."""
