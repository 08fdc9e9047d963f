class GameError(Exception):
    """Base exception for completion-game errors."""


class InvalidModeError(GameError):
    """Raised when a removal mode selector is not recognized."""


class IncorrectMissingLetterError(GameError):
    """Raised when a guessed letter is not among the removed letters."""
