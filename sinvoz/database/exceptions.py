class RepositoryError(Exception):
    """Base exception for storage errors."""


class PresentationNotFoundError(RepositoryError):
    """Raised when no presentation matches the requested name."""
