class MediaError(Exception):
    """Base exception for uploaded media handling."""


class UnsupportedMediaTypeError(MediaError):
    """Raised when an upload is neither an image nor a video."""


class MissingUploadError(MediaError):
    """Raised when a required multipart field is absent or empty."""
