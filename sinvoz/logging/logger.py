import logging
import sys


class Log:
    """Process-wide logger for the presentation service."""

    _logger: logging.Logger = logging.getLogger("sinvoz")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level and attach a single stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log a request or storage milestone."""
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a rejected client input."""
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, exc: BaseException | None = None, **kwargs: object) -> None:
        """Log a failed request, attaching the traceback of *exc* when given."""
        cls._logger.error(message, exc_info=exc, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log per-round game details."""
        cls._logger.debug(message, extra=kwargs)
