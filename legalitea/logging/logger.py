import logging
import sys

# Third-party loggers that flood INFO/DEBUG output with per-page or
# per-request chatter.
_NOISY_LOGGERS = ("pdfminer", "httpx", "httpcore", "openai")


class Log:
    """Process-wide logging facade for the analysis service."""

    _logger: logging.Logger = logging.getLogger("legalitea")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level, attach a stdout handler once, and quiet chatty libraries."""
        level = log_level.upper()
        cls._logger.setLevel(level)
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
            )
            cls._logger.addHandler(handler)
        cls._logger.propagate = False
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def exception(cls, message: str, **kwargs: object) -> None:
        """Log at ERROR with the active exception's traceback."""
        cls._logger.exception(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
