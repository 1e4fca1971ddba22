import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


class _ContextFormatter(logging.Formatter):
    """Appends the keyword context of a Log call as key=value pairs."""

    def formatMessage(self, record: logging.LogRecord) -> str:
        message = super().formatMessage(record)
        context = getattr(record, "context", None)
        if not context:
            return message
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{message} {pairs}"


class Log:
    """Centralized logging for extraction, sessions and analysis.

    Keyword arguments become context fields printed after the message,
    e.g. ``Log.info("Upload stored", upload=3, chars=1200)``. They are
    carried under one ``context`` record attribute, so names such as
    ``filename`` never collide with LogRecord's own attributes.
    """

    _logger: logging.Logger = logging.getLogger("resume_audit")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level and attach the stdout handler once.

        Raises:
            ValueError: if log_level is not a standard level name.
        """
        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level '{log_level}'")
        cls._logger.setLevel(level)
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(_ContextFormatter(LOG_FORMAT))
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **context: object) -> None:
        """Log progress of an upload or analysis."""
        cls._logger.info(message, extra={"context": context})

    @classmethod
    def error(cls, message: str, **context: object) -> None:
        """Log a failure that has been handled."""
        cls._logger.error(message, extra={"context": context})

    @classmethod
    def exception(cls, message: str, **context: object) -> None:
        """Log a failure with the active exception's traceback.

        Call from an ``except`` block when the caller will only see a
        generic message and the cause would otherwise be lost.
        """
        cls._logger.error(message, exc_info=True, extra={"context": context})

    @classmethod
    def warning(cls, message: str, **context: object) -> None:
        """Log a discarded or suspicious result."""
        cls._logger.warning(message, extra={"context": context})

    @classmethod
    def debug(cls, message: str, **context: object) -> None:
        """Log prompts, raw responses and other bulky detail."""
        cls._logger.debug(message, extra={"context": context})
