from typing_extensions import Protocol
from typing import Any


class BoundLogger(Protocol):
    """Logger carrying request context (request_id, user_id, ...)."""

    def debug(self, event: str, **kwargs: Any) -> None: ...

    def info(self, event: str, **kwargs: Any) -> None:
        """
        Log an info event.

        Args:
            event: Snake-case event name, e.g. "transactions_fetched"
            **kwargs: Extra structured fields
        """
        ...

    def warning(self, event: str, **kwargs: Any) -> None: ...

    def error(self, event: str, exc_info: bool = False, **kwargs: Any) -> None:
        """
        Log an error event.

        Args:
            event: Snake-case event name
            exc_info: Attach the active exception's traceback
            **kwargs: Extra structured fields
        """
        ...


class LoggingPort(Protocol):
    """Entry point the application layer uses to obtain loggers."""

    def bind(self, **kwargs: Any) -> BoundLogger:
        """
        Return a logger with ``kwargs`` attached to every event it emits.
        """
        ...
