"""
Error Handler
Central reporting of errors raised by console commands
"""

import functools
import traceback
from typing import Any, Callable, Dict, Optional

from utils.logger import get_logger
from utils.signal import Signal


class ErrorHandler:
    """Error handler for the console."""

    def __init__(self):
        self.logger = get_logger("ErrorHandler")
        self.error_counts: Dict[str, int] = {}

    @Signal
    def error_handled(self, error: Exception, context: str):
        """Emitted after an error has been logged and counted."""

    @property
    def total_errors(self) -> int:
        return sum(self.error_counts.values())

    def handle_exception(self, error: Exception, context: str = "") -> int:
        """
        Handle an exception.

        Args:
            error: The exception that occurred
            context: Optional context string, usually the command name

        Returns:
            Number of times this kind of error was seen in this context
        """
        error_key = f"{context}:{type(error).__name__}"

        if context:
            self.logger.error(f"[{context}] {error}")
        else:
            self.logger.error(f"{error}")

        # Log traceback for debugging
        trace = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        self.logger.debug(f"Traceback:\n{trace}")

        count = self.error_counts.get(error_key, 0) + 1
        self.error_counts[error_key] = count

        self.error_handled(error, context)
        return count

    def wrap(self, context: str):
        """Decorator that reports exceptions raised by a function, then re-raises them."""
        def decorator(func: Callable) -> Callable:
            @functools.wraps(func)
            def wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    return func(*args, **kwargs)
                except Exception as e:
                    self.handle_exception(e, context)
                    raise
            return wrapper
        return decorator

    def reset(self) -> None:
        """Forget all error counts."""
        if self.error_counts:
            self.logger.debug("Error counts cleaned up")
        self.error_counts.clear()


# Global error handler instance
_error_handler: Optional[ErrorHandler] = None


def get_error_handler() -> ErrorHandler:
    """Get the global error handler instance."""
    global _error_handler
    if _error_handler is None:
        _error_handler = ErrorHandler()
    return _error_handler
