"""
Utility modules for the developer console.
"""

from .logger import LoggerMixin, get_logger, set_level, setup_logging
from .validation import ValidationUtils, ValidationResult
from .monitoring import Monitoring
from .error_handler import ErrorHandler, get_error_handler
from .signal import Signal

__all__ = [
    "LoggerMixin",
    "get_logger",
    "set_level",
    "setup_logging",
    "ValidationUtils",
    "ValidationResult",
    "Monitoring",
    "ErrorHandler",
    "get_error_handler",
    "Signal",
]
