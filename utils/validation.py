"""
Validation Utilities
Helper functions for validating command definitions and user input
"""

import re
from typing import Any, List, Optional, Sequence

# Command names: a single token that the parser can reproduce
COMMAND_NAME_REGEX = re.compile(r"^[^\s;\"'\\]+$")

# Argument names: identifier-like, shown in usage lines
ARGUMENT_NAME_REGEX = re.compile(r"^[A-Za-z_][A-Za-z0-9_\-]*$")

MAX_NAME_LENGTH = 64


class ValidationResult:
    """Result of a validation operation."""

    def __init__(
        self,
        valid: bool,
        error: Optional[str] = None,
        sanitized: Optional[str] = None,
        value: Optional[Any] = None,
    ):
        self.valid = valid
        self.error = error
        self.sanitized = sanitized
        self.value = value

    def __bool__(self) -> bool:
        return self.valid

    def __repr__(self) -> str:
        return f"ValidationResult(valid={self.valid!r}, error={self.error!r})"


class ValidationUtils:
    """Utility class for input validation."""

    @staticmethod
    def validate_command_name(name: Optional[str]) -> ValidationResult:
        """
        Validate a command name.

        A name must be non-empty and must survive a round trip through the
        command parser, so it may not contain whitespace, quotes, backslashes
        or the command separator.

        Args:
            name: Command name to validate

        Returns:
            ValidationResult with valid status and the name as value
        """
        if not name or not isinstance(name, str):
            return ValidationResult(valid=False, error="Command name is required")

        if len(name) > MAX_NAME_LENGTH:
            return ValidationResult(
                valid=False,
                error=f"Command name too long (max {MAX_NAME_LENGTH} chars)"
            )

        if not COMMAND_NAME_REGEX.match(name):
            return ValidationResult(
                valid=False,
                error=f"Invalid command name: {name!r}"
            )

        return ValidationResult(valid=True, value=name)

    @staticmethod
    def validate_argument_name(name: Optional[str]) -> ValidationResult:
        """
        Validate an argument name.

        Args:
            name: Argument name to validate

        Returns:
            ValidationResult with valid status
        """
        if not name or not isinstance(name, str):
            return ValidationResult(valid=False, error="Argument name is required")

        if not ARGUMENT_NAME_REGEX.match(name):
            return ValidationResult(valid=False, error=f"Invalid argument name: {name!r}")

        return ValidationResult(valid=True, value=name)

    @staticmethod
    def find_duplicates(names: Sequence[str]) -> List[str]:
        """Return names that occur more than once, in first-seen order."""
        seen = set()
        duplicates: List[str] = []
        for name in names:
            if name in seen and name not in duplicates:
                duplicates.append(name)
            seen.add(name)
        return duplicates

    @staticmethod
    def validate_args_length(
        args: Optional[Sequence[Any]],
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
    ) -> ValidationResult:
        """
        Validate command arguments length.

        Args:
            args: Command arguments
            min_length: Minimum required
            max_length: Maximum allowed

        Returns:
            ValidationResult with valid status
        """
        length = len(args) if args else 0

        if min_length is not None and length < min_length:
            return ValidationResult(
                valid=False,
                error=f"Too few arguments. Minimum: {min_length}"
            )

        if max_length is not None and length > max_length:
            if max_length == 0:
                error = "This command takes no arguments"
            else:
                error = f"Too many arguments. Maximum: {max_length}"
            return ValidationResult(valid=False, error=error)

        return ValidationResult(valid=True)

    @staticmethod
    def sanitize_input(input_value: str) -> str:
        """
        Sanitize a line of user input.

        Removes zero-width and control characters. Quotes, backslashes and
        separators are left alone, they belong to the command syntax.

        Args:
            input_value: Input to sanitize

        Returns:
            Sanitized input string
        """
        if not isinstance(input_value, str):
            return ""

        sanitized = input_value.strip()

        # Remove zero-width characters
        sanitized = re.sub(r"[\u200B-\u200D\uFEFF]", "", sanitized)

        # Remove control characters
        sanitized = re.sub(r"[\x00-\x1F\x7F-\x9F]", "", sanitized)

        return sanitized
