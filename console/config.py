"""
Configuration management for the developer console.
Loads environment variables and provides configuration settings.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from a .env file in the working directory
load_dotenv(dotenv_path=Path.cwd() / ".env")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Config:
    """Console configuration settings."""

    # Number of input lines kept in history
    HISTORY_SIZE: int = 100

    # Prompt shown by the REPL
    PROMPT: str = "> "

    # Plain-text copy of the console output, disabled when empty
    LOG_FILE: str = ""

    # Debug logging
    DEBUG: bool = False

    # Print a greeting when the REPL starts
    GREETING: bool = True

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            HISTORY_SIZE=int(os.getenv("CONSOLE_HISTORY_SIZE", "100")),
            PROMPT=os.getenv("CONSOLE_PROMPT", "> "),
            LOG_FILE=os.getenv("CONSOLE_LOG_FILE", ""),
            DEBUG=_env_flag("CONSOLE_DEBUG", "false"),
            GREETING=_env_flag("CONSOLE_GREETING", "true"),
        )

    def validate(self) -> None:
        """Validate configuration values."""
        if self.HISTORY_SIZE < 1:
            raise ValueError("CONSOLE_HISTORY_SIZE must be at least 1")
