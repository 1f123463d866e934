"""
Command system for the developer console.
"""

from .argument_types import ArgumentSpec, ArgumentType, FilterMode
from .command_parser import ParsedCommand, parse_command, parse_line, split_commands
from .command_registry import CommandDescriptor, CommandRegistry
from .command_builder import CommandBuilder
from .command_handler import CommandHandler
from .errors import (
    CommandNotFoundError,
    ConsoleError,
    DuplicateCommandError,
    InvalidCommandError,
    MalformedArgumentsError,
    ProtectedError,
)

__all__ = [
    "ArgumentSpec",
    "ArgumentType",
    "FilterMode",
    "ParsedCommand",
    "parse_command",
    "parse_line",
    "split_commands",
    "CommandDescriptor",
    "CommandRegistry",
    "CommandBuilder",
    "CommandHandler",
    "CommandNotFoundError",
    "ConsoleError",
    "DuplicateCommandError",
    "InvalidCommandError",
    "MalformedArgumentsError",
    "ProtectedError",
]
