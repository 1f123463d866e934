"""
Command Handler
Executes console input lines against the command registry
"""

from typing import Any, List, Optional, Sequence

from rich.markup import escape

from commands.command_parser import ParsedCommand, parse_command, split_commands
from commands.command_registry import CommandDescriptor, CommandRegistry
from commands.errors import CommandNotFoundError, MalformedArgumentsError
from utils.error_handler import ErrorHandler, get_error_handler
from utils.logger import get_logger
from utils.signal import Signal
from utils.validation import ValidationUtils


class CommandHandler:
    """
    Runs input lines.

    A line is echoed, split on unescaped semicolons and every command in it
    runs in order. A missing command or a failing one is reported to the
    output and the next command still runs. The line then goes to history
    once and the input buffer is cleared.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        output: Any,
        history: Optional[Any] = None,
        input_buffer: Optional[Any] = None,
        error_handler: Optional[ErrorHandler] = None,
    ):
        self.logger = get_logger("Command")
        self.registry = registry
        self.output = output
        self.history = history
        self.input_buffer = input_buffer
        self.error_handler = error_handler or get_error_handler()

    @Signal
    def command_executed(self, descriptor: CommandDescriptor):
        """Emitted after a command returned normally."""

    @Signal
    def command_not_found(self, name: str):
        """Emitted when a command name is not registered."""

    @Signal
    def line_executed(self, line: str):
        """Emitted after every command of a line has run."""

    def execute(self, line: str) -> None:
        """
        Execute one input line.

        Args:
            line: Raw text as typed, may hold several commands
        """
        self.output.write_line(f"[dim]$[/dim] {escape(line)}")

        for raw in split_commands(line):
            if not raw.strip():
                continue

            parsed = parse_command(raw)
            if not parsed.name:
                continue

            self.dispatch(parsed)

        if self.history is not None:
            self.history.push(line)
        if self.input_buffer is not None:
            self.input_buffer.clear()

        self.line_executed(line)

    def dispatch(self, parsed: ParsedCommand) -> bool:
        """
        Look up and run one parsed command.

        Args:
            parsed: Output of parse_command with a non-empty name

        Returns:
            True if the command was found and returned normally
        """
        try:
            descriptor = self.registry.require(parsed.name)
        except CommandNotFoundError as error:
            self.logger.debug(f"Not found: {parsed.name}")
            self.output.write_line(f"[red]{escape(str(error))}[/red]")
            self.command_not_found(parsed.name)
            return False

        try:
            values = self.convert_arguments(descriptor, parsed.arguments)
        except MalformedArgumentsError as error:
            self.output.write_line(f"[red]{escape(str(error))}[/red]")
            self.output.write_line(f"Usage: {escape(descriptor.usage())}")
            return False

        try:
            self.logger.debug(f"Executing: {descriptor.name} {values!r}")
            descriptor.resolve()(*values)
        except Exception as error:
            self.error_handler.handle_exception(error, descriptor.name)
            self.output.write_line(
                f"[red]Command {escape(descriptor.name)} failed: {escape(str(error))}[/red]"
            )
            return False

        self.command_executed(descriptor)
        return True

    def convert_arguments(self, descriptor: CommandDescriptor, arguments: Sequence[str]) -> List[Any]:
        """
        Check the argument count and convert every argument to its type.

        Missing optional arguments are filled with their defaults.

        Raises:
            MalformedArgumentsError: On a count or type mismatch
        """
        specs = descriptor.arguments
        result = ValidationUtils.validate_args_length(
            arguments,
            min_length=descriptor.required_count,
            max_length=len(specs),
        )
        if not result:
            raise MalformedArgumentsError(result.error)

        values = [spec.convert(raw) for spec, raw in zip(specs, arguments)]
        values.extend(spec.default if spec.has_default else None for spec in specs[len(arguments):])
        return values
