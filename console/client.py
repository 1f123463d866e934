"""
Developer console client: wires the registry, dispatcher and collaborators.
"""

from typing import Any, List, Optional

from rich.console import Console

from commands.builtin_commands import BuiltinCommands
from commands.command_builder import CommandBuilder
from commands.command_handler import CommandHandler
from commands.command_registry import CommandDescriptor, CommandRegistry
from console.config import Config
from console.history import History
from console.input_buffer import InputBuffer
from console.output import ConsoleOutput
from utils.error_handler import ErrorHandler
from utils.logger import get_logger
from utils.monitoring import Monitoring

logger = get_logger("Console")


class DevConsole:
    """In-process developer console."""

    def __init__(
        self,
        config: Optional[Config] = None,
        output: Optional[ConsoleOutput] = None,
        rich_console: Optional[Console] = None,
    ):
        self.config = config or Config()
        self.config.validate()

        self.output = output or ConsoleOutput(rich_console, self.config.LOG_FILE or None)
        self.history = History(self.config.HISTORY_SIZE)
        self.input_buffer = InputBuffer()
        self.error_handler = ErrorHandler()
        self.registry = CommandRegistry()
        self.handler = CommandHandler(
            self.registry,
            self.output,
            history=self.history,
            input_buffer=self.input_buffer,
            error_handler=self.error_handler,
        )

        self.monitoring = Monitoring()
        self.monitoring.attach(self.handler, self.error_handler)

        # Events, re-exported so subscribers need not know which component emits them
        self.command_added = self.registry.command_added
        self.command_removed = self.registry.command_removed
        self.command_executed = self.handler.command_executed
        self.command_not_found = self.handler.command_not_found

        self.running = False

        BuiltinCommands(self).register()
        logger.debug(f"Console ready with {len(self.registry)} commands")

    # Registration

    def add_command(self, name: str, target: Any, method_name: Optional[str] = None) -> CommandBuilder:
        """Start defining a command. Call register() on the result to add it."""
        return self.registry.create(name, target, method_name)

    def remove_command(self, name: str) -> int:
        return self.registry.remove(name)

    def get_command(self, name: str) -> Optional[CommandDescriptor]:
        return self.registry.get(name)

    def find_commands(self, prefix: str = "") -> List[CommandDescriptor]:
        return self.registry.find(prefix)

    # Execution

    def execute(self, line: str) -> None:
        self.handler.execute(line)

    def submit(self) -> None:
        """Execute the text in the input buffer."""
        self.execute(self.input_buffer.text)

    def write(self, text: str) -> None:
        self.output.write(text)

    def write_line(self, text: str = "") -> None:
        self.output.write_line(text)

    def start(self) -> None:
        self.running = True

    def stop(self) -> None:
        self.running = False


def create_console(config: Optional[Config] = None, **kwargs: Any) -> DevConsole:
    """Create a console from the given or the environment configuration."""
    if config is None:
        config = Config.from_env()
    return DevConsole(config, **kwargs)
