"""
Built-in Commands
Commands every console starts with
"""

import logging
from typing import TYPE_CHECKING, Optional

from rich.markup import escape

from commands.argument_types import ArgumentType
from commands.errors import CommandNotFoundError
from utils.logger import set_level

if TYPE_CHECKING:
    from console.client import DevConsole


class BuiltinCommands:
    """Handlers for the built-in commands, bound to one console."""

    def __init__(self, console: "DevConsole"):
        self.console = console

    def register(self) -> None:
        """Register all built-in commands."""
        add = self.console.add_command

        add("echo", self, "cmd_echo") \
            .description("Prints the given text, quote it if it contains spaces") \
            .argument("text", ArgumentType.STRING, default="") \
            .register()

        add("help", self, "cmd_help") \
            .description("Shows how to use the console, or the usage of one command") \
            .argument("command", ArgumentType.STRING, default=None) \
            .register()

        add("commands", self, "cmd_commands") \
            .description("Lists registered commands, optionally those starting with a prefix") \
            .argument("prefix", ArgumentType.STRING, default="") \
            .register()

        add("clear", self, "cmd_clear") \
            .description("Clears the console output") \
            .register()

        add("history", self, "cmd_history") \
            .description("Lists previously executed lines") \
            .register()

        add("version", self, "cmd_version") \
            .description("Shows the console version") \
            .register()

        add("status", self, "cmd_status") \
            .description("Shows console health status and metrics") \
            .register()

        add("debug", self, "cmd_debug") \
            .description("Turns debug logging on or off") \
            .argument("state", ArgumentType.FILTER, values=("on", "off")) \
            .register()

        add("quit", self, "cmd_quit") \
            .description("Stops the console") \
            .register()

    # Command Handlers

    def cmd_echo(self, text: str) -> None:
        self.console.output.write_line(escape(text))

    def cmd_help(self, command: Optional[str]) -> None:
        output = self.console.output

        if command is None:
            output.write_line("Type [b]commands[/b] to list all commands, [b]help <command>[/b] for details.")
            output.write_line("Separate commands with [b];[/b] to run several on one line, "
                              "and quote arguments that contain spaces.")
            return

        try:
            descriptor = self.console.registry.require(command)
        except CommandNotFoundError as error:
            output.write_line(f"[red]{escape(str(error))}[/red]")
            return

        output.write_line(f"[b]{escape(descriptor.name)}[/b]")
        if descriptor.description:
            output.write_line(f"  {escape(descriptor.description)}")
        output.write_line(f"  Usage: {escape(descriptor.usage())}")

    def cmd_commands(self, prefix: str) -> None:
        descriptors = self.console.registry.find(prefix)
        if not descriptors:
            self.console.output.write_line(f"No commands starting with {escape(prefix)}")
            return

        width = max(len(d.name) for d in descriptors)
        for descriptor in descriptors:
            self.console.output.write_line(
                f"[b]{escape(descriptor.name.ljust(width))}[/b]  {escape(descriptor.description)}"
            )

    def cmd_clear(self) -> None:
        self.console.output.clear()

    def cmd_history(self) -> None:
        for number, line in enumerate(self.console.history, start=1):
            self.console.output.write_line(f"[dim]{number:>3}[/dim] {escape(line)}")

    def cmd_version(self) -> None:
        from console import __version__

        self.console.output.write_line(f"devconsole {__version__}")

    def cmd_status(self) -> None:
        self.console.output.write_line(self.console.monitoring.format_status())

    def cmd_debug(self, state: str) -> None:
        enabled = state == "on"
        set_level(logging.DEBUG if enabled else logging.WARNING)
        self.console.output.write_line(f"Debug logging {'enabled' if enabled else 'disabled'}")

    def cmd_quit(self) -> None:
        self.console.stop()
