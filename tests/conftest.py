"""
Shared fixtures for the console tests.
"""

import io

import pytest
from rich.console import Console

from commands.command_handler import CommandHandler
from commands.command_registry import CommandRegistry
from console.client import DevConsole
from console.config import Config
from console.history import History
from console.input_buffer import InputBuffer
from console.output import ConsoleOutput
from utils.error_handler import ErrorHandler


def make_output() -> ConsoleOutput:
    rich_console = Console(file=io.StringIO(), width=120, color_system=None, highlight=False)
    return ConsoleOutput(rich_console)


class Recorder:
    """Collects the arguments of every call."""

    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)


class Greeter:
    def __init__(self, output):
        self.output = output
        self.greeted = []

    def greet(self, name):
        self.greeted.append(name)
        self.output.write_line(f"Hello, {name}!")

    def explode(self):
        raise RuntimeError("boom")


@pytest.fixture
def output():
    return make_output()


@pytest.fixture
def registry():
    return CommandRegistry()


@pytest.fixture
def history():
    return History(10)


@pytest.fixture
def input_buffer():
    return InputBuffer()


@pytest.fixture
def handler(registry, output, history, input_buffer):
    return CommandHandler(registry, output, history, input_buffer, ErrorHandler())


@pytest.fixture
def greeter(output):
    return Greeter(output)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def dev_console():
    return DevConsole(Config(HISTORY_SIZE=5), output=make_output())
