"""
Tests for the console facade and its built-in commands.
"""

import logging

import pytest

from commands.errors import DuplicateCommandError
from console import __version__
from console.client import DevConsole, create_console
from console.config import Config
from console.history import History
from console.input_buffer import InputBuffer
from console.main import run
from tests.conftest import Greeter, make_output
from utils.logger import get_logger, set_level


def test_builtins_are_registered(dev_console):
    names = [d.name for d in dev_console.find_commands()]
    for name in ["clear", "commands", "debug", "echo", "help", "history", "quit", "status", "version"]:
        assert name in names


def test_add_command_and_execute(dev_console):
    greeter = Greeter(dev_console.output)
    dev_console.add_command("greet", greeter, "greet") \
        .description("Greets someone") \
        .argument("name") \
        .register()

    dev_console.execute('greet "John Doe"; missing')

    assert dev_console.output.lines()[-2:] == ["Hello, John Doe!", "Command missing not found."]
    assert list(dev_console.history) == ['greet "John Doe"; missing']


def test_builtin_name_cannot_be_shadowed(dev_console):
    with pytest.raises(DuplicateCommandError):
        dev_console.add_command("echo", print).register()


def test_console_events(dev_console):
    added, removed, executed, missing = [], [], [], []
    dev_console.command_added += lambda *args: added.append(args)
    dev_console.command_removed += removed.append
    dev_console.command_executed += executed.append
    dev_console.command_not_found += missing.append

    descriptor = dev_console.add_command("noop", lambda: None).register()
    dev_console.execute("noop; nothing")
    dev_console.remove_command("noop")

    assert added == [("noop", descriptor.target, None)]
    assert executed == [descriptor]
    assert missing == ["nothing"]
    assert removed == ["noop"]
    assert dev_console.get_command("noop") is None


def test_echo(dev_console):
    dev_console.execute('echo "hello [b]world[/b]"')
    assert dev_console.output.lines()[-1] == "hello [b]world[/b]"


def test_echo_needs_quotes_for_spaces(dev_console):
    dev_console.execute("echo hello world")
    assert "Usage: echo [text:string]" in dev_console.output.lines()

    dev_console.execute("help echo")
    assert "  Prints the given text, quote it if it contains spaces" in dev_console.output.lines()


def test_help_without_argument(dev_console):
    dev_console.execute("help")
    assert "Type commands to list all commands" in dev_console.output.plain_text


def test_help_for_command(dev_console):
    dev_console.execute("help debug")
    lines = dev_console.output.lines()
    assert lines[-3:] == [
        "debug",
        "  Turns debug logging on or off",
        "  Usage: debug <state:on|off>",
    ]


def test_help_for_unknown_command(dev_console):
    dev_console.execute("help nope")
    assert dev_console.output.lines()[-1] == "Command nope not found."


def test_commands_with_prefix(dev_console):
    dev_console.execute("commands h")
    lines = dev_console.output.lines()[1:]
    assert [line.split()[0] for line in lines] == ["help", "history"]


def test_commands_with_unknown_prefix(dev_console):
    dev_console.execute("commands zz")
    assert dev_console.output.lines()[-1] == "No commands starting with zz"


def test_clear(dev_console):
    dev_console.execute("echo one")
    dev_console.execute("clear")
    assert dev_console.output.plain_text == ""


def test_history_command_and_capacity(dev_console):
    for number in range(6):
        dev_console.execute(f"echo {number}")
    dev_console.output.clear()

    dev_console.execute("history")

    # capacity is 5, the oldest line was dropped
    assert [line.split(None, 1)[1] for line in dev_console.output.lines()[1:]] == [
        "echo 1", "echo 2", "echo 3", "echo 4", "echo 5",
    ]


def test_version(dev_console):
    dev_console.execute("version")
    assert dev_console.output.lines()[-1] == f"devconsole {__version__}"


def test_status(dev_console):
    dev_console.execute("echo hi; nope")
    dev_console.execute("status")
    text = dev_console.output.plain_text
    assert "Console Status" in text
    assert "Commands executed: 1" in text
    assert "Commands not found: 1" in text
    assert "Lines executed: 1" in text


def test_debug_toggles_log_level(dev_console):
    logger = get_logger("Registry")
    try:
        dev_console.execute("debug on")
        assert logger.level == logging.DEBUG
        dev_console.execute("debug off")
        assert logger.level == logging.WARNING
        dev_console.execute("debug maybe")
        assert "Usage: debug <state:on|off>" in dev_console.output.lines()
    finally:
        set_level(logging.WARNING)


def test_quit_stops_console(dev_console):
    dev_console.start()
    dev_console.execute("quit")
    assert dev_console.running is False


def test_submit_runs_input_buffer(dev_console):
    dev_console.input_buffer.set("echo typed")
    dev_console.submit()
    assert dev_console.output.lines()[-1] == "typed"
    assert dev_console.input_buffer.text == ""


def test_run_reads_until_quit(dev_console, monkeypatch):
    lines = iter(["echo first", "  ", "quit", "echo never"])
    monkeypatch.setattr(dev_console.output.console, "input", lambda prompt="": next(lines))

    run(dev_console)

    assert list(dev_console.history) == ["echo first", "quit"]
    assert dev_console.running is False


def test_run_stops_at_end_of_input(dev_console, monkeypatch):
    def raise_eof(prompt=""):
        raise EOFError

    monkeypatch.setattr(dev_console.output.console, "input", raise_eof)
    run(dev_console)
    assert dev_console.running is False


def test_plain_text_log_file(tmp_path):
    log_file = tmp_path / "console.log"
    dev_console = DevConsole(Config(LOG_FILE=str(log_file)), output=None, rich_console=make_output().console)

    dev_console.execute("echo [b]logged[/b]")

    assert log_file.read_text(encoding="utf-8") == "$ echo [b]logged[/b]\n[b]logged[/b]\n"


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("CONSOLE_HISTORY_SIZE", "7")
    monkeypatch.setenv("CONSOLE_PROMPT", "$ ")
    monkeypatch.setenv("CONSOLE_DEBUG", "true")
    monkeypatch.setenv("CONSOLE_GREETING", "off")
    monkeypatch.delenv("CONSOLE_LOG_FILE", raising=False)

    config = Config.from_env()

    assert config == Config(HISTORY_SIZE=7, PROMPT="$ ", LOG_FILE="", DEBUG=True, GREETING=False)
    dev_console = create_console(output=make_output())
    assert dev_console.history.capacity == 7


def test_config_validation():
    with pytest.raises(ValueError):
        Config(HISTORY_SIZE=0).validate()
    with pytest.raises(ValueError):
        DevConsole(Config(HISTORY_SIZE=0), output=make_output())


def test_history_ring():
    history = History(2)
    history.push("a")
    history.push("   ")
    history.push("b")
    history.push("c")
    assert list(history) == ["b", "c"]
    assert history.last == "c"
    history.clear()
    assert history.last is None
    with pytest.raises(ValueError):
        History(0)


def test_input_buffer():
    buffer = InputBuffer("  ")
    assert not buffer
    buffer.set("echo")
    assert buffer
    buffer.clear()
    assert buffer.text == ""
