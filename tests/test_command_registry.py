"""
Tests for the command registry, descriptors and builder.
"""

import pytest

from commands.argument_types import ArgumentType
from commands.command_registry import CommandDescriptor
from commands.errors import (
    CommandNotFoundError,
    DuplicateCommandError,
    InvalidCommandError,
    ProtectedError,
)


class Target:
    def run(self, *args):
        return args

    def other(self):
        pass

    def ping(self):
        pass


def test_create_does_not_register(registry):
    builder = registry.create("run", Target(), "run")
    assert builder.name == "run"
    assert registry.get("run") is None
    assert len(registry) == 0


@pytest.mark.parametrize("name", ["run", "spawn_enemy", "a", "g.fps", "x-1"])
def test_register_then_get(registry, name):
    target = Target()
    descriptor = registry.create(name, target, "run").description("Runs").register()

    assert registry.get(name) is descriptor
    assert descriptor.name == name
    assert descriptor.target is target
    assert descriptor.method_name == "run"
    assert descriptor.description == "Runs"
    assert name in registry


def test_remove_then_get(registry):
    registry.create("run", Target(), "run").register()

    assert registry.remove("run") == 1
    assert registry.get("run") is None
    assert "run" not in registry


def test_remove_twice_emits_twice(registry, recorder):
    registry.command_removed += recorder
    registry.create("run", Target(), "run").register()

    assert registry.remove("run") == 1
    assert registry.remove("run") == 0
    assert recorder.calls == [("run",), ("run",)]


def test_remove_unknown_still_emits(registry, recorder):
    registry.command_removed += recorder

    assert registry.remove("missing") == 0
    assert recorder.calls == [("missing",)]


def test_duplicate_is_rejected(registry):
    first = registry.create("run", Target(), "run").register()

    with pytest.raises(DuplicateCommandError) as excinfo:
        registry.create("run", Target(), "other").register()

    assert excinfo.value.name == "run"
    assert registry.get("run") is first
    assert len(registry) == 1


def test_command_added_signal(registry, recorder):
    target = Target()
    registry.command_added += recorder

    registry.create("run", target, "run").register()

    assert recorder.calls == [("run", target, "run")]


def test_command_added_not_emitted_for_duplicate(registry, recorder):
    registry.create("run", Target(), "run").register()
    registry.command_added += recorder

    with pytest.raises(DuplicateCommandError):
        registry.create("run", Target(), "run").register()

    assert recorder.calls == []


def test_require_missing_raises(registry):
    with pytest.raises(CommandNotFoundError) as excinfo:
        registry.require("nope")
    assert excinfo.value.name == "nope"


def test_find_by_prefix_is_sorted(registry):
    target = Target()
    for name in ["spawn", "stats", "sp", "quit"]:
        registry.create(name, target, "run").register()

    assert [d.name for d in registry.find("sp")] == ["sp", "spawn"]
    assert [d.name for d in registry.find("s")] == ["sp", "spawn", "stats"]
    assert [d.name for d in registry.find("")] == ["quit", "sp", "spawn", "stats"]
    assert registry.find("x") == []
    assert registry.names() == ["quit", "sp", "spawn", "stats"]
    assert [d.name for d in registry] == ["quit", "sp", "spawn", "stats"]


def test_descriptor_is_protected(registry):
    descriptor = registry.create("run", Target(), "run").register()

    with pytest.raises(ProtectedError):
        descriptor.name = "other"
    with pytest.raises(ProtectedError):
        descriptor.description = "changed"
    with pytest.raises(ProtectedError):
        del descriptor.target

    assert descriptor.name == "run"


def test_protected_error_is_attribute_error():
    descriptor = CommandDescriptor("run", Target(), "run")
    with pytest.raises(AttributeError):
        descriptor.method_name = "other"


def test_method_name_defaults_to_command_name(registry):
    descriptor = registry.create("ping", Target()).register()
    assert descriptor.method_name == "ping"


def test_callable_target_without_method_name(registry, recorder):
    descriptor = registry.create("record", recorder).argument("value").register()

    assert descriptor.method_name is None
    descriptor.resolve()("x")
    assert recorder.calls == [("x",)]


def test_unresolvable_method_is_rejected(registry):
    with pytest.raises(InvalidCommandError):
        registry.create("run", Target(), "missing").register()
    assert registry.get("run") is None


@pytest.mark.parametrize("name", ["", "two words", "semi;colon", 'quo"te', "back\\slash"])
def test_invalid_names_are_rejected(registry, name):
    with pytest.raises(InvalidCommandError):
        registry.create(name, Target(), "run").register()


def test_duplicate_argument_names_are_rejected(registry):
    builder = registry.create("run", Target(), "run") \
        .argument("x", ArgumentType.INT) \
        .argument("x", ArgumentType.STRING)

    with pytest.raises(InvalidCommandError, match="duplicate"):
        builder.register()
    assert registry.get("run") is None


def test_required_after_optional_is_rejected(registry):
    builder = registry.create("run", Target(), "run") \
        .argument("a", default=1) \
        .argument("b")

    with pytest.raises(InvalidCommandError):
        builder.register()


def test_filter_without_values_is_rejected(registry):
    with pytest.raises(InvalidCommandError):
        registry.create("run", Target(), "run").argument("mode", ArgumentType.FILTER).register()


def test_empty_range_is_rejected(registry):
    with pytest.raises(InvalidCommandError):
        registry.create("run", Target(), "run") \
            .argument("level", ArgumentType.INT_RANGE, minimum=10, maximum=1) \
            .register()


def test_validation_happens_only_at_register(registry):
    builder = registry.create("", Target(), "missing")
    builder.description("nothing checked yet").argument("x").argument("x")

    with pytest.raises(InvalidCommandError):
        builder.register()


def test_usage_line(registry):
    descriptor = registry.create("spawn", Target(), "run") \
        .argument("kind", ArgumentType.FILTER, values=("orc", "elf")) \
        .argument("count", ArgumentType.INT, default=1) \
        .argument("level", ArgumentType.INT_RANGE, minimum=1, maximum=10, default=1) \
        .register()

    assert descriptor.usage() == "spawn <kind:orc|elf> [count:int] [level:1..10]"
    assert descriptor.required_count == 1
    assert len(descriptor.arguments) == 3


@pytest.mark.parametrize("step", [0.1, 2.5, 0, -1])
def test_int_range_step_must_be_positive_whole_number(registry, step):
    with pytest.raises(InvalidCommandError, match="step"):
        registry.create("run", Target(), "run") \
            .argument("level", ArgumentType.INT_RANGE, minimum=0, maximum=10, step=step) \
            .register()
    assert registry.get("run") is None


@pytest.mark.parametrize("step", [0, -0.5])
def test_float_range_step_must_be_positive(registry, step):
    with pytest.raises(InvalidCommandError, match="positive step"):
        registry.create("run", Target(), "run") \
            .argument("volume", ArgumentType.FLOAT_RANGE, minimum=0, maximum=1, step=step) \
            .register()


def test_whole_number_float_step_is_accepted_for_int_range(registry, handler, recorder):
    registry.create("lvl", recorder) \
        .argument("level", ArgumentType.INT_RANGE, minimum=0, maximum=10, step=2.0) \
        .register()

    handler.execute("lvl 4; lvl 3")

    assert recorder.calls == [(4,)]
