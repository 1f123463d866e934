"""
Command Registry
Centralized command registration and lookup
"""

import threading
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple

from commands.argument_types import ArgumentSpec
from commands.errors import CommandNotFoundError, DuplicateCommandError, ProtectedError
from utils.logger import get_logger
from utils.signal import Signal

if TYPE_CHECKING:
    from commands.command_builder import CommandBuilder


class CommandDescriptor:
    """
    Definition of a registered command.

    Every field is fixed at construction. Assigning to any attribute later
    raises ProtectedError.
    """

    __slots__ = ("_name", "_target", "_method_name", "_description", "_arguments", "__weakref__")

    def __init__(
        self,
        name: str,
        target: Any,
        method_name: Optional[str] = None,
        description: str = "",
        arguments: Sequence[ArgumentSpec] = (),
    ):
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_target", target)
        object.__setattr__(self, "_method_name", method_name)
        object.__setattr__(self, "_description", description)
        object.__setattr__(self, "_arguments", tuple(arguments))

    def __setattr__(self, key: str, value: Any) -> None:
        raise ProtectedError(f"Cannot set {key!r} on registered command {self._name!r}")

    def __delattr__(self, key: str) -> None:
        raise ProtectedError(f"Cannot delete {key!r} on registered command {self._name!r}")

    @property
    def name(self) -> str:
        return self._name

    @property
    def target(self) -> Any:
        return self._target

    @property
    def method_name(self) -> Optional[str]:
        return self._method_name

    @property
    def description(self) -> str:
        return self._description

    @property
    def arguments(self) -> Tuple[ArgumentSpec, ...]:
        return self._arguments

    @property
    def required_count(self) -> int:
        return sum(1 for arg in self._arguments if arg.required)

    def resolve(self) -> Callable:
        """Return the callable that runs this command."""
        if self._method_name is None:
            return self._target
        return getattr(self._target, self._method_name)

    def usage(self) -> str:
        """Usage line, e.g. ``greet <name> [times:int]``."""
        return " ".join([self._name] + [arg.describe() for arg in self._arguments])

    def __repr__(self) -> str:
        return f"CommandDescriptor(name={self._name!r}, method_name={self._method_name!r})"


class CommandRegistry:
    """
    Mapping of command names to descriptors.

    Registering a name that is already taken raises DuplicateCommandError,
    the existing command is kept.
    """

    def __init__(self):
        self.logger = get_logger("Registry")
        self._commands: Dict[str, CommandDescriptor] = {}
        self._lock = threading.RLock()

    @Signal
    def command_added(self, name: str, target: Any, method_name: Optional[str]):
        """Emitted after a command is committed."""

    @Signal
    def command_removed(self, name: str):
        """Emitted on every remove() call, whether or not the name was registered."""

    def create(self, name: str, target: Any, method_name: Optional[str] = None) -> "CommandBuilder":
        """
        Start building a command.

        Nothing is registered until the builder's register() is called.

        Args:
            name: Command name
            target: Object owning the method, or a callable
            method_name: Method to call on target. When omitted, a callable
                target is called directly, otherwise the method named like
                the command is used.

        Returns:
            CommandBuilder seeded with these fields
        """
        from commands.command_builder import CommandBuilder

        return CommandBuilder(self, name, target, method_name)

    # Name used by the embedding application
    add_command = create

    def commit(self, descriptor: CommandDescriptor) -> CommandDescriptor:
        """
        Insert a built descriptor.

        Args:
            descriptor: Descriptor to register

        Returns:
            The registered descriptor

        Raises:
            DuplicateCommandError: If the name is already registered
        """
        with self._lock:
            if descriptor.name in self._commands:
                raise DuplicateCommandError(descriptor.name)
            self._commands[descriptor.name] = descriptor

        self.logger.debug(f"Registered command: {descriptor.name}")
        self.command_added(descriptor.name, descriptor.target, descriptor.method_name)
        return descriptor

    def remove(self, name: str) -> int:
        """
        Remove a command.

        The command_removed signal fires before the lookup, so it is emitted
        even when nothing is registered under the name.

        Args:
            name: Command name

        Returns:
            Number of removed commands, 0 or 1
        """
        self.command_removed(name)

        with self._lock:
            descriptor = self._commands.pop(name, None)

        if descriptor is None:
            return 0

        self.logger.debug(f"Removed command: {name}")
        return 1

    def get(self, name: str) -> Optional[CommandDescriptor]:
        """
        Get a command by exact name.

        Args:
            name: Command name

        Returns:
            CommandDescriptor or None if not found
        """
        with self._lock:
            return self._commands.get(name)

    def require(self, name: str) -> CommandDescriptor:
        """
        Get a command by exact name.

        Raises:
            CommandNotFoundError: If the name is not registered
        """
        descriptor = self.get(name)
        if descriptor is None:
            raise CommandNotFoundError(name)
        return descriptor

    def find(self, prefix: str = "") -> List[CommandDescriptor]:
        """
        Find commands whose name starts with prefix.

        Args:
            prefix: Name fragment, empty matches everything

        Returns:
            Matching descriptors sorted by name
        """
        with self._lock:
            matches = [d for name, d in self._commands.items() if name.startswith(prefix)]
        return sorted(matches, key=lambda d: d.name)

    def names(self) -> List[str]:
        """Sorted names of all registered commands."""
        with self._lock:
            return sorted(self._commands)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._commands

    def __len__(self) -> int:
        with self._lock:
            return len(self._commands)

    def __iter__(self) -> Iterator[CommandDescriptor]:
        return iter(self.find())
