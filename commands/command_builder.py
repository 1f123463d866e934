"""
Command Builder
Fluent construction of a command before it is registered
"""

from typing import TYPE_CHECKING, Any, Iterable, List, Optional

from commands.argument_types import MISSING, ArgumentSpec, ArgumentType, FilterMode
from commands.command_registry import CommandDescriptor
from commands.errors import InvalidCommandError
from utils.validation import ValidationUtils

if TYPE_CHECKING:
    from commands.command_registry import CommandRegistry


class CommandBuilder:
    """
    Collects the definition of one command.

    Every setter returns the builder, so a definition reads as one chain::

        console.add_command("greet", greeter, "say_hello") \\
            .description("Greets someone") \\
            .argument("name", ArgumentType.STRING) \\
            .argument("times", ArgumentType.INT, default=1) \\
            .register()

    Nothing is checked until register().
    """

    def __init__(self, registry: "CommandRegistry", name: str, target: Any, method_name: Optional[str] = None):
        self._registry = registry
        self._name = name
        self._target = target
        self._method_name = method_name
        self._description = ""
        self._arguments: List[ArgumentSpec] = []

    @property
    def name(self) -> str:
        return self._name

    def description(self, text: str) -> "CommandBuilder":
        """Set the text shown by help."""
        self._description = text
        return self

    def argument(
        self,
        name: str,
        type: ArgumentType = ArgumentType.ANY,
        default: Any = MISSING,
        required: Optional[bool] = None,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
        step: Optional[float] = None,
        values: Iterable[Any] = (),
        mode: FilterMode = FilterMode.ALLOW,
    ) -> "CommandBuilder":
        """
        Append a positional argument.

        Args:
            name: Argument name, unique within the command
            type: Value type the raw token is converted to
            default: Value used when the argument is left out
            required: Defaults to True when no default is given
            minimum: Lower bound for range types
            maximum: Upper bound for range types
            step: Step for range types
            values: Listed values for FILTER
            mode: Whether FILTER values are allowed or denied

        Returns:
            Self for chaining
        """
        self._arguments.append(ArgumentSpec(
            name=name,
            type=type,
            default=default,
            required=required,
            minimum=minimum,
            maximum=maximum,
            step=step,
            values=tuple(values),
            mode=mode,
        ))
        return self

    def build(self) -> CommandDescriptor:
        """
        Validate the collected definition and create the descriptor.

        Raises:
            InvalidCommandError: If the definition is not usable
        """
        result = ValidationUtils.validate_command_name(self._name)
        if not result:
            raise InvalidCommandError(result.error)

        method_name = self._resolve_method_name()

        names = [arg.name for arg in self._arguments]
        for arg_name in names:
            result = ValidationUtils.validate_argument_name(arg_name)
            if not result:
                raise InvalidCommandError(f"{self._name}: {result.error}")

        duplicates = ValidationUtils.find_duplicates(names)
        if duplicates:
            raise InvalidCommandError(
                f"{self._name}: duplicate argument names: {', '.join(duplicates)}"
            )

        optional_seen = None
        for arg in self._arguments:
            if not arg.required:
                optional_seen = arg.name
            elif optional_seen is not None:
                raise InvalidCommandError(
                    f"{self._name}: required argument {arg.name} follows optional argument {optional_seen}"
                )
            if not isinstance(arg.type, ArgumentType):
                raise InvalidCommandError(f"{self._name}: unknown type for argument {arg.name}")
            if arg.type == ArgumentType.FILTER and not arg.values:
                raise InvalidCommandError(f"{self._name}: filter argument {arg.name} has no values")
            if (arg.minimum is not None and arg.maximum is not None
                    and arg.minimum > arg.maximum):
                raise InvalidCommandError(f"{self._name}: argument {arg.name} has an empty range")
            if arg.step is not None:
                self._check_step(arg)

        return CommandDescriptor(
            name=self._name,
            target=self._target,
            method_name=method_name,
            description=self._description,
            arguments=self._arguments,
        )

    def register(self) -> CommandDescriptor:
        """
        Build the descriptor and commit it to the registry.

        Raises:
            InvalidCommandError: If the definition is not usable
            DuplicateCommandError: If the name is already registered
        """
        return self._registry.commit(self.build())

    def _check_step(self, arg: ArgumentSpec) -> None:
        if not arg.step > 0:
            raise InvalidCommandError(f"{self._name}: argument {arg.name} needs a positive step")
        if arg.type == ArgumentType.INT_RANGE and not float(arg.step).is_integer():
            raise InvalidCommandError(f"{self._name}: argument {arg.name} needs a whole number step")

    def _resolve_method_name(self) -> Optional[str]:
        method_name = self._method_name
        if method_name is None:
            if callable(self._target):
                return None
            method_name = self._name

        method = getattr(self._target, method_name, None)
        if not callable(method):
            raise InvalidCommandError(
                f"{self._name}: {type(self._target).__name__} has no callable {method_name!r}"
            )
        return method_name
