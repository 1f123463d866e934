"""
Argument Types
Typed argument schema for registered commands
"""

import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple

from commands.errors import MalformedArgumentsError

TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off")

VECTOR_SPLIT_REGEX = re.compile(r"[,\s]+")


class ArgumentType(Enum):
    """Types an argument value can be converted to."""

    ANY = "any"
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    VECTOR2 = "vector2"
    VECTOR3 = "vector3"
    INT_RANGE = "int_range"
    FLOAT_RANGE = "float_range"
    FILTER = "filter"


class FilterMode(Enum):
    ALLOW = "allow"
    DENY = "deny"


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


# Marks an argument with no default value
MISSING: Any = _Missing()


@dataclass(frozen=True)
class ArgumentSpec:
    """
    Describes one positional argument of a command.

    Range types use minimum, maximum and step. FILTER uses values and mode:
    in ALLOW mode the value must be one of values, in DENY mode it must not be.
    """

    name: str
    type: ArgumentType = ArgumentType.ANY
    default: Any = MISSING
    required: Optional[bool] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    step: Optional[float] = None
    values: Tuple[str, ...] = field(default_factory=tuple)
    mode: FilterMode = FilterMode.ALLOW

    def __post_init__(self):
        if self.required is None:
            object.__setattr__(self, "required", self.default is MISSING)
        object.__setattr__(self, "values", tuple(str(v) for v in self.values))

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    def describe(self) -> str:
        """
        Short usage form, e.g. ``<count:int>`` or ``[level:0..10]``.

        Returns:
            Usage string for help output
        """
        if self.type == ArgumentType.FILTER and self.mode == FilterMode.ALLOW and self.values:
            kind = "|".join(self.values)
        elif self.type in (ArgumentType.INT_RANGE, ArgumentType.FLOAT_RANGE):
            kind = f"{_format_number(self.minimum)}..{_format_number(self.maximum)}"
        elif self.type == ArgumentType.ANY:
            kind = ""
        else:
            kind = self.type.value

        body = f"{self.name}:{kind}" if kind else self.name
        return f"<{body}>" if self.required else f"[{body}]"

    def convert(self, raw: str) -> Any:
        """
        Convert a raw token to this argument's type.

        Args:
            raw: Token as produced by the command parser

        Returns:
            Converted value

        Raises:
            MalformedArgumentsError: If the token does not fit the type
        """
        converter = _CONVERTERS[self.type]
        return converter(self, raw)

    def _fail(self, raw: str, expected: str) -> MalformedArgumentsError:
        return MalformedArgumentsError(
            f"Invalid value for {self.name}: {raw!r} (expected {expected})"
        )


def _format_number(value: Optional[float]) -> str:
    if value is None:
        return ""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _convert_string(spec: ArgumentSpec, raw: str) -> str:
    return raw


def _convert_int(spec: ArgumentSpec, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise spec._fail(raw, "an integer") from None


def _convert_float(spec: ArgumentSpec, raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise spec._fail(raw, "a number") from None
    if not math.isfinite(value):
        raise spec._fail(raw, "a finite number")
    return value


def _convert_bool(spec: ArgumentSpec, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise spec._fail(raw, "true or false")


def _convert_vector(spec: ArgumentSpec, raw: str, size: int) -> Tuple[float, ...]:
    parts = [p for p in VECTOR_SPLIT_REGEX.split(raw.strip().strip("()")) if p]
    if len(parts) != size:
        raise spec._fail(raw, f"{size} comma separated numbers")
    try:
        return tuple(float(p) for p in parts)
    except ValueError:
        raise spec._fail(raw, f"{size} comma separated numbers") from None


def _check_range(spec: ArgumentSpec, raw: str, value: float) -> None:
    if spec.minimum is not None and value < spec.minimum:
        raise spec._fail(raw, f"at least {_format_number(spec.minimum)}")
    if spec.maximum is not None and value > spec.maximum:
        raise spec._fail(raw, f"at most {_format_number(spec.maximum)}")


def _convert_int_range(spec: ArgumentSpec, raw: str) -> int:
    value = _convert_int(spec, raw)
    _check_range(spec, raw, value)
    if spec.step:
        origin = spec.minimum or 0
        if (value - origin) % spec.step:
            raise spec._fail(raw, f"a multiple of {_format_number(spec.step)} from {_format_number(origin)}")
    return value


def _convert_float_range(spec: ArgumentSpec, raw: str) -> float:
    value = _convert_float(spec, raw)
    _check_range(spec, raw, value)
    if spec.step:
        # Snap to the nearest step, then clamp back into range
        origin = spec.minimum or 0.0
        value = origin + round((value - origin) / spec.step) * spec.step
        if spec.maximum is not None:
            value = min(value, spec.maximum)
    return value


def _convert_filter(spec: ArgumentSpec, raw: str) -> str:
    listed = raw in spec.values
    if spec.mode == FilterMode.ALLOW and not listed:
        raise spec._fail(raw, "one of " + ", ".join(spec.values))
    if spec.mode == FilterMode.DENY and listed:
        raise spec._fail(raw, "none of " + ", ".join(spec.values))
    return raw


_CONVERTERS = {
    ArgumentType.ANY: _convert_string,
    ArgumentType.STRING: _convert_string,
    ArgumentType.INT: _convert_int,
    ArgumentType.FLOAT: _convert_float,
    ArgumentType.BOOL: _convert_bool,
    ArgumentType.VECTOR2: lambda spec, raw: _convert_vector(spec, raw, 2),
    ArgumentType.VECTOR3: lambda spec, raw: _convert_vector(spec, raw, 3),
    ArgumentType.INT_RANGE: _convert_int_range,
    ArgumentType.FLOAT_RANGE: _convert_float_range,
    ArgumentType.FILTER: _convert_filter,
}
