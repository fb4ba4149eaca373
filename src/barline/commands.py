# topmark:header:start
#
#   project      : Barline
#   file         : commands.py
#   file_relpath : src/barline/commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runnable command handles referenced from templates.

Barline never runs commands; it only needs to know, for each configured
command, the *alias* by which templates refer to it and its refresh rate.
Two kinds of runnables exist:

- `Command`: an arbitrary program (``Com program args alias rate`` in the
  configuration syntax).
- `Monitor`: any built-in plugin such as ``Cpu``, ``Memory`` or ``Date``,
  kept as its kind plus raw arguments.

Configuration values are converted with `commands_from_value`, which accepts a
list of ``Run <Kind> args...`` elements as read by
[`read_value`][barline.parsing.literal.read_value].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Protocol, runtime_checkable

from barline.constants import DEFAULT_REFRESH_RATE
from barline.parsing.literal import Constructor

if TYPE_CHECKING:
    from collections.abc import Iterable

    from barline.parsing.literal import Value

RUN_CONSTRUCTOR: Final[str] = "Run"
COMMAND_CONSTRUCTOR: Final[str] = "Com"

# Monitor kinds whose alias is one of their (string) arguments, by index.
_ALIAS_ARGUMENT: Final[dict[str, int]] = {
    "Date": 1,
    "Weather": 0,
    "Network": 0,
    "Thermal": 0,
    "CommandReader": 1,
    "PipeReader": 1,
}

_FIXED_ALIASES: Final[dict[str, str]] = {
    "StdinReader": "StdinReader",
}


@runtime_checkable
class Runnable(Protocol):
    """A data-producing command as seen by the template parser."""

    @property
    def alias(self) -> str:
        """Short name used to reference the command in a template."""
        ...

    @property
    def rate(self) -> int | None:
        """Refresh interval in tenths of a second, or None when event-driven."""
        ...

    def to_value(self) -> Value:
        """Return the constructor form, without the ``Run`` wrapper."""
        ...


@dataclass(frozen=True)
class Command:
    """An external program run every ``rate`` ticks.

    Attributes:
        program (str): Program to run.
        args (tuple[str, ...]): Program arguments.
        alias_name (str): Declared alias; empty means "use the program name".
        rate (int): Refresh interval in tenths of a second.
    """

    program: str
    args: tuple[str, ...] = ()
    alias_name: str = ""
    rate: int = DEFAULT_REFRESH_RATE

    @property
    def alias(self) -> str:
        """The declared alias, or the program name when none was declared."""
        return self.alias_name or self.program

    def to_value(self) -> Value:
        return Constructor(
            COMMAND_CONSTRUCTOR, (self.program, list(self.args), self.alias_name, self.rate)
        )


@dataclass(frozen=True)
class Monitor:
    """A built-in monitor plugin, identified by its kind.

    Attributes:
        kind (str): Constructor name, e.g. ``"Cpu"`` or ``"Date"``.
        args (tuple[Value, ...]): Raw constructor arguments.

    Arguments may be lists, so monitors compare by value but are unhashable.
    """

    kind: str
    args: tuple[Value, ...] = ()

    __hash__ = None  # type: ignore[assignment]

    @property
    def alias(self) -> str:
        if self.kind in _FIXED_ALIASES:
            return _FIXED_ALIASES[self.kind]
        if self.kind == "Wireless":
            iface: Value | None = self.args[0] if self.args else None
            if isinstance(iface, str):
                return iface + "wi"
        index: int | None = _ALIAS_ARGUMENT.get(self.kind)
        if index is not None and index < len(self.args):
            candidate: Value = self.args[index]
            if isinstance(candidate, str):
                return candidate
        return self.kind.lower()

    @property
    def rate(self) -> int | None:
        if self.args and isinstance(self.args[-1], int):
            return self.args[-1]
        return None

    def to_value(self) -> Value:
        return Constructor(self.kind, self.args)


def placeholder_command(reference: str) -> Command:
    """Return the stand-in used for a template reference with no known command.

    Args:
        reference (str): The unresolved template reference.

    Returns:
        Command: ``reference`` run as a program with no arguments, no declared
            alias and the default refresh rate.
    """
    return Command(program=reference, args=(), alias_name="", rate=DEFAULT_REFRESH_RATE)


def alias_table(commands: Iterable[Runnable]) -> dict[str, Runnable]:
    """Map each command's alias to the command; later commands win on clashes."""
    return {command.alias: command for command in commands}


def runnable_from_value(value: Value) -> Runnable:
    """Convert one ``Run <Kind> args...`` element into a runnable.

    Both ``Run Cpu [] 10`` and ``Run (Cpu [] 10)`` are accepted.

    Args:
        value (Value): A structured value as read from a configuration block.

    Returns:
        Runnable: A `Command` for ``Com`` elements, a `Monitor` otherwise.

    Raises:
        ValueError: If ``value`` is not a well-formed ``Run`` element.
    """
    if not isinstance(value, Constructor) or value.name != RUN_CONSTRUCTOR:
        raise ValueError(f"expected a '{RUN_CONSTRUCTOR} ...' element, got {value!r}")
    if not value.args or not isinstance(value.args[0], Constructor):
        raise ValueError(f"'{RUN_CONSTRUCTOR}' must be followed by a command constructor")
    head: Constructor = value.args[0]
    args: tuple[Value, ...] = head.args + value.args[1:]
    if head.name == COMMAND_CONSTRUCTOR:
        return _command_from_args(args)
    return Monitor(kind=head.name, args=args)


def runnable_to_value(command: Runnable) -> Value:
    """Return the ``Run ...`` element for ``command`` (inverse of `runnable_from_value`)."""
    return Constructor(RUN_CONSTRUCTOR, (command.to_value(),))


def commands_from_value(value: Value) -> tuple[Runnable, ...]:
    """Convert the value of the ``commands`` attribute.

    Args:
        value (Value): A list of ``Run`` elements.

    Returns:
        tuple[Runnable, ...]: The runnables, in declaration order.

    Raises:
        ValueError: If ``value`` is not a list of ``Run`` elements.
    """
    if not isinstance(value, list):
        raise ValueError(f"expected a list of commands, got {value!r}")
    return tuple(runnable_from_value(item) for item in value)


def _command_from_args(args: tuple[Value, ...]) -> Command:
    if len(args) != 4:
        raise ValueError(f"'{COMMAND_CONSTRUCTOR}' takes 4 arguments, got {len(args)}")
    program, arguments, alias_name, rate = args
    if not isinstance(program, str) or not isinstance(alias_name, str):
        raise ValueError(f"'{COMMAND_CONSTRUCTOR}' program and alias must be strings")
    if not isinstance(arguments, list) or not all(isinstance(a, str) for a in arguments):
        raise ValueError(f"'{COMMAND_CONSTRUCTOR}' arguments must be a list of strings")
    if not isinstance(rate, int):
        raise ValueError(f"'{COMMAND_CONSTRUCTOR}' rate must be an integer")
    return Command(
        program=program,
        args=tuple(str(a) for a in arguments),
        alias_name=alias_name,
        rate=rate,
    )
