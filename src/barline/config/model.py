# topmark:header:start
#
#   project      : Barline
#   file         : model.py
#   file_relpath : src/barline/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model of a status bar.

This module defines:
    - `Config`: the immutable configuration record produced by the decoder.
    - `Position` variants (`Top`, `TopW`, `Bottom`, `BottomW`, `Static`) and
      their `Align` parameter.
    - `LowerOnStart`: the enumeration accepted by the ``lowerOnStart``
      attribute, matched on its printed names.
    - `DEFAULT_CONFIG`: the baseline record supplying per-field defaults.

Scope:
    - *In scope*: data shapes and conversion of structured values (as read by
      [`read_value`][barline.parsing.literal.read_value]) into positions.
    - *Out of scope*: the ``Config { ... }`` surface syntax, which lives in
      [`barline.config.decoder`][barline.config.decoder].
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

from barline.commands import Monitor, runnable_to_value
from barline.parsing.literal import Constructor, Record, render_value

if TYPE_CHECKING:
    from barline.commands import Runnable
    from barline.parsing.literal import Value


class Align(str, Enum):
    """Horizontal alignment of a partial-width bar."""

    L = "L"
    R = "R"
    C = "C"


class LowerOnStart(str, Enum):
    """Whether the bar is lowered in the window stack on start.

    Members are matched in configuration text by their printed names
    (``False`` / ``True``), and are truthy exactly when the printed name is
    ``True``.
    """

    FALSE = "False"
    TRUE = "True"

    def __str__(self) -> str:
        return self.value

    def __bool__(self) -> bool:
        return self is LowerOnStart.TRUE

    @classmethod
    def printed_names(cls) -> tuple[str, ...]:
        """Return the printed names accepted by the decoder, in declaration order."""
        return tuple(member.value for member in cls)


# ------------------ Positions ------------------


@dataclass(frozen=True)
class Top:
    """Full-width bar at the top of the screen."""


@dataclass(frozen=True)
class Bottom:
    """Full-width bar at the bottom of the screen."""


@dataclass(frozen=True)
class TopW:
    """Top bar covering ``width`` percent of the screen, aligned by ``align``."""

    align: Align
    width: int


@dataclass(frozen=True)
class BottomW:
    """Bottom bar covering ``width`` percent of the screen, aligned by ``align``."""

    align: Align
    width: int


@dataclass(frozen=True)
class Static:
    """Bar at a fixed pixel geometry."""

    xpos: int
    ypos: int
    width: int
    height: int


Position = Union[Top, TopW, Bottom, BottomW, Static]

_STATIC_FIELDS: tuple[str, ...] = ("xpos", "ypos", "width", "height")


def position_from_value(value: Value) -> Position:
    """Convert a structured value into a `Position`.

    Accepted forms: ``Top``, ``Bottom``, ``TopW <L|R|C> <int>``,
    ``BottomW <L|R|C> <int>`` and
    ``Static { xpos = <int>, ypos = <int>, width = <int>, height = <int> }``.

    Args:
        value (Value): The value read from the configuration block.

    Returns:
        Position: The corresponding position.

    Raises:
        ValueError: If ``value`` does not describe a position.
    """
    if isinstance(value, Record):
        if value.name != "Static":
            raise ValueError(f"unknown position record {value.name!r}")
        if set(value.fields) != set(_STATIC_FIELDS):
            raise ValueError(f"Static needs exactly the fields {', '.join(_STATIC_FIELDS)}")
        coords: list[int] = []
        for name in _STATIC_FIELDS:
            coord: Value = value.fields[name]
            if not isinstance(coord, int):
                raise ValueError(f"Static field {name!r} must be an integer")
            coords.append(coord)
        return Static(*coords)

    if not isinstance(value, Constructor):
        raise ValueError(f"expected a position, got {value!r}")
    if value.name in ("Top", "Bottom"):
        if value.args:
            raise ValueError(f"{value.name} takes no arguments")
        return Top() if value.name == "Top" else Bottom()
    if value.name in ("TopW", "BottomW"):
        if len(value.args) != 2:
            raise ValueError(f"{value.name} takes an alignment and a width")
        align, width = value.args
        if not isinstance(align, Constructor) or align.args or align.name not in Align.__members__:
            raise ValueError(f"{value.name} alignment must be one of L, R or C")
        if not isinstance(width, int):
            raise ValueError(f"{value.name} width must be an integer")
        cls = TopW if value.name == "TopW" else BottomW
        return cls(Align(align.name), width)
    raise ValueError(f"unknown position {value.name!r}")


def position_to_value(position: Position) -> Value:
    """Return the structured-value form of ``position`` (inverse of `position_from_value`)."""
    if isinstance(position, Static):
        return Record("Static", {name: getattr(position, name) for name in _STATIC_FIELDS})
    if isinstance(position, (TopW, BottomW)):
        return Constructor(
            type(position).__name__, (Constructor(position.align.value), position.width)
        )
    return Constructor(type(position).__name__)


# ------------------ Configuration record ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable status bar configuration.

    Attributes:
        font (str): Font name.
        bg_color (str): Background color.
        fg_color (str): Default foreground color; the ambient color of markup.
        position (Position): Where the bar is placed.
        lower_on_start (LowerOnStart): Whether to lower the bar on start.
        commands (tuple[Runnable, ...]): Commands available to the template.
        sep_char (str): Separator delimiting command references in the template;
            only its first character is significant.
        align_sep (str): Two characters splitting the template into left,
            center and right regions.
        template (str): The output template.

    Commands may carry list arguments, so configs are unhashable.
    """

    font: str
    bg_color: str
    fg_color: str
    position: Position
    lower_on_start: LowerOnStart
    commands: tuple[Runnable, ...] = field(default=())
    sep_char: str = "%"
    align_sep: str = "}{"
    template: str = ""

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly view of this record, keyed by attribute name."""
        return {
            "font": self.font,
            "bgColor": self.bg_color,
            "fgColor": self.fg_color,
            "position": render_value(position_to_value(self.position)),
            "lowerOnStart": self.lower_on_start.value,
            "commands": [render_value(runnable_to_value(command)) for command in self.commands],
            "sepChar": self.sep_char,
            "alignSep": self.align_sep,
            "template": self.template,
        }


DEFAULT_CONFIG: Config = Config(
    font="-misc-fixed-*-*-*-*-10-*-*-*-*-*-*-*",
    bg_color="#000000",
    fg_color="#BFBFBF",
    position=Top(),
    lower_on_start=LowerOnStart.TRUE,
    commands=(
        Monitor("Date", ("%a %b %_d %Y * %H:%M:%S", "theDate", 10)),
        Monitor("StdinReader"),
    ),
    sep_char="%",
    align_sep="}{",
    template="%StdinReader% }{ <fc=#00FF00>%uname%</fc> * <fc=#FF0000>%theDate%</fc>",
)
