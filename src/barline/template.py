# topmark:header:start
#
#   project      : Barline
#   file         : template.py
#   file_relpath : src/barline/template.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Template parser.

A template interleaves literal text with references to commands, each
reference enclosed in a pair of separator characters (``%`` by default)::

    "%cpu% | %memory% * %date%"

`tokenize_template` splits a template into `TemplateSegment` triples
``(prefix, reference, suffix)``; `parse_template` then resolves each reference
against the aliases of the configured commands. Unknown references resolve to
a placeholder [`Command`][barline.commands.Command] that runs the reference
itself with no arguments every 10 ticks.

Tokenization is total over any text:

- a template without separators is a single literal segment ``(text, "", "")``;
- a dangling separator (one with no closing partner) and everything after it
  are kept as literal text, appended to the previous segment's suffix.

Template rendering never fails: if tokenization is impossible (an empty
separator), `parse_template` logs a warning and returns one empty segment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, NamedTuple

from barline.commands import alias_table, placeholder_command
from barline.config.logging import get_logger
from barline.errors import TemplateError
from barline.parsing.scanner import Scanner

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from barline.commands import Runnable
    from barline.config.logging import BarlineLogger
    from barline.config.model import Config

logger: BarlineLogger = get_logger(__name__)


class TemplateSegment(NamedTuple):
    """One ``prefix SEP reference SEP suffix`` step of a template."""

    prefix: str
    reference: str
    suffix: str


class ResolvedSegment(NamedTuple):
    """A template segment whose reference was resolved to a command."""

    command: Runnable
    prefix: str
    suffix: str


@dataclass(frozen=True)
class TemplateContext:
    """Read-only lookup data for template resolution.

    Attributes:
        aliases (Mapping[str, Runnable]): Commands keyed by their alias.
    """

    aliases: Mapping[str, Runnable] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_commands(cls, commands: Iterable[Runnable]) -> TemplateContext:
        """Build a context from configured commands, keyed by their aliases."""
        return cls(MappingProxyType(alias_table(commands)))

    def resolve(self, reference: str) -> Runnable:
        """Return the command for ``reference``, or a placeholder if unknown."""
        command: Runnable | None = self.aliases.get(reference)
        if command is None:
            logger.debug("template.resolve: no command aliased %r; using placeholder", reference)
            return placeholder_command(reference)
        return command


def tokenize_template(separator: str, text: str) -> list[TemplateSegment]:
    """Split ``text`` into segments delimited by ``separator``.

    Args:
        separator (str): Separator; only its first character is significant.
        text (str): The template.

    Returns:
        list[TemplateSegment]: Segments in order; empty for an empty template.

    Raises:
        TemplateError: If ``separator`` is empty.
    """
    scanner = Scanner(text, source="template", error_cls=TemplateError)
    if not separator:
        scanner.fail("a separator character")
    sep: str = separator[0]

    def not_sep(ch: str) -> bool:
        return ch != sep

    segments: list[TemplateSegment] = []
    while not scanner.at_end():
        prefix: str = scanner.take_while(not_sep)
        if scanner.at_end():
            segments.append(TemplateSegment(prefix, "", ""))
            break
        opening: int = scanner.mark()
        scanner.advance()
        reference: str = scanner.take_while(not_sep)
        if scanner.at_end():
            dangling: str = scanner.text[opening:]
            logger.debug(
                "template.tokenize: unterminated reference at %s", scanner.position(opening)
            )
            if segments:
                last: TemplateSegment = segments[-1]
                segments[-1] = last._replace(suffix=last.suffix + prefix + dangling)
            else:
                segments.append(TemplateSegment(prefix + dangling, "", ""))
            break
        scanner.advance()
        suffix: str = scanner.take_while(not_sep)
        segments.append(TemplateSegment(prefix, reference, suffix))
    return segments


def parse_template(separator: str, context: TemplateContext, text: str) -> list[ResolvedSegment]:
    """Tokenize ``text`` and resolve every reference through ``context``.

    Args:
        separator (str): Separator character delimiting references.
        context (TemplateContext): Alias lookup for configured commands.
        text (str): The template.

    Returns:
        list[ResolvedSegment]: One resolved segment per template segment.
    """
    try:
        segments: list[TemplateSegment] = tokenize_template(separator, text)
    except TemplateError as exc:
        logger.warning("template: %s", exc)
        segments = [TemplateSegment("", "", "")]
    return [
        ResolvedSegment(context.resolve(seg.reference), seg.prefix, seg.suffix)
        for seg in segments
    ]


def parse_config_template(config: Config, text: str | None = None) -> list[ResolvedSegment]:
    """Parse ``text`` (default: the configured template) with the settings of ``config``."""
    context: TemplateContext = TemplateContext.from_commands(config.commands)
    return parse_template(config.sep_char, context, config.template if text is None else text)


def split_alignment(align_sep: str, template: str) -> tuple[str, str, str]:
    """Split ``template`` into its left, center and right regions.

    With ``align_sep == "}{"``, ``"L}C{R"`` splits into ``("L", "C", "R")``.

    Args:
        align_sep (str): Two characters: the end of the left region and the
            start of the right region.
        template (str): The template to split.

    Returns:
        tuple[str, str, str]: The three regions, or ``(template, "", "")`` when
            a marker is missing or ``align_sep`` is not two characters long.
    """
    if len(align_sep) != 2:
        return template, "", ""
    left_mark, right_mark = align_sep
    left, found, rest = template.partition(left_mark)
    if not found:
        return template, "", ""
    center, found, right = rest.partition(right_mark)
    if not found:
        return template, "", ""
    return left, center, right
