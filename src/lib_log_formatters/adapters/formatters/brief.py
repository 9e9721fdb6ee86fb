"""Brief, screen-oriented formatter family.

Purpose
-------
Render records for people reading a terminal: the log name and the text
comments by default, everything else on request.

Contents
--------
* :class:`BriefStyle` – ``PLAIN``, ``INDENTED`` and ``PREPENDED`` variants.
* :class:`BriefFormatter` – one formatter switching on its style.
* :func:`indented_formatter` / :func:`prepended_formatter` – shorthands.

System Role
-----------
Implements :class:`~lib_log_formatters.application.ports.FormatterPort`. The
indented style reproduces nested trace output where deeper call depth shifts
comments to the right; the prepended style stamps the ``LABEL`` in front of
each record to disentangle interleaved multi-process output.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from lib_log_formatters.application.ports.record import RecordView
from lib_log_formatters.application.ports.sink import OutputSink
from lib_log_formatters.domain.properties import COMMENT, LABEL, LOG

from .._values import brief_text, check_standard_type, standard_string, standard_strings

DEFAULT_INDENT_UNIT = "  "
DEFAULT_LABEL_SEPARATOR = ": "

_BRIEF_NAMES = frozenset({LOG, COMMENT})


class BriefStyle(Enum):
    """Layout variants of the brief formatter."""

    PLAIN = "plain"
    INDENTED = "indented"
    PREPENDED = "prepended"


@dataclass(slots=True)
class BriefFormatter:
    """Render ``LOG`` and ``COMMENT`` lines, plus every property when verbose.

    Attributes
    ----------
    verbose:
        Print all properties by default. A record whose ``show_all`` is set
        is always printed in full.
    style:
        :class:`BriefStyle` selecting plain, indented or prepended layout.
    indent_unit:
        String repeated ``nesting_level`` times before comments (indented).
    label_separator:
        Text placed between the label and the first line (prepended).

    Examples
    --------
    >>> import io
    >>> from lib_log_formatters.domain.record import LogRecord
    >>> record = LogRecord.create("app", "started", PID=42)
    >>> out = io.StringIO()
    >>> BriefFormatter().render(out, record)
    >>> print(out.getvalue(), end="")
    app
    started
    >>> out = io.StringIO()
    >>> BriefFormatter(verbose=True).render(out, record)
    >>> print(out.getvalue(), end="")
    app
    started
    PID = 42
    """

    verbose: bool = False
    style: BriefStyle = BriefStyle.PLAIN
    indent_unit: str = DEFAULT_INDENT_UNIT
    label_separator: str = DEFAULT_LABEL_SEPARATOR

    @classmethod
    def indented(cls, verbose: bool = False) -> "BriefFormatter":
        return cls(verbose=verbose, style=BriefStyle.INDENTED)

    @classmethod
    def prepended(cls, verbose: bool = False) -> "BriefFormatter":
        return cls(verbose=verbose, style=BriefStyle.PREPENDED)

    def is_verbose(self) -> bool:
        """Return ``True`` when all properties are printed by default."""
        return self.verbose

    def set_verbose(self, print_all: bool) -> None:
        """Choose whether all properties are printed by default.

        Records with ``show_all`` set still override a ``False`` setting.
        """
        self.verbose = bool(print_all)

    def copy(self) -> "BriefFormatter":
        """Return an independent formatter with the same configuration."""
        return replace(self)

    def __copy__(self) -> "BriefFormatter":
        return self.copy()

    def render(self, sink: OutputSink | None, record: RecordView) -> None:
        """Write ``record`` to ``sink``; ``None`` sinks are ignored."""
        if sink is None:
            return
        text = self.format(record)
        if text:
            sink.write(text)

    def format(self, record: RecordView) -> str:
        """Return the rendered text for ``record`` without writing it."""
        show_all = self.verbose or record.show_all
        lines: list[str] = []

        log = standard_string(record, LOG)
        if log is not None:
            lines.append(log)

        indent = ""
        if self.style is BriefStyle.INDENTED:
            indent = self.indent_unit * record.nesting_level
        lines.extend(indent + comment for comment in standard_strings(record, COMMENT))

        if show_all:
            for name in record.names():
                if name in _BRIEF_NAMES:
                    continue
                lines.extend(
                    f"{name} = {brief_text(check_standard_type(name, value))}" for value in record.values_of(name)
                )

        if self.style is BriefStyle.PREPENDED and lines:
            label = standard_string(record, LABEL)
            if label is not None:
                lines[0] = label + self.label_separator + lines[0]

        return "".join(line + "\n" for line in lines)


def indented_formatter(verbose: bool = False) -> BriefFormatter:
    """Return a brief formatter that indents comments by nesting level."""
    return BriefFormatter.indented(verbose)


def prepended_formatter(verbose: bool = False) -> BriefFormatter:
    """Return a brief formatter that prefixes each record with its label."""
    return BriefFormatter.prepended(verbose)


__all__ = [
    "BriefFormatter",
    "BriefStyle",
    "DEFAULT_INDENT_UNIT",
    "DEFAULT_LABEL_SEPARATOR",
    "indented_formatter",
    "prepended_formatter",
]
