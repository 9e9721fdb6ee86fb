"""Output sink adapters implementing :class:`OutputSink`.

Purpose
-------
Give formatters somewhere to write: plain text streams, Rich consoles, or an
in-memory buffer for callers that want the rendered string.

Contents
--------
* :class:`StreamSink` – wraps a text stream with optional autoflush.
* :class:`RichConsoleSink` – writes verbatim text through Rich.
* :func:`render_to_string` – render one record into a string.

System Role
-----------
Human-facing destinations for the brief formatter family; NetLogger output is
usually written to a :class:`StreamSink` over a file or socket stream.
"""

from __future__ import annotations

from io import StringIO
from typing import TextIO

from rich.console import Console

from lib_log_formatters.application.ports.formatter import FormatterPort
from lib_log_formatters.application.ports.record import RecordView
from lib_log_formatters.application.ports.sink import OutputSink


class StreamSink(OutputSink):
    """Append rendered text to a text stream.

    Examples
    --------
    >>> buffer = StringIO()
    >>> sink = StreamSink(buffer)
    >>> sink.write("hello\\n")
    >>> buffer.getvalue()
    'hello\\n'
    """

    def __init__(self, stream: TextIO, *, autoflush: bool = False) -> None:
        self._stream = stream
        self._autoflush = autoflush

    @property
    def stream(self) -> TextIO:
        return self._stream

    def write(self, text: str) -> None:
        self._stream.write(text)
        if self._autoflush:
            self._stream.flush()


class RichConsoleSink(OutputSink):
    """Write rendered text to a Rich console without markup or highlighting.

    Formatter output may contain square brackets and other characters Rich
    would otherwise interpret, so text goes through :meth:`Console.out`.

    Examples
    --------
    >>> console = Console(file=StringIO(), record=True, width=80)
    >>> RichConsoleSink(console=console).write("[not markup]\\n")
    >>> '[not markup]' in console.export_text()
    True
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        style: str | None = None,
        force_color: bool = False,
        no_color: bool = False,
    ) -> None:
        """Configure the sink with an optional style and colour overrides."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color or None, no_color=no_color)
        self._style = None if no_color else style

    @property
    def console(self) -> Console:
        return self._console

    def write(self, text: str) -> None:
        self._console.out(text, end="", style=self._style, highlight=False)


def render_to_string(formatter: FormatterPort, record: RecordView) -> str:
    """Render ``record`` with ``formatter`` and return the text.

    Examples
    --------
    >>> from lib_log_formatters.adapters.formatters import NetLoggerFormatter
    >>> from lib_log_formatters.domain.record import LogRecord
    >>> render_to_string(NetLoggerFormatter(), LogRecord.create("x", "a", "b"))
    'LOG:x COMMENT:a COMMENT:b\\n'
    """
    buffer = StringIO()
    formatter.render(buffer, record)
    return buffer.getvalue()


__all__ = ["RichConsoleSink", "StreamSink", "render_to_string"]
