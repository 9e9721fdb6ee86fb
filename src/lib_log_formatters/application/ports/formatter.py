"""Formatter port defining the rendering contract.

Purpose
-------
Capture the one operation every formatter offers so callers can hold "a
formatter" without knowing which output format it produces.

Contents
--------
* :class:`FormatterPort` – runtime-checkable protocol with ``render``.

System Role
-----------
Implemented by :class:`~lib_log_formatters.adapters.formatters.BriefFormatter`
and :class:`~lib_log_formatters.adapters.formatters.NetLoggerFormatter`;
returned by :func:`lib_log_formatters.runtime.create_formatter`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .record import RecordView
from .sink import OutputSink


@runtime_checkable
class FormatterPort(Protocol):
    """Render a log record as text into a sink.

    Parameters
    ----------
    sink:
        Destination for the rendered text. ``None`` turns the call into a
        no-op so callers may pass a destination that was never opened.
    record:
        The record to render. Formatters never modify it.

    Raises
    ------
    FormatError
        When a standard property holds a value of the wrong type or a value
        tag cannot be encoded.

    Examples
    --------
    >>> class Recorder:
    ...     def render(self, sink, record):
    ...         if sink is not None:
    ...             sink.write("seen\\n")
    >>> isinstance(Recorder(), FormatterPort)
    True
    """

    def render(self, sink: OutputSink | None, record: RecordView) -> None:
        """Write ``record`` to ``sink`` in this formatter's format."""


__all__ = ["FormatterPort"]
