"""Public package surface for rendering structured log records.

A record is an ordered, multi-valued set of typed properties. Formatters turn
one record into text written to a sink::

    >>> import io
    >>> from lib_log_formatters import LogRecord, NetLoggerFormatter
    >>> out = io.StringIO()
    >>> NetLoggerFormatter().render(out, LogRecord.create("app", "ready", PID=7))
    >>> out.getvalue()
    'LOG:app COMMENT:ready PID:i:7\\n'
"""

from __future__ import annotations

from .adapters.formatters import (
    TYPE_SYMBOLS,
    BriefFormatter,
    BriefStyle,
    NetLoggerFormatter,
    indented_formatter,
    prepended_formatter,
)
from .adapters.sinks import RichConsoleSink, StreamSink, render_to_string
from .application.ports import FormatterPort, OutputSink, RecordView
from .config import FormatterSettings, load_settings
from .domain import FormatError, LogRecord, TypedValue, TypeMismatchError, ValueType
from .runtime import FORMATTER_NAMES, create_formatter, create_formatter_from_settings

__all__ = [
    "BriefFormatter",
    "BriefStyle",
    "FORMATTER_NAMES",
    "FormatError",
    "FormatterPort",
    "FormatterSettings",
    "LogRecord",
    "NetLoggerFormatter",
    "OutputSink",
    "RecordView",
    "RichConsoleSink",
    "StreamSink",
    "TYPE_SYMBOLS",
    "TypeMismatchError",
    "TypedValue",
    "ValueType",
    "create_formatter",
    "create_formatter_from_settings",
    "indented_formatter",
    "load_settings",
    "prepended_formatter",
    "render_to_string",
]
