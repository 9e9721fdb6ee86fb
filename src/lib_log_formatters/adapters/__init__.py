"""Adapter implementations for formatters and output sinks."""

from __future__ import annotations

from .formatters import (
    BriefFormatter,
    BriefStyle,
    NetLoggerFormatter,
    TYPE_SYMBOLS,
    indented_formatter,
    prepended_formatter,
)
from .sinks import RichConsoleSink, StreamSink, render_to_string

__all__ = [
    "BriefFormatter",
    "BriefStyle",
    "NetLoggerFormatter",
    "RichConsoleSink",
    "StreamSink",
    "TYPE_SYMBOLS",
    "indented_formatter",
    "prepended_formatter",
    "render_to_string",
]
