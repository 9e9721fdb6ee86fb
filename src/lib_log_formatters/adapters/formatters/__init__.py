"""Formatter adapters implementing :class:`FormatterPort`."""

from __future__ import annotations

from .brief import BriefFormatter, BriefStyle, indented_formatter, prepended_formatter
from .netlogger import DEFAULT_VALUE_DELIMITER, TYPE_SYMBOLS, NetLoggerFormatter

__all__ = [
    "BriefFormatter",
    "BriefStyle",
    "DEFAULT_VALUE_DELIMITER",
    "NetLoggerFormatter",
    "TYPE_SYMBOLS",
    "indented_formatter",
    "prepended_formatter",
]
