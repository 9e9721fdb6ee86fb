"""Protocols separating formatters from records and destinations."""

from __future__ import annotations

from .formatter import FormatterPort
from .record import RecordView
from .sink import OutputSink

__all__ = ["FormatterPort", "OutputSink", "RecordView"]
