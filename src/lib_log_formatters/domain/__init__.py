"""Domain entities and value objects used by the formatting core."""

from __future__ import annotations

from . import properties
from .errors import FormatError, TypeMismatchError
from .properties import STANDARD_PROPERTIES, StandardProperty
from .record import LogRecord
from .values import TypedValue, ValueType

__all__ = [
    "FormatError",
    "LogRecord",
    "STANDARD_PROPERTIES",
    "StandardProperty",
    "TypeMismatchError",
    "TypedValue",
    "ValueType",
    "properties",
]
