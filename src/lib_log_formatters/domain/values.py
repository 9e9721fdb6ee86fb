"""Typed property values carried by log records.

Purpose
-------
Represent a single property value as a tagged union so formatters can dispatch
on the tag (for NetLogger type symbols) instead of guessing from Python types.

Contents
--------
* :class:`ValueType` – closed set of value tags.
* :class:`TypedValue` – immutable ``(type, value)`` pair with checked
  accessors and inference from plain Python values.

System Role
-----------
Leaf of the domain layer. Records own typed values; formatters only read them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Any

from .errors import TypeMismatchError

if TYPE_CHECKING:  # pragma: no cover - import only for annotations
    from .record import LogRecord


class ValueType(Enum):
    """Tags for the variants a :class:`TypedValue` may hold.

    Examples
    --------
    >>> ValueType.INT.value
    'int'
    >>> ValueType.from_name(' Datetime ') is ValueType.DATETIME
    True
    """

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    DATETIME = "datetime"
    RECORD = "record"

    @classmethod
    def from_name(cls, name: str) -> "ValueType":
        normalized = name.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unknown value type: {name!r}")


def _ensure_aware(ts: datetime) -> datetime:
    """Validate that ``ts`` is timezone-aware and normalise to UTC."""
    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        raise ValueError("timestamp must be timezone-aware")
    return ts.astimezone(timezone.utc)


def _matches(value_type: ValueType, value: Any) -> bool:
    from .record import LogRecord

    if value_type is ValueType.STRING:
        return isinstance(value, str)
    if value_type is ValueType.INT:
        return isinstance(value, int) and not isinstance(value, bool)
    if value_type is ValueType.FLOAT:
        return isinstance(value, float)
    if value_type is ValueType.BOOL:
        return isinstance(value, bool)
    if value_type is ValueType.DATETIME:
        return isinstance(value, datetime)
    return isinstance(value, LogRecord)


@dataclass(slots=True, frozen=True)
class TypedValue:
    """Immutable tagged value read from a record property.

    Attributes
    ----------
    type:
        :class:`ValueType` tag deciding which accessor is valid.
    value:
        Raw payload; its Python type always agrees with ``type``.

    Examples
    --------
    >>> TypedValue.of(True).type is ValueType.BOOL
    True
    >>> TypedValue.of(3).as_int()
    3
    >>> TypedValue(ValueType.INT, "3")
    Traceback (most recent call last):
    ...
    lib_log_formatters.domain.errors.TypeMismatchError: int tag cannot hold str payload
    """

    type: ValueType
    value: Any

    def __post_init__(self) -> None:
        if not _matches(self.type, self.value):
            raise TypeMismatchError(f"{self.type.value} tag cannot hold {type(self.value).__name__} payload")
        if self.type is ValueType.DATETIME:
            object.__setattr__(self, "value", _ensure_aware(self.value))

    @classmethod
    def of(cls, value: Any) -> "TypedValue":
        """Infer the tag for a plain Python ``value``.

        ``bool`` is checked before ``int`` because it is an ``int`` subclass.
        Mappings become nested records.
        """
        from .record import LogRecord

        if isinstance(value, TypedValue):
            return value
        if isinstance(value, bool):
            return cls(ValueType.BOOL, value)
        if isinstance(value, int):
            return cls(ValueType.INT, value)
        if isinstance(value, float):
            return cls(ValueType.FLOAT, value)
        if isinstance(value, str):
            return cls(ValueType.STRING, value)
        if isinstance(value, datetime):
            return cls(ValueType.DATETIME, value)
        if isinstance(value, LogRecord):
            return cls(ValueType.RECORD, value)
        if isinstance(value, Mapping):
            return cls(ValueType.RECORD, LogRecord.from_dict(value))
        raise TypeMismatchError(f"cannot store {type(value).__name__} in a log record")

    def _expect(self, value_type: ValueType) -> Any:
        if self.type is not value_type:
            raise TypeMismatchError(f"expected {value_type.value} value, found {self.type.value}")
        return self.value

    def as_string(self) -> str:
        return self._expect(ValueType.STRING)

    def as_int(self) -> int:
        return self._expect(ValueType.INT)

    def as_float(self) -> float:
        return self._expect(ValueType.FLOAT)

    def as_bool(self) -> bool:
        return self._expect(ValueType.BOOL)

    def as_datetime(self) -> datetime:
        return self._expect(ValueType.DATETIME)

    def as_record(self) -> "LogRecord":
        return self._expect(ValueType.RECORD)

    def to_python(self) -> Any:
        """Return the raw payload, converting nested records to mappings."""
        if self.type is ValueType.RECORD:
            return self.value.to_dict()
        return self.value


__all__ = ["TypedValue", "ValueType"]
