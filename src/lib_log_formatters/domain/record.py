"""Ordered, multi-valued property set describing one log message.

Purpose
-------
Provide the record collaborator that formatters read: an insertion-ordered
multi-map from property name to :class:`TypedValue`, plus the ``show_all``
override and the nesting depth used for indented output.

Contents
--------
* :class:`LogRecord` – immutable record with builder helpers and the query
  contract described by :class:`lib_log_formatters.application.ports.RecordView`.

System Role
-----------
Domain entity created per message by the logging layer and handed to a
formatter. Builders always return a new record so a record handed to a
formatter can never change underneath it.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any

from .properties import COMMENT, LOG, TIMESTAMP
from .values import TypedValue, ValueType

_STRUCTURED_KEYS = frozenset({"properties", "show_all", "nesting_level"})


def _coerce_timestamp(value: Any) -> Any:
    """Parse ISO-8601 strings given for ``TIMESTAMP``; naive values are taken as UTC."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if isinstance(value, datetime) and value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def _typed(name: str, value: Any) -> TypedValue:
    if name == TIMESTAMP:
        value = _coerce_timestamp(value)
    return TypedValue.of(value)


def _tagged(value: Any, type_name: str) -> TypedValue:
    """Build a value with an explicit tag such as ``"datetime"`` or ``"float"``."""
    value_type = ValueType.from_name(type_name)
    if value_type is ValueType.DATETIME:
        value = _coerce_timestamp(value)
    elif value_type is ValueType.FLOAT and isinstance(value, int) and not isinstance(value, bool):
        value = float(value)
    elif value_type is ValueType.RECORD and isinstance(value, Mapping):
        value = LogRecord.from_dict(value)
    return TypedValue(value_type, value)


def _expand(name: str, value: Any) -> list[tuple[str, TypedValue]]:
    if isinstance(value, (list, tuple)):
        return [(name, _typed(name, item)) for item in value]
    return [(name, _typed(name, value))]


@dataclass(slots=True, frozen=True)
class LogRecord:
    """Immutable log record read by formatters.

    Attributes
    ----------
    properties:
        ``(name, value)`` pairs in insertion order; names may repeat.
    show_all:
        When ``True`` every property is rendered regardless of formatter
        verbosity.
    nesting_level:
        Call depth used by the indented brief style.

    Examples
    --------
    >>> record = LogRecord.create("app", "first", "second", PID=42)
    >>> [value.as_string() for value in record.values_of("COMMENT")]
    ['first', 'second']
    >>> record.single_value_of("PID").as_int()
    42
    >>> record.names()
    ('LOG', 'COMMENT', 'PID')
    """

    properties: tuple[tuple[str, TypedValue], ...] = ()
    show_all: bool = False
    nesting_level: int = 0

    def __post_init__(self) -> None:
        if self.nesting_level < 0:
            raise ValueError("nesting_level must not be negative")
        pairs = tuple((str(name), TypedValue.of(value)) for name, value in self.properties)
        object.__setattr__(self, "properties", pairs)

    @classmethod
    def create(
        cls,
        log: str | None = None,
        *comments: str,
        show_all: bool = False,
        nesting_level: int = 0,
        **properties: Any,
    ) -> "LogRecord":
        """Build a record from a log name, comments and keyword properties.

        List or tuple keyword values become multi-valued properties.
        """
        pairs: list[tuple[str, TypedValue]] = []
        if log is not None:
            pairs.append((LOG, TypedValue.of(log)))
        pairs.extend((COMMENT, TypedValue.of(comment)) for comment in comments)
        for name, value in properties.items():
            pairs.extend(_expand(name, value))
        return cls(tuple(pairs), show_all=show_all, nesting_level=nesting_level)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "LogRecord":
        """Reconstruct a record from a mapping.

        Two shapes are accepted: ``{"properties": [[name, value], ...],
        "show_all": bool, "nesting_level": int}`` and a flat
        ``{name: value | [values]}`` mapping. Entries of the structured shape
        may carry a third item naming the :class:`ValueType`, which is how a
        JSON source spells a datetime or a whole-number float.

        Examples
        --------
        >>> LogRecord.from_dict({"LOG": "app", "COMMENT": ["a", "b"]}).to_dict()
        {'LOG': 'app', 'COMMENT': ['a', 'b']}
        >>> LogRecord.from_dict({"properties": [["LOG", "app"]], "nesting_level": 2}).nesting_level
        2
        >>> LogRecord.from_dict({"properties": [["ratio", 1, "float"]]}).to_dict()
        {'ratio': 1.0}
        """
        structured = (
            "properties" in payload
            and isinstance(payload["properties"], (list, tuple))
            and set(payload) <= _STRUCTURED_KEYS
        )
        if structured:
            pairs: list[tuple[str, TypedValue]] = []
            for entry in payload["properties"]:
                if len(entry) == 3:
                    name, value, type_name = entry
                    pairs.append((name, _tagged(value, type_name)))
                else:
                    name, value = entry
                    pairs.append((name, _typed(name, value)))
            return cls(
                tuple(pairs),
                show_all=bool(payload.get("show_all", False)),
                nesting_level=int(payload.get("nesting_level", 0)),
            )
        flat: list[tuple[str, TypedValue]] = []
        for name, value in payload.items():
            flat.extend(_expand(name, value))
        return cls(tuple(flat))

    def to_dict(self) -> dict[str, Any]:
        """Return a flat mapping; repeated names map to lists."""
        data: dict[str, Any] = {}
        for name in self.names():
            values = [value.to_python() for value in self.values_of(name)]
            data[name] = values[0] if len(values) == 1 else values
        return data

    def add(self, name: str, value: Any) -> "LogRecord":
        """Return a copy with ``value`` appended under ``name``."""
        return replace(self, properties=self.properties + ((name, _typed(name, value)),))

    def extend(self, name: str, values: Iterable[Any]) -> "LogRecord":
        """Return a copy with every item of ``values`` appended under ``name``."""
        extra = tuple((name, _typed(name, value)) for value in values)
        return replace(self, properties=self.properties + extra)

    def replace(self, **changes: Any) -> "LogRecord":
        """Return a copied record with ``changes`` applied."""
        return replace(self, **changes)

    def has_property(self, name: str) -> bool:
        return any(key == name for key, _ in self.properties)

    def values_of(self, name: str) -> tuple[TypedValue, ...]:
        return tuple(value for key, value in self.properties if key == name)

    def single_value_of(self, name: str) -> TypedValue | None:
        """Return the last value stored under ``name`` (last one wins)."""
        for key, value in reversed(self.properties):
            if key == name:
                return value
        return None

    def names(self) -> tuple[str, ...]:
        """Return distinct names in order of first appearance."""
        return tuple(dict.fromkeys(key for key, _ in self.properties))

    def __iter__(self) -> Iterator[tuple[str, TypedValue]]:
        return iter(self.properties)

    def __len__(self) -> int:
        return len(self.properties)


__all__ = ["LogRecord"]
