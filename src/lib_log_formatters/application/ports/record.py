"""Record port describing the query contract formatters rely on.

Purpose
-------
Formatters never depend on how a record stores its properties. They only ask
whether a name exists, for its values in insertion order, for the last value
of a single-valued name, and for the ``show_all``/``nesting_level`` metadata.

Contents
--------
* :class:`RecordView` – runtime-checkable protocol implemented by
  :class:`lib_log_formatters.domain.record.LogRecord`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from lib_log_formatters.domain.values import TypedValue


@runtime_checkable
class RecordView(Protocol):
    """Read-only view over one log message's properties."""

    show_all: bool
    nesting_level: int

    def has_property(self, name: str) -> bool:
        """Return ``True`` when at least one value is stored under ``name``."""

    def values_of(self, name: str) -> Sequence[TypedValue]:
        """Return every value under ``name`` in insertion order (empty if absent)."""

    def single_value_of(self, name: str) -> TypedValue | None:
        """Return the last value stored under ``name`` or ``None``."""

    def names(self) -> Sequence[str]:
        """Return distinct property names in order of first appearance."""


__all__ = ["RecordView"]
