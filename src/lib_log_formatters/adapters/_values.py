"""Helpers shared by the formatter adapters.

Contents
--------
* :func:`brief_text` – human-readable rendering of a :class:`TypedValue`.
* :func:`check_standard_type` – reject a standard property whose tag differs
  from the documented one.
* :func:`standard_string` / :func:`standard_strings` – read string-typed
  standard properties, turning type mismatches into :class:`FormatError`.
"""

from __future__ import annotations

import logging

from lib_log_formatters.application.ports.record import RecordView
from lib_log_formatters.domain.errors import FormatError, TypeMismatchError
from lib_log_formatters.domain.properties import expected_type
from lib_log_formatters.domain.values import TypedValue, ValueType

logger = logging.getLogger(__name__)


def brief_text(value: TypedValue) -> str:
    """Render ``value`` for the brief family of formatters.

    Examples
    --------
    >>> brief_text(TypedValue.of(True)), brief_text(TypedValue.of(1.5))
    ('true', '1.5')
    >>> brief_text(TypedValue.of({"a": 1, "b": "x"}))
    '{a = 1, b = x}'
    """
    if value.type is ValueType.STRING:
        return value.value
    if value.type is ValueType.BOOL:
        return "true" if value.value else "false"
    if value.type is ValueType.FLOAT:
        return repr(value.value)
    if value.type is ValueType.DATETIME:
        return value.value.isoformat()
    if value.type is ValueType.RECORD:
        inner = ", ".join(f"{name} = {brief_text(item)}" for name, item in value.value.properties)
        return "{" + inner + "}"
    return str(value.value)


def check_standard_type(name: str, value: TypedValue) -> TypedValue:
    """Return ``value`` unchanged, or raise when ``name`` is standard and mistyped.

    Examples
    --------
    >>> check_standard_type("PID", TypedValue.of(7)).value
    7
    >>> check_standard_type("PID", TypedValue.of("abc"))
    Traceback (most recent call last):
    ...
    lib_log_formatters.domain.errors.FormatError: standard property PID must hold int, found string
    """
    expected = expected_type(name)
    if expected is None or value.type is expected:
        return value
    logger.debug("standard property %s holds %s, expected %s", name, value.type.value, expected.value)
    raise FormatError(
        f"standard property {name} must hold {expected.value}, found {value.type.value}",
        property_name=name,
        value_type=value.type,
    )


def _as_string(name: str, value: TypedValue) -> str:
    try:
        return value.as_string()
    except TypeMismatchError as exc:
        logger.debug("standard property %s holds %s", name, value.type.value)
        raise FormatError(
            f"standard property {name} must be a string, found {value.type.value}",
            property_name=name,
            value_type=value.type,
        ) from exc


def standard_string(record: RecordView, name: str) -> str | None:
    """Return the last string value of ``name`` or ``None`` when absent."""
    value = record.single_value_of(name)
    if value is None:
        return None
    return _as_string(name, value)


def standard_strings(record: RecordView, name: str) -> list[str]:
    """Return every string value of the repeatable property ``name``."""
    return [_as_string(name, value) for value in record.values_of(name)]


__all__ = ["brief_text", "check_standard_type", "standard_string", "standard_strings"]
