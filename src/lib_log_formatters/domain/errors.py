"""Exceptions raised while reading typed values and rendering records.

Purpose
-------
Give callers two narrow exception types instead of generic ``ValueError`` /
``TypeError`` instances so formatting failures can be told apart from
programming errors elsewhere in a host application.

Contents
--------
* :class:`TypeMismatchError` – a :class:`TypedValue` accessor was called for
  the wrong variant.
* :class:`FormatError` – a formatter could not render a record.

System Role
-----------
Domain-level vocabulary shared by the value model and every formatter adapter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - import only for annotations
    from .values import ValueType


class TypeMismatchError(TypeError):
    """Raised when a typed value is read as a type it does not hold.

    Examples
    --------
    >>> from lib_log_formatters.domain.values import TypedValue
    >>> TypedValue.of(42).as_string()
    Traceback (most recent call last):
    ...
    lib_log_formatters.domain.errors.TypeMismatchError: expected string value, found int
    """


class FormatError(ValueError):
    """Raised when a record cannot be rendered by a formatter.

    Attributes
    ----------
    property_name:
        Name of the offending property, when known.
    value_type:
        Tag of the offending value, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        property_name: str | None = None,
        value_type: "ValueType | None" = None,
    ) -> None:
        super().__init__(message)
        self.property_name = property_name
        self.value_type = value_type


__all__ = ["FormatError", "TypeMismatchError"]
