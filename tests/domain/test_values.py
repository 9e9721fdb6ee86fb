from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from lib_log_formatters.domain.errors import TypeMismatchError
from lib_log_formatters.domain.record import LogRecord
from lib_log_formatters.domain.values import TypedValue, ValueType


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ("text", ValueType.STRING),
        (7, ValueType.INT),
        (1.25, ValueType.FLOAT),
        (False, ValueType.BOOL),
        (datetime(2025, 1, 1, tzinfo=timezone.utc), ValueType.DATETIME),
        ({"inner": 1}, ValueType.RECORD),
    ],
)
def test_typed_value_infers_tag(payload: object, expected: ValueType) -> None:
    assert TypedValue.of(payload).type is expected


def test_bool_is_not_inferred_as_int() -> None:
    value = TypedValue.of(True)
    assert value.as_bool() is True
    with pytest.raises(TypeMismatchError):
        value.as_int()


def test_wrong_accessor_raises_type_mismatch() -> None:
    with pytest.raises(TypeMismatchError, match="expected string value, found int"):
        TypedValue.of(5).as_string()


def test_constructor_rejects_payload_disagreeing_with_tag() -> None:
    with pytest.raises(TypeMismatchError):
        TypedValue(ValueType.INT, True)
    with pytest.raises(TypeMismatchError):
        TypedValue(ValueType.FLOAT, 1)


def test_unsupported_python_type_is_rejected() -> None:
    with pytest.raises(TypeMismatchError, match="cannot store"):
        TypedValue.of(object())


def test_datetime_requires_timezone_and_is_normalised_to_utc() -> None:
    with pytest.raises(ValueError, match="timezone-aware"):
        TypedValue.of(datetime(2025, 1, 1))
    local = datetime(2025, 1, 1, 2, 0, tzinfo=timezone(timedelta(hours=2)))
    value = TypedValue.of(local).as_datetime()
    assert value.tzinfo is timezone.utc
    assert value.hour == 0


def test_mapping_becomes_nested_record() -> None:
    nested = TypedValue.of({"a": 1, "b": ["x", "y"]})
    record = nested.as_record()
    assert isinstance(record, LogRecord)
    assert nested.to_python() == {"a": 1, "b": ["x", "y"]}


def test_typed_value_of_is_identity_for_typed_values() -> None:
    value = TypedValue.of("x")
    assert TypedValue.of(value) is value


def test_value_type_from_name() -> None:
    assert ValueType.from_name("RECORD") is ValueType.RECORD
    with pytest.raises(ValueError, match="Unknown value type"):
        ValueType.from_name("bytes")
