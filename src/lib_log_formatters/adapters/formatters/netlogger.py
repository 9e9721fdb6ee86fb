"""NetLogger-style formatter producing typed ``name:value`` pairs.

Wire format
-----------
One record per line. Fields are separated by a single space and the line is
terminated by ``\\n``. Each field is::

    name<delim><value>                  (strings carry no type symbol)
    name<delim><symbol><delim><value>   (every other type)

Type symbols (:data:`TYPE_SYMBOLS`):

========  ======  =================================================
Type      Symbol  Value encoding
========  ======  =================================================
string    (none)  text, quoted when needed (see below)
int       ``i``   decimal integer
float     ``f``   ``repr`` of the float
bool      ``b``   ``1`` or ``0``
datetime  ``t``   seconds since the epoch, six fractional digits
record    ``n``   ``{`` nested fields joined by ``,`` ``}``
========  ======  =================================================

String values are written bare unless they contain whitespace, a double
quote, a backslash, the value delimiter, a comma or a brace. Those values are
wrapped in double quotes, with backslash escapes for ``\\``, ``"``, newline
(``\\n``), carriage return (``\\r``) and tab (``\\t``), so a record always
fits on one line and fields split cleanly on spaces::

    LOG:"disk full"
    COMMENT:"two\\nlines"
    HOST:node17

Every property and every value is written regardless of verbosity; this is a
machine-consumed format and has no brief mode. Standard properties must carry
their documented type (``PID`` an int, ``TIMESTAMP`` a datetime, and so on);
anything else raises :class:`~lib_log_formatters.domain.errors.FormatError`
before the line is written.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from lib_log_formatters.application.ports.record import RecordView
from lib_log_formatters.application.ports.sink import OutputSink
from lib_log_formatters.domain.errors import FormatError
from lib_log_formatters.domain.values import TypedValue, ValueType

from .._values import check_standard_type

logger = logging.getLogger(__name__)

DEFAULT_VALUE_DELIMITER = ":"
FIELD_SEPARATOR = " "
NESTED_FIELD_SEPARATOR = ","

_ESCAPES = str.maketrans({"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"})
_QUOTE_TRIGGERS = frozenset(" \t\n\r\"\\,{}")

TYPE_SYMBOLS: Mapping[ValueType, str] = MappingProxyType(
    {
        ValueType.STRING: "",
        ValueType.INT: "i",
        ValueType.FLOAT: "f",
        ValueType.BOOL: "b",
        ValueType.DATETIME: "t",
        ValueType.RECORD: "n",
    }
)


@dataclass(slots=True, frozen=True)
class NetLoggerFormatter:
    """Render records as NetLogger-like typed key/value lines.

    Attributes
    ----------
    value_delimiter:
        String between a name, its type symbol and its value. Fixed for the
        lifetime of the formatter so framing stays consistent in a stream.

    Examples
    --------
    >>> import io
    >>> from lib_log_formatters.domain.record import LogRecord
    >>> out = io.StringIO()
    >>> NetLoggerFormatter().render(out, LogRecord.create("x", PID=42))
    >>> out.getvalue()
    'LOG:x PID:i:42\\n'
    >>> NetLoggerFormatter("=").get_value_delimiter()
    '='
    """

    value_delimiter: str = DEFAULT_VALUE_DELIMITER
    _symbols: Mapping[ValueType, str] = field(default_factory=lambda: TYPE_SYMBOLS, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.value_delimiter:
            raise ValueError("value_delimiter must not be empty")

    def get_value_delimiter(self) -> str:
        return self.value_delimiter

    def render(self, sink: OutputSink | None, record: RecordView) -> None:
        """Write ``record`` to ``sink`` as a single line; ``None`` sinks are ignored."""
        if sink is None:
            return
        sink.write(self.format(record))

    def format(self, record: RecordView) -> str:
        """Return the rendered line for ``record`` without writing it."""
        fields = [
            self._field(name, check_standard_type(name, value))
            for name in record.names()
            for value in record.values_of(name)
        ]
        return FIELD_SEPARATOR.join(fields) + "\n"

    def _symbol(self, name: str, value: TypedValue) -> str:
        try:
            return self._symbols[value.type]
        except KeyError as exc:
            logger.debug("no NetLogger type symbol for %s (property %s)", value.type, name)
            raise FormatError(
                f"no NetLogger type symbol for {value.type.value} value of {name}",
                property_name=name,
                value_type=value.type,
            ) from exc

    def _field(self, name: str, value: TypedValue) -> str:
        symbol = self._symbol(name, value)
        delim = self.value_delimiter
        prefix = name + delim + (symbol + delim if symbol else "")
        return prefix + self._encode(value)

    def _encode(self, value: TypedValue) -> str:
        if value.type is ValueType.STRING:
            return self._quote(value.value)
        if value.type is ValueType.BOOL:
            return "1" if value.value else "0"
        if value.type is ValueType.FLOAT:
            return repr(value.value)
        if value.type is ValueType.DATETIME:
            return f"{value.value.timestamp():.6f}"
        if value.type is ValueType.RECORD:
            nested = value.value
            inner = NESTED_FIELD_SEPARATOR.join(self._field(name, item) for name, item in nested.properties)
            return "{" + inner + "}"
        return str(value.value)

    def _quote(self, text: str) -> str:
        if self.value_delimiter in text or not _QUOTE_TRIGGERS.isdisjoint(text):
            return '"' + text.translate(_ESCAPES) + '"'
        return text


__all__ = [
    "DEFAULT_VALUE_DELIMITER",
    "FIELD_SEPARATOR",
    "NetLoggerFormatter",
    "TYPE_SYMBOLS",
]
