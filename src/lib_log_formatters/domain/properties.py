"""Standard property names and their documented types.

Producers guarantee the following names carry the listed types:

=========  ========  ===============================================
Name       Type      Meaning
=========  ========  ===============================================
LOG        string    name of the log producing the message
LABEL      string    extra information associated with the log
COMMENT    string    a simple text message (repeatable)
TIMESTAMP  datetime  when the message was recorded
DATE       string    the value of TIMESTAMP in ISO format
HOST       string    hostname of the machine
IP         string    IP address of the host
PID        int       process id of the application
NODE       int       logical node id in a multi-process application
=========  ========  ===============================================

Only LOG is guaranteed to appear. COMMENT may repeat and every value counts;
for every other name only the last value in insertion order is valid.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .values import ValueType

LOG = "LOG"
LABEL = "LABEL"
COMMENT = "COMMENT"
TIMESTAMP = "TIMESTAMP"
DATE = "DATE"
HOST = "HOST"
IP = "IP"
PID = "PID"
NODE = "NODE"


@dataclass(slots=True, frozen=True)
class StandardProperty:
    """Documented type and cardinality of a standard property."""

    name: str
    value_type: ValueType
    repeatable: bool = False


STANDARD_PROPERTIES: Mapping[str, StandardProperty] = MappingProxyType(
    {
        LOG: StandardProperty(LOG, ValueType.STRING),
        LABEL: StandardProperty(LABEL, ValueType.STRING),
        COMMENT: StandardProperty(COMMENT, ValueType.STRING, repeatable=True),
        TIMESTAMP: StandardProperty(TIMESTAMP, ValueType.DATETIME),
        DATE: StandardProperty(DATE, ValueType.STRING),
        HOST: StandardProperty(HOST, ValueType.STRING),
        IP: StandardProperty(IP, ValueType.STRING),
        PID: StandardProperty(PID, ValueType.INT),
        NODE: StandardProperty(NODE, ValueType.INT),
    }
)


def is_standard(name: str) -> bool:
    """Return ``True`` for one of the documented property names.

    Examples
    --------
    >>> is_standard("PID"), is_standard("pid")
    (True, False)
    """
    return name in STANDARD_PROPERTIES


def expected_type(name: str) -> ValueType | None:
    """Return the documented :class:`ValueType` for ``name`` or ``None``."""
    entry = STANDARD_PROPERTIES.get(name)
    return entry.value_type if entry is not None else None


__all__ = [
    "COMMENT",
    "DATE",
    "HOST",
    "IP",
    "LABEL",
    "LOG",
    "NODE",
    "PID",
    "STANDARD_PROPERTIES",
    "StandardProperty",
    "TIMESTAMP",
    "expected_type",
    "is_standard",
]
