"""Output sink port describing where rendered text goes.

Purpose
-------
Reduce destinations to the single capability formatters need: appending raw
text. Flushing and thread-safety are the sink's concern.

Contents
--------
* :class:`OutputSink` – runtime-checkable protocol with a ``write`` method.

System Role
-----------
Any text stream (``sys.stdout``, :class:`io.StringIO`, an open file) satisfies
the protocol directly; :mod:`lib_log_formatters.adapters.sinks` adds wrappers
for streams and Rich consoles.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputSink(Protocol):
    """Append raw text to a destination.

    Examples
    --------
    >>> import io
    >>> isinstance(io.StringIO(), OutputSink)
    True
    """

    def write(self, text: str, /) -> object:
        """Append ``text``; the return value is ignored."""


__all__ = ["OutputSink"]
