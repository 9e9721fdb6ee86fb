from __future__ import annotations

from io import StringIO

import pytest

from lib_log_formatters.adapters.formatters import BriefFormatter, NetLoggerFormatter, indented_formatter
from lib_log_formatters.adapters.sinks import RichConsoleSink, StreamSink
from lib_log_formatters.application.ports import FormatterPort, OutputSink, RecordView
from lib_log_formatters.domain.record import LogRecord


@pytest.mark.parametrize(
    "formatter",
    [BriefFormatter(), indented_formatter(), NetLoggerFormatter()],
)
def test_formatters_satisfy_formatter_port(formatter: object) -> None:
    assert isinstance(formatter, FormatterPort)


def test_log_record_satisfies_record_view() -> None:
    assert isinstance(LogRecord.create("app"), RecordView)


@pytest.mark.parametrize("sink", [StringIO(), StreamSink(StringIO()), RichConsoleSink()])
def test_sinks_satisfy_output_sink(sink: object) -> None:
    assert isinstance(sink, OutputSink)


class _DictRecord:
    """Minimal foreign record implementing only the query contract."""

    show_all = False
    nesting_level = 1

    def __init__(self, pairs: list[tuple[str, object]]) -> None:
        self._record = LogRecord(tuple(pairs))

    def has_property(self, name: str) -> bool:
        return self._record.has_property(name)

    def values_of(self, name: str):
        return list(self._record.values_of(name))

    def single_value_of(self, name: str):
        return self._record.single_value_of(name)

    def names(self):
        return list(self._record.names())


def test_formatters_only_rely_on_the_query_contract() -> None:
    record = _DictRecord([("LOG", "svc"), ("COMMENT", "hi"), ("PID", 3)])
    assert isinstance(record, RecordView)

    brief = StringIO()
    indented_formatter(verbose=True).render(brief, record)
    assert brief.getvalue() == "svc\n  hi\nPID = 3\n"

    netlogger = StringIO()
    NetLoggerFormatter().render(netlogger, record)
    assert netlogger.getvalue() == "LOG:svc COMMENT:hi PID:i:3\n"
