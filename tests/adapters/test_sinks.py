from __future__ import annotations

from io import StringIO

from rich.console import Console

from lib_log_formatters.adapters.formatters import BriefFormatter, NetLoggerFormatter
from lib_log_formatters.adapters.sinks import RichConsoleSink, StreamSink, render_to_string
from lib_log_formatters.domain.record import LogRecord


class _FlushRecorder(StringIO):
    def __init__(self) -> None:
        super().__init__()
        self.flushes = 0

    def flush(self) -> None:
        self.flushes += 1
        super().flush()


def test_stream_sink_appends_text() -> None:
    buffer = StringIO()
    sink = StreamSink(buffer)
    NetLoggerFormatter().render(sink, LogRecord.create("a"))
    NetLoggerFormatter().render(sink, LogRecord.create("b"))
    assert buffer.getvalue() == "LOG:a\nLOG:b\n"
    assert sink.stream is buffer


def test_stream_sink_autoflush() -> None:
    stream = _FlushRecorder()
    StreamSink(stream, autoflush=True).write("x\n")
    StreamSink(stream).write("y\n")
    assert stream.flushes == 1


def test_rich_console_sink_keeps_brackets_verbatim(record_console: Console) -> None:
    sink = RichConsoleSink(console=record_console, style="cyan")
    BriefFormatter().render(sink, LogRecord.create("app", "[bold]not markup[/bold]"))
    output = record_console.export_text()
    assert "app" in output
    assert "[bold]not markup[/bold]" in output


def test_rich_console_sink_builds_console_when_missing() -> None:
    sink = RichConsoleSink(no_color=True, style="red")
    assert isinstance(sink.console, Console)


def test_render_to_string_returns_rendered_text() -> None:
    assert render_to_string(BriefFormatter(), LogRecord.create("app", "hi")) == "app\nhi\n"
