from __future__ import annotations

import copy
from io import StringIO

import pytest

from lib_log_formatters.adapters.formatters.brief import (
    BriefFormatter,
    BriefStyle,
    indented_formatter,
    prepended_formatter,
)
from lib_log_formatters.adapters.sinks import render_to_string
from lib_log_formatters.domain.errors import FormatError
from lib_log_formatters.domain.record import LogRecord
from lib_log_formatters.domain.values import ValueType


class _CountingSink:
    def __init__(self) -> None:
        self.writes: list[str] = []

    def write(self, text: str) -> None:
        self.writes.append(text)


def test_brief_prints_log_then_comments_only(full_record: LogRecord) -> None:
    output = render_to_string(BriefFormatter(), full_record)
    assert output == "pipeline.stage\nfirst thought\nsecond thought\n"
    for hidden in ("HOST", "node17", "PID", "4242", "worker-3"):
        assert hidden not in output


def test_verbose_adds_every_other_property(full_record: LogRecord) -> None:
    output = render_to_string(BriefFormatter(verbose=True), full_record)
    lines = output.splitlines()
    assert lines[:3] == ["pipeline.stage", "first thought", "second thought"]
    assert lines[3:] == [
        "LABEL = worker-3",
        "TIMESTAMP = 2025-09-23T12:00:00+00:00",
        "DATE = 2025-09-23T12:00:00+00:00",
        "HOST = node17",
        "IP = 10.0.0.17",
        "PID = 4242",
        "NODE = 3",
        "ratio = 0.5",
    ]


def test_verbose_writes_one_line_per_value_of_multi_valued_property() -> None:
    record = LogRecord.create("app", tag=["a", "b"], flag=True)
    output = render_to_string(BriefFormatter(verbose=True), record)
    assert output == "app\ntag = a\ntag = b\nflag = true\n"


def test_show_all_record_overrides_quiet_formatter(full_record: LogRecord) -> None:
    formatter = BriefFormatter(verbose=False)
    quiet = render_to_string(formatter, full_record)
    loud = render_to_string(formatter, full_record.replace(show_all=True))
    assert "HOST = node17" not in quiet
    assert "HOST = node17" in loud
    assert formatter.is_verbose() is False


def test_repeated_comments_are_never_merged() -> None:
    record = LogRecord.create("app", "a", "b")
    assert render_to_string(BriefFormatter(), record).splitlines() == ["app", "a", "b"]


def test_record_without_log_or_comments_writes_nothing() -> None:
    sink = _CountingSink()
    BriefFormatter().render(sink, LogRecord.create(None, PID=1))
    assert sink.writes == []


def test_record_is_written_in_a_single_call() -> None:
    sink = _CountingSink()
    BriefFormatter(verbose=True).render(sink, LogRecord.create("app", "a", "b", PID=1))
    assert len(sink.writes) == 1


def test_null_sink_is_a_silent_no_op(full_record: LogRecord) -> None:
    for formatter in (BriefFormatter(), indented_formatter(True), prepended_formatter()):
        assert formatter.render(None, full_record) is None


def test_non_string_log_raises_format_error_before_writing() -> None:
    sink = StringIO()
    record = LogRecord.create(None, "comment").add("LOG", 17)
    with pytest.raises(FormatError) as excinfo:
        BriefFormatter().render(sink, record)
    assert excinfo.value.property_name == "LOG"
    assert sink.getvalue() == ""


def test_non_string_comment_raises_format_error() -> None:
    record = LogRecord.create("app").add("COMMENT", 3.5)
    with pytest.raises(FormatError, match="COMMENT"):
        BriefFormatter().render(StringIO(), record)


def test_duplicate_log_uses_last_value() -> None:
    record = LogRecord.create("first").add("LOG", "second")
    assert render_to_string(BriefFormatter(), record) == "second\n"


def test_set_verbose_does_not_rewrite_previous_output() -> None:
    formatter = BriefFormatter()
    record = LogRecord.create("app", PID=1)
    before = render_to_string(formatter, record)
    formatter.set_verbose(True)
    after = render_to_string(formatter, record)
    assert before == "app\n"
    assert after == "app\nPID = 1\n"


@pytest.mark.parametrize("make_copy", [BriefFormatter.copy, copy.copy])
def test_copy_duplicates_verbosity_without_sharing(make_copy) -> None:
    original = BriefFormatter(verbose=False, style=BriefStyle.INDENTED)
    duplicate = make_copy(original)
    duplicate.set_verbose(True)
    assert original.is_verbose() is False
    assert duplicate.is_verbose() is True
    assert duplicate.style is BriefStyle.INDENTED


def test_nested_record_values_render_inline() -> None:
    record = LogRecord.create("app", show_all=True, ctx={"user": "ada", "retries": 2})
    assert render_to_string(BriefFormatter(), record) == "app\nctx = {user = ada, retries = 2}\n"


@pytest.mark.parametrize("level", [0, 1, 3])
def test_indented_prefixes_only_comment_lines(level: int) -> None:
    record = LogRecord.create("trace", "enter", "exit", PID=1, nesting_level=level)
    lines = render_to_string(indented_formatter(verbose=True), record).splitlines()
    indent = "  " * level
    assert lines == ["trace", indent + "enter", indent + "exit", "PID = 1"]


def test_indented_honours_custom_indent_unit() -> None:
    formatter = BriefFormatter(style=BriefStyle.INDENTED, indent_unit="\t")
    record = LogRecord.create("trace", "deep", nesting_level=2)
    assert render_to_string(formatter, record) == "trace\n\t\tdeep\n"


def test_prepended_prefixes_first_line_with_label_once() -> None:
    record = LogRecord.create("app", "a", "b", LABEL="rank-1")
    output = render_to_string(prepended_formatter(), record)
    assert output == "rank-1: app\na\nb\n"


def test_prepended_label_applies_to_first_comment_without_log() -> None:
    record = LogRecord.create(None, "only", LABEL="rank-2")
    assert render_to_string(prepended_formatter(), record) == "rank-2: only\n"


@pytest.mark.parametrize("verbose", [False, True])
def test_prepended_without_label_matches_plain(full_record: LogRecord, verbose: bool) -> None:
    no_label = LogRecord(
        tuple((name, value) for name, value in full_record if name != "LABEL"),
        nesting_level=2,
    )
    plain = render_to_string(BriefFormatter(verbose=verbose), no_label)
    prepended = render_to_string(prepended_formatter(verbose=verbose), no_label)
    assert prepended == plain


def test_prepended_rejects_non_string_label() -> None:
    record = LogRecord.create("app", LABEL=5)
    with pytest.raises(FormatError, match="LABEL"):
        prepended_formatter().render(StringIO(), record)


def test_formatter_never_mutates_the_record(full_record: LogRecord) -> None:
    snapshot = full_record.to_dict()
    for formatter in (BriefFormatter(True), indented_formatter(True), prepended_formatter(True)):
        render_to_string(formatter, full_record)
    assert full_record.to_dict() == snapshot


def test_verbose_rejects_mistyped_standard_property_before_writing() -> None:
    sink = _CountingSink()
    record = LogRecord.create("x", TIMESTAMP=1700000000, PID="abc")
    with pytest.raises(FormatError) as excinfo:
        BriefFormatter(verbose=True).render(sink, record)
    assert excinfo.value.property_name == "TIMESTAMP"
    assert excinfo.value.value_type is ValueType.INT
    assert sink.writes == []


def test_quiet_output_ignores_properties_it_does_not_print() -> None:
    record = LogRecord.create("x", PID="abc")
    assert render_to_string(BriefFormatter(), record) == "x\n"
