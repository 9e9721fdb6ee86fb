from __future__ import annotations

from datetime import datetime, timezone
from io import StringIO

import pytest
from rich.console import Console

from lib_log_formatters.domain.record import LogRecord


@pytest.fixture
def record_console() -> Console:
    """Rich console that records output for export_text assertions."""

    return Console(file=StringIO(), record=True, width=120, color_system=None)


@pytest.fixture
def full_record() -> LogRecord:
    """Record carrying every standard property plus a custom one."""

    return LogRecord.create(
        "pipeline.stage",
        "first thought",
        "second thought",
        LABEL="worker-3",
        TIMESTAMP=datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc),
        DATE="2025-09-23T12:00:00+00:00",
        HOST="node17",
        IP="10.0.0.17",
        PID=4242,
        NODE=3,
        ratio=0.5,
    )
