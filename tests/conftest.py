from datetime import datetime

import pytest

from template_logging import LogRecord, Severity


@pytest.fixture
def sample_record():
    return LogRecord(
        time=datetime(2014, 1, 8, 18, 27, 14, 123456),
        severity=Severity.PANIC,
        file="/path/to/testing.go",
        line=391,
        function="app/handlers/pkg.func",
        package="app/handlers/pkg",
        message="hello there!",
        pid=1234,
    )
