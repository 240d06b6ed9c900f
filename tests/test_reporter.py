"""Tests for progress reporting (headstart.reporter).

Covers:
- RichReporter status lines on stdout and failures on stderr
- Progress bar percentage and counts
- NullSink
"""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from headstart.reporter import NullSink, ProgressSink, RichReporter

pytestmark = pytest.mark.unit


def _console() -> Console:
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture
def consoles() -> tuple[Console, Console]:
    return _console(), _console()


@pytest.fixture
def reporter(consoles) -> RichReporter:
    out, err = consoles
    return RichReporter(console=out, err_console=err)


class TestRichReporter:
    def test_start_and_success_lines(self, reporter, consoles):
        reporter.on_start("Zustand", "Installing Zustand")
        reporter.on_success("Zustand", "Installing Zustand")

        output = consoles[0].file.getvalue()
        assert "... Installing Zustand" in output
        assert "OK  Installing Zustand completed successfully." in output
        assert consoles[1].file.getvalue() == ""

    def test_failure_goes_to_error_console(self, reporter, consoles):
        reporter.on_failure("Zustand", "Installing Zustand", "exited with code 1")

        assert consoles[0].file.getvalue() == ""
        error = consoles[1].file.getvalue()
        assert "FAIL Installing Zustand failed. Error: exited with code 1" in error

    def test_progress(self, reporter, consoles):
        reporter.on_progress(5, 7)

        output = consoles[0].file.getvalue()
        assert "71%" in output
        assert "(5/7)" in output

    def test_progress_complete(self, reporter, consoles):
        reporter.on_progress(7, 7)
        assert "100%" in consoles[0].file.getvalue()

    def test_empty_plan_prints_nothing(self, reporter, consoles):
        reporter.on_progress(0, 0)
        assert consoles[0].file.getvalue() == ""

    def test_satisfies_protocol(self, reporter):
        sink: ProgressSink = reporter
        assert callable(sink.on_progress)


class TestNullSink:
    def test_ignores_everything(self):
        sink = NullSink()
        sink.on_progress(0, 3)
        sink.on_start("Axios", "Installing Axios")
        sink.on_success("Axios", "Installing Axios")
        sink.on_failure("Axios", "Installing Axios", "boom")
