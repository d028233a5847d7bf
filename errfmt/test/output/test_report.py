"""Tests for errfmt.output.report module."""

from __future__ import annotations

from errfmt.errors.build import errorf, new
from errfmt.output.console import MockConsole, Style
from errfmt.output.report import report_error


class TestReportError:
    def test_one_line(self) -> None:
        console = MockConsole()
        report_error(errorf("save: %v", new("disk full")), console)
        assert console.messages == ["error: save: disk full"]

    def test_with_detail(self, no_frames: None) -> None:
        console = MockConsole()
        report_error(errorf("save: %v", new("disk full")), console, detail=True)
        assert console.messages == ["error: save: disk full", "save:\n--- disk full"]
        assert console.count(Style.DIM) == 1

    def test_plain_exception(self) -> None:
        console = MockConsole()
        report_error(KeyError("k"), console)
        assert console.messages == ["error: 'k'"]
