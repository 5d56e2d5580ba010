"""Tests for the terminal and JSON reporters."""

from __future__ import annotations

import json

from rich.console import Console

from covgroup.models import OverallCoverageBreakdown
from covgroup.reporters import TerminalReporter, build_report, render_json
from covgroup.reporters.terminal import _ratio_color

_BREAKDOWN = OverallCoverageBreakdown(
    total_lines=100,
    total_covered_lines=60,
    percent_by_lines=0.6,
    total_statements=40,
    total_covered_statements=40,
    percent_by_statements=1.0,
)


def _reporter(precision: int = 1) -> tuple[TerminalReporter, Console]:
    console = Console(record=True, width=120, force_terminal=False)
    return TerminalReporter(console, precision=precision), console


class TestTerminalReporter:
    def test_breakdown_table(self) -> None:
        reporter, console = _reporter()
        reporter.print_breakdown(_BREAKDOWN)
        text = console.export_text()
        assert "Lines" in text
        assert "Statements" in text
        assert "60.0%" in text
        assert "100.0%" in text

    def test_groups_table_per_group(self) -> None:
        reporter, console = _reporter(precision=0)
        reporter.print_groups({"owner": {"h/b": 0.25, "h/a": 1.0}, "host": {}})
        text = console.export_text()
        assert "Coverage by owner" in text
        assert "Coverage by host" in text
        assert "no files" in text
        assert text.index("h/a") < text.index("h/b")
        assert "25%" in text

    def test_failures_and_success(self) -> None:
        reporter, console = _reporter()
        reporter.print_failures(["line coverage 10.00% is below 50.00%"])
        reporter.print_success("done")
        text = console.export_text()
        assert "line coverage 10.00% is below 50.00%" in text
        assert "done" in text

    def test_ratio_color(self) -> None:
        assert _ratio_color(0.9) == "green"
        assert _ratio_color(0.5) == "yellow"
        assert _ratio_color(0.1) == "red"


class TestJSONReporter:
    def test_build_report_both_sections(self) -> None:
        report = build_report(breakdown=_BREAKDOWN, groups={"owner": {"b": 0.5, "a": 1.0}})
        assert report["total"]["percent_by_lines"] == 0.6
        assert list(report["groups"]["owner"]) == ["a", "b"]

    def test_omits_missing_sections(self) -> None:
        assert build_report() == {}
        assert set(build_report(groups={})) == {"groups"}

    def test_render_json_round_trips(self) -> None:
        data = json.loads(render_json(breakdown=_BREAKDOWN))
        assert data == {"total": _BREAKDOWN.to_dict()}
