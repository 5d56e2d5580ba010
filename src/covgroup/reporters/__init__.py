"""Coverage report renderers."""

from covgroup.reporters.json_reporter import build_report, render_json
from covgroup.reporters.terminal import TerminalReporter

__all__ = ["TerminalReporter", "build_report", "render_json"]
