"""Coverage aggregation: ratios per group key and overall totals.

Both functions are pure. They raise nothing for well-formed records; any
future input validation will surface as ``InvalidCoverageDataError``.
"""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING

from covgroup.models import OverallCoverageBreakdown

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from covgroup.models import Coverage, ParseGroup, ParseGroupResult


def _ratio(covered: int, total: int) -> float:
    if total == 0:
        return 0.0
    return covered / total


def group_coverage(items: Sequence[Coverage], *groups: ParseGroup) -> ParseGroupResult:
    """Compute the covered statement ratio per key for every group.

    Records sharing a key are summed before the ratio is taken. A key whose
    records hold no statements is reported as ``0.0``.
    """
    statements: dict[str, defaultdict[str, int]] = defaultdict(lambda: defaultdict(int))
    covered: dict[str, defaultdict[str, int]] = defaultdict(lambda: defaultdict(int))

    for group in groups:
        group_statements = statements[group.name]
        group_covered = covered[group.name]

        for cov in items:
            key = group.key_func(cov.file_name)
            group_statements[key] += sum(b.num_statements for b in cov.blocks)
            group_covered[key] += sum(b.num_statements for b in cov.blocks if b.is_covered)

    return {
        name: {key: _ratio(covered[name][key], stmts) for key, stmts in keys.items()}
        for name, keys in statements.items()
    }


def get_total_coverage_breakdown(items: Iterable[Coverage]) -> OverallCoverageBreakdown:
    """Total the coverage of all records by lines and by statements."""
    total_lines = 0
    covered_lines = 0
    total_statements = 0
    covered_statements = 0

    for cov in items:
        for b in cov.blocks:
            total_lines += b.line_count
            total_statements += b.num_statements
            if b.is_covered:
                covered_lines += b.line_count
                covered_statements += b.num_statements

    return OverallCoverageBreakdown(
        total_lines=total_lines,
        total_covered_lines=covered_lines,
        percent_by_lines=_ratio(covered_lines, total_lines),
        total_statements=total_statements,
        total_covered_statements=covered_statements,
        percent_by_statements=_ratio(covered_statements, total_statements),
    )
