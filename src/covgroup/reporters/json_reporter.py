"""JSON reporter — machine-readable coverage breakdowns."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from covgroup.models import OverallCoverageBreakdown, ParseGroupResult


def build_report(
    *,
    breakdown: OverallCoverageBreakdown | None = None,
    groups: ParseGroupResult | None = None,
) -> dict[str, Any]:
    """Assemble the report payload; sections left as None are omitted."""
    report: dict[str, Any] = {}
    if breakdown is not None:
        report["total"] = breakdown.to_dict()
    if groups is not None:
        report["groups"] = {
            name: {key: ratios[key] for key in sorted(ratios)} for name, ratios in groups.items()
        }
    return report


def render_json(
    *,
    breakdown: OverallCoverageBreakdown | None = None,
    groups: ParseGroupResult | None = None,
) -> str:
    return json.dumps(build_report(breakdown=breakdown, groups=groups), indent=2)
