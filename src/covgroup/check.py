"""Coverage threshold enforcement."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from covgroup.config import ThresholdConfig
    from covgroup.models import OverallCoverageBreakdown, ParseGroupResult

logger = logging.getLogger(__name__)


def find_threshold_failures(
    breakdown: OverallCoverageBreakdown,
    groups: ParseGroupResult,
    thresholds: ThresholdConfig,
) -> list[str]:
    """Return one message per total or group key below its threshold.

    Returns an empty list when everything meets the configured minimums.
    """
    failures: list[str] = []

    if breakdown.percent_by_statements < thresholds.statements:
        failures.append(
            f"statement coverage {breakdown.percent_by_statements:.2%} "
            f"is below {thresholds.statements:.2%}"
        )
    if breakdown.percent_by_lines < thresholds.lines:
        failures.append(
            f"line coverage {breakdown.percent_by_lines:.2%} is below {thresholds.lines:.2%}"
        )

    for name, ratios in groups.items():
        for key in sorted(ratios):
            if ratios[key] < thresholds.groups:
                failures.append(
                    f"{name} {key} coverage {ratios[key]:.2%} is below {thresholds.groups:.2%}"
                )

    logger.debug("Threshold check found %d failures", len(failures))
    return failures
