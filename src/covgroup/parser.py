"""Build coverage records from a raw cover profile."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from covgroup.errors import InvalidCoverageDataError, ProfileFormatError
from covgroup.identity import extract_identity
from covgroup.models import Coverage
from covgroup.profile import parse_profiles

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def parse(coverage_data: str) -> list[Coverage]:
    """Parse cover profile text into one Coverage record per file.

    Surrounding blank lines are ignored and an empty report yields an empty
    list. Parsing stops at the first problem; no partial result is returned.

    Raises:
        InvalidCoverageDataError: If the profile is malformed or a file name
            lacks the ``host/owner/[repo/]path`` shape.
    """
    try:
        profiles = parse_profiles(coverage_data.strip())
    except ProfileFormatError as e:
        raise InvalidCoverageDataError(str(e)) from e

    if not profiles:
        logger.debug("Coverage report contains no profiles")
        return []

    coverage: list[Coverage] = []
    for profile in profiles:
        identity = extract_identity(profile.file_name)
        coverage.append(
            Coverage(
                file_name=profile.file_name,
                host=identity.host,
                owner=identity.owner,
                repo=identity.repo,
                path=identity.path,
                blocks=profile.blocks,
            )
        )

    logger.debug("Parsed coverage for %d files", len(coverage))
    return coverage


def parse_file(coverage_file: Path) -> list[Coverage]:
    """Read a cover profile from disk and parse it."""
    return parse(coverage_file.read_text(encoding="utf-8"))
