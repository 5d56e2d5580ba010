"""Exception hierarchy for covgroup."""

from __future__ import annotations


class CovgroupError(Exception):
    """Base exception for covgroup errors."""


class InvalidCoverageDataError(CovgroupError):
    """Raised when a coverage report cannot be turned into coverage records.

    Covers both a malformed profile and a file identifier that does not have
    the ``host/owner/[repo/]path`` shape.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(f"invalid coverage data: {detail}")
        self.detail = detail


class ProfileFormatError(CovgroupError):
    """Raised by the profile reader when the cover profile syntax is wrong."""


class ConfigError(CovgroupError):
    """Raised when ``.covgroup.yml`` fails validation."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = errors
