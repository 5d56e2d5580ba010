"""covgroup — coverage breakdowns grouped by repository ownership."""

from covgroup.aggregate import get_total_coverage_breakdown, group_coverage
from covgroup.errors import (
    ConfigError,
    CovgroupError,
    InvalidCoverageDataError,
    ProfileFormatError,
)
from covgroup.groups import by_directory, by_file, by_host, by_owner, by_repo
from covgroup.identity import Identity, extract_identity
from covgroup.models import (
    Block,
    Coverage,
    OverallCoverageBreakdown,
    ParseGroup,
    ParseGroupResult,
    RawProfile,
)
from covgroup.parser import parse, parse_file

__version__ = "0.1.0"

__all__ = [
    "Block",
    "ConfigError",
    "Coverage",
    "CovgroupError",
    "Identity",
    "InvalidCoverageDataError",
    "OverallCoverageBreakdown",
    "ParseGroup",
    "ParseGroupResult",
    "ProfileFormatError",
    "RawProfile",
    "__version__",
    "by_directory",
    "by_file",
    "by_host",
    "by_owner",
    "by_repo",
    "extract_identity",
    "get_total_coverage_breakdown",
    "group_coverage",
    "parse",
    "parse_file",
]
