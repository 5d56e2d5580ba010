"""Coverage data models."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import asdict, dataclass, field


@dataclass(frozen=True)
class Block:
    """A contiguous range of source lines with its statement and hit counts."""

    start_line: int
    end_line: int
    num_statements: int
    count: int
    start_col: int = 0
    end_col: int = 0

    @property
    def is_covered(self) -> bool:
        """Return True if this block was executed at least once."""
        return self.count > 0

    @property
    def line_count(self) -> int:
        """Number of source lines spanned by the block (inclusive)."""
        return self.end_line - self.start_line + 1


@dataclass(frozen=True)
class RawProfile:
    """Blocks reported for one file, as read from a cover profile."""

    file_name: str
    mode: str
    blocks: tuple[Block, ...] = ()


@dataclass(frozen=True)
class Coverage:
    """Coverage blocks for one file together with its repository location."""

    file_name: str
    """Original file identifier from the report."""

    host: str
    owner: str
    repo: str
    """Repository segment; empty when the identifier carries none."""

    path: str
    blocks: tuple[Block, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ParseGroup:
    """A named policy mapping a file identifier to a group key."""

    name: str
    key_func: Callable[[str], str]


ParseGroupResult = dict[str, dict[str, float]]
"""Group name -> group key -> covered statement ratio."""


@dataclass(frozen=True)
class OverallCoverageBreakdown:
    """Totals across every file, by lines and by statements."""

    total_lines: int = 0
    total_covered_lines: int = 0
    percent_by_lines: float = 0.0
    total_statements: int = 0
    total_covered_statements: int = 0
    percent_by_statements: float = 0.0

    def to_dict(self) -> dict[str, int | float]:
        return asdict(self)
