"""Cover profile reader.

Reads the textual profile written by ``go test -coverprofile``::

    mode: set
    github.com/org/repo/pkg/file.go:5.2,7.4 2 1

The first line names the counting mode, each following line is one block:
``file:startLine.startCol,endLine.endCol numStmts count``.
"""

from __future__ import annotations

import logging
import re

from covgroup.errors import ProfileFormatError
from covgroup.models import Block, RawProfile

logger = logging.getLogger(__name__)

_MODE_PREFIX = "mode: "

# File names may contain ':' themselves, so the numeric tail is anchored at the end.
_BLOCK_LINE_REGEX = re.compile(r"^(.+):(\d+)\.(\d+),(\d+)\.(\d+) (\d+) (\d+)$")


def parse_profiles(text: str) -> list[RawProfile]:
    """Parse cover profile text into one RawProfile per file.

    Files are returned in order of first appearance and their blocks keep
    the order they were listed in; nothing is merged or sorted. Lines are split on
    newlines only and a trailing carriage return is dropped. Whitespace around
    the mode name and around each block line is ignored, but blank lines are
    rejected.

    Raises:
        ProfileFormatError: If the mode line or any block line is malformed.
    """
    mode = ""
    blocks_by_file: dict[str, list[Block]] = {}

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    for line_no, raw_line in enumerate(lines, start=1):
        line = raw_line.removesuffix("\r")
        if not mode:
            mode = line[len(_MODE_PREFIX) :].strip() if line.startswith(_MODE_PREFIX) else ""
            if not mode:
                raise ProfileFormatError(f"bad mode line: {line!r}")
            continue

        match = _BLOCK_LINE_REGEX.match(line.strip())
        if not match:
            logger.debug("Rejecting profile line %d: %r", line_no, line)
            raise ProfileFormatError(
                f"line {line_no} {line!r} doesn't match expected format: "
                "name.go:line.column,line.column numberOfStatements count"
            )

        file_name, start_line, start_col, end_line, end_col, num_stmt, count = match.groups()
        blocks_by_file.setdefault(file_name, []).append(
            Block(
                start_line=int(start_line),
                start_col=int(start_col),
                end_line=int(end_line),
                end_col=int(end_col),
                num_statements=int(num_stmt),
                count=int(count),
            )
        )

    return [
        RawProfile(file_name=file_name, mode=mode, blocks=tuple(blocks))
        for file_name, blocks in blocks_by_file.items()
    ]
