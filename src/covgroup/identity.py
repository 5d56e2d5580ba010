"""Split a file identifier into its repository location."""

from __future__ import annotations

import logging
from typing import NamedTuple

from covgroup.errors import InvalidCoverageDataError

logger = logging.getLogger(__name__)

_SEPARATOR = "/"
# host/owner/path is the shortest accepted shape; a fourth segment makes room for repo.
_MIN_SEGMENTS = 3
_MAX_SEGMENTS = 4


class Identity(NamedTuple):
    """Repository location of a covered file."""

    host: str
    owner: str
    repo: str
    path: str


def extract_identity(file_identifier: str) -> Identity:
    """Decompose ``host/owner/[repo/]path`` into its components.

    ``github.com/org/repo/pkg/file.go`` gives repo ``repo`` and path
    ``pkg/file.go``; ``example.com/org/file.go`` has no repo segment, so repo
    is empty and the path is ``file.go``.

    Raises:
        InvalidCoverageDataError: If the identifier has fewer than two slashes.
    """
    segments = file_identifier.split(_SEPARATOR, _MAX_SEGMENTS - 1)
    if len(segments) < _MIN_SEGMENTS:
        logger.debug("File identifier %r has no host/owner prefix", file_identifier)
        raise InvalidCoverageDataError(f"invalid coverage file name {file_identifier!r}")

    if len(segments) == _MIN_SEGMENTS:
        host, owner, path = segments
        return Identity(host=host, owner=owner, repo="", path=path)

    host, owner, repo, path = segments
    return Identity(host=host, owner=owner, repo=repo, path=path)
