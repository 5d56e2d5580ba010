"""Ready-made grouping policies.

Each builder returns a :class:`ParseGroup` whose key is derived from the
file's repository location, so callers can break coverage down by host,
owner, repository or directory without writing their own key functions.
"""

from __future__ import annotations

from covgroup.identity import extract_identity
from covgroup.models import ParseGroup

GROUP_KINDS = ("host", "owner", "repo", "directory", "file")


def _host_key(file_name: str) -> str:
    return extract_identity(file_name).host


def _owner_key(file_name: str) -> str:
    identity = extract_identity(file_name)
    return f"{identity.host}/{identity.owner}"


def _repo_key(file_name: str) -> str:
    identity = extract_identity(file_name)
    if not identity.repo:
        return f"{identity.host}/{identity.owner}"
    return f"{identity.host}/{identity.owner}/{identity.repo}"


def by_host(name: str = "host") -> ParseGroup:
    return ParseGroup(name=name, key_func=_host_key)


def by_owner(name: str = "owner") -> ParseGroup:
    """Group by ``host/owner``."""
    return ParseGroup(name=name, key_func=_owner_key)


def by_repo(name: str = "repo") -> ParseGroup:
    """Group by ``host/owner/repo``; files without a repo segment group by owner."""
    return ParseGroup(name=name, key_func=_repo_key)


def by_directory(name: str = "directory", depth: int = 1) -> ParseGroup:
    """Group by the repository prefix plus the first *depth* directories.

    Files sitting shallower than *depth* are keyed by their own directory.
    """
    if depth < 0:
        raise ValueError(f"depth must not be negative (got: {depth})")

    def _directory_key(file_name: str) -> str:
        directories = extract_identity(file_name).path.split("/")[:-1]
        return "/".join([_repo_key(file_name), *directories[:depth]])

    return ParseGroup(name=name, key_func=_directory_key)


def by_file(name: str = "file") -> ParseGroup:
    return ParseGroup(name=name, key_func=str)


def group_from_kind(name: str, kind: str, depth: int = 1) -> ParseGroup:
    """Build a group from its configured kind (one of ``GROUP_KINDS``)."""
    if kind == "host":
        return by_host(name)
    if kind == "owner":
        return by_owner(name)
    if kind == "repo":
        return by_repo(name)
    if kind == "directory":
        return by_directory(name, depth=depth)
    if kind == "file":
        return by_file(name)
    raise ValueError(f"unknown group kind {kind!r} (expected one of: {', '.join(GROUP_KINDS)})")
