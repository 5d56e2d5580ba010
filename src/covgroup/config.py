"""Configuration parsing from ``.covgroup.yml``."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from covgroup.errors import ConfigError
from covgroup.groups import GROUP_KINDS, group_from_kind
from covgroup.models import ParseGroup

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".covgroup.yml"

REPORT_FORMATS = ("table", "json")

_ENV_VAR_RE = re.compile(r"\$\{(\w+)\}")


def _resolve_env_vars(value: str) -> str:
    """Replace ``${VAR_NAME}`` placeholders with environment variable values."""

    def _replace(match: re.Match[str]) -> str:
        var = match.group(1)
        resolved = os.environ.get(var)
        if resolved is None:
            logger.warning("Environment variable %s is not set (referenced in config)", var)
            return ""
        return resolved

    return _ENV_VAR_RE.sub(_replace, value)


def _resolve_value(value: Any) -> Any:
    if isinstance(value, str):
        return _resolve_env_vars(value)
    if isinstance(value, dict):
        return _resolve_dict(value)
    if isinstance(value, list):
        return [_resolve_value(item) for item in value]
    return value


def _resolve_dict(data: dict[str, Any]) -> dict[str, Any]:
    """Recursively resolve environment variables in a dictionary."""
    return {key: _resolve_value(value) for key, value in data.items()}


@dataclass
class GroupConfig:
    """One named grouping policy."""

    name: str
    by: str = "repo"
    """Group kind: host, owner, repo, directory or file."""

    depth: int = 1
    """Directories kept below the repository (``directory`` kind only)."""


@dataclass
class ThresholdConfig:
    """Minimum acceptable coverage ratios (0.0 to 1.0)."""

    statements: float = 0.0
    lines: float = 0.0
    groups: float = 0.0
    """Minimum ratio for every key of every group."""


@dataclass
class ReportConfig:
    """Output preferences."""

    format: str = "table"
    precision: int = 1
    """Decimals shown for percentages in terminal tables."""


def _default_groups() -> list[GroupConfig]:
    return [GroupConfig(name="repos", by="repo")]


@dataclass
class CovgroupConfig:
    """Complete covgroup configuration."""

    groups: list[GroupConfig] = field(default_factory=_default_groups)
    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)
    report: ReportConfig = field(default_factory=ReportConfig)

    def parse_groups(self) -> list[ParseGroup]:
        """Build the configured grouping policies."""
        return [group_from_kind(g.name, g.by, depth=g.depth) for g in self.groups]


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name, {})
    if not isinstance(value, dict):
        logger.warning("Ignoring %s section of %s: expected a mapping", name, CONFIG_FILE_NAME)
        return {}
    return value


def _number(data: dict[str, Any], key: str, default: float, convert: type, label: str) -> Any:
    """Convert a numeric setting, naming *label* when the value has the wrong type."""
    value = data.get(key, default)
    try:
        return convert(value)
    except (TypeError, ValueError) as e:
        raise ConfigError([f"{label} must be a number (got: {value!r})"]) from e


def _parse_groups(raw: dict[str, Any]) -> list[GroupConfig]:
    groups_raw = raw.get("groups")
    if not isinstance(groups_raw, list) or not groups_raw:
        return _default_groups()

    groups: list[GroupConfig] = []
    for index, entry in enumerate(groups_raw):
        if not isinstance(entry, dict):
            logger.warning("Ignoring groups[%d]: expected a mapping", index)
            continue
        kind = str(entry.get("by", "repo"))
        groups.append(
            GroupConfig(
                name=str(entry.get("name", kind)),
                by=kind,
                depth=_number(entry, "depth", 1, int, f"groups[{index}].depth"),
            )
        )
    return groups or _default_groups()


def load_config(root: str | Path) -> CovgroupConfig:
    """Load ``.covgroup.yml`` from *root*.

    Falls back to defaults when the file is missing or incomplete.
    ``COVGROUP_FORMAT`` overrides the report format.

    Raises:
        ConfigError: If the file is not valid YAML or a numeric setting is not
            a number.
    """
    config_path = Path(root).resolve() / CONFIG_FILE_NAME

    raw: dict[str, Any] = {}
    if config_path.is_file():
        try:
            parsed = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError([f"{config_path} is not valid YAML: {e}"]) from e
        if isinstance(parsed, dict):
            raw = _resolve_dict(parsed)
        elif parsed is not None:
            logger.warning("Ignoring %s: expected a mapping at top level", config_path)

    thresholds_raw = _section(raw, "thresholds")
    thresholds = ThresholdConfig(
        statements=_number(thresholds_raw, "statements", 0.0, float, "thresholds.statements"),
        lines=_number(thresholds_raw, "lines", 0.0, float, "thresholds.lines"),
        groups=_number(thresholds_raw, "groups", 0.0, float, "thresholds.groups"),
    )

    report_raw = _section(raw, "report")
    report = ReportConfig(
        format=str(report_raw.get("format", "table")),
        precision=_number(report_raw, "precision", 1, int, "report.precision"),
    )
    env_format = os.environ.get("COVGROUP_FORMAT")
    if env_format:
        report.format = env_format

    return CovgroupConfig(groups=_parse_groups(raw), thresholds=thresholds, report=report)


def _validate_groups(groups: list[GroupConfig]) -> list[str]:
    errors: list[str] = []
    seen: set[str] = set()
    for group in groups:
        if group.by not in GROUP_KINDS:
            errors.append(
                f"groups.{group.name}.by must be one of: {', '.join(GROUP_KINDS)} "
                f"(got: {group.by})"
            )
        if group.depth < 0:
            errors.append(f"groups.{group.name}.depth must not be negative (got: {group.depth})")
        if group.name in seen:
            errors.append(f"duplicate group name: {group.name}")
        seen.add(group.name)
    return errors


def _validate_thresholds(thresholds: ThresholdConfig) -> list[str]:
    errors: list[str] = []
    for key in ("statements", "lines", "groups"):
        value = getattr(thresholds, key)
        if not 0.0 <= value <= 1.0:
            errors.append(f"thresholds.{key} must be between 0 and 1 (got: {value})")
    return errors


def _validate_report(report: ReportConfig) -> list[str]:
    errors: list[str] = []
    if report.format not in REPORT_FORMATS:
        errors.append(
            f"report.format must be one of: {', '.join(REPORT_FORMATS)} (got: {report.format})"
        )
    if report.precision < 0:
        errors.append(f"report.precision must not be negative (got: {report.precision})")
    return errors


def validate_config(config: CovgroupConfig) -> list[str]:
    """Validate the configuration and return a list of error messages.

    Returns an empty list if the configuration is valid.
    """
    errors: list[str] = []
    errors.extend(_validate_groups(config.groups))
    errors.extend(_validate_thresholds(config.thresholds))
    errors.extend(_validate_report(config.report))
    return errors
