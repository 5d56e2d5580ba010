"""covgroup CLI — top-level command group."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import click
from rich.console import Console
from rich.logging import RichHandler

from covgroup import __version__
from covgroup.aggregate import get_total_coverage_breakdown, group_coverage
from covgroup.check import find_threshold_failures
from covgroup.config import REPORT_FORMATS, CovgroupConfig, load_config, validate_config
from covgroup.errors import ConfigError, CovgroupError
from covgroup.groups import GROUP_KINDS, group_from_kind
from covgroup.parser import parse
from covgroup.reporters import TerminalReporter, render_json

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import TextIO

    from covgroup.models import Coverage, ParseGroup

logger = logging.getLogger(__name__)
console = Console()

_THRESHOLD_EXIT_CODE = 2


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_config(path: str) -> CovgroupConfig:
    config = load_config(path)
    errors = validate_config(config)
    if errors:
        raise ConfigError(errors)
    return config


def _read_coverage(profile: TextIO) -> list[Coverage]:
    return parse(profile.read())


def _resolve_groups(config: CovgroupConfig, by: tuple[str, ...], depth: int) -> list[ParseGroup]:
    """Groups named on the command line take precedence over configured ones."""
    if by:
        return [group_from_kind(kind, kind, depth=depth) for kind in by]
    return config.parse_groups()


def _common_options(func: Callable[..., Any]) -> Callable[..., Any]:
    func = click.option(
        "--path",
        default=".",
        type=click.Path(exists=True, file_okay=False, resolve_path=True),
        help="Project root containing .covgroup.yml.",
    )(func)
    return click.argument("profile", type=click.File("r", encoding="utf-8"), default="-")(func)


def _group_options(func: Callable[..., Any]) -> Callable[..., Any]:
    func = click.option(
        "--depth",
        default=1,
        show_default=True,
        type=click.IntRange(min=0),
        help="Directories kept below the repository for --by directory.",
    )(func)
    return click.option(
        "--by",
        "by",
        multiple=True,
        type=click.Choice(GROUP_KINDS),
        help="Group kind to report (repeatable). Overrides configured groups.",
    )(func)


def _format_option(func: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "--format",
        "output_format",
        type=click.Choice(REPORT_FORMATS),
        default=None,
        help="Output format. Defaults to report.format from .covgroup.yml.",
    )(func)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.version_option(version=__version__, prog_name="covgroup")
def cli(*, verbose: bool) -> None:
    """covgroup — coverage broken down by host, owner, repository and directory."""
    _configure_logging(verbose=verbose)


@cli.command()
@_common_options
@_format_option
def total(profile: TextIO, path: str, output_format: str | None) -> None:
    """Show overall coverage by lines and by statements.

    PROFILE is a cover profile file, or - to read from stdin.
    """
    try:
        config = _load_config(path)
        breakdown = get_total_coverage_breakdown(_read_coverage(profile))
    except (CovgroupError, OSError) as e:
        TerminalReporter(console).print_error(str(e))
        raise click.Abort from e

    if (output_format or config.report.format) == "json":
        click.echo(render_json(breakdown=breakdown))
        return
    TerminalReporter(console, precision=config.report.precision).print_breakdown(breakdown)


@cli.command()
@_common_options
@_group_options
@_format_option
def groups(
    profile: TextIO, path: str, by: tuple[str, ...], depth: int, output_format: str | None
) -> None:
    """Show statement coverage per group key.

    Example:
      covgroup groups coverage.out --by owner --by repo
      go test -coverprofile=/dev/stdout ./... | covgroup groups -
    """
    try:
        config = _load_config(path)
        result = group_coverage(_read_coverage(profile), *_resolve_groups(config, by, depth))
    except (CovgroupError, OSError) as e:
        TerminalReporter(console).print_error(str(e))
        raise click.Abort from e

    if (output_format or config.report.format) == "json":
        click.echo(render_json(groups=result))
        return
    TerminalReporter(console, precision=config.report.precision).print_groups(result)


@cli.command()
@_common_options
@_group_options
@_format_option
def report(
    profile: TextIO, path: str, by: tuple[str, ...], depth: int, output_format: str | None
) -> None:
    """Show overall totals followed by every group."""
    try:
        config = _load_config(path)
        items = _read_coverage(profile)
        breakdown = get_total_coverage_breakdown(items)
        result = group_coverage(items, *_resolve_groups(config, by, depth))
    except (CovgroupError, OSError) as e:
        TerminalReporter(console).print_error(str(e))
        raise click.Abort from e

    if (output_format or config.report.format) == "json":
        click.echo(render_json(breakdown=breakdown, groups=result))
        return
    reporter = TerminalReporter(console, precision=config.report.precision)
    reporter.print_breakdown(breakdown)
    reporter.print_groups(result)


@cli.command()
@_common_options
@_group_options
@click.pass_context
def check(ctx: click.Context, profile: TextIO, path: str, by: tuple[str, ...], depth: int) -> None:
    """Fail when coverage is below the thresholds in .covgroup.yml.

    Exits with status 2 when any total or group key is below its minimum.
    """
    try:
        config = _load_config(path)
        items = _read_coverage(profile)
        breakdown = get_total_coverage_breakdown(items)
        result = group_coverage(items, *_resolve_groups(config, by, depth))
    except (CovgroupError, OSError) as e:
        TerminalReporter(console).print_error(str(e))
        raise click.Abort from e

    reporter = TerminalReporter(console)
    failures = find_threshold_failures(breakdown, result, config.thresholds)
    if failures:
        reporter.print_failures(failures)
        ctx.exit(_THRESHOLD_EXIT_CODE)
    reporter.print_success("Coverage meets all thresholds")


def main() -> None:
    cli()
