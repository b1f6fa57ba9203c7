"""conceptlint CLI entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from conceptlint import __version__
from conceptlint.naming.path_mapper import DEFAULT_EXTENSION, DEFAULT_ROOT_MARKER


@click.group()
@click.version_option(version=__version__, prog_name="conceptlint")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Minimal output (errors only).")
@click.pass_context
def main(ctx: click.Context, *, verbose: bool, quiet: bool) -> None:
    """conceptlint - check that constants match their file paths."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("files", nargs=-1, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["rich", "json", "porcelain"]),
    default=None,
    help="Output format (default: rich if TTY, porcelain if piped).",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Exit 1 if error-severity violations found.",
)
@click.option(
    "--project",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project root (default: current directory).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: <project>/.conceptlint.yml).",
)
def lint(
    *,
    files: tuple[Path, ...],
    fmt: str | None,
    strict: bool,
    project: Path | None,
    config_path: Path | None,
) -> None:
    """Check module and class names against their paths.

    Scans the project (or only FILES) for sources below the convention root.
    Exit codes: 0 = clean or violations without --strict,
    1 = error-severity violations with --strict, 2 = configuration error.
    """
    from conceptlint.linter import LintError, format_json, format_porcelain, format_rich
    from conceptlint.linter import lint as run_lint

    project_root = project or Path.cwd()

    # Resolve output format: explicit flag > TTY detection.
    if fmt is None:
        fmt = "rich" if sys.stdout.isatty() else "porcelain"

    try:
        result = run_lint(
            project_root,
            config_path=config_path,
            files=list(files) if files else None,
        )
    except LintError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)

    formatters = {
        "rich": format_rich,
        "json": format_json,
        "porcelain": format_porcelain,
    }
    output = formatters[fmt](result)
    if output:
        click.echo(output)

    if strict and result.has_errors:
        sys.exit(1)


@main.command("expected-name")
@click.argument("path")
@click.option("--root-marker", default=DEFAULT_ROOT_MARKER, show_default=True)
@click.option("--extension", default=DEFAULT_EXTENSION, show_default=True)
def expected_name_cmd(*, path: str, root_marker: str, extension: str) -> None:
    """Print the constant PATH should declare, and where that constant belongs."""
    from conceptlint.naming.path_mapper import expected_name, expected_path, in_convention_root

    name = expected_name(path, root_marker=root_marker, extension=extension)
    click.echo(str(name))
    click.echo(f"path: {expected_path(name, root_marker=root_marker, extension=extension)}")
    if not in_convention_root(path, root_marker):
        click.echo(f"warning: {path} is outside {root_marker}/ and would not be linted", err=True)


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option(
    "--no-bindings",
    is_flag=True,
    default=False,
    help="Only list modules and classes, not constant assignments.",
)
def declarations(*, file: Path, as_json: bool, no_bindings: bool) -> None:
    """List every fully qualified constant FILE declares."""
    from conceptlint.naming.collector import iter_declarations
    from conceptlint.syntax.node import MalformedTreeError
    from conceptlint.syntax.ruby import parse_file

    try:
        root = parse_file(file)
        rows = [
            (str(name), node.kind.value, node.span.line)
            for node, name in iter_declarations(root, include_bindings=not no_bindings)
        ]
    except (OSError, UnicodeDecodeError, MalformedTreeError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if as_json:
        payload = [{"name": name, "kind": kind, "line": line} for name, kind, line in rows]
        click.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    from rich.console import Console
    from rich.table import Table

    table = Table(title=str(file))
    table.add_column("Line", justify="right")
    table.add_column("Kind")
    table.add_column("Name", style="bold")
    for name, kind, line in rows:
        table.add_row(str(line), kind, name)
    Console().print(table)
