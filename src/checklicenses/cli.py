"""checklicenses CLI - report tracked files lacking an acceptable license header."""

from __future__ import annotations

import logging
import os
from enum import Enum
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from checklicenses import __version__
from checklicenses.config import load_config
from checklicenses.errors import ChecklicensesError
from checklicenses.fs import LocalFileSource
from checklicenses.git.lister import GitTrackedFileLister, StaticFileLister, TrackedFileLister
from checklicenses.report import build_report, canonical_dumps, render_text
from checklicenses.rules.compiler import compile_config
from checklicenses.rules.engine import LicenseChecker

EXIT_VIOLATIONS = 1
EXIT_FATAL = 2

app = typer.Typer(
    name="checklicenses",
    help="Check that tracked files carry an acceptable license header.",
    no_args_is_help=True,
)
err_console = Console(stderr=True)


class OutputFormat(str, Enum):
    """Supported report formats."""

    TEXT = "text"
    JSON = "json"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


def _echo(text: str, err: bool = False) -> None:
    """Echo text as raw bytes so listed paths keep their original encoding."""
    typer.echo(os.fsencode(text), err=err)


def _make_lister(root: Path, files_from: Path | None) -> TrackedFileLister:
    if files_from is not None:
        return StaticFileLister.from_file(files_from)
    return GitTrackedFileLister(root)


def _version_option_callback(value: bool) -> None:
    """Handle eager --version option."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def _cli_callback(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show checklicenses version and exit.",
        is_eager=True,
        callback=_version_option_callback,
    ),
) -> None:
    """License header compliance gate."""


@app.command("check")
def check(
    config_file: Path = typer.Option(
        ...,
        "--config",
        "-c",
        help="Configuration file (JSON, YAML or TOML).",
    ),
    absolute: bool = typer.Option(
        False,
        "--absolute",
        "-a",
        help="Print absolute paths instead of module-relative ones.",
    ),
    repo: Path | None = typer.Option(
        None,
        "--repo",
        help="Working tree to check (defaults to current working directory).",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.TEXT,
        "--format",
        help="Report format.",
    ),
    files_from: Path | None = typer.Option(
        None,
        "--files-from",
        help="Read paths to check, one per line, from a file (- for stdin) instead of git ls-files.",
    ),
    list_scope: bool = typer.Option(
        False,
        "--list-scope",
        help="Print in-scope files without checking their content.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log scope decisions."),
) -> None:
    """List files without an acceptable license; exit 1 if there are any."""
    _configure_logging(verbose)
    root = (repo or Path.cwd()).resolve()

    try:
        config = compile_config(load_config(config_file))
        checker = LicenseChecker(config, LocalFileSource(root))
        files = _make_lister(root, files_from).list_files()

        if list_scope:
            for candidate in checker.iter_candidates(files):
                _echo(checker.source.absolute(candidate.path) if absolute else candidate.normalized)
            return

        result = checker.scan(files, absolute=absolute)
    except ChecklicensesError as exc:
        _echo(f"checklicenses: {exc}", err=True)
        raise typer.Exit(EXIT_FATAL) from exc

    if output_format is OutputFormat.JSON:
        _echo(canonical_dumps(build_report(result, config)))
    elif not result.passed:
        _echo(render_text(result))

    if not result.passed:
        raise typer.Exit(EXIT_VIOLATIONS)
