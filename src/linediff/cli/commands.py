"""CLI command implementations"""

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from linediff.config import Settings, load_config
from linediff.core.errors import DiffError
from linediff.core.pipeline import run_diff, run_stat


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except (ValueError, ValidationError) as e:
        _fail("Invalid configuration", e)


def _configure_logging(level: str) -> None:
    """Send linediff.* log records to stderr at the given level."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%H:%M:%S"))
    logger = logging.getLogger("linediff")
    logger.handlers[:] = [handler]
    logger.setLevel(level)


def diff_cmd(
    files: Annotated[Optional[list[Path]], typer.Argument(help="The two files to compare", show_default=False)] = None,
    unified: Annotated[bool, typer.Option("--unified", "-u", help="Unified output with 3 lines of context")] = False,
    color: Annotated[Optional[bool], typer.Option("--color/--no-color", help="Force colored or plain output", show_default=False)] = None,
    max_depth: Annotated[Optional[int], typer.Option("--max-depth", help="Largest edit distance to search")] = None,
    stat: Annotated[bool, typer.Option("--stat", help="Print added/deleted/unchanged line counts only")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging on stderr")] = False,
    ):
    """Compare two files line by line; classic output unless -u is given."""
    settings = _settings(overrides={
        "max_depth": max_depth,
        "color": None if color is None else ("always" if color else "never"),
        "log_level": "DEBUG" if verbose else None,
    })
    _configure_logging(settings.log_level)

    if not files or len(files) != 2:
        _fail("usage: linediff [-u] <file1> <file2>")
    path_a, path_b = files

    try:
        if stat:
            counts = run_stat(path_a, path_b, settings.max_depth)
        else:
            lines = run_diff(path_a, path_b, unified, settings.color != "never", settings.max_depth)
    except DiffError as e:
        _fail(str(e))

    if stat:
        typer.echo(f"{counts['added']} added, {counts['deleted']} deleted, {counts['unchanged']} unchanged")
        return

    echo_color = True if settings.color == "always" else None
    for line in lines:
        typer.echo(line, color=echo_color)
