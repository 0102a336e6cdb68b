"""CLI command implementations"""

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from hunkfmt.config import Settings, load_config
from hunkfmt.core.models import DisplayRow, Hunk
from hunkfmt.core.pipeline import run_patch, run_preview
from hunkfmt.core.summary import summary_title
from hunkfmt.render import render_plain, render_rows


logger = logging.getLogger(__name__)

ContextOpt = Annotated[Optional[int], typer.Option("--context", "-U", help="Context lines around each change")]
OriginOpt = Annotated[Optional[str], typer.Option("--origin", help="Number rows from the 'old' or 'new' hunk start")]
PaddingOpt = Annotated[Optional[int], typer.Option("--padding", help="Spaces before every row")]
NoColorOpt = Annotated[bool, typer.Option("--no-color", help="Print plain text without styling")]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")]


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
    except ValueError as e:
        _fail(str(e))


def _read(path: str) -> str:
    """Read a file, or stdin when path is '-'."""
    if path == "-":
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {path}", e)


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _echo_rows(title: Optional[str], hunks: list[Hunk], rows: list[DisplayRow], settings: Settings) -> None:
    """Print the optional title and formatted rows, or a no-changes line."""
    if not hunks:
        typer.echo("No changes.")
        return
    if not settings.color:
        if title:
            typer.echo(title)
        typer.echo(render_plain(rows, settings.padding_left))
        return
    console = Console(highlight=False)
    if title:
        console.print(title, style="bold", markup=False, soft_wrap=True)
    for line in render_rows(rows, settings.padding_left):
        console.print(line, soft_wrap=True)


def preview_cmd(
    old: Annotated[str, typer.Argument(help="Original file, or '-' for stdin")],
    new: Annotated[str, typer.Argument(help="Modified file, or '-' for stdin")],
    label: Annotated[Optional[str], typer.Option("--path", help="Path shown in the title (default: NEW)")] = None,
    context: ContextOpt = None,
    origin: OriginOpt = None,
    padding: PaddingOpt = None,
    no_color: NoColorOpt = False,
    verbose: VerboseOpt = False,
    ):
    """Diff two files and print the word-highlighted, line-numbered hunks."""
    _setup_logging(verbose)
    settings = _settings(overrides={
        "context_lines": context, "line_number_origin": origin, "padding_left": padding,
        "color": False if no_color else None,
    })
    if old == new == "-":
        _fail("Only one of OLD and NEW can be read from stdin")
    old_text, new_text = _read(old), _read(new)
    hunks, rows = run_preview(old_text, new_text, settings)
    logger.debug("Previewing %s -> %s: %d hunk(s)", old, new, len(hunks))
    _echo_rows(summary_title(label or new, hunks), hunks, rows, settings)


def patch_cmd(
    path: Annotated[str, typer.Argument(help="Unified diff file, or '-' for stdin")] = "-",
    origin: OriginOpt = None,
    padding: PaddingOpt = None,
    no_color: NoColorOpt = False,
    verbose: VerboseOpt = False,
    ):
    """Format the hunks of an existing unified diff."""
    _setup_logging(verbose)
    settings = _settings(overrides={
        "line_number_origin": origin, "padding_left": padding,
        "color": False if no_color else None,
    })
    try:
        hunks, rows = run_patch(_read(path), settings)
    except ValueError as e:
        _fail("Invalid diff", e)
    logger.debug("Formatted %d hunk(s) from %s", len(hunks), path)
    _echo_rows(None, hunks, rows, settings)
