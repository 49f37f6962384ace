"""CLI entry point for blame-lens."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from blame_lens import __version__
from blame_lens.api import AttributionSession, annotate_file, annotate_line
from blame_lens.config.settings import Settings
from blame_lens.exceptions import BlameLensError
from blame_lens.models.diff import CondensedDiff
from blame_lens.utils.progress import log_error, log_info

# Rendered results go to stdout; diagnostics use the stderr consoles in utils.progress
console = Console()


def _build_session(ctx: click.Context) -> AttributionSession:
    settings_kwargs = {}
    if ctx.obj.get('git_executable'):
        settings_kwargs['git_executable'] = ctx.obj['git_executable']
    if ctx.obj.get('data_dir') is not None:
        settings_kwargs['data_dir'] = ctx.obj['data_dir']
    settings_kwargs['debug'] = ctx.obj.get('debug', False)
    return AttributionSession(settings=Settings(**settings_kwargs))


def _render_diff(diff: CondensedDiff) -> Text:
    """Color added/removed lines and highlight the selected one."""
    text = Text()
    for position, line in enumerate(diff.lines, start=1):
        if line.startswith("+ "):
            style = "green"
        elif line.startswith("- "):
            style = "red"
        else:
            style = "dim"
        if position == diff.selected_position:
            style = f"bold reverse {style}".strip()
        text.append(line, style=style)
        if position < len(diff.lines):
            text.append("\n")
    return text


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging for all git invocations')
@click.option('--data-dir', type=click.Path(path_type=Path), help='Base directory for debug logs (default: ~/.blame-lens)')
@click.option('--git-executable', type=str, help='Path to the git executable (default: git)')
@click.version_option(version=__version__)
@click.pass_context
def main(ctx, debug: bool, data_dir: Optional[Path], git_executable: Optional[str]) -> None:
    """blame-lens - who last changed a line, and what that change looked like.

    Attributes lines of a file to the commit that last touched them and
    shows a condensed diff of that commit for the file.
    """
    # Store global options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug
    ctx.obj['data_dir'] = data_dir.expanduser().resolve() if data_dir else None
    ctx.obj['git_executable'] = git_executable


@main.command()
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("line_number", type=click.IntRange(min=1))
@click.option("--no-diff", is_flag=True, help="Only print the attribution, skip the diff")
@click.pass_context
def line(ctx, file_path: Path, line_number: int, no_diff: bool) -> None:
    """Show the change that last touched one line.

    FILE_PATH: File inside a git work tree

    LINE_NUMBER: 1-based line number

    Examples:

        \b
        $ blame-lens line src/app.py 42
        $ blame-lens line src/app.py 42 --no-diff
    """
    with _build_session(ctx) as session:
        try:
            result = annotate_line(session, str(file_path), line_number, include_diff=not no_diff)
        except BlameLensError as e:
            log_error(escape(str(e)))
            sys.exit(1)

    if result is None:
        log_info(f"Nothing to show for {file_path}:{line_number}")
        sys.exit(1)

    record = result.record
    console.print(f"[cyan]{record.short_change}[/cyan] {escape(result.annotation)}")

    if result.diff is not None:
        console.print(
            Panel(
                _render_diff(result.diff),
                title=f"Hash: {record.change}",
                title_align="left",
            )
        )


@main.command()
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def file(ctx, file_path: Path) -> None:
    """Show the attribution of every line of a file.

    FILE_PATH: File inside a git work tree
    """
    with _build_session(ctx) as session:
        try:
            records = annotate_file(session, str(file_path))
        except BlameLensError as e:
            log_error(escape(str(e)))
            sys.exit(1)

    if not records:
        log_info(f"Nothing to show for {file_path}")
        sys.exit(1)

    table = Table(title=f"Attribution for '{file_path}'")
    table.add_column("Line", style="yellow", justify="right")
    table.add_column("Change", style="cyan", no_wrap=True, width=8)
    table.add_column("Author", style="green")
    table.add_column("Date", style="blue", width=10)
    table.add_column("Summary", style="white")

    for record in records:
        table.add_row(
            str(record.line),
            record.short_change,
            escape(record.author),
            record.date,
            escape(record.summary),
        )

    console.print(table)


if __name__ == "__main__":
    main()
