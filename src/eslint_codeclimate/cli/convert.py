import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from eslint_codeclimate.config import get_default_cwd, get_log_level
from eslint_codeclimate.core.mapper import to_codeclimate
from eslint_codeclimate.formatter import render_issues
from eslint_codeclimate.loader import LintReport, load_report, load_rules_meta, loads_json, parse_report

console = Console(stderr=True)
logger = logging.getLogger(__name__)


def _configure_logging(level: int | str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _read_report(report: str) -> LintReport:
    if report == "-":
        return parse_report(loads_json(sys.stdin.read(), "stdin"))
    return load_report(Path(report))


def convert(
    report: Annotated[
        str, typer.Argument(help="ESLint JSON report ('json' or 'json-with-metadata'), or '-' for stdin.")
    ],
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="File to write the Code Climate report to.")
    ] = None,
    cwd: Annotated[str | None, typer.Option(help="Root directory that issue paths are made relative to.")] = None,
    rules_meta: Annotated[
        Path | None, typer.Option("--rules-meta", help="JSON file mapping rule ids to ESLint rule metadata.")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Convert an ESLint JSON report to a Code Climate report."""
    try:
        _configure_logging(logging.DEBUG if verbose else get_log_level())
        lint_report = _read_report(report)
        meta = dict(lint_report.rules_meta)
        if rules_meta is not None:
            meta.update(load_rules_meta(rules_meta))
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from None

    root = cwd or lint_report.cwd or get_default_cwd()
    logger.debug("Resolving issue paths against %s", root)
    issues = to_codeclimate(lint_report.results, meta, root)
    rendered = render_issues(issues)

    if output is None:
        typer.echo(rendered, nl=False)
        return

    output.write_text(rendered, encoding="utf-8")
    console.print(f"[green]Wrote[/green] {len(issues)} issue(s) to {escape(str(output))}")
