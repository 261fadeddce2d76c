"""SOLID Lab command line.

Commands:
- `list`: the five principles.
- `run`: run lessons and print what each example did.
- `doctor`: settings and environment checks.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.json_exporter import export_report_json
from adapters.report_exporter import export_report_html
from cli import doctor
from cli.ui_components import (
    build_outcome_table,
    build_principles_table,
    build_summary_panel,
    print_banner,
)
from core.config import AppSettings
from core.domain.errors import SolidLabError
from core.domain.principle import Principle, Variant
from core.services.lessons import LessonHooks, LessonRequest, run_lessons

app = typer.Typer(
    no_args_is_help=True,
    help="Run small, self-contained demonstrations of the SOLID principles.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


class VariantChoice(str, Enum):
    VIOLATING = "violating"
    COMPLIANT = "compliant"
    BOTH = "both"

    def variants(self) -> tuple[Variant, ...]:
        if self is VariantChoice.BOTH:
            return Variant.both()
        return (Variant(self.value),)


def configure_logging(level: str) -> None:
    """Send log records through Rich on stderr."""

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command(name="list")
def list_principles() -> None:
    """Show the principles and their keys."""

    _console.print(build_principles_table())


@app.command(name="run")
def run_command(
    principles: Optional[List[Principle]] = typer.Argument(
        None,
        case_sensitive=False,
        help="Principles to run (default: all).",
    ),
    variant: VariantChoice = typer.Option(
        VariantChoice.BOTH,
        "--variant",
        case_sensitive=False,
        help="Which variant of each lesson to run.",
    ),
    json_path: Optional[Path] = typer.Option(None, "--json", help="Also write the report as JSON."),
    html_path: Optional[Path] = typer.Option(None, "--html", help="Also write the report as HTML."),
    save: bool = typer.Option(
        False,
        "--save",
        help="Write JSON and HTML reports into the configured reports directory.",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show the examples' log output as it happens."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
) -> None:
    """Run lessons and print each step with its verdict."""

    settings = AppSettings()
    configure_logging("INFO" if verbose else settings.log_level)

    if not no_banner:
        print_banner(_console)

    hooks = LessonHooks(warning=lambda message: _console.print(f"[yellow]Warning:[/yellow] {escape(message)}"))
    try:
        report = run_lessons(
            settings=settings,
            request=LessonRequest(principles=principles or None, variants=variant.variants()),
            hooks=hooks,
        )
    except SolidLabError as exc:
        _console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    for outcome in report.outcomes:
        _console.print(build_outcome_table(outcome))
    _console.print(build_summary_panel(report))

    if save:
        stem = f"solid-lab-{report.generated_at.strftime('%Y%m%d-%H%M%S')}"
        json_path = json_path or settings.reports_dir / f"{stem}.json"
        html_path = html_path or settings.reports_dir / f"{stem}.html"

    if json_path is not None:
        written = export_report_json(report=report, output_path=json_path)
        _console.print(f"[green]JSON report:[/green] {written}")
    if html_path is not None:
        written = export_report_html(report=report, output_path=html_path)
        _console.print(f"[green]HTML report:[/green] {written}")

    if report.broken_compliant:
        raise typer.Exit(code=1)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
