"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en varios comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import LessonOutcome, LessonReport
from core.domain.principle import Principle, Variant


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Permite desactivar el banner en modos no interactivos (`--no-banner`).
    """

    title = Text("SOLID Lab", style="bold cyan")
    subtitle = Text("SRP • OCP • LSP • ISP • DIP", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_principles_table() -> Table:
    table = Table(title="SOLID principles")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Principle", style="bold")
    table.add_column("In one sentence", style="white")
    for principle in Principle:
        table.add_row(principle.value, principle.label(), principle.summary())
    return table


def _verdict(outcome: LessonOutcome) -> Text:
    if outcome.complies:
        return Text("complies", style="bold green")
    return Text("violates", style="bold red")


def build_outcome_table(outcome: LessonOutcome) -> Table:
    style = "yellow" if outcome.variant is Variant.VIOLATING else "green"
    title = Text.assemble(
        (f"{outcome.principle.acronym} ", "bold"),
        (f"[{outcome.variant.value}] ", style),
        outcome.title,
    )
    table = Table(title=title, title_justify="left", expand=False)
    table.add_column("Actor", style="cyan", no_wrap=True)
    table.add_column("Message", style="white")
    table.add_column("Check", no_wrap=True)
    for step in outcome.steps:
        if step.ok is None:
            check = Text("")
        elif step.ok:
            check = Text("pass", style="green")
        else:
            check = Text("fail", style="red")
        table.add_row(step.actor, step.message, check)
    table.caption = Text.assemble("Verdict: ", _verdict(outcome))
    return table


def build_summary_panel(report: LessonReport) -> Panel:
    """Panel with one line per principle/variant pair."""

    body = Text()
    for outcome in report.outcomes:
        body.append(f"{outcome.principle.acronym:<4}", style="bold")
        body.append(f"{outcome.variant.value:<10} ")
        body.append_text(_verdict(outcome))
        if outcome.note:
            body.append(f"  {outcome.note}", style="dim")
        body.append("\n")
    if report.warnings:
        body.append("\nWarnings:\n", style="bold yellow")
        for warning in report.warnings:
            body.append(f"- {warning}\n", style="yellow")
    return Panel(body, title=Text("Summary", style="bold"), border_style="cyan")
