"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from adapters.payment_gateways import PAYMENT_PROCESSORS, build_payment_processor
from adapters.report_exporter import render_report_html
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.models import LessonReport
from core.interfaces.payment import PaymentProcessor

app = typer.Typer(no_args_is_help=True, help="Settings diagnostics and configuration.")

_console = Console()


def _check_template() -> tuple[bool, str]:
    """Render an empty report to detect template problems."""

    try:
        html = render_report_html(report=LessonReport(customer="doctor"))
    except Exception as exc:
        return False, str(exc)
    return True, f"{len(html)} bytes"


def _check_gateway(name: str, user: str) -> tuple[bool, str]:
    try:
        processor = build_payment_processor(name, user)
    except Exception as exc:
        return False, str(exc)
    if not isinstance(processor, PaymentProcessor):
        return False, f"{type(processor).__name__} does not implement PaymentProcessor"
    return True, type(processor).__name__


@app.command()
def run() -> None:
    """Show effective settings and run baseline checks."""

    settings = AppSettings()

    table = Table(title="SOLID Lab Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Customer", "OK", settings.customer_name)
    table.add_row("Gateway", "OK", settings.payment_gateway)
    table.add_row(
        "Person rules",
        "OK",
        f"name longer than {settings.min_name_length}, age over {settings.min_age}",
    )

    if settings.flavors_path is None:
        table.add_row("Flavor catalog", "OPTIONAL", "Not set -> only the declared flavors")
    elif settings.flavors_path.exists():
        table.add_row("Flavor catalog", "OK", str(settings.flavors_path))
    else:
        table.add_row("Flavor catalog", "FAIL", f"{settings.flavors_path} does not exist")

    for name in PAYMENT_PROCESSORS:
        ok, detail = _check_gateway(name, settings.customer_name)
        table.add_row(f"Gateway {name}", "OK" if ok else "FAIL", detail)

    ok_html, detail_html = _check_template()
    table.add_row("HTML template", "OK" if ok_html else "FAIL", detail_html)
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    _console.print(table)


@app.command()
def configure() -> None:
    """Interactive setup (stores values in the user config .env)."""

    settings = AppSettings()

    customer = typer.prompt("Customer name", default=settings.customer_name, show_default=True).strip()
    gateway = typer.prompt(
        f"Payment gateway ({'/'.join(PAYMENT_PROCESSORS)})",
        default=settings.payment_gateway,
        show_default=True,
    ).strip().lower()

    if not customer:
        raise typer.BadParameter("customer name is required")
    if gateway not in PAYMENT_PROCESSORS:
        raise typer.BadParameter(f"unknown gateway {gateway!r}")

    env_path = write_user_env_vars(
        {
            "SOLID_LAB_CUSTOMER_NAME": customer,
            "SOLID_LAB_PAYMENT_GATEWAY": gateway,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
