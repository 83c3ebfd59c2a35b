#!/usr/bin/env python3
"""
pod-populate - seed a Community Solid Server with LDBC or full-mesh data
"""

import asyncio
import logging

import click
from rich.console import Console
from rich.table import Table

from .errors import SourceDirectoryError
from .models import RunReport
from .registration import PodRegistrar
from .runner import Populator
from .settings import PopulateSettings

logger = logging.getLogger(__name__)

console = Console()


def _configure_logging(settings: PopulateSettings) -> None:
    level = (settings.log_level or "INFO").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _print_report(report: RunReport) -> None:
    if not report.outcomes:
        console.print("[yellow]No accounts processed[/yellow]")
        return

    table = Table(title="Pod population")
    table.add_column("Account", style="cyan")
    table.add_column("Person", style="blue")
    table.add_column("Pod", style="green")
    table.add_column("Profile", style="green")
    table.add_column("Friends", justify="right")
    table.add_column("Problems", style="red", overflow="fold")

    for o in report.outcomes:
        table.add_row(
            o.account,
            o.source_id or "-",
            "yes" if o.created else "no",
            "merged" if o.merged else "-",
            str(o.friends_added),
            "; ".join(o.errors),
        )
    console.print(table)
    console.print(f"{report.merged}/{len(report.outcomes)} profiles merged, {report.failed} with problems")


async def _populate(settings: PopulateSettings, mode: str, **kwargs) -> RunReport:
    async with PodRegistrar(settings) as registrar:
        populator = Populator(settings, registrar)
        if mode == "ldbc":
            return await populator.run_ldbc(kwargs["generated"])
        return await populator.run_full(
            kwargs["number"], generated_root=kwargs.get("generated"), extra_root=kwargs.get("extra")
        )


def _run(ctx: click.Context, mode: str, **kwargs) -> None:
    settings: PopulateSettings = ctx.obj
    _configure_logging(settings)
    try:
        report = asyncio.run(_populate(settings, mode, **kwargs))
    except SourceDirectoryError as e:
        logger.error(str(e))
        console.print(f"[red]{e}[/red]")
        ctx.exit(1)
    except Exception:
        logger.exception("Population run aborted")
        ctx.exit(1)
    _print_report(report)


@click.group()
@click.option("--url", "-u", required=True, help="Base URL of the CSS")
@click.option("--data", "-d", required=True, help="Data dir of the CSS")
@click.option("--log-level", default=None, help="Python logging level")
@click.pass_context
def cli(ctx, url, data, log_level):
    """Populate Solid pods with synthetic social-network data"""
    overrides = {"base_url": url, "data_dir": data}
    if log_level:
        overrides["log_level"] = log_level
    ctx.obj = PopulateSettings(**overrides)


@cli.command()
@click.option("--generated", "-g", required=True, help="Dir with the generated data")
@click.pass_context
def ldbc(ctx, generated):
    """Populate with LDBC data."""
    _run(ctx, "ldbc", generated=generated)


@cli.command()
@click.option("--number", "-n", required=True, type=int, help="Number of accounts to generate")
@click.option("--generated", "-g", default=None, help="Dir of the LDBC data; used to initialize user name")
@click.option(
    "--extra",
    "-e",
    default=None,
    help="Extra data to put into user pod: a dir of sub-dirs named after accounts (user0, user1, ...)",
)
@click.pass_context
def full(ctx, number, generated, extra):
    """Populate with full-connect data."""
    _run(ctx, "full", number=number, generated=generated, extra=extra)


def app() -> None:
    cli()


if __name__ == "__main__":
    app()
