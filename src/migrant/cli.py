"""
Click-based CLI for migrant.
"""

import json
import sys
import time
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import ResolvedConfig, resolve
from .drivers import known_drivers, lookup
from .envelopes import build_envelope
from .errors import ConfigError

console = Console()


def _print_resolved(resolved: ResolvedConfig) -> None:
    driver = resolved.driver
    console.print(f"[green]✓[/green] Resolved [cyan]{resolved.environment}[/cyan] configuration")
    console.print(f"  [bold]Driver:[/bold] {driver.name}")
    console.print(f"  [bold]Dialect:[/bold] {driver.dialect.value if driver.dialect else '-'}")
    console.print(f"  [bold]Import:[/bold] {driver.import_path}")
    console.print(f"  [bold]DSN:[/bold] {escape(driver.dsn)}", highlight=False, soft_wrap=True)
    console.print(
        f"  [bold]Migrations:[/bold] {escape(str(resolved.migrations_dir))}", soft_wrap=True
    )


@click.group()
@click.version_option(version=__version__, prog_name="migrant")
def cli() -> None:
    """migrant CLI for environment database configuration"""
    pass


@cli.command()
@click.option(
    "--path",
    "-p",
    "project_path",
    type=click.Path(file_okay=False),
    default="db",
    show_default=True,
    help="Folder containing config/ and migrations/",
)
@click.option(
    "--env",
    "-e",
    "environment",
    default="development",
    show_default=True,
    help="Environment name (selects config/<env>.toml)",
)
@click.option("--json", "json_output", is_flag=True, help="Output a JSON envelope")
def config(project_path: str, environment: str, json_output: bool) -> None:
    """Resolve and show the database configuration for an environment"""
    started = time.perf_counter()
    project_root = Path(project_path)

    try:
        resolved = resolve(project_root, environment)
    except ConfigError as e:
        if json_output:
            print(json.dumps(build_envelope("config", started, error=e)))
        else:
            console.print(
                f"[red]✗ Error:[/red] {escape(e.message)}", highlight=False, soft_wrap=True
            )
        sys.exit(1)

    if json_output:
        data = resolved.model_dump(mode="json")
        print(json.dumps(build_envelope("config", started, data=data)))
        return

    _print_resolved(resolved)


@cli.command()
@click.option("--json", "json_output", is_flag=True, help="Output a JSON envelope")
def drivers(json_output: bool) -> None:
    """List the database drivers migrant knows about"""
    started = time.perf_counter()
    infos = [lookup(name) for name in known_drivers()]

    if json_output:
        data = [info.model_dump(mode="json", exclude={"dsn"}) for info in infos]
        print(json.dumps(build_envelope("drivers", started, data=data)))
        return

    table = Table(title="Known drivers")
    table.add_column("Driver", style="cyan")
    table.add_column("Dialect")
    table.add_column("Import")
    for info in infos:
        table.add_row(info.name, info.dialect.value if info.dialect else "-", info.import_path)
    console.print(table)


if __name__ == "__main__":
    cli()
