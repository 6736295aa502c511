"""
zero catalog - List the options the wizard offers.

Usage:
    zero catalog
    zero catalog --json
"""

import json
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from zero.config.catalog import FRAMEWORKS, MODULES, PACKAGE_MANAGERS

app = typer.Typer(
    name="catalog",
    help="List frameworks, modules and package managers.",
    invoke_without_command=True,
)

console = Console()


def catalog_dict() -> dict:
    """All catalogs as plain data, in wizard order."""
    return {
        "frameworks": [f.model_dump() for f in FRAMEWORKS],
        "modules": [m.model_dump() for m in MODULES],
        "packageManagers": [p.model_dump() for p in PACKAGE_MANAGERS],
    }


@app.callback(invoke_without_command=True)
def show_catalog(
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output as JSON.",
        ),
    ] = False,
) -> None:
    """Show every selectable option."""
    if json_output:
        typer.echo(json.dumps(catalog_dict(), indent=2))
        return

    table = Table(title="Frameworks")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Description", style="dim")
    for framework in FRAMEWORKS:
        table.add_row(framework.id, framework.label, framework.description)
    console.print(table)

    table = Table(title="Modules")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Env vars", style="dim")
    for module in MODULES:
        table.add_row(module.id, module.label, ", ".join(module.env_vars) or "-")
    console.print(table)

    table = Table(title="Package managers")
    table.add_column("ID", style="cyan")
    table.add_column("Install")
    table.add_column("Dev", style="dim")
    for manager in PACKAGE_MANAGERS:
        table.add_row(manager.id, " ".join(manager.install), " ".join(manager.dev))
    console.print(table)
