"""
Main Typer application for the zero CLI.

Running `zero` with no subcommand launches the wizard and emits the finished
record as JSON.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from zero import __version__
from zero.cli.commands import catalog
from zero.cli.output import print_error, print_info
from zero.config.settings import ConfigurationError, WizardSettings, load_settings
from zero.config.theme import resolve_palette
from zero.logging_config import setup_logging
from zero.ui import run_wizard
from zero.wizard.emitter import emit_record
from zero.wizard.exceptions import InvalidStateError, ZeroError

logger = logging.getLogger(__name__)

# Create the main Typer app
app = typer.Typer(
    name="zero",
    help="Bootstrap a new app from an interactive terminal wizard.",
    no_args_is_help=False,  # Running without args launches the wizard
    invoke_without_command=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=True,
    pretty_exceptions_show_locals=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print_info(f"zero version [green]{__version__}[/green]")
        raise typer.Exit()


# noinspection PyUnusedLocal
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    output: Annotated[
        str | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the JSON result to this file instead of stdout.",
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Settings file (default: ~/.zero/settings.yaml).",
        ),
    ] = None,
    no_splash: Annotated[
        bool,
        typer.Option(
            "--no-splash",
            help="Skip the startup animation.",
        ),
    ] = False,
    no_color: Annotated[
        bool,
        typer.Option(
            "--no-color",
            help="Disable colored output.",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write debug logs to this file.",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Log level for --log-file.",
        ),
    ] = "INFO",
) -> None:
    """
    [bold]zero[/bold] - start a new app from 0

    Walks through directory, name, domain, framework, modules and package
    manager, then prints the answers as a JSON object.

    Use [bold]zero catalog[/bold] to list the available options.
    """
    if ctx.invoked_subcommand is not None:
        return

    setup_logging(log_file, log_level)

    try:
        settings = load_settings(config_path)
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(1)

    overrides: dict = {}
    if no_splash:
        overrides["show_splash"] = False
    if no_color:
        overrides["theme"] = "mono"
    if overrides:
        settings = settings.model_copy(update=overrides)

    try:
        run_session(settings, output)
    except ZeroError as e:
        logger.error(f"Wizard failed: {e}")
        print_error(str(e))
        raise typer.Exit(1)


# Register command groups
app.add_typer(catalog.app, name="catalog")


def run_session(settings: WizardSettings, output: str | None = None) -> None:
    """
    Run one wizard session and emit its result.

    A cancelled session emits nothing.

    Raises:
        TerminalError: If the terminal UI fails.
        InvalidStateError: If the UI stops without a result or cancellation.
        EmitError: If the result cannot be written.
    """
    state = run_wizard(settings, resolve_palette(settings.theme))

    if state.cancelled:
        logger.info("Wizard cancelled, nothing emitted")
        return

    if state.result is None:
        raise InvalidStateError("Wizard ended without a result")

    emit_record(state.result, output)


if __name__ == "__main__":
    app()
