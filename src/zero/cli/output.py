"""
Output formatting utilities for the CLI.

Standard output is reserved for the wizard's JSON record, so errors always
go to standard error.
"""

from rich.console import Console
from rich.markup import escape

# Global console instances
console = Console()
err_console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[red]✗[/red] {escape(message)}", highlight=False)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]i[/blue] {message}")
