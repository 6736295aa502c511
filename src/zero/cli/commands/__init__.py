"""CLI command groups for zero."""

from zero.cli.commands import catalog

__all__ = ["catalog"]
