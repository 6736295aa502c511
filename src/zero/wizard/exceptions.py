"""
Wizard exceptions for Zero.

Validation problems are part of the wizard state and never raised; these
exceptions cover failures that end the session.
"""

from pathlib import Path


class ZeroError(Exception):
    """Base exception for fatal wizard errors."""

    pass


class TerminalError(ZeroError):
    """The terminal interface could not be started or failed while running."""

    pass


class EmitError(ZeroError):
    """The result record could not be encoded or written."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class InvalidStateError(ZeroError):
    """The session ended in a state that should be impossible."""

    pass
