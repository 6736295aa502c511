"""
Zero bootstrap wizard.

This package provides the UI-agnostic core (state machine, particle field,
renderer, result emitter). The terminal front end lives in zero.ui.
"""

from zero.wizard.core import (
    CONFIRM_ACTIONS,
    ConfigRecord,
    WizardEvent,
    WizardMachine,
    WizardState,
    WizardStep,
)
from zero.wizard.emitter import emit_record
from zero.wizard.exceptions import EmitError, InvalidStateError, TerminalError, ZeroError
from zero.wizard.fields import TextField
from zero.wizard.particles import ParticleField
from zero.wizard.render import Renderer

__all__ = [
    "CONFIRM_ACTIONS",
    "ConfigRecord",
    "WizardEvent",
    "WizardMachine",
    "WizardState",
    "WizardStep",
    "emit_record",
    "EmitError",
    "InvalidStateError",
    "TerminalError",
    "ZeroError",
    "TextField",
    "ParticleField",
    "Renderer",
]
