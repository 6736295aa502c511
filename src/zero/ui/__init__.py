"""
Zero terminal UI.

Built with prompt_toolkit for a full-screen, keyboard-driven wizard.
"""

from zero.ui.app import WizardApp, run_wizard
from zero.ui.ticker import Ticker

__all__ = ["WizardApp", "run_wizard", "Ticker"]
