"""
Pytest configuration and fixtures for zero tests.
"""

import random
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from zero.config.settings import WizardSettings
from zero.wizard.core import WizardMachine, WizardState
from zero.wizard.particles import ParticleField


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_env(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ZERO_HOME at a temp dir and drop any ZERO_* overrides."""
    import os

    for key in list(os.environ):
        if key.startswith("ZERO_"):
            monkeypatch.delenv(key)
    zero_home = temp_dir / ".zero"
    monkeypatch.setenv("ZERO_HOME", str(zero_home))
    return zero_home


@pytest.fixture
def settings() -> WizardSettings:
    """Settings that skip the splash screen."""
    return WizardSettings(show_splash=False)


@pytest.fixture
def state(settings: WizardSettings) -> WizardState:
    """A fresh session state, already on the directory step."""
    return WizardState.create(settings)


@pytest.fixture
def machine(state: WizardState) -> WizardMachine:
    """A state machine over the fresh state."""
    return WizardMachine(state)


@pytest.fixture
def particles() -> ParticleField:
    """A reproducible slashed-zero particle field."""
    return ParticleField.slashed_zero(rng=random.Random(7))
