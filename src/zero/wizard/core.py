"""
Core logic for the bootstrap wizard.

This module defines the wizard steps, the mutable session state, the finished
config record and the state machine that drives transitions on key events.
It is UI-agnostic: the terminal app maps key presses to WizardEvents and
renders whatever state results.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto

from pydantic import BaseModel, ConfigDict, Field

from zero.config.catalog import (
    FRAMEWORKS,
    MODULE_IDS,
    MODULES,
    PACKAGE_MANAGERS,
    FrameworkInfo,
    PackageManagerInfo,
)
from zero.config.settings import WizardSettings
from zero.wizard.fields import TextField

logger = logging.getLogger(__name__)

DEFAULT_DIRECTORY = "."
NAME_REQUIRED = "App name is required."


class WizardStep(Enum):
    STARTUP = auto()
    DIRECTORY = auto()
    NAME = auto()
    DOMAIN = auto()
    FRAMEWORK = auto()
    MODULES = auto()
    CONFIRM = auto()
    PACKAGE_MANAGER = auto()


class WizardEvent(Enum):
    """Control events the wizard reacts to."""

    ADVANCE = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    TOGGLE = auto()
    CANCEL = auto()


LIST_STEPS = (
    WizardStep.FRAMEWORK,
    WizardStep.MODULES,
    WizardStep.CONFIRM,
    WizardStep.PACKAGE_MANAGER,
)

# Review actions, in display order. A target of None cancels the session.
CONFIRM_ACTIONS: list[tuple[str, WizardStep | None]] = [
    ("Continue", WizardStep.PACKAGE_MANAGER),
    ("Edit directory", WizardStep.DIRECTORY),
    ("Edit name", WizardStep.NAME),
    ("Edit domain", WizardStep.DOMAIN),
    ("Edit framework", WizardStep.FRAMEWORK),
    ("Edit modules", WizardStep.MODULES),
    ("Cancel", None),
]

# Cursor attribute and list length per list step
_CURSORS: dict[WizardStep, tuple[str, int]] = {
    WizardStep.FRAMEWORK: ("framework_index", len(FRAMEWORKS)),
    WizardStep.MODULES: ("module_cursor", len(MODULES)),
    WizardStep.CONFIRM: ("confirm_cursor", len(CONFIRM_ACTIONS)),
    WizardStep.PACKAGE_MANAGER: ("package_manager_index", len(PACKAGE_MANAGERS)),
}


class ConfigRecord(BaseModel):
    """The finished wizard result, serialized as the output JSON object."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    directory: str
    app_name: str = Field(alias="appName")
    domain: str
    framework: str
    modules: tuple[str, ...] = ()
    package_manager: str = Field(alias="packageManager")

    def to_json(self) -> str:
        """Compact JSON with the wire field names."""
        return self.model_dump_json(by_alias=True)


@dataclass
class WizardState:
    """Holds the state of one wizard session."""

    directory: TextField
    name: TextField
    domain: TextField
    step: WizardStep = WizardStep.STARTUP
    framework_index: int = 0
    package_manager_index: int = 0
    module_selection: dict[str, bool] = field(default_factory=dict)
    module_cursor: int = 0
    confirm_cursor: int = 0
    error: str | None = None
    cancelled: bool = False
    result: ConfigRecord | None = None

    @classmethod
    def create(cls, settings: WizardSettings | None = None) -> "WizardState":
        """Build a fresh session state with default field values."""
        settings = settings or WizardSettings()
        state = cls(
            directory=TextField(
                DEFAULT_DIRECTORY,
                placeholder=DEFAULT_DIRECTORY,
                char_limit=settings.directory_limit,
            ),
            name=TextField(char_limit=settings.name_limit),
            domain=TextField(char_limit=settings.domain_limit),
        )
        if not settings.show_splash:
            state.step = WizardStep.DIRECTORY
            state.directory.focus()
        return state

    def field_for(self, step: WizardStep) -> TextField | None:
        return {
            WizardStep.DIRECTORY: self.directory,
            WizardStep.NAME: self.name,
            WizardStep.DOMAIN: self.domain,
        }.get(step)

    @property
    def active_field(self) -> TextField | None:
        """The field editor receiving raw keystrokes, if any."""
        return self.field_for(self.step)

    @property
    def framework(self) -> FrameworkInfo:
        return FRAMEWORKS[self.framework_index]

    @property
    def package_manager(self) -> PackageManagerInfo:
        return PACKAGE_MANAGERS[self.package_manager_index]

    @property
    def finished(self) -> bool:
        return self.cancelled or self.result is not None

    def is_selected(self, module_id: str) -> bool:
        return self.module_selection.get(module_id, False)

    def selected_modules(self) -> list[str]:
        """Selected module ids in catalog order."""
        return [module_id for module_id in MODULE_IDS if self.is_selected(module_id)]

    def build_record(self) -> ConfigRecord:
        return ConfigRecord(
            directory=self.directory.value().strip() or DEFAULT_DIRECTORY,
            app_name=self.name.value().strip(),
            domain=self.domain.value().strip(),
            framework=self.framework.id,
            modules=tuple(self.selected_modules()),
            package_manager=self.package_manager.id,
        )


class WizardMachine:
    """
    Drives a WizardState through the wizard steps.

    Every (event, step) pair is handled, most of them as no-ops, and no
    exception escapes handle(). Validation failures are reported through
    state.error instead.
    """

    def __init__(self, state: WizardState, splash_seconds: float = 3.0):
        self.state = state
        self.splash_seconds = splash_seconds
        self._handlers: dict[WizardEvent, Callable[[], None]] = {
            WizardEvent.ADVANCE: self._advance,
            WizardEvent.MOVE_UP: lambda: self._move(-1),
            WizardEvent.MOVE_DOWN: lambda: self._move(1),
            WizardEvent.TOGGLE: self._toggle,
            WizardEvent.CANCEL: self.cancel,
        }
        self._advance_handlers: dict[WizardStep, Callable[[], None]] = {
            WizardStep.STARTUP: self.skip_splash,
            WizardStep.DIRECTORY: self._advance_directory,
            WizardStep.NAME: self._advance_name,
            WizardStep.DOMAIN: lambda: self._go(WizardStep.FRAMEWORK),
            WizardStep.FRAMEWORK: lambda: self._go(WizardStep.MODULES),
            WizardStep.MODULES: lambda: self._go(WizardStep.CONFIRM),
            WizardStep.CONFIRM: self._advance_confirm,
            WizardStep.PACKAGE_MANAGER: self._complete,
        }

    @property
    def step(self) -> WizardStep:
        return self.state.step

    @property
    def finished(self) -> bool:
        return self.state.finished

    def handle(self, event: WizardEvent) -> WizardStep:
        """
        Apply one control event.

        Args:
            event: The event to apply.

        Returns:
            The step that is active after the event.
        """
        if self.finished:
            return self.state.step

        # esc and ctrl-c cancel even on the splash; any other key only dismisses it
        if self.state.step is WizardStep.STARTUP and event is not WizardEvent.CANCEL:
            self.skip_splash()
            return self.state.step

        self._handlers[event]()
        return self.state.step

    def tick(self, elapsed: float) -> None:
        """Leave the splash once it has been shown long enough."""
        if elapsed >= self.splash_seconds:
            self.skip_splash()

    def skip_splash(self) -> None:
        if self.state.step is WizardStep.STARTUP and not self.finished:
            self._go(WizardStep.DIRECTORY)

    def cancel(self) -> None:
        if self.state.active_field is not None:
            self.state.active_field.blur()
        self.state.cancelled = True
        logger.info(f"Wizard cancelled at {self.state.step.name}")

    # --- Event handlers ---

    def _advance(self) -> None:
        self.state.error = None
        self._advance_handlers[self.state.step]()

    def _move(self, delta: int) -> None:
        cursor = _CURSORS.get(self.state.step)
        if cursor is None:
            return
        attr, length = cursor
        index = getattr(self.state, attr) + delta
        setattr(self.state, attr, max(0, min(index, length - 1)))

    def _toggle(self) -> None:
        step = self.state.step
        if step is WizardStep.MODULES:
            module_id = MODULE_IDS[self.state.module_cursor]
            self.state.module_selection[module_id] = not self.state.is_selected(module_id)
        elif step in LIST_STEPS:
            self._advance()

    # --- Per-step advance ---

    def _advance_directory(self) -> None:
        value = self.state.directory.value().strip() or DEFAULT_DIRECTORY
        self.state.directory.set(value)
        self._go(WizardStep.NAME)

    def _advance_name(self) -> None:
        if not self.state.name.value().strip():
            self.state.error = NAME_REQUIRED
            return
        self._go(WizardStep.DOMAIN)

    def _advance_confirm(self) -> None:
        label, target = CONFIRM_ACTIONS[self.state.confirm_cursor]
        if target is None:
            self.cancel()
            return
        logger.debug(f"Review action: {label}")
        self._go(target)

    def _complete(self) -> None:
        self.state.result = self.state.build_record()
        logger.info(f"Wizard complete: {self.state.result.to_json()}")

    def _go(self, step: WizardStep) -> None:
        current = self.state.active_field
        if current is not None:
            current.blur()
        logger.debug(f"Step {self.state.step.name} -> {step.name}")
        self.state.step = step
        target = self.state.active_field
        if target is not None:
            target.focus()
