"""
Full-screen terminal front end for the wizard.

Built on a prompt_toolkit Application: key bindings translate key presses
into WizardEvents (or raw keystrokes for the focused text field), a Ticker
advances the particle animation, and a single FormattedTextControl shows
whatever the Renderer produces for the current state.
"""

import logging
import time

from prompt_toolkit import Application
from prompt_toolkit.filters import Condition
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPressEvent
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import FormattedTextControl, Layout, Window
from prompt_toolkit.output import Output

from zero.config.settings import WizardSettings
from zero.config.theme import Palette, resolve_palette
from zero.ui.ticker import Ticker
from zero.wizard.core import LIST_STEPS, WizardEvent, WizardMachine, WizardState, WizardStep
from zero.wizard.exceptions import TerminalError
from zero.wizard.fields import Fragments
from zero.wizard.particles import ParticleField
from zero.wizard.render import Renderer

logger = logging.getLogger(__name__)


class WizardApp:
    """One interactive wizard session."""

    def __init__(
        self,
        settings: WizardSettings | None = None,
        palette: Palette | None = None,
        particles: ParticleField | None = None,
        input: Input | None = None,
        output: Output | None = None,
    ):
        """
        Args:
            settings: Session tunables; defaults when omitted.
            palette: Colors, resolved from settings.theme when omitted.
            particles: Animation to show; a fresh slashed zero by default.
            input: prompt_toolkit input override (tests use a pipe).
            output: prompt_toolkit output override.
        """
        self.settings = settings or WizardSettings()
        self.renderer = Renderer(palette or resolve_palette(self.settings.theme))
        self.particles = particles or ParticleField.slashed_zero()
        self.state = WizardState.create(self.settings)
        self.machine = WizardMachine(self.state, splash_seconds=self.settings.splash_seconds)
        self.ticker = Ticker(self.settings.tick_interval, self._on_tick)
        self._started_at = time.monotonic()
        self._exiting = False

        try:
            self.app: Application = Application(
                layout=Layout(Window(FormattedTextControl(self._get_frame), wrap_lines=False)),
                key_bindings=self._build_key_bindings(),
                style=self.renderer.style,
                full_screen=True,
                erase_when_done=True,
                input=input,
                output=output,
            )
        except (OSError, RuntimeError) as e:
            raise TerminalError(f"Failed to initialize terminal UI: {e}") from e

    def _get_frame(self) -> Fragments:
        return self.renderer.render(self.state, self.particles)

    def _build_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()
        on_list = Condition(lambda: self.state.step in LIST_STEPS)
        on_text = Condition(lambda: self.state.active_field is not None)

        @kb.add("escape", eager=True)
        def cancel(event: KeyPressEvent) -> None:
            self.dispatch(WizardEvent.CANCEL)

        @kb.add("c-c")
        def ctrl_c(event: KeyPressEvent) -> None:
            self.dispatch(WizardEvent.CANCEL)

        @kb.add("enter")
        def advance(event: KeyPressEvent) -> None:
            self.dispatch(WizardEvent.ADVANCE)

        @kb.add("up")
        def up(event: KeyPressEvent) -> None:
            self.dispatch(WizardEvent.MOVE_UP)

        @kb.add("down")
        def down(event: KeyPressEvent) -> None:
            self.dispatch(WizardEvent.MOVE_DOWN)

        @kb.add("k", filter=on_list)
        def up_k(event: KeyPressEvent) -> None:
            self.dispatch(WizardEvent.MOVE_UP)

        @kb.add("j", filter=on_list)
        def down_j(event: KeyPressEvent) -> None:
            self.dispatch(WizardEvent.MOVE_DOWN)

        @kb.add("space", filter=on_list)
        def toggle(event: KeyPressEvent) -> None:
            self.dispatch(WizardEvent.TOGGLE)

        # Everything below is raw input for the focused text field

        @kb.add(Keys.Any)
        def any_key(event: KeyPressEvent) -> None:
            if self.state.step is WizardStep.STARTUP:
                self.machine.skip_splash()
            elif self.state.active_field is not None:
                self.state.active_field.insert(event.data)

        @kb.add(Keys.BracketedPaste, filter=on_text)
        def paste(event: KeyPressEvent) -> None:
            self.state.active_field.insert(event.data.replace("\n", " "))

        @kb.add("backspace", filter=on_text)
        def backspace(event: KeyPressEvent) -> None:
            self.state.active_field.backspace()

        @kb.add("delete", filter=on_text)
        def delete(event: KeyPressEvent) -> None:
            self.state.active_field.delete()

        @kb.add("left", filter=on_text)
        def left(event: KeyPressEvent) -> None:
            self.state.active_field.cursor_left()

        @kb.add("right", filter=on_text)
        def right(event: KeyPressEvent) -> None:
            self.state.active_field.cursor_right()

        @kb.add("home", filter=on_text)
        @kb.add("c-a", filter=on_text)
        def home(event: KeyPressEvent) -> None:
            self.state.active_field.home()

        @kb.add("end", filter=on_text)
        @kb.add("c-e", filter=on_text)
        def end(event: KeyPressEvent) -> None:
            self.state.active_field.end()

        @kb.add("c-u", filter=on_text)
        def clear(event: KeyPressEvent) -> None:
            self.state.active_field.clear()

        return kb

    def dispatch(self, event: WizardEvent) -> None:
        """Feed one control event to the state machine."""
        self.machine.handle(event)
        if self.machine.finished:
            self._finish()

    def _on_tick(self) -> None:
        self.particles.advance()
        self.machine.tick(time.monotonic() - self._started_at)
        self.app.invalidate()

    def _start(self) -> None:
        self._started_at = time.monotonic()
        self.ticker.start()

    def _finish(self) -> None:
        self.ticker.cancel()
        if not self._exiting:
            self._exiting = True
            self.app.exit()

    def run(self) -> WizardState:
        """
        Run the session until it completes or is cancelled.

        Returns:
            The final wizard state.

        Raises:
            TerminalError: If the terminal UI fails.
        """
        logger.debug("Starting wizard UI")
        try:
            self.app.run(pre_run=self._start)
        except (OSError, RuntimeError, EOFError) as e:
            raise TerminalError(f"Terminal UI failed: {e}") from e
        finally:
            self.ticker.cancel()
        return self.state


def run_wizard(settings: WizardSettings | None = None, palette: Palette | None = None) -> WizardState:
    """Run the bootstrap wizard in the current terminal."""
    return WizardApp(settings=settings, palette=palette).run()
