"""
Frame rendering for the wizard.

Turns the current WizardState (plus the particle field) into prompt_toolkit
formatted-text fragments. Rendering never mutates the state it is given.
"""

from prompt_toolkit.styles import Style

from zero.config.catalog import FRAMEWORKS, MODULES, PACKAGE_MANAGERS
from zero.config.theme import TITLE, Palette
from zero.wizard.core import CONFIRM_ACTIONS, WizardState, WizardStep
from zero.wizard.fields import Fragments
from zero.wizard.particles import FULL_VIEW, LOGO_VIEW, ParticleField

DIVIDER = "─" * 80
FOOTER = "↑/↓ move • space toggle • enter confirm • esc cancel"
SPLASH_SUBTITLE = "Starting from 0..."

PROMPTS: dict[WizardStep, str] = {
    WizardStep.DIRECTORY: "Directory (default: .)",
    WizardStep.NAME: "App name",
    WizardStep.DOMAIN: "Domain (optional)",
    WizardStep.FRAMEWORK: "Framework",
    WizardStep.MODULES: "Modules",
    WizardStep.CONFIRM: "Review",
    WizardStep.PACKAGE_MANAGER: "Package manager",
}

CURSOR = "▶"
RADIO_ON, RADIO_OFF = "◉", "○"
CHECK_ON, CHECK_OFF = "■", "□"


def render_options(labels: list[str], active: int, marks: list[bool] | None = None) -> Fragments:
    """
    Render an option list.

    Args:
        labels: Entry labels in catalog order.
        active: Index under the cursor.
        marks: Per-entry checkbox state. When omitted the list is a single
            choice and the active entry is the selected one.
    """
    result: Fragments = []
    for i, label in enumerate(labels):
        is_active = i == active
        cursor = CURSOR if is_active else " "
        if marks is None:
            marker = RADIO_ON if is_active else RADIO_OFF
        else:
            marker = CHECK_ON if marks[i] else CHECK_OFF
        style = "class:option-active" if is_active else "class:option"
        result.append(("class:accent", f"{cursor} {marker} "))
        result.append((style, label))
        result.append(("", "\n"))
    return result


def render_summary(state: WizardState) -> Fragments:
    """Read-only review of every answer."""
    labels = {module.id: module.short_label for module in MODULES}
    modules = ", ".join(labels[m] for m in state.selected_modules()) or "None"
    lines = [
        f"Directory: {state.directory.value()}",
        f"App name: {state.name.value()}",
        f"Domain: {state.domain.value()}",
        f"Framework: {state.framework.label}",
        f"Modules: {modules}",
    ]
    return [("class:muted", line + "\n") for line in lines]


def render_body(state: WizardState) -> Fragments:
    """Error line, step prompt and the step's input."""
    result: Fragments = []
    if state.error:
        result.append(("class:error", state.error + "\n"))

    step = state.step
    result.append(("class:base", PROMPTS[step] + "\n"))

    field = state.active_field
    if field is not None:
        result.extend(field.fragments())
        result.append(("", "\n"))
    elif step is WizardStep.FRAMEWORK:
        result.extend(render_options([f.label for f in FRAMEWORKS], state.framework_index))
    elif step is WizardStep.MODULES:
        result.extend(
            render_options(
                [m.short_label for m in MODULES],
                state.module_cursor,
                [state.is_selected(m.id) for m in MODULES],
            )
        )
    elif step is WizardStep.CONFIRM:
        result.extend(render_summary(state))
        result.append(("", "\n"))
        result.extend(render_options([label for label, _ in CONFIRM_ACTIONS], state.confirm_cursor))
    elif step is WizardStep.PACKAGE_MANAGER:
        result.extend(
            render_options([p.label for p in PACKAGE_MANAGERS], state.package_manager_index)
        )
    return result


class Renderer:
    """Renders frames with a fixed palette."""

    def __init__(self, palette: Palette):
        self.style: Style = palette.to_style()

    def render(self, state: WizardState, particles: ParticleField) -> Fragments:
        if state.cancelled:
            return []
        if state.step is WizardStep.STARTUP:
            return self.render_splash(particles)

        result = self.render_logo(particles)
        result.append(("class:muted", DIVIDER + "\n"))
        result.extend(render_body(state))
        result.append(("class:muted", DIVIDER + "\n"))
        result.append(("class:hint", FOOTER))
        return result

    def render_splash(self, particles: ParticleField) -> Fragments:
        rows = particles.grid(FULL_VIEW)
        result: Fragments = [("class:particle", "\n".join(rows) + "\n")]
        result.append(("", "\n" + " " * 36))
        result.append(("class:muted", SPLASH_SUBTITLE))
        return result

    def render_logo(self, particles: ParticleField) -> Fragments:
        rows = particles.grid(LOGO_VIEW)
        return [
            ("class:logo", "\n".join(rows) + "\n"),
            ("class:title", TITLE + "\n"),
        ]
