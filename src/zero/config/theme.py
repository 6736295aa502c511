"""
Color palette for the wizard.

The palette is resolved once at session start and handed to the renderer and
the prompt_toolkit application; nothing mutates it afterwards.
"""

import logging
import os
from dataclasses import dataclass

from prompt_toolkit.styles import Style

logger = logging.getLogger(__name__)

TITLE = "ZER0"


@dataclass(frozen=True)
class Palette:
    """Foreground colors for one background type."""

    name: str
    fg: str
    muted: str
    accent: str

    @property
    def styles(self) -> dict[str, str]:
        """Style classes used by rendered fragments."""
        return {
            "base": self.fg,
            "muted": self.muted,
            "accent": self.accent,
            "title": f"bold {self.fg}".strip(),
            "particle": self.accent,
            "logo": self.muted,
            "option": self.fg,
            "option-active": f"bold {self.accent}".strip(),
            "error": self.muted,
            "field": self.fg,
            "field.placeholder": self.muted,
            "field.cursor": "reverse",
            "hint": self.muted,
        }

    def to_style(self) -> Style:
        return Style.from_dict(self.styles)


DARK = Palette(name="dark", fg="#E7E5E4", muted="#9CA3AF", accent="#D1D5DB")
LIGHT = Palette(name="light", fg="#1C1917", muted="#6B7280", accent="#374151")
MONO = Palette(name="mono", fg="", muted="", accent="")


def detect_dark_background() -> bool:
    """
    Guess whether the terminal background is dark.

    Reads COLORFGBG ("fg;bg", set by rxvt, Konsole and others); background
    colors 0-6 and 8 are dark. Defaults to dark when unknown.
    """
    value = os.environ.get("COLORFGBG", "")
    bg = value.rsplit(";", 1)[-1] if value else ""
    if not bg.isdigit():
        if value:
            logger.warning(f"Unrecognized COLORFGBG={value!r}, assuming a dark background")
        return True
    return int(bg) in (0, 1, 2, 3, 4, 5, 6, 8)


def resolve_palette(theme: str = "auto") -> Palette:
    """Resolve a theme name (auto, dark, light, mono) to a palette."""
    if theme == "mono":
        return MONO
    if theme == "light":
        return LIGHT
    if theme == "dark":
        return DARK
    return DARK if detect_dark_background() else LIGHT
