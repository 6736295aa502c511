"""
Zero configuration: option catalogs, settings and color palette.
"""

from zero.config.catalog import (
    FRAMEWORKS,
    MODULE_IDS,
    MODULES,
    PACKAGE_MANAGERS,
    FrameworkInfo,
    ModuleInfo,
    PackageManagerInfo,
)
from zero.config.settings import ConfigurationError, WizardSettings, load_settings
from zero.config.theme import Palette, resolve_palette

__all__ = [
    "FRAMEWORKS",
    "MODULES",
    "MODULE_IDS",
    "PACKAGE_MANAGERS",
    "FrameworkInfo",
    "ModuleInfo",
    "PackageManagerInfo",
    "ConfigurationError",
    "WizardSettings",
    "load_settings",
    "Palette",
    "resolve_palette",
]
