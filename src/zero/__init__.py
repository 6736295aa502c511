"""
Zero - project bootstrap wizard

An interactive terminal wizard that collects the settings for a new app
(directory, name, domain, framework, modules, package manager) and emits
them as a single JSON record.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("zero-wizard")
except PackageNotFoundError:
    __version__ = "0.1.0"

__all__ = [
    "__version__",
]
