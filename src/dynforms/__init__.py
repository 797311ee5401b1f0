"""Dynforms package."""

from dynforms.exceptions import (
    CatalogueError,
    DeliveryError,
    PackageError,
    SettingsError,
)
from dynforms.logging import configure_logging, get_logger
from dynforms.settings import Settings, get_settings

__version__ = "0.1.0"

# Initialize package logger at import time via `get_logger`.
logger = get_logger("dynforms")

__all__ = [
    "CatalogueError",
    "DeliveryError",
    "PackageError",
    "Settings",
    "SettingsError",
    "__version__",
    "configure_logging",
    "get_logger",
    "get_settings",
    "logger",
]
