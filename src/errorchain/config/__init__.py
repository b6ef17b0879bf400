"""Config package for errorchain-sdk.

Provides options loading, validation, and defaults.
"""
from __future__ import annotations

from errorchain.config.defaults import DEFAULT_OPTIONS
from errorchain.config.loader import CONFIG_FILE_NAMES, ConfigLoader
from errorchain.config.schema import ClientOptions, validate_options

__all__ = [
    "ClientOptions",
    "validate_options",
    "ConfigLoader",
    "CONFIG_FILE_NAMES",
    "DEFAULT_OPTIONS",
]
