"""Default client options for errorchain-sdk.

``DEFAULT_OPTIONS`` is the starting point used by
``ConfigLoader.load()`` before applying file or environment overrides.
"""
from __future__ import annotations

from errorchain.schema.config import ClientOptions

DEFAULT_OPTIONS: ClientOptions = ClientOptions(
    enabled=True,
    debug=False,
    release=None,
    environment=None,
    server_name=None,
    transport="null",
    transport_path=None,
    follow_implicit_context=True,
)
"""Baseline ``ClientOptions`` used when no file or env config is present."""
