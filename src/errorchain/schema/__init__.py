"""Schema package for errorchain-sdk.

Exports the event payload types, client options and the error taxonomy.
"""
from __future__ import annotations

from errorchain.schema.config import ClientOptions
from errorchain.schema.errors import (
    ConfigurationError,
    ErrorChainSDKError,
    InvalidErrorValue,
    TransportError,
)
from errorchain.schema.protocol import NIL_EVENT_ID, Event, ExceptionRecord, Level

__all__ = [
    # Protocol
    "Level",
    "ExceptionRecord",
    "Event",
    "NIL_EVENT_ID",
    # Errors
    "ErrorChainSDKError",
    "ConfigurationError",
    "TransportError",
    "InvalidErrorValue",
    # Config
    "ClientOptions",
]
