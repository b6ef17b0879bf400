"""errorchain-sdk — turn an error and its cause chain into a telemetry event.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Quick-start
-----------
>>> import errorchain
>>> errorchain.__version__
'0.1.0'

>>> from errorchain import Client, Hub, MemoryTransport, capture_error
>>> transport = MemoryTransport()
>>> hub = Hub(Client(transport=transport))
>>> try:
...     try:
...         int("NaN")
...     except ValueError as exc:
...         raise RuntimeError("bad setting") from exc
... except RuntimeError as exc:
...     event_id = capture_error(exc, hub=hub)
>>> [e.ty for e in transport.events[0].exception]
['ValueError', 'RuntimeError']
"""
from __future__ import annotations

__version__: str = "0.1.0"

# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------
from errorchain.schema.config import ClientOptions
from errorchain.schema.errors import (
    ConfigurationError,
    ErrorChainSDKError,
    InvalidErrorValue,
    TransportError,
)
from errorchain.schema.protocol import NIL_EVENT_ID, Event, ExceptionRecord, Level

# ---------------------------------------------------------------------------
# Chain
# ---------------------------------------------------------------------------
from errorchain.chain.assembler import event_from_error, exception_from_error
from errorchain.chain.error_like import (
    ErrorLike,
    ExceptionAdapter,
    SimpleError,
    as_error_like,
)
from errorchain.chain.type_name import extract_type_name
from errorchain.chain.walker import walk_chain

# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------
from errorchain.transport.base import (
    ConsoleTransport,
    JSONFileTransport,
    MemoryTransport,
    NullTransport,
    Transport,
    make_transport,
)

# ---------------------------------------------------------------------------
# Hub
# ---------------------------------------------------------------------------
from errorchain.hub.client import Client
from errorchain.hub.hub import Hub, ProcessingContext

# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------
from errorchain.config.defaults import DEFAULT_OPTIONS
from errorchain.config.loader import ConfigLoader
from errorchain.config.schema import validate_options

# ---------------------------------------------------------------------------
# Capture
# ---------------------------------------------------------------------------
from errorchain.capture import (
    capture_error,
    capture_event,
    dispatch_error,
    init,
    last_event_id,
)

__all__ = [
    "__version__",
    # schema
    "Level",
    "ExceptionRecord",
    "Event",
    "NIL_EVENT_ID",
    "ClientOptions",
    "ErrorChainSDKError",
    "ConfigurationError",
    "TransportError",
    "InvalidErrorValue",
    # chain
    "ErrorLike",
    "ExceptionAdapter",
    "SimpleError",
    "as_error_like",
    "walk_chain",
    "extract_type_name",
    "exception_from_error",
    "event_from_error",
    # transport
    "Transport",
    "NullTransport",
    "MemoryTransport",
    "ConsoleTransport",
    "JSONFileTransport",
    "make_transport",
    # hub
    "Client",
    "Hub",
    "ProcessingContext",
    # config
    "DEFAULT_OPTIONS",
    "ConfigLoader",
    "validate_options",
    # capture
    "init",
    "capture_error",
    "capture_event",
    "dispatch_error",
    "last_event_id",
]
