"""Transport package for errorchain-sdk.

Provides the transport ABC and the built-in local transports.
"""
from __future__ import annotations

from errorchain.transport.base import (
    ConsoleTransport,
    JSONFileTransport,
    MemoryTransport,
    NullTransport,
    Transport,
    make_transport,
)

__all__ = [
    "Transport",
    "NullTransport",
    "MemoryTransport",
    "ConsoleTransport",
    "JSONFileTransport",
    "make_transport",
]
