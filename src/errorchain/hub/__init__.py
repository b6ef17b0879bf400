"""Hub package for errorchain-sdk.

Provides the client and the hub that routes captured events to it.
"""
from __future__ import annotations

from errorchain.hub.client import Client
from errorchain.hub.hub import Hub, ProcessingContext

__all__ = [
    "Client",
    "Hub",
    "ProcessingContext",
]
