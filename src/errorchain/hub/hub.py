"""The hub: the active processing context events are captured through.

A hub holds a stack of layers, each carrying an optional client.  Only the
top layer is consulted when capturing.  Capture reads the top layer under
the hub's lock and releases it before building or sending anything, so a
concurrent ``bind_client`` or ``push_client`` never tears a single capture
call.

Shipped in this module
----------------------
- ProcessingContext — protocol the capture path needs from a context
- Hub               — layered, thread-safe context with a process-wide main
                      hub and per-thread current hubs
"""
from __future__ import annotations

import logging
import threading
import uuid
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, ClassVar, Iterator, Protocol, TypeVar

from errorchain.chain.assembler import event_from_error
from errorchain.hub.client import Client
from errorchain.schema.protocol import NIL_EVENT_ID, Event

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class ProcessingContext(Protocol):
    """What the capture dispatcher needs from a processing context.

    The dispatcher checks for a client and then sends with two separate
    calls, so the client can go away in between.  Implementations must make
    ``capture_event`` itself a no-op returning :data:`NIL_EVENT_ID` when
    there is no active client at the time of the call.
    """

    def has_active_client(self) -> bool:
        """Return ``True`` if events captured now would be sent."""
        ...

    def capture_event(self, event: Event) -> uuid.UUID:
        """Send *event* and return its identifier.

        Must return :data:`NIL_EVENT_ID` without sending when there is no
        active client.
        """
        ...


@dataclass
class _StackLayer:
    client: Client | None = None


class Hub:
    """Thread-safe stack of client layers.

    Parameters
    ----------
    client:
        Client for the bottom layer.  ``None`` creates an inactive hub on
        which every capture is a no-op.

    Examples
    --------
    >>> from errorchain.transport.base import MemoryTransport
    >>> hub = Hub(Client(transport=MemoryTransport()))
    >>> hub.has_active_client()
    True
    >>> Hub().capture_error(ValueError("dropped")).int
    0
    """

    _main: ClassVar["Hub | None"] = None
    _main_lock: ClassVar[threading.Lock] = threading.Lock()
    _local: ClassVar[threading.local] = threading.local()

    def __init__(self, client: Client | None = None) -> None:
        self._lock = threading.RLock()
        self._stack: list[_StackLayer] = [_StackLayer(client)]
        self._last_event_id: uuid.UUID | None = None

    # ------------------------------------------------------------------
    # Process-wide and per-thread hubs
    # ------------------------------------------------------------------

    @classmethod
    def main(cls) -> "Hub":
        """Return the process-wide main hub, creating it on first use."""
        with cls._main_lock:
            if cls._main is None:
                cls._main = cls()
            return cls._main

    @classmethod
    def current(cls) -> "Hub":
        """Return the hub active on the calling thread.

        A thread that has not been given a hub gets a new one whose bottom
        layer shares the main hub's current client.
        """
        hub: Hub | None = getattr(cls._local, "hub", None)
        if hub is None:
            hub = cls(cls.main().client)
            cls._local.hub = hub
        return hub

    @classmethod
    def run(cls, hub: "Hub", fn: Callable[[], _T]) -> _T:
        """Call *fn* with *hub* as the calling thread's current hub."""
        previous: Hub | None = getattr(cls._local, "hub", None)
        cls._local.hub = hub
        try:
            return fn()
        finally:
            cls._local.hub = previous

    # ------------------------------------------------------------------
    # Layer management
    # ------------------------------------------------------------------

    def with_top(self, fn: Callable[[_StackLayer], _T]) -> _T:
        """Call *fn* with the top layer while holding the hub lock."""
        with self._lock:
            return fn(self._stack[-1])

    @property
    def client(self) -> Client | None:
        """Client of the top layer, if any."""
        return self.with_top(lambda layer: layer.client)

    def has_active_client(self) -> bool:
        return self._active_client() is not None

    def bind_client(self, client: Client | None) -> None:
        """Replace the client of the top layer."""
        with self._lock:
            self._stack[-1].client = client
        logger.debug("Bound %r to %r", client, self)

    @contextmanager
    def push_client(self, client: Client | None) -> Iterator["Hub"]:
        """Push a layer holding *client* for the duration of the block."""
        with self._lock:
            self._stack.append(_StackLayer(client))
            depth = len(self._stack)
        try:
            yield self
        finally:
            with self._lock:
                if len(self._stack) != depth:
                    logger.warning(
                        "Hub layer stack depth %d does not match pushed depth %d",
                        len(self._stack),
                        depth,
                    )
                self._stack.pop()

    def last_event_id(self) -> uuid.UUID | None:
        """Identifier of the last event this hub sent, if any."""
        with self._lock:
            return self._last_event_id

    # ------------------------------------------------------------------
    # Capture
    # ------------------------------------------------------------------

    def capture_event(self, event: Event) -> uuid.UUID:
        """Stamp *event* and send it through the active client.

        A nil ``event_id`` is replaced with a fresh UUID4 and a missing
        ``timestamp`` with the current UTC time.

        Returns
        -------
        uuid.UUID
            The event's identifier, or :data:`NIL_EVENT_ID` when there is no
            active client.
        """
        client = self._active_client()
        if client is None:
            return NIL_EVENT_ID
        return self._send(client, event)

    def capture_error(self, error: object) -> uuid.UUID:
        """Build an event from *error* and its causes and send it.

        Without an active client nothing is built or sent and
        :data:`NIL_EVENT_ID` is returned.

        Raises
        ------
        InvalidErrorValue
            If *error* is not an exception or error-like value.
        TransportError
            If the client's transport fails.
        """
        client = self._active_client()
        if client is None:
            return NIL_EVENT_ID
        event = event_from_error(
            error,
            follow_context=client.options.follow_implicit_context,
        )
        return self._send(client, event)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _active_client(self) -> Client | None:
        def _pick(layer: _StackLayer) -> Client | None:
            client = layer.client
            if client is not None and client.is_enabled():
                return client
            return None

        return self.with_top(_pick)

    def _send(self, client: Client, event: Event) -> uuid.UUID:
        if event.event_id == NIL_EVENT_ID:
            event.event_id = uuid.uuid4()
        if event.timestamp is None:
            event.timestamp = datetime.now(tz=timezone.utc)
        event_id = client.capture_event(event)
        if event_id != NIL_EVENT_ID:
            with self._lock:
                self._last_event_id = event_id
        return event_id

    def __repr__(self) -> str:
        return f"Hub(layers={len(self._stack)})"
