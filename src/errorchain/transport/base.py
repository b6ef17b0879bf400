"""Transport implementations for errorchain-sdk.

Transports receive fully assembled :class:`~errorchain.schema.protocol.Event`
objects from a client and deliver them somewhere.  Network delivery, retry
and rate limiting are not part of this package; these transports cover local
development, tests and file-based shipping.

Shipped in this module
----------------------
- Transport          — ABC for all transports
- NullTransport      — discards every event
- MemoryTransport    — keeps sent events in a list
- ConsoleTransport   — prints one line per event via ``rich``
- JSONFileTransport  — appends JSON Lines to a file
- make_transport     — build the transport named by ``ClientOptions``
"""
from __future__ import annotations

import json
import logging
import threading
from abc import ABC, abstractmethod
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from errorchain.schema.config import ClientOptions
from errorchain.schema.errors import ConfigurationError, TransportError
from errorchain.schema.protocol import Event

logger = logging.getLogger(__name__)


class Transport(ABC):
    """Abstract base class for event transports."""

    @abstractmethod
    def send(self, event: Event) -> None:
        """Deliver *event*.

        Raises
        ------
        TransportError
            If the event cannot be delivered.
        """

    def flush(self) -> None:
        """Ensure all buffered events have been delivered."""

    def close(self) -> None:
        """Release any resources held by the transport."""
        self.flush()


class NullTransport(Transport):
    """Transport that silently discards all events."""

    def send(self, event: Event) -> None:
        """Discard *event* without side effects."""


class MemoryTransport(Transport):
    """Transport that keeps every sent event in memory.

    Examples
    --------
    >>> transport = MemoryTransport()
    >>> transport.send(Event())
    >>> len(transport.events)
    1
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._events: list[Event] = []

    def send(self, event: Event) -> None:
        with self._lock:
            self._events.append(event)

    @property
    def events(self) -> list[Event]:
        """Snapshot of the sent events, oldest first."""
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()

    def __repr__(self) -> str:
        return f"MemoryTransport(events={len(self._events)})"


class ConsoleTransport(Transport):
    """Transport that prints a one-line summary per event.

    Primarily useful for local development and debugging.

    Parameters
    ----------
    console:
        ``rich`` console to print to.  Defaults to a stdout console.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def send(self, event: Event) -> None:
        chain = " <- ".join(
            f"{exc.ty or '?'}: {exc.value}" for exc in reversed(event.exception)
        )
        self._console.print(
            f"[bold]{event.event_id.hex}[/bold] level={event.level.value} {escape(chain)}",
            markup=True,
            highlight=False,
        )


class JSONFileTransport(Transport):
    """Transport that appends events as JSON Lines to a file.

    Each event is written as the JSON encoding of :meth:`Event.to_dict` on
    its own line.

    Parameters
    ----------
    file_path:
        Path to the output file.  Will be created if it does not exist.
    append:
        If ``True`` (default), events are appended to an existing file.
        If ``False`` the file is truncated when the transport is created.
    """

    def __init__(self, file_path: str | Path, *, append: bool = True) -> None:
        self._path = Path(file_path)
        self._lock = threading.Lock()
        if not append:
            try:
                self._path.write_text("", encoding="utf-8")
            except OSError as exc:
                raise TransportError(
                    f"Cannot truncate event file {self._path}: {exc}",
                    context={"path": str(self._path)},
                ) from exc

    @property
    def path(self) -> Path:
        return self._path

    def send(self, event: Event) -> None:
        """Append *event* to the JSON Lines file."""
        line = json.dumps(event.to_dict(), default=str)
        try:
            with self._lock, self._path.open("a", encoding="utf-8") as fh:
                fh.write(line + "\n")
        except OSError as exc:
            raise TransportError(
                f"Cannot write event to {self._path}: {exc}",
                context={"path": str(self._path), "event_id": event.event_id.hex},
            ) from exc
        logger.debug("Wrote event %s to %s", event.event_id.hex, self._path)


def make_transport(options: ClientOptions) -> Transport:
    """Construct the built-in transport selected by *options*.

    Raises
    ------
    ConfigurationError
        If the transport kind is unknown or the ``"jsonl"`` transport has no
        path.
    """
    kind = options.transport
    if kind == "null":
        return NullTransport()
    if kind == "memory":
        return MemoryTransport()
    if kind == "console":
        return ConsoleTransport()
    if kind == "jsonl":
        if not options.transport_path:
            raise ConfigurationError(
                "The 'jsonl' transport requires transport_path.",
                context={"transport": kind},
            )
        return JSONFileTransport(options.transport_path)
    raise ConfigurationError(
        f"Unknown transport {kind!r}.",
        context={"transport": kind},
    )
