"""The client: options plus a transport.

A client is what a hub layer holds.  It fills in option-level defaults on an
event and hands it to its transport; it knows nothing about cause chains or
which hub is active.
"""
from __future__ import annotations

import logging
import uuid

from errorchain.schema.config import ClientOptions
from errorchain.schema.protocol import NIL_EVENT_ID, Event
from errorchain.transport.base import Transport, make_transport

logger = logging.getLogger(__name__)


class Client:
    """Sends events through a transport according to its options.

    Parameters
    ----------
    options:
        Client options.  Defaults to ``ClientOptions()``.
    transport:
        Explicit transport.  When omitted, the transport named by
        ``options.transport`` is built.

    Examples
    --------
    >>> from errorchain.transport.base import MemoryTransport
    >>> client = Client(transport=MemoryTransport())
    >>> client.is_enabled()
    True
    """

    def __init__(
        self,
        options: ClientOptions | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._options = options or ClientOptions()
        self._transport = transport if transport is not None else make_transport(self._options)

    @property
    def options(self) -> ClientOptions:
        return self._options

    @property
    def transport(self) -> Transport:
        return self._transport

    def is_enabled(self) -> bool:
        """Return ``True`` if this client will send events."""
        return self._options.enabled

    def capture_event(self, event: Event) -> uuid.UUID:
        """Apply option defaults to *event* and send it.

        Parameters
        ----------
        event:
            The event to send.  ``release``, ``environment`` and
            ``server_name`` are only set when the event leaves them empty.

        Returns
        -------
        uuid.UUID
            ``event.event_id``, or :data:`NIL_EVENT_ID` when the client is
            disabled.

        Raises
        ------
        TransportError
            If the transport fails to deliver the event.
        """
        if not self.is_enabled():
            return NIL_EVENT_ID

        opts = self._options
        if event.release is None:
            event.release = opts.release
        if event.environment is None:
            event.environment = opts.environment
        if event.server_name is None:
            event.server_name = opts.server_name

        if opts.debug:
            logger.debug(
                "Sending event %s: %s",
                event.event_id.hex,
                ", ".join(f"{exc.ty}: {exc.value}" for exc in event.exception),
            )
        self._transport.send(event)
        return event.event_id

    def flush(self) -> None:
        self._transport.flush()

    def close(self) -> None:
        self._transport.close()

    def __repr__(self) -> str:
        return (
            f"Client(enabled={self.is_enabled()}, "
            f"transport={type(self._transport).__name__})"
        )
