"""Module-level capture API for errorchain-sdk.

Example
-------
::

    import errorchain
    errorchain.init(transport="console")
    try:
        load_settings()
    except Exception as exc:
        errorchain.capture_error(exc)

"""
from __future__ import annotations

import uuid
from pathlib import Path
from typing import Any

from errorchain.chain.assembler import event_from_error
from errorchain.config.loader import ConfigLoader
from errorchain.hub.client import Client
from errorchain.hub.hub import Hub, ProcessingContext
from errorchain.schema.config import ClientOptions
from errorchain.schema.errors import ConfigurationError
from errorchain.schema.protocol import NIL_EVENT_ID, Event


def init(
    options: ClientOptions | None = None,
    *,
    config: str | Path | None = None,
    search_dir: str | Path | None = None,
    **overrides: Any,
) -> Client:
    """Create a client and bind it to the main hub.

    Parameters
    ----------
    options:
        Base options.  When omitted they are resolved by
        :meth:`ConfigLoader.load <errorchain.config.loader.ConfigLoader.load>`
        from *config* (or a discovered ``errorchain.yaml``) and
        ``ERRORCHAIN_*`` variables.
    config:
        Config file to read.  Cannot be combined with *options*.
    search_dir:
        Directory searched for a config file when neither *options* nor
        *config* is given.  Defaults to the working directory.
    **overrides:
        Individual option fields that replace the resolved ones.

    Returns
    -------
    Client
        The newly bound client.

    Raises
    ------
    ConfigurationError
        If the config file or environment holds invalid options, or both
        *options* and *config* are given.
    pydantic.ValidationError
        If an override has the wrong type or names an unknown field.
    """
    if options is not None and config is not None:
        raise ConfigurationError(
            "Pass either options or a config file to init(), not both.",
            context={"config": str(config)},
        )
    if options is None:
        options = ConfigLoader().load(config, search_dir=search_dir)
    if overrides:
        options = ClientOptions.model_validate({**options.model_dump(), **overrides})
    client = Client(options)
    Hub.main().bind_client(client)
    Hub.current().bind_client(client)
    return client


def dispatch_error(error: object, context: ProcessingContext) -> uuid.UUID:
    """Capture *error* through an arbitrary processing context.

    The context is asked once whether it has an active client; if it does,
    the event is built and submitted, otherwise nothing happens and the nil
    identifier is returned.  The check and the submission are separate
    calls; a client that disappears in between is handled by
    ``context.capture_event``, which must then return the nil identifier
    without sending.
    """
    if not context.has_active_client():
        return NIL_EVENT_ID
    return context.capture_event(event_from_error(error))


def capture_error(error: object, hub: Hub | None = None) -> uuid.UUID:
    """Capture *error* and its cause chain.

    Parameters
    ----------
    error:
        An exception or any :class:`~errorchain.chain.error_like.ErrorLike`.
    hub:
        Hub to capture through.  Defaults to :meth:`Hub.current`.

    Returns
    -------
    uuid.UUID
        The event identifier, or the nil UUID when no client is active.
    """
    return (hub or Hub.current()).capture_error(error)


def capture_event(event: Event, hub: Hub | None = None) -> uuid.UUID:
    """Send an already assembled *event*, e.g. after enriching it."""
    return (hub or Hub.current()).capture_event(event)


def last_event_id(hub: Hub | None = None) -> uuid.UUID | None:
    """Identifier of the last event sent through *hub* (or the current hub)."""
    return (hub or Hub.current()).last_event_id()
