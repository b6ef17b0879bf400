"""Unit tests for errorchain.hub.client."""
from __future__ import annotations

import logging
import uuid

import pytest

from errorchain.hub.client import Client
from errorchain.schema.config import ClientOptions
from errorchain.schema.errors import TransportError
from errorchain.schema.protocol import NIL_EVENT_ID, Event, ExceptionRecord
from errorchain.transport.base import MemoryTransport, NullTransport, Transport


class _FailingTransport(Transport):
    def send(self, event: Event) -> None:
        raise TransportError("down")


def _event() -> Event:
    return Event(exception=[ExceptionRecord("E", "v")], event_id=uuid.uuid4())


class TestClient:
    def test_default_transport_is_null(self) -> None:
        assert isinstance(Client().transport, NullTransport)

    def test_transport_built_from_options(self) -> None:
        assert isinstance(Client(ClientOptions(transport="memory")).transport, MemoryTransport)

    def test_enabled_by_default(self) -> None:
        assert Client().is_enabled() is True

    def test_capture_sends_and_returns_id(self) -> None:
        transport = MemoryTransport()
        event = _event()
        assert Client(transport=transport).capture_event(event) == event.event_id
        assert transport.events == [event]

    def test_disabled_client_sends_nothing(self) -> None:
        transport = MemoryTransport()
        client = Client(ClientOptions(enabled=False), transport=transport)
        assert client.capture_event(_event()) == NIL_EVENT_ID
        assert transport.events == []

    def test_option_defaults_applied(self) -> None:
        transport = MemoryTransport()
        opts = ClientOptions(release="1.0", environment="prod", server_name="web-1")
        Client(opts, transport=transport).capture_event(_event())
        sent = transport.events[0]
        assert (sent.release, sent.environment, sent.server_name) == ("1.0", "prod", "web-1")

    def test_event_values_not_overridden(self) -> None:
        transport = MemoryTransport()
        event = _event()
        event.environment = "staging"
        Client(ClientOptions(environment="prod"), transport=transport).capture_event(event)
        assert transport.events[0].environment == "staging"

    def test_transport_error_propagates(self) -> None:
        with pytest.raises(TransportError):
            Client(transport=_FailingTransport()).capture_event(_event())

    def test_debug_logs_event(self, caplog: pytest.LogCaptureFixture) -> None:
        client = Client(ClientOptions(debug=True), transport=MemoryTransport())
        with caplog.at_level(logging.DEBUG, logger="errorchain.hub.client"):
            client.capture_event(_event())
        assert "E: v" in caplog.text

    def test_repr(self) -> None:
        assert "MemoryTransport" in repr(Client(transport=MemoryTransport()))
