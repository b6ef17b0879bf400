#!/usr/bin/env python3
"""Example: Foreign error payloads

Errors that are not Python exceptions (an error decoded from an RPC
response, say) can be captured by implementing ``debug_text``,
``display_text`` and ``source``, or by wrapping them in ``SimpleError``.

Usage:
    python examples/02_foreign_errors.py
"""
from __future__ import annotations

from errorchain import Client, Hub, MemoryTransport, SimpleError


class RpcError:
    """Error decoded from a remote service response."""

    def __init__(self, payload: dict[str, object]) -> None:
        self._payload = payload

    def debug_text(self) -> str:
        return f"{self._payload['kind']} {{ code: {self._payload['code']} }}"

    def display_text(self) -> str:
        return str(self._payload["message"])

    def source(self) -> "RpcError | None":
        cause = self._payload.get("cause")
        return RpcError(cause) if isinstance(cause, dict) else None


def main() -> None:
    transport = MemoryTransport()
    hub = Hub(Client(transport=transport))

    hub.capture_error(
        RpcError(
            {
                "kind": "UpstreamFailed",
                "code": 502,
                "message": "billing service unavailable",
                "cause": {"kind": "ConnectTimeout", "code": 110, "message": "timed out"},
            }
        )
    )
    hub.capture_error(
        SimpleError("OuterError(InnerError)", "outer", SimpleError("InnerError", "inner"))
    )

    for event in transport.events:
        print(event.event_id.hex)
        for record in event.exception:
            print(f"  {record.ty}: {record.value}")


if __name__ == "__main__":
    main()
