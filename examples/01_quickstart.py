#!/usr/bin/env python3
"""Example: Quickstart

Captures a chained Python exception and prints the event on the console.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install errorchain-sdk
"""
from __future__ import annotations

import errorchain


def load_retry_count(raw: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"invalid retry count {raw!r}") from exc


def main() -> None:
    print(f"errorchain-sdk version: {errorchain.__version__}")

    # Without a client, capture is a no-op.
    print("before init:", errorchain.capture_error(ValueError("dropped")))

    errorchain.init(transport="console", environment="example")

    try:
        load_retry_count("NaN")
    except RuntimeError as exc:
        event_id = errorchain.capture_error(exc)
        print("captured:", event_id)

    # Build without sending, enrich, then send.
    event = errorchain.event_from_error(KeyError("user_id"))
    event.tags["component"] = "session"
    errorchain.capture_event(event)


if __name__ == "__main__":
    main()
