"""Shared fixtures for errorchain-sdk tests."""
from __future__ import annotations

import os
import threading
from typing import Iterator

import pytest

from errorchain.hub.hub import Hub


@pytest.fixture(autouse=True)
def _isolated_hubs() -> Iterator[None]:
    """Give every test a fresh main hub and thread-local hub slot."""
    Hub._main = None
    Hub._local = threading.local()
    yield
    Hub._main = None
    Hub._local = threading.local()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Hide ERRORCHAIN_* variables from the developer's shell."""
    for key in list(os.environ):
        if key.startswith("ERRORCHAIN_"):
            monkeypatch.delenv(key)
