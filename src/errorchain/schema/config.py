"""Client options schema for errorchain-sdk.

``ClientOptions`` is a Pydantic v2 model that acts as the validated,
strongly-typed boundary object between raw configuration sources (YAML files,
environment variables, in-memory dicts) and the client.

Shipped in this module
----------------------
- ClientOptions   — Pydantic v2 model with environment reader
"""
from __future__ import annotations

import os
from typing import Any, Literal

from pydantic import BaseModel, Field

TransportKind = Literal["null", "memory", "console", "jsonl"]

_BOOL_FIELDS = frozenset({"enabled", "debug", "follow_implicit_context"})


class ClientOptions(BaseModel):
    """Validated options for an errorchain :class:`~errorchain.hub.client.Client`.

    All fields have defaults so a client can be created with zero
    configuration.

    Parameters
    ----------
    enabled:
        When ``False`` the client is installed but inactive; capture through
        a hub holding it is a no-op.
    debug:
        Log every event the client sends at DEBUG level.
    release, environment, server_name:
        Applied to captured events that leave these fields empty.
    transport:
        Which built-in transport to construct when none is passed
        explicitly.
    transport_path:
        Output file for the ``"jsonl"`` transport.
    follow_implicit_context:
        Whether Python exceptions contribute their implicit ``__context__``
        to the cause chain when no explicit ``__cause__`` is set.
    """

    model_config = {"extra": "forbid", "validate_assignment": True}

    enabled: bool = Field(default=True)
    debug: bool = Field(default=False)
    release: str | None = Field(default=None)
    environment: str | None = Field(default=None)
    server_name: str | None = Field(default=None)
    transport: TransportKind = Field(default="null")
    transport_path: str | None = Field(default=None)
    follow_implicit_context: bool = Field(default=True)

    @classmethod
    def env_values(cls, prefix: str = "ERRORCHAIN_") -> dict[str, Any]:
        """Return the option fields set through environment variables.

        Variables are mapped by stripping the ``prefix`` and lower-casing the
        remainder, so ``ERRORCHAIN_ENVIRONMENT=prod`` gives
        ``{"environment": "prod"}``.  Variables that do not name a field are
        ignored.  Boolean fields accept ``"true"`` / ``"1"`` / ``"yes"`` as
        truthy and anything else as falsy (case-insensitive).

        Only variables that are present appear in the result, so the mapping
        can be laid over values from another source key by key.
        """
        data: dict[str, Any] = {}
        for raw_key, raw_value in os.environ.items():
            if not raw_key.startswith(prefix):
                continue
            key = raw_key[len(prefix):].lower()
            if key not in cls.model_fields:
                continue
            if key in _BOOL_FIELDS:
                data[key] = raw_value.lower() in {"true", "1", "yes"}
            else:
                data[key] = raw_value
        return data

    @classmethod
    def from_env(cls, prefix: str = "ERRORCHAIN_") -> "ClientOptions":
        """Build options from environment variables alone.

        See :meth:`env_values` for the mapping rules.
        """
        return cls.model_validate(cls.env_values(prefix))
