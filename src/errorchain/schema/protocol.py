"""Event payload definitions for errorchain-sdk.

These are the in-memory records handed from the assembler to the hub and
from the hub to a transport.  Wire serialisation beyond ``to_dict()`` is the
transport's business.

Shipped in this module
----------------------
- Level            — closed severity taxonomy
- ExceptionRecord  — one entry of an event's exception list
- Event            — diagnostic record built once per capture call
- NIL_EVENT_ID     — identifier reserved for "not sent"
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

NIL_EVENT_ID: uuid.UUID = uuid.UUID(int=0)
"""Identifier returned when an event was not sent."""


class Level(str, Enum):
    """Severity of an event.

    Using ``str`` as the mixin base means values are valid JSON strings
    without extra serialisation steps.
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"


@dataclass(frozen=True)
class ExceptionRecord:
    """A single exception in an event's exception list.

    Parameters
    ----------
    ty:
        Short type name, usually recovered from the error's debug text.
        May be empty when the debug text starts with a delimiter.
    value:
        Human-readable message (the error's display text).
    module:
        Optional module the type lives in.
    thread_id:
        Optional identifier of the thread that raised the error.
    mechanism:
        Optional description of how the error was captured.

    Examples
    --------
    >>> ExceptionRecord(ty="ValueError", value="bad").to_dict()
    {'type': 'ValueError', 'value': 'bad'}
    """

    ty: str
    value: str | None = None
    module: str | None = None
    thread_id: str | None = None
    mechanism: dict[str, object] | None = None

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain dict, omitting unset optional fields."""
        base: dict[str, object] = {"type": self.ty}
        for key in ("value", "module", "thread_id", "mechanism"):
            val = getattr(self, key)
            if val is not None:
                base[key] = val
        return base

    @classmethod
    def from_dict(cls, payload: dict[str, object]) -> "ExceptionRecord":
        """Reconstruct an ``ExceptionRecord`` from :meth:`to_dict` output."""
        value = payload.get("value")
        module = payload.get("module")
        thread_id = payload.get("thread_id")
        mechanism = payload.get("mechanism")
        return cls(
            ty=str(payload.get("type", "")),
            value=str(value) if value is not None else None,
            module=str(module) if module is not None else None,
            thread_id=str(thread_id) if thread_id is not None else None,
            mechanism=dict(mechanism) if isinstance(mechanism, dict) else None,
        )


@dataclass
class Event:
    """Diagnostic record built from a captured error.

    Only ``exception`` and ``level`` are filled by the assembler; everything
    else keeps its default until an enrichment stage or the hub sets it.
    ``event_id`` stays nil and ``timestamp`` stays ``None`` until capture, so
    two events built from the same error compare equal.

    Parameters
    ----------
    exception:
        Exception records, root cause first.
    level:
        Severity of the event.
    event_id:
        Identifier; :data:`NIL_EVENT_ID` until the hub assigns one.
    timestamp:
        UTC capture time; ``None`` until the hub stamps it.

    Examples
    --------
    >>> evt = Event(exception=[ExceptionRecord("KeyError", "'a'")])
    >>> evt.level
    <Level.ERROR: 'error'>
    """

    exception: list[ExceptionRecord] = field(default_factory=list)
    level: Level = Level.ERROR
    event_id: uuid.UUID = NIL_EVENT_ID
    message: str | None = None
    logger: str | None = None
    platform: str = "python"
    timestamp: datetime | None = None
    server_name: str | None = None
    release: str | None = None
    environment: str | None = None
    tags: dict[str, str] = field(default_factory=dict)
    extra: dict[str, object] = field(default_factory=dict)
    fingerprint: list[str] = field(default_factory=lambda: ["{{ default }}"])

    def to_dict(self) -> dict[str, object]:
        """Serialise the event to a plain dict suitable for JSON encoding.

        Returns
        -------
        dict[str, object]
            ``event_id`` is the 32-character hex form, ``timestamp`` is
            ISO-8601 (or ``None``), ``level`` is its string value and the
            exception list is nested under ``{"values": [...]}``.
        """
        return {
            "event_id": self.event_id.hex,
            "level": self.level.value,
            "exception": {"values": [exc.to_dict() for exc in self.exception]},
            "message": self.message,
            "logger": self.logger,
            "platform": self.platform,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
            "server_name": self.server_name,
            "release": self.release,
            "environment": self.environment,
            "tags": dict(self.tags),
            "extra": dict(self.extra),
            "fingerprint": list(self.fingerprint),
        }

    @classmethod
    def from_dict(cls, payload: dict[str, object]) -> "Event":
        """Reconstruct an ``Event`` from a serialised dict.

        Raises
        ------
        ValueError
            If ``level`` is not a recognised :class:`Level` value or
            ``event_id`` is not a valid UUID.
        """
        raw_id = payload.get("event_id")
        event_id = uuid.UUID(str(raw_id)) if raw_id else NIL_EVENT_ID

        raw_ts = payload.get("timestamp")
        if isinstance(raw_ts, str):
            timestamp: datetime | None = datetime.fromisoformat(raw_ts)
        elif isinstance(raw_ts, datetime):
            timestamp = raw_ts
        else:
            timestamp = None

        raw_exc = payload.get("exception", {})
        values = raw_exc.get("values", []) if isinstance(raw_exc, dict) else []
        records = [ExceptionRecord.from_dict(v) for v in values if isinstance(v, dict)]

        tags_raw = payload.get("tags", {})
        extra_raw = payload.get("extra", {})
        fingerprint_raw = payload.get("fingerprint")

        def _opt(key: str) -> str | None:
            val = payload.get(key)
            return str(val) if val is not None else None

        return cls(
            exception=records,
            level=Level(str(payload.get("level", Level.ERROR.value))),
            event_id=event_id,
            message=_opt("message"),
            logger=_opt("logger"),
            platform=str(payload.get("platform", "python")),
            timestamp=timestamp,
            server_name=_opt("server_name"),
            release=_opt("release"),
            environment=_opt("environment"),
            tags={str(k): str(v) for k, v in tags_raw.items()} if isinstance(tags_raw, dict) else {},
            extra=dict(extra_raw) if isinstance(extra_raw, dict) else {},
            fingerprint=(
                [str(f) for f in fingerprint_raw]
                if isinstance(fingerprint_raw, list)
                else ["{{ default }}"]
            ),
        )
