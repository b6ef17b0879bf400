"""Error taxonomy for errorchain-sdk.

All exceptions raised by errorchain derive from ``ErrorChainSDKError`` so
that callers can catch the entire family with a single
``except ErrorChainSDKError`` clause while still being able to distinguish
individual failure modes.

Note that the SDK never raises because no client is configured: capturing
without an active client is a successful no-op that yields the nil event id.

Shipped in this module
----------------------
- ErrorChainSDKError — root exception with a context payload
- ConfigurationError — options loading / validation failures
- TransportError     — event delivery failures
- InvalidErrorValue  — capture called with something that is not an error
"""
from __future__ import annotations


class ErrorChainSDKError(Exception):
    """Root exception for all errorchain failures.

    Parameters
    ----------
    message:
        Human-readable description of what went wrong.
    context:
        Optional dict of structured metadata (paths, transport kinds, etc.)
        that helps diagnostics without requiring log scraping.

    Examples
    --------
    >>> try:
    ...     raise ErrorChainSDKError("something broke", context={"k": 1})
    ... except ErrorChainSDKError as exc:
    ...     print(exc.context)
    {'k': 1}
    """

    def __init__(
        self,
        message: str,
        context: dict[str, object] | None = None,
    ) -> None:
        super().__init__(message)
        self.context: dict[str, object] = context or {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={str(self)!r})"


class ConfigurationError(ErrorChainSDKError):
    """Raised when options loading or validation fails.

    Examples: unknown transport kind, bad YAML, wrong field type.
    """


class TransportError(ErrorChainSDKError):
    """Raised when a transport cannot deliver an event."""


class InvalidErrorValue(ErrorChainSDKError, TypeError):
    """Raised when a value is neither an exception nor error-like.

    Error-like values expose ``debug_text()``, ``display_text()`` and
    ``source()``; see :class:`errorchain.chain.error_like.ErrorLike`.
    """
