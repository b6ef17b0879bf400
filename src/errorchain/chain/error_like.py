"""The error-like capability consumed by the chain walker.

Anything that can describe itself in two textual forms and point at its
underlying cause can be turned into an event.  Python exceptions are adapted
automatically; foreign error payloads (decoded RPC errors, log records from
another runtime, ...) can implement :class:`ErrorLike` directly or be wrapped
in :class:`SimpleError`.

Shipped in this module
----------------------
- ErrorLike         — runtime-checkable protocol (debug/display/source)
- ExceptionAdapter  — ``ErrorLike`` view over a ``BaseException``
- SimpleError       — plain value object implementing ``ErrorLike``
- as_error_like     — normalise any accepted input to ``ErrorLike``
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from errorchain.schema.errors import InvalidErrorValue


@runtime_checkable
class ErrorLike(Protocol):
    """Structural interface for values the walker can traverse."""

    def debug_text(self) -> str:
        """Developer-facing representation; should start with the type name."""
        ...

    def display_text(self) -> str:
        """Human-facing message."""
        ...

    def source(self) -> "ErrorLike | BaseException | None":
        """The underlying cause, or ``None`` at the root.

        A plain Python exception is accepted and adapted by the walker.
        """
        ...


class ExceptionAdapter:
    """Expose a Python exception through the :class:`ErrorLike` interface.

    ``repr()`` plays the role of the debug text (``ValueError('x')``) and
    ``str()`` the display text.  The cause is the explicit ``__cause__``;
    when that is unset and *follow_context* is true, the implicit
    ``__context__`` is used unless the raise site suppressed it with
    ``raise ... from None``.

    Parameters
    ----------
    exc:
        The exception to wrap.
    follow_context:
        Whether to fall back to ``__context__``.

    Examples
    --------
    >>> try:
    ...     try:
    ...         raise KeyError("k")
    ...     except KeyError as inner:
    ...         raise RuntimeError("lookup failed") from inner
    ... except RuntimeError as exc:
    ...     adapted = ExceptionAdapter(exc)
    >>> adapted.source().debug_text()
    "KeyError('k')"
    """

    __slots__ = ("_exc", "_follow_context")

    def __init__(self, exc: BaseException, *, follow_context: bool = True) -> None:
        self._exc = exc
        self._follow_context = follow_context

    @property
    def exception(self) -> BaseException:
        """The wrapped exception."""
        return self._exc

    def debug_text(self) -> str:
        return repr(self._exc)

    def display_text(self) -> str:
        return str(self._exc)

    def source(self) -> "ExceptionAdapter | None":
        cause = self._exc.__cause__
        if cause is None and self._follow_context and not self._exc.__suppress_context__:
            cause = self._exc.__context__
        if cause is None:
            return None
        return ExceptionAdapter(cause, follow_context=self._follow_context)

    def __repr__(self) -> str:
        return f"ExceptionAdapter({self._exc!r})"


class SimpleError:
    """Minimal :class:`ErrorLike` value built from plain strings.

    Parameters
    ----------
    debug:
        Debug text, e.g. ``"OuterError(InnerError)"``.
    display:
        Display text, e.g. ``"outer"``.
    cause:
        Optional underlying error; a Python exception is accepted.

    Examples
    --------
    >>> err = SimpleError("OuterError(..)", "outer", SimpleError("InnerError", "inner"))
    >>> err.source().display_text()
    'inner'
    """

    __slots__ = ("_debug", "_display", "_cause")

    def __init__(
        self,
        debug: str,
        display: str,
        cause: ErrorLike | BaseException | None = None,
    ) -> None:
        self._debug = debug
        self._display = display
        self._cause = cause

    def debug_text(self) -> str:
        return self._debug

    def display_text(self) -> str:
        return self._display

    def source(self) -> ErrorLike | BaseException | None:
        return self._cause

    def __repr__(self) -> str:
        return f"SimpleError(debug={self._debug!r}, display={self._display!r})"


def as_error_like(value: object, *, follow_context: bool = True) -> ErrorLike:
    """Normalise *value* to an :class:`ErrorLike`.

    Parameters
    ----------
    value:
        A ``BaseException`` or any object already implementing ``ErrorLike``.
    follow_context:
        Forwarded to :class:`ExceptionAdapter` for exceptions.

    Returns
    -------
    ErrorLike

    Raises
    ------
    InvalidErrorValue
        If *value* is neither.
    """
    if isinstance(value, BaseException):
        return ExceptionAdapter(value, follow_context=follow_context)
    if isinstance(value, ErrorLike):
        return value
    raise InvalidErrorValue(
        f"Cannot capture {type(value).__name__!r}: expected an exception or an "
        "object with debug_text(), display_text() and source().",
        context={"type": type(value).__name__},
    )
