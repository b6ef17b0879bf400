"""Turn an error and its causes into an :class:`~errorchain.schema.protocol.Event`.

The exception list is ordered oldest to newest: the root cause comes first
and the captured error last, so a reporting UI shows the original trigger
before the context that wrapped it.

Shipped in this module
----------------------
- exception_from_error — one ``ExceptionRecord`` for one chain element
- event_from_error     — full event for an error and its cause chain
"""
from __future__ import annotations

from typing import Callable

from errorchain.chain.error_like import ErrorLike
from errorchain.chain.type_name import extract_type_name
from errorchain.chain.walker import walk_chain
from errorchain.schema.protocol import Event, ExceptionRecord, Level

TypeNameResolver = Callable[[str], str]


def exception_from_error(
    error: ErrorLike,
    type_name_resolver: TypeNameResolver = extract_type_name,
) -> ExceptionRecord:
    """Build the record for a single error, ignoring its cause.

    ``value`` is always set, even when the display text is empty.
    """
    return ExceptionRecord(
        ty=type_name_resolver(error.debug_text()),
        value=error.display_text(),
    )


def event_from_error(
    error: object,
    *,
    follow_context: bool = True,
    type_name_resolver: TypeNameResolver = extract_type_name,
) -> Event:
    """Create an event from *error* and every error in its cause chain.

    Pure: nothing is sent and no identifier or timestamp is assigned, so
    calling this twice on the same error yields equal events.

    Parameters
    ----------
    error:
        An exception or any :class:`~errorchain.chain.error_like.ErrorLike`.
    follow_context:
        For Python exceptions, whether implicit ``__context__`` links count
        as causes.
    type_name_resolver:
        Maps debug text to a type name.  Defaults to
        :func:`~errorchain.chain.type_name.extract_type_name`.

    Returns
    -------
    Event
        Level ``ERROR``, exceptions root cause first.

    Raises
    ------
    InvalidErrorValue
        If *error* is not an exception or error-like value.

    Examples
    --------
    >>> from errorchain.chain.error_like import SimpleError
    >>> event = event_from_error(
    ...     SimpleError("OuterError(InnerError)", "outer", SimpleError("InnerError", "inner"))
    ... )
    >>> [(e.ty, e.value) for e in event.exception]
    [('InnerError', 'inner'), ('OuterError', 'outer')]
    """
    exceptions = [
        exception_from_error(element, type_name_resolver)
        for element in walk_chain(error, follow_context=follow_context)
    ]
    exceptions.reverse()
    return Event(exception=exceptions, level=Level.ERROR)
