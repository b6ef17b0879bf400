"""Cause-chain traversal."""
from __future__ import annotations

from errorchain.chain.error_like import ErrorLike, as_error_like


def walk_chain(error: object, *, follow_context: bool = True) -> list[ErrorLike]:
    """Return *error* followed by each of its causes, outermost first.

    The walk follows ``source()`` until it returns ``None``.  Every link is
    normalised, so a foreign error may name a Python exception as its cause.
    There is no length limit and no cycle detection: a cause graph that loops
    back on itself makes this function run forever.

    Parameters
    ----------
    error:
        An exception or any :class:`~errorchain.chain.error_like.ErrorLike`.
    follow_context:
        For Python exceptions, whether the implicit ``__context__`` counts
        as a cause when no ``__cause__`` is set.

    Returns
    -------
    list[ErrorLike]
        Never empty; index 0 is *error* itself, the last item is the root
        cause.

    Raises
    ------
    InvalidErrorValue
        If *error* is not an exception or error-like value.

    Examples
    --------
    >>> from errorchain.chain.error_like import SimpleError
    >>> chain = walk_chain(SimpleError("A", "a", SimpleError("B", "b")))
    >>> [e.display_text() for e in chain]
    ['a', 'b']
    """
    chain: list[ErrorLike] = []
    current: ErrorLike | None = as_error_like(error, follow_context=follow_context)
    while current is not None:
        chain.append(current)
        cause = current.source()
        current = None if cause is None else as_error_like(cause, follow_context=follow_context)
    return chain
