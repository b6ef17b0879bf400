"""Chain package for errorchain-sdk.

Walks an error's cause chain and assembles it into an event.
"""
from __future__ import annotations

from errorchain.chain.assembler import event_from_error, exception_from_error
from errorchain.chain.error_like import (
    ErrorLike,
    ExceptionAdapter,
    SimpleError,
    as_error_like,
)
from errorchain.chain.type_name import extract_type_name
from errorchain.chain.walker import walk_chain

__all__ = [
    "ErrorLike",
    "ExceptionAdapter",
    "SimpleError",
    "as_error_like",
    "walk_chain",
    "extract_type_name",
    "exception_from_error",
    "event_from_error",
]
