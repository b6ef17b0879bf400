"""Options re-export and validation helper for errorchain-sdk.

Re-exports ``ClientOptions`` so that ``errorchain.config`` is a complete
import path for consumers who prefer not to reach into ``errorchain.schema``.
"""
from __future__ import annotations

from pydantic import ValidationError

from errorchain.schema.config import ClientOptions
from errorchain.schema.errors import ConfigurationError

__all__ = ["ClientOptions", "validate_options"]


def validate_options(data: dict[str, object]) -> ClientOptions:
    """Validate a raw dict against the ``ClientOptions`` schema.

    Raises
    ------
    ConfigurationError
        If the data fails Pydantic validation.  The original
        ``ValidationError`` is attached as the ``__cause__``.

    Examples
    --------
    >>> validate_options({"environment": "prod"}).environment
    'prod'
    """
    try:
        return ClientOptions.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Options validation failed: {exc}",
            context={"errors": exc.errors()},
        ) from exc
