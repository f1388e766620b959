from .config_logging import LOGGING, configure_logging
from .converters_scalar import (
    RawValue,
    as_mapping,
    is_filled,
    is_null_or_whitespace,
    to_amount,
    to_decimal,
)

__all__ = [
    "LOGGING",
    "configure_logging",
    "RawValue",
    "as_mapping",
    "is_filled",
    "is_null_or_whitespace",
    "to_amount",
    "to_decimal",
]
