"""Shared service helpers (money arithmetic and formatting)."""
from .money import (
    DEFAULT_DECIMAL_PLACES,
    to_decimal,
    round_money,
    format_decimal,
    add,
    multiply,
)

__all__ = [
    "DEFAULT_DECIMAL_PLACES",
    "to_decimal",
    "round_money",
    "format_decimal",
    "add",
    "multiply",
]
