"""Domain services package."""

from .balances import build_visible_balance_view, compute_visible_fiat_total
from .fixed_point import (
    format_fixed,
    parse_fixed,
    safe_parse_fixed,
    truncate_decimal,
)

__all__ = [
    "build_visible_balance_view",
    "compute_visible_fiat_total",
    "format_fixed",
    "parse_fixed",
    "safe_parse_fixed",
    "truncate_decimal",
]
