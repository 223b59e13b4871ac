"""Domain package for business rules and core models."""

from .constants import FIAT_PRECISION, NATIVE_TOKEN_TYPE
from .errors import InvalidDecimalError
from .models import (
    BalanceEntry,
    BalanceSet,
    BalanceSnapshot,
    FixedPointAmount,
    HiddenTokenSet,
    TokenDescriptor,
    VisibleBalances,
    VisibleBalanceView,
)
from .policies import filter_visible, is_visible, normalize_hidden_tokens
from .services import (
    build_visible_balance_view,
    compute_visible_fiat_total,
    format_fixed,
    parse_fixed,
    safe_parse_fixed,
    truncate_decimal,
)

__all__ = [
    "BalanceEntry",
    "BalanceSet",
    "BalanceSnapshot",
    "FixedPointAmount",
    "HiddenTokenSet",
    "TokenDescriptor",
    "VisibleBalances",
    "VisibleBalanceView",
    "FIAT_PRECISION",
    "NATIVE_TOKEN_TYPE",
    "InvalidDecimalError",
    "build_visible_balance_view",
    "compute_visible_fiat_total",
    "filter_visible",
    "format_fixed",
    "is_visible",
    "normalize_hidden_tokens",
    "parse_fixed",
    "safe_parse_fixed",
    "truncate_decimal",
]
