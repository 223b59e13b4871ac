"""Domain services for visible balance views."""

from logging import Logger

from src.domain.constants import FIAT_PRECISION
from src.domain.models.balances import (
    BalanceSet,
    HiddenTokenSet,
    VisibleBalanceView,
)
from src.domain.policies.visibility import filter_visible, is_visible
from src.domain.services.fixed_point import format_fixed, safe_parse_fixed


def compute_visible_fiat_total(
    balances: BalanceSet,
    hidden: HiddenTokenSet,
    precision: int = FIAT_PRECISION,
    logger: Logger | None = None,
) -> str:
    """Subtract hidden holdings from the upstream fiat total.

    Visible entries are already part of the upstream total and are left
    untouched. The result may be negative when upstream data is
    inconsistent.

    Args:
        balances: Balance set with a known fiat total.
        hidden: Addresses the user has hidden.
        precision: Fractional digits kept during the computation.
        logger: Optional logger for discarded values and negative totals.

    Returns:
        str: Visible fiat total as a decimal string.
    """
    running_total = safe_parse_fixed(
        balances.fiat_total or "0",
        precision,
        logger,
    )
    for item in balances.items:
        if is_visible(item.token, hidden):
            continue
        running_total = running_total - safe_parse_fixed(
            item.fiat_balance,
            precision,
            logger,
        )

    visible_total = format_fixed(running_total, precision)
    if running_total.is_negative and logger is not None:
        logger.warning(
            f"Visible fiat total is negative: {visible_total} "
            f"(upstream total {balances.fiat_total})"
        )
    return visible_total


def build_visible_balance_view(
    balances: BalanceSet,
    hidden: HiddenTokenSet,
    precision: int = FIAT_PRECISION,
    logger: Logger | None = None,
) -> VisibleBalanceView:
    """Project a balance set onto the tokens the user has not hidden.

    An unknown upstream total stays unknown.

    Args:
        balances: Balance set reported by the balance source.
        hidden: Addresses the user has hidden.
        precision: Fractional digits kept during total recomputation.
        logger: Optional logger forwarded to the total computation.

    Returns:
        VisibleBalanceView: Visible entries and their fiat total.
    """
    fiat_total = (
        compute_visible_fiat_total(balances, hidden, precision, logger)
        if balances.fiat_total != ""
        else ""
    )
    return VisibleBalanceView(
        items=filter_visible(balances.items, hidden),
        fiat_total=fiat_total,
    )


__all__ = ["compute_visible_fiat_total", "build_visible_balance_view"]
