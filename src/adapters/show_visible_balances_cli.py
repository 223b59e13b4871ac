"""CLI adapter printing wallet balances without hidden tokens.

This module wires the GetVisibleBalancesUseCase to the configured balance
source and hidden-token store and prints the visible holdings.
"""

from src.domain.models.balances import BalanceEntry
from src.infrastructure.container import build_visible_balances_use_case
from src.infrastructure.logging.logger import get_app_logger


def _describe_entry(entry: BalanceEntry) -> str:
    token = entry.token
    label = token.symbol or token.name or token.address
    native = " (native)" if token.is_native else ""
    fiat = entry.fiat_balance or "-"
    return f"{label}{native} [{token.address}]: {fiat}"


def main() -> None:
    """Print visible balances and their fiat total."""
    logger = get_app_logger()
    use_case = build_visible_balances_use_case()

    result = use_case.execute()

    if result.error:
        logger.error(f"Balance source reported an error: {result.error}")
        print(f"Error: {result.error}")
        raise SystemExit(1)
    if result.loading:
        print("Balances are still loading.")
        return

    for entry in result.balances.items:
        print(_describe_entry(entry))
    if result.balances.fiat_total:
        print(f"Visible fiat total: {result.balances.fiat_total}")
    else:
        print("Visible fiat total: unknown")


if __name__ == "__main__":  # pragma: no cover
    main()
