"""Balance source adapters."""

from decimal import Decimal
import json
from pathlib import Path

from src.application.ports.balance_source import BalanceSourcePort
from src.domain.constants import NATIVE_TOKEN_TYPE
from src.domain.models.balances import (
    BalanceEntry,
    BalanceSet,
    BalanceSnapshot,
    TokenDescriptor,
)
from src.infrastructure.logging.logger import get_app_logger


class StaticBalanceSource(BalanceSourcePort):
    """Balance source returning a fixed snapshot."""

    def __init__(self, snapshot: BalanceSnapshot) -> None:
        self._snapshot = snapshot

    def get_balances(self) -> BalanceSnapshot:
        return self._snapshot


class JsonFileBalanceSource(BalanceSourcePort):
    """Balance source reading a balances payload from a JSON file.

    The payload follows the Safe transaction service layout::

        {"fiatTotal": "15.00",
         "items": [{"tokenInfo": {"address": "0x..", "type": "ERC20"},
                    "balance": "...", "fiatBalance": "10.00"}]}

    Read failures are reported through the snapshot error rather than
    raised.
    """

    def __init__(self, path: Path | str | None, logger=None) -> None:
        """Initialize the source.

        Args:
            path: Path to the JSON payload.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._path = Path(path) if path is not None else None
        self._logger = logger or get_app_logger()

    def get_balances(self) -> BalanceSnapshot:
        """Read and parse the payload.

        Returns:
            BalanceSnapshot: Parsed balances, or an empty set with an error.
        """
        if self._path is None:
            return self._failed("No balances file configured")
        try:
            with self._path.open(encoding="utf-8") as handle:
                payload = json.load(handle, parse_float=Decimal)
        except FileNotFoundError:
            return self._failed(f"Balances file not found: {self._path}")
        except (OSError, json.JSONDecodeError) as exc:
            return self._failed(
                f"Unable to read balances from {self._path}: {exc}"
            )
        if not isinstance(payload, dict):
            return self._failed(
                f"Balances payload in {self._path} is not an object"
            )

        balances = parse_balance_payload(payload)
        self._logger.info(
            f"Loaded {len(balances.items)} balances from {self._path}"
        )
        return BalanceSnapshot(balances=balances)

    def _failed(self, message: str) -> BalanceSnapshot:
        self._logger.error(message)
        return BalanceSnapshot(balances=BalanceSet(), error=message)


def parse_balance_payload(payload: dict) -> BalanceSet:
    """Convert a Safe-style balances payload into a BalanceSet.

    Args:
        payload: Decoded JSON object.

    Returns:
        BalanceSet: Entries in payload order and the fiat total.
    """
    items = tuple(
        _parse_item(raw_item)
        for raw_item in payload.get("items") or []
        if isinstance(raw_item, dict)
    )
    return BalanceSet(
        items=items,
        fiat_total=_as_text(payload.get("fiatTotal")),
    )


def _parse_item(raw_item: dict) -> BalanceEntry:
    token_info = raw_item.get("tokenInfo") or {}
    decimals = token_info.get("decimals")
    token = TokenDescriptor(
        address=_as_text(token_info.get("address")),
        is_native=token_info.get("type") == NATIVE_TOKEN_TYPE,
        symbol=token_info.get("symbol"),
        name=token_info.get("name"),
        decimals=decimals if isinstance(decimals, int) else None,
        logo_uri=token_info.get("logoUri"),
    )
    return BalanceEntry(
        token=token,
        fiat_balance=_as_text(raw_item.get("fiatBalance")),
        balance=_as_text(raw_item.get("balance")),
        fiat_conversion=_as_text(raw_item.get("fiatConversion")),
    )


def _as_text(value) -> str:
    """Return upstream values as strings, with None as empty."""
    if value is None:
        return ""
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


__all__ = [
    "StaticBalanceSource",
    "JsonFileBalanceSource",
    "parse_balance_payload",
]
