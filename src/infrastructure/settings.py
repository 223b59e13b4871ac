"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

import dotenv

from src.domain.constants import FIAT_PRECISION
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


@dataclass(frozen=True)
class WalletSettings:
    """Settings for wiring the visible balances adapters.

    Attributes:
        balances_file: Path to the JSON balance payload.
        hidden_tokens_backend: Hidden-token store identifier (sql or memory).
        hidden_tokens: Addresses used by the memory backend.
        chain_id: Chain the hidden-token set is scoped to.
        safe_address: Wallet the hidden-token set is scoped to.
        fiat_precision: Fractional digits kept when recomputing totals.
    """

    balances_file: Path | None = None
    hidden_tokens_backend: str = "sql"
    hidden_tokens: tuple[str, ...] = ()
    chain_id: str = "1"
    safe_address: str = ""
    fiat_precision: int = FIAT_PRECISION

    @classmethod
    def from_env(cls) -> "WalletSettings":
        """Build settings from environment variables.

        Returns:
            WalletSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        raw_file = os.getenv("BALANCES_FILE")
        balances_file = (
            cls._normalize_path(raw_file, logger=logger)
            if raw_file
            else cls._default_balances_file()
        )
        backend = os.getenv("HIDDEN_TOKENS_BACKEND", "sql").strip().lower()
        raw_hidden = os.getenv("HIDDEN_TOKENS", "")
        hidden_tokens = tuple(
            address.strip()
            for address in raw_hidden.split(",")
            if address.strip()
        )
        return cls(
            balances_file=balances_file,
            hidden_tokens_backend=backend,
            hidden_tokens=hidden_tokens,
            chain_id=os.getenv("CHAIN_ID", "1").strip(),
            safe_address=os.getenv("SAFE_ADDRESS", "").strip(),
            fiat_precision=cls._parse_precision(
                os.getenv("FIAT_PRECISION"),
                logger=logger,
            ),
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Resolve the balances file path.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Absolute path to the balances file.
        """
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Balances file does not exist at {path}")
        return path

    @staticmethod
    def _default_balances_file() -> Path | None:
        """Return data/balances.json when it exists."""
        candidate = get_project_root() / "data" / "balances.json"
        return candidate if candidate.exists() else None

    @staticmethod
    def _parse_precision(raw_value: str | None, logger) -> int:
        """Parse FIAT_PRECISION, falling back to the default.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: Non-negative precision.
        """
        if not raw_value:
            return FIAT_PRECISION
        try:
            precision = int(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid FIAT_PRECISION '{raw_value}'. "
                f"Using {FIAT_PRECISION}."
            )
            return FIAT_PRECISION
        if precision < 0:
            logger.warning(
                f"Negative FIAT_PRECISION {precision}. "
                f"Using {FIAT_PRECISION}."
            )
            return FIAT_PRECISION
        return precision


__all__ = ["WalletSettings"]
