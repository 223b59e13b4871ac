"""Tests for infrastructure settings."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import WalletSettings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", MagicMock)
    for name in (
        "BALANCES_FILE",
        "HIDDEN_TOKENS_BACKEND",
        "HIDDEN_TOKENS",
        "CHAIN_ID",
        "SAFE_ADDRESS",
        "FIAT_PRECISION",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_uses_defaults(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)

    settings = WalletSettings.from_env()

    assert settings.balances_file is None
    assert settings.hidden_tokens_backend == "sql"
    assert settings.hidden_tokens == ()
    assert settings.chain_id == "1"
    assert settings.safe_address == ""
    assert settings.fiat_precision == 18


def test_from_env_finds_default_balances_file(
    monkeypatch,
    tmp_path: Path,
) -> None:
    """data/balances.json under the project root is picked up."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "balances.json").write_text("{}", encoding="utf-8")
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)

    settings = WalletSettings.from_env()

    assert settings.balances_file == data_dir / "balances.json"


def test_from_env_reads_overrides(monkeypatch, tmp_path: Path) -> None:
    balances_file = tmp_path / "balances.json"
    balances_file.write_text("{}", encoding="utf-8")
    monkeypatch.setenv("BALANCES_FILE", str(balances_file))
    monkeypatch.setenv("HIDDEN_TOKENS_BACKEND", " Memory ")
    monkeypatch.setenv("HIDDEN_TOKENS", "0x1, 0x2,,")
    monkeypatch.setenv("CHAIN_ID", "100")
    monkeypatch.setenv("SAFE_ADDRESS", "0xsafe")
    monkeypatch.setenv("FIAT_PRECISION", "6")

    settings = WalletSettings.from_env()

    assert settings.balances_file == balances_file.resolve()
    assert settings.hidden_tokens_backend == "memory"
    assert settings.hidden_tokens == ("0x1", "0x2")
    assert settings.chain_id == "100"
    assert settings.safe_address == "0xsafe"
    assert settings.fiat_precision == 6


@pytest.mark.parametrize("raw_value", ["abc", "-2"])
def test_invalid_precision_falls_back_to_default(
    monkeypatch,
    raw_value: str,
) -> None:
    logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    monkeypatch.setenv("FIAT_PRECISION", raw_value)

    settings = WalletSettings.from_env()

    assert settings.fiat_precision == 18
    logger.warning.assert_called_once()


def test_missing_balances_file_is_reported(monkeypatch, tmp_path: Path) -> None:
    logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    monkeypatch.setenv("BALANCES_FILE", str(tmp_path / "missing.json"))

    settings = WalletSettings.from_env()

    assert settings.balances_file == (tmp_path / "missing.json").resolve()
    logger.warning.assert_called_once()
