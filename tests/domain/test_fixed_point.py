"""Tests for fixed-point decimal helpers."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.errors import InvalidDecimalError
from src.domain.models.fixed_point import FixedPointAmount
from src.domain.services.fixed_point import (
    format_fixed,
    parse_fixed,
    safe_parse_fixed,
    truncate_decimal,
)


def test_truncate_returns_integers_unchanged() -> None:
    """Strings without a separator are left as-is."""
    assert truncate_decimal("100", 2) == "100"
    assert truncate_decimal("", 18) == ""


def test_truncate_cuts_excess_fraction_without_rounding() -> None:
    """Excess fractional digits are dropped toward zero."""
    assert truncate_decimal("1.23999", 2) == "1.23"
    assert truncate_decimal("-1.999", 1) == "-1.9"
    assert truncate_decimal("5.123", 0) == "5."
    assert (
        truncate_decimal("0.1234567890123456789", 18)
        == "0.123456789012345678"
    )


@pytest.mark.parametrize(
    "value,precision",
    [
        ("1.2", 2),
        ("1.23", 2),
        ("12.5", 18),
        ("0.000000000000000001", 18),
    ],
)
def test_truncate_is_noop_up_to_precision(value: str, precision: int) -> None:
    """Strings with at most ``precision`` fractional digits are unchanged."""
    assert truncate_decimal(value, precision) == value


@pytest.mark.parametrize(
    "value,precision",
    [
        ("3.14159265358979323846", 18),
        ("-0.0000000000000000000001", 18),
        ("5.123", 0),
        ("42", 3),
        ("7.", 2),
    ],
)
def test_truncate_is_idempotent(value: str, precision: int) -> None:
    """Truncating twice yields the same string as truncating once."""
    once = truncate_decimal(value, precision)
    assert truncate_decimal(once, precision) == once


def test_truncate_rejects_negative_precision() -> None:
    with pytest.raises(ValueError):
        truncate_decimal("1.5", -1)


def test_parse_scales_to_precision() -> None:
    """Parsed values are integers scaled by 10**precision."""
    amount = parse_fixed("12.5", 2)

    assert amount == FixedPointAmount(units=1250, precision=2, scale=1)


def test_parse_accepts_sign_and_partial_forms() -> None:
    """Negative values, bare fractions and trailing separators parse."""
    assert parse_fixed("-0.5", 2).units == -50
    assert parse_fixed(".5", 1).units == 5
    assert parse_fixed("5.", 0).units == 5
    assert parse_fixed(" 3.0 ", 2).units == 300


def test_parse_treats_empty_string_as_zero() -> None:
    """Empty input is zero, never an error."""
    assert parse_fixed("", 18).is_zero
    assert parse_fixed("   ", 18).is_zero


@pytest.mark.parametrize(
    "value",
    ["abc", "-", ".", "1e5", "1,000.00", "--1", "1.2.3", "+1"],
)
def test_parse_rejects_malformed_strings(value: str) -> None:
    with pytest.raises(InvalidDecimalError):
        parse_fixed(value, 18)


def test_parse_rejects_fraction_longer_than_precision() -> None:
    """Untruncated input with too many digits is an error."""
    with pytest.raises(InvalidDecimalError) as exc_info:
        parse_fixed("1.234", 2)

    assert exc_info.value.value == "1.234"
    assert isinstance(exc_info.value, ValueError)


def test_parse_keeps_integer_part_exact_for_large_values() -> None:
    """Arbitrarily large integer parts survive parsing and formatting."""
    raw = "123456789012345678901234567890.123456789012345678999"

    amount = parse_fixed(truncate_decimal(raw, 18), 18)

    assert format_fixed(amount, 18) == (
        "123456789012345678901234567890.123456789012345678"
    )


def test_format_preserves_source_scale() -> None:
    """Trailing zeros shown by the source are kept."""
    assert format_fixed(parse_fixed("15.00", 18), 18) == "15.00"
    assert format_fixed(parse_fixed("15", 18), 18) == "15"
    assert format_fixed(parse_fixed("0.10", 18)) == "0.10"


def test_format_renders_negative_and_zero_values() -> None:
    assert format_fixed(
        FixedPointAmount(units=-5 * 10**17, precision=18, scale=2)
    ) == "-0.50"
    assert format_fixed(FixedPointAmount(units=0, precision=18, scale=2)) == (
        "0.00"
    )
    assert format_fixed(FixedPointAmount(units=0, precision=18)) == "0"
    assert format_fixed(FixedPointAmount(units=42, precision=0)) == "42"


def test_format_rejects_mismatched_precision() -> None:
    with pytest.raises(ValueError):
        format_fixed(parse_fixed("1.5", 2), 18)


def test_subtraction_is_exact_and_widens_scale() -> None:
    """Differences keep the wider scale of both operands."""
    result = parse_fixed("15", 18) - parse_fixed("10.25", 18)

    assert format_fixed(result) == "4.75"
    assert result.scale == 2


def test_subtraction_requires_equal_precision() -> None:
    with pytest.raises(ValueError):
        parse_fixed("1", 2) - parse_fixed("1", 3)


def test_to_decimal_is_exact() -> None:
    amount = parse_fixed("0.123456789012345678", 18)

    assert amount.to_decimal() == Decimal("0.123456789012345678")


def test_safe_parse_truncates_before_parsing() -> None:
    """Values beyond the precision are truncated instead of rejected."""
    amount = safe_parse_fixed("1.23999", 2)

    assert amount.units == 123


def test_safe_parse_turns_malformed_input_into_zero() -> None:
    """Malformed strings become zero and are reported."""
    logger = MagicMock()

    amount = safe_parse_fixed("not-a-number", 18, logger)

    assert amount == FixedPointAmount.zero(18)
    logger.warning.assert_called_once()
    assert "not-a-number" in logger.warning.call_args.args[0]


def test_parse_rejects_integer_part_beyond_conversion_limit() -> None:
    """Integer parts too long for int() surface as InvalidDecimalError."""
    with pytest.raises(InvalidDecimalError):
        parse_fixed("9" * 5000, 18)


def test_safe_parse_turns_oversized_input_into_zero() -> None:
    logger = MagicMock()

    amount = safe_parse_fixed("9" * 5000 + ".25", 18, logger)

    assert amount == FixedPointAmount.zero(18)
    logger.warning.assert_called_once()
