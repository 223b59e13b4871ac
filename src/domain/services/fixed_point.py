"""Fixed-point arithmetic on decimal strings.

Fiat amounts arrive as arbitrary-precision decimal strings. They are
truncated to a working precision, parsed into scaled integers, subtracted
exactly and formatted back to strings. Floats never enter the path.
"""

from logging import Logger
import re

from src.domain.constants import DECIMAL_SEPARATOR
from src.domain.errors import InvalidDecimalError
from src.domain.models.fixed_point import FixedPointAmount


_DECIMAL_PATTERN = re.compile(r"^(-)?(\d*)(?:\.(\d*))?$")


def truncate_decimal(decimal: str, precision: int) -> str:
    """Cut a decimal string to at most ``precision`` fractional digits.

    No rounding is applied. Strings without a separator, or with fewer
    fractional digits than ``precision``, are returned unchanged.

    Args:
        decimal: Decimal string, possibly with excess fractional digits.
        precision: Maximum number of fractional digits to keep.

    Returns:
        str: The truncated decimal string.

    Raises:
        ValueError: If ``precision`` is negative.
    """
    if precision < 0:
        raise ValueError(f"Precision must be non-negative, got {precision}")
    separator_index = decimal.find(DECIMAL_SEPARATOR)
    if separator_index < 0:
        return decimal
    fraction_digits = len(decimal) - separator_index - 1
    if fraction_digits < precision:
        return decimal
    return decimal[: separator_index + precision + 1]


def parse_fixed(decimal: str, precision: int) -> FixedPointAmount:
    """Parse a decimal string into a scaled integer.

    An empty string is zero. The fraction must fit in ``precision`` digits;
    call ``truncate_decimal`` first for untrusted input.

    Args:
        decimal: Decimal string such as "12.50", "-3", ".5" or "".
        precision: Number of fractional digits of the scaled integer.

    Returns:
        FixedPointAmount: Parsed value.

    Raises:
        InvalidDecimalError: If the string is malformed or too precise.
    """
    if precision < 0:
        raise ValueError(f"Precision must be non-negative, got {precision}")
    cleaned = decimal.strip()
    if not cleaned:
        return FixedPointAmount.zero(precision)

    match = _DECIMAL_PATTERN.match(cleaned)
    if match is None:
        raise InvalidDecimalError(decimal, "not a decimal number")
    sign, whole, fraction = match.group(1), match.group(2), match.group(3)
    fraction = fraction or ""
    if not whole and not fraction:
        raise InvalidDecimalError(decimal, "no digits")
    if len(fraction) > precision:
        raise InvalidDecimalError(
            decimal,
            f"{len(fraction)} fractional digits exceed precision {precision}",
        )

    try:
        units = int(whole or "0") * 10**precision
        if fraction:
            units += int(fraction) * 10 ** (precision - len(fraction))
    except ValueError as exc:
        raise InvalidDecimalError(decimal, str(exc)) from exc
    if sign:
        units = -units
    return FixedPointAmount(
        units=units,
        precision=precision,
        scale=len(fraction),
    )


def format_fixed(
    value: FixedPointAmount,
    precision: int | None = None,
) -> str:
    """Render a scaled integer back to a decimal string.

    The output carries as many fractional digits as needed to be exact,
    and never fewer than ``value.scale``.

    Args:
        value: Amount to render.
        precision: Expected precision of ``value``; defaults to its own.

    Returns:
        str: Decimal string such as "5.00", "-0.5" or "15".

    Raises:
        ValueError: If ``precision`` does not match the amount.
    """
    if precision is not None and precision != value.precision:
        raise ValueError(
            f"Amount has precision {value.precision}, expected {precision}"
        )
    sign = "-" if value.units < 0 else ""
    whole, fraction = divmod(abs(value.units), 10**value.precision)
    if value.precision == 0:
        return f"{sign}{whole}"

    fraction_text = str(fraction).rjust(value.precision, "0").rstrip("0")
    if len(fraction_text) < value.scale:
        fraction_text = fraction_text.ljust(value.scale, "0")
    if not fraction_text:
        return f"{sign}{whole}"
    return f"{sign}{whole}{DECIMAL_SEPARATOR}{fraction_text}"


def safe_parse_fixed(
    decimal: str,
    precision: int,
    logger: Logger | None = None,
) -> FixedPointAmount:
    """Truncate and parse, treating malformed input as zero.

    Args:
        decimal: Untrusted decimal string from upstream data.
        precision: Working precision.
        logger: Optional logger used to report discarded values.

    Returns:
        FixedPointAmount: Parsed value, or zero when unparseable.
    """
    try:
        return parse_fixed(truncate_decimal(decimal, precision), precision)
    except InvalidDecimalError as exc:
        if logger is not None:
            logger.warning(f"{exc}; treating it as zero")
        return FixedPointAmount.zero(precision)


__all__ = [
    "truncate_decimal",
    "parse_fixed",
    "format_fixed",
    "safe_parse_fixed",
]
