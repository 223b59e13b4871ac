"""Scaled-integer representation of decimal amounts."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class FixedPointAmount:
    """Decimal value stored as an integer scaled by ``10**precision``.

    Attributes:
        units: Value multiplied by ``10**precision``.
        precision: Number of fractional digits represented by ``units``.
        scale: Fractional digits shown by the source string, used when
            formatting so "15.00" renders back as "15.00".
    """

    units: int
    precision: int
    scale: int = 0

    def __sub__(self, other: "FixedPointAmount") -> "FixedPointAmount":
        if not isinstance(other, FixedPointAmount):
            return NotImplemented
        if other.precision != self.precision:
            raise ValueError(
                "Cannot subtract amounts with different precisions: "
                f"{self.precision} and {other.precision}"
            )
        return FixedPointAmount(
            units=self.units - other.units,
            precision=self.precision,
            scale=max(self.scale, other.scale),
        )

    def __neg__(self) -> "FixedPointAmount":
        return FixedPointAmount(
            units=-self.units,
            precision=self.precision,
            scale=self.scale,
        )

    @property
    def is_zero(self) -> bool:
        return self.units == 0

    @property
    def is_negative(self) -> bool:
        return self.units < 0

    def to_decimal(self) -> Decimal:
        """Return the exact value as a Decimal for presentation layers."""
        return Decimal(f"{self.units}E-{self.precision}")

    @classmethod
    def zero(cls, precision: int) -> "FixedPointAmount":
        return cls(units=0, precision=precision)


__all__ = ["FixedPointAmount"]
