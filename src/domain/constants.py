"""Domain constants for wallet balance views."""

# Fractional digits kept when recomputing fiat totals. Upstream fiat strings
# may carry more; anything beyond this is truncated before parsing.
FIAT_PRECISION = 18

DECIMAL_SEPARATOR = "."

NATIVE_TOKEN_TYPE = "NATIVE_TOKEN"


__all__ = ["FIAT_PRECISION", "DECIMAL_SEPARATOR", "NATIVE_TOKEN_TYPE"]
