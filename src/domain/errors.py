"""Domain exceptions."""


class InvalidDecimalError(ValueError):
    """Raised when a decimal string cannot be represented at a precision."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"Invalid decimal '{value}': {reason}")
        self.value = value
        self.reason = reason


__all__ = ["InvalidDecimalError"]
