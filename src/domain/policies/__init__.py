"""Domain policies package."""

from .visibility import filter_visible, is_visible, normalize_hidden_tokens

__all__ = ["filter_visible", "is_visible", "normalize_hidden_tokens"]
