"""Helpers for the BoursoBank customer site: accounts, login keypad, quotes, ticks and orders."""

__version__ = "0.2.0"

__all__ = [
    "accounts",
    "errors",
    "feed",
    "order_models",
    "orders",
    "pad_digits",
    "settings",
    "ticks",
    "trading",
    "validate",
    "virtual_pad",
]