from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when an allocation operation receives an argument it cannot work with.

    Examples are a non-positive split count or an empty ratio sequence.
    """


class CurrencyMismatchError(ValueError):
    """Raised when a binary operation is invoked on `Money` values of different currencies."""


class AmountOverflowError(OverflowError):
    """Raised when an `Amount` would leave the signed 64-bit range."""
