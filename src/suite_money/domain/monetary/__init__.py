"""Monetary domain package.

This package contains classes for handling monetary amounts and currencies,
including Currency definitions and Money calculations with exact integer
minor-unit arithmetic.
"""
from suite_money.domain.monetary.amount import Amount
from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.errors import AmountOverflowError, CurrencyMismatchError, InvalidArgumentError

# Populates the currency registry
from suite_money.domain.monetary import currency_registry  # noqa: F401

from suite_money.domain.monetary.money import Money

__all__ = [
    "Amount",
    "AmountOverflowError",
    "Currency",
    "CurrencyMismatchError",
    "InvalidArgumentError",
    "Money",
]
