__version__ = "0.0.1"

from suite_money.domain.monetary import Amount, Currency, Money
from suite_money.domain.monetary.errors import AmountOverflowError, CurrencyMismatchError, InvalidArgumentError

__all__ = ["Amount", "AmountOverflowError", "Currency", "CurrencyMismatchError", "InvalidArgumentError", "Money"]
