from __future__ import annotations

from decimal import Decimal

from suite_money.domain.monetary import allocation, calculator
from suite_money.domain.monetary.amount import Amount
from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.errors import CurrencyMismatchError


class Money:
    """Represents a monetary amount in integer minor units together with its currency.

    All arithmetic is integer-only and delegated to `calculator` and `allocation`. Every
    operation returns a new Money; instances are never mutated.

    Examples:
        >>> Money(100, "GBP").display()
        '£1.00'
        >>> [m.amount for m in Money(100, "EUR").split(3)]
        [34, 33, 33]
    """

    __slots__ = ("_amount", "_currency")

    def __init__(self, amount: int | Amount, currency: Currency | str):
        """Initialize Money with minor-unit amount and currency.

        Args:
            amount: Number of minor units (e.g. cents), or an `Amount`.
            currency: Currency object, or a code looked up in the currency registry.

        Raises:
            TypeError: If $amount is not an int/Amount or $currency is not Currency/str.
            ValueError: If $currency is a code that is not registered.
            AmountOverflowError: If $amount is outside the signed 64-bit range.
        """
        # Resolve currency codes through the registry
        if isinstance(currency, str):
            currency = Currency.from_str(currency)

        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance or code, but provided value is: {currency}")

        self._amount = amount if isinstance(amount, Amount) else Amount(amount)
        self._currency = currency

    def _with(self, amount: Amount) -> Money:
        return self.__class__(amount, self._currency)

    @property
    def amount(self) -> int:
        """Get the number of minor units."""
        return self._amount.value

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    def same_currency(self, other: Money) -> bool:
        return self._currency == other._currency

    def _check_same_currency(self, other: Money) -> None:
        """Check if two Money objects have the same currency.

        Raises:
            TypeError: If $other is not Money.
            CurrencyMismatchError: If currencies don't match.
        """
        if not isinstance(other, Money):
            raise TypeError(f"$other must be a Money instance, but provided value is: {other!r}")
        if not self.same_currency(other):
            raise CurrencyMismatchError(f"Cannot operate on different currencies: {self.currency} and {other.currency}")

    # region Predicates

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_positive(self) -> bool:
        return self.amount > 0

    def is_negative(self) -> bool:
        return self.amount < 0

    # endregion

    # region Comparison (same currency required)

    def _compare(self, other: Money) -> int:
        self._check_same_currency(other)
        if self.amount > other.amount:
            return 1
        if self.amount < other.amount:
            return -1
        return 0

    def equals(self, other: Money) -> bool:
        """Check amount equality. Unlike `==`, raises `CurrencyMismatchError` for other currencies."""
        return self._compare(other) == 0

    def greater_than(self, other: Money) -> bool:
        return self._compare(other) == 1

    def greater_than_or_equal(self, other: Money) -> bool:
        return self._compare(other) >= 0

    def less_than(self, other: Money) -> bool:
        return self._compare(other) == -1

    def less_than_or_equal(self, other: Money) -> bool:
        return self._compare(other) <= 0

    def __eq__(self, other) -> bool:
        """Check equality with another Money object (amount and currency)."""
        if not isinstance(other, Money):
            return False
        if self.currency != other.currency:
            return False
        return self.amount == other.amount

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.less_than_or_equal(other)

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.greater_than_or_equal(other)

    # endregion

    # region Arithmetic

    def add(self, other: Money) -> Money:
        """Return sum of self and $other (same currency required)."""
        self._check_same_currency(other)
        return self._with(calculator.add(self._amount, other._amount))

    def subtract(self, other: Money) -> Money:
        """Return difference of self and $other (same currency required)."""
        self._check_same_currency(other)
        return self._with(calculator.subtract(self._amount, other._amount))

    def multiply(self, multiplier: int) -> Money:
        """Return self multiplied by integer $multiplier."""
        if not isinstance(multiplier, int) or isinstance(multiplier, bool):
            raise TypeError(f"$multiplier must be an int, but provided value is: {multiplier!r}")
        return self._with(calculator.multiply(self._amount, multiplier))

    def absolute(self) -> Money:
        return self._with(calculator.absolute(self._amount))

    def negative(self) -> Money:
        """Return Money with value `-|amount|`."""
        return self._with(calculator.negative(self._amount))

    def round(self) -> Money:
        """Return Money rounded to the nearest multiple of `10**currency.fraction` minor units.

        Example with 2-digit currency: 175 -> 200, 125 -> 100, -75 -> -100.
        """
        return self._with(calculator.round_to_exponent(self._amount, self._currency.fraction))

    def split(self, n: int) -> list[Money]:
        """Split into $n parties; leftover pennies go round-robin to the first parties.

        Raises:
            InvalidArgumentError: If $n is not positive.
        """
        return [self._with(a) for a in allocation.split(self._amount, n)]

    def allocate(self, *ratios: int) -> list[Money]:
        """Allocate by $ratios without losing pennies; leftover goes to the first parties.

        Raises:
            InvalidArgumentError: If no ratios are given, a ratio is negative, or they sum to zero.
        """
        return [self._with(a) for a in allocation.allocate(self._amount, ratios)]

    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        """Multiply Money by int (returns Money)."""
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __neg__(self):
        return self._with(calculator.multiply(self._amount, -1))

    def __pos__(self):
        return self._with(self._amount)

    def __abs__(self):
        return self.absolute()

    # endregion

    # region Display

    def display(self) -> str:
        """Return amount formatted with the currency template, e.g. '£1.00'."""
        return self._currency.formatter().format(self.amount)

    def as_major_units(self) -> Decimal:
        """Return amount in major units as exact Decimal, e.g. 1 USD cent -> Decimal('0.01')."""
        return self._currency.formatter().to_major_units(self.amount)

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        """Return string like 'Money(100, GBP)'."""
        return f"{self.__class__.__name__}({self.amount}, {self.currency.code})"

    def __hash__(self) -> int:
        """Hash based on amount and currency."""
        return hash((self.amount, self.currency))

    # endregion
