from __future__ import annotations

from suite_money.domain.monetary.errors import AmountOverflowError

# Value limits (signed 64-bit)
AMOUNT_MIN = -(2**63)
AMOUNT_MAX = 2**63 - 1


class Amount:
    """Immutable quantity of minor currency units (e.g. cents).

    An Amount carries no currency. All arithmetic on it lives in
    `suite_money.domain.monetary.calculator` and always returns a new instance.

    Attributes:
        value (int): Number of minor units, within [AMOUNT_MIN, AMOUNT_MAX].
    """

    __slots__ = ("_value",)

    def __init__(self, value: int):
        """Initialize an Amount.

        Args:
            value (int): Number of minor units.

        Raises:
            TypeError: If $value is not an int.
            AmountOverflowError: If $value is outside the signed 64-bit range.
        """
        # Raise: $value must be an int (bool is rejected too, it is not a quantity)
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"$value must be an int, but provided value is: {value!r}")

        # Raise: $value must fit into signed 64-bit range
        if value < AMOUNT_MIN or value > AMOUNT_MAX:
            raise AmountOverflowError(f"$value must be within [{AMOUNT_MIN}, {AMOUNT_MAX}], but provided value is: {value}")

        self._value = value

    @property
    def value(self) -> int:
        """Get the number of minor units."""
        return self._value

    def __setattr__(self, name, value):
        if hasattr(self, "_value"):
            raise AttributeError(f"Cannot set attribute '{name}' because `Amount` is immutable")
        super().__setattr__(name, value)

    def __reduce__(self):
        return (self.__class__, (self._value,))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Amount):
            return False
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __int__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value})"
