from __future__ import annotations

import logging
from typing import Dict

from suite_money.domain.monetary.formatter import Formatter

logger = logging.getLogger(__name__)


class Currency:
    """Represents a currency with code, fraction, and display metadata.

    Currencies are immutable and compare by value over all fields, so two descriptors built
    separately for the same currency are equal.

    Attributes:
        code (str): Currency code (e.g., "USD", "IQD").
        fraction (int): Number of minor-unit decimal digits (0-18). Used as rounding exponent.
        grapheme (str): Display symbol (e.g., "$", "£").
        template (str): Display template; "1" is replaced by the number, "$" by the grapheme.
        decimal (str): Decimal separator.
        thousand (str): Thousands separator (may be empty).
    """

    __slots__ = ("_code", "_fraction", "_grapheme", "_template", "_decimal", "_thousand")

    # Class-level registry for predefined currencies
    _registry: Dict[str, "Currency"] = {}

    def __init__(
        self,
        code: str,
        fraction: int,
        grapheme: str = "",
        template: str = "1 $",
        decimal: str = ".",
        thousand: str = ",",
    ):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code (e.g., "USD").
            fraction (int): Number of minor-unit decimal digits (0-18).
            grapheme (str): Display symbol.
            template (str): Display template with "1" as number placeholder.
            decimal (str): Decimal separator.
            thousand (str): Thousands separator.

        Raises:
            ValueError: If parameters are invalid.
            TypeError: If a display field is not a string.
        """
        # Validate inputs
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        if not isinstance(fraction, int) or isinstance(fraction, bool) or fraction < 0 or fraction > 18:
            raise ValueError(f"$fraction must be an integer between 0 and 18, but provided value is: {fraction}")

        for field_name, field_value in (("grapheme", grapheme), ("template", template), ("decimal", decimal), ("thousand", thousand)):
            if not isinstance(field_value, str):
                raise TypeError(f"${field_name} must be a string, but provided value is: {field_value!r}")

        if "1" not in template:
            raise ValueError(f"$template must contain the number placeholder '1', but provided value is: '{template}'")

        object.__setattr__(self, "_code", code.upper().strip())
        object.__setattr__(self, "_fraction", fraction)
        object.__setattr__(self, "_grapheme", grapheme)
        object.__setattr__(self, "_template", template)
        object.__setattr__(self, "_decimal", decimal)
        object.__setattr__(self, "_thousand", thousand)

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def fraction(self) -> int:
        """Get the number of minor-unit decimal digits."""
        return self._fraction

    @property
    def grapheme(self) -> str:
        return self._grapheme

    @property
    def template(self) -> str:
        return self._template

    @property
    def decimal(self) -> str:
        return self._decimal

    @property
    def thousand(self) -> str:
        return self._thousand

    def formatter(self) -> Formatter:
        """Return a `Formatter` configured with this currency's display fields."""
        return Formatter(
            fraction=self._fraction,
            decimal=self._decimal,
            thousand=self._thousand,
            grapheme=self._grapheme,
            template=self._template,
        )

    @classmethod
    def register(cls, currency: "Currency", overwrite: bool = False) -> None:
        """Register a currency in the global registry.

        Args:
            currency (Currency): The currency to register.
            overwrite (bool): Whether to overwrite existing currency.

        Raises:
            ValueError: If currency already exists and overwrite is False.
            TypeError: If currency is not Currency instance.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        if currency.code in cls._registry and not overwrite:
            raise ValueError(f"Currency with code '{currency.code}' already exists in registry. Use overwrite=True to replace it.")

        cls._registry[currency.code] = currency
        logger.debug(f"Registered currency {currency!r}")

    @classmethod
    def unregister(cls, code: str) -> None:
        """Remove currency with $code from the registry. Unknown codes are ignored."""
        cls._registry.pop(code.upper().strip(), None)

    @classmethod
    def is_registered(cls, code: str) -> bool:
        return isinstance(code, str) and code.upper().strip() in cls._registry

    @classmethod
    def from_str(cls, code: str) -> "Currency":
        """Get currency from registry by code.

        Args:
            code (str): Currency code to look up (case-insensitive).

        Returns:
            Currency: The currency instance.

        Raises:
            ValueError: If currency code is not found in registry.
        """
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code}")

        code = code.upper().strip()
        if code not in cls._registry:
            raise ValueError(f"Currency with code '{code}' not found in registry. Available currencies: {list(cls._registry.keys())}")

        return cls._registry[code]

    def _key(self) -> tuple:
        return (self._code, self._fraction, self._grapheme, self._template, self._decimal, self._thousand)

    def __setattr__(self, name, value):
        raise AttributeError(f"Cannot set attribute '{name}' because `Currency` is immutable")

    def __reduce__(self):
        # copy and pickle rebuild through `__init__`, since slots cannot be assigned afterwards
        return (self.__class__, self._key())

    def __eq__(self, other) -> bool:
        """Check value equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        """Return string representation."""
        return self.code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.code}', {self.fraction}, '{self.grapheme}', '{self.template}', '{self.decimal}', '{self.thousand}')"
