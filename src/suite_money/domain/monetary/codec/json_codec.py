from __future__ import annotations

import json
from typing import Callable

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.money import Money

from .protocol import MoneyCodec


class JsonMoneyCodec(MoneyCodec):
    """Default JSON codec: `{"amount": 12345, "currency": "IQD"}`.

    Args:
        amount_key: JSON field holding the integer minor-unit amount.
        currency_key: JSON field holding the currency code.
        currency_lookup: Resolves a currency code into `Currency`. Defaults to the registry.
    """

    __slots__ = ("_amount_key", "_currency_key", "_currency_lookup")

    def __init__(
        self,
        amount_key: str = "amount",
        currency_key: str = "currency",
        currency_lookup: Callable[[str], Currency] = Currency.from_str,
    ) -> None:
        # Raise: field names must be distinct, otherwise one would overwrite the other
        if amount_key == currency_key:
            raise ValueError(f"Cannot init `JsonMoneyCodec` because $amount_key and $currency_key are both '{amount_key}'")

        self._amount_key = amount_key
        self._currency_key = currency_key
        self._currency_lookup = currency_lookup

    def encode(self, money: Money) -> bytes:
        """Implements: MoneyCodec.encode"""
        payload = {self._amount_key: money.amount, self._currency_key: money.currency.code}
        return json.dumps(payload, separators=(",", ":")).encode("utf-8")

    def decode(self, data: bytes | str) -> Money:
        """Implements: MoneyCodec.decode

        Raises:
            ValueError: If $data is not a JSON object with an integer amount and a known currency code.
        """
        try:
            payload = json.loads(data)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Cannot call `decode` because $data ({data!r}) is not valid JSON") from e

        # Raise: payload must be an object with both fields
        if not isinstance(payload, dict):
            raise ValueError(f"Cannot call `decode` because $data ({data!r}) is not a JSON object")
        missing = [k for k in (self._amount_key, self._currency_key) if k not in payload]
        if missing:
            raise ValueError(f"Cannot call `decode` because $data ({data!r}) is missing fields: {missing}")

        amount = payload[self._amount_key]
        code = payload[self._currency_key]

        # Raise: amount must be integral; floats would silently lose minor units
        if not isinstance(amount, int) or isinstance(amount, bool):
            raise ValueError(f"Cannot call `decode` because field '{self._amount_key}' ({amount!r}) is not an integer")
        if not isinstance(code, str):
            raise ValueError(f"Cannot call `decode` because field '{self._currency_key}' ({code!r}) is not a string")

        return Money(amount, self._currency_lookup(code))
