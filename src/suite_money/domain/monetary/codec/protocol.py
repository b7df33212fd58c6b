from __future__ import annotations

from typing import Protocol

from suite_money.domain.monetary.money import Money


# region Interface


class MoneyCodec(Protocol):
    """Translates `Money` to and from an external byte-level representation.

    A codec is passed explicitly to whatever stores or transmits Money. Replacing the wire
    format means passing a different codec, never patching shared state.
    """

    def encode(self, money: Money) -> bytes:
        """Encode $money into bytes."""
        ...

    def decode(self, data: bytes | str) -> Money:
        """Decode $data produced by `encode` back into Money.

        Raises:
            ValueError: If $data is malformed.
        """
        ...


# endregion
