"""Serialization codecs for `Money`.

Codecs are plain objects implementing `MoneyCodec`; pass the one you need to the code that
stores or transmits Money.
"""
from suite_money.domain.monetary.codec.protocol import MoneyCodec
from suite_money.domain.monetary.codec.json_codec import JsonMoneyCodec

__all__ = ["MoneyCodec", "JsonMoneyCodec"]
