from __future__ import annotations

import logging

from suite_money.domain.monetary.codec import JsonMoneyCodec
from suite_money.domain.monetary.money import Money


logger = logging.getLogger(__name__)


def run() -> None:
    # A restaurant bill of 100.00 GBP
    bill = Money(10000, "GBP")

    # Three friends pay equal shares; the first one covers the extra penny
    for i, share in enumerate(bill.split(3)):
        logger.info(f"Friend #{i} pays {share.display()}")

    # Tip of 10.01 GBP split 50/30/20 between staff
    tip = Money(1001, "GBP")
    for name, part in zip(("waiter", "kitchen", "bar"), tip.allocate(50, 30, 20)):
        logger.info(f"{name} receives {part.display()}")

    # Persist the bill
    codec = JsonMoneyCodec()
    data = codec.encode(bill)
    logger.info(f"Encoded bill: {data.decode('utf-8')}, decoded back: {codec.decode(data)!r}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    run()
