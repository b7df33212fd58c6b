from __future__ import annotations

import logging
from typing import Sequence

from suite_money.domain.monetary import calculator
from suite_money.domain.monetary.amount import Amount
from suite_money.domain.monetary.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def _distribute_leftover(parties: list[Amount], leftover: int) -> list[Amount]:
    """Add $leftover to $parties one signed minor unit at a time, starting at index 0.

    Callers guarantee `abs(leftover) < len(parties)`, so every party receives at most one unit.
    """
    unit = Amount(1 if leftover > 0 else -1)
    p = 0
    while leftover != 0:
        parties[p] = calculator.add(parties[p], unit)
        leftover -= unit.value
        p += 1
    return parties


def split(amount: Amount, n: int) -> list[Amount]:
    """Split $amount into $n near-equal parts whose sum equals $amount exactly.

    Leftover minor units after truncating division go to the first parties, so earlier
    parties may receive one unit more than later ones.

    Args:
        amount: The amount to split.
        n: Number of parties.

    Returns:
        list[Amount]: $n amounts summing to $amount.

    Raises:
        InvalidArgumentError: If $n is not positive.
        TypeError: If $n is not an int.

    Examples:
        >>> [a.value for a in split(Amount(100), 3)]
        [34, 33, 33]
    """
    # Raise: split count must be an int
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"Cannot call `split` because $n must be an int, but provided value is: {n!r}")

    # Raise: split count must be positive
    if n <= 0:
        raise InvalidArgumentError(f"Cannot call `split` because $n ({n}) is not positive; split count must be positive")

    base = calculator.divide(amount, n)
    leftover = calculator.modulus(amount, n).value

    parties = [base] * n
    if leftover != 0:
        _distribute_leftover(parties, leftover)

    logger.debug(f"Split {amount} into {n} parties with base {base} and leftover {leftover}")
    return parties


def allocate(amount: Amount, ratios: Sequence[int]) -> list[Amount]:
    """Allocate $amount proportionally to $ratios without losing a minor unit.

    Each party first receives `amount * ratio / sum(ratios)` truncated toward zero. The leftover
    is then handed out one unit at a time in ratio order, starting with the first ratio.

    Args:
        amount: The amount to allocate.
        ratios: Ordered non-negative integer weights. Order decides leftover priority.

    Returns:
        list[Amount]: One amount per ratio, in the order of $ratios, summing to $amount.

    Raises:
        InvalidArgumentError: If $ratios is empty, contains a negative value, or sums to zero.
        TypeError: If a ratio is not an int.

    Examples:
        >>> [a.value for a in allocate(Amount(5), [50, 25, 25])]
        [3, 1, 1]
    """
    # Raise: at least one ratio is required
    if len(ratios) == 0:
        raise InvalidArgumentError("Cannot call `allocate` because $ratios is empty; no ratios specified")

    # Raise: ratios must be ints
    non_int_ratios = [r for r in ratios if not isinstance(r, int) or isinstance(r, bool)]
    if non_int_ratios:
        raise TypeError(f"Cannot call `allocate` because $ratios must contain only ints, but got: {non_int_ratios!r}")

    # Raise: ratios must be non-negative
    negative_ratios = [r for r in ratios if r < 0]
    if negative_ratios:
        raise InvalidArgumentError(f"Cannot call `allocate` because $ratios ({list(ratios)}) contains negative values: {negative_ratios}")

    total_ratio = sum(ratios)

    # Raise: the ratio sum is the divisor, so it must be positive
    if total_ratio == 0:
        raise InvalidArgumentError(f"Cannot call `allocate` because $ratios ({list(ratios)}) sum to zero")

    parties: list[Amount] = []
    total = 0
    for r in ratios:
        party = calculator.allocate(amount, r, total_ratio)
        parties.append(party)
        total += party.value

    leftover = amount.value - total
    if leftover != 0:
        _distribute_leftover(parties, leftover)

    logger.debug(f"Allocated {amount} by ratios {list(ratios)} with leftover {leftover}")
    return parties
