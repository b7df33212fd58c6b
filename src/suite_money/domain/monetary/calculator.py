from __future__ import annotations

from suite_money.domain.monetary.amount import Amount


# region Integer helpers


def _truncating_div(n: int, d: int) -> int:
    """Integer division rounded toward zero.

    Python's `//` floors toward negative infinity, so it cannot be used directly on signed
    values here.
    """
    q = abs(n) // abs(d)
    return -q if (n < 0) != (d < 0) else q


def _truncating_mod(n: int, d: int) -> int:
    """Remainder consistent with `_truncating_div`; its sign follows $n."""
    return n - d * _truncating_div(n, d)


# endregion

# region Arithmetic


def add(a: Amount, b: Amount) -> Amount:
    return Amount(a.value + b.value)


def subtract(a: Amount, b: Amount) -> Amount:
    return Amount(a.value - b.value)


def multiply(a: Amount, m: int) -> Amount:
    """Scale $a by integer multiplier $m (negative and zero allowed)."""
    return Amount(a.value * m)


def divide(a: Amount, d: int) -> Amount:
    """Divide $a by $d, truncating toward zero.

    Raises:
        ZeroDivisionError: If $d is zero.
    """
    return Amount(_truncating_div(a.value, d))


def modulus(a: Amount, d: int) -> Amount:
    """Remainder of `divide($a, $d)`; the sign follows $a.

    Raises:
        ZeroDivisionError: If $d is zero.
    """
    return Amount(_truncating_mod(a.value, d))


def allocate(a: Amount, r: int, s: int) -> Amount:
    """Raw share of $a for ratio $r out of ratio sum $s, i.e. `a * r / s` truncated toward zero.

    Truncation guarantees that raw shares of all parties never exceed $a in magnitude, so the
    leftover is always distributed by adding units with the sign of $a.
    """
    return Amount(_truncating_div(a.value * r, s))


def absolute(a: Amount) -> Amount:
    return Amount(abs(a.value))


def negative(a: Amount) -> Amount:
    """Return `-|a|`. Zero stays zero."""
    return Amount(-abs(a.value))


def round_to_exponent(a: Amount, e: int) -> Amount:
    """Round magnitude of $a to the nearest multiple of `10**e` and reapply the sign.

    The magnitude is bumped up only when its remainder is strictly greater than half of
    `10**e`. An exact half is truncated down.

    Examples:
        >>> round_to_exponent(Amount(125), 2)
        Amount(100)
        >>> round_to_exponent(Amount(175), 2)
        Amount(200)
        >>> round_to_exponent(Amount(-75), 2)
        Amount(-100)
        >>> round_to_exponent(Amount(50), 2)
        Amount(0)
    """
    if e < 0:
        raise ValueError(f"Cannot call `round_to_exponent` because $e ({e}) is negative")

    if a.value == 0:
        return Amount(0)

    magnitude = abs(a.value)
    exp = 10**e

    if magnitude % exp > exp // 2:
        magnitude += exp

    magnitude = (magnitude // exp) * exp

    return Amount(-magnitude if a.value < 0 else magnitude)


# endregion
