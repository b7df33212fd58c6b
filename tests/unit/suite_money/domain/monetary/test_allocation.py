import logging
import random

import pytest

from suite_money.domain.monetary import allocation
from suite_money.domain.monetary.amount import Amount
from suite_money.domain.monetary.errors import InvalidArgumentError


def _values(amounts: list[Amount]) -> list[int]:
    return [a.value for a in amounts]


# region Split


@pytest.mark.parametrize(
    "value, n, expected",
    [
        (100, 3, [34, 33, 33]),
        (100, 4, [25, 25, 25, 25]),
        (5, 3, [2, 2, 1]),
        (-100, 3, [-34, -33, -33]),
        (-5, 3, [-2, -2, -1]),
        (0, 2, [0, 0]),
        (2, 5, [1, 1, 0, 0, 0]),
        (7, 1, [7]),
    ],
)
def test_split_examples(value, n, expected):
    assert _values(allocation.split(Amount(value), n)) == expected


@pytest.mark.parametrize("n", [0, -1, -10])
def test_split_rejects_non_positive_count(n):
    with pytest.raises(InvalidArgumentError, match="split count must be positive"):
        allocation.split(Amount(100), n)


def test_split_sum_and_fairness_bound():
    """Split always sums to the amount and every share is within 1 unit of amount / n."""
    rng = random.Random(7)
    for _ in range(300):
        value = rng.randint(-10**12, 10**12)
        n = rng.randint(1, 40)

        parties = _values(allocation.split(Amount(value), n))

        assert len(parties) == n
        assert sum(parties) == value
        for p in parties:
            assert abs(p * n - value) <= n


# endregion

# region Allocate


@pytest.mark.parametrize(
    "value, ratios, expected",
    [
        (100, [50, 50], [50, 50]),
        (100, [30, 30, 30], [34, 33, 33]),
        (200, [25, 25, 50], [50, 50, 100]),
        (5, [50, 25, 25], [3, 1, 1]),
        (-5, [50, 25, 25], [-3, -1, -1]),
        (100, [33, 33, 33], [34, 33, 33]),
        (100, [1], [100]),
        (0, [1, 2], [0, 0]),
    ],
)
def test_allocate_examples(value, ratios, expected):
    assert _values(allocation.allocate(Amount(value), ratios)) == expected


def test_allocate_rejects_empty_ratios():
    with pytest.raises(InvalidArgumentError, match="no ratios specified"):
        allocation.allocate(Amount(100), [])


def test_allocate_rejects_negative_ratio():
    with pytest.raises(InvalidArgumentError):
        allocation.allocate(Amount(100), [50, -10])


def test_allocate_rejects_zero_ratio_sum():
    with pytest.raises(InvalidArgumentError):
        allocation.allocate(Amount(100), [0, 0])


def test_allocate_keeps_ratio_order():
    assert _values(allocation.allocate(Amount(100), [10, 70, 20])) == [10, 70, 20]
    assert _values(allocation.allocate(Amount(10), [1, 2])) == [4, 6]


def test_allocate_sum_and_proportionality_bound():
    """Allocate always sums to the amount and each share is within 1 unit of the ideal share."""
    rng = random.Random(11)
    for _ in range(300):
        value = rng.randint(-10**12, 10**12)
        ratios = [rng.randint(0, 1000) for _ in range(rng.randint(1, 12))]
        ratio_sum = sum(ratios)
        if ratio_sum == 0:
            continue

        parties = _values(allocation.allocate(Amount(value), ratios))

        assert len(parties) == len(ratios)
        assert sum(parties) == value
        for p, r in zip(parties, ratios):
            # |p - value * r / ratio_sum| <= 1, kept in integers
            assert abs(p * ratio_sum - value * r) <= ratio_sum


# endregion

# region Argument types and logging


@pytest.mark.parametrize("n", [2.5, "3", True, None])
def test_split_rejects_non_int_count(n):
    with pytest.raises(TypeError, match=r"\$n must be an int"):
        allocation.split(Amount(100), n)


@pytest.mark.parametrize("ratios", [[0.5, 0.5], [1, "1"], [True, 1]])
def test_allocate_rejects_non_int_ratios(ratios):
    with pytest.raises(TypeError, match=r"\$ratios must contain only ints"):
        allocation.allocate(Amount(100), ratios)


def test_split_and_allocate_log_debug_line(caplog):
    caplog.set_level(logging.DEBUG, logger=allocation.__name__)

    allocation.split(Amount(100), 3)
    allocation.allocate(Amount(5), [50, 25, 25])

    messages = [r.getMessage() for r in caplog.records if r.name == allocation.__name__ and r.levelno == logging.DEBUG]
    assert messages == [
        "Split 100 into 3 parties with base 33 and leftover 1",
        "Allocated 5 by ratios [50, 25, 25] with leftover 1",
    ]


# endregion
