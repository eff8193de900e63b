"""
Weighted-checksum routines of the Bundesbank Pruefzifferberechnungsmethoden.

Every routine takes the full account number (check digit in the units place)
and the weight pattern of the calling method. Digits left of the check digit
are weighted from right to left, the pattern repeats once exhausted:

    account 9290701, weights (2, 1)
    body 929070  ->  0*2, 7*1, 0*2, 9*1, 2*2, 9*1

Digits are always extracted with divmod, so leading zeros are irrelevant.
"""

from __future__ import annotations

from itertools import cycle
from typing import Callable, Optional, Sequence, Tuple

from skills.kontonummer.errors import CheckResult, KontonummerError

Weights = Sequence[int]


def digit_sum(number: int) -> int:
    """Sum of the decimal digits of ``number`` (single pass, 16 -> 7, 999 -> 27)."""
    if number < 0:
        raise ValueError(f"digit_sum expects a non-negative integer, got {number}")
    total = 0
    while number:
        number, digit = divmod(number, 10)
        total += digit
    return total


def _split(account_number: int) -> Tuple[int, int]:
    """Return (body, provided check digit)."""
    return divmod(account_number, 10)


def _weighted_sum(
    body: int,
    weights: Weights,
    reduce_product: Optional[Callable[[int], int]] = None,
) -> int:
    total = 0
    for weight in cycle(weights):
        if not body:
            break
        body, digit = divmod(body, 10)
        product = weight * digit
        total += reduce_product(product) if reduce_product else product
    return total


def _compare(expected: int, provided: int) -> CheckResult:
    if expected == provided:
        return CheckResult.ok()
    return CheckResult.fail(KontonummerError.INVALID_CHECKSUM)


def check_pattern_00(account_number: int, weights: Weights) -> CheckResult:
    """Modulus 10, cross sum of every product."""
    body, provided = _split(account_number)
    total = _weighted_sum(body, weights, digit_sum)
    return _compare((10 - total % 10) % 10, provided)


def check_pattern_01(account_number: int, weights: Weights) -> CheckResult:
    """Modulus 10, plain products."""
    body, provided = _split(account_number)
    total = _weighted_sum(body, weights)
    return _compare((10 - total % 10) % 10, provided)


def check_pattern_02(account_number: int, weights: Weights) -> CheckResult:
    """
    Modulus 11. An expected digit of 10 cannot be represented, such account
    numbers are not verifiable and fail independent of the provided digit.
    """
    body, provided = _split(account_number)
    expected = 11 - _weighted_sum(body, weights) % 11
    if expected == 10:
        return CheckResult.fail(KontonummerError.CALCULATED_CHECKSUM_NOT_USABLE)
    return _compare(expected, provided)


def check_pattern_06(account_number: int, weights: Weights) -> CheckResult:
    """Modulus 11. An expected digit of 10 is accepted as check digit 0."""
    body, provided = _split(account_number)
    expected = 11 - _weighted_sum(body, weights) % 11
    if expected == 10 and provided == 0:
        return CheckResult.ok()
    return _compare(expected, provided)
