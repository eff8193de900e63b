import pytest

from skills.kontonummer.errors import CheckResult, KontonummerError
from skills.kontonummer.methods import (
    check_pattern_00,
    check_pattern_01,
    check_pattern_02,
    check_pattern_06,
    digit_sum,
)


@pytest.mark.parametrize(
    "number, expected",
    [(0, 0), (1, 1), (7, 7), (9, 9), (16, 7), (123, 6), (999, 27), (10**19, 1)],
)
def test_digit_sum(number, expected):
    assert digit_sum(number) == expected


def test_digit_sum_is_single_pass():
    # 999 -> 27, not reduced further to 9
    assert digit_sum(999) == 27
    assert digit_sum(digit_sum(999)) == 9


def test_digit_sum_rejects_negative():
    with pytest.raises(ValueError):
        digit_sum(-1)


@pytest.mark.parametrize(
    "account_number, weights",
    [(0, (1,)), (118, (1,)), (884, (1,)), (886, (2,)), (885, (1, 2))],
)
def test_pattern_00_valid(account_number, weights):
    assert check_pattern_00(account_number, weights) == CheckResult.ok()


def test_pattern_00_cross_sum_differs_from_plain_products():
    # body 5, weight 2 -> product 10, cross sum 1
    assert check_pattern_00(59, (2, 1))
    assert not check_pattern_01(59, (2, 1))
    assert check_pattern_01(50, (2, 1))


def test_pattern_00_invalid():
    result = check_pattern_00(883, (1,))
    assert not result
    assert result.error is KontonummerError.INVALID_CHECKSUM


def test_pattern_01_cycles_weights():
    # body 12: 2*3 + 1*7 = 13 -> 7
    assert check_pattern_01(127, (3, 7, 1))
    # body 1111: 1*3 + 1*7 + 1*1 + 1*3 = 14 -> 6
    assert check_pattern_01(11116, (3, 7, 1))
    assert not check_pattern_01(11115, (3, 7, 1))


@pytest.mark.parametrize("routine", [check_pattern_00, check_pattern_01])
@pytest.mark.parametrize("body", [0, 5, 12, 929070, 150182, 53929085, 9999999999])
def test_modulus_10_body_has_exactly_one_check_digit(routine, body):
    valid = [d for d in range(10) if routine(body * 10 + d, (2, 1))]
    assert len(valid) == 1


@pytest.mark.parametrize("provided", range(10))
def test_pattern_02_boundary_not_usable(provided):
    # body 6: 6*2 = 12, 12 % 11 = 1 -> expected 10
    result = check_pattern_02(60 + provided, (2, 3, 4, 5, 6, 7, 8, 9))
    assert result == CheckResult.fail(KontonummerError.CALCULATED_CHECKSUM_NOT_USABLE)


def test_pattern_02_valid_and_invalid():
    weights = (2, 3, 4, 5, 6, 7, 8, 9)
    assert check_pattern_02(19, weights)
    assert check_pattern_02(12345679, weights)
    assert check_pattern_02(18, weights).error is KontonummerError.INVALID_CHECKSUM


def test_pattern_02_sum_divisible_by_eleven_never_matches():
    weights = (2, 3, 4, 5, 6, 7, 8, 9)
    for provided in range(10):
        assert check_pattern_02(provided, weights).error is KontonummerError.INVALID_CHECKSUM


def test_pattern_06_boundary_accepts_zero():
    weights = (2, 3, 4, 5, 6, 7)
    assert check_pattern_06(60, weights) == CheckResult.ok()
    for provided in range(1, 10):
        result = check_pattern_06(60 + provided, weights)
        assert result.error is KontonummerError.INVALID_CHECKSUM


def test_pattern_06_regular_digit():
    assert check_pattern_06(94012341, (2, 3, 4, 5, 6, 7))
    assert not check_pattern_06(94012342, (2, 3, 4, 5, 6, 7))


@pytest.mark.parametrize("body", [1, 6, 94012, 507332101, 1234500])
def test_modulus_11_body_has_at_most_one_check_digit(body):
    weights = (2, 3, 4, 5, 6, 7, 8, 9, 10)
    assert len([d for d in range(10) if check_pattern_06(body * 10 + d, weights)]) <= 1
    assert len([d for d in range(10) if check_pattern_02(body * 10 + d, weights)]) <= 1
