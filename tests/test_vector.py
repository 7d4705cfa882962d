import math

import pytest

from labkit import vector as v


@pytest.mark.parametrize(
    "x, y",
    [([1, 2, 3], [4, 5, 6]), ([-10, 0, 7], [3, -3, 0]), ([], [])],
)
def test_integer_add_sub_round_trip(x, y):
    assert v.isub_vec(v.iadd_vec(x, y), y) == x


def test_integer_mul_matches_scalar_mul():
    x = [3, -4, 5, 0]
    assert v.imul_vec(x, [6] * len(x)) == v.imulk_vec(x, 6)


def test_integer_division_truncates_toward_zero():
    assert v.idiv_vec([7, -7, 7, -7], [2, 2, -2, -2]) == [3, -3, -3, 3]


def test_integer_scalar_division_matches_vector_division():
    x = [9, -9, 14, -1]
    assert v.idivk_vec(x, 4) == v.idiv_vec(x, [4] * len(x))


def test_integer_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        v.idiv_vec([1, 2], [1, 0])
    with pytest.raises(ZeroDivisionError):
        v.idivk_vec([1], 0)


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        v.iadd_vec([1, 2], [1])
    with pytest.raises(ValueError):
        v.radd_vec([1.0], [1.0, 2.0])


def test_reverse():
    assert v.irev_vec([1, 2, 3]) == [3, 2, 1]
    x = [1.5, 2.5, -3.0]
    assert v.rrev_vec(v.rrev_vec(x)) == x


@pytest.mark.parametrize("desc_flag", [0, 2])
def test_integer_sort_orders(desc_flag):
    x = [5, -1, 3, 3, 0]
    ascending = v.isort_vec(x, 1)
    descending = v.isort_vec(x, desc_flag)
    assert all(a <= b for a, b in zip(ascending, ascending[1:]))
    assert descending == list(reversed(ascending))
    assert sorted(ascending) == sorted(x)
    assert x == [5, -1, 3, 3, 0]


def test_real_sort_orders():
    x = [2.5, -1.0, 0.25]
    assert v.rsort_vec(x, 1) == [-1.0, 0.25, 2.5]
    assert v.rsort_vec(x, 0) == [2.5, 0.25, -1.0]


def test_real_add_sub_round_trip():
    x = [1.25, -2.5, 3.0]
    y = [0.5, 0.25, -1.0]
    assert v.rsub_vec(v.radd_vec(x, y), y) == pytest.approx(x)


def test_real_mul_div_round_trip():
    x = [1.25, -2.5, 3.0]
    y = [0.5, 4.0, -8.0]
    assert v.rdiv_vec(v.rmul_vec(x, y), y) == pytest.approx(x)


def test_real_scalar_round_trip():
    x = [1.0, -3.5, 7.25]
    assert v.rdivk_vec(v.rmulk_vec(x, 2.5), 2.5) == pytest.approx(x)


def test_real_division_by_zero_follows_ieee():
    result = v.rdiv_vec([1.0, -1.0, 0.0], [0.0, 0.0, 0.0])
    assert result[0] == math.inf
    assert result[1] == -math.inf
    assert math.isnan(result[2])


def test_real_scalar_division_by_negative_zero():
    assert v.rdivk_vec([2.0], -0.0) == [-math.inf]