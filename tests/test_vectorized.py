import math

import pytest

from taylordual.vectorized import Vectorized, fma3


def test_default_is_single_zero():
    v = Vectorized()
    assert v.values == [0.0]
    assert v.is_zero()


def test_scalar_and_list_construction():
    assert Vectorized(2.5).values == [2.5]
    assert Vectorized([1, 2, 3]).values == [1.0, 2.0, 3.0]
    assert len(Vectorized([1, 2, 3])) == 3


def test_empty_raises():
    with pytest.raises(ValueError):
        Vectorized([])


def test_getitem_broadcasts_single_element():
    v = Vectorized([7.0])
    assert v[0] == 7.0
    assert v[5] == 7.0
    w = Vectorized([1.0, 2.0])
    assert w[1] == 2.0


def test_setitem_and_iter():
    v = Vectorized([1.0, 2.0, 3.0])
    v[1] = -4
    assert list(v) == [1.0, -4.0, 3.0]


def test_resize():
    v = Vectorized([1.0])
    v.resize(3, 1.0)
    assert v.values == [1.0, 1.0, 1.0]
    v.resize(2)
    assert v.values == [1.0, 1.0]
    with pytest.raises(ValueError):
        v.resize(0)


def test_same_size_addition():
    assert (Vectorized([1, 2]) + Vectorized([3, 4])).values == [4.0, 6.0]


def test_scalar_broadcast_equivalence():
    a = Vectorized([1.0, -2.0, 3.5])
    full = Vectorized([1.5, 1.5, 1.5])
    assert (a + 1.5).values == (a + full).values
    assert (1.5 + a).values == (full + a).values
    assert (a - 1.5).values == (a - full).values
    assert (1.5 - a).values == (full - a).values
    assert (a * 1.5).values == (a * full).values
    assert (1.5 / a).values == (full / a).values
    assert (a / 1.5).values == (a / full).values


def test_single_element_vector_broadcasts_both_sides():
    a = Vectorized([1.0, 2.0, 4.0])
    s = Vectorized([2.0])
    assert (s - a).values == (2.0 - a).values
    assert (a * s).values == (s * a).values


def test_round_trip_identities():
    a = Vectorized([1.0, -2.0, 3.0])
    b = Vectorized([0.5, 4.0, -1.0])
    assert (a + b - b) == a
    assert (a * b / b) == a
    assert (a * 2) == (a + a)
    assert (-(-a)) == a


def test_mismatched_sizes_raise():
    with pytest.raises(ValueError, match=r"different sizes in \+"):
        Vectorized([1, 2]) + Vectorized([1, 2, 3])
    with pytest.raises(ValueError, match="different sizes in /"):
        Vectorized([1, 2]) / Vectorized([1, 2, 3])


def test_division_by_zero_follows_ieee():
    r = Vectorized([1.0, -1.0, 0.0]) / 0.0
    assert r[0] == math.inf
    assert r[1] == -math.inf
    assert math.isnan(r[2])


def test_equality_rules():
    assert Vectorized([3.0, 3.0]) == Vectorized([3.0])
    assert Vectorized([3.0]) == 3
    assert 3 == Vectorized([3.0, 3.0])
    assert Vectorized([1.0, 2.0]) != Vectorized([1.0, 2.0, 3.0])
    assert Vectorized([1.0, 2.0]) != 1.0


def test_ordering_rules():
    assert Vectorized([1.0, 2.0]) < Vectorized([1.0, 3.0])
    assert Vectorized([5.0]) > Vectorized([1.0, 2.0])
    assert not (Vectorized([1.0, 6.0]) < 5.0)
    assert Vectorized([1.0, 2.0]) < 5.0
    assert not (Vectorized([1, 2]) > Vectorized([1, 2, 3]))


def test_is_zero():
    assert Vectorized([0.0, 0.0]).is_zero()
    assert not Vectorized([0.0, 1e-300]).is_zero()


def test_str_short_and_long():
    assert str(Vectorized([1, 2, 3])) == "[1, 2, 3]"
    assert str(Vectorized([1, 2, 3, 4, 5, 6])) == "[1, 2, 3, 4, 5, ... ]"
    assert repr(Vectorized([0.5])) == "Vectorized([0.5])"


def test_map_applies_elementwise():
    v = Vectorized([0.0, 1.0])
    r = v.map(math.exp)
    assert r.values == [math.exp(0.0), math.exp(1.0)]
    assert v.values == [0.0, 1.0]


def test_fma3_all_equal_sizes():
    acc = Vectorized([1.0, 1.0])
    x = Vectorized([2.0, 3.0])
    y = Vectorized([4.0, 5.0])
    expected = (Vectorized([1.0, 1.0]) + x * y).values
    fma3(acc, x, y)
    assert acc.values == expected


@pytest.mark.parametrize(
    "acc_vals,x_vals,y_vals",
    [
        ([1.0], [2.0], [1.0, 2.0, 3.0]),
        ([1.0], [1.0, 2.0, 3.0], [2.0]),
        ([1.0], [1.0, 2.0], [3.0, 4.0]),
        ([1.0, 2.0], [3.0], [4.0]),
        ([1.0, 2.0], [3.0], [4.0, 5.0]),
        ([1.0, 2.0], [3.0, 4.0], [5.0]),
    ],
)
def test_fma3_broadcast_matches_operators(acc_vals, x_vals, y_vals):
    acc = Vectorized(acc_vals)
    x = Vectorized(x_vals)
    y = Vectorized(y_vals)
    expected = Vectorized(acc_vals) + x * y
    fma3(acc, x, y)
    assert acc.values == expected.values


def test_fma3_mismatch_raises():
    with pytest.raises(ValueError, match="fma3"):
        fma3(Vectorized([1.0]), Vectorized([1.0, 2.0]), Vectorized([1.0, 2.0, 3.0]))
    with pytest.raises(ValueError, match="fma3"):
        fma3(Vectorized([1.0, 2.0]), Vectorized([1.0]), Vectorized([1.0, 2.0, 3.0]))