import pytest

from taylordual.gdual import GDual
from taylordual.vectorized import Vectorized


def test_variable_construction():
    x = GDual(2.0, "x", 3)
    assert x.constant_cf() == 2.0
    assert x.symbol_set == ["x"]
    assert x.symbol_set_size == 1
    assert x.order == 3
    assert x.degree == 1
    assert x.find_cf([1]) == 1.0


def test_order_zero_keeps_symbol():
    x = GDual(3.0, "x", 0)
    assert x.symbol_set == ["x"]
    assert x.degree == 0
    assert x.constant_cf() == 3.0


def test_constant_construction_and_copy():
    c = GDual(2.0)
    assert c.order == 0
    assert c.symbol_set == []
    assert str(c) == "2"
    x = GDual(1.5, "x", 2)
    assert GDual(x) == x


def test_invalid_symbol_and_order():
    with pytest.raises(ValueError):
        GDual(1.0, "dx", 2)
    with pytest.raises(ValueError):
        GDual(1.0, "", 2)
    with pytest.raises(ValueError):
        GDual(1.0, "x", 2**32)
    with pytest.raises(ValueError):
        GDual(1.0, "x", -1)


def test_extend_symbol_set():
    x = GDual(1.0, "x", 2)
    x.extend_symbol_set(["dy", "dz"])
    assert x.symbol_set == ["x", "y", "z"]
    assert x.find_cf([1, 0, 0]) == 1.0
    with pytest.raises(ValueError):
        x.extend_symbol_set(["w"])


def test_documented_example():
    x1 = GDual(1.2, "x1", 2)
    x2 = GDual(-0.1, "x2", 2)
    f = (x1 + x2) / (x1 - x2)
    assert f.symbol_set == ["x1", "x2"]
    assert f.find_cf([0, 0]) == pytest.approx(0.846154, rel=1e-5)
    assert f.find_cf([1, 0]) == pytest.approx(0.118343, rel=1e-5)
    assert f.find_cf([0, 1]) == pytest.approx(1.42012, rel=1e-5)
    assert f.find_cf([0, 2]) == pytest.approx(1.0924, rel=1e-4)
    assert f.find_cf([2, 0]) == pytest.approx(-0.0910332, rel=1e-5)
    assert f.find_cf([1, 1]) == pytest.approx(-1.00137, rel=1e-5)


def test_arithmetic_invariants():
    x = GDual(2.0, "x", 3)
    y = GDual(3.0, "y", 3)
    assert x * y == y * x
    assert (x + y) - y == x
    assert ((x * y) / y - x).is_zero(1e-12)
    assert (x / x - 1.0).is_zero(1e-12)
    assert (1.0 - x) == -(x - 1.0)
    assert +x == x


def test_scalar_division():
    x = GDual(2.0, "x", 3)
    assert ((2.0 / x) * x - 2.0).is_zero(1e-12)
    assert x / 2.0 == x * 0.5


def test_order_promotion_and_truncation():
    a = GDual(1.0, "x", 2)
    b = GDual(1.0, "y", 4)
    assert (a + b).order == 4
    cube = a * a * a
    assert cube.degree == 2
    with pytest.raises(ValueError):
        cube.find_cf([3])


def test_find_cf_length_mismatch():
    x = GDual(1.0, "x", 2)
    with pytest.raises(ValueError):
        x.find_cf([0, 0])


def test_get_derivative():
    x = GDual(2.0, "x", 3)
    f = x * x * x
    assert f.get_derivative([3]) == pytest.approx(6.0)
    assert f.get_derivative({"dx": 2}) == f.get_derivative([2])
    assert f.get_derivative({"dz": 1}) == 0.0


def test_partial_and_integrate():
    x = GDual(2.0, "x", 2)
    y = GDual(3.0, "y", 2)
    f = x * y
    assert f.partial("x") == y
    assert f.partial("x").integrate("x") == f - f.subs("dx", 0.0)
    with pytest.raises(ValueError):
        f.partial("dx")
    with pytest.raises(ValueError):
        f.integrate("dx")


def test_subs_with_number_keeps_constant():
    x = GDual(2.0, "x", 2)
    y = GDual(3.0, "y", 2)
    f = x * y
    g = f.subs("dx", 0.0)
    assert g.constant_cf() == f.constant_cf()
    assert g.symbol_set == ["x", "y"]


def test_subs_with_gdual():
    x = GDual(2.0, "x", 2)
    y = GDual(3.0, "y", 2)
    z = GDual(3.0, "z", 2)
    g = (x + y).subs("dy", z - 3.0)
    assert g == x + z
    assert g.symbol_set == ["x", "z"]
    assert g.order == 2


def test_trim():
    x = GDual(2.0, "x", 2)
    y = GDual(0.0, "y", 2)
    g = x + 1e-12 * y
    assert g.trim(1e-6) == x
    assert g.trim(0.0) == g
    with pytest.raises(ValueError):
        g.trim(-1.0)


def test_extract_terms():
    x = GDual(2.0, "x", 2)
    y = GDual(3.0, "y", 2)
    f = (x + y) * (x + y)
    parts = f.extract_terms(0) + f.extract_terms(1) + f.extract_terms(2)
    assert parts == f
    assert f.extract_terms(1).order == 1
    assert f.extract_terms(2).degree == 2
    with pytest.raises(ValueError):
        f.extract_terms(3)


def test_evaluate():
    x = GDual(2.0, "x", 2)
    y = GDual(3.0, "y", 2)
    f = x * y
    assert f.evaluate({"dx": 0.0, "dy": 0.0}) == f.constant_cf()
    assert f.evaluate({"dx": 0.5, "dy": 0.25}) == pytest.approx((2.0 + 0.5) * (3.0 + 0.25))


def test_is_zero():
    x = GDual(2.0, "x", 2)
    assert (x - x).is_zero(0.0)
    assert not x.is_zero(0.5)


def test_comparisons():
    a = GDual(1.0, "x", 2)
    b = GDual(2.0, "y", 2)
    assert a < b
    assert not a > b
    assert b > a


def test_info_and_str():
    x = GDual(2.0, "x", 3)
    text = x.info()
    assert "Order: 3" in text
    assert "Degree: 1" in text
    assert str(GDual(0.0)) == "0"


def test_vectorized_coefficients():
    x = GDual([1.0, 2.0], "x", 2)
    assert x.constant_cf() == Vectorized([1.0, 2.0])
    assert x.find_cf([1]) == 1.0
    assert ((x * x) / x - x).is_zero(1e-12)


def test_complex_coefficients():
    z = GDual(1.0 + 1.0j, "z", 2)
    assert z.constant_cf() == 1.0 + 1.0j
    assert ((z * z) / z - z).is_zero(1e-12)