"""
Tests for the canonical polynomial representation and its arithmetic.
"""
from fractions import Fraction

import pytest

from algebra import config
from algebra.errors import AlgebraError, ConstructionError
from algebra.monomials import IndexedMonomial, Monomial, Variable
from algebra.polynomials import LabeledPolynomial, Polynomial, PolynomialRing
from algebra.rings import QQ, ZZ, IntegersModulo


class TestNormalization:
    """Construction always yields the canonical form."""

    def test_empty_input(self):
        with pytest.raises(ConstructionError):
            Polynomial(QQ, {})
        with pytest.raises(ConstructionError):
            LabeledPolynomial(QQ, [])

    def test_negative_exponent(self):
        with pytest.raises(ConstructionError):
            Polynomial(QQ, {(1, -1): 1})

    def test_merges_equal_monomials(self):
        p = Polynomial(QQ, {(1, 0): 2, (1,): 3})
        assert p.terms == {IndexedMonomial((1,)): Fraction(5)}

    def test_canonical_zero(self):
        p = Polynomial(QQ, [((1,), 1), ((1, 0), -1)])
        assert p.is_zero
        assert p.terms == {IndexedMonomial(()): Fraction(0)}
        assert p.degree == -1
        assert not p

    def test_renormalizing_is_identity(self, x, y):
        p = x**2 * y - 3 * y + Fraction(1, 2)
        q = Polynomial(QQ, p.terms)
        assert q == p
        assert q.terms == p.terms

    def test_coefficients_are_coerced(self):
        p = Polynomial(QQ, {(2,): 1})
        assert all(isinstance(c, Fraction) for c in p.terms.values())
        assert Polynomial(IntegersModulo(5), {(1,): 7}).lc() == 2

    def test_mixed_monomial_kinds(self):
        with pytest.raises(ConstructionError):
            Polynomial(QQ, {Monomial({"x": 1}): 1})
        with pytest.raises(ConstructionError):
            LabeledPolynomial(QQ, {IndexedMonomial((1,)): 1})


class TestArithmetic:
    """Ring operations on polynomials."""

    def test_ring_laws(self, x, y, z):
        p = x**2 - y
        q = Fraction(1, 2) * x * y + 3
        r = z - x + 1
        assert (p + q) + r == p + (q + r)
        assert p * q == q * p
        assert p * (q + r) == p * q + p * r
        assert p - p == 0

    def test_scalars(self, x):
        assert 2 * x == x + x
        assert x * 2 == x + x
        assert 1 - x == -(x - 1)
        assert (x + 1) * Fraction(1, 2) == Polynomial(QQ, {(1,): Fraction(1, 2), (): Fraction(1, 2)})

    def test_zero_short_circuit(self, x):
        zero = x - x
        assert (zero * x).is_zero
        assert (x * zero).is_zero

    def test_power(self, x):
        assert (x + 1)**2 == x**2 + 2 * x + 1
        assert x**0 == 1
        with pytest.raises(AlgebraError):
            x**-1

    def test_mod_p(self):
        t = Polynomial.variable(IntegersModulo(5), 0)
        assert (t + 3) * (t + 2) == t**2 + 1

    def test_over_integers(self):
        t = Polynomial.variable(ZZ, 0)
        assert (t + 1) * (t - 1) == t**2 - 1

    def test_mixed_kinds(self, x, a):
        with pytest.raises(ConstructionError):
            x + a

    def test_mixed_rings(self, x):
        with pytest.raises(ConstructionError):
            x + Polynomial.variable(ZZ, 0)


class TestProperties:
    """Degrees, leading terms and friends."""

    def test_degrees(self, x, y):
        p = x**2 * y + y**3
        assert p.degree == 3
        assert p.degrees == (2, 3)
        assert p.degree_of(1) == 3
        assert p.degree_of(5) == 0
        assert p.count_of_variables == 2
        assert p.variables == (0, 1)

    def test_zero_degrees(self, x):
        zero = x - x
        assert zero.degrees == ()
        assert zero.count_of_variables == 0

    def test_leading_term(self, x, y):
        p = 3 * x**2 + y**3
        assert p.lm() == IndexedMonomial((2,))
        assert p.lc() == 3
        assert p.leading_term() == (IndexedMonomial((2,)), 3)
        assert p.coefficient((0, 3)) == 1
        assert p.coefficient((1,)) == 0

    def test_constants(self, x):
        three = Polynomial.constant(QQ, 3)
        assert three.is_constant
        assert not three.is_one
        assert Polynomial.constant(QQ, 1).is_one
        assert not x.is_constant

    def test_equality_with_scalars(self, x):
        three = Polynomial.constant(QQ, 3)
        assert three == 3
        assert three == Fraction(3)
        assert hash(three) == hash(3)
        assert x != 3
        assert x != "x"

    def test_hash(self, x, y):
        assert hash(x * y + 1) == hash(y * x + 1)
        assert len({x + y, y + x, x - y}) == 2


class TestConversions:
    """Moving between representations."""

    def test_to_labeled(self, x, y):
        x1 = Variable("x_1").as_polynomial(QQ)
        x2 = Variable("x_2").as_polynomial(QQ)
        assert (x * y + 1).to_labeled() == x1 * x2 + 1

    def test_univariate_coefficients(self, x, y):
        assert (3 * y**2 + 1).univariate_coefficients(1) == [1, 0, 3]
        with pytest.raises(ConstructionError):
            (x + y).univariate_coefficients(1)

    def test_coefficients_by(self, x, y):
        p = x**2 * y + x + y
        assert p.coefficients_by(1) == [x, x**2 + 1]
        assert Polynomial.from_coefficients(QQ, p.coefficients_by(1), 1) == p

    def test_from_coefficients_rejects_the_variable(self, x, y):
        with pytest.raises(AlgebraError):
            Polynomial.from_coefficients(QQ, [y, x], 1)

    def test_polynomial_ring(self, x):
        ring = PolynomialRing(QQ)
        assert ring.one == 1
        assert ring.zero.is_zero
        assert ring.coerce(x) is x
        assert ring.coerce(2) == 2
        with pytest.raises(ConstructionError):
            ring.coerce(Polynomial.variable(ZZ, 0))

    def test_polynomial_coefficients(self, x):
        ring = PolynomialRing(QQ)
        t = Polynomial(ring, {(1,): x + 1})
        assert t * t == Polynomial(ring, {(2,): x**2 + 2 * x + 1})
        assert t.to_string(names="t") == "(x_1 + 1) t_1"


class TestToString:
    """Textual rendering."""

    def test_positional(self, x, y):
        assert (x**2 - 2 * x * y + 3).to_string() == "x_1^2 + -2 x_1 x_2 + 3"
        assert (x - y).to_string() == "x_1 + -x_2"
        assert str(x - y) == "x_1 + -x_2"

    def test_reversed(self, x, y):
        assert (x - y).to_string(reversed=True) == "-x_2 + x_1"

    def test_names(self, x, y):
        assert (x - y).to_string("t") == "t_1 + -t_2"
        assert (x * y).to_string(lambda i: "ab"[i]) == "a b"

    def test_default_stem_from_config(self, x):
        config.set_variable_name("u")
        assert (x + 1).to_string() == "u_1 + 1"

    def test_constants(self, x):
        assert (x - x).to_string() == "0"
        assert Polynomial.constant(QQ, Fraction(1, 2)).to_string() == "1/2"

    def test_labeled(self, a, b):
        assert (a**2 * b - b).to_string() == "a^2 b + -b"
        assert (a**2 * b - b).to_string({Variable("a"): "alpha"}) == "alpha^2 b + -b"


class TestLabeled:
    """Polynomials in named variables."""

    def test_construction(self, a, b):
        p = LabeledPolynomial(QQ, {"a": 2, Monomial({"a": 1, "b": 1}): 1})
        assert p == 2 * a + a * b

    def test_variable_keys(self, a, b):
        p = a**2 * b + b**3
        assert p.variables == (Variable("a"), Variable("b"))
        assert p.count_of_variables == 2
        assert p.degrees == {Variable("a"): 2, Variable("b"): 3}
        assert p.degree_of("b") == 3
        assert p.main_variable(a) == Variable("b")

    def test_variable_constructor(self, a):
        assert LabeledPolynomial.variable(QQ, "a") == a
        assert LabeledPolynomial.variable(QQ, Variable("a"), 3) == 3 * a
