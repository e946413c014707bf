"""
Tests for positional and labeled monomials.
"""
import pytest

from algebra.errors import ConstructionError
from algebra.monomials import IndexedMonomial, Monomial, Variable, lockstep


class TestIndexedMonomial:
    """Exponent tuples aligned to variables 0..n-1."""

    def test_trailing_zeros_are_trimmed(self):
        assert IndexedMonomial((1, 0, 0)).exps == (1,)
        assert IndexedMonomial((0, 0)) == IndexedMonomial(())
        assert hash(IndexedMonomial((2, 0))) == hash(IndexedMonomial((2,)))

    def test_negative_exponent(self):
        with pytest.raises(ConstructionError):
            IndexedMonomial((1, -1))

    def test_order(self):
        assert IndexedMonomial((2,)) > IndexedMonomial((1, 5))
        assert IndexedMonomial((1, 1)) > IndexedMonomial((1, 0, 3))
        assert IndexedMonomial((0, 1)) > IndexedMonomial(())
        assert max([IndexedMonomial((0, 3)), IndexedMonomial((1,)), IndexedMonomial(())]) == IndexedMonomial((1,))

    def test_products_and_quotients(self):
        m = IndexedMonomial((2, 2, 1))
        n = IndexedMonomial((1, 2))
        assert n.divides(m)
        assert not IndexedMonomial((1, 3)).divides(m)
        assert m / n == IndexedMonomial((1, 0, 1))
        assert n * IndexedMonomial((0, 0, 4)) == IndexedMonomial((1, 2, 4))
        assert n.lcm(IndexedMonomial((3,))) == IndexedMonomial((3, 2))

    def test_variables_and_degree(self):
        m = IndexedMonomial((2, 0, 1))
        assert m.degree == 3
        assert m.variables == (0, 2)
        assert m.exponent(2) == 1
        assert m.exponent(7) == 0

    def test_drop_and_with_exponent(self):
        m = IndexedMonomial((2, 0, 1))
        assert m.drop((2,)) == IndexedMonomial((2,))
        assert m.with_exponent(4, 3) == IndexedMonomial((2, 0, 1, 0, 3))
        assert m.with_exponent(2, 0) == IndexedMonomial((2,))

    def test_to_string(self):
        m = IndexedMonomial((2, 0, 1))
        assert m.to_string(lambda i: f"t_{i + 1}") == "t_1^2 t_3"


class TestMonomial:
    """Sorted (Variable, exponent) pairs."""

    def test_canonical_form(self):
        x, y = Variable("x"), Variable("y")
        assert Monomial({y: 1, x: 2}).exps == ((x, 2), (y, 1))
        assert Monomial({x: 2, y: 0}).exps == ((x, 2),)
        assert Monomial({"x": 1}) == Monomial.new(x)

    def test_rejects_bad_input(self):
        x = Variable("x")
        with pytest.raises(ConstructionError):
            Monomial({x: -1})
        with pytest.raises(ConstructionError):
            Monomial([(x, 1), (x, 2)])
        with pytest.raises(ConstructionError):
            Monomial({0: 1})

    def test_order(self):
        x, y = Variable("x"), Variable("y")
        assert Monomial({x: 1}) > Monomial({y: 5})
        assert Monomial({x: 1, y: 1}) > Monomial({x: 1})
        assert Monomial({y: 1}) > Monomial(())

    def test_products_and_quotients(self):
        x, y = Variable("x"), Variable("y")
        m = Monomial({x: 2, y: 1})
        assert m * Monomial({y: 2}) == Monomial({x: 2, y: 3})
        assert Monomial({x: 1}).divides(m)
        assert not Monomial({y: 2}).divides(m)
        assert m / Monomial({x: 2}) == Monomial({y: 1})
        assert m.degree == 3
        assert m.variables == (x, y)

    def test_drop_and_with_exponent(self):
        x, y = Variable("x"), Variable("y")
        m = Monomial({x: 2, y: 1})
        assert m.drop((x,)) == Monomial({y: 1})
        assert m.with_exponent(x, 5) == Monomial({x: 5, y: 1})
        assert m.with_exponent(y, 0) == Monomial({x: 2})

    def test_to_string(self):
        x, y = Variable("x"), Variable("y")
        assert Monomial({x: 2, y: 1}).to_string(repr) == "x^2 y"


class TestVariable:
    """Named indeterminates."""

    def test_ordered_by_name(self):
        assert Variable("a") < Variable("b")
        assert sorted([Variable("y"), Variable("x")]) == [Variable("x"), Variable("y")]
        assert repr(Variable("x")) == "x"

    def test_empty_name(self):
        with pytest.raises(ConstructionError):
            Variable("")


class TestLockstep:
    """Merging two sorted (key, value) streams."""

    def test_merge(self):
        xs = iter([(1, "a"), (3, "c")])
        ys = iter([(2, "B"), (3, "C")])
        assert list(lockstep(xs, ys, None)) == [(1, "a", None), (2, None, "B"), (3, "c", "C")]
