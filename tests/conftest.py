import pytest

from algebra import config
from algebra.monomials import Variable
from algebra.polynomials import Polynomial
from algebra.rings import QQ


@pytest.fixture(autouse=True)
def default_variable_name():
    saved = config.settings.variable_name
    config.settings.variable_name = "x"
    yield
    config.settings.variable_name = saved


@pytest.fixture
def x():
    return Polynomial.variable(QQ, 0)


@pytest.fixture
def y():
    return Polynomial.variable(QQ, 1)


@pytest.fixture
def z():
    return Polynomial.variable(QQ, 2)


@pytest.fixture
def a():
    return Variable("a").as_polynomial(QQ)


@pytest.fixture
def b():
    return Variable("b").as_polynomial(QQ)
