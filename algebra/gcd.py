"""GCD of multivariate polynomials over a field, eliminating one variable at a time.

Recursion depth is bounded by the number of distinct variables. A nonzero
constant argument is returned as is: the GCD is only determined up to a unit.
"""
from typing import Any, Iterable, List, Union

from logzero import logger

from .division import require_field
from .errors import ConstructionError
from .polynomials import BasePolynomial
from .rational_functions import RationalFunction, RationalFunctionField
from .rings import F
from .univariate import UnivariatePolynomial, euclid_gcd

def mark_out(poly, key):
    field = RationalFunctionField(poly.ring, poly.labeled)
    return UnivariatePolynomial(field, [RationalFunction(c) for c in poly.coefficients_by(key)])

def mark_in(univariate, key, kind):
    coefficients = list(univariate.coefficients)
    for i in range(len(coefficients)):
        current = coefficients[i].reduced()
        coefficients = [c * current.denominator for c in coefficients]
        coefficients[i] = RationalFunction(current.numerator)
    numerators = [c.numerator for c in coefficients]
    content = polynomial_gcd(numerators)
    return kind.from_coefficients(univariate.ring.base, [n / content for n in numerators], key)

def primitive_part(univariate, key, kind):
    return mark_out(mark_in(univariate, key, kind), key)

def polynomial_bin_gcd(p: BasePolynomial[F], q: BasePolynomial[F]) -> BasePolynomial[F]:
    if type(p) is not type(q) or p.ring != q.ring:
        raise ConstructionError(f"can't take the gcd of {p!r} and {q!r}")
    if p.is_zero:
        return q
    if q.is_zero:
        return p
    if p.is_constant:
        return p
    if q.is_constant:
        return q
    require_field(p.ring)

    kind = type(p)
    key = p.main_variable(q)
    logger.debug("gcd of %s and %s, eliminating %s", p, q, key)
    g = euclid_gcd(mark_out(p, key), mark_out(q, key), lambda r: primitive_part(r, key, kind))
    g = mark_in(g, key, kind)
    content = polynomial_gcd((p / g).coefficients_by(key) + (q / g).coefficients_by(key))
    logger.debug("gcd in %s is %s with content %s", key, g, content)
    return content * g

def polynomial_gcd(*polys: Union[BasePolynomial[F], Iterable[BasePolynomial[F]]]) -> BasePolynomial[F]:
    """GCD of any number of polynomials, or of a single list of them."""
    items: List[Any] = list(polys)
    if len(items) == 1 and not isinstance(items[0], BasePolynomial):
        items = list(items[0])
    if not items:
        raise ValueError("gcd of an empty list of polynomials")
    result = items[0]
    for poly in items[1:]:
        result = polynomial_bin_gcd(result, poly)
    return result
