"""Euclidean division of multivariate polynomials over a field."""
from typing import TYPE_CHECKING, Any, NamedTuple

from logzero import logger

from .errors import AlgebraError, ConstructionError, DivideByZero
from .rings import F, Field

if TYPE_CHECKING:
    from .polynomials import BasePolynomial

class DivisionResult(NamedTuple):
    quotient  : Any
    remainder : Any

def require_field(ring):
    if not isinstance(ring, Field):
        raise AlgebraError(f"{ring!r} is not a field, can't divide")

def divide_with_remainder(dividend: "BasePolynomial[F]", divisor: "BasePolynomial[F]") -> DivisionResult:
    """Cancel leading terms while `lm(divisor)` divides `lm(remainder)`."""
    if type(dividend) is not type(divisor) or dividend.ring != divisor.ring:
        raise ConstructionError(f"can't divide {type(dividend).__name__} over {dividend.ring!r}"
                                f" by {type(divisor).__name__} over {divisor.ring!r}")
    ring = dividend.ring
    require_field(ring)
    if divisor.is_zero:
        raise DivideByZero("polynomial division by zero")
    if dividend.is_zero:
        return DivisionResult(dividend, dividend)

    divisor_lm, divisor_lc = divisor.leading_term()
    quotient = dividend.builder()
    remainder = dividend
    steps = 0
    while divisor_lm.divides(remainder.lm()):
        mono = remainder.lm() / divisor_lm
        coeff = ring.div(remainder.lc(), divisor_lc)
        quotient.add(mono, coeff)
        builder = remainder.builder()
        builder.add_terms(remainder.terms)
        builder.add_terms(divisor.terms, ring.neg(coeff), mono)
        remainder = builder.build(type(dividend))
        steps += 1
        if remainder.is_zero:
            break
    logger.debug("division by %s took %s steps", divisor, steps)
    return DivisionResult(quotient.build(type(dividend)), remainder)

def divide_by_constant(poly: "BasePolynomial[F]", value) -> "BasePolynomial[F]":
    ring = poly.ring
    require_field(ring)
    value = ring.coerce(value)
    return poly.from_terms(ring, {m: ring.div(c, value) for m, c in poly.terms.items()})
