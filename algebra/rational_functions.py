"""Quotients of polynomials. Arithmetic never cancels common factors; call `reduced()` for that."""
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Generic

from logzero import logger

from .errors import ConstructionError, DivideByZero
from .polynomials import BasePolynomial, LabeledPolynomial, Polynomial
from .rings import F, Field, R, Ring, multiply_by_power

class RationalFunction(Generic[R]):
    __slots__ = ("numerator", "denominator")
    numerator   : BasePolynomial[R]
    denominator : BasePolynomial[R]

    def __init__(self, numerator: BasePolynomial[R], denominator=None):
        if not isinstance(numerator, BasePolynomial):
            raise ConstructionError(f"numerator {numerator!r} is not a polynomial")
        if denominator is None:
            denominator = numerator.one_like()
        elif type(denominator) is not type(numerator) or denominator.ring != numerator.ring:
            raise ConstructionError("numerator and denominator of different kinds")
        if denominator.is_zero:
            raise DivideByZero("rational function with zero denominator")
        self.numerator = numerator
        self.denominator = denominator

    @property
    def ring(self):
        return self.numerator.ring

    @property
    def kind(self):
        return type(self.numerator)

    def _lift(self, other):
        if isinstance(other, RationalFunction):
            if other.kind is not self.kind or other.ring != self.ring:
                raise ConstructionError(f"mismatched rational functions over {self.ring!r} and {other.ring!r}")
            return other
        return RationalFunction(self.numerator._lift(other))

    @property
    def is_zero(self):
        return self.numerator.is_zero

    @property
    def is_one(self):
        return self.numerator == self.denominator

    @property
    def degree(self):
        return self.numerator.degree - self.denominator.degree

    @property
    def variables(self):
        return tuple(sorted(set(self.numerator.variables) | set(self.denominator.variables)))

    @property
    def count_of_variables(self):
        if self.numerator.labeled:
            return len(self.variables)
        return max(self.numerator.count_of_variables, self.denominator.count_of_variables)

    @property
    def degrees(self):
        num, den = self.numerator, self.denominator
        if num.labeled:
            return {x: num.degree_of(x) - den.degree_of(x) for x in self.variables}
        return tuple(num.degree_of(i) - den.degree_of(i) for i in range(self.count_of_variables))

    def __neg__(self):
        return RationalFunction(-self.numerator, self.denominator)

    def __pos__(self):
        return self

    def _over_common_denominator(self, other):
        a, b = self.denominator, other.denominator
        if a == b:
            return self.numerator, other.numerator, a
        if isinstance(self.ring, Field):
            quotient, remainder = divmod(b, a)
            if remainder.is_zero:
                return self.numerator * quotient, other.numerator, b
            quotient, remainder = divmod(a, b)
            if remainder.is_zero:
                return self.numerator, other.numerator * quotient, a
        return self.numerator * b, other.numerator * a, a * b

    def __add__(self, other):
        mine, theirs, denominator = self._over_common_denominator(self._lift(other))
        return RationalFunction(mine + theirs, denominator)

    __radd__ = __add__

    def __sub__(self, other):
        mine, theirs, denominator = self._over_common_denominator(self._lift(other))
        return RationalFunction(mine - theirs, denominator)

    def __rsub__(self, other):
        return self._lift(other) - self

    def __mul__(self, other):
        other = self._lift(other)
        return RationalFunction(self.numerator * other.numerator, self.denominator * other.denominator)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._lift(other)
        if other.is_zero:
            raise DivideByZero("division by the zero rational function")
        return RationalFunction(self.numerator * other.denominator, self.denominator * other.numerator)

    def __rtruediv__(self, other):
        return self._lift(other) / self

    def __pow__(self, deg):
        if not isinstance(deg, int):
            return NotImplemented
        if deg < 0:
            if self.is_zero:
                raise DivideByZero("zero rational function raised to a negative power")
            return RationalFunction(self.denominator ** -deg, self.numerator ** -deg)
        return RationalFunction(self.numerator ** deg, self.denominator ** deg)

    def reduced(self: "RationalFunction[F]") -> "RationalFunction[F]":
        from .gcd import polynomial_gcd
        g = polynomial_gcd(self.numerator, self.denominator)
        logger.debug("reducing %s by %s", self, g)
        return RationalFunction(self.numerator / g, self.denominator / g)

    def __eq__(self, other):
        try:
            other = self._lift(other)
        except (ConstructionError, TypeError, ValueError):
            return NotImplemented
        return self.numerator * other.denominator == other.numerator * self.denominator

    def __hash__(self):
        # no normal form without division
        if not isinstance(self.ring, Field):
            return hash(RationalFunction)
        r = self.reduced()
        lc = r.denominator.lc()
        numerator, denominator = r.numerator / lc, r.denominator / lc
        if denominator.is_one:
            return hash(numerator)
        return hash((numerator, denominator))

    # Substitution

    def evaluate(self, values):
        return RationalFunction(self.numerator.evaluate(values), self.denominator.evaluate(values))

    def compose(self, polys):
        return RationalFunction(self.numerator.compose(polys), self.denominator.compose(polys))

    def compose_rational(self, rfs):
        num, den = self.numerator, self.denominator
        args = num.rational_arguments(rfs)
        args = {key: rf for key, rf in args.items() if num.degree_of(key) > 0 or den.degree_of(key) > 0}
        num_degrees = {key: num.degree_of(key) for key in args}
        den_degrees = {key: den.degree_of(key) for key in args}
        numerator = num.substituted_numerator(args, num_degrees)
        denominator = den.substituted_numerator(args, den_degrees)
        descriptor = num.descriptor()
        for key, rf in args.items():
            diff = num_degrees[key] - den_degrees[key]
            if diff > 0:
                denominator = multiply_by_power(descriptor, denominator, rf.denominator, diff)
            elif diff < 0:
                numerator = multiply_by_power(descriptor, numerator, rf.denominator, -diff)
        return RationalFunction(numerator, denominator)

    def __call__(self, values=None, **named):
        if values is None:
            values = {}
        elif not isinstance(values, Mapping):
            values = dict(enumerate(values))
        values = dict(values, **named)
        if any(isinstance(v, RationalFunction) for v in values.values()):
            return self.compose_rational(values)
        if any(isinstance(v, BasePolynomial) for v in values.values()):
            return self.compose(values)
        return self.evaluate(values)

    # Display

    def to_string(self, names=None, reversed=False):
        if self.numerator.is_zero:
            return "0"
        if self.denominator.is_one:
            return self.numerator.to_string(names, reversed)
        return (f"{self.numerator.to_string_with_brackets(names, reversed)}"
                f"/{self.denominator.to_string_with_brackets(names, reversed)}")

    def to_string_with_brackets(self, names=None, reversed=False):
        if self.numerator.is_zero:
            return "0"
        if self.denominator.is_one:
            return self.numerator.to_string_with_brackets(names, reversed)
        return f"({self.to_string(names, reversed)})"

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"RationalFunction({self.to_string()})"

@dataclass(frozen=True)
class RationalFunctionField(Field):
    """Rational functions over `base` as elements of a field."""
    base    : Ring
    labeled : bool = False

    @property
    def kind(self):
        return LabeledPolynomial if self.labeled else Polynomial

    @property
    def zero(self):
        return RationalFunction(self.kind.constant(self.base, self.base.zero))

    @property
    def one(self):
        return RationalFunction(self.kind.constant(self.base, self.base.one))

    def coerce(self, value):
        if isinstance(value, RationalFunction):
            if value.kind is not self.kind or value.ring != self.base:
                raise ConstructionError(f"{value!r} is not an element of {self!r}")
            return value
        if isinstance(value, BasePolynomial):
            if type(value) is not self.kind or value.ring != self.base:
                raise ConstructionError(f"{value!r} is not an element of {self!r}")
            return RationalFunction(value)
        return RationalFunction(self.kind.constant(self.base, value))

    def is_zero(self, a):
        return a.is_zero

    def is_one(self, a):
        return a.is_one

    def __repr__(self):
        return f"{self.base!r}({'labeled' if self.labeled else 'positional'})"
