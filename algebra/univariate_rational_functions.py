from dataclasses import dataclass

from logzero import logger

from .division import require_field
from .errors import ConstructionError, DivideByZero
from .rings import Field, Ring, multiply_by_power
from .univariate import UnivariatePolynomial, UnivariateRing, euclid_gcd

class UnivariateRationalFunction:
    """Quotient of two `UnivariatePolynomial`s over the same ring, never reduced implicitly."""
    __slots__ = ("numerator", "denominator")

    def __init__(self, numerator, denominator=None):
        if not isinstance(numerator, UnivariatePolynomial):
            raise ConstructionError(f"numerator {numerator!r} is not a univariate polynomial")
        if denominator is None:
            denominator = UnivariatePolynomial.constant(numerator.ring, numerator.ring.one)
        elif not isinstance(denominator, UnivariatePolynomial) or denominator.ring != numerator.ring:
            raise ConstructionError("numerator and denominator of different kinds")
        if denominator.is_zero:
            raise DivideByZero("rational function with zero denominator")
        self.numerator = numerator
        self.denominator = denominator

    @property
    def ring(self):
        return self.numerator.ring

    def _lift(self, other):
        if isinstance(other, UnivariateRationalFunction):
            if other.ring != self.ring:
                raise ConstructionError(f"mismatched rings {self.ring!r} and {other.ring!r}")
            return other
        return UnivariateRationalFunction(self.numerator._lift(other))

    @property
    def is_zero(self):
        return self.numerator.is_zero

    @property
    def is_one(self):
        return self.numerator == self.denominator

    @property
    def degree(self):
        return self.numerator.degree - self.denominator.degree

    def __neg__(self):
        return UnivariateRationalFunction(-self.numerator, self.denominator)

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
        return UnivariateRationalFunction(mine + theirs, denominator)

    __radd__ = __add__

    def __sub__(self, other):
        mine, theirs, denominator = self._over_common_denominator(self._lift(other))
        return UnivariateRationalFunction(mine - theirs, denominator)

    def __rsub__(self, other):
        return self._lift(other) - self

    def __mul__(self, other):
        other = self._lift(other)
        return UnivariateRationalFunction(self.numerator * other.numerator, self.denominator * other.denominator)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._lift(other)
        if other.is_zero:
            raise DivideByZero("division by the zero rational function")
        return UnivariateRationalFunction(self.numerator * other.denominator, self.denominator * other.numerator)

    def __rtruediv__(self, other):
        return self._lift(other) / self

    def __pow__(self, deg):
        if not isinstance(deg, int):
            return NotImplemented
        if deg < 0:
            if self.is_zero:
                raise DivideByZero("zero rational function raised to a negative power")
            return UnivariateRationalFunction(self.denominator ** -deg, self.numerator ** -deg)
        return UnivariateRationalFunction(self.numerator ** deg, self.denominator ** deg)

    def reduced(self):
        g = euclid_gcd(self.numerator, self.denominator).monic()
        logger.debug("reducing %s by %s", self, g)
        return UnivariateRationalFunction(self.numerator // g, self.denominator // g)

    def __eq__(self, other):
        try:
            other = self._lift(other)
        except (ConstructionError, TypeError, ValueError):
            return NotImplemented
        return self.numerator * other.denominator == other.numerator * self.denominator

    def __hash__(self):
        if not isinstance(self.ring, Field):
            return hash(UnivariateRationalFunction)
        r = self.reduced()
        lc = r.denominator.lc()
        numerator, denominator = r.numerator / lc, r.denominator / lc
        if denominator.is_one:
            return hash(numerator)
        return hash((numerator, denominator))

    def __call__(self, x):
        """Value at a field element, or composition with a univariate polynomial or rational function."""
        if isinstance(x, UnivariateRationalFunction) and x.ring == self.ring:
            return self.compose_rational(x)
        if isinstance(x, UnivariatePolynomial):
            return UnivariateRationalFunction(self.numerator(x), self.denominator(x))
        require_field(self.ring)
        return self.ring.div(self.numerator(x), self.denominator(x))

    def compose_rational(self, rf):
        num_degree = max(self.numerator.degree, 0)
        den_degree = max(self.denominator.degree, 0)
        numerator = self.numerator.substituted_numerator(rf, num_degree)
        denominator = self.denominator.substituted_numerator(rf, den_degree)
        ring = UnivariateRing(self.ring)
        diff = num_degree - den_degree
        if diff > 0:
            denominator = multiply_by_power(ring, denominator, rf.denominator, diff)
        elif diff < 0:
            numerator = multiply_by_power(ring, numerator, rf.denominator, -diff)
        return UnivariateRationalFunction(numerator, denominator)

    def to_rational_function(self, key=0, labeled=False):
        from .rational_functions import RationalFunction
        return RationalFunction(self.numerator.to_polynomial(key, labeled),
                                self.denominator.to_polynomial(key, labeled))

    def to_string(self, name="x"):
        if self.numerator.is_zero:
            return "0"
        if self.denominator.is_one:
            return self.numerator.to_string(name)
        return f"{self.numerator.to_string_with_brackets(name)}/{self.denominator.to_string_with_brackets(name)}"

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"UnivariateRationalFunction({self.to_string()})"

@dataclass(frozen=True)
class UnivariateRationalFunctionField(Field):
    """Univariate rational functions over `base` as elements of a field."""
    base : Ring

    @property
    def zero(self):
        return UnivariateRationalFunction(UnivariatePolynomial.constant(self.base, self.base.zero))

    @property
    def one(self):
        return UnivariateRationalFunction(UnivariatePolynomial.constant(self.base, self.base.one))

    def coerce(self, value):
        if isinstance(value, UnivariateRationalFunction):
            if value.ring != self.base:
                raise ConstructionError(f"{value!r} is not an element of {self!r}")
            return value
        if isinstance(value, UnivariatePolynomial):
            if value.ring != self.base:
                raise ConstructionError(f"{value!r} is not an element of {self!r}")
            return UnivariateRationalFunction(value)
        return UnivariateRationalFunction(UnivariatePolynomial.constant(self.base, value))

    def is_zero(self, a):
        return a.is_zero

    def is_one(self, a):
        return a.is_one

    def __repr__(self):
        return f"{self.base!r}(x)"
