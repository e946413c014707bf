"""Dense polynomials in a single variable, coefficients lowest power first."""
from dataclasses import dataclass
from itertools import zip_longest

from logzero import logger

from .division import DivisionResult, require_field
from .errors import ConstructionError, DivideByZero
from .linear import determinant, sylvester_matrix
from .rings import Ring, multiply_by_power, power

def _is_rational_function(value):
    from .univariate_rational_functions import UnivariateRationalFunction
    return isinstance(value, UnivariateRationalFunction)

class UnivariatePolynomial:
    __slots__ = ("ring", "coefficients")

    def __init__(self, ring, coefficients):
        coefficients = [ring.coerce(c) for c in coefficients]
        if not coefficients:
            raise ConstructionError("univariate polynomial needs at least one coefficient")
        n = len(coefficients)
        while n > 1 and ring.is_zero(coefficients[n - 1]):
            n -= 1
        self.ring = ring
        self.coefficients = tuple(coefficients[:n])

    @classmethod
    def constant(cls, ring, value):
        return cls(ring, [value])

    @classmethod
    def variable(cls, ring):
        return cls(ring, [ring.zero, ring.one])

    @property
    def is_zero(self):
        return len(self.coefficients) == 1 and self.ring.is_zero(self.coefficients[0])

    @property
    def degree(self):
        return -1 if self.is_zero else len(self.coefficients) - 1

    @property
    def is_constant(self):
        return len(self.coefficients) == 1

    @property
    def is_one(self):
        return self.is_constant and self.ring.is_one(self.coefficients[0])

    def lc(self):
        return self.coefficients[-1]

    def __bool__(self):
        return not self.is_zero

    def _lift(self, other):
        if isinstance(other, UnivariatePolynomial):
            if other.ring != self.ring:
                raise ConstructionError(f"mismatched rings {self.ring!r} and {other.ring!r}")
            return other
        if _is_rational_function(other) and other.ring == self.ring:
            return None
        return self.constant(self.ring, other)

    def __neg__(self):
        return UnivariatePolynomial(self.ring, [self.ring.neg(c) for c in self.coefficients])

    def __add__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        zero = self.ring.zero
        return UnivariatePolynomial(self.ring, [
            self.ring.add(a, b) for a, b in zip_longest(self.coefficients, other.coefficients, fillvalue=zero)])

    __radd__ = __add__

    def __sub__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        zero = self.ring.zero
        return UnivariatePolynomial(self.ring, [
            self.ring.sub(a, b) for a, b in zip_longest(self.coefficients, other.coefficients, fillvalue=zero)])

    def __rsub__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        ring = self.ring
        if self.is_zero or other.is_zero:
            return self.constant(ring, ring.zero)
        result = [ring.zero] * (len(self.coefficients) + len(other.coefficients) - 1)
        for i, a in enumerate(self.coefficients):
            for j, b in enumerate(other.coefficients):
                result[i + j] = ring.add(result[i + j], ring.mul(a, b))
        return UnivariatePolynomial(ring, result)

    __rmul__ = __mul__

    def __pow__(self, deg):
        if not isinstance(deg, int):
            return NotImplemented
        return power(UnivariateRing(self.ring), self, deg)

    def divide_with_remainder(self, other):
        other = self._lift(other)
        if other is None:
            raise ConstructionError("can't divide a polynomial by a rational function with remainder")
        ring = self.ring
        require_field(ring)
        if other.is_zero:
            raise DivideByZero("polynomial division by zero")
        if self.degree < other.degree:
            return DivisionResult(self.constant(ring, ring.zero), self)
        remainder = list(self.coefficients)
        quotient = [ring.zero] * (self.degree - other.degree + 1)
        lc = other.lc()
        for shift in range(len(quotient) - 1, -1, -1):
            coeff = ring.div(remainder[shift + other.degree], lc)
            quotient[shift] = coeff
            if ring.is_zero(coeff):
                continue
            for i, c in enumerate(other.coefficients):
                remainder[shift + i] = ring.sub(remainder[shift + i], ring.mul(coeff, c))
        return DivisionResult(UnivariatePolynomial(ring, quotient),
                              UnivariatePolynomial(ring, remainder[:other.degree] or [ring.zero]))

    def __divmod__(self, other):
        return self.divide_with_remainder(other)

    def __floordiv__(self, other):
        return self.divide_with_remainder(other).quotient

    def __truediv__(self, other):
        if _is_rational_function(other) and other.ring == self.ring:
            return NotImplemented
        return self.divide_with_remainder(other).quotient

    def __mod__(self, other):
        return self.divide_with_remainder(other).remainder

    def monic(self):
        if self.is_zero:
            return self
        lc = self.lc()
        return UnivariatePolynomial(self.ring, [self.ring.div(c, lc) for c in self.coefficients])

    def __call__(self, x):
        """Horner evaluation at a ring element, or composition with a univariate polynomial or rational function."""
        if _is_rational_function(x) and x.ring == self.ring:
            return self.compose_rational(x)
        if isinstance(x, UnivariatePolynomial):
            result = self.constant(self.ring, self.ring.zero)
            for c in reversed(self.coefficients):
                result = result * x + self.constant(self.ring, c)
            return result
        ring = self.ring
        x = ring.coerce(x)
        result = ring.zero
        for c in reversed(self.coefficients):
            result = ring.add(ring.mul(result, x), c)
        return result

    def substituted_numerator(self, rf, degree=None):
        """`self(f/g) * g**degree`, computed without fractions; `degree` defaults to the degree of `self`."""
        ring = UnivariateRing(self.ring)
        if degree is None:
            degree = max(self.degree, 0)
        result = ring.zero
        for i, c in enumerate(self.coefficients):
            term = multiply_by_power(ring, self.constant(self.ring, c), rf.numerator, i)
            result = result + multiply_by_power(ring, term, rf.denominator, degree - i)
        return result

    def compose_rational(self, rf):
        from .univariate_rational_functions import UnivariateRationalFunction
        degree = max(self.degree, 0)
        return UnivariateRationalFunction(self.substituted_numerator(rf, degree), rf.denominator ** degree)

    def derivative(self):
        ring = self.ring
        if self.is_constant:
            return self.constant(ring, ring.zero)
        return UnivariatePolynomial(ring, [ring.times(c, i) for i, c in enumerate(self.coefficients)][1:])

    def discrete_derivative(self, delta=None):
        ring = self.ring
        delta = ring.one if delta is None else ring.coerce(delta)
        return self(UnivariatePolynomial(ring, [delta, ring.one])) - self

    def to_polynomial(self, key=0, labeled=False):
        from .polynomials import LabeledPolynomial, Polynomial
        kind = LabeledPolynomial if labeled else Polynomial
        return kind.from_coefficients(self.ring, [kind.constant(self.ring, c) for c in self.coefficients],
                                      kind._key(key))

    def to_rational_function(self):
        from .univariate_rational_functions import UnivariateRationalFunction
        return UnivariateRationalFunction(self)

    def __eq__(self, other):
        if not isinstance(other, UnivariatePolynomial):
            try:
                other = self._lift(other)
            except (ConstructionError, TypeError, ValueError):
                return NotImplemented
            if other is None:
                return NotImplemented
        return self.ring == other.ring and self.coefficients == other.coefficients

    def __hash__(self):
        if self.is_constant:
            return hash(self.coefficients[0])
        return hash(self.coefficients)

    def to_string(self, name="x"):
        ring = self.ring
        parts = []
        for i in range(len(self.coefficients) - 1, -1, -1):
            c = self.coefficients[i]
            if ring.is_zero(c) and not self.is_zero:
                continue
            mono = "" if i == 0 else name if i == 1 else f"{name}^{i}"
            s = c.to_string_with_brackets() if hasattr(c, "to_string_with_brackets") else str(c)
            if not mono:
                parts.append(s)
            elif ring.is_one(c):
                parts.append(mono)
            elif ring.is_one(ring.neg(c)):
                parts.append("-" + mono)
            else:
                parts.append(f"{s} {mono}")
        return " + ".join(parts)

    def to_string_with_brackets(self, name="x"):
        s = self.to_string(name)
        if sum(not self.ring.is_zero(c) for c in self.coefficients) > 1:
            return f"({s})"
        return s

    def __repr__(self):
        return f"UnivariatePolynomial({self.to_string()})"

@dataclass(frozen=True)
class UnivariateRing(Ring):
    base : Ring

    @property
    def zero(self):
        return UnivariatePolynomial.constant(self.base, self.base.zero)

    @property
    def one(self):
        return UnivariatePolynomial.constant(self.base, self.base.one)

    def coerce(self, value):
        if isinstance(value, UnivariatePolynomial):
            return value
        return UnivariatePolynomial.constant(self.base, value)

    def is_zero(self, a):
        return a.is_zero

    def is_one(self, a):
        return a.is_one

def euclid_gcd(a, b, normalize=None):
    """Remainder sequence `gcd(a, b) = gcd(b, a % b)`; `normalize` is applied to each nonzero remainder."""
    steps = 0
    while not b.is_zero:
        r = a % b
        if normalize is not None and not r.is_zero:
            r = normalize(r)
        a, b = b, r
        steps += 1
    logger.debug("remainder sequence of length %s", steps)
    return a

def interpolate(field, points):
    """Lagrange polynomial through `points`, a mapping of distinct x to y."""
    require_field(field)
    points = {field.coerce(x): field.coerce(y) for x, y in dict(points).items()}
    result = UnivariatePolynomial.constant(field, field.zero)
    for xi, yi in points.items():
        term = UnivariatePolynomial.constant(field, yi)
        for xj in points:
            if xj == xi:
                continue
            scale = field.inverse(field.sub(xi, xj))
            term = term * UnivariatePolynomial(field, [field.mul(field.neg(xj), scale), scale])
        result = result + term
    return result

def resultant(p, q):
    """Determinant of the Sylvester matrix of `p` and `q`; zero iff they share a root."""
    if p.ring != q.ring:
        raise ConstructionError(f"mismatched rings {p.ring!r} and {q.ring!r}")
    ring = p.ring
    if p.is_zero or q.is_zero:
        return ring.zero
    matrix = sylvester_matrix(ring, p.coefficients[::-1], q.coefficients[::-1])
    if matrix.shape[0] == 0:
        return ring.one
    return determinant(ring, matrix)
