"""Coefficient domains. Every polynomial carries one of these descriptors for its coefficients.

Entry points that divide are annotated with `F`, bound to `Field`, so the type
checker rejects them for polynomials over a ring-only descriptor.
"""
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, TypeVar

from .errors import AlgebraError, ConstructionError, DivideByZero

class Ring:
    zero : Any
    one  : Any

    def coerce(self, value):
        return value

    def from_int(self, n):
        return self.times(self.one, n)

    def is_zero(self, a):
        return a == self.zero

    def is_one(self, a):
        return a == self.one

    def neg(self, a):
        return -a

    def add(self, a, b):
        return a + b

    def sub(self, a, b):
        return a - b

    def mul(self, a, b):
        return a * b

    def times(self, a, n):
        """`a + a + ... + a` (n times) by doubling; negative n sums -a."""
        if n < 0:
            return self.neg(self.times(a, -n))
        if n == 0:
            return self.zero
        if n == 1:
            return a
        half = self.times(self.add(a, a), n // 2)
        return self.add(half, a) if n % 2 else half

class Field(Ring):
    def div(self, a, b):
        if self.is_zero(b):
            raise DivideByZero(f"division by zero in {self!r}")
        return self.divide(a, b)

    def divide(self, a, b):
        return a / b

    def inverse(self, a):
        return self.div(self.one, a)

R = TypeVar("R", bound=Ring)
F = TypeVar("F", bound=Field)

@dataclass(frozen=True)
class IntegerRing(Ring):
    zero = 0
    one  = 1

    def coerce(self, value):
        if isinstance(value, int):
            return value
        if isinstance(value, Fraction) and value.denominator == 1:
            return value.numerator
        raise ConstructionError(f"{value!r} is not an integer")

    def __repr__(self):
        return "ZZ"

@dataclass(frozen=True)
class RationalField(Field):
    zero = Fraction(0)
    one  = Fraction(1)

    def coerce(self, value):
        return Fraction(value)

    def __repr__(self):
        return "QQ"

@dataclass(frozen=True)
class IntegersModulo(Field):
    p : int

    def __post_init__(self):
        if self.p < 2 or any(self.p % d == 0 for d in range(2, int(self.p**0.5) + 1)):
            raise ConstructionError(f"modulus {self.p} is not prime")

    @property
    def zero(self):
        return 0

    @property
    def one(self):
        return 1

    def coerce(self, value):
        if isinstance(value, Fraction):
            return self.div(value.numerator % self.p, value.denominator % self.p)
        return int(value) % self.p

    def neg(self, a):
        return -a % self.p

    def add(self, a, b):
        return (a + b) % self.p

    def sub(self, a, b):
        return (a - b) % self.p

    def mul(self, a, b):
        return a * b % self.p

    def divide(self, a, b):
        return a * pow(b, -1, self.p) % self.p

    def __repr__(self):
        return f"GF({self.p})"

ZZ = IntegerRing()
QQ = RationalField()

def power(ring, base, deg):
    """`base ** deg` by squaring. Negative degrees invert the base, which needs a Field."""
    if deg == 0:
        return ring.one
    if deg < 0:
        if not isinstance(ring, Field):
            raise AlgebraError(f"can't divide in {ring!r}")
        return power(ring, ring.inverse(base), -deg)
    if deg == 1:
        return base
    if deg % 2 == 0:
        return power(ring, ring.mul(base, base), deg // 2)
    return ring.mul(power(ring, ring.mul(base, base), deg // 2), base)

def multiply_by_power(ring, value, base, deg):
    """`value * base ** deg` by squaring; `value` itself when deg is zero."""
    if deg == 0:
        return value
    if deg < 0:
        if not isinstance(ring, Field):
            raise AlgebraError(f"can't divide in {ring!r}")
        return multiply_by_power(ring, value, ring.inverse(base), -deg)
    if deg % 2 == 0:
        return multiply_by_power(ring, value, ring.mul(base, base), deg // 2)
    return multiply_by_power(ring, ring.mul(value, base), ring.mul(base, base), deg // 2)
