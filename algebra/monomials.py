from collections.abc import Mapping
from dataclasses import dataclass
from functools import total_ordering
from itertools import zip_longest
from typing import TYPE_CHECKING

from .errors import ConstructionError
from .rings import R

if TYPE_CHECKING:
    from .polynomials import LabeledPolynomial

first = lambda x: x[0]

def lockstep(xs, ys, default):
    terminal = (None, default)
    x = next(xs, terminal)
    y = next(ys, terminal)
    while x[0] is not None and y[0] is not None:
        if x[0] < y[0]:
            yield x[0], x[1], default
            x = next(xs, terminal)
        elif y[0] < x[0]:
            yield y[0], default, y[1]
            y = next(ys, terminal)
        else:
            yield x[0], x[1], y[1]
            x = next(xs, terminal)
            y = next(ys, terminal)
    while x[0] is not None:
        yield x[0], x[1], default
        x = next(xs, terminal)
    while y[0] is not None:
        yield y[0], default, y[1]
        y = next(ys, terminal)

@dataclass(eq=True, order=True, frozen=True)
class Variable:
    name : str

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ConstructionError(f"bad variable name {self.name!r}")

    def as_polynomial(self, ring: R, coefficient=None) -> "LabeledPolynomial[R]":
        from .polynomials import LabeledPolynomial
        return LabeledPolynomial.variable(ring, self, coefficient)

    def __repr__(self):
        return self.name

def _exponent(exp):
    if not isinstance(exp, int):
        raise ConstructionError(f"exponent {exp!r} is not an integer")
    if exp < 0:
        raise ConstructionError(f"negative exponent {exp}")
    return exp

@total_ordering    # lex, earliest variable most significant
class Monomial:
    """Labeled monomial: sorted `(Variable, exponent)` pairs, zero exponents dropped."""
    __slots__ = ("exps",)

    def __init__(self, exps=()):
        if isinstance(exps, Mapping):
            exps = exps.items()
        cleaned = {}
        for var, exp in exps:
            if isinstance(var, str):
                var = Variable(var)
            if not isinstance(var, Variable):
                raise ConstructionError(f"{var!r} is not a variable")
            if var in cleaned:
                raise ConstructionError(f"variable {var} repeated in monomial")
            cleaned[var] = _exponent(exp)
        self.exps = tuple(sorted(((v, e) for v, e in cleaned.items() if e > 0), key=first))

    @classmethod
    def new(cls, x, exp=1):
        if x is None:
            return cls([])
        return cls([(x, exp)])

    def __hash__(self):
        return hash(self.exps)

    def __eq__(self, other):
        if not isinstance(other, Monomial):
            return NotImplemented
        return self.exps == other.exps

    @property
    def degree(self):
        return sum(degree for _, degree in self.exps)

    @property
    def variables(self):
        return tuple(map(first, self.exps))

    def pairs(self):
        return iter(self.exps)

    def exponent(self, var):
        for x, e in self.exps:
            if x == var:
                return e
        return 0

    def common(self, other):
        return lockstep(iter(self.exps), iter(other.exps), 0)

    def __lt__(self, other):
        for _, a, b in self.common(other):
            if a != b:
                return a < b
        return len(self.exps) < len(other.exps)

    def __mul__(self, other):
        return Monomial((x, ei + ej) for x, ei, ej in self.common(other))

    def __pow__(self, coeff):
        return Monomial((x, e * coeff) for x, e in self.exps)

    def divides(self, other):
        return all(ei <= ej for _, ei, ej in self.common(other))

    def __truediv__(self, other):
        return Monomial((x, ei - ej) for x, ei, ej in self.common(other))

    def lcm(self, other):
        return Monomial((x, max(ei, ej)) for x, ei, ej in self.common(other))

    def drop(self, variables):
        return Monomial((x, e) for x, e in self.exps if x not in variables)

    def with_exponent(self, var, exp):
        return Monomial([(x, e) for x, e in self.exps if x != var] + [(var, exp)])

    def to_string(self, namer):
        return " ".join(namer(x) if e == 1 else f"{namer(x)}^{e}" for x, e in self.exps)

    def __repr__(self):
        exps = ",".join(f"{repr(x)}**{e}" for x, e in self.exps)
        return f"Monomial({exps})"

@total_ordering    # lex, index 0 most significant
class IndexedMonomial:
    """Positional monomial: exponents of variables 0..n-1, trailing zeros trimmed."""
    __slots__ = ("exps",)

    def __init__(self, exps=()):
        exps = tuple(_exponent(e) for e in exps)
        n = len(exps)
        while n and exps[n - 1] == 0:
            n -= 1
        self.exps = exps[:n]

    @classmethod
    def new(cls, index, exp=1):
        if index is None:
            return cls(())
        return cls((0,) * index + (exp,))

    def __hash__(self):
        return hash(self.exps)

    def __eq__(self, other):
        if not isinstance(other, IndexedMonomial):
            return NotImplemented
        return self.exps == other.exps

    @property
    def degree(self):
        return sum(self.exps)

    @property
    def variables(self):
        return tuple(i for i, e in enumerate(self.exps) if e > 0)

    def pairs(self):
        return ((i, e) for i, e in enumerate(self.exps) if e > 0)

    def exponent(self, index):
        return self.exps[index] if 0 <= index < len(self.exps) else 0

    def common(self, other):
        return zip_longest(self.exps, other.exps, fillvalue=0)

    def __lt__(self, other):
        for a, b in self.common(other):
            if a != b:
                return a < b
        return len(self.exps) < len(other.exps)

    def __mul__(self, other):
        return IndexedMonomial(a + b for a, b in self.common(other))

    def __pow__(self, coeff):
        return IndexedMonomial(e * coeff for e in self.exps)

    def divides(self, other):
        return len(self.exps) <= len(other.exps) and all(a <= b for a, b in zip(self.exps, other.exps))

    def __truediv__(self, other):
        return IndexedMonomial(a - b for a, b in self.common(other))

    def lcm(self, other):
        return IndexedMonomial(max(a, b) for a, b in self.common(other))

    def drop(self, indices):
        return IndexedMonomial(0 if i in indices else e for i, e in enumerate(self.exps))

    def with_exponent(self, index, exp):
        exps = list(self.exps) + [0] * (index + 1 - len(self.exps))
        exps[index] = exp
        return IndexedMonomial(exps)

    def to_string(self, namer):
        return " ".join(namer(i) if e == 1 else f"{namer(i)}^{e}" for i, e in self.pairs())

    def __repr__(self):
        return f"IndexedMonomial{self.exps}"
