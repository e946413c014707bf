"""Multivariate polynomials in canonical form, positional and labeled."""
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from . import config
from .division import DivisionResult, divide_by_constant, divide_with_remainder
from .errors import AlgebraError, ConstructionError
from .monomials import IndexedMonomial, Monomial, Variable
from .rings import F, R, Ring, multiply_by_power, power

S = TypeVar("S", bound=Ring)
_P = TypeVar("_P", bound="BasePolynomial")

class TermsBuilder:
    """Collects raw (monomial, coefficient) pairs, merging equal monomials."""
    __slots__ = ("ring", "terms")

    def __init__(self, ring):
        self.ring = ring
        self.terms = {}

    def add(self, m, c):
        terms = self.terms
        if m in terms:
            terms[m] = self.ring.add(terms[m], c)
        else:
            terms[m] = c

    def add_terms(self, terms, coeff=None, mono=None):
        ring = self.ring
        for m, c in terms.items():
            if mono is not None:
                m = m * mono
            if coeff is not None:
                c = ring.mul(coeff, c)
            self.add(m, c)

    def build(self, cls):
        terms, self.terms = self.terms, None
        return cls.from_terms(self.ring, terms)

def _is_rational_function(value):
    from .rational_functions import RationalFunction
    return isinstance(value, RationalFunction)

def _coefficient_string(c):
    if hasattr(c, "to_string_with_brackets"):
        return c.to_string_with_brackets()
    return str(c)

class BasePolynomial(Generic[R]):
    __slots__ = ("ring", "terms", "is_zero", "_lm_cache")
    monomial_type: Any = None
    labeled = False

    def __init__(self, ring: R, terms):
        if isinstance(terms, Mapping):
            terms = terms.items()
        builder = TermsBuilder(ring)
        for m, c in terms:
            builder.add(self._monomial(m), ring.coerce(c))
        if not builder.terms:
            raise ConstructionError("polynomial needs at least one term")
        self._set(ring, builder.terms)

    def _set(self, ring, terms):
        self.ring = ring
        self.terms = {m: c for m, c in terms.items() if not ring.is_zero(c)}
        self.is_zero = not self.terms
        if self.is_zero:
            self.terms = {self.monomial_type(): ring.zero}
        self._lm_cache = None

    @classmethod
    def from_terms(cls, ring, terms):
        """Build from monomial objects without re-validating them."""
        poly = object.__new__(cls)
        poly._set(ring, terms)
        return poly

    # Supplied by the positional and labeled kinds

    @classmethod
    def constant(cls, ring, value):
        raise NotImplementedError

    @staticmethod
    def _monomial(raw):
        raise NotImplementedError

    @staticmethod
    def _key(key):
        raise NotImplementedError

    def main_variable(self, other):
        raise NotImplementedError

    def builder(self):
        return TermsBuilder(self.ring)

    def zero_like(self):
        return self.from_terms(self.ring, {})

    def one_like(self):
        return self.constant(self.ring, self.ring.one)

    def descriptor(self):
        return PolynomialRing(self.ring, self.labeled)

    # Leading term

    def lm(self):
        if self._lm_cache is None:
            self._lm_cache = max(self.terms)
        return self._lm_cache

    def lc(self):
        return self.terms[self.lm()]

    leading_monomial = lm
    leading_coefficient = lc

    def leading_term(self):
        lm = self.lm()
        return lm, self.terms[lm]

    def coefficient(self, monomial):
        return self.terms.get(self._monomial(monomial), self.ring.zero)

    # Degrees

    @property
    def degree(self):
        if self.is_zero:
            return -1
        return max(m.degree for m in self.terms)

    def degree_of(self, key):
        key = self._key(key)
        return max(m.exponent(key) for m in self.terms)

    @property
    def is_constant(self):
        return self.degree <= 0

    @property
    def is_one(self):
        return self.is_constant and self.ring.is_one(self.lc())

    def __bool__(self):
        return not self.is_zero

    # Arithmetic

    def _lift(self, other):
        if isinstance(other, BasePolynomial) and other.ring == self.ring:
            if type(other) is not type(self):
                raise ConstructionError(f"can't mix {type(self).__name__} and {type(other).__name__}")
            return other
        if isinstance(other, BasePolynomial) and not isinstance(self.ring, PolynomialRing):
            raise ConstructionError(f"mismatched rings {self.ring!r} and {other.ring!r}")
        if _is_rational_function(other):
            return None
        return self.constant(self.ring, other)

    def __neg__(self: _P) -> _P:
        ring = self.ring
        return self.from_terms(ring, {m: ring.neg(c) for m, c in self.terms.items()})

    def __pos__(self: _P) -> _P:
        return self

    def __add__(self: _P, other) -> _P:
        other = self._lift(other)
        if other is None:
            return NotImplemented
        builder = self.builder()
        builder.add_terms(self.terms)
        builder.add_terms(other.terms)
        return builder.build(type(self))

    __radd__ = __add__

    def __sub__(self: _P, other) -> _P:
        other = self._lift(other)
        if other is None:
            return NotImplemented
        builder = self.builder()
        builder.add_terms(self.terms)
        builder.add_terms(other.terms, self.ring.neg(self.ring.one))
        return builder.build(type(self))

    def __rsub__(self: _P, other) -> _P:
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return other - self

    def mul_by_monomial(self: _P, coeff, mono) -> _P:
        builder = self.builder()
        builder.add_terms(self.terms, coeff, mono)
        return builder.build(type(self))

    def __mul__(self: _P, other) -> _P:
        other = self._lift(other)
        if other is None:
            return NotImplemented
        if self.is_zero:
            return self
        if other.is_zero:
            return other
        builder = self.builder()
        for m, c in other.terms.items():
            builder.add_terms(self.terms, c, m)
        return builder.build(type(self))

    def __rmul__(self: _P, other) -> _P:
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return other * self

    def __pow__(self: _P, deg) -> _P:
        if not isinstance(deg, int):
            return NotImplemented
        return power(self.descriptor(), self, deg)

    def __divmod__(self: "BasePolynomial[F]", other) -> DivisionResult:
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return divide_with_remainder(self, other)

    def __floordiv__(self: "BasePolynomial[F]", other) -> "BasePolynomial[F]":
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return divide_with_remainder(self, other).quotient

    def __mod__(self: "BasePolynomial[F]", other) -> "BasePolynomial[F]":
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return divide_with_remainder(self, other).remainder

    def __truediv__(self: "BasePolynomial[F]", other) -> "BasePolynomial[F]":
        """Quotient of Euclidean division, or coefficient-wise division by a field element."""
        if isinstance(other, BasePolynomial) and other.ring == self.ring:
            return divide_with_remainder(self, self._lift(other)).quotient
        if _is_rational_function(other):
            return NotImplemented
        return divide_by_constant(self, other)

    def __rtruediv__(self: "BasePolynomial[F]", other) -> "BasePolynomial[F]":
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return other / self

    def monic(self: "BasePolynomial[F]") -> "BasePolynomial[F]":
        lc = self.lc()
        if self.ring.is_one(lc) or self.is_zero:
            return self
        return divide_by_constant(self, lc)

    def __eq__(self, other):
        if isinstance(other, BasePolynomial):
            return type(self) is type(other) and self.ring == other.ring and self.terms == other.terms
        if _is_rational_function(other):
            return NotImplemented
        try:
            other = self.constant(self.ring, other)
        except (ConstructionError, TypeError, ValueError):
            return NotImplemented
        return self.terms == other.terms

    def __hash__(self):
        if self.is_constant:
            return hash(self.lc())
        return hash(frozenset(self.terms.items()))

    # Grouping by one variable

    def coefficients_by(self, key):
        """Coefficients of `self` seen as a polynomial in `key` alone, lowest power first."""
        key = self._key(key)
        builders = [self.builder() for _ in range(self.degree_of(key) + 1)]
        for m, c in self.terms.items():
            builders[m.exponent(key)].add(m.drop((key,)), c)
        return [builder.build(type(self)) for builder in builders]

    @classmethod
    def from_coefficients(cls, ring, coefficients, key):
        """`sum(c * key**i)`; none of the coefficients may contain `key`."""
        builder = TermsBuilder(ring)
        for i, coefficient in enumerate(coefficients):
            for m, c in coefficient.terms.items():
                if m.exponent(key):
                    raise AlgebraError(f"coefficient {coefficient} already contains {key}")
                builder.add(m.with_exponent(key, i), c)
        return builder.build(cls)

    def univariate_coefficients(self, key):
        key = self._key(key)
        if any(v != key for v in self.variables):
            raise ConstructionError(f"{self} is not a polynomial in {key} alone")
        return [poly.lc() for poly in self.coefficients_by(key)]

    def to_univariate(self, key):
        from .univariate import UnivariatePolynomial
        return UnivariatePolynomial(self.ring, self.univariate_coefficients(key))

    def to_rational_function(self):
        from .rational_functions import RationalFunction
        return RationalFunction(self)

    # Substitution

    def evaluate(self, values):
        ring = self.ring
        values = {self._key(k): ring.coerce(v) for k, v in values.items()}
        builder = self.builder()
        for m, c in self.terms.items():
            for key, e in m.pairs():
                if key in values:
                    c = multiply_by_power(ring, c, values[key], e)
            builder.add(m.drop(values), c)
        return builder.build(type(self))

    def compose(self, polys):
        args = {}
        for k, v in polys.items():
            v = self._lift(v)
            if v is None:
                raise ConstructionError("use compose_rational to substitute rational functions")
            args[self._key(k)] = v
        descriptor = self.descriptor()
        builder = self.builder()
        for m, c in self.terms.items():
            term = self.from_terms(self.ring, {m.drop(args): c})
            for key, e in m.pairs():
                if key in args:
                    term = multiply_by_power(descriptor, term, args[key], e)
            builder.add_terms(term.terms)
        return builder.build(type(self))

    def substituted_numerator(self, rfs, degrees):
        """`self(f_1/g_1, ...) * prod(g_i ** degrees[i])`, computed without fractions."""
        descriptor = self.descriptor()
        builder = self.builder()
        for m, c in self.terms.items():
            term = self.from_terms(self.ring, {m.drop(rfs): c})
            for key, rf in rfs.items():
                e = m.exponent(key)
                term = multiply_by_power(descriptor, term, rf.numerator, e)
                term = multiply_by_power(descriptor, term, rf.denominator, degrees[key] - e)
            builder.add_terms(term.terms)
        return builder.build(type(self))

    def rational_arguments(self, rfs):
        from .rational_functions import RationalFunction
        args = {}
        for k, v in rfs.items():
            if not _is_rational_function(v):
                v = RationalFunction(self._lift(v))
            if type(v.numerator) is not type(self) or v.ring != self.ring:
                raise ConstructionError(f"can't substitute {v!r} into {type(self).__name__} over {self.ring!r}")
            args[self._key(k)] = v
        return args

    def compose_rational(self, rfs):
        from .rational_functions import RationalFunction
        args = self.rational_arguments(rfs)
        args = {key: rf for key, rf in args.items() if self.degree_of(key) > 0}
        degrees = {key: self.degree_of(key) for key in args}
        descriptor = self.descriptor()
        denominator = self.one_like()
        for key, rf in args.items():
            denominator = multiply_by_power(descriptor, denominator, rf.denominator, degrees[key])
        return RationalFunction(self.substituted_numerator(args, degrees), denominator)

    def __call__(self, values=None, **named):
        if values is None:
            values = {}
        elif not isinstance(values, Mapping):
            values = dict(enumerate(values))
        values = dict(values, **named)
        if any(_is_rational_function(v) for v in values.values()):
            return self.compose_rational(values)
        if any(isinstance(v, BasePolynomial) for v in values.values()):
            return self.compose(values)
        return self.evaluate(values)

    # Display

    def to_string(self, names=None, reversed=False):
        namer = self._namer(names)
        ring = self.ring
        parts = []
        for m in sorted(self.terms, reverse=not reversed):
            c = self.terms[m]
            if not m.exps:
                parts.append(_coefficient_string(c))
            elif ring.is_one(c):
                parts.append(m.to_string(namer))
            elif ring.is_one(ring.neg(c)):
                parts.append("-" + m.to_string(namer))
            else:
                parts.append(f"{_coefficient_string(c)} {m.to_string(namer)}")
        return " + ".join(parts)

    def to_string_with_brackets(self, names=None, reversed=False):
        s = self.to_string(names, reversed)
        return s if len(self.terms) == 1 else f"({s})"

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"{type(self).__name__}({self.to_string()})"

class Polynomial(BasePolynomial[R]):
    """Polynomial in the variables `0, 1, 2, ...`."""
    __slots__ = ()
    monomial_type = IndexedMonomial

    @classmethod
    def constant(cls, ring: S, value) -> "Polynomial[S]":
        return cls.from_terms(ring, {IndexedMonomial(): ring.coerce(value)})

    @classmethod
    def variable(cls, ring: S, index, coefficient=None) -> "Polynomial[S]":
        if coefficient is None:
            coefficient = ring.one
        return cls.from_terms(ring, {IndexedMonomial.new(cls._key(index)): ring.coerce(coefficient)})

    @staticmethod
    def _monomial(raw):
        if isinstance(raw, IndexedMonomial):
            return raw
        if isinstance(raw, Monomial):
            raise ConstructionError(f"labeled monomial {raw!r} in a positional polynomial")
        return IndexedMonomial(raw)

    @staticmethod
    def _key(key):
        if not isinstance(key, int) or key < 0:
            raise ConstructionError(f"{key!r} is not a variable index")
        return key

    @property
    def count_of_variables(self):
        return max(len(m.exps) for m in self.terms)

    @property
    def variables(self):
        return tuple(i for i, d in enumerate(self.degrees) if d > 0)

    @property
    def degrees(self):
        degrees = [0] * self.count_of_variables
        for m in self.terms:
            for i, e in m.pairs():
                degrees[i] = max(degrees[i], e)
        return tuple(degrees)

    def main_variable(self, other):
        return max(self.count_of_variables, other.count_of_variables) - 1

    def to_labeled(self, name=None):
        stem = config.variable_name() if name is None else name
        return LabeledPolynomial(self.ring, {
            Monomial((Variable(f"{stem}_{i + 1}"), e) for i, e in m.pairs()): c
            for m, c in self.terms.items()})

    def _namer(self, names):
        if callable(names):
            return names
        stem = config.variable_name() if names is None else names
        return lambda i: f"{stem}_{i + 1}"

class LabeledPolynomial(BasePolynomial[R]):
    """Polynomial in named `Variable`s."""
    __slots__ = ()
    monomial_type = Monomial
    labeled = True

    @classmethod
    def constant(cls, ring: S, value) -> "LabeledPolynomial[S]":
        return cls.from_terms(ring, {Monomial(): ring.coerce(value)})

    @classmethod
    def variable(cls, ring: S, var, coefficient=None) -> "LabeledPolynomial[S]":
        if coefficient is None:
            coefficient = ring.one
        return cls.from_terms(ring, {Monomial.new(cls._key(var)): ring.coerce(coefficient)})

    @staticmethod
    def _monomial(raw):
        if isinstance(raw, Monomial):
            return raw
        if isinstance(raw, IndexedMonomial):
            raise ConstructionError(f"positional monomial {raw!r} in a labeled polynomial")
        if isinstance(raw, (Variable, str)):
            return Monomial.new(LabeledPolynomial._key(raw))
        return Monomial(raw)

    @staticmethod
    def _key(key):
        if isinstance(key, str):
            return Variable(key)
        if not isinstance(key, Variable):
            raise ConstructionError(f"{key!r} is not a variable")
        return key

    @property
    def variables(self):
        return tuple(sorted({x for m in self.terms for x in m.variables}))

    @property
    def count_of_variables(self):
        return len(self.variables)

    @property
    def degrees(self):
        degrees = {}
        for m in self.terms:
            for x, e in m.pairs():
                degrees[x] = max(degrees.get(x, 0), e)
        return degrees

    def main_variable(self, other):
        return max(self.variables + other.variables)

    def _namer(self, names):
        if callable(names):
            return names
        if names is None:
            return repr
        return lambda x: names.get(x, x.name)

@dataclass(frozen=True)
class PolynomialRing(Ring):
    """Polynomials over `base` as elements of a ring."""
    base    : Ring
    labeled : bool = False

    @property
    def kind(self):
        return LabeledPolynomial if self.labeled else Polynomial

    @property
    def zero(self):
        return self.kind.constant(self.base, self.base.zero)

    @property
    def one(self):
        return self.kind.constant(self.base, self.base.one)

    def coerce(self, value):
        if isinstance(value, self.kind) and value.ring == self.base:
            return value
        if isinstance(value, BasePolynomial):
            raise ConstructionError(f"{value!r} is not an element of {self!r}")
        return self.kind.constant(self.base, value)

    def is_zero(self, a):
        return a.is_zero

    def is_one(self, a):
        return a.is_one

    def __repr__(self):
        return f"{self.base!r}[{'labeled' if self.labeled else 'positional'}]"
