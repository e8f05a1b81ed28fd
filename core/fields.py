# core/fields.py
"""
Base fields for matrix groups and parameter rings.

A BaseField bundles a sympy field domain with a distinguished root of unity,
written ``z`` in textual input. Cyclotomic fields are sympy algebraic fields
over QQ; prime fields are sympy's GF(p).
"""
import threading
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Dict, Union

import sympy
from sympy.ntheory import isprime, primitive_root
from sympy.polys.domains import GF, QQ
from sympy.polys.domains.domain import Domain
from sympy.polys.polyerrors import PolynomialError

from core.constants import ROOT_OF_UNITY_NAME
from core.exceptions import ParameterError
from core.safe_math import parse_expr

ROOT_SYMBOL = sympy.Symbol(ROOT_OF_UNITY_NAME)


@dataclass(frozen=True)
class BaseField:
    """
    A field together with a root of unity ``root`` of exact order ``m``.

    * ``domain`` is the sympy domain all coefficients live in.
    * ``root`` is a domain element; for cyclotomic fields it is exp(2*pi*I/m).
    """
    domain: Domain
    m: int
    root: Any = field(compare=False)
    name: str = field(default="", compare=False)

    # ------------------------------------------------------------------
    # Field-like protocol shared with ParameterRing
    # ------------------------------------------------------------------
    @property
    def zero(self):
        return self.domain.zero

    @property
    def one(self):
        return self.domain.one

    @property
    def characteristic(self) -> int:
        return self.domain.characteristic()

    def ground(self, coeff):
        return coeff

    def is_zero(self, a) -> bool:
        return self.domain.is_zero(a)

    def inverse(self, a):
        if self.is_zero(a):
            raise ZeroDivisionError("zero has no inverse")
        return self.domain.quo(self.domain.one, a)

    def divide(self, a, b):
        return a * self.inverse(b)

    def power(self, a, k: int):
        if k == 0:
            return self.one
        if k < 0:
            return self.power(self.inverse(a), -k)
        return a ** k

    # ------------------------------------------------------------------
    # Roots of unity
    # ------------------------------------------------------------------
    def root_of_unity(self, e: int):
        """
        Return a primitive e-th root of unity of this field.

        For cyclotomic fields the result is exactly exp(2*pi*I/e); for odd m the
        field also contains the 2m-th roots of unity.

        :raises ParameterError: If the field has no primitive e-th root of unity.
        """
        if e < 1:
            raise ParameterError(f"Order of a root of unity must be positive, got {e}")
        if self.m % e == 0:
            return self.power(self.root, self.m // e)
        if self.characteristic == 0 and self.m % 2 == 1 and (2 * self.m) % e == 0:
            # -root^((m+1)/2) = exp(pi*I/m)
            half = -self.power(self.root, (self.m + 1) // 2)
            return self.power(half, (2 * self.m) // e)
        raise ParameterError(f"{self} contains no primitive {e}-th root of unity")

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------
    def rational(self, numerator: int, denominator: int = 1):
        return self.domain.quo(self.domain.convert(int(numerator)), self.domain.convert(int(denominator)))

    def from_expr(self, expr: sympy.Expr):
        """
        Convert a sympy expression, polynomial in ``z`` with rational
        coefficients, to a domain element.
        """
        try:
            poly = sympy.Poly(sympy.sympify(expr), ROOT_SYMBOL)
        except PolynomialError as exc:
            raise ParameterError(f"'{expr}' is not a polynomial in {ROOT_SYMBOL}: {exc}") from exc
        result = self.zero
        for (k,), coeff in poly.terms():
            if not coeff.is_Rational:
                raise ParameterError(f"Coefficient '{coeff}' of '{expr}' is not rational")
            result = result + self.rational(coeff.p, coeff.q) * self.power(self.root, k)
        return result

    def parse(self, src: str):
        try:
            expr = parse_expr(src, {ROOT_OF_UNITY_NAME: ROOT_SYMBOL})
        except ValueError as exc:
            raise ParameterError(str(exc)) from exc
        return self.from_expr(expr)

    def convert(self, value):
        """Convert ints, fractions, strings and sympy expressions to field elements."""
        if isinstance(value, bool):
            raise ParameterError(f"Cannot convert boolean {value!r} to {self}")
        if isinstance(value, int):
            return self.domain.convert(value)
        if isinstance(value, Fraction):
            return self.rational(value.numerator, value.denominator)
        if isinstance(value, str):
            return self.parse(value)
        if isinstance(value, sympy.Basic):
            return self.from_expr(value)
        if self.domain.of_type(value):
            return value
        raise ParameterError(f"Cannot convert {value!r} of type {type(value).__name__} to {self}")

    def to_expr(self, a) -> sympy.Expr:
        return self.domain.to_sympy(a)

    def __contains__(self, value) -> bool:
        return self.domain.of_type(value)

    def __str__(self) -> str:
        return self.name or str(self.domain)


# One field object per key, shared across threads.
_FIELD_CACHE: Dict[Union[int, str], BaseField] = {}
_FIELD_CACHE_LOCK = threading.Lock()


def cyclotomic_field(m: int) -> BaseField:
    """Return Q(exp(2*pi*I/m)); for m <= 2 this is QQ with root -1."""
    if m < 1:
        raise ParameterError(f"Cyclotomic order must be positive, got {m}")
    if m <= 2:
        m = 2
    with _FIELD_CACHE_LOCK:
        if m in _FIELD_CACHE:
            return _FIELD_CACHE[m]
        if m == 2:
            base = BaseField(QQ, 2, QQ.convert(-1), name="QQ")
        else:
            zeta = sympy.exp(2 * sympy.pi * sympy.I / m)
            domain = QQ.algebraic_field(zeta)
            base = BaseField(domain, m, domain.from_sympy(zeta), name=f"CyclotomicField({m})")
        _FIELD_CACHE[m] = base
        return base


def finite_field(p: int) -> BaseField:
    """Return GF(p) with a primitive root modulo p as its root of unity."""
    if not isprime(p):
        raise ParameterError(f"Finite fields are supported for prime orders only, got {p}")
    key = f"GF({p})"
    with _FIELD_CACHE_LOCK:
        if key in _FIELD_CACHE:
            return _FIELD_CACHE[key]
        domain = GF(p)
        base = BaseField(domain, p - 1, domain.convert(int(primitive_root(p))), name=key)
        _FIELD_CACHE[key] = base
        return base
