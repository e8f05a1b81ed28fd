# symbolic/rings.py
"""
Parameter rings: multivariate polynomial rings or rational function fields
with named generators over a BaseField, backed by sympy's sparse PolyRing
and FracField.
"""
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple

import sympy
from sympy.polys.fields import FracElement, FracField
from sympy.polys.orderings import lex
from sympy.polys.polyerrors import PolynomialError
from sympy.polys.rings import PolyElement, PolyRing

from core.constants import ROOT_OF_UNITY_NAME
from core.exceptions import ParameterError
from core.fields import ROOT_SYMBOL, BaseField
from core.safe_math import parse_expr
from utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ParameterRing:
    """
    Immutable <base field, generator names, rationality> bundle.

    * ``rational=False`` gives the polynomial ring base[names].
    * ``rational=True`` gives its fraction field base(names).
    * The generator order is the order of ``names`` and never changes.
    """
    base: BaseField
    names: Tuple[str, ...]
    rational: bool = False
    _ring: Any = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        names = tuple(self.names)
        if len(set(names)) != len(names):
            raise ParameterError(f"Generator names must be distinct, got {list(names)}")
        if ROOT_OF_UNITY_NAME in names:
            raise ParameterError(f"'{ROOT_OF_UNITY_NAME}' is reserved for the root of unity")
        object.__setattr__(self, "names", names)
        symbols = tuple(sympy.Symbol(n) for n in names)
        if self.rational:
            backend = FracField(symbols, self.base.domain, lex)
        else:
            backend = PolyRing(symbols, self.base.domain, lex)
        object.__setattr__(self, "_ring", backend)

    # ------------------------------------------------------------------
    # Generators and constants
    # ------------------------------------------------------------------
    @property
    def ngens(self) -> int:
        return len(self.names)

    @property
    def gens(self) -> Tuple[Any, ...]:
        return tuple(self._ring.gens)

    def gen(self, name: str):
        try:
            return self._ring.gens[self.names.index(name)]
        except ValueError:
            raise ParameterError(f"No generator named '{name}' in {self}") from None

    @property
    def symbols(self) -> Tuple[sympy.Symbol, ...]:
        return tuple(self._ring.symbols)

    @property
    def zero(self):
        return self._ring.zero

    @property
    def one(self):
        return self._ring.one

    @property
    def _poly_ring(self) -> PolyRing:
        return self._ring.ring if self.rational else self._ring

    def ground(self, coeff):
        """Embed a base field element as a constant."""
        return self._ring.ground_new(coeff)

    # ------------------------------------------------------------------
    # Membership and conversion
    # ------------------------------------------------------------------
    def owns(self, element) -> bool:
        if self.rational:
            return isinstance(element, FracElement) and element.field == self._ring
        return isinstance(element, PolyElement) and element.ring == self._ring

    def __contains__(self, element) -> bool:
        return self.owns(element)

    def convert(self, value):
        """Return *value* as an element of this ring."""
        if self.owns(value):
            return value
        if isinstance(value, (PolyElement, FracElement)):
            return self._from_sibling(value)
        if isinstance(value, str):
            return self.parse(value)
        if isinstance(value, sympy.Basic):
            return self.from_expr(value)
        return self.ground(self.base.convert(value))

    def _from_sibling(self, value):
        """
        Coerce an element of the ring with the same base and names but the
        other rationality: polynomials into the fraction field, fractions with
        constant denominator into the polynomial ring.
        """
        if isinstance(value, PolyElement) and self.rational and value.ring == self._poly_ring:
            return self._ring.new(value)
        if isinstance(value, FracElement) and not self.rational and value.field.ring == self._poly_ring:
            return self._numerator_over_constant(value)
        raise ParameterError(f"Element {value} does not belong to {self}")

    def _numerator_over_constant(self, fraction) -> PolyElement:
        numer, denom = fraction.numer, fraction.denom
        if not denom.is_ground:
            raise ParameterError(f"{fraction} is not a polynomial")
        const = denom.get(self._poly_ring.zero_monom, self.base.zero)
        return numer * self.base.inverse(const)

    def from_expr(self, expr: sympy.Expr):
        """
        Convert a sympy expression that is polynomial in the generators, with
        coefficients polynomial in ``z``, to a ring element.
        """
        expr = sympy.sympify(expr)
        if not self.ngens:
            return self.ground(self.base.from_expr(expr))
        if self.rational:
            numer, denom = sympy.fraction(sympy.together(expr))
            if denom != 1:
                return self.divide(self._from_polynomial_expr(numer), self._from_polynomial_expr(denom))
        return self._from_polynomial_expr(expr)

    def _from_polynomial_expr(self, expr: sympy.Expr):
        try:
            poly = sympy.Poly(expr, *self.symbols)
        except PolynomialError as e:
            raise ParameterError(f"'{expr}' is not a polynomial in {list(self.names)}: {e}") from e
        result = self.zero
        for monom, coeff in poly.terms():
            term = self.ground(self.base.from_expr(coeff))
            for gen, exp in zip(self.gens, monom):
                if exp:
                    term = term * gen ** exp
            result = result + term
        return result

    def parse(self, src: str):
        local = {name: sym for name, sym in zip(self.names, self.symbols)}
        local[ROOT_OF_UNITY_NAME] = ROOT_SYMBOL
        try:
            expr = parse_expr(src, local)
        except ValueError as e:
            logger.error("Could not parse '%s' in %s: %s", src, self, e)
            raise ParameterError(f"Could not parse '{src}' in {self}: {e}") from e
        return self.from_expr(expr)

    # ------------------------------------------------------------------
    # Coefficient extraction
    # ------------------------------------------------------------------
    def as_polynomial(self, element) -> PolyElement:
        """
        Return *element* as a polynomial. Fractions must have a constant
        denominator; it is divided out.
        """
        element = self.convert(element)
        if not self.rational:
            return element
        return self._numerator_over_constant(element)

    def total_degree(self, element) -> int:
        """Total degree of a polynomial; -1 for zero."""
        poly = self.as_polynomial(element)
        if not poly:
            return -1
        return max(sum(monom) for monom in poly.monoms())

    def constant_coefficient(self, element):
        poly = self.as_polynomial(element)
        return poly.get(self._poly_ring.zero_monom, self.base.zero)

    def coefficient(self, element, index: int):
        """Coefficient of the monomial given by the generator at *index*."""
        poly = self.as_polynomial(element)
        monom = tuple(1 if i == index else 0 for i in range(self.ngens))
        return poly.get(monom, self.base.zero)

    def linear_coefficients(self, element) -> List[Any]:
        return [self.coefficient(element, i) for i in range(self.ngens)]

    # ------------------------------------------------------------------
    # Arithmetic helpers
    # ------------------------------------------------------------------
    def divide(self, a, b):
        """Exact quotient a / b; in a polynomial ring b must be a nonzero constant."""
        if not b:
            raise ZeroDivisionError(f"division by zero in {self}")
        if self.rational:
            return a / b
        if not b.is_ground:
            raise ParameterError(f"Cannot divide by {b} in the polynomial ring {self}")
        return a * self.ground(self.base.inverse(b.get(self._poly_ring.zero_monom)))

    def to_expr(self, element) -> sympy.Expr:
        return self.convert(element).as_expr()

    # ------------------------------------------------------------------
    # Related rings
    # ------------------------------------------------------------------
    def with_names(self, names: Sequence[str], rational: Optional[bool] = None) -> "ParameterRing":
        return ParameterRing(self.base, tuple(names), self.rational if rational is None else rational)

    def inclusion(self, target: "ParameterRing"):
        """Canonical map into a ring with the same generator names, e.g. its fraction field."""
        from symbolic.homomorphisms import RingHomomorphism

        if target.names != self.names or target.base != self.base:
            raise ParameterError(f"No canonical inclusion of {self} into {target}")
        return RingHomomorphism(self, target, target.gens)

    def __str__(self) -> str:
        kind = "RationalFunctionField" if self.rational else "PolynomialRing"
        return f"{kind}({self.base}, [{', '.join(self.names)}])"
