# symbolic/homomorphisms.py
from typing import Any, Sequence, Tuple, Union

from core.exceptions import DimensionMismatchError, ParameterError
from core.fields import BaseField
from symbolic.rings import ParameterRing

Codomain = Union[ParameterRing, BaseField]


class RingHomomorphism:
    """
    A ring homomorphism out of a ParameterRing, fixing the base field and
    determined by the images of the generators.

    The codomain is either another ParameterRing or the base field itself,
    in which case the homomorphism is evaluation at a point.
    """

    def __init__(self, domain: ParameterRing, codomain: Codomain, images: Sequence[Any]) -> None:
        images = list(images)
        if len(images) != domain.ngens:
            raise DimensionMismatchError(
                f"{domain} has {domain.ngens} generators but {len(images)} images were given")
        codomain_base = codomain.base if isinstance(codomain, ParameterRing) else codomain
        if codomain_base != domain.base:
            raise ParameterError(f"Codomain {codomain} is not over {domain.base}")
        self.domain = domain
        self.codomain = codomain
        self.images: Tuple[Any, ...] = tuple(codomain.convert(x) for x in images)

    def __call__(self, element):
        element = self.domain.convert(element)
        if self.domain.rational:
            return self.codomain.divide(self._apply(element.numer), self._apply(element.denom))
        return self._apply(element)

    def _apply(self, poly):
        result = self.codomain.zero
        for monom, coeff in poly.terms():
            term = self.codomain.ground(coeff)
            for image, exp in zip(self.images, monom):
                if exp:
                    term = term * image ** exp
            result = result + term
        return result

    def compose(self, other: "RingHomomorphism") -> "RingHomomorphism":
        """Return other ∘ self."""
        return RingHomomorphism(self.domain, other.codomain, [other(x) for x in self.images])

    def __eq__(self, other) -> bool:
        if not isinstance(other, RingHomomorphism):
            return NotImplemented
        return (self.domain == other.domain and self.codomain == other.codomain
                and self.images == other.images)

    def __hash__(self) -> int:
        return hash((self.domain, self.codomain, self.images))

    def __repr__(self) -> str:
        pairs = ", ".join(f"{n} -> {self.codomain.to_expr(x)}" for n, x in zip(self.domain.names, self.images))
        return f"<RingHomomorphism {self.domain} -> {self.codomain}: {pairs}>"
