# symbolic/maps.py
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Sequence, Tuple

import sympy

from core.exceptions import ParameterError


@dataclass(frozen=True, eq=True)
class ParameterMap(Mapping):
    """
    A finite map {1, ..., N} -> codomain.

    Used for Cherednik parameters, where the index runs over the reflection
    classes of a group and the codomain is a ParameterRing or a BaseField.
    """
    codomain: Any
    images: Tuple[Any, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "images", tuple(self.images))

    @classmethod
    def from_sequence(cls, values: Sequence[Any], codomain: Optional[Any] = None) -> "ParameterMap":
        """
        Map i -> values[i-1]. Values are converted into *codomain* when one is
        given; otherwise they are kept as they are.
        """
        if codomain is not None:
            values = [codomain.convert(v) for v in values]
        return cls(codomain, tuple(values))

    @property
    def domain(self) -> range:
        return range(1, len(self.images) + 1)

    def __getitem__(self, index: int):
        if isinstance(index, bool) or not isinstance(index, int) or not 1 <= index <= len(self.images):
            raise KeyError(index)
        return self.images[index - 1]

    def __call__(self, index: int):
        return self[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.domain)

    def __len__(self) -> int:
        return len(self.images)

    def apply(self, hom) -> "ParameterMap":
        """Compose with a homomorphism out of the codomain: i -> hom(c(i))."""
        if self.codomain is not None and hom.domain != self.codomain:
            raise ParameterError(f"Homomorphism out of {hom.domain} cannot be applied to values in {self.codomain}")
        return ParameterMap(hom.codomain, tuple(hom(x) for x in self.images))

    def to_expr(self) -> Dict[int, sympy.Expr]:
        if self.codomain is None:
            return {i: x.as_expr() if hasattr(x, "as_expr") else sympy.sympify(x) for i, x in self.items()}
        return {i: self.codomain.to_expr(x) for i, x in self.items()}

    def __repr__(self) -> str:
        body = ", ".join(f"{i} -> {x}" for i, x in self.to_expr().items())
        return f"<ParameterMap {{{body}}}>"
