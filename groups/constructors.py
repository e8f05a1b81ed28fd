# groups/constructors.py
from typing import Callable, Dict, List

from sympy.polys.matrices import DomainMatrix

from core.exceptions import GroupError
from core.fields import BaseField, cyclotomic_field
from groups.matrix_group import MatrixGroup


def _matrix(rows: List[List], base: BaseField) -> DomainMatrix:
    n = len(rows)
    return DomainMatrix(rows, (n, n), base.domain)


def _transposition(n: int, i: int, base: BaseField, a=None, b=None) -> DomainMatrix:
    """Permutation matrix of (i, i+1), optionally with entries a, b in the swapped block."""
    rows = [[base.one if r == c else base.zero for c in range(n)] for r in range(n)]
    rows[i][i] = base.zero
    rows[i + 1][i + 1] = base.zero
    rows[i][i + 1] = base.one if a is None else a
    rows[i + 1][i] = base.one if b is None else b
    return _matrix(rows, base)


def imprimitive_group(m: int, p: int, n: int, **kwargs) -> MatrixGroup:
    """
    The imprimitive reflection group G(m, p, n) in its natural representation.

    Generators are s_1, ..., s_{n-1} (adjacent transpositions), s_1' = t s_1 t^-1
    when p > 1, and t^p = diag(z^p, 1, ..., 1) when p < m, with z = exp(2*pi*I/m).
    """
    if m < 1 or n < 1 or p < 1 or m % p != 0:
        raise GroupError(f"G({m},{p},{n}) is not defined; need positive m, n and p dividing m.")
    base = cyclotomic_field(m)
    zeta = base.root_of_unity(m)
    generators = []
    for i in range(n - 1):
        generators.append(_transposition(n, i, base))
    if n > 1 and 1 < p:
        generators.append(_transposition(n, 0, base, zeta, base.inverse(zeta)))
    if p < m:
        rows = [[base.one if r == c else base.zero for c in range(n)] for r in range(n)]
        rows[0][0] = base.power(zeta, p)
        generators.append(_matrix(rows, base))
    if not generators:
        generators.append(_matrix([[base.one if r == c else base.zero for c in range(n)] for r in range(n)], base))
    return MatrixGroup(generators, base, name=f"G({m},{p},{n})", **kwargs)


def cyclic_group(m: int, **kwargs) -> MatrixGroup:
    """The group of m-th roots of unity acting by scalars on a line."""
    return imprimitive_group(m, 1, 1, **kwargs)


def symmetric_group(n: int, **kwargs) -> MatrixGroup:
    """The symmetric group on n letters acting by permutation matrices."""
    return imprimitive_group(1, 1, n, **kwargs)


_FAMILY_REGISTRY: Dict[str, Callable[..., MatrixGroup]] = {
    "imprimitive": imprimitive_group,
    "cyclic": cyclic_group,
    "symmetric": symmetric_group,
}


def get_group_constructor(family: str) -> Callable[..., MatrixGroup]:
    if not isinstance(family, str):
        raise GroupError("Group family name must be a string.")
    constructor = _FAMILY_REGISTRY.get(family.lower())
    if constructor is None:
        raise GroupError(f"Unknown group family: {family}")
    return constructor
