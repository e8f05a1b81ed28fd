# groups/matrix_group.py
"""
Finite matrix groups over a BaseField.

Elements are sympy DomainMatrix objects. The group is enumerated on demand by
closure under right multiplication with the generators; enumeration order is
deterministic and is what orders hyperplane orbits and reflection classes.
"""
from collections import deque
from typing import Any, Dict, List, Optional, Sequence, Tuple

from sympy.polys.matrices import DomainMatrix

from core.cache import AttributeCache
from core.constants import DEFAULT_MAX_GROUP_ORDER, ELEMENTS_KEY, NON_MODULAR_KEY
from core.exceptions import GroupError, ParameterError
from core.fields import BaseField, cyclotomic_field
from utils.logging_config import get_logger

logger = get_logger(__name__)

MatrixKey = Tuple[Tuple[Any, ...], ...]


def matrix_key(M: DomainMatrix) -> MatrixKey:
    """Hashable fingerprint of a matrix (its entries as domain elements)."""
    return tuple(tuple(row) for row in M.to_list())


def identity_matrix(n: int, base: BaseField) -> DomainMatrix:
    rows = [[base.one if i == j else base.zero for j in range(n)] for i in range(n)]
    return DomainMatrix(rows, (n, n), base.domain)


class MatrixGroup:
    """
    A finite group generated by invertible square matrices.

    Lazily computed attributes (elements, non-modularity, reflection data,
    parameter space) live in ``self.cache`` and are filled at most once.
    """

    def __init__(self, generators: Sequence[DomainMatrix], base_field: BaseField,
                 name: Optional[str] = None, max_order: int = DEFAULT_MAX_GROUP_ORDER) -> None:
        if not generators:
            raise GroupError("A matrix group needs at least one generator.")
        n, n_cols = generators[0].shape
        for g in generators:
            if g.shape != (n, n_cols) or n != n_cols:
                raise GroupError(f"Generators must be square matrices of the same size, got {g.shape}")
            if g.domain != base_field.domain:
                raise GroupError(f"Generator over {g.domain} does not live in {base_field}")
            if base_field.is_zero(g.det()):
                raise GroupError("Generators must be invertible.")
        self.base_field = base_field
        self.name = name or f"MatrixGroup({n}, {base_field})"
        self.max_order = max_order
        self._generators: Tuple[DomainMatrix, ...] = tuple(generators)
        self._inverses: Tuple[DomainMatrix, ...] = tuple(g.inv() for g in generators)
        self._identity = identity_matrix(n, base_field)
        self.cache = AttributeCache(self.name)

    @classmethod
    def from_sequence(cls, matrices: Sequence[Sequence[Sequence[Any]]], base_field: Optional[BaseField] = None,
                      **kwargs) -> "MatrixGroup":
        """
        Create the matrix group generated by nested lists of entries.

        Entries may be ints, fractions or strings polynomial in ``z``; they are
        always read into a field (QQ unless *base_field* is given).
        """
        base = base_field or cyclotomic_field(1)
        if not matrices:
            raise GroupError("A matrix group needs at least one generator.")
        generators = []
        for index, rows in enumerate(matrices):
            n = len(rows)
            if any(len(row) != n for row in rows):
                raise GroupError(f"Generator {index + 1} is not a square matrix.")
            try:
                entries = [[base.convert(x) for x in row] for row in rows]
            except ParameterError as e:
                logger.error("Could not read generator %d: %s", index + 1, e)
                raise GroupError(f"Could not read generator {index + 1}: {e}") from e
            generators.append(DomainMatrix(entries, (n, n), base.domain))
        return cls(generators, base, **kwargs)

    # ------------------------------------------------------------------
    # Basic data
    # ------------------------------------------------------------------
    @property
    def generators(self) -> Tuple[DomainMatrix, ...]:
        return self._generators

    @property
    def generator_inverses(self) -> Tuple[DomainMatrix, ...]:
        return self._inverses

    @property
    def ngens(self) -> int:
        return len(self._generators)

    @property
    def dimension(self) -> int:
        return self._identity.shape[0]

    @property
    def identity(self) -> DomainMatrix:
        return self._identity

    @property
    def order(self) -> int:
        return len(self.elements())

    def elements(self) -> List[DomainMatrix]:
        """All group elements, identity first, in breadth-first order."""
        return self.cache.get_or_compute(ELEMENTS_KEY, self._enumerate)

    def _enumerate(self) -> List[DomainMatrix]:
        seen: Dict[MatrixKey, DomainMatrix] = {matrix_key(self._identity): self._identity}
        elements = [self._identity]
        queue = deque([self._identity])
        while queue:
            x = queue.popleft()
            for g in self._generators:
                y = x.matmul(g)
                key = matrix_key(y)
                if key in seen:
                    continue
                if len(elements) >= self.max_order:
                    raise GroupError(f"{self.name} has more than {self.max_order} elements; "
                                     "it is infinite or max_order is too small.")
                seen[key] = y
                elements.append(y)
                queue.append(y)
        logger.debug("Enumerated %s: %d elements", self.name, len(elements))
        return elements

    def conjugate(self, x: DomainMatrix, index: int) -> DomainMatrix:
        """Return g x g^-1 for the generator g at *index*."""
        return self._generators[index].matmul(x).matmul(self._inverses[index])

    def is_non_modular(self) -> bool:
        """True iff the characteristic of the base field is zero or does not divide the group order."""
        def _compute() -> bool:
            p = self.base_field.characteristic
            return p == 0 or self.order % p != 0
        return self.cache.get_or_compute(NON_MODULAR_KEY, _compute)

    def __contains__(self, x: DomainMatrix) -> bool:
        key = matrix_key(x)
        return any(matrix_key(g) == key for g in self.elements())

    def __repr__(self) -> str:
        return f"<MatrixGroup {self.name}: degree {self.dimension}, {self.ngens} generators>"
