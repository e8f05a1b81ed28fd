# groups/reflections.py
"""
Reflection data of a finite matrix group.

Provides, per group, the ordered orbits of reflecting hyperplanes (with the
order e_Omega of the cyclic pointwise stabilizer of a hyperplane in the orbit)
and the ordered conjugacy classes of reflections. A reflection class is
determined by its hyperplane orbit Omega and its eigenvalue det, which is
root_of_unity(e_Omega)**j for a unique exponent 1 <= j <= e_Omega - 1.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

import networkx as nx
from sympy.polys.matrices import DomainMatrix

from core.constants import REFLECTION_LIBRARY_KEY
from core.exceptions import GroupError
from groups.matrix_group import MatrixGroup, MatrixKey, matrix_key
from utils.logging_config import get_logger

logger = get_logger(__name__)

HyperplaneKey = Tuple[Any, ...]


@dataclass(frozen=True)
class HyperplaneOrbit:
    """An orbit Omega of reflecting hyperplanes."""
    index: int
    e_omega: int
    hyperplanes: Tuple[HyperplaneKey, ...]
    # Non-identity elements of the pointwise stabilizer of hyperplanes[0].
    stabilizer: Tuple[DomainMatrix, ...]

    @property
    def size(self) -> int:
        return len(self.hyperplanes)


@dataclass(frozen=True)
class ReflectionClass:
    """A conjugacy class of reflections, identified by (orbit, exponent)."""
    index: int
    orbit: int
    exponent: int
    eigenvalue: Any
    e_omega: int
    representative: DomainMatrix
    size: int

    @property
    def id(self) -> Tuple[int, int]:
        return (self.orbit, self.exponent)


@dataclass(frozen=True)
class ReflectionLibrary:
    orbits: Tuple[HyperplaneOrbit, ...]
    classes: Tuple[ReflectionClass, ...]

    @property
    def e_omegas(self) -> List[int]:
        return [orbit.e_omega for orbit in self.orbits]

    def __len__(self) -> int:
        return len(self.classes)


def hyperplane_key(g: DomainMatrix, group: MatrixGroup) -> HyperplaneKey:
    """
    Key of the hyperplane fixed by a reflection g: the nonzero row of g - 1
    scaled so that its first nonzero entry is 1.
    """
    base = group.base_field
    for row in (g - group.identity).to_list():
        for entry in row:
            if not base.is_zero(entry):
                scale = base.inverse(entry)
                return tuple(x * scale for x in row)
    raise GroupError("The identity fixes no hyperplane.")


def is_reflection(g: DomainMatrix, group: MatrixGroup) -> bool:
    if (g - group.identity).rank() != 1:
        return False
    return g.det() != group.base_field.one


def reflection_library(group: MatrixGroup) -> ReflectionLibrary:
    """Return the (cached) reflection data of *group*."""
    return group.cache.get_or_compute(REFLECTION_LIBRARY_KEY, lambda: _compute_library(group))


def _compute_library(group: MatrixGroup) -> ReflectionLibrary:
    base = group.base_field
    reflections = [g for g in group.elements() if is_reflection(g, group)]
    if not reflections:
        logger.warning("%s contains no reflections", group.name)

    # Hyperplane of each reflection, and reflections grouped by hyperplane.
    by_hyperplane: Dict[HyperplaneKey, List[DomainMatrix]] = {}
    hyperplane_of: Dict[MatrixKey, HyperplaneKey] = {}
    for s in reflections:
        key = hyperplane_key(s, group)
        hyperplane_of[matrix_key(s)] = key
        by_hyperplane.setdefault(key, []).append(s)

    # Orbits of hyperplanes: connected components of the conjugation action.
    graph = nx.Graph()
    graph.add_nodes_from(by_hyperplane)
    for s in reflections:
        for index in range(group.ngens):
            t = group.conjugate(s, index)
            graph.add_edge(hyperplane_of[matrix_key(s)], hyperplane_of[matrix_key(t)])
    first_seen: Dict[HyperplaneKey, int] = {}
    for position, s in enumerate(reflections):
        first_seen.setdefault(hyperplane_of[matrix_key(s)], position)
    components = sorted(nx.connected_components(graph), key=lambda c: min(first_seen[h] for h in c))

    orbits: List[HyperplaneOrbit] = []
    classes: List[ReflectionClass] = []
    for orbit_index, component in enumerate(components, start=1):
        hyperplanes = tuple(sorted(component, key=lambda h: first_seen[h]))
        stabilizer = tuple(by_hyperplane[hyperplanes[0]])
        e_omega = len(stabilizer) + 1
        for h in hyperplanes:
            if len(by_hyperplane[h]) + 1 != e_omega:
                raise GroupError(f"Hyperplanes in orbit {orbit_index} have stabilizers of different orders.")
        orbits.append(HyperplaneOrbit(orbit_index, e_omega, hyperplanes, stabilizer))

        zeta = base.root_of_unity(e_omega)
        by_eigenvalue = {s.det(): s for s in stabilizer}
        for j in range(1, e_omega):
            det = base.power(zeta, j)
            if det not in by_eigenvalue:
                raise GroupError(f"No reflection with eigenvalue {base.to_expr(det)} in orbit {orbit_index}.")
            classes.append(ReflectionClass(
                index=len(classes) + 1,
                orbit=orbit_index,
                exponent=j,
                eigenvalue=det,
                e_omega=e_omega,
                representative=by_eigenvalue[det],
                size=len(hyperplanes),
            ))

    logger.debug("%s: %d hyperplane orbits with e_Omega %s, %d reflection classes",
                 group.name, len(orbits), [o.e_omega for o in orbits], len(classes))
    return ReflectionLibrary(tuple(orbits), tuple(classes))
