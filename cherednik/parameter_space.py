# cherednik/parameter_space.py
"""
The GGOR parameter space of a group together with Martino's sharp involution
k_{Omega,j} -> k_{Omega, e_Omega - j}, computed once per group and cached.
"""
from dataclasses import dataclass
from typing import List

from core.constants import PARAMETER_SPACE_KEY
from cherednik.parameters import parameter_ring
from cherednik.types import GGORType
from groups.matrix_group import MatrixGroup
from groups.reflections import reflection_library
from symbolic.homomorphisms import RingHomomorphism
from symbolic.rings import ParameterRing
from utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ParameterSpace:
    ring: ParameterRing
    sharp: RingHomomorphism


def sharp_images(group: MatrixGroup, ring: ParameterRing) -> List:
    """Image of each generator of the GGOR ring under the sharp map, in generator order."""
    library = reflection_library(group)
    offsets = GGORType.offsets(library)
    images = []
    for orbit, offset in zip(library.orbits, offsets):
        for j in range(1, orbit.e_omega):
            images.append(ring.gens[offset + (orbit.e_omega - j) - 1])
    return images


def cherednik_parameter_space(group: MatrixGroup) -> ParameterSpace:
    """
    Return the GGOR parameter space of *group*, computing and caching it on
    first use. Later calls return the same object.
    """
    def _build() -> ParameterSpace:
        ring = parameter_ring(group, GGORType.type_name, rational=False)
        sharp = RingHomomorphism(ring, ring, sharp_images(group, ring))
        logger.debug("Parameter space of %s: %s", group.name, ring)
        return ParameterSpace(ring, sharp)

    return group.cache.get_or_compute(PARAMETER_SPACE_KEY, _build)


def martino_sharp(group: MatrixGroup) -> RingHomomorphism:
    return cherednik_parameter_space(group).sharp
