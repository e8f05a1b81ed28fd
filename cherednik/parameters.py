# cherednik/parameters.py
"""
Generic Cherednik parameters of a complex reflection group.

A Cherednik parameter is a map from the reflection classes {1, ..., N} of a
group to a ring. The generic parameter takes values in a polynomial ring (or
its fraction field) whose generators are named by the chosen convention.
"""
from typing import Any, Optional, Sequence, Tuple, Union

from core.constants import DEFAULT_PARAMETER_TYPE, TIME_PARAMETER_NAME
from core.exceptions import ParameterError
from cherednik.types import ParameterType, get_parameter_type
from groups.matrix_group import MatrixGroup
from groups.reflections import reflection_library
from symbolic.homomorphisms import RingHomomorphism
from symbolic.maps import ParameterMap
from symbolic.rings import ParameterRing
from utils.logging_config import get_logger

logger = get_logger(__name__)

TypeLike = Union[str, ParameterType]


def parameter_ring(group: MatrixGroup, param_type: TypeLike = DEFAULT_PARAMETER_TYPE,
                   rational: bool = False) -> ParameterRing:
    """
    The ring of generic parameters of the given type.

    :param group: A finite complex reflection group.
    :param param_type: "EG", "BR" or "GGOR".
    :param rational: Use the rational function field instead of the polynomial ring.
    :return: A ParameterRing over the base field of the group.
    :raises UnrecognizedTypeError: For an unknown type tag.
    """
    ptype = get_parameter_type(param_type)
    library = reflection_library(group)
    ring = ParameterRing(group.base_field, tuple(ptype.generator_names(library)), rational)
    logger.debug("%s parameter ring of %s: %d generators", ptype.type_name, group.name, ring.ngens)
    return ring


def cherednik_parameter(group: MatrixGroup, param_type: TypeLike = DEFAULT_PARAMETER_TYPE,
                        rational: bool = False) -> ParameterMap:
    """A (rational if requested) generic Cherednik parameter of the given type for *group*."""
    ptype = get_parameter_type(param_type)
    ring = parameter_ring(group, ptype, rational)
    values = ptype.parameter_values(reflection_library(group), ring)
    return ParameterMap(ring, tuple(values))


def cherednik_parameter_at(group: MatrixGroup, values: Sequence[Any],
                           param_type: TypeLike = DEFAULT_PARAMETER_TYPE) -> ParameterMap:
    """
    A Cherednik parameter for *group* with t = 0, obtained by evaluating the
    generic polynomial parameter at *values* (one per generator).

    :raises DimensionMismatchError: If len(values) differs from the number of generators.
    """
    generic = cherednik_parameter(group, param_type, rational=False)
    point = RingHomomorphism(generic.codomain, group.base_field, values)
    return generic.apply(point)


def full_cherednik_parameter(group: MatrixGroup, param_type: TypeLike = DEFAULT_PARAMETER_TYPE,
                             rational: bool = True) -> Tuple[Any, ParameterMap]:
    """
    A Cherednik parameter for *group* including the t-parameter.

    The parameter ring K is embedded into L with an extra first generator t,
    sending the i-th generator of K to the (i+1)-th of L.

    Returns:
        The pair (t, c_L).
    """
    c = cherednik_parameter(group, param_type, rational)
    K = c.codomain
    if TIME_PARAMETER_NAME in K.names:
        raise ParameterError(f"'{TIME_PARAMETER_NAME}' is already a generator of {K}")
    L = ParameterRing(K.base, (TIME_PARAMETER_NAME,) + K.names, rational)
    embedding = RingHomomorphism(K, L, L.gens[1:])
    return L.gens[0], c.apply(embedding)


def parameter_from_values(values: Sequence[Any], codomain: Optional[Any] = None) -> ParameterMap:
    """The Cherednik parameter i -> values[i-1]."""
    return ParameterMap.from_sequence(values, codomain)
