# cherednik/hyperplanes.py
"""
Specialization and restriction of Cherednik parameters in hyperplanes.

Both operations solve the linear equation H = 0 for its first variable with
nonzero coefficient and substitute the solution into every value of the
parameter. They differ only in the target ring: specialization lands in the
rational function field (the generic point of H), restriction in the
polynomial ring (the parameter space cut down to H).
"""
from typing import Any, List, Tuple

from core.exceptions import AffineHyperplaneError, NotAHyperplaneError, ParameterError
from symbolic.homomorphisms import RingHomomorphism
from symbolic.maps import ParameterMap
from symbolic.rings import ParameterRing
from utils.logging_config import get_logger

logger = get_logger(__name__)


def hyperplane_coefficients(ring: ParameterRing, hyperplane: Any) -> List[Any]:
    """
    Validate a hyperplane equation and return its coefficients against the
    generators of *ring*.

    The equation may be given in *ring*, in the ring with the same generators
    and the other rationality, or as text. It is read in the fraction field.

    :raises NotAHyperplaneError: If the total degree is not 1.
    :raises AffineHyperplaneError: If the constant term is nonzero.
    """
    ring = ring.with_names(ring.names, rational=True)
    element = ring.convert(hyperplane)
    try:
        degree = ring.total_degree(element)
    except ParameterError as e:
        raise NotAHyperplaneError(f"Not a hyperplane: {e}") from e
    if degree != 1:
        raise NotAHyperplaneError(f"Not a hyperplane: {element} has total degree {degree}")
    if not ring.base.is_zero(ring.constant_coefficient(element)):
        raise AffineHyperplaneError(f"Hyperplane {element} is affine.")
    return ring.linear_coefficients(element)


def elimination_map(ring: ParameterRing, hyperplane: Any, rational: bool) -> Tuple[RingHomomorphism, int]:
    """
    The homomorphism P -> Q eliminating the pivot variable of H = 0.

    Q has the generators of P except the pivot, in their original order. The
    pivot is sent to -sum_{i != pivot} (a_i / a_pivot) * x_i.

    Returns:
        The homomorphism and the index of the eliminated generator.
    """
    if not isinstance(ring, ParameterRing):
        raise ParameterError(f"Cherednik parameter values must lie in a parameter ring, not {ring}")
    base = ring.base
    coeffs = hyperplane_coefficients(ring, hyperplane)
    pivot = next(i for i, a in enumerate(coeffs) if not base.is_zero(a))
    alpha = base.inverse(coeffs[pivot])
    coeffs = [a * alpha for a in coeffs]

    target = ring.with_names([n for i, n in enumerate(ring.names) if i != pivot], rational=rational)
    others = [i for i in range(ring.ngens) if i != pivot]
    rep = target.zero
    for position, i in enumerate(others):
        rep = rep - target.ground(coeffs[i]) * target.gens[position]

    images = list(target.gens[:pivot]) + [rep] + list(target.gens[pivot:])
    logger.debug("Eliminating %s from %s; %s -> %s", ring.names[pivot], ring, ring.names[pivot], target.to_expr(rep))
    return RingHomomorphism(ring, target, images), pivot


def specialize_in_hyperplane(c: ParameterMap, hyperplane: Any) -> ParameterMap:
    """Specialize a Cherednik parameter in the generic point of a hyperplane."""
    f, _ = elimination_map(c.codomain, hyperplane, rational=True)
    return c.apply(f)


def restrict_to_hyperplane(c: ParameterMap, hyperplane: Any) -> ParameterMap:
    """Restrict a Cherednik parameter to a hyperplane, keeping polynomial values."""
    f, _ = elimination_map(c.codomain, hyperplane, rational=False)
    return c.apply(f)
