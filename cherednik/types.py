# cherednik/types.py
"""
Conventions for the generic Cherednik parameter.

Each parameter type names the generators of the parameter ring and assigns
a ring element to every reflection class:

* EG   (Etingof-Ginzburg):  c(s) = c_s
* BR   (Bonnafe-Rouquier):  c(s) = (eigenvalue(s) - 1) * C_s
* GGOR (Ginzburg-Guay-Opdam-Rouquier):
       c(s) = (det(s)^-1 - 1) * sum_{j=1}^{e_Omega - 1} det(s)^j * k_{Omega, j}
  with one generator k_{Omega, j} per hyperplane orbit Omega and 1 <= j < e_Omega.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Type

from core.exceptions import ParameterError, UnrecognizedTypeError
from groups.reflections import ReflectionLibrary
from symbolic.rings import ParameterRing


class ParameterType(ABC):
    """Base class for parameter conventions; subclasses set ``type_name``."""
    type_name: str = "undefined"

    @abstractmethod
    def generator_names(self, library: ReflectionLibrary) -> List[str]:
        pass

    @abstractmethod
    def parameter_values(self, library: ReflectionLibrary, ring: ParameterRing) -> List[Any]:
        """Values c(1), ..., c(N) in *ring*, in reflection class order."""
        pass

    def __repr__(self) -> str:
        return f"<ParameterType {self.type_name}>"


class EtingofGinzburgType(ParameterType):
    type_name = "EG"

    def generator_names(self, library: ReflectionLibrary) -> List[str]:
        return [f"c{s.index}" for s in library.classes]

    def parameter_values(self, library: ReflectionLibrary, ring: ParameterRing) -> List[Any]:
        return list(ring.gens)


class BonnafeRouquierType(ParameterType):
    type_name = "BR"

    def generator_names(self, library: ReflectionLibrary) -> List[str]:
        return [f"C{s.index}" for s in library.classes]

    def parameter_values(self, library: ReflectionLibrary, ring: ParameterRing) -> List[Any]:
        base = ring.base
        return [ring.ground(s.eigenvalue - base.one) * gen for s, gen in zip(library.classes, ring.gens)]


class GGORType(ParameterType):
    type_name = "GGOR"

    @staticmethod
    def offsets(library: ReflectionLibrary) -> List[int]:
        """Position of k_{Omega,1} in the generator list, per orbit."""
        offsets, position = [], 0
        for orbit in library.orbits:
            offsets.append(position)
            position += orbit.e_omega - 1
        return offsets

    def generator_names(self, library: ReflectionLibrary) -> List[str]:
        return [f"k{orbit.index}_{j}" for orbit in library.orbits for j in range(1, orbit.e_omega)]

    def parameter_values(self, library: ReflectionLibrary, ring: ParameterRing) -> List[Any]:
        base = ring.base
        offsets = self.offsets(library)
        values = []
        for s in library.classes:
            det = s.eigenvalue
            e = s.e_omega
            value = ring.zero
            for j in range(1, e):
                k = ring.gens[offsets[s.orbit - 1] + (j % e) - 1]
                value = value + ring.ground(base.power(det, j)) * k
            values.append(ring.ground(base.inverse(det) - base.one) * value)
        return values


_type_registry: Dict[str, ParameterType] = {
    EtingofGinzburgType.type_name: EtingofGinzburgType(),
    BonnafeRouquierType.type_name: BonnafeRouquierType(),
    GGORType.type_name: GGORType(),
}


def get_parameter_type(type_name: str) -> ParameterType:
    if isinstance(type_name, ParameterType):
        return type_name
    if not isinstance(type_name, str):
        raise UnrecognizedTypeError("Parameter type must be a string.")
    param_type = _type_registry.get(type_name.upper())
    if param_type is None:
        raise UnrecognizedTypeError(
            f"Unknown Cherednik parameter type: {type_name} (known: {', '.join(sorted(_type_registry))})")
    return param_type


def register_parameter_type(param_class: Type[ParameterType]) -> None:
    if not (isinstance(param_class, type) and issubclass(param_class, ParameterType)):
        raise ParameterError("Registered parameter types must subclass ParameterType.")
    _type_registry[param_class.type_name.upper()] = param_class()


def parameter_type_names() -> List[str]:
    return sorted(_type_registry)
