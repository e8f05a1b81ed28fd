# core/exceptions.py

class ChampError(Exception):
    """Base exception for CHAMP errors."""
    pass

class ParameterError(ChampError):
    """Raised when a value or expression cannot be interpreted in a ring or field."""
    pass

class UnrecognizedTypeError(ParameterError):
    """Raised when a Cherednik parameter type tag is not registered."""
    pass

class DimensionMismatchError(ParameterError):
    """Raised when a sequence of values does not match the number of generators."""
    pass

class HyperplaneError(ChampError):
    """Raised when an element cannot be used as a hyperplane in parameter space."""
    pass

class NotAHyperplaneError(HyperplaneError):
    """Raised when the total degree of a hyperplane equation is not 1."""
    pass

class AffineHyperplaneError(HyperplaneError):
    """Raised when a hyperplane equation has a nonzero constant term."""
    pass

class GroupError(ChampError):
    """Raised when a matrix group cannot be constructed or enumerated."""
    pass

class ConfigError(ChampError):
    """Raised when a run description fails validation."""
    pass
