# core/constants.py

# Defaults for parameter construction and group enumeration.
DEFAULT_PARAMETER_TYPE = "GGOR"
DEFAULT_MAX_GROUP_ORDER = 20000

# Name of the formal time parameter prepended by full_cherednik_parameter.
TIME_PARAMETER_NAME = "t"

# Symbol standing for the distinguished root of unity in textual input.
ROOT_OF_UNITY_NAME = "z"

# Keys of the per-group attribute cache.
REFLECTION_LIBRARY_KEY = "reflection_library"
PARAMETER_SPACE_KEY = "cherednik_parameter_space"
NON_MODULAR_KEY = "is_non_modular"
ELEMENTS_KEY = "elements"
