# inout/yaml_parser.py
import yaml
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from cerberus import Validator

from core.constants import DEFAULT_MAX_GROUP_ORDER, DEFAULT_PARAMETER_TYPE
from core.exceptions import ChampError, ConfigError
from core.fields import cyclotomic_field, finite_field
from cherednik.types import parameter_type_names
from groups.constructors import get_group_constructor
from groups.matrix_group import MatrixGroup
from utils.logging_config import get_logger

logger = get_logger(__name__)

_ENTRY = {'type': ['string', 'integer']}

# Schema for a run description.
RUN_SCHEMA: Dict[str, Any] = {
    'group': {
        'type': 'dict',
        'required': True,
        'schema': {
            'family': {
                'type': 'string',
                'required': True,
                'allowed': ['imprimitive', 'cyclic', 'symmetric', 'matrices'],
            },
            'm': {'type': 'integer', 'min': 1},
            'p': {'type': 'integer', 'min': 1},
            'n': {'type': 'integer', 'min': 1},
            # Cyclotomic order of the field for explicit generators.
            'field': {'type': 'integer', 'min': 1, 'excludes': 'characteristic'},
            'characteristic': {'type': 'integer', 'min': 2, 'excludes': 'field'},
            'generators': {
                'type': 'list',
                'minlength': 1,
                'schema': {'type': 'list', 'schema': {'type': 'list', 'schema': _ENTRY}},
            },
            'max_order': {'type': 'integer', 'min': 1, 'default': DEFAULT_MAX_GROUP_ORDER},
        },
    },
    'parameter': {
        'type': 'dict',
        'required': False,
        'default': {},
        'schema': {
            'type': {'type': 'string', 'default': DEFAULT_PARAMETER_TYPE, 'coerce': str.upper},
            'rational': {'type': 'boolean', 'default': False},
            'full': {'type': 'boolean', 'default': False},
            'values': {'type': 'list', 'schema': _ENTRY},
            'hyperplanes': {
                'type': 'list',
                'default': [],
                'schema': {
                    'type': 'dict',
                    'schema': {
                        'equation': {'type': 'string', 'required': True},
                        'mode': {'type': 'string', 'allowed': ['specialize', 'restrict'], 'default': 'specialize'},
                    },
                },
            },
        },
    },
}

_REQUIRED_BY_FAMILY = {
    'imprimitive': ('m', 'p', 'n'),
    'cyclic': ('m',),
    'symmetric': ('n',),
    'matrices': ('generators',),
}


@dataclass
class HyperplaneStep:
    equation: str
    mode: str = 'specialize'


@dataclass
class ParameterRequest:
    """What to compute for the group of a run description."""
    type: str = DEFAULT_PARAMETER_TYPE
    rational: bool = False
    full: bool = False
    values: Optional[List[Any]] = None
    hyperplanes: List[HyperplaneStep] = field(default_factory=list)


def validate_schema(data: Dict[str, Any], schema: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate the YAML data against a given schema.

    Args:
        data: The YAML data as a dictionary.
        schema: The Cerberus schema definition.

    Returns:
        The validated (normalized) document.

    Raises:
        ConfigError: If validation fails.
    """
    if not isinstance(data, dict):
        raise ConfigError("Run description must be a mapping.")
    validator = Validator(schema)
    if not validator.validate(data):
        errors = validator.errors
        logger.error("YAML schema validation errors: %s", errors)
        raise ConfigError("YAML schema validation failed: " + str(errors))
    return validator.document


def build_group(section: Dict[str, Any]) -> MatrixGroup:
    """Construct the matrix group described by a validated 'group' section."""
    family = section['family']
    missing = [key for key in _REQUIRED_BY_FAMILY[family] if key not in section]
    if missing:
        raise ConfigError(f"Group family '{family}' requires: {', '.join(missing)}")
    max_order = section.get('max_order', DEFAULT_MAX_GROUP_ORDER)
    try:
        if family == 'matrices':
            if 'characteristic' in section:
                base = finite_field(section['characteristic'])
            else:
                base = cyclotomic_field(section.get('field', 1))
            return MatrixGroup.from_sequence(section['generators'], base, max_order=max_order)
        args = [section[key] for key in _REQUIRED_BY_FAMILY[family]]
        return get_group_constructor(family)(*args, max_order=max_order)
    except ChampError as e:
        logger.error("Could not build group from %s: %s", section, e)
        raise ConfigError(f"Could not build group: {e}") from e


def build_request(section: Dict[str, Any]) -> ParameterRequest:
    if section.get('type', DEFAULT_PARAMETER_TYPE) not in parameter_type_names():
        raise ConfigError(f"Unknown parameter type '{section.get('type')}'; "
                          f"allowed: {', '.join(parameter_type_names())}")
    steps = [HyperplaneStep(h['equation'], h.get('mode', 'specialize')) for h in section.get('hyperplanes', [])]
    return ParameterRequest(
        type=section.get('type', DEFAULT_PARAMETER_TYPE),
        rational=section.get('rational', False),
        full=section.get('full', False),
        values=section.get('values'),
        hyperplanes=steps,
    )


def parse_run_config(data: Dict[str, Any]) -> Tuple[MatrixGroup, ParameterRequest]:
    data = validate_schema(data, RUN_SCHEMA)
    group = build_group(data['group'])
    request = build_request(data.get('parameter', {}))
    return group, request


def load_run_config(yaml_file: str) -> Tuple[MatrixGroup, ParameterRequest]:
    """
    Parse a YAML run description.

    Args:
        yaml_file: Path to the YAML file.

    Returns:
        The matrix group and the parameter request.

    Raises:
        ConfigError: On validation or construction errors.
    """
    with open(yaml_file, 'r') as f:
        data = yaml.safe_load(f)
    return parse_run_config(data)
