#!/usr/bin/env python
import argparse
import logging
import sys
import time
from typing import List, Optional

from utils.logging_config import setup_logging, get_logger
from inout.yaml_parser import load_run_config, ParameterRequest
from cherednik.hyperplanes import restrict_to_hyperplane, specialize_in_hyperplane
from cherednik.parameter_space import cherednik_parameter_space
from cherednik.parameters import cherednik_parameter, cherednik_parameter_at, full_cherednik_parameter
from core.exceptions import ChampError
from groups.matrix_group import MatrixGroup
from groups.reflections import reflection_library
from symbolic.maps import ParameterMap

logger = get_logger(__name__)


def format_parameter(c: ParameterMap) -> List[str]:
    return [f"  c({i}) = {value}" for i, value in c.to_expr().items()]


def run(group: MatrixGroup, request: ParameterRequest, show_sharp: bool = False) -> List[str]:
    """Compute everything *request* asks for and return the report lines."""
    lines = [f"Group: {group.name} (order {group.order})"]
    library = reflection_library(group)
    lines.append(f"Hyperplane orbits: {len(library.orbits)}, e_Omega = {library.e_omegas}")
    lines.append(f"Reflection classes: {len(library.classes)}")

    if request.full:
        t, c = full_cherednik_parameter(group, request.type, request.rational)
        lines.append(f"Time parameter: {t.as_expr()}")
    else:
        c = cherednik_parameter(group, request.type, request.rational)
    lines.append(f"Generic {request.type} parameter over {c.codomain}:")
    lines.extend(format_parameter(c))

    for step in request.hyperplanes:
        operation = specialize_in_hyperplane if step.mode == 'specialize' else restrict_to_hyperplane
        c = operation(c, step.equation)
        lines.append(f"After {step.mode} in {step.equation} = 0, over {c.codomain}:")
        lines.extend(format_parameter(c))

    if request.values is not None:
        point = cherednik_parameter_at(group, request.values, request.type)
        lines.append(f"At {request.values}:")
        lines.extend(format_parameter(point))

    if show_sharp:
        space = cherednik_parameter_space(group)
        lines.append("Sharp involution:")
        for name, image in zip(space.ring.names, space.sharp.images):
            lines.append(f"  {name} -> {space.ring.to_expr(image)}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    """
    Compute Cherednik parameters for a reflection group described in YAML.

    Command-line arguments:
      --config: Path to the YAML run description.
      --sharp: Also print the sharp involution of the GGOR parameter space.
      --log-file: Optional path for a log file.
      --verbose: Enable DEBUG logging.
    """
    parser = argparse.ArgumentParser(description="Compute generic Cherednik parameters.")
    parser.add_argument("--config", required=True, help="Path to the YAML run description.")
    parser.add_argument("--sharp", action="store_true", help="Print the sharp involution.")
    parser.add_argument("--log-file", help="Optional log file.", default=None)
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging.")
    args = parser.parse_args(argv)

    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)

    start_time = time.time()
    try:
        group, request = load_run_config(args.config)
        lines = run(group, request, show_sharp=args.sharp)
    except ChampError as e:
        logger.error("Computation failed: %s", e)
        return 1

    for line in lines:
        print(line)
    logger.info("Done in %.2f s.", time.time() - start_time)
    return 0


if __name__ == "__main__":
    sys.exit(main())
