"""Load and validate pipeline step metadata YAML.

This subpackage parses a step's metadata file (``metadata``/``spec`` layout),
normalizes parameter scopes, container variants and resources, and produces
immutable dataclasses (:class:`StepData`, :class:`Parameter`,
:class:`Container`, etc.) that the documentation generator consumes. The
primary entry point is :func:`load_step_data`.

Examples
--------
>>> from stepdocs.metadata import parse_step_data
>>> step = parse_step_data("metadata:\\n  name: demoStep\\n")
>>> step.name
'demoStep'
"""

from .loader import load_step_data, parse_step_data
from .models import (
    Condition,
    Conditioned,
    Container,
    EnvVar,
    Guard,
    Param,
    Parameter,
    Resource,
    StepData,
    StepMetadataError,
    Unconditioned,
)

__all__ = [
    "Condition",
    "Conditioned",
    "Container",
    "EnvVar",
    "Guard",
    "Param",
    "Parameter",
    "Resource",
    "StepData",
    "StepMetadataError",
    "Unconditioned",
    "load_step_data",
    "parse_step_data",
]
