"""Load step metadata YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .helpers import (
    _as_list,
    _as_mapping,
    _build_containers,
    _build_parameters,
    _build_resource,
    _optional_str,
)
from .models import StepData, StepMetadataError

if typ.TYPE_CHECKING:
    from pathlib import Path


def _build_yaml() -> YAML:
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    return loader


def load_step_data(path: Path) -> StepData:
    """Load the metadata YAML describing a single pipeline step.

    Parameters
    ----------
    path : Path
        Filesystem path to the step metadata file (for example,
        ``resources/metadata/mavenBuild.yaml``).

    Returns
    -------
    StepData
        Parsed metadata, including parameters, resources, containers and
        sidecars in declaration order.

    Raises
    ------
    FileNotFoundError
        If the metadata file does not exist at ``path``.
    StepMetadataError
        If the document is not a mapping or required fields are missing or
        malformed.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from stepdocs.metadata import load_step_data
    >>> step = load_step_data(Path("resources/metadata/mavenBuild.yaml"))  # doctest: +SKIP
    >>> step.name  # doctest: +SKIP
    'mavenBuild'
    """
    if not path.exists():
        msg = f"Step metadata file '{path}' not found."
        raise FileNotFoundError(msg)

    with path.open("r", encoding="utf-8") as handle:
        loaded = _build_yaml().load(handle)
    return _build_step_data(loaded)


def parse_step_data(text: str) -> StepData:
    """Parse step metadata from a YAML string."""
    return _build_step_data(_build_yaml().load(text))


def _build_step_data(loaded: object) -> StepData:
    """Build a StepData from the raw YAML document."""
    if not isinstance(loaded, dict):
        msg = "Top-level step metadata must be a mapping."
        raise StepMetadataError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    metadata = _as_mapping(raw.get("metadata") or {}, field="metadata")
    spec = _as_mapping(raw.get("spec") or {}, field="spec")
    inputs = _as_mapping(spec.get("inputs") or {}, field="spec.inputs")

    name = _optional_str(metadata.get("name"))
    if not name:
        msg = "Step metadata is missing 'metadata.name'."
        raise StepMetadataError(msg)

    resources = tuple(
        _build_resource(_as_mapping(entry, field="resources"))
        for entry in _as_list(inputs.get("resources"), field="resources")
    )

    return StepData(
        name=name,
        description=_optional_str(metadata.get("description")),
        long_description=str(metadata.get("longDescription") or ""),
        parameters=_build_parameters(_as_list(inputs.get("params"), field="params")),
        resources=resources,
        containers=_build_containers(
            _as_list(spec.get("containers"), field="containers"), field="containers"
        ),
        sidecars=_build_containers(
            _as_list(spec.get("sidecars"), field="sidecars"), field="sidecars"
        ),
    )


__all__ = ["load_step_data", "parse_step_data"]
