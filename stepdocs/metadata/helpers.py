"""Utility helpers shared by the step metadata loader."""

from __future__ import annotations

import typing as typ

from .models import (
    Condition,
    Container,
    EnvVar,
    Param,
    Parameter,
    Resource,
    StepMetadataError,
)


def _optional_str(value: object | None) -> str:
    """Return a stripped string value, or an empty string for ``None``."""
    if value is None:
        return ""
    return str(value).strip()


def _as_list(value: object | None, *, field: str) -> list[typ.Any]:
    """Return ``value`` as a list, treating ``None`` as empty."""
    match value:
        case None:
            return []
        case list():
            return value
        case _:
            msg = f"Expected a list for '{field}', got {type(value).__name__}."
            raise StepMetadataError(msg)


def _as_mapping(value: object, *, field: str) -> typ.Mapping[str, typ.Any]:
    if not isinstance(value, dict):
        msg = f"Expected a mapping for '{field}', got {type(value).__name__}."
        raise StepMetadataError(msg)
    return value


def _as_bool(value: object | None, *, field: str) -> bool:
    """Return ``value`` as a boolean, treating ``None`` as ``False``."""
    match value:
        case None:
            return False
        case bool():
            return value
        case _:
            msg = f"Expected a boolean for '{field}', got {type(value).__name__}."
            raise StepMetadataError(msg)


def _build_scope(value: object | None) -> tuple[str, ...]:
    """Normalize scope tokens into upper-case strings."""
    if isinstance(value, str):
        value = [value]
    tokens = (_optional_str(token).upper() for token in _as_list(value, field="scope"))
    return tuple(token for token in tokens if token)


def _build_parameter(payload: typ.Mapping[str, typ.Any]) -> Parameter:
    name = _optional_str(payload.get("name"))
    if not name:
        msg = "Step parameter is missing 'name'."
        raise StepMetadataError(msg)
    return Parameter(
        name=name,
        type=_optional_str(payload.get("type")) or "string",
        description=_optional_str(payload.get("description")),
        default=payload.get("default"),
        mandatory=_as_bool(payload.get("mandatory"), field="mandatory"),
        scope=_build_scope(payload.get("scope")),
    )


def _build_parameters(entries: list[typ.Any]) -> tuple[Parameter, ...]:
    """Build parameters in declaration order, rejecting duplicate names."""
    parameters: list[Parameter] = []
    seen: set[str] = set()
    for entry in entries:
        parameter = _build_parameter(_as_mapping(entry, field="params"))
        if parameter.name in seen:
            msg = f"Duplicate step parameter '{parameter.name}'."
            raise StepMetadataError(msg)
        seen.add(parameter.name)
        parameters.append(parameter)
    return tuple(parameters)


def _build_resource(payload: typ.Mapping[str, typ.Any]) -> Resource:
    return Resource(
        name=_optional_str(payload.get("name")),
        type=_optional_str(payload.get("type")),
        description=_optional_str(payload.get("description")),
    )


def _build_env_vars(value: object | None) -> tuple[EnvVar, ...]:
    env_vars: list[EnvVar] = []
    for entry in _as_list(value, field="env"):
        payload = _as_mapping(entry, field="env")
        env_vars.append(
            EnvVar(
                name=_optional_str(payload.get("name")),
                value=_optional_str(payload.get("value")),
            )
        )
    return tuple(env_vars)


def _build_conditions(value: object | None) -> tuple[Condition, ...]:
    conditions: list[Condition] = []
    for entry in _as_list(value, field="conditions"):
        payload = _as_mapping(entry, field="conditions")
        params: list[Param] = []
        for item in _as_list(payload.get("params"), field="conditions.params"):
            param = _as_mapping(item, field="conditions.params")
            params.append(
                Param(
                    name=_optional_str(param.get("name")),
                    value=_optional_str(param.get("value")),
                )
            )
        conditions.append(Condition(params=tuple(params)))
    return tuple(conditions)


def _build_command(value: object | None) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,) if value.strip() else ()
    arguments = (_optional_str(arg) for arg in _as_list(value, field="command"))
    return tuple(arg for arg in arguments if arg)


def _build_container(payload: typ.Mapping[str, typ.Any]) -> Container:
    """Build a Container from a ``containers``/``sidecars`` list entry."""
    name = _optional_str(payload.get("name"))
    if not name:
        msg = "Container entry is missing 'name'."
        raise StepMetadataError(msg)
    return Container(
        name=name,
        image=_optional_str(payload.get("image")),
        command=_build_command(payload.get("command")),
        working_dir=_optional_str(payload.get("workingDir")),
        shell=_optional_str(payload.get("shell")),
        image_pull_policy=_optional_str(payload.get("imagePullPolicy")),
        ready_command=_optional_str(payload.get("readyCommand")),
        env_vars=_build_env_vars(payload.get("env")),
        conditions=_build_conditions(payload.get("conditions")),
    )


def _build_containers(entries: list[typ.Any], *, field: str) -> tuple[Container, ...]:
    return tuple(_build_container(_as_mapping(entry, field=field)) for entry in entries)


__all__ = [
    "_as_list",
    "_as_mapping",
    "_build_containers",
    "_build_parameters",
    "_build_resource",
    "_optional_str",
]
