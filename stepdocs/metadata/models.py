"""Typed dataclasses describing pipeline step metadata."""

from __future__ import annotations

import dataclasses as dc
import typing as typ


class StepMetadataError(ValueError):
    """Raised when step metadata is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class Param:
    """A single ``name``/``value`` pair inside a container condition."""

    name: str
    value: str


@dc.dataclass(frozen=True, slots=True)
class Condition:
    """Parameter values that must match for a container variant to apply."""

    params: tuple[Param, ...] = ()

    @property
    def label(self) -> str:
        """Return the condition as ``name=value`` pairs joined by ``&``."""
        return "&".join(f"{param.name}={param.value}" for param in self.params)


@dc.dataclass(frozen=True, slots=True)
class Unconditioned:
    """Guard of a container that applies regardless of configuration."""


@dc.dataclass(frozen=True, slots=True)
class Conditioned:
    """Guard of a container variant selected by parameter values.

    Attributes
    ----------
    label : str
        Display form of the guarding conditions, e.g. ``"buildTool=maven"``.
    """

    label: str


Guard = Unconditioned | Conditioned


@dc.dataclass(frozen=True, slots=True)
class EnvVar:
    """Environment variable exported into a container."""

    name: str
    value: str

    def __str__(self) -> str:
        return f"{self.name}={self.value}"


@dc.dataclass(frozen=True, slots=True)
class Container:
    """Execution container (or sidecar) declared by a step.

    Attributes
    ----------
    name : str
        Container name; variants guarded by different conditions may share it.
    image : str
        Docker image reference.
    command : tuple[str, ...]
        Entrypoint override, split into arguments.
    working_dir : str
        Working directory inside the container.
    shell : str
        Shell used to run step commands.
    image_pull_policy : str
        Kubernetes-style pull policy; any value means the image is pulled.
    ready_command : str
        Readiness probe command (sidecars only).
    env_vars : tuple[EnvVar, ...]
        Environment variables in declaration order.
    conditions : tuple[Condition, ...]
        Conditions guarding this container variant.
    """

    name: str
    image: str = ""
    command: tuple[str, ...] = ()
    working_dir: str = ""
    shell: str = ""
    image_pull_policy: str = ""
    ready_command: str = ""
    env_vars: tuple[EnvVar, ...] = ()
    conditions: tuple[Condition, ...] = ()

    @property
    def guard(self) -> Guard:
        """Return the tagged guard describing when this container applies.

        Conditions without params do not guard anything.
        """
        label = "&".join(cond.label for cond in self.conditions if cond.params)
        if not label:
            return Unconditioned()
        return Conditioned(label=label)


@dc.dataclass(frozen=True, slots=True)
class Resource:
    """Input resource of a step, such as a stash."""

    name: str
    type: str = ""
    description: str = ""


@dc.dataclass(frozen=True, slots=True)
class Parameter:
    """Step parameter as declared in the metadata ``params`` list."""

    name: str
    type: str = "string"
    description: str = ""
    default: typ.Any = None
    mandatory: bool = False
    scope: tuple[str, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class StepData:
    """Full metadata of a single pipeline step."""

    name: str
    description: str = ""
    long_description: str = ""
    parameters: tuple[Parameter, ...] = ()
    resources: tuple[Resource, ...] = ()
    containers: tuple[Container, ...] = ()
    sidecars: tuple[Container, ...] = ()


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
]
