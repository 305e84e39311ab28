"""Shared fixtures describing a representative step for generator tests."""

from __future__ import annotations

import pytest

from stepdocs.metadata import (
    Condition,
    Container,
    EnvVar,
    Param,
    Parameter,
    Resource,
    StepData,
)


def _guard(name: str, value: str) -> tuple[Condition, ...]:
    return (Condition(params=(Param(name, value),)),)


@pytest.fixture
def container_step() -> StepData:
    """Return a step with plain and conditioned containers, a sidecar and stashes."""
    return StepData(
        name="containerStep",
        description="Step with containers",
        parameters=(
            Parameter(name="param0", scope=("GENERAL",), default="val0"),
        ),
        resources=(
            Resource(name="resource0", type="stash", description="val0"),
            Resource(name="resource1", type="stash", description="val1"),
            Resource(name="resource2", type="stash", description="val2"),
        ),
        containers=(
            Container(
                name="container0",
                image="image",
                working_dir="workingdir",
                shell="shell",
                env_vars=(EnvVar("envar.name0", "envar.value0"),),
            ),
            Container(
                name="container1",
                image="image",
                working_dir="workingdir",
                env_vars=(EnvVar("envar.name1", "envar.value1"),),
            ),
            Container(
                name="container2a",
                command=("command",),
                image_pull_policy="pullpolicy",
                image="image",
                working_dir="workingdir",
                env_vars=(EnvVar("envar.name2a", "envar.value2a"),),
                conditions=_guard("param.name2a", "param.value2a"),
            ),
            Container(
                name="container2b",
                image="image",
                working_dir="workingdir",
                env_vars=(EnvVar("envar.name2b", "envar.value2b"),),
                conditions=_guard("param.name2b", "param.value2b"),
            ),
        ),
        sidecars=(
            Container(
                name="sidecar0",
                command=("command",),
                image_pull_policy="pullpolicy",
                image="image",
                working_dir="workingdir",
                ready_command="readycommand",
                env_vars=(EnvVar("envar.name3", "envar.value3"),),
                conditions=_guard("param.name0", "param.value0"),
            ),
        ),
    )
