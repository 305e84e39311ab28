"""Unit tests for the placeholder context builder."""

from __future__ import annotations

import typing as typ

from stepdocs.generator.context import (
    DocuKey,
    add_container_content,
    add_sidecar_content,
    add_stash_content,
    build_default_context,
    build_docu_context,
)
from stepdocs.metadata import (
    Condition,
    Container,
    EnvVar,
    Param,
    Parameter,
    StepData,
)

if typ.TYPE_CHECKING:
    from stepdocs.generator.context import DocuContext

EXPECTED_CONTAINER_CONTEXT = {
    "containerCommand": "command",
    "containerShell": "shell",
    "dockerEnvVars": (
        "envar.name0=envar.value0, envar.name1=envar.value1"
        " <br>param.name2a=param.value2a:\\[envar.name2a=envar.value2a\\]"
        " <br>param.name2b=param.value2b:\\[envar.name2b=envar.value2b\\]"
    ),
    "dockerImage": (
        "image, image <br>param.name2a=param.value2a:image"
        " <br>param.name2b=param.value2b:image"
    ),
    "dockerName": "container0, container1 <br>container2a <br>container2b <br>",
    "dockerPullImage": "true",
    "dockerWorkspace": (
        "workingdir, workingdir <br>param.name2a=param.value2a:workingdir"
        " <br>param.name2b=param.value2b:workingdir"
    ),
}

EXPECTED_SIDECAR_CONTEXT = {
    "sidecarCommand": "command",
    "sidecarEnvVars": "envar.name3=envar.value3",
    "sidecarImage": "image",
    "sidecarName": "sidecar0",
    "sidecarPullImage": "true",
    "sidecarReadyCommand": "readycommand",
    "sidecarWorkspace": "workingdir",
}


def test_container_content(container_step: StepData) -> None:
    """Container keys render plain and conditioned variants in order."""
    context: DocuContext = {}
    add_container_content(container_step, context)
    assert context == EXPECTED_CONTAINER_CONTEXT, (
        f"unexpected container context {context!r}"
    )


def test_sidecar_content(container_step: StepData) -> None:
    """Sidecar keys mirror the container keys and add the ready command."""
    context: DocuContext = {}
    add_sidecar_content(container_step, context)
    assert context == EXPECTED_SIDECAR_CONTEXT, f"unexpected sidecar context {context!r}"


def test_conditioned_sidecars_render_plain_lists() -> None:
    """Sidecar conditions never add labels or ``<br>`` separators."""
    guard = (Condition(params=(Param("p", "v"),)),)
    step = StepData(
        name="s",
        sidecars=(
            Container(
                "sidecar0",
                image="image0",
                working_dir="workingdir",
                env_vars=(EnvVar("A", "1"), EnvVar("B", "2")),
                conditions=guard,
            ),
            Container("sidecar1", image="image1", env_vars=(EnvVar("C", "3"),)),
        ),
    )
    context: DocuContext = {}
    add_sidecar_content(step, context)
    assert context == {
        "sidecarName": "sidecar0, sidecar1",
        "sidecarImage": "image0, image1",
        "sidecarWorkspace": "workingdir",
        "sidecarEnvVars": "A=1, B=2, C=3",
    }, f"unexpected sidecar context {context!r}"


def test_stash_content(container_step: StepData) -> None:
    """Stash resources are listed in declaration order."""
    context: DocuContext = {}
    add_stash_content(container_step, context)
    assert context == {"stashContent": "resource0, resource1, resource2"}


def test_default_context_has_all_fifteen_keys(container_step: StepData) -> None:
    """A step with containers, sidecars and stashes fills every default key."""
    context = build_default_context(container_step)
    assert len(context) == 15, f"expected 15 default keys, got {sorted(context)!r}"
    assert context == {
        **EXPECTED_CONTAINER_CONTEXT,
        **EXPECTED_SIDECAR_CONTEXT,
        "stashContent": "resource0, resource1, resource2",
    }
    assert set(context) <= {key.value for key in DocuKey}, (
        "default context must only use DocuKey names"
    )


def test_default_context_is_empty_for_bare_step() -> None:
    """Steps without containers, sidecars or resources add no default keys."""
    assert build_default_context(StepData(name="bare")) == {}


def test_parameter_table_has_one_row_per_parameter_in_order() -> None:
    """The parameter table keeps declaration order and shows ``<nil>``."""
    step = StepData(
        name="s",
        parameters=(
            Parameter(name="zeta", default="z"),
            Parameter(name="alpha", mandatory=True),
            Parameter(name="mid", mandatory=True, default=False),
        ),
    )
    table = build_docu_context(step)[DocuKey.PARAMETERS]
    rows = [line.strip() for line in table.splitlines() if line.strip().startswith("| ")]
    assert rows[2:] == [
        "| zeta | No | z |",
        "| alpha | Yes | <nil> |",
        "| mid | No | false |",
    ], f"unexpected parameter rows {rows!r}"


def test_configuration_table_marks_scopes() -> None:
    """``X`` marks follow the GENERAL and STEPS/STAGES scope tokens."""
    step = StepData(
        name="s",
        parameters=(
            Parameter(name="general", scope=("GENERAL",)),
            Parameter(name="steps", scope=("STEPS",)),
            Parameter(name="stages", scope=("STAGES", "PARAMETERS")),
            Parameter(name="both", scope=("GENERAL", "STEPS")),
            Parameter(name="none"),
        ),
    )
    table = build_docu_context(step)[DocuKey.CONFIGURATION]
    rows = [line.strip() for line in table.splitlines() if line.strip().startswith("| ")]
    assert rows[1:] == [
        "| general | X |  |",
        "| steps |  | X |",
        "| stages |  | X |",
        "| both | X | X |",
        "| none |  |  |",
    ], f"unexpected configuration rows {rows!r}"


def test_computed_keys_describe_the_step() -> None:
    """Step name and description keys are always present."""
    step = StepData(name="demo", description="Short", long_description="")
    context = build_docu_context(step)
    assert context["docGenStepName"] == "demo"
    assert context["docGenDescription"] == "Description \n\nShort", (
        "expected the short description when no long description is set"
    )
    assert context["docGenParameters"].endswith("## Details\n"), (
        "expected an empty details list for a step without parameters"
    )
