"""Assemble the placeholder context used to fill step documentation templates."""

from __future__ import annotations

import enum
import typing as typ

from .renderer import (
    MarkdownTableRenderer,
    any_value_flag,
    first_value,
    render_env_vars,
    render_names,
    render_plain_env_vars,
    render_plain_values,
    render_stash_content,
    render_values,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from stepdocs.metadata import Container, StepData

DocuContext = dict[str, str]

DESCRIPTION_HEADING = "Description \n\n"


class DocuKey(enum.StrEnum):
    """Placeholder names the context builder can fill."""

    STEP_NAME = "docGenStepName"
    DESCRIPTION = "docGenDescription"
    PARAMETERS = "docGenParameters"
    CONFIGURATION = "docGenConfiguration"

    DOCKER_NAME = "dockerName"
    DOCKER_IMAGE = "dockerImage"
    DOCKER_WORKSPACE = "dockerWorkspace"
    DOCKER_PULL_IMAGE = "dockerPullImage"
    DOCKER_ENV_VARS = "dockerEnvVars"
    CONTAINER_SHELL = "containerShell"
    CONTAINER_COMMAND = "containerCommand"

    SIDECAR_NAME = "sidecarName"
    SIDECAR_IMAGE = "sidecarImage"
    SIDECAR_WORKSPACE = "sidecarWorkspace"
    SIDECAR_PULL_IMAGE = "sidecarPullImage"
    SIDECAR_ENV_VARS = "sidecarEnvVars"
    SIDECAR_COMMAND = "sidecarCommand"
    SIDECAR_READY_COMMAND = "sidecarReadyCommand"

    STASH_CONTENT = "stashContent"


def _command(container: Container) -> str:
    return " ".join(container.command)


def _set(context: DocuContext, key: DocuKey, value: str | None) -> None:
    if value is not None:
        context[key.value] = value


def add_container_content(step: StepData, context: DocuContext) -> None:
    """Add the ``docker*``/``container*`` keys for the step's containers."""
    containers = step.containers
    if not containers:
        return
    _set(context, DocuKey.DOCKER_NAME, render_names(containers))
    _set(context, DocuKey.DOCKER_IMAGE, render_values(containers, lambda c: c.image))
    _set(
        context,
        DocuKey.DOCKER_WORKSPACE,
        render_values(containers, lambda c: c.working_dir),
    )
    _set(context, DocuKey.DOCKER_ENV_VARS, render_env_vars(containers))
    _set(
        context,
        DocuKey.DOCKER_PULL_IMAGE,
        any_value_flag(containers, lambda c: c.image_pull_policy),
    )
    _set(context, DocuKey.CONTAINER_SHELL, first_value(containers, lambda c: c.shell))
    _set(context, DocuKey.CONTAINER_COMMAND, first_value(containers, _command))


def add_sidecar_content(step: StepData, context: DocuContext) -> None:
    """Add the ``sidecar*`` keys for the step's sidecars.

    Sidecar conditions do not change the rendering; every field is a plain
    comma separated list.
    """
    sidecars: cabc.Sequence[Container] = step.sidecars
    if not sidecars:
        return
    _set(context, DocuKey.SIDECAR_NAME, render_plain_values(sidecars, lambda c: c.name))
    _set(
        context, DocuKey.SIDECAR_IMAGE, render_plain_values(sidecars, lambda c: c.image)
    )
    _set(
        context,
        DocuKey.SIDECAR_WORKSPACE,
        render_plain_values(sidecars, lambda c: c.working_dir),
    )
    _set(context, DocuKey.SIDECAR_ENV_VARS, render_plain_env_vars(sidecars))
    _set(
        context,
        DocuKey.SIDECAR_PULL_IMAGE,
        any_value_flag(sidecars, lambda c: c.image_pull_policy),
    )
    _set(context, DocuKey.SIDECAR_COMMAND, first_value(sidecars, _command))
    _set(
        context,
        DocuKey.SIDECAR_READY_COMMAND,
        first_value(sidecars, lambda c: c.ready_command),
    )


def add_stash_content(step: StepData, context: DocuContext) -> None:
    """Add ``stashContent`` listing the step's stash resources."""
    if step.resources:
        _set(context, DocuKey.STASH_CONTENT, render_stash_content(step.resources))


def build_default_context(step: StepData) -> DocuContext:
    """Return the simple substitutions derived from containers, sidecars and stashes.

    Keys are only present when the step declares the matching collection, so
    templates referencing e.g. ``${sidecarName}`` keep the placeholder for
    steps without sidecars.
    """
    context: DocuContext = {}
    add_container_content(step, context)
    add_sidecar_content(step, context)
    add_stash_content(step, context)
    return context


def build_docu_context(
    step: StepData, *, tables: MarkdownTableRenderer | None = None
) -> DocuContext:
    """Return the full placeholder mapping for ``step``.

    Parameters
    ----------
    step : StepData
        Metadata of the step being documented.
    tables : MarkdownTableRenderer, optional
        Renderer for the parameter and configuration sections; a renderer
        using the bundled templates is created when omitted.

    Returns
    -------
    DocuContext
        Default keys from :func:`build_default_context` plus the computed
        ``docGen*`` sections. Tables list parameters in declaration order.
    """
    tables = tables or MarkdownTableRenderer()
    context = build_default_context(step)
    description = step.long_description or step.description
    _set(context, DocuKey.STEP_NAME, step.name)
    _set(context, DocuKey.DESCRIPTION, f"{DESCRIPTION_HEADING}{description}")
    _set(context, DocuKey.PARAMETERS, tables.parameters(step.parameters))
    _set(context, DocuKey.CONFIGURATION, tables.configuration(step.parameters))
    return context


__all__ = [
    "DocuContext",
    "DocuKey",
    "add_container_content",
    "add_sidecar_content",
    "add_stash_content",
    "build_default_context",
    "build_docu_context",
]
