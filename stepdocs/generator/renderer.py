"""Render step metadata collections into flat Markdown display strings.

Containers are rendered per attribute. Values of unconditioned containers
form a comma separated prefix group, while each conditioned variant is
appended as a ``<br>`` separated ``label:value`` segment so that variants
sharing a container name stay distinguishable in a table cell. Sidecars are
rendered as plain comma separated values whatever their conditions.
Parameter and configuration tables are rendered from the bundled Jinja
templates by :class:`MarkdownTableRenderer`.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from stepdocs.metadata import Conditioned, Unconditioned

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from stepdocs.metadata import Container, Parameter, Resource

CONDITION_SEPARATOR = " <br>"
VALUE_SEPARATOR = ", "
NIL = "<nil>"
STASH_RESOURCE_TYPE = "stash"
GENERAL_SCOPE = "GENERAL"
STEP_SCOPES = frozenset({"STEPS", "STAGES"})
CONFIGURED_MARK = "X"


def _join_groups(plain: list[str], guarded: list[str]) -> str:
    """Join the unconditioned group and each conditioned segment with ``<br>``."""
    groups = [VALUE_SEPARATOR.join(plain)] if plain else []
    return CONDITION_SEPARATOR.join(groups + guarded)


def render_names(containers: cabc.Sequence[Container]) -> str:
    """Render container names; conditioned names are each closed by ``<br>``.

    Examples
    --------
    >>> from stepdocs.metadata import Condition, Container, Param
    >>> guard = (Condition(params=(Param("p", "v"),)),)
    >>> render_names(
    ...     [Container("c0"), Container("c1"), Container("c2", conditions=guard)]
    ... )
    'c0, c1 <br>c2 <br>'
    """
    plain: list[str] = []
    guarded: list[str] = []
    for container in containers:
        match container.guard:
            case Conditioned():
                guarded.append(container.name)
            case Unconditioned():
                plain.append(container.name)
    if not guarded:
        return VALUE_SEPARATOR.join(plain)
    return _join_groups(plain, guarded) + CONDITION_SEPARATOR


def render_values(
    containers: cabc.Sequence[Container],
    value_of: cabc.Callable[[Container], str],
) -> str:
    """Render one attribute of every container, skipping empty values."""
    plain: list[str] = []
    guarded: list[str] = []
    for container in containers:
        value = value_of(container)
        if not value:
            continue
        match container.guard:
            case Conditioned(label=label):
                guarded.append(f"{label}:{value}")
            case Unconditioned():
                plain.append(value)
    return _join_groups(plain, guarded)


def render_env_vars(containers: cabc.Sequence[Container]) -> str:
    r"""Render ``name=value`` environment pairs for every container.

    Conditioned variants wrap their pairs in escaped brackets so Markdown
    does not read them as link text, e.g. ``p=v:\[NAME=value\]``.
    """

    def _pairs(container: Container) -> str:
        pairs = VALUE_SEPARATOR.join(str(env) for env in container.env_vars)
        match container.guard:
            case Conditioned() if pairs:
                return f"\\[{pairs}\\]"
            case _:
                return pairs

    return render_values(containers, _pairs)


def render_plain_values(
    containers: cabc.Sequence[Container],
    value_of: cabc.Callable[[Container], str],
) -> str:
    """Join non-empty attribute values with ``, ``, ignoring conditions.

    Examples
    --------
    >>> from stepdocs.metadata import Condition, Container, Param
    >>> guard = (Condition(params=(Param("p", "v"),)),)
    >>> render_plain_values(
    ...     [Container("s0", image="img"), Container("s1", conditions=guard)],
    ...     lambda c: c.name,
    ... )
    's0, s1'
    """
    return VALUE_SEPARATOR.join(
        value for value in (value_of(container) for container in containers) if value
    )


def render_plain_env_vars(containers: cabc.Sequence[Container]) -> str:
    """Join every container's ``name=value`` pairs with ``, ``."""
    return render_plain_values(
        containers,
        lambda c: VALUE_SEPARATOR.join(str(env) for env in c.env_vars),
    )


def first_value(
    containers: cabc.Sequence[Container],
    value_of: cabc.Callable[[Container], str],
) -> str | None:
    """Return the first non-empty attribute value, or ``None`` when unset."""
    for container in containers:
        value = value_of(container)
        if value:
            return value
    return None


def any_value_flag(
    containers: cabc.Sequence[Container],
    value_of: cabc.Callable[[Container], str],
) -> str | None:
    """Return ``"true"`` if any container sets the attribute, else ``None``."""
    if first_value(containers, value_of) is None:
        return None
    return "true"


def render_stash_content(resources: cabc.Sequence[Resource]) -> str:
    """Join the names of stash resources in declaration order."""
    return VALUE_SEPARATOR.join(
        resource.name
        for resource in resources
        if resource.type == STASH_RESOURCE_TYPE and resource.name
    )


def format_value(value: object) -> str:
    """Format a parameter default for display, using ``<nil>`` when unset."""
    match value:
        case None:
            return NIL
        case bool():
            return "true" if value else "false"
        case list() | tuple():
            return "[" + VALUE_SEPARATOR.join(format_value(item) for item in value) + "]"
        case _:
            return str(value)


def _cell(text: str) -> str:
    """Escape pipes so values cannot split a Markdown table cell."""
    return text.replace("|", "\\|")


class MarkdownTableRenderer:
    """Render the parameter and configuration sections of a step document."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        """Initialize the Jinja environment used for the table sections.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing ``parameters.md.jinja`` and
            ``configuration.md.jinja``; defaults to the package templates.
        """
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
        )
        self.parameters_template = self.env.get_template("parameters.md.jinja")
        self.configuration_template = self.env.get_template("configuration.md.jinja")

    def parameters(self, parameters: cabc.Sequence[Parameter]) -> str:
        """Render the parameter table followed by the per-parameter details.

        Mandatory parameters that declare a default are listed as ``No``.
        """
        rows = [
            {
                "name": _cell(param.name),
                "mandatory": "Yes" if param.mandatory and param.default is None else "No",
                "default": _cell(format_value(param.default)),
                "description": param.description,
            }
            for param in parameters
        ]
        return self.parameters_template.render(rows=rows)

    def configuration(self, parameters: cabc.Sequence[Parameter]) -> str:
        """Render the table showing which config.yml sections accept a parameter."""
        rows = [
            {
                "name": _cell(param.name),
                "general": CONFIGURED_MARK if GENERAL_SCOPE in param.scope else "",
                "step": CONFIGURED_MARK if STEP_SCOPES.intersection(param.scope) else "",
            }
            for param in parameters
        ]
        return self.configuration_template.render(rows=rows)


__all__ = [
    "CONDITION_SEPARATOR",
    "NIL",
    "MarkdownTableRenderer",
    "any_value_flag",
    "first_value",
    "format_value",
    "render_env_vars",
    "render_names",
    "render_plain_env_vars",
    "render_plain_values",
    "render_stash_content",
    "render_values",
]
