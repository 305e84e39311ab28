"""Placeholder handling for step documentation templates.

Templates address context values with ``${name}`` placeholders. Older
templates use Go-template style ``{{docGenStepName .}}`` tokens for the four
computed sections; :func:`adapt_template` rewrites those into ``${name}``
form and removes the obsolete plugin-dependency section marker before
:func:`substitute` fills in the context.
"""

from __future__ import annotations

import re
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

LEGACY_PLACEHOLDERS = (
    "docGenStepName",
    "docGenDescription",
    "docGenParameters",
    "docGenConfiguration",
)
PLUGIN_DEPENDENCY_MARKER = "docJenkinsPluginDependencies"

ADAPTER_PATTERN = re.compile(
    rf"(?P<marker>(?:\#+[ \t]*)?"
    rf"(?:\$\{{{PLUGIN_DEPENDENCY_MARKER}\}}"
    rf"|\{{\{{\s*{PLUGIN_DEPENDENCY_MARKER}(?:\s+\.)?\s*\}}\}}))"
    rf"|\{{\{{\s*(?P<name>{'|'.join(LEGACY_PLACEHOLDERS)})(?:\s+\.)?\s*\}}\}}"
)
PLACEHOLDER_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


def adapt_template(text: str) -> str:
    """Rewrite legacy placeholders into ``${name}`` form in a single pass.

    Examples
    --------
    >>> adapt_template("# {{docGenStepName .}}\\n## ${docJenkinsPluginDependencies}")
    '# ${docGenStepName}\\n'
    >>> adapt_template("{{otherHelper .}}")
    '{{otherHelper .}}'
    """

    def _repl(match: re.Match[str]) -> str:
        name = match.group("name")
        if name is None:
            return ""
        return f"${{{name}}}"

    return ADAPTER_PATTERN.sub(_repl, text)


def substitute(template: str, context: cabc.Mapping[str, str]) -> str:
    """Replace each ``${key}`` found in ``context``; unknown keys are kept.

    Substituted values are never scanned again, so a value that itself
    contains ``${...}`` is emitted verbatim.

    Examples
    --------
    >>> substitute("${a} ${b}", {"a": "${b}"})
    '${b} ${b}'
    """

    def _repl(match: re.Match[str]) -> str:
        return context.get(match.group(1), match.group(0))

    return PLACEHOLDER_PATTERN.sub(_repl, template)


__all__ = [
    "ADAPTER_PATTERN",
    "LEGACY_PLACEHOLDERS",
    "PLACEHOLDER_PATTERN",
    "PLUGIN_DEPENDENCY_MARKER",
    "adapt_template",
    "substitute",
]
