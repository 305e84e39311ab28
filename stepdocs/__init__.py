"""Generate Markdown documentation for pipeline steps from YAML metadata.

This package exposes the CLI entry points used by ``stepdocs generate`` to
merge step parameters, containers, sidecars and stash resources into each
step's Markdown template.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from stepdocs import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
