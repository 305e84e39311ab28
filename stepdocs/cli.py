"""Cyclopts CLI entrypoint for generating pipeline step documentation.

The ``stepdocs`` console script defined here reads step metadata YAML files,
renders each step's ``<stepName>.md`` template from the docs directory and
writes the result in place. Typical usage runs ``stepdocs generate`` locally
or in CI after step metadata changes.

Examples
--------
Generate docs for every metadata file in a directory:

>>> from stepdocs.cli import app
>>> app.run(
...     ["generate", "--metadata", "resources/metadata", "--docs-dir", "docs/steps"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .generator import StepDocsGenerator
from .metadata import load_step_data

if typ.TYPE_CHECKING:
    import collections.abc as cabc

DEFAULT_DOCS_DIR = Path("docs/steps")
METADATA_SUFFIXES = (".yaml", ".yml")

app = App(name="stepdocs", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def collect_metadata_files(paths: cabc.Iterable[Path]) -> list[Path]:
    """Expand directories into their sorted YAML files, keeping file order.

    Parameters
    ----------
    paths : Iterable[Path]
        Metadata files or directories containing ``*.yaml``/``*.yml`` files.

    Returns
    -------
    list[Path]
        Metadata files in the order given, with each directory's files
        sorted by name.
    """
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(
                sorted(
                    child
                    for child in path.iterdir()
                    if child.is_file() and child.suffix in METADATA_SUFFIXES
                )
            )
        else:
            files.append(path)
    return files


@app.command(help="Generate Markdown documentation for pipeline steps.")
def generate(
    *,
    metadata: typ.Annotated[
        list[Path],
        Parameter(
            help="Step metadata YAML files or directories", env_var="INPUT_METADATA"
        ),
    ],
    docs_dir: typ.Annotated[
        Path,
        Parameter(
            help="Directory holding <stepName>.md templates", env_var="INPUT_DOCS_DIR"
        ),
    ] = DEFAULT_DOCS_DIR,
) -> None:
    """Generate documentation for every step described by ``metadata``.

    Parameters
    ----------
    metadata : list[Path]
        Step metadata files, or directories whose ``*.yaml``/``*.yml`` files
        are processed in name order (overridable via ``INPUT_METADATA``).
    docs_dir : Path, optional
        Directory containing the ``<stepName>.md`` templates; documents are
        written back to the same files (overridable via ``INPUT_DOCS_DIR``).

    Returns
    -------
    None
        Writes the rendered documents and prints the generated paths.

    Raises
    ------
    FileNotFoundError
        If no metadata files are found, or a metadata file or step template
        is missing.
    StepMetadataError
        If a metadata file is malformed.
    DocumentWriteError
        If a generated document cannot be written.
    """
    files = collect_metadata_files(metadata)
    if not files:
        msg = "No step metadata files found."
        raise FileNotFoundError(msg)

    steps = [load_step_data(metadata_file) for metadata_file in files]
    for written in StepDocsGenerator(docs_dir).generate_all(steps):
        print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``stepdocs`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
