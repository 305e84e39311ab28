"""High-level orchestration for step documentation generation.

This module turns a parsed :class:`~stepdocs.metadata.StepData` into a
finished Markdown document. It exposes :class:`StepDocsGenerator`, which reads
the step's template (``<docs_dir>/<stepName>.md``), adapts legacy
placeholders, builds the placeholder context and writes the substituted
result back over the template.

Template reading and document writing go through injected callables so the
pipeline can run against in-memory fakes.

Example
-------
>>> from pathlib import Path
>>> from stepdocs.metadata import load_step_data
>>> from stepdocs.generator import StepDocsGenerator
>>> step = load_step_data(Path("resources/metadata/mavenBuild.yaml"))  # doctest: +SKIP
>>> StepDocsGenerator(Path("docs/steps")).generate(step)  # doctest: +SKIP
PosixPath('docs/steps/mavenBuild.md')
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

from .context import build_docu_context
from .renderer import MarkdownTableRenderer
from .template import adapt_template, substitute

if typ.TYPE_CHECKING:
    from stepdocs.metadata import StepData

TemplateReader = cabc.Callable[[Path], str]
DocumentWriter = cabc.Callable[[Path, str], None]


class StepDocsError(RuntimeError):
    """Raised when documentation for a step cannot be generated."""


class TemplateNotFoundError(StepDocsError, FileNotFoundError):
    """Raised when the step's documentation template cannot be read."""


class DocumentWriteError(StepDocsError, OSError):
    """Raised when the generated document cannot be written."""


def read_template_file(path: Path) -> str:
    """Read a template verbatim, keeping its line endings."""
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


def write_document_file(path: Path, content: str) -> None:
    """Write ``content`` to ``path`` without translating line endings."""
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(content)


class StepDocsGenerator:
    """Render step metadata into the step's Markdown documentation template."""

    def __init__(
        self,
        docs_dir: Path,
        *,
        read_template: TemplateReader = read_template_file,
        write_document: DocumentWriter = write_document_file,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the generator with its template location and collaborators.

        Parameters
        ----------
        docs_dir : Path
            Directory holding the ``<stepName>.md`` templates; generated
            documents are written to the same paths.
        read_template : TemplateReader, optional
            Callable returning the template text for a path. Defaults to
            :func:`read_template_file`.
        write_document : DocumentWriter, optional
            Callable persisting the rendered text. Defaults to
            :func:`write_document_file`.
        templates_dir : Path, optional
            Directory with the Jinja templates for the parameter and
            configuration tables; defaults to the package templates.
        """
        self.docs_dir = docs_dir
        self.read_template = read_template
        self.write_document = write_document
        self.tables = MarkdownTableRenderer(templates_dir)

    def template_path(self, step: StepData) -> Path:
        """Return the template (and output) path for ``step``."""
        return self.docs_dir / f"{step.name}.md"

    def render(self, step: StepData, template: str) -> str:
        """Return ``template`` with every known placeholder filled for ``step``."""
        context = build_docu_context(step, tables=self.tables)
        return substitute(adapt_template(template), context)

    def generate(self, step: StepData) -> Path:
        """Render the documentation for ``step`` and write it in place.

        Returns
        -------
        Path
            Path of the written document.

        Raises
        ------
        TemplateNotFoundError
            Raised when the template for the step cannot be opened or read;
            nothing is written in that case.
        DocumentWriteError
            Raised when the rendered document cannot be written.
        """
        path = self.template_path(step)
        try:
            template = self.read_template(path)
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Documentation template for step '{step.name}' not readable: {path}"
            raise TemplateNotFoundError(msg) from exc

        content = self.render(step, template)

        try:
            self.write_document(path, content)
        except OSError as exc:
            msg = f"Unable to write documentation for step '{step.name}' to {path}"
            raise DocumentWriteError(msg) from exc
        return path

    def generate_all(self, steps: cabc.Iterable[StepData]) -> list[Path]:
        """Generate documentation for each step in order, stopping at the first error.

        Every step is rendered and written before the next one is started, so
        documents written before a failure stay in place.
        """
        return [self.generate(step) for step in steps]


def generate_step_documentation(step: StepData, docs_dir: Path) -> Path:
    """Generate the document for a single ``step`` using the default collaborators."""
    return StepDocsGenerator(docs_dir).generate(step)


__all__ = [
    "DocumentWriteError",
    "DocumentWriter",
    "StepDocsError",
    "StepDocsGenerator",
    "TemplateNotFoundError",
    "TemplateReader",
    "generate_step_documentation",
    "read_template_file",
    "write_document_file",
]
