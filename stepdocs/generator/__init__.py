"""Utilities for rendering, adapting and generating step documentation."""

from .context import DocuContext, DocuKey, build_default_context, build_docu_context
from .renderer import MarkdownTableRenderer
from .step_docs import (
    DocumentWriteError,
    StepDocsError,
    StepDocsGenerator,
    TemplateNotFoundError,
    generate_step_documentation,
)
from .template import adapt_template, substitute

__all__ = [
    "DocuContext",
    "DocuKey",
    "DocumentWriteError",
    "MarkdownTableRenderer",
    "StepDocsError",
    "StepDocsGenerator",
    "TemplateNotFoundError",
    "adapt_template",
    "build_default_context",
    "build_docu_context",
    "generate_step_documentation",
    "substitute",
]
