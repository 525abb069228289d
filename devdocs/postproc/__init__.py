"""Post-processing applied to generated markdown before it is written."""

from .links import LinkValidator
from .lint import MarkdownLinter
from .toc import TableOfContentsBuilder

__all__ = ["LinkValidator", "MarkdownLinter", "TableOfContentsBuilder"]
