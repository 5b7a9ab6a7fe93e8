"""File I/O related utilities.

This package groups small modules that primarily deal with finding and reading
files and formatting file-backed diagnostics.
"""

from .file_finder import FileFinder
from .source_location import SourceLocation, lookup_source, format_source
from .template_renderer import TemplateRenderer

__all__ = [
    "FileFinder",
    "SourceLocation",
    "lookup_source",
    "format_source",
    "TemplateRenderer",
]
