"""Markdown export package for the Contentful to Markdown converter.

This package turns page entries into Markdown documents and writes them to the
output directory.

Package Structure:
- page_assembler: Builds front matter, title, description and content blocks for one page
- markdown_exporter: Batch driver that converts every page and writes one file each

Configuration Referenced:
- export.output_directory: Base output path for exported files
- export.locale: Locale read from every localized field
- export.page_content_type: Content type id that marks an entry as a page
- export.file_extension: Extension of the written files
"""

from .markdown_exporter import MarkdownExporter
from .page_assembler import PageAssembler, slugify_title

__all__ = [
    'MarkdownExporter',
    'PageAssembler',
    'slugify_title'
]
