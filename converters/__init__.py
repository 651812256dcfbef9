"""Converters package for rich text to Markdown conversion."""

import logging

from .rich_text_converter import RichTextConverter
from .table_converter import TableConverter

logger = logging.getLogger('contentful_markdown_converter.converters')


def convert_rich_text(document, index, locale='en-US', logger=None):
    """
    Convenience function to convert a rich text document to Markdown.

    Args:
        document: Root rich text node (``nodeType == 'document'``), may be None
        index: EntityIndex used to resolve embedded assets
        locale: Locale used to read asset fields
        logger: Optional logger instance (uses module logger if not provided)

    Returns:
        str: Markdown text, empty when the document has no content

    Example:
        >>> from converters import convert_rich_text
        >>> markdown = convert_rich_text(block.get_field('content'), index)
    """
    if logger is None:
        logger = logging.getLogger('contentful_markdown_converter.converters')

    converter = RichTextConverter(index, locale=locale, logger=logger)
    return converter.render_document(document)


__all__ = [
    'convert_rich_text',
    'RichTextConverter',
    'TableConverter'
]
