"""Assembles a page entry and its content blocks into a Markdown document."""

import logging
import re
from typing import Optional

from models import DEFAULT_LOCALE, UNTITLED, AssembledPage, ContentfulEntry
from converters.rich_text_converter import RichTextConverter
from loaders.entity_index import EntityIndex

DEFAULT_FILE_EXTENSION = '.mdx'

_NON_ALNUM_RUN = re.compile(r'[^a-z0-9]+')


def slugify_title(title: str) -> str:
    """
    Convert a page title to a filename base.

    Lowercases, replaces each run of characters outside ``[a-z0-9]`` with a
    single hyphen and strips hyphens from both ends. A title made only of
    symbols gives an empty string.
    """
    return _NON_ALNUM_RUN.sub('-', title.lower()).strip('-')


class PageAssembler:
    """Builds the front matter and body for one page entry at a time."""

    def __init__(
        self,
        index: EntityIndex,
        locale: str = DEFAULT_LOCALE,
        file_extension: str = DEFAULT_FILE_EXTENSION,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the page assembler.

        Args:
            index: EntityIndex for resolving content block references
            locale: Locale used to read every field
            file_extension: Extension appended to the slugified title
            logger: Logger instance
        """
        self.index = index
        self.locale = locale
        self.file_extension = file_extension
        self.logger = logger or logging.getLogger('contentful_markdown_converter.exporters.page_assembler')
        self.rich_text_converter = RichTextConverter(index, locale=locale, logger=self.logger)

    def assemble_page(self, page: ContentfulEntry) -> AssembledPage:
        """
        Render a page entry to Markdown.

        Args:
            page: Entry whose content type is the page type

        Returns:
            AssembledPage with filename and full document content

        Raises:
            Exception: Any structural problem in the page propagates to the caller
        """
        # An empty title is kept; only a missing one gets the default
        title = page.get_field('title', self.locale)
        if title is None:
            title = UNTITLED
        description = page.get_field('description', self.locale) or ''

        markdown = self._generate_frontmatter(title, description)
        markdown += f"# {title}\n\n"
        if description:
            markdown += f"{description}\n\n"

        for ref in page.get_field('content', self.locale) or []:
            markdown += self._render_block(ref['sys']['id'])

        filename = slugify_title(title) + self.file_extension
        return AssembledPage(filename=filename, content=markdown, title=title)

    def _generate_frontmatter(self, title: str, description: str) -> str:
        frontmatter = f'---\ntitle: "{title}"\n'
        if description:
            frontmatter += f'description: "{description}"\n'
        return frontmatter + '---\n\n'

    def _render_block(self, block_id: str) -> str:
        """Render one referenced content block, or nothing if it cannot be resolved."""
        block = self.index.find_entry(block_id)
        if block is None or not block.fields:
            self.logger.debug(f"Content block {block_id} not found, skipping")
            return ''

        markdown = ''
        block_title = block.get_field('title', self.locale)
        if block_title:
            markdown += f"### {block_title}\n\n"

        content = block.get_field('content', self.locale)
        if content:
            markdown += self.rich_text_converter.render_document(content) + '\n\n'

        return markdown


__all__ = ['PageAssembler', 'slugify_title', 'DEFAULT_FILE_EXTENSION']
