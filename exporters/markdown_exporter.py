"""Markdown exporter that converts every page of an export and writes it to disk."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from models import DEFAULT_LOCALE, ContentfulEntry, PageResult
from logger import ProgressTracker
from loaders.entity_index import EntityIndex
from .page_assembler import DEFAULT_FILE_EXTENSION, PageAssembler


class MarkdownExporter:
    """
    Orchestrates export of page entries to local Markdown files.

    This exporter:
    1. Creates the output directory
    2. Selects page entries by content type
    3. Assembles each page fully in memory
    4. Writes one file per page
    5. Records a PageResult per page, so one broken page never stops the batch
    """

    def __init__(self, config: Dict[str, Any], logger: Optional[logging.Logger] = None, output_dir: Optional[str] = None):
        """
        Initialize the markdown exporter.

        Args:
            config: Configuration dictionary with export settings
            logger: Logger instance
            output_dir: Optional output directory override (takes precedence over config)
        """
        self.config = config
        self.logger = logger or logging.getLogger('contentful_markdown_converter.exporters.markdown_exporter')

        export_config = config.get('export', {})
        self.output_directory = Path(output_dir) if output_dir else Path(export_config.get('output_directory', './markdown-output'))
        self.locale = export_config.get('locale', DEFAULT_LOCALE)
        self.page_content_type = export_config.get('page_content_type', 'page')
        self.file_extension = export_config.get('file_extension', DEFAULT_FILE_EXTENSION)

        self.stats = {
            'total_pages_found': 0,
            'total_pages_exported': 0,
            'total_errors': 0
        }

    def export_pages(self, index: EntityIndex) -> List[PageResult]:
        """
        Convert and write every page entry in the index.

        Args:
            index: EntityIndex built from the export snapshot

        Returns:
            One PageResult per page, in export order
        """
        try:
            self.output_directory.mkdir(parents=True, exist_ok=True)
            self.logger.debug(f"Output directory ready: {self.output_directory}")
        except Exception as e:
            self.logger.error(f"Failed to create output directory: {e}")
            raise

        pages = index.pages(self.page_content_type)
        self.stats['total_pages_found'] = len(pages)
        self.logger.info(f"Found {len(pages)} pages to convert")

        assembler = PageAssembler(
            index,
            locale=self.locale,
            file_extension=self.file_extension,
            logger=self.logger
        )

        results = []
        with ProgressTracker(total_items=len(pages), item_type='pages') as tracker:
            for idx, page in enumerate(pages):
                result = self._export_page(assembler, page, idx)
                results.append(result)
                tracker.increment(success=result.success)

        self._log_export_summary()
        return results

    def _export_page(self, assembler: PageAssembler, page: ContentfulEntry, index: int) -> PageResult:
        """Assemble and write a single page, converting any failure to a failed result."""
        title = None
        try:
            assembled = assembler.assemble_page(page)
            title = assembled.title
            page_file = self.output_directory / assembled.filename
            page_file.write_text(assembled.content, encoding='utf-8')
        except Exception as e:
            self.logger.error(f"Error converting page {index}: {e}")
            self.logger.debug(f"Traceback for page {index} (ID: {page.id})", exc_info=True)
            self.stats['total_errors'] += 1
            return PageResult(
                index=index,
                title=title,
                success=False,
                error=str(e)
            )

        self.stats['total_pages_exported'] += 1
        self.logger.info(f"Converted: {title} -> {assembled.filename}")
        return PageResult(
            index=index,
            title=title,
            success=True,
            filename=assembled.filename,
            output_path=str(page_file)
        )

    def _log_export_summary(self) -> None:
        """Log final export statistics."""
        self.logger.info("=" * 60)
        self.logger.info("MARKDOWN EXPORT SUMMARY")
        self.logger.info("=" * 60)
        self.logger.info(f"Pages found: {self.stats['total_pages_found']}")
        self.logger.info(f"Pages exported: {self.stats['total_pages_exported']}")
        self.logger.info(f"Total errors: {self.stats['total_errors']}")
        self.logger.info(f"Output directory: {self.output_directory}")
        self.logger.info("=" * 60)


__all__ = ['MarkdownExporter']
