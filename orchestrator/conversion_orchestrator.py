"""
Conversion orchestrator for the complete export to Markdown pipeline.

Sequences the phases Load → Index → Export → Report.
"""

import logging
import time
from typing import Any, Dict, Optional

from exporters import MarkdownExporter
from loaders import EntityIndex, ExportLoader
from logger import log_section
from orchestrator.conversion_report import ConversionReport


class ConversionOrchestrator:
    """Central coordinator for a single conversion run."""

    def __init__(self, config: Dict[str, Any], logger: Optional[logging.Logger] = None):
        """
        Initialize conversion orchestrator.

        Args:
            config: Configuration dictionary
            logger: Optional logger instance
        """
        self.config = config
        self.logger = logger or logging.getLogger('contentful_markdown_converter.orchestrator')

        self.loader = ExportLoader(config, logger=self.logger)
        self.exporter = MarkdownExporter(config, logger=self.logger)
        self.report_generator = ConversionReport(self.logger)

    def run(self, export_file: Optional[str] = None) -> Dict[str, Any]:
        """
        Run the conversion.

        Setup errors (missing or unreadable export) propagate; page errors
        are recorded in the report.

        Args:
            export_file: Explicit export path, discovered by prefix if omitted

        Returns:
            Conversion report dictionary
        """
        start_time = time.time()

        log_section("Loading export")
        snapshot = self.loader.load(export_file)
        index = EntityIndex(snapshot)
        self.logger.debug(
            f"Indexed {len(snapshot.entries)} entries and {len(snapshot.assets)} assets"
        )

        log_section("Converting pages")
        results = self.exporter.export_pages(index)

        return self.report_generator.generate_report(
            results,
            duration=time.time() - start_time,
            output_directory=str(self.exporter.output_directory),
            source_path=snapshot.source_path
        )


__all__ = ['ConversionOrchestrator']
