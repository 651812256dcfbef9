"""
Conversion report generator for summarizing page results.

This module turns the per-page results of a run into a report dictionary,
formatted for console display or exported as JSON.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from models import PageResult


class ConversionReport:
    """Aggregates page results into a summary report."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger('contentful_markdown_converter.orchestrator.conversion_report')

    def generate_report(
        self,
        results: List[PageResult],
        duration: float,
        output_directory: str,
        source_path: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Generate the conversion report.

        Args:
            results: PageResult per attempted page
            duration: Total conversion duration in seconds
            output_directory: Directory the pages were written to
            source_path: Export file that was converted

        Returns:
            Report dictionary
        """
        converted = [r for r in results if r.success]
        failed = [r for r in results if not r.success]

        return {
            'summary': {
                'pages_found': len(results),
                'pages_converted': len(converted),
                'pages_failed': len(failed),
                'duration_seconds': duration,
                'output_directory': output_directory,
                'source': source_path
            },
            'pages': [r.to_dict() for r in results],
            'errors': [{'index': r.index, 'error': r.error} for r in failed],
            'timestamp': datetime.now().isoformat()
        }

    def format_console_report(self, report: Dict[str, Any]) -> str:
        """Format the report summary for the console."""
        summary = report.get('summary', {})
        lines = [
            f"Done! Converted {summary.get('pages_converted', 0)} of "
            f"{summary.get('pages_found', 0)} pages to {summary.get('output_directory')}/"
        ]
        if summary.get('pages_failed'):
            lines.append(f"{summary['pages_failed']} pages failed:")
            for error in report.get('errors', []):
                lines.append(f"  page {error['index']}: {error['error']}")
        return "\n".join(lines)

    def export_json_report(self, report: Dict[str, Any], report_path: str) -> None:
        """Write the report as JSON, creating parent directories as needed."""
        path = Path(report_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=2, ensure_ascii=False)
        self.logger.debug(f"Report written to {path}")


__all__ = ['ConversionReport']
