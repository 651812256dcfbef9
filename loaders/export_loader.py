"""Locate and parse the Contentful export JSON file."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from models import ExportSnapshot

DEFAULT_FILE_PREFIX = 'contentful-export'


class ExportLoadError(Exception):
    """Base exception for export loading errors."""
    pass


class ExportFileNotFoundError(ExportLoadError):
    """No export file matched the configured prefix."""
    pass


class ExportParseError(ExportLoadError):
    """The export file is not valid JSON or has the wrong shape."""
    pass


class ExportLoader:
    """Finds the export file in a directory and builds an ExportSnapshot from it."""

    def __init__(self, config: Optional[Dict[str, Any]] = None, logger: Optional[logging.Logger] = None):
        """
        Initialize the export loader.

        Args:
            config: Configuration dictionary with export settings
            logger: Logger instance
        """
        self.config = config or {}
        self.logger = logger or logging.getLogger('contentful_markdown_converter.loaders.export_loader')

        export_config = self.config.get('export', {})
        self.input_directory = Path(export_config.get('input_directory', '.'))
        self.file_prefix = export_config.get('file_prefix', DEFAULT_FILE_PREFIX)

    def find_export_file(self) -> Path:
        """
        Find the first file in the input directory whose name starts with the prefix.

        Returns:
            Path to the export file

        Raises:
            ExportFileNotFoundError: If the directory is missing or nothing matches
        """
        if not self.input_directory.is_dir():
            raise ExportFileNotFoundError(
                f"Input directory does not exist: {self.input_directory}"
            )

        candidates = sorted(
            path for path in self.input_directory.iterdir()
            if path.is_file() and path.name.startswith(self.file_prefix)
        )
        if not candidates:
            raise ExportFileNotFoundError(
                f"No file starting with '{self.file_prefix}' found in {self.input_directory}"
            )

        if len(candidates) > 1:
            self.logger.warning(
                f"Found {len(candidates)} export files, using {candidates[0].name}"
            )
        return candidates[0]

    def load(self, export_file: Optional[Union[str, Path]] = None) -> ExportSnapshot:
        """
        Load the export snapshot.

        Args:
            export_file: Explicit path to the export; discovered by prefix if omitted

        Returns:
            Parsed ExportSnapshot

        Raises:
            ExportFileNotFoundError: If the export file cannot be found
            ExportParseError: If the file is not a JSON object
        """
        path = Path(export_file) if export_file else self.find_export_file()
        if not path.is_file():
            raise ExportFileNotFoundError(f"Export file not found: {path}")

        self.logger.info(f"Reading export file {path}")
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ExportParseError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ExportParseError(f"Export file {path} must contain a JSON object")

        return ExportSnapshot.from_dict(data, source_path=str(path))


__all__ = [
    'DEFAULT_FILE_PREFIX',
    'ExportLoader',
    'ExportLoadError',
    'ExportFileNotFoundError',
    'ExportParseError',
]
