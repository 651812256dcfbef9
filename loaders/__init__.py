"""Loaders package for reading a Contentful export and indexing its records."""

from .entity_index import EntityIndex
from .export_loader import (
    ExportFileNotFoundError,
    ExportLoadError,
    ExportLoader,
    ExportParseError,
)

__all__ = [
    'EntityIndex',
    'ExportLoader',
    'ExportLoadError',
    'ExportFileNotFoundError',
    'ExportParseError',
]
