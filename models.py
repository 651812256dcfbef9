"""Data models for the Contentful export to Markdown conversion pipeline."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

logger = logging.getLogger('contentful_markdown_converter')

DEFAULT_LOCALE = 'en-US'
UNTITLED = 'Untitled'


class NodeType(Enum):
    """Rich text node kinds understood by the converter."""
    DOCUMENT = "document"
    PARAGRAPH = "paragraph"
    HEADING_2 = "heading-2"
    HEADING_3 = "heading-3"
    UNORDERED_LIST = "unordered-list"
    ORDERED_LIST = "ordered-list"
    LIST_ITEM = "list-item"
    HYPERLINK = "hyperlink"
    EMBEDDED_ASSET_BLOCK = "embedded-asset-block"
    TEXT = "text"
    TABLE = "table"
    UNKNOWN = "unknown"

    @classmethod
    def from_node(cls, node: Dict[str, Any]) -> 'NodeType':
        """Resolve the kind of a raw node, falling back to UNKNOWN."""
        try:
            return cls(node.get('nodeType'))
        except ValueError:
            return cls.UNKNOWN


class MarkType(Enum):
    """Text marks that map to Markdown emphasis."""
    BOLD = "bold"
    CODE = "code"


def _sys_id(record: Dict[str, Any]) -> Optional[str]:
    """Read ``sys.id`` from a raw export record or link."""
    sys_block = record.get('sys') or {}
    return sys_block.get('id')


@dataclass
class ContentfulAsset:
    """Represents an asset (image or other binary) from the export."""

    id: str
    fields: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ContentfulAsset':
        return cls(id=_sys_id(data), fields=data.get('fields') or {})

    def get_field(self, name: str, locale: str = DEFAULT_LOCALE, default: Any = None) -> Any:
        """Get a localized field value or ``default`` when it is missing."""
        value = self.fields.get(name)
        if not isinstance(value, dict) or locale not in value:
            return default
        return value[locale]

    def get_url(self, locale: str = DEFAULT_LOCALE) -> Optional[str]:
        """Get the file URL, rewriting protocol-relative URLs to https."""
        file_info = self.get_field('file', locale)
        if not file_info:
            return None
        url = file_info.get('url')
        if url is None:
            return None
        if url.startswith('//'):
            return 'https:' + url
        return url


@dataclass
class ContentfulEntry:
    """Represents an entry (page, content block, ...) from the export."""

    id: str
    content_type: Optional[str]
    fields: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ContentfulEntry':
        sys_block = data.get('sys') or {}
        content_type = sys_block.get('contentType') or {}
        return cls(
            id=_sys_id(data),
            content_type=_sys_id(content_type),
            fields=data.get('fields') or {}
        )

    def get_field(self, name: str, locale: str = DEFAULT_LOCALE, default: Any = None) -> Any:
        """Get a localized field value or ``default`` when it is missing."""
        value = self.fields.get(name)
        if not isinstance(value, dict) or locale not in value:
            return default
        return value[locale]

    def is_page(self, page_content_type: str = 'page') -> bool:
        return self.content_type == page_content_type


@dataclass(frozen=True)
class ExportSnapshot:
    """Full deserialized export: entries and assets, loaded once."""

    entries: List[ContentfulEntry] = field(default_factory=list)
    assets: List[ContentfulAsset] = field(default_factory=list)
    source_path: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source_path: Optional[str] = None) -> 'ExportSnapshot':
        """Build a snapshot from the raw export JSON."""
        entries = [ContentfulEntry.from_dict(item) for item in data.get('entries') or []]
        assets = [ContentfulAsset.from_dict(item) for item in data.get('assets') or []]
        logger.debug(f"Snapshot built with {len(entries)} entries and {len(assets)} assets")
        return cls(entries=entries, assets=assets, source_path=source_path)


@dataclass
class AssembledPage:
    """A page rendered to Markdown, ready to be written."""

    filename: str
    content: str
    title: str = UNTITLED


@dataclass
class PageResult:
    """Outcome of converting a single page."""

    index: int
    title: Optional[str]
    success: bool
    filename: Optional[str] = None
    output_path: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize result to dictionary."""
        return {
            'index': self.index,
            'title': self.title,
            'success': self.success,
            'filename': self.filename,
            'output_path': self.output_path,
            'error': self.error
        }


__all__ = [
    'DEFAULT_LOCALE',
    'UNTITLED',
    'NodeType',
    'MarkType',
    'ContentfulAsset',
    'ContentfulEntry',
    'ExportSnapshot',
    'AssembledPage',
    'PageResult',
]
