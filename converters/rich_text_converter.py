"""Rich text document to Markdown converter."""

import logging
from typing import Any, Callable, Dict, List, Optional

from models import DEFAULT_LOCALE, MarkType, NodeType
from loaders.entity_index import EntityIndex

from .table_converter import TableConverter

logger = logging.getLogger('contentful_markdown_converter.converters.rich_text_converter')

MARK_WRAPPERS = {
    MarkType.BOLD.value: ('**', '**'),
    MarkType.CODE.value: ('`', '`'),
}


class RichTextConverter:
    """
    Recursive converter from a rich text node tree to Markdown.

    Each node kind in NodeType has one handler; kinds the converter does not
    know are mapped to NodeType.UNKNOWN and only their children are rendered.
    Embedded assets are resolved through the EntityIndex. The converter keeps
    no state between calls, so rendering the same tree twice gives the same
    output.
    """

    def __init__(self, index: EntityIndex, locale: str = DEFAULT_LOCALE,
                 logger: Optional[logging.Logger] = None):
        self.index = index
        self.locale = locale
        self.logger = logger or logging.getLogger('contentful_markdown_converter.converters.rich_text_converter')
        self.table_converter = TableConverter(self.render)

        self._handlers: Dict[NodeType, Callable[[Dict[str, Any]], str]] = {
            NodeType.DOCUMENT: self._convert_document,
            NodeType.PARAGRAPH: self._convert_inline,
            NodeType.HEADING_2: self._convert_heading_2,
            NodeType.HEADING_3: self._convert_heading_3,
            NodeType.UNORDERED_LIST: self._convert_unordered_list,
            NodeType.ORDERED_LIST: self._convert_ordered_list,
            NodeType.LIST_ITEM: self._convert_inline,
            NodeType.HYPERLINK: self._convert_hyperlink,
            NodeType.EMBEDDED_ASSET_BLOCK: self._convert_embedded_asset,
            NodeType.TEXT: self._convert_text,
            NodeType.TABLE: self._convert_table,
            NodeType.UNKNOWN: self._convert_unknown,
        }

    def render_document(self, document: Optional[Dict[str, Any]]) -> str:
        """
        Render a rich text field value.

        Args:
            document: Root document node, may be None

        Returns:
            Markdown string, empty when the document has no content
        """
        if not document or not document.get('content'):
            return ''
        return self.render(document)

    def render(self, node: Optional[Dict[str, Any]]) -> str:
        """Render any node; absent nodes render as an empty string."""
        if not node or not isinstance(node, dict):
            return ''
        node_type = NodeType.from_node(node)
        return self._handlers[node_type](node)

    def _children(self, node: Dict[str, Any]) -> List[Dict[str, Any]]:
        return node.get('content') or []

    def _render_children(self, node: Dict[str, Any]) -> List[str]:
        return [self.render(child) for child in self._children(node)]

    def _convert_document(self, node: Dict[str, Any]) -> str:
        return '\n\n'.join(self._render_children(node))

    def _convert_inline(self, node: Dict[str, Any]) -> str:
        return ''.join(self._render_children(node))

    def _convert_heading_2(self, node: Dict[str, Any]) -> str:
        return '## ' + self._convert_inline(node)

    def _convert_heading_3(self, node: Dict[str, Any]) -> str:
        return '### ' + self._convert_inline(node)

    def _convert_unordered_list(self, node: Dict[str, Any]) -> str:
        return '\n'.join('- ' + item for item in self._render_children(node))

    def _convert_ordered_list(self, node: Dict[str, Any]) -> str:
        return '\n'.join(
            f"{i}. {item}" for i, item in enumerate(self._render_children(node), start=1)
        )

    def _convert_hyperlink(self, node: Dict[str, Any]) -> str:
        link_text = self._convert_inline(node)
        uri = (node.get('data') or {}).get('uri', '')
        return f"[{link_text}]({uri})"

    def _convert_embedded_asset(self, node: Dict[str, Any]) -> str:
        target = (node.get('data') or {}).get('target') or {}
        asset_id = (target.get('sys') or {}).get('id')
        asset = self.index.find_asset(asset_id)
        if asset is None:
            self.logger.debug(f"Embedded asset {asset_id} not found, skipping")
            return ''

        url = asset.get_url(self.locale)
        if url is None:
            self.logger.debug(f"Asset {asset_id} has no file, skipping")
            return ''

        title = asset.get_field('title', self.locale, '') or ''
        return f"\n\n![{title}]({url})\n\n"

    def _convert_text(self, node: Dict[str, Any]) -> str:
        value = node.get('value')
        text = '' if value is None else str(value)
        # Marks nest in listed order
        for mark in node.get('marks') or []:
            if not isinstance(mark, dict):
                continue
            wrapper = MARK_WRAPPERS.get(mark.get('type'))
            if wrapper:
                text = f"{wrapper[0]}{text}{wrapper[1]}"
        return text

    def _convert_table(self, node: Dict[str, Any]) -> str:
        return '\n\n' + self.table_converter.render_table(node) + '\n\n'

    def _convert_unknown(self, node: Dict[str, Any]) -> str:
        if 'content' in node and node['content'] is not None:
            self.logger.debug(f"Unhandled node type '{node.get('nodeType')}', rendering children")
            return self._convert_inline(node)
        return ''


__all__ = ['RichTextConverter', 'MARK_WRAPPERS']
