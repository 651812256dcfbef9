"""Table node to pipe-delimited Markdown table converter."""

from typing import Any, Callable, Dict, List, Optional


class TableConverter:
    """Converts table nodes using a node renderer for cell contents."""

    def __init__(self, render_node: Callable[[Optional[Dict[str, Any]]], str]):
        """
        Args:
            render_node: Callable that renders a single rich text node
        """
        self.render_node = render_node

    def render_table(self, table_node: Dict[str, Any]) -> str:
        """
        Render a table node as a Markdown table.

        The separator line always follows the first row, whether or not that
        row holds header cells.

        Args:
            table_node: Table node whose children are rows of cells

        Returns:
            Markdown table, one line per row plus the separator line
        """
        markdown = ''
        for row_index, row in enumerate(table_node.get('content') or []):
            cells = self._render_cells(row)
            markdown += '| ' + ' | '.join(cells) + ' |\n'

            if row_index == 0:
                markdown += '| ' + ' | '.join('---' for _ in cells) + ' |\n'

        return markdown

    def _render_cells(self, row: Dict[str, Any]) -> List[str]:
        return [
            ''.join(self.render_node(child) for child in cell.get('content') or []).strip()
            for cell in row.get('content') or []
        ]


__all__ = ['TableConverter']
