"""In-memory lookup of entries and assets by their stable id."""

import logging
from typing import Dict, List, Optional

from models import ContentfulAsset, ContentfulEntry, ExportSnapshot

logger = logging.getLogger('contentful_markdown_converter.loaders.entity_index')


class EntityIndex:
    """Read-only id lookup built once from an ExportSnapshot."""

    def __init__(self, snapshot: ExportSnapshot):
        self.snapshot = snapshot
        self._entries: Dict[str, ContentfulEntry] = {}
        self._assets: Dict[str, ContentfulAsset] = {}

        # First record wins on duplicate ids
        for entry in snapshot.entries:
            if entry.id in self._entries:
                logger.debug(f"Duplicate entry id {entry.id}, keeping first")
                continue
            self._entries[entry.id] = entry

        for asset in snapshot.assets:
            if asset.id in self._assets:
                logger.debug(f"Duplicate asset id {asset.id}, keeping first")
                continue
            self._assets[asset.id] = asset

    def find_entry(self, entry_id: Optional[str]) -> Optional[ContentfulEntry]:
        return self._entries.get(entry_id) if entry_id is not None else None

    def find_asset(self, asset_id: Optional[str]) -> Optional[ContentfulAsset]:
        return self._assets.get(asset_id) if asset_id is not None else None

    def pages(self, content_type: str = 'page') -> List[ContentfulEntry]:
        """Return page entries in export order."""
        return [entry for entry in self.snapshot.entries if entry.is_page(content_type)]

    def __len__(self) -> int:
        return len(self._entries) + len(self._assets)


__all__ = ['EntityIndex']
