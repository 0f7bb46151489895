"""Link filtering and anchor rendering."""
from __future__ import annotations

from plugin_row_links.processing.processor import LinkProcessor

__all__ = ["LinkProcessor"]
