"""Plugin link registry.

``LinkRegistry`` owns one ``PluginLinks`` per caller-chosen prefix; each
``PluginLinks`` tracks the configurations of one or more plugin files and
exposes the ``plugin_action_links`` / ``plugin_row_meta`` filters.
"""
from __future__ import annotations

from plugin_row_links.registry.plugin_links import PluginLinks
from plugin_row_links.registry.registry import LinkRegistry

__all__ = ["LinkRegistry", "PluginLinks"]
