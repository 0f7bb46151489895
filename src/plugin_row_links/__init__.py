"""plugin-row-links — Action links and row meta for plugin listing pages.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> import plugin_row_links
>>> plugin_row_links.__version__
'0.1.0'
"""
from __future__ import annotations

# Configuration
from plugin_row_links.config.models import (
    LinkDefinition,
    LinkPosition,
    PluginLinkConfig,
    UtmParameters,
)
from plugin_row_links.config.normalize import (
    InvalidConfigurationError,
    normalize_link_definition,
    normalize_links,
    normalize_utm_defaults,
    sanitize_key,
)
from plugin_row_links.config.loader import (
    LinkManifest,
    ManifestError,
    PluginEntry,
    load_manifest,
    parse_manifest,
)

# Host collaborators
from plugin_row_links.host.base import HostEnvironment, StorefrontAdmin
from plugin_row_links.host.default import DefaultHost
from plugin_row_links.host.hooks import ACTION_LINKS_HOOK, ROW_META_HOOK, FilterHooks

# Processing and registry
from plugin_row_links.processing.processor import LinkProcessor
from plugin_row_links.registry.plugin_links import PluginLinks
from plugin_row_links.registry.registry import LinkRegistry

# Convenience registration
from plugin_row_links.convenience import (
    register_plugin_links,
    register_storefront_plugin_links,
)

__version__: str = "0.1.0"

__all__ = [
    "__version__",
    # Configuration
    "InvalidConfigurationError",
    "LinkDefinition",
    "LinkManifest",
    "LinkPosition",
    "ManifestError",
    "PluginEntry",
    "PluginLinkConfig",
    "UtmParameters",
    "load_manifest",
    "normalize_link_definition",
    "normalize_links",
    "normalize_utm_defaults",
    "parse_manifest",
    "sanitize_key",
    # Host
    "ACTION_LINKS_HOOK",
    "DefaultHost",
    "FilterHooks",
    "HostEnvironment",
    "ROW_META_HOOK",
    "StorefrontAdmin",
    # Processing / registry
    "LinkProcessor",
    "LinkRegistry",
    "PluginLinks",
    # Convenience
    "register_plugin_links",
    "register_storefront_plugin_links",
]
