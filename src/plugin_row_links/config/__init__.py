"""Link configuration models, normalisation helpers and manifest loading."""
from __future__ import annotations

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

__all__ = [
    "InvalidConfigurationError",
    "LinkDefinition",
    "LinkPosition",
    "PluginLinkConfig",
    "UtmParameters",
    "normalize_link_definition",
    "normalize_links",
    "normalize_utm_defaults",
    "sanitize_key",
]
