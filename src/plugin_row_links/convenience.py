"""Convenience registration functions.

These wrap ``LinkRegistry.register`` so plugin bootstrap code never has to
handle exceptions: failures are routed to an optional callback and
``None`` is returned instead.

Example
-------
::

    from plugin_row_links import DefaultHost, LinkRegistry, register_plugin_links

    registry = LinkRegistry(DefaultHost({"manage_options"}))
    register_plugin_links(
        registry,
        "my-plugin/my-plugin.php",
        "my_plugin",
        {"docs": {"label": "Docs", "url": "https://example.com/docs"}},
    )
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable

from plugin_row_links.registry.plugin_links import PluginLinks
from plugin_row_links.registry.registry import LinkRegistry

logger = logging.getLogger(__name__)

TEXT_DOMAIN = "arraypress"
SUPPORT_URL = "https://arraypress.com/support"
EXTENSIONS_URL = "https://arraypress.com/plugins"
STOREFRONT_SETTINGS_PAGE = "edd-settings"
MANAGE_CAPABILITY = "manage_options"

ErrorCallback = Callable[[Exception], Any]


def register_plugin_links(
    registry: LinkRegistry,
    file: str,
    prefix: str,
    external_links: Mapping[str, Any] | None = None,
    utm_args: Mapping[str, Any] | None = None,
    error_callback: ErrorCallback | None = None,
) -> PluginLinks | None:
    """Register links for ``file`` under ``prefix`` without raising.

    Parameters
    ----------
    registry:
        The registry to register into.
    file:
        The plugin's main file path.
    prefix:
        Registry namespace for this plugin.
    external_links:
        Mapping of link key to raw link options.
    utm_args:
        UTM overrides merged over the built-in defaults.
    error_callback:
        Called with the exception when registration fails.

    Returns
    -------
    PluginLinks | None
        The instance the links were registered on, or None on failure.
    """
    try:
        return registry.register(file, prefix, external_links, utm_args)
    except Exception as exc:
        _report_failure(file, exc, error_callback)
        return None


def register_storefront_plugin_links(
    registry: LinkRegistry,
    file: str,
    prefix: str,
    settings_tab: str = "",
    settings_section: str = "",
    external_links: Mapping[str, Any] | None = None,
    utm_args: Mapping[str, Any] | None = None,
    error_callback: ErrorCallback | None = None,
) -> PluginLinks | None:
    """Register links for a storefront extension plugin without raising.

    Adds ``support`` and ``extensions`` row-meta links (caller links with
    the same key replace them).  When the host has a storefront installed
    and both ``settings_tab`` and ``settings_section`` are given, a
    ``settings`` action link to the storefront settings screen is added;
    it skips UTM tagging, opens in the same tab, and re-checks that the
    storefront is still present on every render.

    Failures while assembling the links (translation, storefront URL
    building) are routed to ``error_callback`` like registration failures.

    Returns
    -------
    PluginLinks | None
        The instance the links were registered on, or None on failure.
    """
    try:
        links = _storefront_links(registry, settings_tab, settings_section, external_links)
    except Exception as exc:
        _report_failure(file, exc, error_callback)
        return None
    return register_plugin_links(registry, file, prefix, links, utm_args, error_callback)


def _storefront_links(
    registry: LinkRegistry,
    settings_tab: str,
    settings_section: str,
    external_links: Mapping[str, Any] | None,
) -> dict[str, Any]:
    host = registry.host
    default_links: dict[str, Any] = {
        "support": {
            "label": host.translate("Support", TEXT_DOMAIN),
            "url": SUPPORT_URL,
            "capability": MANAGE_CAPABILITY,
        },
        "extensions": {
            "label": host.translate("Extensions", TEXT_DOMAIN),
            "url": EXTENSIONS_URL,
            "capability": MANAGE_CAPABILITY,
        },
    }
    links = {**default_links, **dict(external_links or {})}

    if host.storefront is not None and settings_tab and settings_section:
        links["settings"] = {
            "action": True,
            "label": host.translate("Settings", TEXT_DOMAIN),
            "url": host.storefront.admin_url(
                {
                    "page": STOREFRONT_SETTINGS_PAGE,
                    "tab": settings_tab,
                    "section": settings_section,
                }
            ),
            "utm": False,
            "new_tab": False,
            "capability": MANAGE_CAPABILITY,
            "conditions": lambda: registry.host.storefront is not None,
        }
    return links


def _report_failure(
    file: str, exc: Exception, error_callback: ErrorCallback | None
) -> None:
    logger.debug("Plugin link registration failed for %r: %s", file, exc)
    if error_callback is not None:
        error_callback(exc)
