"""Per-prefix store of plugin link configurations.

Classes
-------
- PluginLinks  — plugin file → configuration map plus the two hook filters
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from plugin_row_links.config.models import LinkPosition, PluginLinkConfig
from plugin_row_links.config.normalize import (
    InvalidConfigurationError,
    normalize_links,
    normalize_utm_defaults,
)
from plugin_row_links.host.base import HostEnvironment
from plugin_row_links.processing.processor import LinkProcessor

logger = logging.getLogger(__name__)


class PluginLinks:
    """Link configurations registered under one prefix.

    A prefix is a caller-chosen namespace; each prefix may track any number
    of plugin files.  Configurations are keyed by the host-resolved plugin
    basename, which is what the listing hooks pass back at render time.

    Parameters
    ----------
    prefix:
        Namespace this instance was created for.
    host:
        Host collaborators used for basename resolution and rendering.
    debug:
        Emit registration debug logs.  Defaults to ``host.debug``.
    """

    def __init__(
        self,
        prefix: str,
        host: HostEnvironment,
        *,
        debug: bool | None = None,
    ) -> None:
        self.prefix = prefix
        self._host = host
        self._processor = LinkProcessor(host)
        self._debug = host.debug if debug is None else debug
        self._registered: dict[str, PluginLinkConfig] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(
        self,
        file: str,
        external_links: Mapping[str, Any] | None = None,
        utm_args: Mapping[str, Any] | None = None,
    ) -> PluginLinks:
        """Register the links for the plugin at ``file``.

        Any configuration previously registered for the same plugin is
        replaced in full.

        Parameters
        ----------
        file:
            The plugin's main file path.
        external_links:
            Mapping of link key to raw link options.
        utm_args:
            UTM overrides merged over the built-in defaults.

        Returns
        -------
        PluginLinks
            This instance, for chaining.

        Raises
        ------
        InvalidConfigurationError
            If ``file`` is empty or a link definition is malformed.
        """
        if not file:
            raise InvalidConfigurationError("file", "Plugin file path must be provided.")
        basename = self._host.plugin_basename(file)
        if not basename:
            raise InvalidConfigurationError(
                "file", f"Plugin file {file!r} does not resolve to a plugin basename."
            )

        self._registered[basename] = PluginLinkConfig(
            file=file,
            basename=basename,
            links=normalize_links(external_links),
            utm=normalize_utm_defaults(utm_args),
        )
        self._log("Registered plugin links for: %s", basename)
        return self

    def deregister(self, plugin_file: str) -> None:
        """Remove the configuration for ``plugin_file``.

        Raises
        ------
        KeyError
            If nothing is registered for ``plugin_file``.
        """
        basename = self._resolve(plugin_file)
        try:
            del self._registered[basename]
        except KeyError:
            raise KeyError(
                f"No plugin links registered for {plugin_file!r} under {self.prefix!r}."
            ) from None
        self._log("Deregistered plugin links for: %s", basename)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_config(self, plugin_file: str) -> PluginLinkConfig | None:
        """Return the configuration for a plugin file or basename."""
        return self._registered.get(self._resolve(plugin_file))

    def is_registered(self, plugin_file: str) -> bool:
        return self._resolve(plugin_file) in self._registered

    def list_plugins(self) -> list[str]:
        """Return registered plugin basenames in registration order."""
        return list(self._registered)

    def _resolve(self, plugin_file: str) -> str:
        if plugin_file in self._registered:
            return plugin_file
        return self._host.plugin_basename(plugin_file) if plugin_file else plugin_file

    # ------------------------------------------------------------------
    # Hook filters
    # ------------------------------------------------------------------

    def filter_plugin_action_links(
        self, links: Mapping[str, str], plugin_file: str, *args: Any
    ) -> dict[str, str]:
        """``plugin_action_links`` filter.  Extra hook arguments are ignored."""
        return self._filter(links, plugin_file, LinkPosition.ACTION)

    def filter_plugin_row_meta(
        self, links: Mapping[str, str], plugin_file: str, *args: Any
    ) -> dict[str, str]:
        """``plugin_row_meta`` filter.  Extra hook arguments are ignored."""
        return self._filter(links, plugin_file, LinkPosition.ROW_META)

    def _filter(
        self, links: Mapping[str, str], plugin_file: str, position: LinkPosition
    ) -> dict[str, str]:
        config = self._registered.get(plugin_file)
        if config is None:
            return dict(links)
        return self._processor.process(links, config, position)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _log(self, message: str, *args: object) -> None:
        if self._debug:
            logger.debug("[Plugin Links] " + message, *args)

    def __len__(self) -> int:
        return len(self._registered)

    def __repr__(self) -> str:
        return f"PluginLinks(prefix={self.prefix!r}, plugins={self.list_plugins()!r})"
