"""Process-wide registry of ``PluginLinks`` instances keyed by prefix.

Classes
-------
- LinkRegistry  — prefix → PluginLinks map and the hook entry points
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from plugin_row_links.config.normalize import InvalidConfigurationError
from plugin_row_links.host.base import HostEnvironment
from plugin_row_links.host.hooks import (
    ACTION_LINKS_HOOK,
    DEFAULT_PRIORITY,
    ROW_META_HOOK,
    HookDispatcher,
)
from plugin_row_links.registry.plugin_links import PluginLinks

logger = logging.getLogger(__name__)


class LinkRegistry:
    """Owns every ``PluginLinks`` instance for one host process.

    Construct one registry at bootstrap and hand it to whatever dispatches
    the host's ``plugin_action_links`` and ``plugin_row_meta`` filters.
    Registration mutates the registry; the hook handlers only read it.

    Parameters
    ----------
    host:
        Host collaborators shared by all instances.
    hooks:
        Optional dispatcher to attach the two hook handlers to.
    """

    def __init__(
        self,
        host: HostEnvironment,
        hooks: HookDispatcher | None = None,
    ) -> None:
        self.host = host
        self._instances: dict[str, PluginLinks] = {}
        self._attached: list[HookDispatcher] = []
        if hooks is not None:
            self.attach(hooks)

    def attach(self, hooks: HookDispatcher, priority: int = DEFAULT_PRIORITY) -> None:
        """Register the hook handlers on ``hooks``.  Repeat calls are no-ops."""
        if any(existing is hooks for existing in self._attached):
            return
        hooks.add_filter(ACTION_LINKS_HOOK, self.handle_action_links, priority)
        hooks.add_filter(ROW_META_HOOK, self.handle_row_meta, priority)
        self._attached.append(hooks)
        logger.debug("LinkRegistry: attached to %r", hooks)

    # ------------------------------------------------------------------
    # Instances
    # ------------------------------------------------------------------

    def instance(self, prefix: str = "default") -> PluginLinks:
        """Return the ``PluginLinks`` for ``prefix``, creating it on first use.

        Raises
        ------
        InvalidConfigurationError
            If ``prefix`` is empty.
        """
        if not prefix:
            raise InvalidConfigurationError("prefix", "Registry prefix must be provided.")
        if prefix not in self._instances:
            self._instances[prefix] = PluginLinks(prefix, self.host)
            logger.debug("LinkRegistry: created instance %r", prefix)
        return self._instances[prefix]

    def register(
        self,
        file: str,
        prefix: str = "default",
        external_links: Mapping[str, Any] | None = None,
        utm_args: Mapping[str, Any] | None = None,
    ) -> PluginLinks:
        """Register links for ``file`` under ``prefix``.

        Raises
        ------
        InvalidConfigurationError
            If ``prefix`` or ``file`` is empty, or a link is malformed.
        """
        return self.instance(prefix).register(file, external_links, utm_args)

    def get(self, prefix: str) -> PluginLinks | None:
        return self._instances.get(prefix)

    def prefixes(self) -> list[str]:
        """Return known prefixes in creation order."""
        return list(self._instances)

    # ------------------------------------------------------------------
    # Hook handlers
    # ------------------------------------------------------------------

    def handle_action_links(
        self, links: Mapping[str, str], plugin_file: str, *args: Any
    ) -> dict[str, str]:
        """Apply every instance's action-links filter for ``plugin_file``."""
        result = dict(links)
        for plugin_links in self._instances.values():
            result = plugin_links.filter_plugin_action_links(result, plugin_file, *args)
        return result

    def handle_row_meta(
        self, links: Mapping[str, str], plugin_file: str, *args: Any
    ) -> dict[str, str]:
        """Apply every instance's row-meta filter for ``plugin_file``."""
        result = dict(links)
        for plugin_links in self._instances.values():
            result = plugin_links.filter_plugin_row_meta(result, plugin_file, *args)
        return result

    def __len__(self) -> int:
        return len(self._instances)

    def __repr__(self) -> str:
        return f"LinkRegistry(prefixes={self.prefixes()!r})"
