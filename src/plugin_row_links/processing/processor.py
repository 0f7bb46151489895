"""Filtering and rendering of configured links into a host link collection.

Classes
-------
- LinkProcessor  — applies a ``PluginLinkConfig`` to one link collection
"""
from __future__ import annotations

import logging
from collections.abc import Mapping

from plugin_row_links.config.models import (
    LinkDefinition,
    LinkPosition,
    PluginLinkConfig,
    UtmParameters,
)
from plugin_row_links.host.base import HostEnvironment

logger = logging.getLogger(__name__)

NEW_TAB_TARGET = "_blank"
NEW_TAB_REL = "noopener noreferrer"


class LinkProcessor:
    """Decide which configured links apply and render them as anchors.

    The processor holds no state besides its host; every call evaluates
    capabilities and visibility predicates afresh.

    Parameters
    ----------
    host:
        Supplies capability checks, escaping and query-string merging.
    """

    def __init__(self, host: HostEnvironment) -> None:
        self._host = host

    def process(
        self,
        existing_links: Mapping[str, str],
        config: PluginLinkConfig,
        position: LinkPosition,
    ) -> dict[str, str]:
        """Merge the links of ``config`` for ``position`` into a copy of
        ``existing_links``.

        Host-supplied keys keep their order.  A configured key that is
        already present replaces the host value in place; new keys are
        appended in configuration order.  Links that fail a filter are
        simply not added.

        Parameters
        ----------
        existing_links:
            The collection supplied by the host hook.  Not mutated.
        config:
            The plugin's registered configuration.
        position:
            Which collection is being rendered.

        Returns
        -------
        dict[str, str]
            The merged link collection.
        """
        merged = dict(existing_links)
        for key, link in config.links.items():
            reason = self._rejection_reason(link, position)
            if reason is not None:
                logger.debug(
                    "LinkProcessor: skipped %r for %r (%s)", key, config.basename, reason
                )
                continue
            url = self.decorate_url(link, config.utm)
            merged[key] = self.render_anchor(link, url)
        return merged

    def _rejection_reason(
        self, link: LinkDefinition, position: LinkPosition
    ) -> str | None:
        if link.position is not position:
            return "position"
        if link.required_capability and not self._host.current_user_can(
            link.required_capability
        ):
            return f"missing capability {link.required_capability!r}"
        if not link.is_visible():
            return "conditions"
        if not link.has_content:
            return "empty label or url"
        return None

    def decorate_url(self, link: LinkDefinition, utm: UtmParameters) -> str:
        """Return the link URL with UTM parameters applied when enabled."""
        if not link.apply_utm:
            return link.url
        return self._host.add_query_args(link.url, utm.as_query())

    def render_anchor(self, link: LinkDefinition, url: str) -> str:
        """Render ``link`` as an ``<a>`` element pointing at ``url``."""
        attrs: dict[str, str] = {}
        href = self._host.escape_url(url)
        if href:
            attrs["href"] = href
        if link.open_in_new_tab:
            attrs["target"] = NEW_TAB_TARGET
            attrs["rel"] = NEW_TAB_REL
        attr_string = "".join(
            f' {name}="{self._host.escape_attr(value)}"' for name, value in attrs.items()
        )
        return f"<a{attr_string}>{self._host.sanitize_label(link.label)}</a>"
