"""Host collaborators: environment contract, default implementation, hooks."""
from __future__ import annotations

from plugin_row_links.host.base import HostEnvironment, StorefrontAdmin
from plugin_row_links.host.default import DefaultHost
from plugin_row_links.host.hooks import (
    ACTION_LINKS_HOOK,
    ROW_META_HOOK,
    FilterHooks,
    HookDispatcher,
)

__all__ = [
    "ACTION_LINKS_HOOK",
    "DefaultHost",
    "FilterHooks",
    "HookDispatcher",
    "HostEnvironment",
    "ROW_META_HOOK",
    "StorefrontAdmin",
]
