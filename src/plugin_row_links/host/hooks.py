"""Minimal filter-hook dispatcher.

Host applications normally own hook dispatch.  ``FilterHooks`` provides
the same add/apply contract for tooling and tests: callbacks registered
under a hook name are applied in priority order (then registration
order), each receiving the previous callback's return value.

Classes
-------
- HookDispatcher  — protocol the registry attaches to
- FilterHooks     — in-process implementation
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Protocol

logger = logging.getLogger(__name__)

ACTION_LINKS_HOOK = "plugin_action_links"
ROW_META_HOOK = "plugin_row_meta"

DEFAULT_PRIORITY = 10


class HookDispatcher(Protocol):
    """Anything that can register filter callbacks by hook name."""

    def add_filter(
        self, hook: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY
    ) -> None: ...


class FilterHooks:
    """Ordered filter callbacks keyed by hook name."""

    def __init__(self) -> None:
        self._filters: dict[str, list[tuple[int, int, Callable[..., Any]]]] = {}
        self._sequence = 0

    def add_filter(
        self, hook: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY
    ) -> None:
        """Register ``callback`` on ``hook``."""
        self._filters.setdefault(hook, []).append((priority, self._sequence, callback))
        self._filters[hook].sort(key=lambda entry: (entry[0], entry[1]))
        self._sequence += 1
        logger.debug("FilterHooks: added %r to %r (priority %d)", callback, hook, priority)

    def has_filter(self, hook: str, callback: Callable[..., Any]) -> bool:
        """Return True if ``callback`` is registered on ``hook``."""
        return any(entry[2] == callback for entry in self._filters.get(hook, []))

    def apply_filters(self, hook: str, value: Any, *args: Any) -> Any:
        """Pass ``value`` through every callback on ``hook`` and return it."""
        for _, _, callback in self._filters.get(hook, []):
            value = callback(value, *args)
        return value

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._filters.values())
