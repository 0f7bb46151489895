"""Abstract host environment consumed by the registry and link processor.

The plugin listing page belongs to the host application.  Everything this
package needs from it (permission checks, escaping, query-string building,
translation) is reached through a ``HostEnvironment``.

Classes
-------
- StorefrontAdmin  — optional storefront-extension admin URL builder
- HostEnvironment  — abstract base for host collaborators
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping


class StorefrontAdmin(ABC):
    """Builds admin URLs for an installed storefront extension framework."""

    @abstractmethod
    def admin_url(self, query: Mapping[str, str]) -> str:
        """Return the absolute admin URL for ``query``.

        Parameters
        ----------
        query:
            Query parameters such as ``page``, ``tab`` and ``section``.
        """


class HostEnvironment(ABC):
    """Collaborators supplied by the host application.

    Implementations are expected to be synchronous and free of side
    effects from this package's point of view.  Exceptions they raise are
    not caught by the registry or the processor.
    """

    #: Optional storefront integration.  ``None`` when not installed.
    storefront: StorefrontAdmin | None = None

    #: Mirrors the host's global debug switch.
    debug: bool = False

    @abstractmethod
    def current_user_can(self, capability: str) -> bool:
        """Return True if the current user holds ``capability``."""

    @abstractmethod
    def escape_url(self, url: str) -> str:
        """Return ``url`` cleaned for use as an ``href``.

        May return an empty string for URLs the host refuses to emit.
        The result is not HTML-encoded; ``escape_attr`` is applied after.
        """

    @abstractmethod
    def escape_attr(self, value: str) -> str:
        """Return ``value`` encoded for a double-quoted HTML attribute."""

    @abstractmethod
    def sanitize_label(self, label: str) -> str:
        """Return ``label`` made safe for use as anchor inner HTML."""

    @abstractmethod
    def add_query_args(self, url: str, params: Mapping[str, str]) -> str:
        """Merge ``params`` into the query string of ``url``.

        Existing parameters are preserved; parameters in ``params`` replace
        same-named ones.
        """

    @abstractmethod
    def plugin_basename(self, file: str) -> str:
        """Return the plugin identity used by the listing hooks for ``file``."""

    def translate(self, text: str, domain: str = "default") -> str:
        """Return the localised form of ``text``.  Defaults to identity."""
        return text
