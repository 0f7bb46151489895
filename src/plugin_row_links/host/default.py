"""Standard-library host environment.

``DefaultHost`` implements the ``HostEnvironment`` contract with
``html.escape`` and ``urllib.parse``.  The current user is modelled as a
fixed set of capabilities, which is what the CLI and the test suite need.

Classes
-------
- DefaultHost  — capability-set host with stdlib escaping
"""
from __future__ import annotations

import html
import os
import re
from collections.abc import Iterable, Mapping
from pathlib import PurePosixPath
from urllib.parse import unquote_plus, urlencode, urlsplit, urlunsplit

from plugin_row_links.host.base import HostEnvironment, StorefrontAdmin

DEBUG_ENV_VAR = "PLUGIN_ROW_LINKS_DEBUG"

_TRUTHY = frozenset({"1", "true", "yes", "on"})

_ALLOWED_SCHEMES: frozenset[str] = frozenset(
    {
        "http", "https", "ftp", "ftps", "mailto", "news", "irc", "gopher",
        "nntp", "feed", "telnet", "mms", "rtsp", "sms", "svn", "tel", "fax",
        "xmpp", "webcal", "urn",
    }
)

_URL_DISALLOWED = re.compile(r"[^a-zA-Z0-9\-~+_.?#=!&;,/:%@$|*'()\[\]\u0080-\uffff]")

_PLUGIN_DIR_NAMES = ("plugins", "mu-plugins")


def debug_from_env() -> bool:
    """Return True when ``PLUGIN_ROW_LINKS_DEBUG`` is set to a truthy value."""
    return os.environ.get(DEBUG_ENV_VAR, "").strip().lower() in _TRUTHY


class DefaultHost(HostEnvironment):
    """Host environment backed by the standard library.

    Parameters
    ----------
    capabilities:
        Capabilities held by the current user.
    plugins_dir:
        Directory plugin files live under.  When given, plugin identities
        are paths relative to it.
    storefront:
        Optional storefront admin URL builder.
    debug:
        Debug switch.  ``None`` reads ``PLUGIN_ROW_LINKS_DEBUG``.
    translations:
        Optional source text → translated text lookup.
    """

    def __init__(
        self,
        capabilities: Iterable[str] = (),
        *,
        plugins_dir: str | None = None,
        storefront: StorefrontAdmin | None = None,
        debug: bool | None = None,
        translations: Mapping[str, str] | None = None,
    ) -> None:
        self.capabilities: set[str] = set(capabilities)
        self.plugins_dir = plugins_dir
        self.storefront = storefront
        self.debug = debug_from_env() if debug is None else debug
        self._translations = dict(translations or {})

    def current_user_can(self, capability: str) -> bool:
        return capability in self.capabilities

    def escape_url(self, url: str) -> str:
        """Strip disallowed characters and reject unknown URL schemes."""
        cleaned = _URL_DISALLOWED.sub("", url.strip().replace(" ", "%20"))
        if not cleaned:
            return ""
        try:
            scheme = urlsplit(cleaned).scheme
        except ValueError:
            return ""
        if scheme and scheme.lower() not in _ALLOWED_SCHEMES:
            return ""
        return cleaned

    def escape_attr(self, value: str) -> str:
        return html.escape(value, quote=True)

    def sanitize_label(self, label: str) -> str:
        """Labels are emitted as text: all markup is escaped."""
        return html.escape(label, quote=False)

    def add_query_args(self, url: str, params: Mapping[str, str]) -> str:
        """Append ``params`` to ``url``.

        Existing query segments are kept verbatim, repeated names and bare
        flags included.  Segments whose name is in ``params`` are dropped.
        """
        parts = urlsplit(url)
        kept = [
            segment
            for segment in parts.query.split("&")
            if segment and unquote_plus(segment.split("=", 1)[0]) not in params
        ]
        added = urlencode(dict(params))
        query = "&".join([*kept, added] if added else kept)
        return urlunsplit(parts._replace(query=query))

    def plugin_basename(self, file: str) -> str:
        """Resolve ``file`` to ``<plugin-dir>/<main-file>`` form.

        Resolution order: relative to ``plugins_dir`` when configured and
        applicable; otherwise everything after the last ``plugins`` or
        ``mu-plugins`` path segment; otherwise the last two segments.
        """
        path = PurePosixPath(file.replace("\\", "/"))
        if self.plugins_dir:
            root = PurePosixPath(self.plugins_dir.replace("\\", "/"))
            try:
                return path.relative_to(root).as_posix()
            except ValueError:
                pass
        parts = path.parts
        for index in range(len(parts) - 2, -1, -1):
            if parts[index] in _PLUGIN_DIR_NAMES:
                return PurePosixPath(*parts[index + 1 :]).as_posix()
        return PurePosixPath(*parts[-2:]).as_posix() if parts else ""

    def translate(self, text: str, domain: str = "default") -> str:
        return self._translations.get(text, text)

    def __repr__(self) -> str:
        return (
            f"DefaultHost(capabilities={sorted(self.capabilities)!r}, "
            f"debug={self.debug!r})"
        )
