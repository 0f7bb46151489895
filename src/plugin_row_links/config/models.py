"""Link configuration domain models.

All types are Pydantic BaseModel subclasses so that loosely-typed option
bags supplied at registration time are validated once and carry their
documented defaults from then on.

Classes
-------
- LinkPosition      — enum for the two decorated link collections
- LinkDefinition    — one configured link
- UtmParameters     — UTM query parameters appended to outbound URLs
- PluginLinkConfig  — everything registered for one plugin file
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, Field, field_validator, model_validator


class LinkPosition(str, Enum):
    """Which link collection on the plugin listing row is being rendered."""

    ACTION = "action"
    ROW_META = "row_meta"


class LinkDefinition(BaseModel):
    """A single link configured for a plugin row.

    Raw option bags use the short keys shown in parentheses; the Python
    attribute names are accepted as well.  Flags accept numbers by
    truthiness and strings such as ``"yes"``/``"off"``; ``None`` is False.

    Parameters
    ----------
    key:
        Sanitised identifier, unique within its configuration.  Used as the
        key in the rendered link collection.
    is_action (``action``):
        True to render in the action-links row, False for row meta.
    label:
        Display text.  Untrusted; sanitised by the host when emitted.
    url:
        Target URL.  Untrusted; escaped by the host when emitted.
    apply_utm (``utm``):
        Append the configuration's UTM parameters to ``url``.
    open_in_new_tab (``new_tab``):
        Emit ``target="_blank"`` and ``rel="noopener noreferrer"``.
    required_capability (``capability``):
        Capability the current user must hold.  Empty means no check.
    visibility (``conditions``):
        Optional zero-argument predicate evaluated on every render.
    """

    key: str
    is_action: bool = Field(default=False, alias="action")
    label: str = ""
    url: str = ""
    apply_utm: bool = Field(default=True, alias="utm")
    open_in_new_tab: bool = Field(default=True, alias="new_tab")
    required_capability: str = Field(default="", alias="capability")
    visibility: Callable[[], bool] | None = Field(default=None, alias="conditions")

    model_config = {"frozen": True, "extra": "ignore", "populate_by_name": True}

    @field_validator("label", "url", "required_capability", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator("is_action", "apply_utm", "open_in_new_tab", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> Any:
        # Numbers follow truthiness; strings keep pydantic's "yes"/"off" parsing.
        if value is None:
            return False
        if isinstance(value, (int, float)):
            return bool(value)
        return value

    @field_validator("visibility", mode="before")
    @classmethod
    def _drop_non_callable(cls, value: Any) -> Any:
        return value if callable(value) else None

    @property
    def position(self) -> LinkPosition:
        """The collection this link belongs to."""
        return LinkPosition.ACTION if self.is_action else LinkPosition.ROW_META

    @property
    def has_content(self) -> bool:
        """True when both ``label`` and ``url`` are non-empty."""
        return bool(self.label) and bool(self.url)

    def is_visible(self) -> bool:
        """Evaluate the visibility predicate.  Never cached."""
        if self.visibility is None:
            return True
        return bool(self.visibility())


class UtmParameters(BaseModel):
    """UTM query parameters attached to outbound link URLs.

    Extra ``utm_*`` keys (``utm_content``, ``utm_term``) are kept as-is and
    rendered after the three built-in parameters.  Values are stringified.
    """

    utm_source: str = "plugins-page"
    utm_medium: str = "plugin-row"
    utm_campaign: str = "admin"

    model_config = {"frozen": True, "extra": "allow"}

    @model_validator(mode="before")
    @classmethod
    def _stringify(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {
                str(name): "" if value is None else str(value)
                for name, value in data.items()
            }
        return data

    def as_query(self) -> dict[str, str]:
        """Return the parameters as an ordered name → value mapping."""
        return dict(self.model_dump())


class PluginLinkConfig(BaseModel):
    """The links and UTM parameters registered for one plugin file.

    Instances are replaced wholesale when the same plugin is registered
    again; they are never merged.

    Parameters
    ----------
    file:
        The plugin file path exactly as supplied by the caller.
    basename:
        The host-resolved plugin identity used as the hook lookup key.
    links:
        Ordered mapping of link key to definition.
    utm:
        UTM parameters for links with ``apply_utm`` enabled.
    """

    file: str
    basename: str
    links: dict[str, LinkDefinition] = Field(default_factory=dict)
    utm: UtmParameters = Field(default_factory=UtmParameters)

    model_config = {"frozen": True}

    def links_for(self, position: LinkPosition) -> list[LinkDefinition]:
        """Return the definitions for ``position`` in configuration order."""
        return [link for link in self.links.values() if link.position is position]
