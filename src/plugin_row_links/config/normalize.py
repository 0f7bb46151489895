"""Defaulting and validation of raw link option bags.

Raw link definitions arrive as plain mappings keyed by link name.  These
helpers turn them into validated ``LinkDefinition`` / ``UtmParameters``
models once, at registration time.
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from plugin_row_links.config.models import LinkDefinition, UtmParameters

_KEY_DISALLOWED = re.compile(r"[^a-z0-9_\-]")


class InvalidConfigurationError(ValueError):
    """Raised when registration input cannot form a usable configuration."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)


def sanitize_key(raw: object) -> str:
    """Lower-case ``raw`` and strip every character outside ``[a-z0-9_-]``."""
    return _KEY_DISALLOWED.sub("", str(raw).lower())


def normalize_link_definition(key: object, raw: Any) -> LinkDefinition:
    """Build a ``LinkDefinition`` from a raw option bag.

    Missing fields take their documented defaults and unknown fields are
    ignored.  An existing ``LinkDefinition`` is accepted and re-keyed.

    Parameters
    ----------
    key:
        The link name.  Sanitised with ``sanitize_key``.
    raw:
        A mapping of link options, or a ``LinkDefinition``.

    Returns
    -------
    LinkDefinition

    Raises
    ------
    InvalidConfigurationError
        If the key sanitises to an empty string, ``raw`` is not a mapping,
        or a field value cannot be coerced to its type.
    """
    clean_key = sanitize_key(key)
    if not clean_key:
        raise InvalidConfigurationError(
            "key", f"Link key {key!r} is empty after sanitisation."
        )
    if isinstance(raw, LinkDefinition):
        return raw.model_copy(update={"key": clean_key})
    if not isinstance(raw, Mapping):
        raise InvalidConfigurationError(
            clean_key,
            f"Link {clean_key!r} must be a mapping of options, "
            f"got {type(raw).__name__}.",
        )
    options = {str(name): value for name, value in raw.items() if name != "key"}
    try:
        return LinkDefinition.model_validate({**options, "key": clean_key})
    except ValidationError as exc:
        raise InvalidConfigurationError(
            clean_key, f"Link {clean_key!r} is invalid: {exc}"
        ) from exc


def normalize_links(raw: Mapping[Any, Any] | None) -> dict[str, LinkDefinition]:
    """Normalise every definition in ``raw``, preserving insertion order.

    Two keys that sanitise to the same value collapse into one entry: the
    later definition wins and the earlier position is kept.
    """
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise InvalidConfigurationError(
            "links", f"Links must be a mapping, got {type(raw).__name__}."
        )
    processed: dict[str, LinkDefinition] = {}
    for key, options in raw.items():
        link = normalize_link_definition(key, options)
        processed[link.key] = link
    return processed


def normalize_utm_defaults(raw: Mapping[str, Any] | None = None) -> UtmParameters:
    """Shallow-merge ``raw`` over the built-in UTM defaults."""
    if raw is None:
        return UtmParameters()
    if isinstance(raw, UtmParameters):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidConfigurationError(
            "utm", f"UTM arguments must be a mapping, got {type(raw).__name__}."
        )
    return UtmParameters.model_validate(dict(raw))
