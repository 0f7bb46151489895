"""Link manifests: declarative plugin link registrations in YAML or JSON.

A manifest lists plugins and the links to register for each::

    utm:
      utm_campaign: spring
    plugins:
      - file: my-plugin/my-plugin.php
        prefix: my_plugin
        utm:
          utm_source: docs
        links:
          docs:
            label: Docs
            url: https://example.com/docs

Manifest-wide ``utm`` values are merged under each plugin's own ``utm``.
Visibility predicates cannot be expressed in a manifest.

Classes
-------
- ManifestError  — raised for unreadable or malformed manifests
- PluginEntry    — one plugin registration
- LinkManifest   — the whole document
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from plugin_row_links.registry.registry import LinkRegistry

_YAML_SUFFIXES: frozenset[str] = frozenset({".yaml", ".yml"})


class ManifestError(ValueError):
    """Raised when a link manifest cannot be read or validated."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid link manifest {source!r}: {reason}")


class PluginEntry(BaseModel):
    """One plugin registration within a manifest.

    Parameters
    ----------
    file:
        The plugin's main file path.
    prefix:
        Registry namespace.  Defaults to ``"default"``.
    links:
        Mapping of link key to raw link options.
    utm:
        UTM overrides for this plugin.
    """

    file: str = Field(min_length=1)
    prefix: str = Field(default="default", min_length=1)
    links: dict[str, dict[str, Any]] = Field(default_factory=dict)
    utm: dict[str, Any] = Field(default_factory=dict)


class LinkManifest(BaseModel):
    """A parsed link manifest."""

    utm: dict[str, Any] = Field(default_factory=dict)
    plugins: list[PluginEntry] = Field(default_factory=list)

    def apply(self, registry: LinkRegistry) -> LinkRegistry:
        """Register every plugin entry on ``registry`` and return it.

        Raises
        ------
        InvalidConfigurationError
            If an entry's links fail normalisation.
        """
        for entry in self.plugins:
            registry.register(
                entry.file,
                entry.prefix,
                entry.links,
                {**self.utm, **entry.utm},
            )
        return registry


def parse_manifest(
    raw: str,
    format: Literal["json", "yaml"] = "yaml",
    *,
    source: str = "<string>",
) -> LinkManifest:
    """Parse manifest text.

    Parameters
    ----------
    raw:
        The manifest document.
    format:
        ``"yaml"`` (default) or ``"json"``.
    source:
        Name used in error messages.

    Raises
    ------
    ManifestError
        If the text does not parse or does not match the manifest schema.
    """
    try:
        data = json.loads(raw) if format == "json" else yaml.safe_load(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ManifestError(source, f"could not parse {format}: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ManifestError(source, "top level must be a mapping")
    try:
        return LinkManifest.model_validate(data)
    except ValidationError as exc:
        raise ManifestError(source, str(exc)) from exc


def load_manifest(path: Path | str) -> LinkManifest:
    """Read and parse the manifest at ``path``.

    The format is chosen by suffix: ``.yaml``/``.yml`` for YAML, anything
    else is read as JSON.

    Raises
    ------
    ManifestError
        If the file cannot be read or parsed.
    """
    manifest_path = Path(path)
    try:
        raw = manifest_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(str(manifest_path), str(exc)) from exc
    fmt: Literal["json", "yaml"] = (
        "yaml" if manifest_path.suffix.lower() in _YAML_SUFFIXES else "json"
    )
    return parse_manifest(raw, fmt, source=str(manifest_path))
