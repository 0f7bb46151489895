"""Unit tests for plugin_row_links.config.loader."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from plugin_row_links.config.loader import (
    LinkManifest,
    ManifestError,
    load_manifest,
    parse_manifest,
)
from plugin_row_links.config.normalize import InvalidConfigurationError
from plugin_row_links.host.default import DefaultHost
from plugin_row_links.registry.registry import LinkRegistry

MANIFEST_YAML = """\
utm:
  utm_campaign: spring
plugins:
  - file: my-plugin/my-plugin.php
    prefix: my_plugin
    utm:
      utm_source: docs
    links:
      settings:
        action: true
        label: Settings
        url: http://x/s
        capability: manage_options
      docs:
        label: Docs
        url: https://example.com/docs
  - file: other/other.php
"""


@pytest.fixture()
def registry() -> LinkRegistry:
    return LinkRegistry(DefaultHost({"manage_options"}, debug=False))


class TestManifestError:
    def test_is_value_error_subclass(self) -> None:
        assert isinstance(ManifestError("m.yaml", "bad"), ValueError)

    def test_message_contains_source(self) -> None:
        assert "m.yaml" in str(ManifestError("m.yaml", "bad"))


class TestParseManifest:
    def test_parses_yaml(self) -> None:
        manifest = parse_manifest(MANIFEST_YAML)
        assert isinstance(manifest, LinkManifest)
        assert [entry.file for entry in manifest.plugins] == [
            "my-plugin/my-plugin.php",
            "other/other.php",
        ]

    def test_prefix_defaults(self) -> None:
        manifest = parse_manifest(MANIFEST_YAML)
        assert manifest.plugins[1].prefix == "default"

    def test_parses_json(self) -> None:
        raw = json.dumps({"plugins": [{"file": "a/a.php"}]})
        assert parse_manifest(raw, "json").plugins[0].file == "a/a.php"

    def test_empty_document(self) -> None:
        assert parse_manifest("").plugins == []

    def test_invalid_yaml_raises(self) -> None:
        with pytest.raises(ManifestError, match="could not parse"):
            parse_manifest("plugins: [unclosed")

    def test_non_mapping_top_level_raises(self) -> None:
        with pytest.raises(ManifestError, match="mapping"):
            parse_manifest("- a\n- b\n")

    def test_empty_file_field_raises(self) -> None:
        with pytest.raises(ManifestError):
            parse_manifest("plugins:\n  - file: ''\n")


class TestLoadManifest:
    def test_load_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "links.yaml"
        path.write_text(MANIFEST_YAML)
        assert len(load_manifest(path).plugins) == 2

    def test_load_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "links.json"
        path.write_text(json.dumps({"plugins": [{"file": "a/a.php"}]}))
        assert load_manifest(str(path)).plugins[0].file == "a/a.php"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestError):
            load_manifest(tmp_path / "absent.yaml")


class TestManifestApply:
    def test_registers_entries(self, registry: LinkRegistry) -> None:
        parse_manifest(MANIFEST_YAML).apply(registry)
        assert registry.prefixes() == ["my_plugin", "default"]
        assert registry.instance("default").list_plugins() == ["other/other.php"]

    def test_utm_layering(self, registry: LinkRegistry) -> None:
        parse_manifest(MANIFEST_YAML).apply(registry)
        config = registry.instance("my_plugin").get_config("my-plugin/my-plugin.php")
        assert config is not None
        assert config.utm.utm_source == "docs"
        assert config.utm.utm_campaign == "spring"
        assert config.utm.utm_medium == "plugin-row"

    def test_rendered_through_registry(self, registry: LinkRegistry) -> None:
        parse_manifest(MANIFEST_YAML).apply(registry)
        result = registry.handle_action_links({}, "my-plugin/my-plugin.php")
        assert list(result) == ["settings"]

    def test_bad_link_key_raises(self, registry: LinkRegistry) -> None:
        manifest = parse_manifest("plugins:\n  - file: a/a.php\n    links:\n      '!!': {}\n")
        with pytest.raises(InvalidConfigurationError):
            manifest.apply(registry)
