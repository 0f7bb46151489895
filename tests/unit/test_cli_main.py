"""Unit tests for plugin_row_links.cli.main.

Uses Click's test runner (CliRunner) with manifests written to tmp_path.
"""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from plugin_row_links.cli.main import cli

MANIFEST_YAML = """\
plugins:
  - file: my-plugin/my-plugin.php
    prefix: my_plugin
    links:
      settings:
        action: true
        label: Settings
        url: http://x/s
        capability: manage_options
        new_tab: false
      docs:
        label: Docs
        url: https://example.com/docs
        utm: false
"""


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def manifest(tmp_path: Path) -> Path:
    path = tmp_path / "links.yaml"
    path.write_text(MANIFEST_YAML)
    return path


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


class TestVersion:
    def test_version_command(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["version"])
        assert result.exit_code == 0
        assert "plugin-row-links" in result.output
        assert "0.1.0" in result.output


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------


class TestCheck:
    def test_check_valid_manifest(self, runner: CliRunner, manifest: Path) -> None:
        result = runner.invoke(cli, ["check", str(manifest)])
        assert result.exit_code == 0
        assert "my_plugin" in result.output
        assert "1 plugin(s) registered" in result.output

    def test_check_invalid_manifest(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("plugins: [unclosed")
        result = runner.invoke(cli, ["check", str(path)])
        assert result.exit_code == 1
        assert "Invalid link manifest" in result.output

    def test_check_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["check", str(tmp_path / "absent.yaml")])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------


class TestRender:
    def test_render_action_json_with_capability(
        self, runner: CliRunner, manifest: Path
    ) -> None:
        result = runner.invoke(
            cli,
            [
                "render",
                str(manifest),
                "my-plugin/my-plugin.php",
                "--capability",
                "manage_options",
                "--json",
            ],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert list(data) == ["settings"]
        assert data["settings"].endswith(">Settings</a>")

    def test_render_action_without_capability(
        self, runner: CliRunner, manifest: Path
    ) -> None:
        result = runner.invoke(
            cli, ["render", str(manifest), "my-plugin/my-plugin.php", "--json"]
        )
        assert result.exit_code == 0
        assert json.loads(result.output) == {}

    def test_render_row_meta(self, runner: CliRunner, manifest: Path) -> None:
        result = runner.invoke(
            cli,
            [
                "render",
                str(manifest),
                "/srv/wp-content/plugins/my-plugin/my-plugin.php",
                "--position",
                "row_meta",
                "--json",
            ],
        )
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "docs": (
                '<a href="https://example.com/docs" target="_blank" '
                'rel="noopener noreferrer">Docs</a>'
            )
        }

    def test_render_table_output(self, runner: CliRunner, manifest: Path) -> None:
        result = runner.invoke(
            cli,
            ["render", str(manifest), "my-plugin/my-plugin.php", "--position", "row_meta"],
        )
        assert result.exit_code == 0
        assert "docs" in result.output

    def test_render_nothing_message(self, runner: CliRunner, manifest: Path) -> None:
        result = runner.invoke(cli, ["render", str(manifest), "other/other.php"])
        assert result.exit_code == 0
        assert "No action links" in result.output


class TestRenderLiteralBrackets:
    def test_label_brackets_printed_verbatim(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        path = tmp_path / "brackets.yaml"
        path.write_text(
            "plugins:\n"
            "  - file: b/b.php\n"
            "    links:\n"
            "      docs:\n"
            "        label: '[bold]Docs[/]'\n"
            "        url: http://d\n"
            "        utm: false\n"
            "        new_tab: false\n"
        )
        result = runner.invoke(
            cli, ["render", str(path), "b/b.php", "--position", "row_meta"]
        )
        assert result.exit_code == 0
        assert '<a href="http://d">[bold]Docs[/]</a>' in result.output

    def test_basename_brackets_printed_verbatim(
        self, runner: CliRunner, manifest: Path
    ) -> None:
        result = runner.invoke(cli, ["render", str(manifest), "odd[/]/x.php"])
        assert result.exit_code == 0
        assert "odd[/]/x.php" in result.output
