"""CLI entry point for plugin-row-links.

Invoked as::

    plugin-row-links [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m plugin_row_links.cli.main

Commands
--------
- version  — Show version information
- check    — Validate a link manifest and list its registrations
- render   — Render the links one plugin row would show
"""
from __future__ import annotations

import json
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from plugin_row_links.config.loader import LinkManifest, ManifestError, load_manifest
from plugin_row_links.config.models import LinkPosition
from plugin_row_links.config.normalize import InvalidConfigurationError
from plugin_row_links.host.default import DefaultHost
from plugin_row_links.registry.registry import LinkRegistry

console = Console()


def _build_registry(
    manifest_path: str,
    capabilities: tuple[str, ...] = (),
    plugins_dir: str | None = None,
) -> tuple[LinkManifest, LinkRegistry]:
    """Load ``manifest_path`` and register it on a fresh registry.

    Exits with status 1 and a red message if the manifest is invalid.
    """
    try:
        manifest = load_manifest(manifest_path)
        registry = manifest.apply(
            LinkRegistry(DefaultHost(capabilities, plugins_dir=plugins_dir))
        )
    except (ManifestError, InvalidConfigurationError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        sys.exit(1)
    return manifest, registry


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="plugin-row-links")
def cli() -> None:
    """Action links and row meta for plugin listing pages"""


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from plugin_row_links import __version__

    console.print(f"[bold]plugin-row-links[/bold] v{__version__}")


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.argument("manifest_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--plugins-dir", default=None, help="Directory plugin files live under.")
def check_command(manifest_path: str, plugins_dir: str | None) -> None:
    """Validate MANIFEST_PATH and list the plugins it registers."""
    _, registry = _build_registry(manifest_path, plugins_dir=plugins_dir)

    table = Table(title="Registered plugin links")
    table.add_column("Prefix", style="cyan")
    table.add_column("Plugin", style="green")
    table.add_column("Action", justify="right")
    table.add_column("Row meta", justify="right")

    total = 0
    for prefix in registry.prefixes():
        plugin_links = registry.instance(prefix)
        for basename in plugin_links.list_plugins():
            config = plugin_links.get_config(basename)
            if config is None:
                continue
            table.add_row(
                prefix,
                basename,
                str(len(config.links_for(LinkPosition.ACTION))),
                str(len(config.links_for(LinkPosition.ROW_META))),
            )
            total += 1

    console.print(table)
    console.print(f"[green]OK[/green] {total} plugin(s) registered.")


# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------


@cli.command(name="render")
@click.argument("manifest_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("plugin_file")
@click.option(
    "--position",
    default=LinkPosition.ACTION.value,
    show_default=True,
    type=click.Choice([position.value for position in LinkPosition], case_sensitive=False),
    help="Link collection to render.",
)
@click.option(
    "--capability",
    "capabilities",
    multiple=True,
    help="Capability held by the simulated user (repeatable).",
)
@click.option("--plugins-dir", default=None, help="Directory plugin files live under.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Output as JSON.")
def render_command(
    manifest_path: str,
    plugin_file: str,
    position: str,
    capabilities: tuple[str, ...],
    plugins_dir: str | None,
    as_json: bool,
) -> None:
    """Render the links PLUGIN_FILE would show on the plugins page."""
    _, registry = _build_registry(manifest_path, capabilities, plugins_dir)
    basename = registry.host.plugin_basename(plugin_file)

    if LinkPosition(position.lower()) is LinkPosition.ACTION:
        links = registry.handle_action_links({}, basename)
    else:
        links = registry.handle_row_meta({}, basename)

    if as_json:
        click.echo(json.dumps(links, indent=2))
        return

    if not links:
        console.print(
            Panel(
                f"No {position} links for [bold]{escape(basename)}[/bold].",
                title="plugin-row-links",
                border_style="yellow",
            )
        )
        return

    table = Table(title=f"{escape(basename)} ({position})")
    table.add_column("Key", style="cyan")
    table.add_column("Markup")
    for key, markup in links.items():
        table.add_row(escape(key), escape(markup))
    console.print(table)


if __name__ == "__main__":
    cli()
