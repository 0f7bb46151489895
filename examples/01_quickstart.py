#!/usr/bin/env python3
"""Example: Quickstart — plugin-row-links

Register action and row-meta links for a plugin, then run the two listing
hooks the way the host's plugins page would.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install plugin-row-links
"""
from __future__ import annotations

import plugin_row_links
from plugin_row_links import (
    ACTION_LINKS_HOOK,
    ROW_META_HOOK,
    DefaultHost,
    FilterHooks,
    LinkRegistry,
    register_plugin_links,
)

PLUGIN = "my-plugin/my-plugin.php"


def main() -> None:
    print(f"plugin-row-links version: {plugin_row_links.__version__}")

    # Step 1: Bootstrap a registry attached to the host's hooks
    hooks = FilterHooks()
    host = DefaultHost({"manage_options"}, debug=False)
    registry = LinkRegistry(host, hooks)

    # Step 2: Register links for the plugin
    register_plugin_links(
        registry,
        PLUGIN,
        "my_plugin",
        {
            "settings": {
                "action": True,
                "label": "Settings",
                "url": "https://example.com/wp-admin/options-general.php?page=my-plugin",
                "utm": False,
                "new_tab": False,
                "capability": "manage_options",
            },
            "docs": {"label": "Documentation", "url": "https://example.com/docs"},
        },
        {"utm_campaign": "quickstart"},
        error_callback=lambda exc: print(f"Registration failed: {exc}"),
    )

    # Step 3: Render the plugin row
    actions = hooks.apply_filters(
        ACTION_LINKS_HOOK, {"deactivate": "<a>Deactivate</a>"}, PLUGIN
    )
    meta = hooks.apply_filters(ROW_META_HOOK, {"version": "Version 1.0.0"}, PLUGIN)

    print("\nAction links:")
    for key, markup in actions.items():
        print(f"  {key}: {markup}")
    print("\nRow meta:")
    for key, markup in meta.items():
        print(f"  {key}: {markup}")


if __name__ == "__main__":
    main()
