"""Unit tests for plugin_row_links.host.hooks."""
from __future__ import annotations

import logging

import pytest

from plugin_row_links.host.hooks import ACTION_LINKS_HOOK, FilterHooks


@pytest.fixture()
def hooks() -> FilterHooks:
    return FilterHooks()


class TestFilterHooks:
    def test_no_callbacks_returns_value(self, hooks: FilterHooks) -> None:
        assert hooks.apply_filters("missing", {"a": "1"}) == {"a": "1"}

    def test_callback_receives_extra_args(self, hooks: FilterHooks) -> None:
        seen: list[tuple[object, ...]] = []

        def callback(value: dict[str, str], *args: object) -> dict[str, str]:
            seen.append(args)
            return value

        hooks.add_filter(ACTION_LINKS_HOOK, callback)
        hooks.apply_filters(ACTION_LINKS_HOOK, {}, "p/p.php", {"Name": "P"}, "all")
        assert seen == [("p/p.php", {"Name": "P"}, "all")]

    def test_chained_in_priority_order(self, hooks: FilterHooks) -> None:
        hooks.add_filter("h", lambda value: value + ["late"], 20)
        hooks.add_filter("h", lambda value: value + ["early"], 5)
        hooks.add_filter("h", lambda value: value + ["default"])
        assert hooks.apply_filters("h", []) == ["early", "default", "late"]

    def test_same_priority_keeps_registration_order(self, hooks: FilterHooks) -> None:
        hooks.add_filter("h", lambda value: value + ["first"])
        hooks.add_filter("h", lambda value: value + ["second"])
        assert hooks.apply_filters("h", []) == ["first", "second"]

    def test_has_filter(self, hooks: FilterHooks) -> None:
        def callback(value: object) -> object:
            return value

        assert hooks.has_filter("h", callback) is False
        hooks.add_filter("h", callback)
        assert hooks.has_filter("h", callback) is True

    def test_len_counts_all_callbacks(self, hooks: FilterHooks) -> None:
        hooks.add_filter("a", lambda value: value)
        hooks.add_filter("b", lambda value: value)
        assert len(hooks) == 2

    def test_add_filter_logs_debug(
        self, hooks: FilterHooks, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG):
            hooks.add_filter(ACTION_LINKS_HOOK, lambda value: value)
        assert any(ACTION_LINKS_HOOK in r.message for r in caplog.records)
