"""Tests for the application shell state."""

import pytest

from modules.account.shell import PAGES, AppShell


class TestAppShell:
    def test_defaults(self):
        shell = AppShell()
        assert shell.active_page == "home"
        assert shell.auth_panel_open is False

    def test_navigate(self):
        shell = AppShell()
        shell.navigate("storage")
        assert shell.active_page == "storage"

    def test_navigate_unknown_page(self):
        with pytest.raises(ValueError, match="Unknown page"):
            AppShell().navigate("checkout")

    def test_book_is_a_page(self):
        assert "book" in PAGES

    def test_listeners_notified_once_per_change(self):
        shell = AppShell()
        seen = []
        shell.subscribe(lambda s: seen.append(s.auth_panel_open))

        shell.open_auth_panel()
        shell.open_auth_panel()
        shell.close_auth_panel()

        assert seen == [True, False]

    def test_unsubscribe(self):
        shell = AppShell()
        seen = []
        unsubscribe = shell.subscribe(lambda s: seen.append(s.active_page))

        shell.navigate("about")
        unsubscribe()
        shell.navigate("contact")

        assert seen == ["about"]
