"""
Application shell state.

The one piece of state shared across pages: which page is showing and
whether the auth side panel is open. Pages that need a signed-in user hold
a reference to the shell and ask it to open the panel.
"""

import logging
from typing import Callable

logger = logging.getLogger(__name__)

PAGES = ("home", "about", "services", "storage", "pickup", "delivery", "contact", "book")

ShellListener = Callable[["AppShell"], None]


class AppShell:
    """Top-level navigation and side panel state."""

    def __init__(self, active_page: str = "home"):
        self.active_page = active_page
        self.auth_panel_open = False
        self._listeners: list[ShellListener] = []

    def subscribe(self, listener: ShellListener) -> Callable[[], None]:
        """Register a change listener. Returns a function that removes it."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def navigate(self, page: str) -> None:
        if page not in PAGES:
            raise ValueError(f"Unknown page: {page}")
        self.active_page = page
        self._notify()

    def open_auth_panel(self) -> None:
        if not self.auth_panel_open:
            logger.debug("Auth panel opened")
            self.auth_panel_open = True
            self._notify()

    def close_auth_panel(self) -> None:
        if self.auth_panel_open:
            self.auth_panel_open = False
            self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
