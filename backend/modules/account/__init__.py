"""
Account module.

Client-side state for the sign-in side panel:
- SessionMirror: follows the Supabase auth change stream and loads the profile
- AccountPanel: login / sign-up / account view controller
- AppShell: page and side panel state shared by all pages
"""

from .mirror import ProfileRequest, SessionChange, SessionMirror, SessionPhase
from .panel import AccountPanel, AuthForm, PanelView
from .shell import PAGES, AppShell

__all__ = [
    "ProfileRequest",
    "SessionChange",
    "SessionMirror",
    "SessionPhase",
    "AccountPanel",
    "AuthForm",
    "PanelView",
    "PAGES",
    "AppShell",
]
