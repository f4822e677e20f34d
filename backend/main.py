"""
BagEase - terminal client for the luggage service.

Browse the site pages, sign in or sign up, book a luggage pickup and
send a message to support, all against the configured Supabase project.
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from rich.prompt import Prompt

from core.display import (
    console,
    print_booking_confirmation,
    print_feedback,
    print_field_errors,
    render_account,
    render_booking_summary,
    render_page,
)
from modules.account.mirror import SessionMirror
from modules.account.panel import AccountPanel, PanelView
from modules.account.shell import PAGES, AppShell
from modules.auth.models import AuthMode
from modules.auth.service import AuthService
from modules.bookings.controller import BookingForm
from modules.bookings.models import (
    BOOKING_FIELDS,
    DeliveryPreference,
    PaymentMode,
    ServiceTier,
    WeightCategory,
)
from modules.bookings.repository import BookingRepository
from modules.bookings.service import BookingService
from modules.contacts.controller import ContactForm
from modules.contacts.repository import ContactRepository
from modules.contacts.service import ContactService
from modules.content.loader import get_page
from modules.profiles.repository import ProfileRepository
from modules.profiles.service import ProfileService
from shared.config import get_settings
from shared.database import get_supabase_anon_client

logger = logging.getLogger(__name__)

HELP = (
    "Commands: pages, go <page>, account, login, signup, logout, book, contact, help, quit"
)

_CHOICES = {
    "delivery_preference": [p.value for p in DeliveryPreference],
    "weight_category": [w.value for w in WeightCategory],
    "service_tier": [t.value for t in ServiceTier],
    "payment_mode": [m.value for m in PaymentMode],
}
_SEAT_FIELDS = {"coach_number", "seat_number"}
_SIGNUP_FIELDS = ("full_name", "email", "password", "phone", "date_of_birth", "national_id")


async def ask(prompt: str, **kwargs) -> str:
    """Prompt without blocking the event loop, so auth events keep flowing."""
    return await asyncio.to_thread(Prompt.ask, prompt, **kwargs)


class BagEaseCli:
    """Wires the page controllers to one Supabase client and a prompt loop."""

    def __init__(self) -> None:
        settings = get_settings()
        client = get_supabase_anon_client()
        profiles = ProfileService(ProfileRepository(client))

        self.shell = AppShell()
        self.auth = AuthService(client)
        self.mirror = SessionMirror(client, profiles)
        self.panel = AccountPanel(self.auth, self.mirror, self.shell, settings)
        self.booking = BookingForm(
            BookingService(BookingRepository(client), settings),
            self.auth.get_current_user_id,
            self.shell,
            settings,
        )
        self.contact = ContactForm(ContactService(ContactRepository(client)))
        self._shown_page: Optional[str] = None
        self.shell.subscribe(self._on_shell_change)

    async def run(self) -> None:
        await self.mirror.start()
        try:
            console.print("[bold]BagEase[/bold] - Travel Hassle-Free Across India")
            console.print(f"[dim]{HELP}[/dim]")
            self._show_page("home")
            while True:
                command = (await ask("[bold cyan]bagease[/bold cyan]")).strip()
                if command in ("quit", "exit"):
                    break
                await self.dispatch(command)
        finally:
            await self.mirror.stop()

    async def dispatch(self, command: str) -> None:
        name, _, arg = command.partition(" ")
        if name == "help" or not name:
            console.print(HELP)
        elif name == "pages":
            console.print(", ".join(PAGES))
        elif name == "go":
            try:
                self.shell.navigate(arg.strip())
            except ValueError as e:
                console.print(f"[red]Error:[/red] {e}")
                return
            if self.shell.active_page == "book":
                await self.booking_flow()
        elif name == "account":
            await self.mirror.wait_idle()
            console.print(render_account(self.panel))
            print_feedback(self.panel.account_notice)
        elif name == "login":
            await self.auth_flow(AuthMode.LOGIN)
        elif name == "signup":
            await self.auth_flow(AuthMode.SIGNUP)
        elif name == "logout":
            if await self.panel.sign_out():
                console.print("[green]Signed out.[/green]")
            print_feedback(self.panel.feedback)
        elif name == "book":
            self.shell.navigate("book")
            await self.booking_flow()
        elif name == "contact":
            await self.contact_flow()
        else:
            console.print(f"[red]Unknown command:[/red] {name}")

    async def auth_flow(self, mode: AuthMode) -> None:
        self.shell.open_auth_panel()
        if self.panel.view == PanelView.ACCOUNT:
            console.print("[yellow]Already signed in.[/yellow]")
            return
        if self.panel.mode != mode:
            self.panel.toggle_mode()

        fields = ("email", "password") if mode == AuthMode.LOGIN else _SIGNUP_FIELDS
        for field in fields:
            value = await ask(field.replace("_", " ").title(), password=field == "password", default="")
            self.panel.update_field(field, value)

        accepted = await self.panel.submit()
        print_field_errors(self.panel.field_errors)
        print_feedback(self.panel.feedback)
        if accepted:
            await self.mirror.wait_idle()
            console.print(render_account(self.panel))
            self.panel.close()
        elif self.panel.mode != mode:
            console.print(f"[dim]Switched to {self.panel.mode.value}. Run '{self.panel.mode.value}' to continue.[/dim]")

    async def booking_flow(self) -> None:
        for field in BOOKING_FIELDS:
            if field in _SEAT_FIELDS and not self.booking.draft.needs_seat_details:
                continue
            current = getattr(self.booking.draft, field)
            value = await ask(
                field.replace("_", " ").title(),
                choices=_CHOICES.get(field),
                default=current or None,
            )
            self.booking.set_field(field, value or "")

        console.print(render_booking_summary(self.booking))
        booking = await self.booking.submit()
        print_field_errors(self.booking.errors)
        print_feedback(self.booking.feedback)
        if booking is not None:
            print_booking_confirmation(booking)
            await self.booking.wait_overlay()
        elif self.shell.auth_panel_open:
            console.print("[dim]Run 'login' or 'signup', then 'book' again.[/dim]")

    async def contact_flow(self) -> None:
        for field in ("name", "email", "subject", "message"):
            self.contact.set_field(field, await ask(field.title(), default=""))
        await self.contact.submit()
        print_field_errors(self.contact.errors)
        print_feedback(self.contact.feedback)

    def _show_page(self, slug: str) -> None:
        self._shown_page = slug
        console.print(render_page(get_page(slug)))

    def _on_shell_change(self, shell: AppShell) -> None:
        if shell.active_page != self._shown_page and shell.active_page != "book":
            self._show_page(shell.active_page)


def main() -> None:
    parser = argparse.ArgumentParser(description="BagEase terminal client")
    parser.add_argument(
        "--log-level",
        help="Logging level (default: LOG_LEVEL setting)",
    )
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        cli = BagEaseCli()
    except RuntimeError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    try:
        asyncio.run(cli.run())
    except KeyboardInterrupt:
        console.print("\n[dim]Bye.[/dim]")


if __name__ == "__main__":
    main()
