"""Rich terminal rendering for the BagEase command-line client."""

from typing import Optional

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from modules.account.mirror import SessionMirror
from modules.account.panel import AccountPanel, PanelView
from modules.auth.models import AuthMode
from modules.bookings.controller import BookingForm
from modules.bookings.models import Booking
from modules.content.models import Page
from shared.models import Feedback, FeedbackKind

console = Console()

_FEEDBACK_STYLES = {
    FeedbackKind.ERROR: "red",
    FeedbackKind.INFO: "yellow",
    FeedbackKind.SUCCESS: "green",
}


def format_field_name(name: str) -> str:
    """Format a form field name for display.

    Example: "pickup_address" -> "Pickup Address"
    """
    return name.replace("_", " ").title()


def format_rupees(amount) -> str:
    return f"₹{amount:,.2f}"


def print_feedback(feedback: Optional[Feedback]) -> None:
    if feedback is None:
        return
    style = _FEEDBACK_STYLES[feedback.kind]
    console.print(f"[{style}]{feedback.text}[/{style}]")


def print_field_errors(errors: dict[str, str]) -> None:
    for field, message in errors.items():
        console.print(f"  [red]{format_field_name(field)}:[/red] {message}")


def render_page(page: Page) -> Panel:
    """Build a panel with a page's sections, rates and call to action."""
    parts = []
    if page.subtitle:
        parts.append(Text(page.subtitle, style="italic"))

    for section in page.sections:
        parts.append(Text(f"\n{section.heading}", style="bold cyan"))
        if section.body:
            parts.append(Text(section.body))
        for item in section.items:
            parts.append(Text(f"  • {item}"))

    if page.storage_rates:
        table = Table(title="Storage Rates")
        table.add_column("Size", style="cyan")
        table.add_column("Per Hour", justify="right")
        table.add_column("Suitable For")
        for rate in page.storage_rates:
            table.add_row(rate.size, format_rupees(rate.price_per_hour), ", ".join(rate.examples))
        parts.append(table)

    if page.cta is not None:
        target = page.cta.page or page.cta.action
        parts.append(Text(f"\n[{page.cta.label}] -> {target}", style="bold green"))

    return Panel(Group(*parts), title=page.title, border_style="blue")


def render_account(panel: AccountPanel) -> Panel:
    """Build the auth side panel for its current view."""
    mirror: SessionMirror = panel.mirror
    view = panel.view

    if view == PanelView.LOADING:
        body = Text("Loading...", style="dim")
    elif view == PanelView.ACCOUNT:
        table = Table(show_header=False, box=None)
        table.add_column(style="bold")
        table.add_column()
        user = mirror.user
        profile = mirror.profile
        table.add_row("Email", user.email if user else "")
        if mirror.profile_loading:
            table.add_row("Profile", "[dim]loading...[/dim]")
        elif profile is not None:
            table.add_row("Name", profile.full_name or "")
            table.add_row("Phone", profile.phone or "")
            table.add_row("Date of Birth", str(profile.date_of_birth or ""))
            table.add_row("National ID", profile.masked_national_id or "")
        body = table
    else:
        title = "Log In" if panel.mode == AuthMode.LOGIN else "Sign Up"
        body = Text(f"{title} (type 'login' or 'signup')")

    return Panel(body, title="Account", border_style="magenta")


def render_booking_summary(form: BookingForm) -> Table:
    """Summarize the draft and the live cost estimate."""
    table = Table(title="Booking")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for name, value in form.draft.model_dump().items():
        if value:
            table.add_row(format_field_name(name), str(value))
    estimate = format_rupees(form.estimate) if form.estimate is not None else "-"
    table.add_row("[bold]Estimated Cost[/bold]", f"[bold]{estimate}[/bold]")
    return table


def print_booking_confirmation(booking: Booking) -> None:
    console.print(
        Panel(
            f"Booking [bold]{booking.id}[/bold] is {booking.status}.\n"
            f"Estimated cost: {format_rupees(booking.estimated_cost)}",
            title="Booking successful",
            border_style="green",
        )
    )
