"""Dashboard command for the Digital Notes CLI."""

import typer
from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel

from digitalnotes.cli.utils import auth
from digitalnotes.cli.utils.render import notes_table
from digitalnotes.exceptions import DigitalNotesException
from digitalnotes.utils import user_initials

app = typer.Typer(help="Show note statistics")
console = Console()


@app.callback(invoke_without_command=True)
def main():
    """Show the dashboard."""
    api = auth.get_api_instance()

    try:
        summary = api.dashboard.summary()
    except DigitalNotesException as e:
        console.print("Failed to load dashboard data. Please try again.")
        auth.fail(e)

    console.print(
        f"Welcome back, [bold]{summary.username}[/bold] "
        f"({user_initials(summary.username)})"
    )
    console.print(summary.email)
    console.print(
        Columns(
            [
                Panel(str(summary.total), title="Total Notes"),
                Panel(str(summary.important), title="Important Notes"),
                Panel(str(summary.favorites), title="Favorite Notes"),
            ]
        )
    )
    if summary.recent:
        console.print("[bold]Recent notes[/bold]")
        console.print(notes_table(summary.recent))
