"""Status command for the Digital Notes CLI."""

import typer
from rich.console import Console

from digitalnotes.cli.utils import auth
from digitalnotes.utils import user_initials

app = typer.Typer(help="Check authentication status")
console = Console()


@app.callback(invoke_without_command=True)
def main():
    """Check authentication status."""
    api = auth.get_api_instance(require_login=False)
    if not api.is_logged_in:
        console.print("[yellow]Not logged in[/yellow]")
        return

    user = api.auth.user
    console.print(
        f"[green]Logged in as:[/green] [bold]{user.username or 'User'}[/bold] "
        f"({user_initials(user.username)})"
    )
    if user.email:
        console.print(f"Email: {user.email}")
    console.print(f"API: {api.api_url}")
