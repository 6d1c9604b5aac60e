"""Logout command for the Digital Notes CLI."""

import typer
from rich.console import Console

from digitalnotes.cli.utils import auth

app = typer.Typer(help="Logout from Digital Notes")
console = Console()


@app.callback(invoke_without_command=True)
def main(
    forget_password: bool = typer.Option(
        False, help="Also remove the password stored in the keyring"
    ),
):
    """Clear the session token and cached user details."""
    api = auth.get_api_instance(require_login=False)
    email = api.store.email
    if not api.is_logged_in:
        console.print("No active session found or already logged out")
        return

    try:
        api.auth.logout()
        if forget_password:
            auth.forget_password(email)
    except OSError as exc:
        console.print(
            f"[bold red]Error:[/bold red] Could not completely remove session data: {exc}"
        )
        raise typer.Exit(1) from exc

    console.print("[green]Logged out successfully[/green]")
