"""Signup command for the Digital Notes CLI."""

from typing import Optional

import typer
from rich.console import Console

from digitalnotes.cli.utils import auth
from digitalnotes.exceptions import DigitalNotesException

app = typer.Typer(help="Create a Digital Notes account")
console = Console()


@app.callback(invoke_without_command=True)
def main(
    username: Optional[str] = typer.Option(None, help="Full name"),
    email: Optional[str] = typer.Option(None, help="Account email"),
    password: Optional[str] = typer.Option(None, help="Password (min 6 characters)"),
    confirm_password: Optional[str] = typer.Option(None, help="Repeat the password"),
):
    """Register a new account."""
    username = username or typer.prompt("Full name")
    email = email or typer.prompt("Email")
    if password is None:
        password = typer.prompt("Password", hide_input=True)
    if confirm_password is None:
        confirm_password = typer.prompt("Confirm password", hide_input=True)

    api = auth.get_api_instance(require_login=False)
    try:
        api.auth.register(username, email, password, confirm_password)
    except DigitalNotesException as e:
        auth.fail(e)

    console.print("[green]Signup successful![/green]")
    console.print("Run [bold]digitalnotes auth login[/bold] to sign in.")
