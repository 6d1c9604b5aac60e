"""Login command for the Digital Notes CLI."""

from typing import Optional

import typer
from rich.console import Console

from digitalnotes.cli.utils import auth

app = typer.Typer(help="Login to Digital Notes")
console = Console()


@app.callback(invoke_without_command=True)
def main(
    email: Optional[str] = typer.Option(None, help="Account email"),
    password: Optional[str] = typer.Option(None, help="Account password"),
    save_password: bool = typer.Option(
        False, help="Store the password in the system keyring"
    ),
    save_config: bool = typer.Option(
        False, help="Save email and API URL to the config file"
    ),
):
    """Login to Digital Notes."""
    api = auth.login(email, password, save_password=save_password)

    if save_config:
        config = auth.load_config()
        config["email"] = api.store.email or email
        config["api_url"] = api.api_url
        auth.save_config(config)

    console.print(f"Successfully logged in as [bold]{api.account_name}[/bold]")
