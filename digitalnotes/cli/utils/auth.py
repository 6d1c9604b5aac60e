"""Utility functions shared by the Digital Notes CLI commands."""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.panel import Panel

from digitalnotes import DigitalNotesService
from digitalnotes.base import API_URL_ENV, DEFAULT_API_URL
from digitalnotes.exceptions import (
    DigitalNotesAPIResponseException,
    DigitalNotesFailedLoginException,
    DigitalNotesNotLoggedInException,
    DigitalNotesSessionExpiredException,
    DigitalNotesValidationException,
)
from digitalnotes.services.notes.importers import ImportFormatError
from digitalnotes.utils import (
    delete_password_in_keyring,
    get_password_from_keyring,
    password_exists_in_keyring,
    store_password_in_keyring,
)

console = Console()

# State storage
config_dir = os.environ.get("DIGITALNOTES_CONFIG_DIR") or os.path.expanduser(
    "~/.config/digitalnotes"
)
Path(config_dir).mkdir(parents=True, exist_ok=True)
session_path = os.path.join(config_dir, "session.json")
config_path = os.path.join(config_dir, "config.json")

# Set by the top-level --api-url option
api_url_override: Optional[str] = None


def load_config() -> Dict[str, Any]:
    """Load configuration from file."""
    try:
        if os.path.exists(config_path):
            with open(config_path, "r", encoding="utf-8") as f:
                return json.load(f)
    except (json.JSONDecodeError, OSError) as exc:
        console.print(f"[yellow]Warning:[/yellow] Could not load config file: {exc}")
    return {}


def save_config(config: Dict[str, Any]) -> None:
    """Save configuration to file."""
    try:
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        # Ensure file has restrictive permissions
        os.chmod(config_path, 0o600)
    except OSError as exc:
        console.print(f"[yellow]Warning:[/yellow] Could not save config file: {exc}")


def resolve_api_url() -> str:
    """--api-url > DIGITALNOTES_API_URL > config file > default."""
    return (
        api_url_override
        or os.environ.get(API_URL_ENV)
        or load_config().get("api_url")
        or DEFAULT_API_URL
    )


def get_api_instance(require_login: bool = True) -> DigitalNotesService:
    """Build the client from the saved session."""
    api = DigitalNotesService(api_url=resolve_api_url(), session_path=session_path)
    if require_login and not api.is_logged_in:
        console.print("[yellow]Not logged in.[/yellow] Please login to continue.")
        console.print("Run [bold]digitalnotes auth login[/bold] first.")
        raise typer.Exit(1)
    return api


def fail(exc: Exception) -> None:
    """Print a user-facing error and stop the command."""
    if isinstance(exc, DigitalNotesSessionExpiredException):
        console.print(
            Panel(
                "Your session is no longer valid and has been cleared.\n"
                "Run `digitalnotes auth login` to sign in again.",
                title="Session expired. Please login again.",
                border_style="red",
            )
        )
    elif isinstance(exc, DigitalNotesNotLoggedInException):
        console.print(f"[yellow]{exc}[/yellow]")
    elif isinstance(exc, ImportFormatError):
        console.print(
            "[bold red]Error importing file.[/bold red] "
            f"Please check the file format. ({exc})"
        )
    else:
        console.print(f"[bold red]Error:[/bold red] {exc}")
    raise typer.Exit(1) from exc


def _get_email(provided_email: Optional[str] = None) -> str:
    """Determine the email to use for authentication."""
    email = provided_email or load_config().get("email")
    if not email:
        email = typer.prompt("Email")
    return email


def _get_password(email: str, provided_password: Optional[str] = None) -> str:
    """Get password from provided value, keyring, or prompt."""
    if provided_password:
        return provided_password

    password = get_password_from_keyring(email)
    if not password:
        password = typer.prompt("Password", hide_input=True)

    return password


def _handle_failed_login(
    email: str, failure_count: int, max_retries: int, exc: Exception
) -> None:
    """Handle failed login attempt."""
    # If stored password didn't work, delete it
    if password_exists_in_keyring(email):
        delete_password_in_keyring(email)

    if failure_count >= max_retries:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        console.print(
            Panel(
                "Please check your email and password are correct.\n"
                "No account yet? Run `digitalnotes auth signup`.",
                title="Authentication Help",
                border_style="red",
            )
        )
        raise typer.Exit(1) from exc
    else:
        console.print(
            f"[bold yellow]Warning:[/bold yellow] {exc} Attempts remaining: {max_retries - failure_count}"
        )


def login(
    email: Optional[str] = None,
    password: Optional[str] = None,
    save_password: bool = False,
    max_retries: int = 3,
) -> DigitalNotesService:
    """Log in, retrying with a fresh password prompt on bad credentials."""
    api = get_api_instance(require_login=False)
    resolved_email = _get_email(email)

    failure_count: int = 0
    current_password: Optional[str] = password

    while failure_count < max_retries:
        try:
            current_password = _get_password(resolved_email, current_password)
            api.auth.login(resolved_email, current_password)

            if save_password and not password_exists_in_keyring(resolved_email):
                store_password_in_keyring(resolved_email, current_password)

            current_password = None
            return api

        except DigitalNotesValidationException as exc:
            fail(exc)

        except DigitalNotesFailedLoginException as exc:
            failure_count += 1
            _handle_failed_login(resolved_email, failure_count, max_retries, exc)
            # Clear password to force re-prompting
            current_password = None

        except DigitalNotesAPIResponseException as exc:
            console.print(
                Panel(
                    "The Digital Notes API could not be reached or returned an\n"
                    "unexpected response. Check --api-url and try again.",
                    title="API Error",
                    border_style="red",
                )
            )
            fail(exc)

    # Should never reach here due to max_retries check
    console.print("[bold red]Error:[/bold red] Failed to authenticate")
    raise typer.Exit(1)


def forget_password(email: Optional[str]) -> None:
    """Remove the keyring password stored for ``email``."""
    if email and password_exists_in_keyring(email):
        delete_password_in_keyring(email)


__all__ = [
    "config_dir",
    "config_path",
    "fail",
    "forget_password",
    "get_api_instance",
    "load_config",
    "login",
    "resolve_api_url",
    "save_config",
    "session_path",
]
