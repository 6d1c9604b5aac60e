"""Command modules for the Digital Notes CLI."""

# Import all command modules here for easy access
from digitalnotes.cli.commands import auth, dashboard, notes

# Explicitly define what's exported
__all__ = ["auth", "dashboard", "notes"]
