"""Utils."""

import getpass
import logging
import re
import sys
from typing import Optional

import keyring

from .exceptions import DigitalNotesNoStoredPasswordAvailableException

KEYRING_SYSTEM = "digitalnotes://password"

LOGGER = logging.getLogger(__name__)


def get_password(username: str, interactive: bool = sys.stdout.isatty()) -> str:
    """Get the password from a username."""
    try:
        return _get_password_from_keyring(username)
    except DigitalNotesNoStoredPasswordAvailableException:
        if not interactive:
            raise

        return getpass.getpass(f"Enter Digital Notes password for {username}: ")


def password_exists_in_keyring(username: str) -> bool:
    """Return true if the password of a username exists in the keyring."""
    try:
        _get_password_from_keyring(username)
    except DigitalNotesNoStoredPasswordAvailableException:
        return False

    return True


def _get_password_from_keyring(username: str) -> str:
    result = keyring.get_password(KEYRING_SYSTEM, username)
    if result is None:
        raise DigitalNotesNoStoredPasswordAvailableException(
            f"No Digital Notes password for {username} could be found "
            "in the system keychain. Use the `--save-password` option of "
            "`digitalnotes auth login` to store one."
        )

    return result


def get_password_from_keyring(username: str) -> Optional[str]:
    """Get the password from the keyring, or None when nothing is stored."""
    try:
        return _get_password_from_keyring(username)
    except DigitalNotesNoStoredPasswordAvailableException:
        return None


def store_password_in_keyring(username: str, password: str) -> None:
    """Store the password of a username."""
    LOGGER.debug("Storing password for %s in keyring", username)
    keyring.set_password(KEYRING_SYSTEM, username, password)


def delete_password_in_keyring(username: str) -> None:
    """Delete the password of a username."""
    LOGGER.debug("Deleting password for %s from keyring", username)
    keyring.delete_password(KEYRING_SYSTEM, username)


def underscore_to_camelcase(word: str, initial_capital: bool = False) -> str:
    """Transform a word to camelCase."""
    words = [x.capitalize() or "_" for x in word.split("_")]
    if not initial_capital:
        words[0] = words[0].lower()

    return "".join(words)


def slugify_filename(title: str) -> str:
    """Replace everything outside [a-z0-9] with underscores and lowercase."""
    return re.sub(r"[^a-z0-9]", "_", title, flags=re.IGNORECASE).lower()


def user_initials(username: Optional[str]) -> str:
    """Two-letter avatar initials for a display name."""
    if not username:
        return "?"
    return "".join(part[:1] for part in username.split(" ")).upper()[:2]
