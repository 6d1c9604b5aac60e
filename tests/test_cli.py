"""Tests for the command line interface."""

import json
import logging
import os
import tempfile
import unittest
from unittest import mock

import speech_recognition as sr
from typer.testing import CliRunner

from digitalnotes.cli.commands.notes.compose import ComposeShell
from digitalnotes.cli.main import app
from digitalnotes.cli.utils import auth as auth_utils
from digitalnotes.services.notes.dictation import Dictation
from digitalnotes.session import SessionStore
from tests.helpers import API_URL, FakeBackend, make_api, note_json


class CliTestCase(unittest.TestCase):
    """Runs commands against a temporary config dir and a fake API."""

    def setUp(self):
        self.runner = CliRunner()
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.session_path = os.path.join(self.tmp.name, "session.json")
        self.config_path = os.path.join(self.tmp.name, "config.json")

        patches = [
            mock.patch.object(auth_utils, "session_path", self.session_path),
            mock.patch.object(auth_utils, "config_path", self.config_path),
            mock.patch.object(auth_utils, "get_password_from_keyring", return_value=None),
            mock.patch.object(auth_utils, "password_exists_in_keyring", return_value=False),
            mock.patch.object(auth_utils, "store_password_in_keyring"),
            mock.patch.object(auth_utils, "delete_password_in_keyring"),
        ]
        self.backend = FakeBackend()
        patches.append(self.backend.patch())
        for patcher in patches:
            patcher.start()
            self.addCleanup(patcher.stop)

        self.backend.on(
            "GET",
            "notes",
            data=[
                note_json("n1", "Groceries"),
                note_json("n2", "Standup", folder="Work", favorite=True),
            ],
        )

    def log_in(self):
        SessionStore(self.session_path).update(
            {
                "token": "tok-123",
                "userId": "u1",
                "username": "Ada Lovelace",
                "email": "ada@example.com",
            }
        )

    def session(self):
        return SessionStore(self.session_path)

    def invoke(self, *args, **kwargs):
        return self.runner.invoke(app, ["--api-url", API_URL, *args], **kwargs)


class AuthCommandsTest(CliTestCase):
    def test_status_not_logged_in(self):
        result = self.invoke("auth", "status")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Not logged in", result.output)

    def test_login_then_status(self):
        self.backend.on(
            "POST",
            "auth/login",
            data={
                "token": "tok-9",
                "user": {"_id": "u1", "username": "Ada Lovelace", "email": "ada@example.com"},
            },
        )
        result = self.invoke(
            "auth", "login", "--email", "ada@example.com", "--password", "secret1"
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Successfully logged in", result.output)
        self.assertEqual(self.session().token, "tok-9")

        result = self.invoke("auth", "status")
        self.assertIn("Ada Lovelace", result.output)
        self.assertIn("(AL)", result.output)

    def test_login_gives_up_after_retries(self):
        self.backend.on(
            "POST", "auth/login", status=400, data={"error": "Invalid credentials"}
        )
        result = self.invoke(
            "auth",
            "login",
            "--email",
            "ada@example.com",
            "--password",
            "bad1",
            input="bad2\nbad3\n",
        )
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Authentication Help", result.output)
        self.assertEqual(self.backend.paths().count("POST auth/login"), 3)
        self.assertIsNone(self.session().token)

    def test_login_save_config(self):
        self.backend.on(
            "POST",
            "auth/login",
            data={"token": "tok-9", "user": {"_id": "u1", "email": "ada@example.com"}},
        )
        self.invoke(
            "auth",
            "login",
            "--email",
            "ada@example.com",
            "--password",
            "secret1",
            "--save-config",
        )
        with open(self.config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
        self.assertEqual(config, {"email": "ada@example.com", "api_url": API_URL})

    def test_signup(self):
        self.backend.on("POST", "auth/register", status=201, data={"ok": True})
        result = self.invoke(
            "auth",
            "signup",
            "--username",
            "Ada",
            "--email",
            "ada@example.com",
            "--password",
            "secret1",
            "--confirm-password",
            "secret1",
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Signup successful", result.output)

    def test_logout(self):
        self.log_in()
        result = self.invoke("auth", "logout")
        self.assertIn("Logged out successfully", result.output)
        self.assertIsNone(self.session().token)
        self.assertIsNone(self.session().email)

        result = self.invoke("auth", "logout")
        self.assertIn("No active session", result.output)


class NotesCommandsTest(CliTestCase):
    def test_requires_login(self):
        result = self.invoke("notes", "list")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Not logged in", result.output)
        self.assertEqual(self.backend.calls, [])

    def test_list_and_filter(self):
        self.log_in()
        result = self.invoke("notes", "list")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Groceries", result.output)
        self.assertIn("Standup", result.output)

        result = self.invoke("notes", "list", "--folder", "Work")
        self.assertNotIn("Groceries", result.output)
        self.assertIn("Standup", result.output)

    def test_list_search_messages(self):
        self.log_in()
        result = self.invoke("notes", "list", "--search", "groc")
        self.assertIn("Found 1 note matching", result.output)

        result = self.invoke("notes", "list", "--search", "zzz")
        self.assertIn("No notes found matching", result.output)

    def test_list_rejects_unknown_folder(self):
        self.log_in()
        result = self.invoke("notes", "list", "--folder", "Archive")
        self.assertEqual(result.exit_code, 1)

    def test_session_expiry_clears_session(self):
        self.log_in()
        self.backend.on("GET", "notes", status=401, data={"message": "jwt expired"})
        result = self.invoke("notes", "list")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Session expired", result.output)
        self.assertIsNone(self.session().token)
        self.assertIsNone(self.session().username)

    def test_new(self):
        self.log_in()
        self.backend.on(
            "POST", "notes", status=201, data=note_json("n3", "Trip", folder="Work")
        )
        result = self.invoke(
            "notes", "new", "--title", "Trip", "--body", "Pack", "--folder", "Work"
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Note saved successfully", result.output)
        self.assertEqual(self.backend.paths(), ["POST notes"])
        self.assertEqual(self.backend.calls[0].json["note"], "Pack")

    def test_new_requires_body(self):
        self.log_in()
        result = self.invoke("notes", "new", "--title", "Trip")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Please enter both title", result.output)
        self.assertEqual(self.backend.calls, [])

    def test_edit(self):
        self.log_in()
        self.backend.on("PUT", "notes/n1", data=note_json("n1", "Groceries!"))
        result = self.invoke("notes", "edit", "n1", "--title", "Groceries!")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Note updated successfully", result.output)
        self.assertEqual(self.backend.paths(), ["GET notes", "PUT notes/n1"])

    def test_favorite(self):
        self.log_in()
        self.backend.on(
            "PUT", "notes/n1", data=note_json("n1", "Groceries", favorite=True)
        )
        result = self.invoke("notes", "favorite", "n1")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Added", result.output)
        self.assertTrue(self.backend.calls[-1].json["favorite"])

    def test_delete(self):
        self.log_in()
        self.backend.on("DELETE", "notes/n1", data={"message": "deleted"})
        result = self.invoke("notes", "delete", "n1", "--force")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("DELETE notes/n1", self.backend.paths())

    def test_delete_cancelled(self):
        self.log_in()
        result = self.invoke("notes", "delete", "n1", input="n\n")
        self.assertIn("Deletion cancelled", result.output)
        self.assertEqual(self.backend.calls, [])

    def test_export_filtered(self):
        self.log_in()
        out = os.path.join(self.tmp.name, "exports")
        result = self.invoke("notes", "export", "--folder", "Work", "--output-dir", out)
        self.assertEqual(result.exit_code, 0, result.output)

        (name,) = os.listdir(out)
        self.assertTrue(name.startswith("notes_export_"))
        with open(os.path.join(out, name), "r", encoding="utf-8") as f:
            self.assertEqual([n["title"] for n in json.load(f)], ["Standup"])

    def test_export_single(self):
        self.log_in()
        out = os.path.join(self.tmp.name, "exports")
        self.invoke("notes", "export", "n1", "--output-dir", out)
        self.assertEqual(os.listdir(out), ["groceries.json"])

    def test_share(self):
        self.log_in()
        result = self.invoke("notes", "share", "n1")
        self.assertIn("mailto:?body=Groceries%20body", result.output)

    def test_options_after_note_id(self):
        """Options may follow the note ID."""
        self.log_in()
        result = self.invoke("notes", "show", "n1", "--plain")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Groceries\nGroceries body\n", result.output)

        self.backend.on("DELETE", "notes/n1", data={"message": "deleted"})
        result = self.invoke("notes", "delete", "n1", "-f")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("DELETE notes/n1", self.backend.paths())

    def test_export_rejects_unknown_folder(self):
        self.log_in()
        out = os.path.join(self.tmp.name, "exports")
        result = self.invoke("notes", "export", "--folder", "Wrok", "--output-dir", out)
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Unknown folder", result.output)
        self.assertFalse(os.path.exists(out))
        self.assertEqual(self.backend.calls, [])

    def test_new_from_bad_file(self):
        """A malformed import aborts with the import message and no request."""
        self.log_in()
        path = os.path.join(self.tmp.name, "n.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump({"title": "A", "content": "B", "folder": 7}, f)
        result = self.invoke("notes", "new", "--from-file", path)
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error importing file", result.output)
        self.assertEqual(self.backend.calls, [])


class VerboseOptionTest(CliTestCase):
    def setUp(self):
        super().setUp()
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level

        def restore():
            root.handlers[:] = handlers
            root.setLevel(level)

        self.addCleanup(restore)

    def test_verbose_applies_on_every_invocation(self):
        self.invoke("auth", "status")
        self.assertEqual(logging.getLogger().level, logging.WARNING)

        self.invoke("--verbose", "auth", "status")
        self.assertEqual(logging.getLogger().level, logging.DEBUG)


class DashboardCommandTest(CliTestCase):
    def test_dashboard(self):
        self.log_in()
        result = self.invoke("dashboard")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Welcome back", result.output)
        self.assertIn("Total Notes", result.output)


class ComposeShellTest(unittest.TestCase):
    """Drives the interactive editor without a terminal."""

    def setUp(self):
        self.api = make_api()
        self.backend = FakeBackend()
        patcher = self.backend.patch()
        patcher.start()
        self.addCleanup(patcher.stop)
        self.shell = ComposeShell(self.api.editor())

    def test_edit_undo_and_save(self):
        self.backend.on("POST", "notes", status=201, data=note_json("n5", "Trip"))
        for line in ("title Trip", "body Pack", "append Book hotel", "undo"):
            self.shell.handle(line)
        self.assertEqual(self.shell.editor.body, "Pack")

        self.shell.handle("save")
        self.assertEqual(self.backend.paths(), ["POST notes"])
        self.assertEqual(self.shell.editor.note_id, "n5")

    def test_errors_do_not_stop_the_shell(self):
        self.shell.handle("folder Nowhere")
        self.shell.handle("import missing.md")
        self.shell.handle("bogus")
        self.assertTrue(self.shell.running)
        self.assertEqual(self.shell.editor.folder, "Personal")

    def test_quit(self):
        self.shell.handle("quit")
        self.assertFalse(self.shell.running)

    def test_bad_import_values_keep_shell_usable(self):
        """A wrongly typed folder is refused at import, so save never sees it."""
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "n.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump({"title": "A", "content": "B", "folder": 7}, f)
            self.shell.handle(f"import {path}")
        self.assertEqual(self.shell.editor.title, "")

        self.shell.handle("save")
        self.assertTrue(self.shell.running)
        self.assertEqual(self.backend.calls, [])

    def test_dictate_without_input_device(self):
        class UnopenedSource(sr.AudioSource):
            def __init__(self):
                self.stream = None

            def __enter__(self):
                return self

            def __exit__(self, exc_type, exc_value, traceback):
                return False

        shell = ComposeShell(
            self.api.editor(),
            Dictation(recognizer=sr.Recognizer(), source_factory=UnopenedSource),
        )
        shell.handle("dictate")
        self.assertTrue(shell.running)
        self.assertEqual(shell.editor.body, "")


if __name__ == "__main__":
    unittest.main()
