"""Tests for the dashboard summary."""

import unittest

from digitalnotes.exceptions import DigitalNotesNotLoggedInException
from digitalnotes.session import SessionStore
from tests.helpers import FakeBackend, make_api, note_json


class DashboardServiceTest(unittest.TestCase):
    def setUp(self):
        self.backend = FakeBackend()
        patcher = self.backend.patch()
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_summary_counts(self):
        self.backend.on(
            "GET",
            "notes",
            data=[
                note_json("1", "A", folder="Important", favorite=True),
                note_json("2", "B", folder="Important"),
                note_json("3", "C", favorite=True),
                note_json("4", "D", folder="Work"),
            ],
        )
        summary = make_api().dashboard.summary()

        self.assertEqual(summary.username, "Ada Lovelace")
        self.assertEqual(summary.email, "ada@example.com")
        self.assertEqual(summary.total, 4)
        self.assertEqual(summary.important, 2)
        self.assertEqual(summary.favorites, 2)
        self.assertEqual([n.id for n in summary.recent], ["1", "2", "3"])

    def test_important_uses_resolved_folder(self):
        """A note filed under ``category`` counts like the list filter sees it."""
        self.backend.on(
            "GET",
            "notes",
            data=[
                note_json("1", "A", folder=None, category="Important"),
                note_json("2", "B", folder="Work", tag="Important"),
            ],
        )
        api = make_api()
        summary = api.dashboard.summary()
        self.assertEqual(summary.important, 1)
        self.assertEqual(len(api.notes.filtered("Important")), summary.important)

    def test_empty_list_and_default_labels(self):
        self.backend.on("GET", "notes", data=[])
        store = SessionStore()
        store.update({"token": "t", "userId": "u1"})
        summary = make_api(store).dashboard.summary()

        self.assertEqual(summary.username, "User")
        self.assertEqual(summary.email, "user@example.com")
        self.assertEqual((summary.total, summary.important, summary.favorites), (0, 0, 0))
        self.assertEqual(summary.recent, [])

    def test_requires_user_id_and_token(self):
        store = SessionStore()
        store.set("token", "t")
        with self.assertRaises(DigitalNotesNotLoggedInException) as ctx:
            make_api(store).dashboard.summary()
        self.assertEqual(str(ctx.exception), "User not logged in")
        self.assertEqual(self.backend.calls, [])


if __name__ == "__main__":
    unittest.main()
