"""Tests for the notes list filters."""

import unittest

from digitalnotes.services.notes import Note
from digitalnotes.services.notes.filtering import filter_notes


def _note(ident, title, folder="Personal", favorite=False):
    return Note(id=ident, title=title, content="", folder=folder, favorite=favorite)


class FilterNotesTest(unittest.TestCase):
    def setUp(self):
        self.notes = [
            _note("1", "Groceries"),
            _note("2", "Standup notes", folder="Work", favorite=True),
            _note("3", "Tax deadline", folder="Important"),
            _note("4", "grocery budget", folder="Work"),
        ]

    def ids(self, **kwargs):
        return [n.id for n in filter_notes(self.notes, **kwargs)]

    def test_all_keeps_everything_in_order(self):
        self.assertEqual(self.ids(), ["1", "2", "3", "4"])

    def test_folder(self):
        self.assertEqual(self.ids(folder="Work"), ["2", "4"])
        self.assertEqual(self.ids(folder="Important"), ["3"])

    def test_favorites_ignores_folder(self):
        self.assertEqual(self.ids(folder="Favorites"), ["2"])

    def test_search_is_case_insensitive_on_title(self):
        """Only the title is searched."""
        self.assertEqual(self.ids(query="GROC"), ["1", "4"])
        self.assertEqual(self.ids(query="body"), [])

    def test_folder_and_search_combine(self):
        self.assertEqual(self.ids(folder="Work", query="groc"), ["4"])

    def test_result_is_subset(self):
        """Every filtered note comes from the input."""
        for folder in ("All", "Personal", "Work", "Important", "Favorites"):
            for query in ("", "a", "zzz"):
                with self.subTest(folder=folder, query=query):
                    result = filter_notes(self.notes, folder=folder, query=query)
                    self.assertTrue(all(n in self.notes for n in result))


if __name__ == "__main__":
    unittest.main()
