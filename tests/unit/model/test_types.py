"""Tests for entry datatypes and exit-code schemes."""

from __future__ import annotations

import unittest

from dirlist.types import DirectoryEntryView, ExitCodeScheme, ExitStatus, FileType


class FileTypeTests(unittest.TestCase):
    def test_codes_match_raw_dirent_values(self) -> None:
        self.assertEqual(
            {member.name: int(member) for member in FileType},
            {
                "UNKNOWN": 0,
                "FIFO": 1,
                "CHAR_DEVICE": 2,
                "DIRECTORY": 4,
                "BLOCK_DEVICE": 6,
                "REGULAR_FILE": 8,
                "SYMBOLIC_LINK": 10,
                "SOCKET": 12,
                "WHITEOUT": 14,
            },
        )

    def test_entry_line_puts_type_code_before_name(self) -> None:
        entry = DirectoryEntryView(FileType.REGULAR_FILE, "a b.txt")
        self.assertEqual(entry.format_line(), "entry: 8 a b.txt")
        self.assertEqual(DirectoryEntryView(FileType.UNKNOWN, "x").format_line(), "entry: 0 x")


class ExitCodeSchemeTests(unittest.TestCase):
    def test_legacy_scheme_keeps_literal_codes(self) -> None:
        self.assertEqual(ExitCodeScheme.LEGACY.success_code(), 2)
        self.assertEqual(ExitCodeScheme.LEGACY.failure_code(), 1)
        self.assertEqual(int(ExitStatus.FOUND), 0)

    def test_conventional_scheme_succeeds_with_zero(self) -> None:
        self.assertEqual(ExitCodeScheme.CONVENTIONAL.success_code(), 0)
        self.assertEqual(ExitCodeScheme.CONVENTIONAL.failure_code(), 1)

    def test_parse_accepts_names_case_insensitively_and_rejects_others(self) -> None:
        self.assertIs(ExitCodeScheme.parse(" Conventional "), ExitCodeScheme.CONVENTIONAL)
        self.assertIs(ExitCodeScheme.parse("legacy"), ExitCodeScheme.LEGACY)
        self.assertIsNone(ExitCodeScheme.parse("posix"))
        self.assertIsNone(ExitCodeScheme.parse(2))


if __name__ == "__main__":
    unittest.main()
