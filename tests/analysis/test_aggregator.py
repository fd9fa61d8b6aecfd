"""Tests for building change sets from name-status listings."""

import tempfile
import unittest
from pathlib import Path

from commit_predictor.analysis.aggregator import (
    build_from_listing,
    build_from_paths,
    parse_name_status,
)
from commit_predictor.analysis.change_set import ChangedFile, FileStatus
from commit_predictor.detection.framework_detector import FrameworkDetector


class TestParseNameStatus(unittest.TestCase):
    def test_parses_statuses(self):
        listing = "M\tsrc/a.py\nA\tb.py\nD\told/c.py\n"
        self.assertEqual(
            parse_name_status(listing),
            [
                ChangedFile("src/a.py", FileStatus.MODIFIED),
                ChangedFile("b.py", FileStatus.ADDED),
                ChangedFile("old/c.py", FileStatus.DELETED),
            ],
        )

    def test_rename_uses_new_path(self):
        files = parse_name_status("R100\tsrc/old_name.py\tsrc/new_name.py\n")
        self.assertEqual(files, [ChangedFile("src/new_name.py", FileStatus.MODIFIED)])

    def test_other_codes_count_as_modified(self):
        files = parse_name_status("C075\ta.py\tb.py\nT\tlink\n")
        self.assertEqual([f.status for f in files], [FileStatus.MODIFIED, FileStatus.MODIFIED])

    def test_skips_blank_and_malformed_lines(self):
        listing = "\n   \nX\nD\t\nM\tkeep.py\n"
        self.assertEqual(parse_name_status(listing), [ChangedFile("keep.py", FileStatus.MODIFIED)])

    def test_empty_listing(self):
        self.assertEqual(parse_name_status(""), [])


class TestBuildChangeSet(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        # An empty directory keeps manifest detection out of the picture.
        self.detector = FrameworkDetector(Path(self._tmp.name))

    def tearDown(self):
        self._tmp.cleanup()

    def test_laravel_listing(self):
        listing = (
            "A\tdatabase/migrations/2024_01_01_create_users_table.php\n"
            "A\tapp/Models/User.php\n"
            "M\tapp/Http/Controllers/UserController.php\n"
            "D\tREADME.md\n"
        )
        change_set = build_from_listing(listing, self.detector)

        self.assertEqual(len(change_set.files), 4)
        self.assertEqual((change_set.added, change_set.modified, change_set.deleted), (2, 1, 1))
        self.assertEqual(change_set.categories, {"migration", "code", "docs"})
        self.assertEqual(change_set.languages, {"php", "markdown"})
        self.assertEqual(list(change_set.specific_scopes), ["migrations", "models", "controllers"])
        self.assertEqual(change_set.specific_scopes["migrations"].statuses, {FileStatus.ADDED})
        self.assertEqual(change_set.specific_scopes["controllers"].count, 1)
        self.assertEqual(change_set.change_context, {})

    def test_scope_counts_and_statuses_accumulate(self):
        listing = (
            "A\tsrc/components/Button.jsx\n"
            "M\tsrc/components/Modal.jsx\n"
            "M\tsrc/hooks/useAuth.js\n"
        )
        change_set = build_from_listing(listing, self.detector)
        components = change_set.specific_scopes["components"]
        self.assertEqual(components.count, 2)
        self.assertEqual(components.statuses, {FileStatus.ADDED, FileStatus.MODIFIED})
        self.assertEqual(change_set.specific_scopes["hooks"].count, 1)
        self.assertEqual(change_set.languages, {"javascript"})

    def test_scopes_from_several_frameworks(self):
        listing = "M\tsrc/components/Button.jsx\nM\tblog/views.py\n"
        change_set = build_from_listing(listing, self.detector)
        self.assertEqual(set(change_set.specific_scopes), {"components", "views"})
        self.assertEqual(change_set.languages, {"javascript", "python"})

    def test_unclassified_paths_record_no_scope(self):
        change_set = build_from_listing("M\tnotes.xyz\n", self.detector)
        self.assertEqual(change_set.specific_scopes, {})
        self.assertEqual(change_set.languages, set())
        self.assertEqual(change_set.categories, {"code"})

    def test_paths_property_keeps_listing_order(self):
        change_set = build_from_listing("M\tb.py\nA\ta.py\n", self.detector)
        self.assertEqual(change_set.paths, ["b.py", "a.py"])

    def test_build_from_paths_marks_everything_modified(self):
        change_set = build_from_paths(["src/a.py", "tests/test_a.py"], self.detector)
        self.assertEqual((change_set.added, change_set.modified, change_set.deleted), (0, 2, 0))
        self.assertTrue(all(f.status is FileStatus.MODIFIED for f in change_set.files))
        self.assertEqual(change_set.categories, {"code", "test"})

    def test_manifest_framework_drives_scopes(self):
        root = Path(self._tmp.name)
        (root / "composer.json").write_text('{"require": {"laravel/framework": "^10.0"}}')
        detector = FrameworkDetector(root)
        # The path alone would classify as React; the manifest says Laravel.
        change_set = build_from_listing("M\tsrc/components/Button.jsx\nM\ttests/Feature/UserTest.php\n", detector)
        self.assertEqual(list(change_set.specific_scopes), ["tests"])


if __name__ == "__main__":
    unittest.main()
