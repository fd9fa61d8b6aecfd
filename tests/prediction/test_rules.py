"""Tests for the framework and generic commit type cascades."""

import tempfile
import unittest
from pathlib import Path

from commit_predictor.analysis.aggregator import build_from_listing
from commit_predictor.analysis.change_set import ChangedFile, ChangeSet, FileStatus
from commit_predictor.detection.framework_detector import FrameworkDetector
from commit_predictor.prediction.models import CommitType
from commit_predictor.prediction.rules import (
    DEFAULT_TYPE,
    framework_commit_type,
    generic_commit_type,
    predict_commit_type,
)


def make_change_set(added=0, modified=0, deleted=0, categories=(), change_context=None):
    files = (
        [ChangedFile(f"added_{i}.py", FileStatus.ADDED) for i in range(added)]
        + [ChangedFile(f"modified_{i}.py", FileStatus.MODIFIED) for i in range(modified)]
        + [ChangedFile(f"deleted_{i}.py", FileStatus.DELETED) for i in range(deleted)]
    )
    return ChangeSet(
        files=files,
        added=added,
        modified=modified,
        deleted=deleted,
        categories=set(categories),
        change_context=dict(change_context or {}),
    )


class TestFrameworkRules(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.detector = FrameworkDetector(Path(self._tmp.name))

    def tearDown(self):
        self._tmp.cleanup()

    def changes(self, listing):
        return build_from_listing(listing, self.detector)

    def test_laravel_migrations(self):
        added = self.changes("A\tdatabase/migrations/2024_create_users.php\n")
        modified = self.changes("M\tdatabase/migrations/2024_create_users.php\n")
        self.assertEqual(framework_commit_type(added, "laravel"), CommitType.FEAT)
        self.assertEqual(framework_commit_type(modified, "laravel"), CommitType.REFACTOR)

    def test_deleted_only_scope_falls_through(self):
        deleted = self.changes("D\tdatabase/migrations/2024_create_users.php\n")
        self.assertIsNone(framework_commit_type(deleted, "laravel"))
        self.assertEqual(predict_commit_type(deleted, "laravel"), CommitType.REFACTOR)

    def test_scopes_walked_in_declaration_order(self):
        # "seeds" is seen first but "controllers" is declared first.
        changes = self.changes(
            "A\tdatabase/seeders/UserSeeder.php\n"
            "M\tapp/Http/Controllers/UserController.php\n"
        )
        self.assertEqual(framework_commit_type(changes, "laravel"), CommitType.FIX)

    def test_code_scope_size_matters(self):
        small = self.changes("M\tapp/Models/User.php\n")
        large = self.changes("M\tapp/Models/User.php\nM\tapp/Models/Post.php\nM\tapp/Models/Tag.php\n")
        self.assertEqual(framework_commit_type(small, "laravel"), CommitType.FIX)
        self.assertEqual(framework_commit_type(large, "laravel"), CommitType.REFACTOR)

    def test_laravel_seeds(self):
        self.assertEqual(
            framework_commit_type(self.changes("M\tdatabase/seeders/UserSeeder.php\n"), "laravel"),
            CommitType.CHORE,
        )

    def test_react_scopes(self):
        test_cases = [
            ("A\tsrc/components/Button.jsx\n", CommitType.FEAT),
            ("M\tsrc/hooks/useAuth.js\n", CommitType.REFACTOR),
            ("A\tsrc/store/cart.js\n", CommitType.FEAT),
            ("M\tsrc/styles/main.css\n", CommitType.STYLE),
        ]
        for listing, expected in test_cases:
            with self.subTest(listing=listing):
                self.assertEqual(framework_commit_type(self.changes(listing), "react"), expected)

    def test_react_scope_without_rules_falls_through(self):
        self.assertIsNone(framework_commit_type(self.changes("M\tsrc/pages/Home.jsx\n"), "react"))

    def test_django_tests(self):
        self.assertEqual(framework_commit_type(self.changes("A\tshop/tests.py\n"), "django"), CommitType.TEST)
        self.assertEqual(framework_commit_type(self.changes("M\tshop/tests.py\n"), "django"), CommitType.FIX)

    def test_framework_without_rules_uses_generic_cascade(self):
        changes = self.changes("A\tsrc/components/Foo.vue\n")
        self.assertIn("components", changes.specific_scopes)
        self.assertIsNone(framework_commit_type(changes, "vue"))
        self.assertEqual(predict_commit_type(changes, "vue"), CommitType.FEAT)

    def test_no_framework(self):
        self.assertIsNone(framework_commit_type(make_change_set(added=1), None))


class TestGenericRules(unittest.TestCase):
    def test_cascade(self):
        test_cases = [
            ("mostly deletions", make_change_set(added=1, deleted=3), CommitType.REFACTOR),
            ("mostly additions", make_change_set(added=3, modified=1), CommitType.FEAT),
            ("small fix", make_change_set(modified=1, change_context={"modified_0.py": "fix"}), CommitType.FIX),
            ("small edit", make_change_set(modified=2), CommitType.REFACTOR),
            ("tests", make_change_set(modified=4, categories={"test", "code"}), CommitType.TEST),
            ("docs", make_change_set(modified=4, categories={"docs"}), CommitType.DOCS),
            ("styles", make_change_set(modified=4, categories={"style"}), CommitType.STYLE),
            ("config", make_change_set(modified=4, categories={"config"}), CommitType.CHORE),
            ("new migration", make_change_set(added=1, modified=4, categories={"migration"}), CommitType.FEAT),
            ("changed migration", make_change_set(modified=4, categories={"migration"}), CommitType.REFACTOR),
            ("new seed", make_change_set(added=1, modified=4, categories={"seed"}), CommitType.FEAT),
            ("changed seed", make_change_set(modified=4, categories={"seed"}), CommitType.CHORE),
        ]
        for label, changes, expected in test_cases:
            with self.subTest(case=label):
                self.assertEqual(generic_commit_type(changes), expected)

    def test_earlier_categories_win(self):
        changes = make_change_set(modified=4, categories={"docs", "test", "config"})
        self.assertEqual(generic_commit_type(changes), CommitType.TEST)

    def test_default(self):
        self.assertEqual(generic_commit_type(ChangeSet()), DEFAULT_TYPE)
        self.assertEqual(generic_commit_type(make_change_set(modified=4, categories={"code"})), CommitType.REFACTOR)


if __name__ == "__main__":
    unittest.main()
