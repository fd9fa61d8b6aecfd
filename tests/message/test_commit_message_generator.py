"""Tests for message assembly, validation and smart suggestions."""

import unittest

from commit_predictor.message.commit_message_generator import (
    CommitMessageGenerator,
    CommitTypeError,
    alternative_suggestions,
    assemble_message,
    default_description,
    validate_message,
)
from commit_predictor.prediction.models import Alternative, CommitType, Prediction


class DummyEngine:
    def __init__(self, prediction=None):
        self.prediction = prediction
        self.calls = 0

    def analyze_changes(self):
        self.calls += 1
        return self.prediction


class TestAssembleMessage(unittest.TestCase):
    def test_headers(self):
        test_cases = [
            (("feat", "auth", "add login"), "feat(auth): add login"),
            (("fix", None, "handle empty input"), "fix: handle empty input"),
            (("fix", "   ", "handle empty input"), "fix: handle empty input"),
            ((CommitType.DOCS, "api", "  describe paging  "), "docs(api): describe paging"),
            (("docs", "api", ""), "docs(api): update api documentation"),
            (("chore", None, None), "chore: update component configuration"),
            (("perf", None, None), "perf: add component functionality"),
        ]
        for args, expected in test_cases:
            with self.subTest(args=args):
                self.assertEqual(assemble_message(*args), expected)

    def test_breaking_change_footer(self):
        message = assemble_message("feat", "api", "drop v1 endpoints", is_breaking=True)
        self.assertEqual(message, "feat(api): drop v1 endpoints\n\nBREAKING CHANGE: ")

    def test_invalid_type(self):
        with self.assertRaises(CommitTypeError):
            assemble_message("feature", "api", "x")

    def test_default_description(self):
        self.assertEqual(default_description("test", "api"), "add api test coverage")
        self.assertEqual(default_description(CommitType.CI), "add component functionality")
        with self.assertRaises(CommitTypeError):
            default_description("oops")


class TestValidateMessage(unittest.TestCase):
    def test_valid_messages(self):
        for message in (
            "feat(auth): add login",
            "feat: add login",
            "fix(api/v2): handle timeouts",
            "refactor(core.utils-x): tidy up",
            "feat(user auth): add login",
            "fix: handle timeouts\n\nLonger body text that may be as long as it likes to be.",
        ):
            with self.subTest(message=message):
                result = validate_message(message)
                self.assertTrue(result.is_valid)
                self.assertEqual(result.errors, [])

    def test_bad_format(self):
        for message in ("added stuff", "feature: add login", "feat(a(b)): x", "feat:missing space", "feat(): x"):
            with self.subTest(message=message):
                result = validate_message(message)
                self.assertFalse(result.is_valid)
                self.assertEqual(result.errors, ["Message does not follow conventional commit format"])

    def test_long_subject(self):
        result = validate_message("feat: " + "a" * 80)
        self.assertFalse(result.is_valid)
        self.assertEqual(result.errors, ["First line should be 72 characters or less"])

    def test_custom_subject_limit(self):
        self.assertTrue(validate_message("feat: short", max_subject_length=20).is_valid)
        result = validate_message("feat: a bit longer than twenty", max_subject_length=20)
        self.assertEqual(result.errors, ["First line should be 20 characters or less"])

    def test_empty_message(self):
        result = validate_message("")
        self.assertFalse(result.is_valid)
        self.assertEqual(
            result.errors,
            ["Message does not follow conventional commit format", "Commit message cannot be empty"],
        )

    def test_assembled_scopes_share_the_validator_grammar(self):
        for scope in ("user auth", "api@v2", "db:users", "src"):
            with self.subTest(scope=scope):
                message = assemble_message("feat", scope, "add login")
                self.assertEqual(message, f"feat({scope}): add login")
                self.assertTrue(validate_message(message).is_valid)

    def test_assembled_messages_validate(self):
        for commit_type in CommitType:
            with self.subTest(type=commit_type.value):
                self.assertTrue(validate_message(assemble_message(commit_type, "api", None, True)).is_valid)


class TestAlternatives(unittest.TestCase):
    def test_feat_offers_fix(self):
        prediction = Prediction(type=CommitType.FEAT, scope="auth", description="add auth", confidence=0.9)
        self.assertEqual(
            alternative_suggestions(prediction),
            [
                Alternative(
                    type=CommitType.FIX,
                    description="resolve auth issue",
                    reason="If this fixes a bug rather than adds features",
                )
            ],
        )

    def test_refactor_offers_perf(self):
        prediction = Prediction(type=CommitType.REFACTOR, scope=None, description="tidy", confidence=0.6)
        alternatives = alternative_suggestions(prediction)
        self.assertEqual(len(alternatives), 1)
        self.assertEqual(alternatives[0].type, CommitType.PERF)
        self.assertEqual(alternatives[0].description, "optimize component performance")

    def test_other_types_have_none(self):
        prediction = Prediction(type=CommitType.DOCS, scope="api", description="x", confidence=0.6)
        self.assertEqual(alternative_suggestions(prediction), [])


class TestCommitMessageGenerator(unittest.TestCase):
    def test_generate_smart_commit(self):
        prediction = Prediction(
            type=CommitType.FEAT,
            scope="models",
            description="create component model",
            confidence=0.95,
            language="php",
            framework="laravel",
        )
        generator = CommitMessageGenerator(DummyEngine(prediction))
        result = generator.generate_smart_commit()

        self.assertEqual(result.message, "feat(models): create component model")
        self.assertIs(result.prediction, prediction)
        self.assertEqual([alt.type for alt in result.alternatives], [CommitType.FIX])

    def test_generate_smart_commit_without_changes(self):
        engine = DummyEngine(None)
        self.assertIsNone(CommitMessageGenerator(engine).generate_smart_commit())
        self.assertEqual(engine.calls, 1)

    def test_generate_commit_message(self):
        generator = CommitMessageGenerator(DummyEngine())
        self.assertEqual(generator.generate_commit_message("fix", "ui", "align buttons"), "fix(ui): align buttons")

    def test_validate_uses_configured_limit(self):
        generator = CommitMessageGenerator(DummyEngine(), max_subject_length=10)
        result = generator.validate_commit_message("feat: too long for ten")
        self.assertFalse(result.is_valid)
        self.assertEqual(result.errors, ["First line should be 10 characters or less"])

    def test_commit_types(self):
        types = CommitMessageGenerator.commit_types()
        self.assertEqual(len(types), 11)
        self.assertEqual(types[0], ("feat", "feat" + " " * 6 + " - A new feature"))
        self.assertEqual([value for value, _ in types], [t.value for t in CommitType])

    def test_commit_type_keeps_str_methods(self):
        self.assertEqual(CommitType.FIX.description, "A bug fix")
        self.assertEqual(CommitType.FIX.title(), "Fix")

    def test_suggest_scopes(self):
        self.assertEqual(CommitMessageGenerator.suggest_scopes(), ["auth", "api", "ui", "database", "config"])
        self.assertEqual(
            CommitMessageGenerator.suggest_scopes("a"),
            ["auth", "api", "database", "validation", "middleware"],
        )
        self.assertEqual(CommitMessageGenerator.suggest_scopes("CON"), ["config", "controllers"])
        self.assertEqual(CommitMessageGenerator.suggest_scopes("zzz"), [])
        self.assertEqual(len(CommitMessageGenerator.suggest_scopes("", limit=3)), 3)


if __name__ == "__main__":
    unittest.main()
