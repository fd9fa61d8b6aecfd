import os
import tempfile
import unittest
from pathlib import Path

from commit_predictor.vcs.filesystem import recent_files


NOW = 1_700_000_000.0


class TestRecentFiles(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def touch(self, relative, minutes_ago):
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("x\n")
        stamp = NOW - minutes_ago * 60
        os.utime(path, (stamp, stamp))
        return path

    def test_newest_first_within_window(self):
        self.touch("src/old.py", 45)
        self.touch("src/a.py", 10)
        self.touch("src/b.py", 2)
        self.touch("README.md", 20)
        self.assertEqual(recent_files(self.root, now=NOW), ["src/b.py", "src/a.py", "README.md"])

    def test_limit_and_window(self):
        for i in range(5):
            self.touch(f"f{i}.py", i)
        self.assertEqual(recent_files(self.root, limit=2, now=NOW), ["f0.py", "f1.py"])
        self.assertEqual(recent_files(self.root, window_minutes=2, now=NOW), ["f0.py", "f1.py", "f2.py"])

    def test_ties_sorted_by_path(self):
        self.touch("b.py", 1)
        self.touch("a.py", 1)
        self.assertEqual(recent_files(self.root, now=NOW), ["a.py", "b.py"])

    def test_ignored_directories(self):
        self.touch(".git/index", 1)
        self.touch("node_modules/pkg/index.js", 1)
        self.touch("pkg/__pycache__/mod.cpython-312.pyc", 1)
        self.touch(".venv/lib/site.py", 1)
        self.touch("vendor/autoload.php", 1)
        self.touch("app/main.py", 1)
        self.assertEqual(recent_files(self.root, now=NOW), ["app/main.py"])

    def test_empty_directory(self):
        self.assertEqual(recent_files(self.root, now=NOW), [])


if __name__ == "__main__":
    unittest.main()
