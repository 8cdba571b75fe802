from __future__ import annotations

import os
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from treedigest.digest.serial import digest_all_serial
from treedigest.errors import ReadError, TraversalError

from tests.helpers import SCENARIO_FILES, FailingReader, ScriptedWalker, build_tree, md5


class SerialDigestTests(unittest.TestCase):
    def setUp(self) -> None:
        tmpdir = TemporaryDirectory()
        self.addCleanup(tmpdir.cleanup)
        self.root = Path(tmpdir.name)

    def test_scenario_tree(self) -> None:
        build_tree(self.root, SCENARIO_FILES)
        self.addCleanup(os.chdir, os.getcwd())
        os.chdir(self.root)

        self.assertEqual(
            digest_all_serial("."),
            {"a.txt": md5("hello"), "b/b.txt": md5("world")},
        )

    def test_keys_include_root_prefix(self) -> None:
        build_tree(self.root, {"nested/deeper/file.bin": b"\x00\x01"})

        digests = digest_all_serial(self.root)

        self.assertEqual(digests, {str(self.root / "nested" / "deeper" / "file.bin"): md5(b"\x00\x01")})

    def test_empty_tree(self) -> None:
        (self.root / "empty").mkdir()
        self.assertEqual(digest_all_serial(self.root), {})

    def test_skips_symlinks(self) -> None:
        build_tree(self.root, {"real.txt": "data"})
        os.symlink(self.root / "real.txt", self.root / "link.txt")

        self.assertEqual(list(digest_all_serial(self.root)), [str(self.root / "real.txt")])

    def test_missing_root(self) -> None:
        with self.assertRaises(TraversalError):
            digest_all_serial(self.root / "missing")

    def test_stops_at_first_read_error(self) -> None:
        build_tree(self.root, {"a.txt": "a", "b.txt": "b", "c.txt": "c"})
        reader = FailingReader({"b.txt"})

        with self.assertRaises(ReadError):
            digest_all_serial(self.root, reader=reader)

        self.assertEqual([path.name for path in reader.calls], ["a.txt", "b.txt"])

    def test_traversal_error_discards_partial_map(self) -> None:
        build_tree(self.root, {"a.txt": "a"})
        walker = ScriptedWalker(["a.txt"], error=TraversalError("boom", path=self.root / "x"))

        with self.assertRaises(TraversalError):
            digest_all_serial(self.root, walker=walker)


if __name__ == "__main__":
    unittest.main()
