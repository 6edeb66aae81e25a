"""End-to-end tests for ``present_entries``."""

from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from trelist.aliases import AliasEnvironment
from trelist.colors import ColorChoice
from trelist.entry import FormattedEntry
from trelist.listing import present_entries


class PresentEntriesTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        patcher = mock.patch("trelist.config.CONFIG_PATH", self.tmp / "config.json")
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def test_without_aliases_only_prints(self) -> None:
        out = io.StringIO()
        env = AliasEnvironment(user="ada", tmp_root=str(self.tmp))
        present_entries(
            [FormattedEntry(prefix="", name="a", path="/a")],
            environment=env,
            stream=out,
            color_choice=ColorChoice.NEVER,
        )
        self.assertEqual(out.getvalue(), "a\n")
        self.assertFalse((self.tmp / "tre_aliases_ada").exists())

    def test_with_aliases_prints_handles_and_writes_file(self) -> None:
        out = io.StringIO()
        env = AliasEnvironment(user="ada", tmp_root=str(self.tmp))
        entries = [
            FormattedEntry(prefix="", name="a", path="/a"),
            FormattedEntry(prefix="└── ", name="b", path="/a/b"),
        ]
        present_entries(entries, create_alias=True, editor="vim", environment=env, stream=out)
        self.assertEqual(out.getvalue(), "[0] a\n└── [1] b\n")
        content = (self.tmp / "tre_aliases_ada").read_text(encoding="utf-8")
        self.assertEqual(
            content,
            "alias e0=\"eval 'vim \\\"/a\\\"'\"\nalias e1=\"eval 'vim \\\"/a/b\\\"'\"\n",
        )

    def test_alias_failure_does_not_raise(self) -> None:
        out, err = io.StringIO(), io.StringIO()
        env = AliasEnvironment(user="ada", tmp_root=str(self.tmp / "nope"))
        present_entries(
            [FormattedEntry(prefix="", name="a", path="/a")],
            create_alias=True,
            editor="",
            environment=env,
            stream=out,
            stderr=err,
        )
        self.assertEqual(out.getvalue(), "[0] a\n")
        self.assertTrue(err.getvalue().startswith("[tre] failed to open "))


if __name__ == "__main__":
    unittest.main()
