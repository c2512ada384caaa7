import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import render


class TestRenderCli(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.config = self.root / "docwiki.yaml"
        self.config.write_text("debug_level: WARNING\nproxy_root: /wiki\n", encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_parse_args_defaults(self) -> None:
        args = render._parse_args([])
        self.assertIsNone(args.path)
        self.assertIsNone(args.output)
        self.assertIsNone(args.config)

    def test_renders_file_to_output(self) -> None:
        page = self.root / "FrontPage.wiki"
        page.write_text("Welcome to the [FrontPage].", encoding="utf-8")
        out = self.root / "FrontPage.html"

        render.main([str(page), "-o", str(out), "--config", str(self.config)])

        self.assertEqual(
            out.read_text(encoding="utf-8"),
            '<p>\n  Welcome to the <a href="/wiki/view/FrontPage">Front Page</a>.\n</p>\n',
        )

    def test_reads_stdin_and_writes_stdout(self) -> None:
        stdout = io.StringIO()
        with mock.patch("sys.stdin", io.StringIO("*Bold*")), mock.patch("sys.stdout", stdout):
            with mock.patch.dict(os.environ, {"DOCWIKI_CONFIG": str(self.config)}):
                render.main([])

        self.assertEqual(stdout.getvalue(), "<p>\n  <b>Bold</b>\n</p>\n")


if __name__ == "__main__":
    unittest.main()
