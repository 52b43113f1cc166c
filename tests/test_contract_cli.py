from __future__ import annotations

import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch

from chronologizer import cli


def _run(argv: list[str]) -> str:
    buf = io.StringIO()
    with redirect_stdout(buf), redirect_stderr(io.StringIO()):
        cli.main(argv)
    return buf.getvalue().strip()


class TestCliContract(unittest.TestCase):
    def test_default_out_is_build_relative_to_cwd(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            tmp = Path(td)
            old_cwd = Path.cwd()
            try:
                os.chdir(tmp)
                printed = _run(["--no-open", "--entry", "1066", "1087", "William I"])
            finally:
                os.chdir(old_cwd)

            out = tmp / "build" / "chronologizer_timeline.html"
            self.assertTrue(out.exists())
            self.assertEqual(Path(printed).resolve(), out.resolve())
            html = out.read_text(encoding="utf-8")
            self.assertIn(">William I<", html)
            self.assertIn(">1066<", html)

    def test_entries_title_and_width(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "nested" / "t.html"
            _run([
                "--no-open",
                "--out", str(out),
                "--title", "Antiquity",
                "--width", "1400",
                "--entry", "428 BC", "348 BC", "Plato",
                "--entry", "-500", "-500",
            ])
            html = out.read_text(encoding="utf-8")
            self.assertIn("<title>Antiquity</title>", html)
            self.assertIn('width="1400"', html)
            self.assertIn(">428 BCE<", html)
            self.assertIn(">500 BCE - 500 BCE<", html)

    def test_negative_iso_dates_are_entry_values(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "t.html"
            _run([
                "--no-open",
                "--out", str(out),
                "--entry", "-0044-03-15", "-0044-03-15", "Ides of March",
                "--entry", "-0509-01-01", "-0027-01-16",
            ])
            html = out.read_text(encoding="utf-8")
            self.assertIn(">Mar 15, 44 BCE<", html)
            self.assertIn(">Ides of March<", html)
            self.assertIn(">509 BCE - Jan 16, 27 BCE<", html)

        with self.assertRaises(SystemExit) as ctx:
            cli.main(["--no-open", "--entry", "-0044-02-30", "-0044-03-15"])
        self.assertIn("Invalid --entry #1 (-0044-02-30 -0044-03-15)", str(ctx.exception))

    def test_width_from_env(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "t.html"
            with patch.dict(os.environ, {"CHRONOLOGIZER_WIDTH": "1300"}):
                _run(["--no-open", "--out", str(out), "--entry", "1", "2"])
            self.assertIn('width="1300"', out.read_text(encoding="utf-8"))

    def test_invalid_entries_report_user_errors(self) -> None:
        cases = [
            (["--entry", "1066", "whenever"], "Invalid --entry #1"),
            (["--entry", "1087", "1066"], "Start date cannot be after end date"),
            (["--entry", "1", "2", "--entry", "1066"], "Invalid --entry #2"),
            (["--entry", "1", "2", "three", "four"], "expected START END [LABEL]"),
        ]
        with tempfile.TemporaryDirectory() as td:
            for argv, needle in cases:
                with self.subTest(argv=argv):
                    with self.assertRaises(SystemExit) as ctx:
                        cli.main(["--no-open", "--out", str(Path(td) / "x.html")] + argv)
                    self.assertIn(needle, str(ctx.exception))
                    self.assertFalse((Path(td) / "x.html").exists())

    def test_invalid_configuration_reports_user_error(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            cli.main(["--no-open", "--width", "100"])
        self.assertIn("Invalid configuration", str(ctx.exception))

        with patch.dict(os.environ, {"CHRONOLOGIZER_WIDTH": "wide"}):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["--no-open"])
        self.assertIn("CHRONOLOGIZER_WIDTH", str(ctx.exception))

    def test_opens_browser_unless_disabled(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "t.html"
            with patch("chronologizer.cli.webbrowser.open") as wb:
                _run(["--out", str(out), "--entry", "1", "2"])
            wb.assert_called_once()
            self.assertTrue(wb.call_args.args[0].startswith("file://"))

    def test_default_out_falls_back_when_unwritable(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            home = Path(td) / "home"
            home.mkdir(parents=True, exist_ok=True)

            blocked_dir = Path("/home/build")
            blocked_out = str(blocked_dir / "chronologizer_timeline.html")

            orig_mkdir = Path.mkdir

            def fake_mkdir(self, *args, **kwargs):  # type: ignore[no-untyped-def]
                if self == blocked_dir:
                    raise PermissionError(13, "Permission denied", str(self))
                return orig_mkdir(self, *args, **kwargs)

            with patch.dict(os.environ, {"HOME": str(home)}), patch(
                "chronologizer.cli.os.path.abspath", return_value=blocked_out
            ), patch("pathlib.Path.mkdir", new=fake_mkdir):
                _run(["--no-open", "--entry", "1066", "1087"])

            self.assertTrue((home / ".chronologizer" / "build" / "chronologizer_timeline.html").exists())


if __name__ == "__main__":
    unittest.main(verbosity=2)
