# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

import re
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import typer
from typer.testing import CliRunner

from lxprint.cli import app
from lxprint.cli.core.common import _column_list, _report_options, _report_selection
from lxprint.config import AppConfig, ReportDefaults
from lxprint.config.installer import DEFAULT_TEMPLATE_PATH
from lxprint.reports import REPORT_IDS, ReportOptions
from tests.test_support import show_file_payload, temp_user_config, write_show_file

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")


def _strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def _fake_pdf(html_text: str, output_path, *, footer_html=None) -> None:
    Path(output_path).write_bytes(b"%PDF-1.7\n")


class TestCliApp(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.tmpdir = Path(self._tmp.name)
        user_config = temp_user_config(self.tmpdir / "xdg")
        user_config.__enter__()
        self.addCleanup(user_config.__exit__, None, None, None)
        startup = mock.patch("lxprint.cli.app.run_startup", return_value=False)
        startup.start()
        self.addCleanup(startup.stop)
        self.show_path = write_show_file(self.tmpdir, show_file_payload())

    def _invoke(self, args: list[str]):
        result = self.runner.invoke(app, args)
        return result, _strip_ansi(result.output)

    def test_root_info_commands(self) -> None:
        result, output = self._invoke(["--help"])
        self.assertEqual(result.exit_code, 0)
        for expected in ("export", "list", "preview"):
            self.assertIn(expected, output)

        result, output = self._invoke(["--version"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("lxprint", output.lower())

    def test_no_subcommand_prints_help(self) -> None:
        result, output = self._invoke([])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("export", output)

    def test_list_without_show_file(self) -> None:
        result, output = self._invoke(["list"])
        self.assertEqual(result.exit_code, 0)
        for report_id in REPORT_IDS:
            with self.subTest(report_id=report_id):
                self.assertIn(report_id, output)

    def test_list_with_show_file(self) -> None:
        result, output = self._invoke(["list", str(self.show_path)])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Into the Woods", output)
        self.assertIn("ready", output)
        self.assertIn("empty", output)

    def test_preview_patch(self) -> None:
        result, output = self._invoke(["preview", "patch", str(self.show_path), "--columns", "1"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Into the Woods: Patch", output)
        self.assertIn("P2", output)
        self.assertIn("Page 1", output)

    def test_preview_empty_report_warns(self) -> None:
        result, output = self._invoke(["preview", "cutting-list", str(self.show_path)])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("nothing to report", output)

    def test_preview_custom_columns(self) -> None:
        result, output = self._invoke(
            [
                "preview",
                "channel-hookup",
                str(self.show_path),
                "--hookup-columns",
                "frame_size, channel",
            ]
        )
        self.assertEqual(result.exit_code, 0, output)
        self.assertIn("Frame Size", output)
        self.assertIn("6.25", output)
        self.assertNotIn("Position", output)

    def test_preview_unknown_column(self) -> None:
        result, output = self._invoke(
            ["preview", "hanging-schedule", str(self.show_path), "--schedule-columns", "dimmer"]
        )
        self.assertEqual(result.exit_code, 2)
        self.assertIn("unknown column", output)

    def test_preview_target_filter(self) -> None:
        result, output = self._invoke(
            ["preview", "eos-targets", str(self.show_path), "--targets", "group"]
        )
        self.assertEqual(result.exit_code, 0, output)
        self.assertIn("Groups", output)
        result, output = self._invoke(
            ["preview", "eos-targets", str(self.show_path), "--targets", "preset"]
        )
        self.assertEqual(result.exit_code, 0, output)
        self.assertIn("nothing to report", output)

    def test_preview_unknown_report(self) -> None:
        result, output = self._invoke(["preview", "magic", str(self.show_path)])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("Error:", output)
        self.assertIn("unknown report", output)

    def test_newer_show_file_version_warns(self) -> None:
        path = write_show_file(self.tmpdir, show_file_payload(version=3), name="newer.json")
        result, output = self._invoke(["list", str(path)])
        self.assertEqual(result.exit_code, 0, output)
        self.assertIn("Warning:", output)
        self.assertIn("show file version 3", output)
        self.assertIn("Into the Woods", output)

    def test_missing_show_file(self) -> None:
        result, output = self._invoke(["list", str(self.tmpdir / "missing.json")])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("Error:", output)

    @mock.patch("lxprint.cli.commands.export.ensure_playwright_browsers")
    @mock.patch("lxprint.render.export.render_html_to_pdf", side_effect=_fake_pdf)
    def test_export_pdf(self, render_pdf: mock.MagicMock, ensure: mock.MagicMock) -> None:
        out_dir = self.tmpdir / "out"
        out_dir.mkdir()
        result, output = self._invoke(
            [
                "export",
                str(self.show_path),
                "-r",
                "channel-hookup,patch",
                "-r",
                "eos-targets",
                "-o",
                str(out_dir),
            ]
        )
        self.assertEqual(result.exit_code, 0, output)
        ensure.assert_called_once()
        self.assertTrue((out_dir / "Into_the_Woods_FullReport.pdf").is_file())
        self.assertIn("Channel Hookup", output)
        self.assertIn("EOS Targets", output)
        html_text = render_pdf.call_args.args[0]
        self.assertIn("CHANNEL HOOKUP", html_text)
        self.assertNotIn("POWER REPORT", html_text)

    @mock.patch("lxprint.cli.commands.export.ensure_playwright_browsers")
    def test_export_docx_skips_empty_reports(self, ensure: mock.MagicMock) -> None:
        target = self.tmpdir / "plot.docx"
        result, output = self._invoke(
            [
                "export",
                str(self.show_path),
                "--all",
                "--format",
                "docx",
                "--orientation",
                "portrait",
                "-o",
                str(target),
            ]
        )
        self.assertEqual(result.exit_code, 0, output)
        ensure.assert_not_called()
        self.assertTrue(target.is_file())
        self.assertIn("skipped cutting-list", output)

    def test_config_ui_quiet_hides_summary(self) -> None:
        config_path = self.tmpdir / "quiet.toml"
        config_path.write_text("[ui]\nquiet = true\n", encoding="utf-8")
        target = self.tmpdir / "quiet.docx"
        result, output = self._invoke(
            [
                "--config",
                str(config_path),
                "export",
                str(self.show_path),
                "-r",
                "power",
                "--format",
                "docx",
                "-o",
                str(target),
            ]
        )
        self.assertEqual(result.exit_code, 0, output)
        self.assertTrue(target.is_file())
        self.assertNotIn("Power Report", output)

    def test_export_rejects_report_with_all(self) -> None:
        result, _output = self._invoke(
            ["export", str(self.show_path), "--all", "-r", "patch", "--format", "docx"]
        )
        self.assertEqual(result.exit_code, 2)

    def test_export_rejects_unknown_format(self) -> None:
        result, _output = self._invoke(["export", str(self.show_path), "--format", "xlsx"])
        self.assertEqual(result.exit_code, 2)


class TestCommonHelpers(unittest.TestCase):
    def setUp(self) -> None:
        self.config = AppConfig(
            template_path=DEFAULT_TEMPLATE_PATH,
            paper_size="A4",
            report=ReportDefaults(reports=("patch", "power"), patch_columns=2),
        )

    def test_report_options_overrides(self) -> None:
        self.assertEqual(_report_options(self.config), ReportOptions(column_count=2))
        options = _report_options(
            self.config, orientation="portrait", column_count=None, include_cover=False
        )
        self.assertEqual(
            options, ReportOptions(orientation="portrait", column_count=2, include_cover=False)
        )
        with self.assertRaises(ValueError):
            _report_options(self.config, address_mode="dmx")

    def test_column_list(self) -> None:
        self.assertIsNone(_column_list(None))
        self.assertEqual(_column_list("Unit, ,channel"), ("unit", "channel"))
        options = _report_options(self.config, schedule_columns=_column_list("unit,watt"))
        self.assertEqual(options, ReportOptions(column_count=2, schedule_columns=("unit", "watt")))
        with self.assertRaises(ValueError):
            _report_options(self.config, hookup_columns=_column_list(" , "))

    def test_report_selection(self) -> None:
        self.assertEqual(
            _report_selection(None, include_all=False, config=self.config), ("patch", "power")
        )
        self.assertEqual(_report_selection([], include_all=True, config=self.config), REPORT_IDS)
        self.assertEqual(
            _report_selection(
                ["Patch, channel-hookup", "patch"], include_all=False, config=self.config
            ),
            ("patch", "channel-hookup"),
        )
        with self.assertRaises(ValueError):
            _report_selection(["nope"], include_all=False, config=self.config)
        with self.assertRaises(ValueError):
            _report_selection([" , "], include_all=False, config=self.config)
        with self.assertRaises(typer.BadParameter):
            _report_selection(["patch"], include_all=True, config=self.config)


if __name__ == "__main__":
    unittest.main()
