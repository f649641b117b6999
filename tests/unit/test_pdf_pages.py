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

import datetime as dt
import re
import tempfile
import unittest
from pathlib import Path

from playwright.sync_api import sync_playwright
from pypdf import PdfReader

from lxprint.render.export import export_reports
from lxprint.reports import ReportOptions
from tests.test_support import instrument, make_snapshot


def _playwright_ready() -> bool:
    try:
        with sync_playwright() as playwright:
            browser = playwright.chromium.launch()
            browser.close()
        return True
    except Exception:
        return False


_PLAYWRIGHT_READY = _playwright_ready()


def _large_plot():
    return make_snapshot(
        [
            instrument(index, address=index, universe=1 + index // 512, type="Source Four 26")
            for index in range(1, 200)
        ]
    )


class TestPdfPageCount(unittest.TestCase):
    def setUp(self) -> None:
        if not _PLAYWRIGHT_READY:
            self.skipTest("playwright not available")

    def test_patch_pages_without_cover(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            result = export_reports(
                ["patch"],
                _large_plot(),
                ReportOptions(column_count=2, include_cover=False),
                Path(tmpdir) / "patch.pdf",
            )
            reader = PdfReader(str(result.path))
            self.assertEqual(len(reader.pages), 4)

    def test_page_numbers_run_across_the_document(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            result = export_reports(
                ["patch"],
                _large_plot(),
                ReportOptions(column_count=2),
                Path(tmpdir),
                generated_on=dt.date(2026, 3, 14),
            )
            reader = PdfReader(str(result.path))
            self.assertEqual(len(reader.pages), 5)
            first = reader.pages[0].extract_text()
            last = reader.pages[-1].extract_text()

        self.assertIn("Unified Show Reports", first)
        self.assertRegex(first, re.compile(r"Page\s*1\s*of\s*5"))
        self.assertRegex(last, re.compile(r"Page\s*5\s*of\s*5"))
        self.assertIn("Made in LXLog", last)


if __name__ == "__main__":
    unittest.main()
