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

import unittest

from lxprint.reports import (
    REPORT_IDS,
    ReportOptions,
    assemble,
    assemble_combined,
    available_reports,
    flatten,
    get_report,
    row_count,
)
from lxprint.reports.assembler import COMBINED_COVER_TITLE
from lxprint.reports.columns import DEFAULT_CHANNEL_HOOKUP_COLUMNS, DEFAULT_HANGING_SCHEDULE_COLUMNS
from lxprint.reports.types import (
    ChannelHookupContent,
    CoverModel,
    CuttingList,
    HangingScheduleContent,
    PatchContent,
    TargetListContent,
)
from tests.test_support import instrument, make_snapshot, sample_snapshot


class TestRegistry(unittest.TestCase):
    def test_report_ids_in_print_order(self) -> None:
        self.assertEqual(
            REPORT_IDS,
            (
                "channel-hookup",
                "hanging-schedule",
                "patch",
                "equipment-list",
                "cutting-list",
                "power",
                "eos-targets",
            ),
        )

    def test_get_report_normalizes_and_rejects_unknown(self) -> None:
        self.assertEqual(get_report(" Patch ").report_id, "patch")
        with self.assertRaises(ValueError) as ctx:
            get_report("magic-sheet")
        self.assertIn("unknown report", str(ctx.exception))

    def test_only_patch_is_paginated(self) -> None:
        paginated = [report_id for report_id in REPORT_IDS if get_report(report_id).paginated]
        self.assertEqual(paginated, ["patch"])


class TestOptions(unittest.TestCase):
    def test_validate_rejects_bad_values(self) -> None:
        cases = (
            ({"column_count": 0}, "column_count"),
            ({"column_count": True}, "column_count"),
            ({"orientation": "sideways"}, "orientation"),
            ({"address_mode": "dmx"}, "address_mode"),
            ({"channel_display_mode": "stars"}, "channel_display_mode"),
            ({"cutting_list_by": "size"}, "cutting_list_by"),
            ({"target_filter": "macro"}, "target_filter"),
            ({"hookup_columns": ("channel", "dimmer")}, "hookup_columns"),
            ({"hookup_columns": ("channel", "channel")}, "hookup_columns"),
            ({"schedule_columns": ()}, "schedule_columns"),
            ({"schedule_columns": ("position",)}, "schedule_columns"),
        )
        for overrides, field in cases:
            with self.subTest(field=field):
                with self.assertRaises(ValueError) as ctx:
                    ReportOptions(**overrides).validate()
                self.assertIn(field, str(ctx.exception))

    def test_invalid_option_aborts_assembly(self) -> None:
        with self.assertRaises(ValueError):
            assemble("patch", sample_snapshot(), ReportOptions(column_count=-1))


class TestAssemble(unittest.TestCase):
    def test_empty_targets_yield_none(self) -> None:
        snapshot = make_snapshot([instrument(1)])
        self.assertIsNone(assemble("eos-targets", snapshot))

    def test_instrument_reports_yield_none_without_instruments(self) -> None:
        snapshot = make_snapshot()
        for report_id in REPORT_IDS:
            with self.subTest(report_id=report_id):
                self.assertIsNone(assemble(report_id, snapshot))

    def test_channel_hookup_rows(self) -> None:
        model = assemble("channel-hookup", sample_snapshot())
        self.assertIsNotNone(model)
        self.assertIsInstance(model.content, ChannelHookupContent)
        rows = model.content.rows
        self.assertEqual([row.display_channel for row in rows], ["1", "P2", "2", "10"])
        self.assertEqual([row.display_address for row in rows], ["1", "2", "2/1", "20"])
        self.assertEqual(model.cover, CoverModel(title="Channel Hookup"))
        self.assertEqual(model.title, "CHANNEL HOOKUP")

    def test_address_options_are_threaded_through(self) -> None:
        options = ReportOptions(address_mode="absolute")
        model = assemble("channel-hookup", sample_snapshot(), options)
        addresses = [row.display_address for row in model.content.rows]
        self.assertEqual(addresses, ["1", "2", "513", "20"])

    def test_patch_pages_follow_orientation(self) -> None:
        snapshot = make_snapshot([instrument(index) for index in range(1, 101)])
        landscape = assemble("patch", snapshot, ReportOptions(orientation="landscape"))
        portrait = assemble("patch", snapshot, ReportOptions(orientation="portrait"))
        self.assertIsInstance(landscape.content, PatchContent)
        self.assertEqual(landscape.content.rows_per_column, 28)
        self.assertEqual(len(landscape.content.pages), 2)
        self.assertEqual(portrait.content.rows_per_column, 42)
        self.assertEqual(len(portrait.content.pages), 1)
        channels = [row.display_channel for row in flatten(landscape.content.pages)]
        self.assertEqual(channels, [str(index) for index in range(1, 101)])

    def test_patch_grouped_by_type(self) -> None:
        options = ReportOptions(group_patch_by_type=True, column_count=1)
        model = assemble("patch", sample_snapshot(), options)
        rows = flatten(model.content.pages)
        headers = [row.title for row in rows if row.is_header]
        self.assertEqual(headers, ["ColorSource PAR", "Source Four 26", "Source Four 36"])
        self.assertEqual(row_count(model), 4)

    def test_target_list(self) -> None:
        model = assemble("eos-targets", sample_snapshot())
        self.assertIsInstance(model.content, TargetListContent)
        titles = [section.title for section in model.content.sections]
        self.assertEqual(titles, ["Groups", "Presets"])
        self.assertEqual(row_count(model), 3)

    def test_target_filter_keeps_one_type(self) -> None:
        model = assemble("eos-targets", sample_snapshot(), ReportOptions(target_filter="preset"))
        self.assertEqual([section.title for section in model.content.sections], ["Presets"])
        self.assertEqual(row_count(model), 1)
        self.assertIsNone(
            assemble("eos-targets", sample_snapshot(), ReportOptions(target_filter="sub"))
        )

    def test_default_columns(self) -> None:
        hookup = assemble("channel-hookup", sample_snapshot())
        schedule = assemble("hanging-schedule", sample_snapshot())
        self.assertEqual(
            tuple(column.key for column in hookup.content.columns),
            DEFAULT_CHANNEL_HOOKUP_COLUMNS,
        )
        self.assertEqual(
            tuple(column.key for column in schedule.content.columns),
            DEFAULT_HANGING_SCHEDULE_COLUMNS,
        )

    def test_columns_follow_options(self) -> None:
        options = ReportOptions(
            hookup_columns=("frame_size", "channel"),
            schedule_columns=("watt", "unit"),
        )
        hookup = assemble("channel-hookup", sample_snapshot(), options)
        self.assertEqual(
            [column.label for column in hookup.content.columns], ["Frame Size", "Ch"]
        )
        first = hookup.content.rows[0]
        self.assertEqual(
            [first.cell(column.key) for column in hookup.content.columns], ["6.25", "1"]
        )
        schedule = assemble("hanging-schedule", sample_snapshot(), options)
        self.assertIsInstance(schedule.content, HangingScheduleContent)
        self.assertEqual([column.key for column in schedule.content.columns], ["watt", "unit"])

    def test_cutting_list_by_type(self) -> None:
        by_color = assemble("cutting-list", sample_snapshot())
        self.assertEqual(by_color.content.item_heading, "Type")
        model = assemble("cutting-list", sample_snapshot(), ReportOptions(cutting_list_by="type"))
        self.assertIsInstance(model.content, CuttingList)
        self.assertEqual(model.content.group_by, "type")
        self.assertEqual(model.content.item_heading, "Color")
        self.assertEqual(
            [group.name for group in model.content.groups], ["Source Four 26", "Source Four 36"]
        )
        self.assertEqual(model.content.total_colors, 2)
        self.assertEqual(model.content.total_cuts, 3)


class TestAssembleCombined(unittest.TestCase):
    def test_empty_reports_are_omitted_from_cover(self) -> None:
        snapshot = make_snapshot([instrument(1, position="X", watt="100")])
        combined = assemble_combined(["channel-hookup", "eos-targets", "power"], snapshot)
        report_ids = [model.report_id for model in combined.reports]
        self.assertEqual(report_ids, ["channel-hookup", "power"])
        self.assertEqual(combined.cover.title, COMBINED_COVER_TITLE)
        self.assertEqual(combined.cover.included_reports, ("Channel Hookup", "Power Report"))
        self.assertNotIn("EOS Targets", combined.included_reports)

    def test_fragments_have_no_cover_and_ids_are_deduplicated(self) -> None:
        combined = assemble_combined(["patch", "PATCH", "power"], sample_snapshot())
        self.assertEqual([model.report_id for model in combined.reports], ["patch", "power"])
        self.assertTrue(all(model.cover is None for model in combined.reports))

    def test_cover_can_be_disabled(self) -> None:
        combined = assemble_combined(
            ["power"], sample_snapshot(), ReportOptions(include_cover=False)
        )
        self.assertIsNone(combined.cover)
        self.assertEqual(combined.included_reports, ("Power Report",))

    def test_nothing_to_show(self) -> None:
        combined = assemble_combined(["eos-targets"], make_snapshot())
        self.assertEqual(combined.reports, ())
        self.assertIsNone(combined.cover)

    def test_unknown_report_id(self) -> None:
        with self.assertRaises(ValueError):
            assemble_combined(["patch", "nope"], sample_snapshot())

    def test_available_reports(self) -> None:
        self.assertEqual(available_reports(sample_snapshot()), list(REPORT_IDS))
        self.assertEqual(
            available_reports(make_snapshot([instrument(1)])),
            ["channel-hookup", "hanging-schedule", "patch", "equipment-list", "power"],
        )


if __name__ == "__main__":
    unittest.main()
