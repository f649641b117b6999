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

from lxprint.core.models import TargetType
from lxprint.reports.grouping import (
    UNASSIGNED_POSITION,
    build_cutting_list,
    build_cutting_list_by_type,
    group_hanging_schedule,
    partition_by_position,
    partition_targets,
    summarize_equipment,
    summarize_power,
    watts_of,
)
from lxprint.reports.types import CutItem, EquipmentRow, PowerRow
from tests.test_support import instrument, target


class TestPower(unittest.TestCase):
    def test_missing_wattage_counts_as_zero(self) -> None:
        summary = summarize_power(
            [
                instrument(1, position="X", watt="100"),
                instrument(2, position="X", watt=None),
                instrument(3, position="Y", watt="50"),
            ]
        )
        self.assertEqual(
            summary.rows,
            (PowerRow(position="X", count=2, watts=100), PowerRow(position="Y", count=1, watts=50)),
        )
        self.assertEqual(summary.total_devices, 3)
        self.assertEqual(summary.total_watts, 150)

    def test_watts_parse_leading_number(self) -> None:
        self.assertEqual(watts_of(instrument(1, watt="575W")), 575)
        self.assertEqual(watts_of(instrument(1, watt="n/a")), 0)
        self.assertEqual(watts_of(instrument(1, watt=750)), 750)


class TestPositions(unittest.TestCase):
    def test_natural_order_with_unassigned_last(self) -> None:
        partitions = partition_by_position(
            [
                instrument(1),
                instrument(2, position="Pipe 10"),
                instrument(3, position="Pipe 2"),
                instrument(4, position="box boom"),
            ]
        )
        self.assertEqual(
            [position for position, _members in partitions],
            ["box boom", "Pipe 2", "Pipe 10", UNASSIGNED_POSITION],
        )

    def test_hanging_schedule_keeps_input_order_within_position(self) -> None:
        groups = group_hanging_schedule(
            [
                instrument(20, position="1st Electric", unit="1", watt="575"),
                instrument(3, 2, position="1st Electric", unit="2", watt="575"),
                instrument(4, position="2nd Electric", unit="1", watt="750"),
            ],
            channel_display_mode="parts",
            address=lambda item: "",
        )
        self.assertEqual([group.position for group in groups], ["1st Electric", "2nd Electric"])
        first = groups[0]
        self.assertEqual([row.display_channel for row in first.rows], ["20", "P2"])
        self.assertEqual([row.is_secondary_part for row in first.rows], [False, True])
        self.assertEqual(first.unit_count, 2)
        self.assertEqual(first.total_watts, 1150)
        self.assertEqual(groups[1].total_watts, 750)


class TestEquipment(unittest.TestCase):
    def test_counts_by_type(self) -> None:
        summary = summarize_equipment(
            [instrument(1, type="A"), instrument(2, type="B"), instrument(3, type="A")]
        )
        self.assertEqual(
            summary.rows, (EquipmentRow(type="A", count=2), EquipmentRow(type="B", count=1))
        )
        self.assertEqual(summary.total, 3)

    def test_missing_type_is_unknown(self) -> None:
        summary = summarize_equipment([instrument(1), instrument(2, type="zoom")])
        self.assertEqual([row.type for row in summary.rows], ["Unknown", "zoom"])


class TestCuttingList(unittest.TestCase):
    def test_groups_by_color_then_type_and_frame(self) -> None:
        cuts = build_cutting_list(
            [
                instrument(1, type="S4 26", color="R33", gel_frame_size="6.25"),
                instrument(2, type="S4 26", color="R33", gel_frame_size="6.25"),
                instrument(3, type="Fresnel", color="R33", gel_frame_size="7.5"),
                instrument(4, type="S4 26", color="L201", gel_frame_size="6.25"),
                instrument(5, type="S4 26", color="  "),
                instrument(6, type="S4 26"),
            ]
        )
        self.assertEqual([group.name for group in cuts.groups], ["L201", "R33"])
        r33 = cuts.groups[1]
        self.assertEqual(
            r33.items,
            (
                CutItem(label="Fresnel", frame_size="7.5", count=1),
                CutItem(label="S4 26", frame_size="6.25", count=2),
            ),
        )
        self.assertEqual(r33.count, 3)
        self.assertEqual(cuts.total_colors, 2)
        self.assertEqual(cuts.total_cuts, 4)
        self.assertEqual(cuts.item_heading, "Type")

    def test_no_colors(self) -> None:
        cuts = build_cutting_list([instrument(1)])
        self.assertEqual(cuts.groups, ())
        self.assertEqual(cuts.total_cuts, 0)

    def test_groups_by_type_then_color_and_frame(self) -> None:
        cuts = build_cutting_list_by_type(
            [
                instrument(1, type="S4 26", color="R33", gel_frame_size="6.25"),
                instrument(2, type="S4 26", color="R33", gel_frame_size="6.25"),
                instrument(3, type="Fresnel", color="R33", gel_frame_size="7.5"),
                instrument(4, type="S4 26", color="L201", gel_frame_size="6.25"),
                instrument(5, color="R02"),
                instrument(6, type="S4 26"),
            ]
        )
        self.assertEqual([group.name for group in cuts.groups], ["Fresnel", "S4 26", "Unknown"])
        self.assertEqual(
            cuts.groups[1].items,
            (
                CutItem(label="L201", frame_size="6.25", count=1),
                CutItem(label="R33", frame_size="6.25", count=2),
            ),
        )
        self.assertEqual(cuts.groups[1].count, 3)
        self.assertEqual(cuts.total_colors, 3)
        self.assertEqual(cuts.total_cuts, 5)
        self.assertEqual(cuts.group_by, "type")
        self.assertEqual(cuts.item_heading, "Color")

    def test_by_type_without_colors(self) -> None:
        cuts = build_cutting_list_by_type([instrument(1, type="S4 26")])
        self.assertEqual(cuts.groups, ())
        self.assertEqual(cuts.total_colors, 0)


class TestTargets(unittest.TestCase):
    def test_sections_in_fixed_order_sorted_numerically(self) -> None:
        sections = partition_targets(
            [
                target("10", "Group"),
                target("2", "Sub"),
                target("1.5", "Group"),
                target("3", "Preset"),
                target("x", "Macro"),
            ]
        )
        self.assertEqual(
            [section.target_type for section in sections],
            [TargetType.GROUP, TargetType.PRESET, TargetType.SUB],
        )
        self.assertEqual([section.title for section in sections], ["Groups", "Presets", "Subs"])
        self.assertEqual([item.target_id for item in sections[0].targets], ["1.5", "10"])

    def test_empty_sections_are_dropped(self) -> None:
        self.assertEqual(partition_targets([]), ())
        sections = partition_targets([target("4", "Preset")])
        self.assertEqual(len(sections), 1)

    def test_only_keeps_one_type(self) -> None:
        items = [target("2", "Sub"), target("1", "Group"), target("7", "Sub")]
        sections = partition_targets(items, only=TargetType.SUB)
        self.assertEqual([section.target_type for section in sections], [TargetType.SUB])
        self.assertEqual([item.target_id for item in sections[0].targets], ["2", "7"])
        self.assertEqual(partition_targets(items, only=TargetType.PRESET), ())


if __name__ == "__main__":
    unittest.main()
