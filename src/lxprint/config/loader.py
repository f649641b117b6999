#!/usr/bin/env python3
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

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence, cast

from ..core.models import DEFAULT_REPORT_FOOTER
from ..reports.addressing import ADDRESS_MODES, AddressMode
from ..reports.channels import CHANNEL_DISPLAY_MODES, ChannelDisplayMode
from ..reports.columns import CHANNEL_HOOKUP_CATALOG, HANGING_SCHEDULE_CATALOG, select_columns
from ..reports.options import (
    CUTTING_LIST_GROUPINGS,
    DEFAULT_PATCH_COLUMNS,
    ORIENTATIONS,
    TARGET_FILTERS,
    CuttingListGrouping,
    Orientation,
    ReportOptions,
    TargetFilter,
)
from ..reports.registry import REPORT_IDS
from ..reports.types import TableColumn
from .installer import (
    DEFAULT_PAPER_SIZE,
    DEFAULT_TEMPLATE_PATH,
    resolve_config_path,
    user_template_path,
)

PAPER_SIZES = ("A4", "LETTER")
DEFAULT_REPORT_SELECTION = ("channel-hookup", "hanging-schedule", "patch")


@dataclass(frozen=True)
class ReportDefaults:
    reports: tuple[str, ...] = DEFAULT_REPORT_SELECTION
    orientation: Orientation = "landscape"
    address_mode: AddressMode = "universe"
    show_universe1: bool = False
    universe_separator: str = "/"
    channel_display_mode: ChannelDisplayMode = "parts"
    patch_columns: int = DEFAULT_PATCH_COLUMNS
    include_cover: bool = True
    group_patch_by_type: bool = False
    cutting_list_by: CuttingListGrouping = "color"
    target_filter: TargetFilter = "all"
    hookup_columns: tuple[str, ...] | None = None
    schedule_columns: tuple[str, ...] | None = None

    def to_options(self) -> ReportOptions:
        return ReportOptions(
            orientation=self.orientation,
            address_mode=self.address_mode,
            show_universe1=self.show_universe1,
            universe_separator=self.universe_separator,
            channel_display_mode=self.channel_display_mode,
            column_count=self.patch_columns,
            include_cover=self.include_cover,
            group_patch_by_type=self.group_patch_by_type,
            cutting_list_by=self.cutting_list_by,
            target_filter=self.target_filter,
            hookup_columns=self.hookup_columns,
            schedule_columns=self.schedule_columns,
        )


@dataclass(frozen=True)
class FooterDefaults:
    text: str = DEFAULT_REPORT_FOOTER
    show_date: bool = True
    show_page_numbers: bool = True


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    no_color: bool = False
    no_animations: bool = False


@dataclass(frozen=True)
class AppConfig:
    template_path: Path
    paper_size: str
    report: ReportDefaults = field(default_factory=ReportDefaults)
    footer: FooterDefaults = field(default_factory=FooterDefaults)
    ui: UiDefaults = field(default_factory=UiDefaults)


def load_app_config(path: str | Path | None = None, *, paper_size: str | None = None) -> AppConfig:
    config_path = resolve_config_path(path, paper_size=paper_size)
    data = _load_toml(config_path)

    page_cfg = _get_dict(data, "page")
    resolved_paper_size = (
        paper_size or _parse_optional_str(page_cfg.get("size"), field="page.size")
        or DEFAULT_PAPER_SIZE
    ).strip().upper()
    if resolved_paper_size not in PAPER_SIZES:
        raise ValueError(f"page.size must be one of: {', '.join(PAPER_SIZES)}")

    return AppConfig(
        template_path=_resolve_template_path(_get_dict(data, "template"), base=config_path),
        paper_size=resolved_paper_size,
        report=_parse_report_defaults(_get_dict(data, "report")),
        footer=_parse_footer_defaults(_get_dict(data, "footer")),
        ui=_parse_ui_defaults(_get_dict(data, "ui")),
    )


def _resolve_template_path(cfg: dict[str, object], *, base: Path) -> Path:
    configured = _parse_optional_str(cfg.get("path"), field="template.path")
    if configured:
        candidate = Path(configured).expanduser()
        if not candidate.is_absolute():
            candidate = base.parent / candidate
        if not candidate.is_file():
            raise ValueError(f"template.path not found: {candidate}")
        return candidate
    return user_template_path() or DEFAULT_TEMPLATE_PATH


def _parse_report_defaults(cfg: dict[str, object]) -> ReportDefaults:
    defaults = ReportDefaults()
    patch_columns = _parse_optional_int(cfg.get("patch_columns"), field="report.patch_columns")
    if patch_columns is not None and patch_columns <= 0:
        raise ValueError("report.patch_columns must be a positive integer")
    separator = _parse_optional_str(
        cfg.get("universe_separator"), field="report.universe_separator"
    )
    return ReportDefaults(
        reports=_parse_report_ids(
            cfg.get("reports"), field="report.reports", default=defaults.reports
        ),
        orientation=cast(
            Orientation,
            _parse_choice(
                cfg.get("orientation"),
                field="report.orientation",
                choices=ORIENTATIONS,
                default=defaults.orientation,
            ),
        ),
        address_mode=cast(
            AddressMode,
            _parse_choice(
                cfg.get("address_mode"),
                field="report.address_mode",
                choices=ADDRESS_MODES,
                default=defaults.address_mode,
            ),
        ),
        show_universe1=_parse_bool(
            cfg.get("show_universe1"), field="report.show_universe1", default=False
        ),
        universe_separator=defaults.universe_separator if separator is None else separator,
        channel_display_mode=cast(
            ChannelDisplayMode,
            _parse_choice(
                cfg.get("channel_display_mode"),
                field="report.channel_display_mode",
                choices=CHANNEL_DISPLAY_MODES,
                default=defaults.channel_display_mode,
            ),
        ),
        patch_columns=defaults.patch_columns if patch_columns is None else patch_columns,
        include_cover=_parse_bool(
            cfg.get("include_cover"), field="report.include_cover", default=True
        ),
        group_patch_by_type=_parse_bool(
            cfg.get("group_patch_by_type"), field="report.group_patch_by_type", default=False
        ),
        cutting_list_by=cast(
            CuttingListGrouping,
            _parse_choice(
                cfg.get("cutting_list_by"),
                field="report.cutting_list_by",
                choices=CUTTING_LIST_GROUPINGS,
                default=defaults.cutting_list_by,
            ),
        ),
        target_filter=cast(
            TargetFilter,
            _parse_choice(
                cfg.get("target_filter"),
                field="report.target_filter",
                choices=TARGET_FILTERS,
                default=defaults.target_filter,
            ),
        ),
        hookup_columns=_parse_columns(
            cfg.get("hookup_columns"),
            field="report.hookup_columns",
            catalog=CHANNEL_HOOKUP_CATALOG,
        ),
        schedule_columns=_parse_columns(
            cfg.get("schedule_columns"),
            field="report.schedule_columns",
            catalog=HANGING_SCHEDULE_CATALOG,
        ),
    )


def _parse_footer_defaults(cfg: dict[str, object]) -> FooterDefaults:
    text = _parse_optional_str(cfg.get("text"), field="footer.text")
    return FooterDefaults(
        text=DEFAULT_REPORT_FOOTER if text is None else text,
        show_date=_parse_bool(cfg.get("show_date"), field="footer.show_date", default=True),
        show_page_numbers=_parse_bool(
            cfg.get("show_page_numbers"), field="footer.show_page_numbers", default=True
        ),
    )


def _parse_ui_defaults(cfg: dict[str, object]) -> UiDefaults:
    return UiDefaults(
        quiet=_parse_bool(cfg.get("quiet"), field="ui.quiet", default=False),
        no_color=_parse_bool(cfg.get("no_color"), field="ui.no_color", default=False),
        no_animations=_parse_bool(
            cfg.get("no_animations"),
            field="ui.no_animations",
            default=False,
        ),
    )


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_optional_str(value: object, *, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    return value


def _parse_choice(
    value: object,
    *,
    field: str,
    choices: Sequence[str],
    default: str,
) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValueError(f"{field} must be one of: {', '.join(choices)}")
    normalized = value.strip().lower()
    if not normalized:
        return default
    if normalized not in choices:
        raise ValueError(f"{field} must be one of: {', '.join(choices)}")
    return normalized


def _parse_report_ids(
    value: object,
    *,
    field: str,
    default: tuple[str, ...],
) -> tuple[str, ...]:
    if value is None:
        return default
    if isinstance(value, str):
        if value.strip().lower() == "all":
            return REPORT_IDS
        value = [value]
    if not isinstance(value, list):
        raise ValueError(f"{field} must be a list of report ids")
    report_ids: list[str] = []
    for entry in value:
        if not isinstance(entry, str):
            raise ValueError(f"{field} must be a list of report ids")
        normalized = entry.strip().lower()
        if normalized not in REPORT_IDS:
            raise ValueError(f"{field}: unknown report {entry!r}")
        if normalized not in report_ids:
            report_ids.append(normalized)
    return tuple(report_ids)


def _parse_columns(
    value: object,
    *,
    field: str,
    catalog: Sequence[TableColumn],
) -> tuple[str, ...] | None:
    if value is None:
        return None
    if isinstance(value, str):
        value = [part for part in value.split(",") if part.strip()]
    if not isinstance(value, list) or not all(isinstance(entry, str) for entry in value):
        raise ValueError(f"{field} must be a list of column names")
    keys = tuple(entry.strip().lower() for entry in value)
    select_columns(catalog, keys, field=field)
    return keys


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"{field} must be a boolean")
    raise ValueError(f"{field} must be a boolean")


def _parse_optional_int(value: object, *, field: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{field} must be an integer")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError as exc:
            raise ValueError(f"{field} must be an integer") from exc
    raise ValueError(f"{field} must be an integer")
