"""Tests for grid construction per view mode."""

from datetime import datetime, timedelta, timezone

import pytest

from calgrid.layout.grid import GRID_SHAPES, build_grid, column_titles, start_of_week
from calgrid.models import ONE_DAY, ViewMode

from .helpers import APRIL_15, WEDNESDAY

ANCHORS = [
    datetime(2026, 3, 4, 12, 0),
    datetime(2026, 3, 1, 0, 0),  # a Sunday at midnight
    datetime(2026, 2, 28, 23, 59, 59),  # a Saturday
    datetime(2026, 4, 15, 9, 30),
    datetime(2026, 8, 31, 18, 0),
    datetime(2024, 2, 29, 8, 0),  # leap day
    datetime(2026, 12, 31, 23, 0),
]


@pytest.mark.parametrize("mode", list(ViewMode))
@pytest.mark.parametrize("anchor", ANCHORS)
def test_cells_tile_the_grid_range(mode: ViewMode, anchor: datetime) -> None:
    grid = build_grid(mode, anchor)
    cells = grid.iter_cells()

    assert (grid.rows, grid.cols) == GRID_SHAPES[mode]
    assert len(cells) == grid.rows * grid.cols
    assert grid.grid_end == grid.grid_start + grid.rows * grid.cols * ONE_DAY
    assert grid.grid_start.time() == datetime.min.time()
    assert cells[0].day_start == grid.grid_start
    assert cells[-1].day_end == grid.grid_end
    for previous, current in zip(cells, cells[1:]):
        assert previous.day_end == current.day_start
    for cell in cells:
        assert cell.day_end - cell.day_start == ONE_DAY
        assert grid.cell(cell.row, cell.col) is cell


@pytest.mark.parametrize("anchor", ANCHORS)
def test_anchor_is_inside_the_grid(anchor: datetime) -> None:
    for mode in ViewMode:
        grid = build_grid(mode, anchor)
        if mode is ViewMode.MONTH and anchor.day > 28:
            # fixed 5x7 month grid may not reach the last days of the month
            continue
        assert grid.time_range.contains(anchor)


def test_day_view_is_the_anchor_day() -> None:
    grid = build_grid(ViewMode.DAY, WEDNESDAY)

    assert grid.grid_start == datetime(2026, 3, 4)
    assert grid.grid_end == datetime(2026, 3, 5)
    assert grid.active_month is None


def test_week_view_runs_sunday_to_sunday() -> None:
    grid = build_grid(ViewMode.WEEK, WEDNESDAY)

    assert grid.grid_start == datetime(2026, 3, 1)
    assert grid.grid_end == datetime(2026, 3, 8)
    assert grid.grid_start.weekday() == 6
    assert column_titles(grid) == [
        "Sunday",
        "Monday",
        "Tuesday",
        "Wednesday",
        "Thursday",
        "Friday",
        "Saturday",
    ]


def test_month_view_starts_on_sunday_before_the_first() -> None:
    grid = build_grid(ViewMode.MONTH, APRIL_15)

    assert grid.grid_start == datetime(2026, 3, 29)
    assert grid.grid_end == datetime(2026, 5, 3)
    assert grid.active_month == 4
    assert grid.cell(0, 3).day_start == datetime(2026, 4, 1)


def test_month_starting_on_sunday_begins_on_the_first() -> None:
    grid = build_grid(ViewMode.MONTH, datetime(2026, 3, 20))
    assert grid.grid_start == datetime(2026, 3, 1)


def test_six_week_month_is_truncated_to_five_rows() -> None:
    # August 2026 starts on a Saturday and needs six Sunday-aligned weeks.
    grid = build_grid(ViewMode.MONTH, datetime(2026, 8, 10))

    assert grid.grid_start == datetime(2026, 7, 26)
    assert grid.rows == 5
    assert grid.grid_end == datetime(2026, 8, 30)
    assert not grid.time_range.contains(datetime(2026, 8, 31, 12))


def test_timezone_is_preserved() -> None:
    anchor = datetime(2026, 3, 4, 15, 0, tzinfo=timezone(timedelta(hours=2)))
    grid = build_grid(ViewMode.WEEK, anchor)

    assert grid.grid_start == datetime(2026, 3, 1, tzinfo=timezone(timedelta(hours=2)))
    assert grid.grid_start.tzinfo == anchor.tzinfo


def test_start_of_week_for_sunday_is_same_day() -> None:
    assert start_of_week(datetime(2026, 3, 8, 18, 45)) == datetime(2026, 3, 8)
