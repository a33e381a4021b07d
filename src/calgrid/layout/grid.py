"""GridBuilder - derives the day-cell matrix for a view mode and anchor.

Grid shapes:
  Day    1x1  the anchor's calendar day
  Week   1x7  Sunday..Saturday of the week containing the anchor
  Month  5x7  five Sunday-aligned weeks starting at/before the 1st

The Month grid is always 35 days. A month whose Sunday-aligned span needs a
sixth week loses its last days from the visible grid (e.g. August 2026
drops the 31st).
"""

from datetime import datetime

from calgrid.models import ONE_DAY, DayCell, GridSpec, ViewMode

GRID_SHAPES: dict[ViewMode, tuple[int, int]] = {
    ViewMode.DAY: (1, 1),
    ViewMode.WEEK: (1, 7),
    ViewMode.MONTH: (5, 7),
}


def start_of_day(moment: datetime) -> datetime:
    """Midnight of the calendar day containing moment (tzinfo preserved)."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_week(moment: datetime) -> datetime:
    """Most recent Sunday 00:00 at or before moment's day."""
    day = start_of_day(moment)
    # datetime.weekday(): Monday == 0 ... Sunday == 6
    return day - ((day.weekday() + 1) % 7) * ONE_DAY


def build_grid(mode: ViewMode, anchor: datetime) -> GridSpec:
    """Build the grid for a view mode around an anchor instant.

    Args:
        mode: View mode; selects the grid shape.
        anchor: Any instant inside the day, week or month to display.

    Returns:
        GridSpec whose cells tile [grid_start, grid_start + rows*cols days).
    """
    rows, cols = GRID_SHAPES[mode]
    active_month = None

    if mode is ViewMode.DAY:
        grid_start = start_of_day(anchor)
    elif mode is ViewMode.WEEK:
        grid_start = start_of_week(anchor)
    else:
        grid_start = start_of_week(start_of_day(anchor).replace(day=1))
        active_month = anchor.month

    cells = tuple(
        tuple(_make_cell(grid_start, row, col, cols) for col in range(cols))
        for row in range(rows)
    )

    return GridSpec(
        mode=mode,
        rows=rows,
        cols=cols,
        grid_start=grid_start,
        grid_end=grid_start + rows * cols * ONE_DAY,
        cells=cells,
        active_month=active_month,
    )


def _make_cell(grid_start: datetime, row: int, col: int, cols: int) -> DayCell:
    day_start = grid_start + (row * cols + col) * ONE_DAY
    return DayCell(row=row, col=col, day_start=day_start, day_end=day_start + ONE_DAY)


def column_titles(grid: GridSpec) -> list[str]:
    """Full weekday names of the first grid row, e.g. ["Sunday", ...]."""
    return [cell.day_start.strftime("%A") for cell in grid.cells[0]]
