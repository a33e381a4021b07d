"""Grid furniture: column headers, day numbers, hour lines and hour labels.

Only positions and texts are computed here; fonts and colours belong to
the presentation layer.
"""

from dataclasses import dataclass

from calgrid.config import LayoutConfig
from calgrid.layout.grid import column_titles
from calgrid.layout.mapping import BOX_LEFT_GAP, CoordinateMapper
from calgrid.models import (
    HOURS_PER_DAY,
    ColumnHeader,
    DayLabel,
    GridSpec,
    HourLabel,
    HourLine,
    ViewProfile,
    ZoomState,
)

# Hour labels sit this far above their hour line
HOUR_LABEL_LIFT = 2.0


@dataclass(frozen=True)
class Decorations:
    column_headers: tuple[ColumnHeader, ...]
    day_labels: tuple[DayLabel, ...]
    hour_lines: tuple[HourLine, ...]
    hour_labels: tuple[HourLabel, ...]


def build_decorations(
    grid: GridSpec,
    profile: ViewProfile,
    zoom: ZoomState | None,
    mapper: CoordinateMapper,
    config: LayoutConfig,
) -> Decorations:
    return Decorations(
        column_headers=column_headers(grid, zoom, mapper),
        day_labels=day_labels(grid, mapper, config) if profile.day_numbers else (),
        hour_lines=hour_lines(grid, mapper) if profile.lines_on_hours else (),
        hour_labels=hour_labels(grid, mapper) if profile.label_hours else (),
    )


def column_headers(
    grid: GridSpec, zoom: ZoomState | None, mapper: CoordinateMapper
) -> tuple[ColumnHeader, ...]:
    """Weekday headers; non-zoomed columns shrink to one letter while zoomed."""
    bounds = mapper.col_boundaries
    headers = []
    for col, title in enumerate(column_titles(grid)):
        short = title[:1]
        abbreviated = zoom is not None and col != zoom.col
        headers.append(
            ColumnHeader(
                col=col,
                text=title,
                short_text=short,
                label=short if abbreviated else title,
                center_x=(bounds[col] + bounds[col + 1]) / 2,
            )
        )
    return tuple(headers)


def day_labels(
    grid: GridSpec, mapper: CoordinateMapper, config: LayoutConfig
) -> tuple[DayLabel, ...]:
    """Day-of-month numbers, flagged when they belong to an adjacent month."""
    inset = config.day_label_inset
    labels = []
    for cell in grid.iter_cells():
        in_month = grid.active_month is None or cell.day_start.month == grid.active_month
        labels.append(
            DayLabel(
                row=cell.row,
                col=cell.col,
                day_number=cell.day_start.day,
                in_active_month=in_month,
                x=mapper.col_boundaries[cell.col] + inset,
                y=mapper.row_boundaries[cell.row] + inset,
            )
        )
    return tuple(labels)


def hour_lines(grid: GridSpec, mapper: CoordinateMapper) -> tuple[HourLine, ...]:
    return tuple(
        HourLine(row=row, hour=hour, y=mapper.hour_to_y(row, hour))
        for row in range(grid.rows)
        for hour in range(1, HOURS_PER_DAY)
    )


def hour_labels(grid: GridSpec, mapper: CoordinateMapper) -> tuple[HourLabel, ...]:
    """Hour labels ("HH:00") below each interesting hour, at the first and last column."""
    first = mapper.col_boundaries[0] + BOX_LEFT_GAP
    last = mapper.col_boundaries[grid.cols - 1] + BOX_LEFT_GAP
    xs = (first,) if first == last else (first, last)
    labels = []
    for axis in mapper.hour_axes:
        for hour in range(1, HOURS_PER_DAY):
            if not axis.is_interesting(hour - 1):
                continue
            labels.append(
                HourLabel(
                    row=axis.row,
                    hour=hour,
                    text=f"{hour:02d}:00",
                    y=mapper.hour_to_y(axis.row, hour) - HOUR_LABEL_LIFT,
                    xs=xs,
                )
            )
    return tuple(labels)
