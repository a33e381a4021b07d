"""CoordinateMapper - converts between surface pixels and calendar time.

Built from one layout pass: the grid, its row/column pixel boundaries and
the per-row hour axes. Forward mapping places appointment boxes; the
inverse mapping turns clicks into times for hit-testing and
create-by-click. Coordinates stay floats so the two directions agree to
well under a minute.

Pixels outside the grid are not errors: row_at/col_at/cell_at return None,
xy_to_time returns the grid start, and time_to_y clamps to the grid edge.
"""

from bisect import bisect_right
from collections.abc import Sequence
from datetime import datetime
from math import floor

from calgrid.errors import InvalidArgumentError
from calgrid.models import (
    HOURS_PER_DAY,
    ONE_DAY,
    ONE_HOUR,
    AppointmentFragment,
    DayCell,
    GridSpec,
    HourAxis,
    Rect,
)

# Horizontal gap between a column line and the boxes inside it
BOX_LEFT_GAP = 2.0
BOX_RIGHT_GAP = 1.0


class CoordinateMapper:
    """Bidirectional pixel <-> time mapping for one layout pass."""

    def __init__(
        self,
        grid: GridSpec,
        row_boundaries: Sequence[float],
        col_boundaries: Sequence[float],
        hour_axes: Sequence[HourAxis],
    ) -> None:
        if len(row_boundaries) != grid.rows + 1 or len(col_boundaries) != grid.cols + 1:
            raise InvalidArgumentError("boundary vectors do not match the grid shape")
        if len(hour_axes) != grid.rows:
            raise InvalidArgumentError("need exactly one hour axis per grid row")
        self.grid = grid
        self.row_boundaries = tuple(row_boundaries)
        self.col_boundaries = tuple(col_boundaries)
        self.hour_axes = tuple(hour_axes)

    # -- forward: time -> pixels ------------------------------------------

    def day_index(self, moment: datetime) -> int:
        """Whole days from the grid start (negative before the grid)."""
        return floor((moment - self.grid.grid_start) / ONE_DAY)

    def time_to_row(self, moment: datetime) -> int:
        """Grid row of moment; may fall outside [0, rows)."""
        return self.day_index(moment) // self.grid.cols

    def time_to_y(self, moment: datetime) -> float:
        """Vertical pixel of moment.

        Times before the grid map to its top edge, times at or after the grid
        end to its bottom edge.
        """
        day = self.day_index(moment)
        row = day // self.grid.cols
        if row < 0:
            return self.row_boundaries[0]
        if row >= self.grid.rows:
            return self.row_boundaries[-1]
        day_start = self.grid.grid_start + day * ONE_DAY
        return self._hour_to_y(row, (moment - day_start) / ONE_HOUR)

    def cell_time_to_y(self, cell: DayCell, moment: datetime) -> float:
        """Vertical pixel of moment measured against a known cell.

        Unlike time_to_y, a moment equal to cell.day_end maps to the bottom
        of the cell rather than the top of the next day.
        """
        return self._hour_to_y(cell.row, (moment - cell.day_start) / ONE_HOUR)

    def time_to_point(self, moment: datetime) -> tuple[float, float]:
        """(x, y) of moment: horizontal centre of its column, time_to_y."""
        total = self.grid.rows * self.grid.cols
        day = min(max(self.day_index(moment), 0), total - 1)
        col = day % self.grid.cols
        x = (self.col_boundaries[col] + self.col_boundaries[col + 1]) / 2
        return x, self.time_to_y(moment)

    def fragment_rect(self, fragment: AppointmentFragment) -> Rect:
        """Surface rectangle of a fragment inside its day-cell."""
        col = fragment.col
        x1 = self.col_boundaries[col] + BOX_LEFT_GAP
        x2 = self.col_boundaries[col + 1] - BOX_RIGHT_GAP
        y1 = self.cell_time_to_y(fragment.cell, fragment.start)
        y2 = self.cell_time_to_y(fragment.cell, fragment.end)
        return Rect(x=x1, y=y1, width=max(0.0, x2 - x1), height=max(0.0, y2 - y1))

    def hour_to_y(self, row: int, hour: float) -> float:
        """Vertical pixel of a fractional hour within a row."""
        return self._hour_to_y(row, hour)

    def _hour_to_y(self, row: int, hour: float) -> float:
        y1 = self.row_boundaries[row]
        y2 = self.row_boundaries[row + 1]
        return y1 + self.hour_axes[row].hour_to_fraction(hour) * (y2 - y1)

    # -- inverse: pixels -> time ------------------------------------------

    def row_at(self, y: float) -> int | None:
        return _search(self.row_boundaries, y)

    def col_at(self, x: float) -> int | None:
        return _search(self.col_boundaries, x)

    def cell_at(self, x: float, y: float) -> DayCell | None:
        row = self.row_at(y)
        col = self.col_at(x)
        if row is None or col is None:
            return None
        return self.grid.cell(row, col)

    def y_to_hour(self, row: int, y: float) -> float:
        """Fractional hour in [0, 24] of pixel y inside a row."""
        y1 = self.row_boundaries[row]
        y2 = self.row_boundaries[row + 1]
        hour = self.hour_axes[row].fraction_to_hour((y - y1) / (y2 - y1))
        return min(max(hour, 0.0), float(HOURS_PER_DAY))

    def xy_to_time(self, x: float, y: float) -> datetime:
        """Calendar time under a pixel; the grid start when outside the grid."""
        cell = self.cell_at(x, y)
        if cell is None:
            return self.grid.grid_start
        return cell.day_start + self.y_to_hour(cell.row, y) * ONE_HOUR


def _search(boundaries: Sequence[float], value: float) -> int | None:
    """Index i with boundaries[i] <= value < boundaries[i + 1], else None."""
    index = bisect_right(boundaries, value) - 1
    if 0 <= index < len(boundaries) - 1:
        return index
    return None
