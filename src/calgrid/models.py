"""Pydantic models for calendar layout data.

All data structures use Pydantic v2 with frozen=True: a layout pass builds
them once and nothing mutates them afterwards. Times are datetimes that share
the anchor's tzinfo (or are all naive); day arithmetic is wall-clock, so every
grid day is exactly 24 hours long.
"""

from bisect import bisect_left
from datetime import datetime, timedelta
from enum import Enum
from functools import total_ordering
from math import floor

from pydantic import BaseModel, ConfigDict, model_validator

from calgrid.errors import InvalidArgumentError

ONE_HOUR = timedelta(hours=1)
ONE_DAY = timedelta(days=1)
HOURS_PER_DAY = 24


class ViewMode(str, Enum):
    """Calendar view; determines the grid shape."""

    DAY = "day"  # 1x1
    WEEK = "week"  # 1x7, Sunday..Saturday
    MONTH = "month"  # 5x7, Sunday-aligned


class TimeRange(BaseModel):
    """Half-open interval [start, end) with end strictly after start."""

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime

    @model_validator(mode="after")
    def _check_order(self) -> "TimeRange":
        if self.end <= self.start:
            raise InvalidArgumentError(
                f"time range end {self.end.isoformat()} is not after "
                f"start {self.start.isoformat()}"
            )
        return self

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def overlaps(self, other: "TimeRange") -> bool:
        return self.start < other.end and self.end > other.start

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment < self.end


@total_ordering
class Appointment(BaseModel):
    """An externally owned appointment.

    The layout engine only reads the interval. Two appointments with equal
    start, end, location and description are the same appointment; they
    sort by start, then end, then location, then description.
    """

    model_config = ConfigDict(frozen=True)

    description: str = ""
    location: str = ""
    start: datetime
    end: datetime

    def sort_key(self) -> tuple[datetime, datetime, str, str]:
        return (self.start, self.end, self.location, self.description)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Appointment):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    @property
    def time_range(self) -> TimeRange:
        return TimeRange(start=self.start, end=self.end)


class DayCell(BaseModel):
    """One calendar day at (row, col) of the grid."""

    model_config = ConfigDict(frozen=True)

    row: int
    col: int
    day_start: datetime
    day_end: datetime

    @property
    def time_range(self) -> TimeRange:
        return TimeRange(start=self.day_start, end=self.day_end)

    def overlaps(self, start: datetime, end: datetime) -> bool:
        """Open overlap test against [start, end)."""
        return start < self.day_end and end > self.day_start


class GridSpec(BaseModel):
    """The day-cell matrix of one view and the time range it covers.

    Invariant: cells tile [grid_start, grid_end) in row-major order with no
    gaps or overlaps, and grid_end = grid_start + rows * cols days.
    """

    model_config = ConfigDict(frozen=True)

    mode: ViewMode
    rows: int
    cols: int
    grid_start: datetime
    grid_end: datetime
    cells: tuple[tuple[DayCell, ...], ...]
    active_month: int | None = None  # 1-12 in Month view

    @model_validator(mode="after")
    def _check_shape(self) -> "GridSpec":
        if self.rows < 1 or self.cols < 1:
            raise InvalidArgumentError(
                f"grid needs at least one row and column, got {self.rows}x{self.cols}"
            )
        if len(self.cells) != self.rows or any(
            len(row) != self.cols for row in self.cells
        ):
            raise InvalidArgumentError("cell matrix does not match grid shape")
        if self.grid_end != self.grid_start + self.rows * self.cols * ONE_DAY:
            raise InvalidArgumentError("grid_end must be rows * cols days after grid_start")
        return self

    @property
    def time_range(self) -> TimeRange:
        return TimeRange(start=self.grid_start, end=self.grid_end)

    def cell(self, row: int, col: int) -> DayCell:
        return self.cells[row][col]

    def iter_cells(self) -> list[DayCell]:
        """All cells in row-major order."""
        return [cell for row in self.cells for cell in row]


class AppointmentFragment(BaseModel):
    """The part of an appointment that falls inside one day-cell."""

    model_config = ConfigDict(frozen=True)

    appointment: Appointment
    cell: DayCell
    start: datetime
    end: datetime

    @model_validator(mode="after")
    def _check_clip(self) -> "AppointmentFragment":
        if self.end <= self.start:
            raise InvalidArgumentError("fragment must have positive length")
        return self

    @property
    def row(self) -> int:
        return self.cell.row

    @property
    def col(self) -> int:
        return self.cell.col


class ZoomState(BaseModel):
    """The single zoomed cell. "No zoom" is represented by None."""

    model_config = ConfigDict(frozen=True)

    row: int
    col: int


class HourAxis(BaseModel):
    """Vertical partition of one grid row into 24 hour bands.

    fractions has 25 strictly increasing entries from 0.0 to 1.0; band h
    spans [fractions[h], fractions[h + 1]] of the row height.
    """

    model_config = ConfigDict(frozen=True)

    row: int
    interesting: tuple[bool, ...]
    fractions: tuple[float, ...]

    def is_interesting(self, hour: int) -> bool:
        return self.interesting[hour]

    def hour_to_fraction(self, hour: float) -> float:
        """Map a fractional hour of the day to a fraction of the row height."""
        base = floor(hour)
        if base < 0:
            return 0.0
        if base >= HOURS_PER_DAY:
            return 1.0
        f1 = self.fractions[base]
        f2 = self.fractions[base + 1]
        return f1 + (f2 - f1) * (hour - base)

    def fraction_to_hour(self, fraction: float) -> float:
        """Inverse of hour_to_fraction; clamps to [0, 24]."""
        if fraction <= 0.0:
            return 0.0
        upper = bisect_left(self.fractions, fraction)
        if upper > HOURS_PER_DAY:
            return float(HOURS_PER_DAY)
        hour = upper - 1
        f1 = self.fractions[hour]
        f2 = self.fractions[upper]
        return hour + (fraction - f1) / (f2 - f1)


class Rect(BaseModel):
    """Rectangle in surface pixels, y growing downwards."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


class ViewProfile(BaseModel):
    """Per-mode layout constants."""

    model_config = ConfigDict(frozen=True)

    hour_weight: float
    lines_on_hours: bool
    label_hours: bool
    day_numbers: bool
    box_padding: float


class AppointmentBox(BaseModel):
    """A fragment placed on the surface."""

    model_config = ConfigDict(frozen=True)

    fragment: AppointmentFragment
    rect: Rect
    padding: float = 0.0
    selected: bool = False

    @property
    def appointment(self) -> Appointment:
        return self.fragment.appointment


class ColumnHeader(BaseModel):
    model_config = ConfigDict(frozen=True)

    col: int
    text: str  # full weekday name
    short_text: str
    label: str  # what to draw: short when another column is zoomed
    center_x: float


class DayLabel(BaseModel):
    model_config = ConfigDict(frozen=True)

    row: int
    col: int
    day_number: int
    in_active_month: bool
    x: float
    y: float


class HourLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    row: int
    hour: int
    y: float


class HourLabel(BaseModel):
    model_config = ConfigDict(frozen=True)

    row: int
    hour: int
    text: str
    y: float
    xs: tuple[float, ...]


class LayoutSnapshot(BaseModel):
    """Complete, immutable geometry of one layout pass.

    The presentation layer keeps the latest snapshot for drawing and click
    mapping until the next pass replaces it.
    """

    model_config = ConfigDict(frozen=True)

    mode: ViewMode
    anchor: datetime
    grid: GridSpec
    zoom: ZoomState | None = None
    area: Rect
    row_boundaries: tuple[float, ...]
    col_boundaries: tuple[float, ...]
    hour_axes: tuple[HourAxis, ...]
    fragments: tuple[AppointmentFragment, ...] = ()
    boxes: tuple[AppointmentBox, ...] = ()
    column_headers: tuple[ColumnHeader, ...] = ()
    day_labels: tuple[DayLabel, ...] = ()
    hour_lines: tuple[HourLine, ...] = ()
    hour_labels: tuple[HourLabel, ...] = ()
    selected: Appointment | None = None

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def cols(self) -> int:
        return self.grid.cols

    @property
    def hour_fractions(self) -> tuple[tuple[float, ...], ...]:
        return tuple(axis.fractions for axis in self.hour_axes)

    @property
    def appointments(self) -> list[Appointment]:
        """Distinct appointments visible in this pass, in fragment order."""
        seen: dict[Appointment, None] = {}
        for fragment in self.fragments:
            seen.setdefault(fragment.appointment, None)
        return list(seen)

    def boxes_for(self, appointment: Appointment) -> list[AppointmentBox]:
        return [box for box in self.boxes if box.appointment == appointment]
