"""LayoutEngine - recomputes calendar geometry on every event.

compute_layout() is one pure pass:

  anchor + mode  -> build_grid           -> day-cells
  cells + query  -> fragment_appointments -> fragments
  fragments      -> build_hour_axis       -> hour bands per row
  grid + zoom    -> weighted_partition    -> row/column pixel boundaries
  everything     -> CoordinateMapper      -> boxes, decorations

LayoutEngine is the only stateful piece. It remembers the view, surface
size, zoom, selection and the last appointment query, and replaces its
LayoutSnapshot wholesale on each transition. Replaying an event is harmless.
"""

from collections.abc import Iterable
from datetime import datetime

from calgrid.config import LayoutConfig, get_config, view_profile
from calgrid.decorations import build_decorations
from calgrid.errors import AppointmentServiceError
from calgrid.layout.fragments import fragment_appointments, fragments_in_row
from calgrid.layout.grid import GRID_SHAPES, build_grid
from calgrid.layout.hours import build_hour_axis
from calgrid.layout.mapping import CoordinateMapper
from calgrid.layout.partition import weighted_partition
from calgrid.logging import get_logger
from calgrid.models import (
    Appointment,
    AppointmentBox,
    DayCell,
    LayoutSnapshot,
    Rect,
    ViewMode,
    ZoomState,
)
from calgrid.service import AppointmentService
from calgrid.zoom import ZoomController, fits, zoom_weights

logger = get_logger(__name__)

# Smallest grid extent in pixels; a surface too small for the header still
# gets a one-pixel grid
MIN_GRID_EXTENT = 1.0


def compute_layout(
    mode: ViewMode,
    anchor: datetime,
    appointments: Iterable[Appointment],
    width: float,
    height: float,
    *,
    zoom: ZoomState | None = None,
    selected: Appointment | None = None,
    config: LayoutConfig | None = None,
) -> LayoutSnapshot:
    """Run one full layout pass.

    A surface narrower than one pixel, or not taller than the header, is
    clamped to a one-pixel grid rather than rejected.

    Args:
        mode: View mode.
        anchor: Instant inside the day/week/month to show.
        appointments: Appointments overlapping the grid (others are ignored).
        width: Surface width in pixels.
        height: Surface height in pixels, header band included.
        zoom: Zoomed cell; ignored if it lies outside this mode's grid.
        selected: Appointment to flag as selected; dropped if not visible.
        config: Layout constants; defaults to get_config().

    Returns:
        LayoutSnapshot with boundaries, hour axes, fragments, boxes and
        decorations.
    """
    snapshot, _ = _layout_pass(
        mode, anchor, appointments, width, height, zoom, selected, config or get_config()
    )
    return snapshot


def _layout_pass(
    mode: ViewMode,
    anchor: datetime,
    appointments: Iterable[Appointment],
    width: float,
    height: float,
    zoom: ZoomState | None,
    selected: Appointment | None,
    config: LayoutConfig,
) -> tuple[LayoutSnapshot, CoordinateMapper]:
    header = config.header_height
    grid_width = max(float(width), MIN_GRID_EXTENT)
    grid_height = max(float(height) - header, MIN_GRID_EXTENT)
    if grid_width != width or grid_height != height - header:
        logger.debug("degenerate_surface_clamped", width=width, height=height, header=header)

    grid = build_grid(mode, anchor)
    if zoom is not None and not fits(zoom, grid.rows, grid.cols):
        logger.debug("stale_zoom_ignored", row=zoom.row, col=zoom.col, mode=mode.value)
        zoom = None

    profile = view_profile(mode, config)
    fragments = fragment_appointments(appointments, grid.iter_cells())
    hour_axes = tuple(
        build_hour_axis(row, fragments_in_row(fragments, row), profile.hour_weight)
        for row in range(grid.rows)
    )

    area = Rect(x=0.0, y=header, width=grid_width, height=grid_height)
    row_weights, col_weights = zoom_weights(zoom, grid.rows, grid.cols, config)
    row_boundaries = weighted_partition(row_weights, area.y, area.bottom)
    col_boundaries = weighted_partition(col_weights, area.x, area.right)
    mapper = CoordinateMapper(grid, row_boundaries, col_boundaries, hour_axes)

    if selected is not None and not any(f.appointment == selected for f in fragments):
        selected = None
    boxes = tuple(
        AppointmentBox(
            fragment=fragment,
            rect=mapper.fragment_rect(fragment),
            padding=profile.box_padding,
            selected=selected is not None and fragment.appointment == selected,
        )
        for fragment in fragments
    )
    decorations = build_decorations(grid, profile, zoom, mapper, config)

    logger.debug(
        "layout_computed",
        mode=mode.value,
        grid_start=grid.grid_start.isoformat(),
        rows=grid.rows,
        cols=grid.cols,
        fragments=len(fragments),
        zoomed=zoom is not None,
    )
    snapshot = LayoutSnapshot(
        mode=mode,
        anchor=anchor,
        grid=grid,
        zoom=zoom,
        area=area,
        row_boundaries=row_boundaries,
        col_boundaries=col_boundaries,
        hour_axes=hour_axes,
        fragments=fragments,
        boxes=boxes,
        column_headers=decorations.column_headers,
        day_labels=decorations.day_labels,
        hour_lines=decorations.hour_lines,
        hour_labels=decorations.hour_labels,
        selected=selected,
    )
    return snapshot, mapper


class LayoutEngine:
    """Orchestrates layout passes for one calendar surface.

    States are {Day, Week, Month} x {zoomed(row, col), unzoomed}. Every
    transition method recomputes the snapshot from scratch and returns it.
    """

    def __init__(
        self,
        service: AppointmentService,
        width: float,
        height: float,
        *,
        mode: ViewMode = ViewMode.DAY,
        anchor: datetime | None = None,
        config: LayoutConfig | None = None,
    ) -> None:
        self.service = service
        self.config = config or get_config()
        self.zoom_controller = ZoomController(self.config)
        self._mode = mode
        self._anchor = anchor if anchor is not None else datetime.now()
        self._width = width
        self._height = height
        self._selected: Appointment | None = None
        self._appointments: list[Appointment] = []

        self._query_appointments()
        self._snapshot, self._mapper = self._layout()

    # -- read-only state ----------------------------------------------------

    @property
    def snapshot(self) -> LayoutSnapshot:
        return self._snapshot

    @property
    def mapper(self) -> CoordinateMapper:
        return self._mapper

    @property
    def mode(self) -> ViewMode:
        return self._mode

    @property
    def anchor(self) -> datetime:
        return self._anchor

    @property
    def zoom(self) -> ZoomState | None:
        return self.zoom_controller.active

    @property
    def selected(self) -> Appointment | None:
        return self._selected

    @property
    def size(self) -> tuple[float, float]:
        return self._width, self._height

    # -- transitions ----------------------------------------------------------

    def set_view(self, mode: ViewMode, anchor: datetime | None = None) -> LayoutSnapshot:
        """Switch view and/or anchor. A mode change drops the zoom."""
        if mode is not self._mode:
            self.zoom_controller.clear()
        self._mode = mode
        if anchor is not None:
            self._anchor = anchor
        logger.info("view_changed", mode=mode.value, anchor=self._anchor.isoformat())
        self._query_appointments()
        return self._relayout()

    def toggle_zoom(self, row: int | None, col: int | None) -> LayoutSnapshot:
        self.zoom_controller.toggle(row, col)
        return self._relayout()

    def clear_zoom(self) -> LayoutSnapshot:
        self.zoom_controller.clear()
        return self._relayout()

    def appointments_changed(self) -> LayoutSnapshot:
        """Re-query the collaborator; the grid stays the same."""
        self._query_appointments()
        return self._relayout()

    def resize(self, width: float, height: float) -> LayoutSnapshot:
        """New surface size; reuses the last appointment query.

        Any size is accepted. A surface with no room below the header keeps a
        one-pixel grid so later transitions and hit tests still work.
        """
        self._width = width
        self._height = height
        return self._relayout()

    def select_appointment(self, appointment: Appointment) -> LayoutSnapshot:
        self._selected = appointment
        return self._relayout()

    def clear_selection(self) -> LayoutSnapshot:
        self._selected = None
        return self._relayout()

    # -- queries against the current snapshot ---------------------------------

    def hit_test(self, x: float, y: float) -> datetime:
        """Time under a pixel; the grid start when outside the grid."""
        return self.mapper.xy_to_time(x, y)

    def time_to_pixel(self, moment: datetime) -> float:
        return self.mapper.time_to_y(moment)

    def cell_at(self, x: float, y: float) -> DayCell | None:
        return self.mapper.cell_at(x, y)

    # -- internals ------------------------------------------------------------

    def _query_appointments(self) -> None:
        time_range = build_grid(self._mode, self._anchor).time_range
        try:
            self._appointments = list(self.service.query_appointments(time_range))
        except AppointmentServiceError as exc:
            logger.warning(
                "appointment_query_failed",
                error=str(exc),
                error_type=type(exc).__name__,
            )
            self._appointments = []

    def _relayout(self) -> LayoutSnapshot:
        self._snapshot, self._mapper = self._layout()
        return self._snapshot

    def _layout(self) -> tuple[LayoutSnapshot, CoordinateMapper]:
        rows, cols = GRID_SHAPES[self._mode]
        self.zoom_controller.discard_if_outside(rows, cols)

        snapshot, mapper = _layout_pass(
            self._mode,
            self._anchor,
            self._appointments,
            self._width,
            self._height,
            self.zoom_controller.active,
            self._selected,
            self.config,
        )
        if snapshot.selected is None:
            self._selected = None
        return snapshot, mapper
