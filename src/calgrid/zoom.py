"""ZoomController - tracks the single zoomed cell.

Zooming enlarges one cell's row and column without changing the grid shape.
"""

from calgrid.config import LayoutConfig, get_config
from calgrid.logging import get_logger
from calgrid.models import ZoomState

log = get_logger(__name__)


class ZoomController:
    """At most one active (row, col); every other row and column weighs 1.0."""

    def __init__(self, config: LayoutConfig | None = None) -> None:
        self.config = config or get_config()
        self._active: ZoomState | None = None

    @property
    def active(self) -> ZoomState | None:
        return self._active

    def toggle(self, row: int | None, col: int | None) -> ZoomState | None:
        """Apply a click on (row, col).

        A click outside the grid (row or col is None) or on the zoomed cell
        clears the zoom; a click on any other cell zooms it directly.

        Returns:
            The new zoom state.
        """
        if row is None or col is None:
            new_state = None
        elif self._active is not None and (row, col) == (self._active.row, self._active.col):
            new_state = None
        else:
            new_state = ZoomState(row=row, col=col)

        log.debug("zoom_toggled", row=row, col=col, active=_describe(new_state))
        self._active = new_state
        return new_state

    def clear(self) -> None:
        self._active = None

    def discard_if_outside(self, rows: int, cols: int) -> bool:
        """Drop a zoom that no longer fits a rows x cols grid.

        Returns:
            True if a stale zoom was discarded.
        """
        if self._active is None or fits(self._active, rows, cols):
            return False
        log.debug("stale_zoom_discarded", active=_describe(self._active), rows=rows, cols=cols)
        self._active = None
        return True

    def weights(self, rows: int, cols: int) -> tuple[list[float], list[float]]:
        return zoom_weights(self._active, rows, cols, self.config)


def fits(zoom: ZoomState, rows: int, cols: int) -> bool:
    return 0 <= zoom.row < rows and 0 <= zoom.col < cols


def zoom_weights(
    zoom: ZoomState | None, rows: int, cols: int, config: LayoutConfig
) -> tuple[list[float], list[float]]:
    """Row and column weights for a grid, boosted at the zoomed cell.

    A zoom outside the grid shape is ignored.
    """
    row_weights = [1.0] * rows
    col_weights = [1.0] * cols
    if zoom is not None and fits(zoom, rows, cols):
        row_weights[zoom.row] = config.zoom_row_weight
        col_weights[zoom.col] = config.zoom_col_weight
    return row_weights, col_weights


def _describe(zoom: ZoomState | None) -> str:
    return "none" if zoom is None else f"{zoom.row},{zoom.col}"
