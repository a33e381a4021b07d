"""ClickHandler - turns a click on the calendar surface into an action.

Dispatch order (first match wins):
  1. middle button or ctrl held   -> create an appointment at the clicked time
  2. double click                 -> open the clicked day in Day view
  3. an appointment is selected   -> clear the selection
  4. otherwise                    -> toggle zoom on the clicked cell
"""

from datetime import timedelta
from enum import Enum

from pydantic import BaseModel, ConfigDict

from calgrid.engine import LayoutEngine
from calgrid.errors import (
    AppointmentServiceError,
    DuplicateAppointmentError,
    InvalidDateError,
)
from calgrid.logging import get_logger
from calgrid.models import Appointment, ViewMode
from calgrid.service import AppointmentService

log = get_logger(__name__)


class MouseButton(str, Enum):
    PRIMARY = "primary"
    MIDDLE = "middle"
    SECONDARY = "secondary"


class MouseClick(BaseModel):
    """A click on the calendar surface, in surface pixels."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    button: MouseButton = MouseButton.PRIMARY
    ctrl: bool = False
    count: int = 1


class ClickOutcome(str, Enum):
    CREATED = "created"
    DUPLICATE = "duplicate"
    FAILED = "failed"
    DAY_OPENED = "day_opened"
    DESELECTED = "deselected"
    ZOOM_TOGGLED = "zoom_toggled"
    IGNORED = "ignored"


class ClickResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    outcome: ClickOutcome
    appointment: Appointment | None = None
    message: str | None = None  # user-facing error text for FAILED


class ClickHandler:
    """Applies clicks to a LayoutEngine and its appointment collaborator."""

    def __init__(self, engine: LayoutEngine, service: AppointmentService | None = None) -> None:
        self.engine = engine
        self.service = service if service is not None else engine.service

    def handle(self, click: MouseClick) -> ClickResult:
        if click.button is MouseButton.MIDDLE or click.ctrl:
            return self.create_at(click.x, click.y)
        if click.count > 1:
            return self.open_day(click.x, click.y)
        if self.engine.selected is not None:
            self.engine.clear_selection()
            return ClickResult(outcome=ClickOutcome.DESELECTED)
        return self.toggle_zoom(click.x, click.y)

    def create_at(self, x: float, y: float) -> ClickResult:
        """Create an empty appointment starting at the time under (x, y).

        Outside the grid the hit test falls back to the grid start, so the
        appointment lands at the first visible midnight.
        """
        start = self.engine.hit_test(x, y)
        end = start + timedelta(minutes=self.engine.config.new_appointment_minutes)
        try:
            appointment = self.service.create_appointment("", "", start, end)
        except DuplicateAppointmentError:
            log.debug("appointment_already_exists", start=start.isoformat())
            return ClickResult(outcome=ClickOutcome.DUPLICATE)
        except InvalidDateError as exc:
            log.warning("appointment_rejected", start=start.isoformat(), error=str(exc))
            return ClickResult(outcome=ClickOutcome.FAILED, message=f"Invalid date: {exc}")
        except AppointmentServiceError as exc:
            log.warning("appointment_create_failed", error=str(exc), error_type=type(exc).__name__)
            return ClickResult(outcome=ClickOutcome.FAILED, message=str(exc))

        self.engine.appointments_changed()
        self.engine.select_appointment(appointment)
        log.info("appointment_created_by_click", start=start.isoformat(), end=end.isoformat())
        return ClickResult(outcome=ClickOutcome.CREATED, appointment=appointment)

    def open_day(self, x: float, y: float) -> ClickResult:
        cell = self.engine.cell_at(x, y)
        if cell is None:
            return ClickResult(outcome=ClickOutcome.IGNORED)
        self.engine.set_view(ViewMode.DAY, cell.day_start)
        return ClickResult(outcome=ClickOutcome.DAY_OPENED)

    def toggle_zoom(self, x: float, y: float) -> ClickResult:
        mapper = self.engine.mapper
        self.engine.toggle_zoom(mapper.row_at(y), mapper.col_at(x))
        return ClickResult(outcome=ClickOutcome.ZOOM_TOGGLED)
