"""Tests for click dispatch on the calendar surface."""

from datetime import datetime, timedelta

import pytest

from calgrid.config import LayoutConfig
from calgrid.engine import LayoutEngine
from calgrid.interaction import ClickHandler, ClickOutcome, MouseButton, MouseClick
from calgrid.models import Appointment, ViewMode, ZoomState
from calgrid.store import InMemoryAppointmentStore

from .helpers import HEIGHT, WEDNESDAY, WIDTH, make_appointment

# Thursday column, 25px per hour in an empty week: y = 44 + 25 * 13 is 13:00
THURSDAY_1PM = (450.0, 44.0 + 25 * 13)


@pytest.fixture
def empty_store() -> InMemoryAppointmentStore:
    return InMemoryAppointmentStore()


@pytest.fixture
def engine(empty_store: InMemoryAppointmentStore, config: LayoutConfig) -> LayoutEngine:
    return LayoutEngine(
        empty_store, WIDTH, HEIGHT, mode=ViewMode.WEEK, anchor=WEDNESDAY, config=config
    )


@pytest.fixture
def handler(engine: LayoutEngine) -> ClickHandler:
    return ClickHandler(engine)


def test_ctrl_click_creates_eighty_minute_appointment(
    handler: ClickHandler, engine: LayoutEngine, empty_store: InMemoryAppointmentStore
) -> None:
    x, y = THURSDAY_1PM

    result = handler.handle(MouseClick(x=x, y=y, ctrl=True))

    assert result.outcome is ClickOutcome.CREATED
    created = result.appointment
    assert created.start == datetime(2026, 3, 5, 13)
    assert created.end - created.start == timedelta(minutes=80)
    assert empty_store.all_appointments() == [created]
    assert engine.selected == created
    assert [box.selected for box in engine.snapshot.boxes] == [True]


def test_middle_click_creates_appointment(handler: ClickHandler) -> None:
    x, y = THURSDAY_1PM

    result = handler.handle(MouseClick(x=x, y=y, button=MouseButton.MIDDLE))

    assert result.outcome is ClickOutcome.CREATED


def test_creating_an_existing_appointment_is_not_an_error(
    handler: ClickHandler, engine: LayoutEngine, empty_store: InMemoryAppointmentStore
) -> None:
    x, y = THURSDAY_1PM
    start = engine.hit_test(x, y)
    empty_store.add(make_appointment(start, start + timedelta(minutes=80)))

    result = handler.handle(MouseClick(x=x, y=y, ctrl=True))

    assert result.outcome is ClickOutcome.DUPLICATE
    assert result.message is None


def test_create_when_logged_out_reports_failure(
    handler: ClickHandler, empty_store: InMemoryAppointmentStore
) -> None:
    empty_store.log_out()
    x, y = THURSDAY_1PM

    result = handler.handle(MouseClick(x=x, y=y, ctrl=True))

    assert result.outcome is ClickOutcome.FAILED
    assert result.message == "not logged in"


def test_create_with_rejected_dates_reports_invalid_date(engine: LayoutEngine) -> None:
    class RejectingService:
        def query_appointments(self, time_range):
            return []

        def create_appointment(self, description, location, start, end):
            from calgrid.errors import InvalidDateError

            raise InvalidDateError("in the past")

    handler = ClickHandler(engine, RejectingService())
    x, y = THURSDAY_1PM

    result = handler.handle(MouseClick(x=x, y=y, ctrl=True))

    assert result.outcome is ClickOutcome.FAILED
    assert result.message == "Invalid date: in the past"


def test_double_click_opens_day_view(handler: ClickHandler, engine: LayoutEngine) -> None:
    engine.toggle_zoom(0, 4)
    x, y = THURSDAY_1PM

    result = handler.handle(MouseClick(x=x, y=y, count=2))

    assert result.outcome is ClickOutcome.DAY_OPENED
    assert engine.mode is ViewMode.DAY
    assert engine.snapshot.grid.grid_start == datetime(2026, 3, 5)
    assert engine.zoom is None


def test_double_click_outside_grid_is_ignored(handler: ClickHandler, engine: LayoutEngine) -> None:
    result = handler.handle(MouseClick(x=100.0, y=10.0, count=2))

    assert result.outcome is ClickOutcome.IGNORED
    assert engine.mode is ViewMode.WEEK


def test_click_with_selection_only_deselects(
    handler: ClickHandler, engine: LayoutEngine, empty_store: InMemoryAppointmentStore
) -> None:
    appointment: Appointment = empty_store.create_appointment(
        "", "", datetime(2026, 3, 2, 9), datetime(2026, 3, 2, 10)
    )
    engine.appointments_changed()
    engine.select_appointment(appointment)

    result = handler.handle(MouseClick(x=450.0, y=300.0))

    assert result.outcome is ClickOutcome.DESELECTED
    assert engine.selected is None
    assert engine.zoom is None


def test_plain_clicks_toggle_zoom(handler: ClickHandler, engine: LayoutEngine) -> None:
    assert handler.handle(MouseClick(x=450.0, y=300.0)).outcome is ClickOutcome.ZOOM_TOGGLED
    assert engine.zoom == ZoomState(row=0, col=4)

    # the zoomed column is now wider; click well inside it again
    zoomed_x = (engine.snapshot.col_boundaries[4] + engine.snapshot.col_boundaries[5]) / 2
    handler.handle(MouseClick(x=zoomed_x, y=300.0))
    assert engine.zoom is None


def test_click_in_header_clears_zoom(handler: ClickHandler, engine: LayoutEngine) -> None:
    engine.toggle_zoom(0, 2)

    handler.handle(MouseClick(x=250.0, y=10.0))

    assert engine.zoom is None
