"""Temporal grid layout engine for day, week and month calendar views.

Computes where appointment boxes go on a zoomable calendar grid and maps
surface pixels back to calendar time. Rendering, persistence and
authentication stay with the embedding application.
"""

from calgrid.engine import LayoutEngine, compute_layout
from calgrid.errors import CalendarLayoutError, InvalidArgumentError
from calgrid.interaction import ClickHandler, MouseClick
from calgrid.models import Appointment, LayoutSnapshot, TimeRange, ViewMode
from calgrid.store import InMemoryAppointmentStore

__all__ = [
    "Appointment",
    "CalendarLayoutError",
    "ClickHandler",
    "InMemoryAppointmentStore",
    "InvalidArgumentError",
    "LayoutEngine",
    "LayoutSnapshot",
    "MouseClick",
    "TimeRange",
    "ViewMode",
    "compute_layout",
]
