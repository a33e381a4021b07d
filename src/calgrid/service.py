"""Contract of the appointment collaborator the layout engine talks to."""

from datetime import datetime
from typing import Protocol

from calgrid.models import Appointment, TimeRange


class AppointmentService(Protocol):
    """Source of appointments and the authority on their validity.

    Implementations raise AppointmentServiceError subclasses on failure.
    """

    def query_appointments(self, time_range: TimeRange) -> list[Appointment]:
        """Appointments overlapping [time_range.start, time_range.end)."""
        ...

    def create_appointment(
        self, description: str, location: str, start: datetime, end: datetime
    ) -> Appointment:
        """Validate and store a new appointment, returning it."""
        ...
