"""In-memory appointment collaborator.

A reference AppointmentService for tests, scripts and embedding apps that
have no backend of their own. It owns the validity rules the layout engine
deliberately leaves alone: a user must be logged in, an appointment must
end after it starts, and value-identical appointments are rejected.
"""

from collections.abc import Iterable
from datetime import datetime

from calgrid.errors import (
    DuplicateAppointmentError,
    InvalidDateError,
    NoSuchAppointmentError,
    NotAuthenticatedError,
)
from calgrid.logging import get_logger
from calgrid.models import Appointment, TimeRange

logger = get_logger(__name__)


class InMemoryAppointmentStore:
    """Keeps appointments in a set; results are returned sorted."""

    def __init__(
        self,
        appointments: Iterable[Appointment] = (),
        *,
        authenticated: bool = True,
    ) -> None:
        self._appointments: set[Appointment] = set(appointments)
        self.authenticated = authenticated

    def log_in(self) -> None:
        self.authenticated = True

    def log_out(self) -> None:
        self.authenticated = False

    def _require_login(self) -> None:
        if not self.authenticated:
            raise NotAuthenticatedError("not logged in")

    def all_appointments(self) -> list[Appointment]:
        self._require_login()
        return sorted(self._appointments)

    def query_appointments(self, time_range: TimeRange) -> list[Appointment]:
        """Appointments with start < range.end and end > range.start.

        Raises:
            NotAuthenticatedError: If no user is logged in.
        """
        self._require_login()
        found = [
            app
            for app in self._appointments
            if app.start < time_range.end and app.end > time_range.start
        ]
        logger.debug(
            "appointments_queried",
            start=time_range.start.isoformat(),
            end=time_range.end.isoformat(),
            count=len(found),
        )
        return sorted(found)

    def create_appointment(
        self, description: str, location: str, start: datetime, end: datetime
    ) -> Appointment:
        """Create and store an appointment.

        Raises:
            NotAuthenticatedError: If no user is logged in.
            InvalidDateError: If end is not after start.
            DuplicateAppointmentError: If an identical appointment exists.
        """
        self._require_login()
        if end <= start:
            raise InvalidDateError(
                f"end {end.isoformat()} is not after start {start.isoformat()}"
            )
        appointment = Appointment(
            description=description, location=location, start=start, end=end
        )
        self.add(appointment)
        return appointment

    def add(self, appointment: Appointment) -> None:
        self._require_login()
        if appointment in self._appointments:
            raise DuplicateAppointmentError(
                f"identical appointment already exists at {appointment.start.isoformat()}"
            )
        self._appointments.add(appointment)
        logger.info(
            "appointment_created",
            start=appointment.start.isoformat(),
            end=appointment.end.isoformat(),
        )

    def remove(self, appointment: Appointment) -> None:
        self._require_login()
        try:
            self._appointments.remove(appointment)
        except KeyError:
            raise NoSuchAppointmentError(
                f"no appointment at {appointment.start.isoformat()}"
            ) from None
        logger.info("appointment_removed", start=appointment.start.isoformat())
