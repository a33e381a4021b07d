"""Error hierarchy for the calendar layout engine.

Two families live here. Programming errors (bad weights, inverted ranges,
empty grid dimensions) raise InvalidArgumentError and are never recovered.
Failures of the appointment collaborator raise AppointmentServiceError
subclasses; the layout engine treats a failed query as an empty result,
and the click handler turns a failed creation into user feedback.

Example usage:
    try:
        store.create_appointment("", "", start, end)
    except DuplicateAppointmentError:
        pass  # already there, nothing to report
    except AppointmentServiceError as exc:
        show_error(str(exc))
"""


class CalendarLayoutError(Exception):
    """Base exception for all calgrid errors."""

    pass


class InvalidArgumentError(CalendarLayoutError):
    """A layout primitive was called with arguments it cannot honour.

    Examples: an empty weight vector, a non-positive weight, a time range
    whose end is not after its start, a zero-sized drawing surface.
    """

    pass


class AppointmentServiceError(CalendarLayoutError):
    """The appointment collaborator refused or failed a request."""

    pass


class NotAuthenticatedError(AppointmentServiceError):
    """No user is logged in, so appointments cannot be listed or created."""

    pass


class InvalidDateError(AppointmentServiceError):
    """The requested appointment interval is not acceptable (end <= start)."""

    pass


class DuplicateAppointmentError(AppointmentServiceError):
    """An identical appointment already exists.

    Identity is by value: same start, end, location and description.
    """

    pass


class NoSuchAppointmentError(AppointmentServiceError):
    """The appointment to remove is not known to the collaborator."""

    pass
