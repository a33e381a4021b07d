"""Fragmenter - clips appointments into per-day pieces."""

from collections.abc import Iterable, Sequence

from calgrid.models import Appointment, AppointmentFragment, DayCell


def clip_to_cell(appointment: Appointment, cell: DayCell) -> AppointmentFragment | None:
    """Return the part of appointment inside cell, or None if they don't overlap."""
    if not cell.overlaps(appointment.start, appointment.end):
        return None
    start = max(appointment.start, cell.day_start)
    end = min(appointment.end, cell.day_end)
    if start >= end:
        # zero-length appointment sitting inside the day
        return None
    return AppointmentFragment(appointment=appointment, cell=cell, start=start, end=end)


def fragment_appointments(
    appointments: Iterable[Appointment], cells: Sequence[DayCell]
) -> tuple[AppointmentFragment, ...]:
    """Clip every appointment against every cell it overlaps.

    An appointment spanning several days yields one fragment per overlapped
    cell, in cell order. Appointments keep their input order. The result is
    a pure function of the inputs.

    Args:
        appointments: Appointments to place.
        cells: Day-cells in row-major order.

    Returns:
        Fragments grouped by appointment, each group in cell order.
    """
    fragments: list[AppointmentFragment] = []
    for appointment in appointments:
        for cell in cells:
            fragment = clip_to_cell(appointment, cell)
            if fragment is not None:
                fragments.append(fragment)
    return tuple(fragments)


def fragments_in_row(
    fragments: Iterable[AppointmentFragment], row: int
) -> list[AppointmentFragment]:
    return [fragment for fragment in fragments if fragment.row == row]
