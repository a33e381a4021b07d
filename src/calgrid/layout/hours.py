"""HourAxis - per-row vertical partition into 24 hour bands.

Hours touched by an appointment fragment anywhere in a row are
"interesting" and get hour_weight times the height of a quiet hour, so busy
parts of the day get most of the space.
"""

from collections.abc import Iterable
from math import ceil, floor

from calgrid.layout.partition import weighted_partition
from calgrid.models import HOURS_PER_DAY, ONE_HOUR, AppointmentFragment, HourAxis


def interesting_hours(fragments: Iterable[AppointmentFragment]) -> tuple[bool, ...]:
    """Flag every hour of the day touched by at least one fragment.

    For a fragment, hours floor(start) through min(23, ceil(end)) are flagged,
    with start and end measured in hours from the fragment's day start.
    """
    interesting = [False] * HOURS_PER_DAY
    for fragment in fragments:
        day_start = fragment.cell.day_start
        first = floor((fragment.start - day_start) / ONE_HOUR)
        last = min(HOURS_PER_DAY - 1, ceil((fragment.end - day_start) / ONE_HOUR))
        for hour in range(max(first, 0), last + 1):
            interesting[hour] = True
    return tuple(interesting)


def build_hour_axis(
    row: int, fragments: Iterable[AppointmentFragment], hour_weight: float
) -> HourAxis:
    """Compute the hour bands of one grid row.

    Args:
        row: Grid row index.
        fragments: Fragments whose cells lie in this row.
        hour_weight: Weight of an interesting hour; quiet hours weigh 1.0.

    Returns:
        HourAxis with 25 boundaries in [0, 1]. A row without fragments is
        partitioned uniformly.
    """
    interesting = interesting_hours(fragments)
    weights = [hour_weight if flag else 1.0 for flag in interesting]
    return HourAxis(
        row=row,
        interesting=interesting,
        fractions=weighted_partition(weights, 0.0, 1.0),
    )
