"""Tests for the per-row hour axis."""

from datetime import datetime

import pytest

from calgrid.layout.fragments import fragment_appointments
from calgrid.layout.grid import build_grid
from calgrid.layout.hours import build_hour_axis, interesting_hours
from calgrid.models import ViewMode

from .helpers import WEDNESDAY, make_appointment


def _day_fragments(*appointments):
    grid = build_grid(ViewMode.DAY, WEDNESDAY)
    return fragment_appointments(appointments, grid.iter_cells())


def test_fragment_from_14_to_15_30_marks_hours_14_and_15() -> None:
    fragments = _day_fragments(
        make_appointment(datetime(2026, 3, 4, 14), datetime(2026, 3, 4, 15, 30))
    )

    interesting = interesting_hours(fragments)

    assert interesting[14] and interesting[15]
    assert not interesting[13]
    assert not any(interesting[:14])


def test_interesting_hours_get_more_width() -> None:
    fragments = _day_fragments(
        make_appointment(datetime(2026, 3, 4, 14), datetime(2026, 3, 4, 15, 30))
    )

    axis = build_hour_axis(0, fragments, hour_weight=10.0)
    widths = [b - a for a, b in zip(axis.fractions, axis.fractions[1:])]

    assert widths[14] > widths[3]
    assert widths[15] > widths[3]
    assert widths[14] == pytest.approx(10 * widths[3])


def test_empty_row_is_uniform() -> None:
    axis = build_hour_axis(0, [], hour_weight=10.0)

    assert axis.interesting == (False,) * 24
    assert axis.fractions[0] == 0.0
    assert axis.fractions[24] == 1.0
    for hour, value in enumerate(axis.fractions):
        assert value == pytest.approx(hour / 24)


def test_fractions_strictly_increase() -> None:
    fragments = _day_fragments(
        make_appointment(datetime(2026, 3, 4, 0, 10), datetime(2026, 3, 4, 2)),
        make_appointment(datetime(2026, 3, 4, 22), datetime(2026, 3, 5, 3)),
    )

    axis = build_hour_axis(0, fragments, hour_weight=1000.0)

    assert len(axis.fractions) == 25
    assert all(a < b for a, b in zip(axis.fractions, axis.fractions[1:]))


def test_fragment_running_to_midnight_marks_last_hour_only_once() -> None:
    fragments = _day_fragments(
        make_appointment(datetime(2026, 3, 4, 23), datetime(2026, 3, 5, 1))
    )

    interesting = interesting_hours(fragments)

    assert interesting[23]
    assert sum(interesting) == 1


def test_same_fragments_give_same_axis() -> None:
    appointment = make_appointment(datetime(2026, 3, 4, 8), datetime(2026, 3, 4, 9, 45))

    first = build_hour_axis(0, _day_fragments(appointment), hour_weight=10.0)
    second = build_hour_axis(0, _day_fragments(appointment), hour_weight=10.0)

    assert first == second


def test_hour_fraction_lookup_round_trips() -> None:
    fragments = _day_fragments(
        make_appointment(datetime(2026, 3, 4, 9), datetime(2026, 3, 4, 11, 20))
    )
    axis = build_hour_axis(0, fragments, hour_weight=10.0)

    for hour in (0.0, 0.5, 8.99, 9.0, 10.25, 11.5, 17.75, 23.9, 24.0):
        assert axis.fraction_to_hour(axis.hour_to_fraction(hour)) == pytest.approx(hour)


def test_hour_fraction_lookup_clamps() -> None:
    axis = build_hour_axis(0, [], hour_weight=10.0)

    assert axis.hour_to_fraction(-3.0) == 0.0
    assert axis.hour_to_fraction(30.0) == 1.0
    assert axis.fraction_to_hour(-0.2) == 0.0
    assert axis.fraction_to_hour(1.5) == 24.0
