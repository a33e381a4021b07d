"""Shared fixtures for calgrid tests."""

from datetime import datetime

import pytest

from calgrid.config import LayoutConfig
from calgrid.models import Appointment
from calgrid.store import InMemoryAppointmentStore

from .helpers import make_appointment


@pytest.fixture
def config() -> LayoutConfig:
    """Default configuration, isolated from any local .env file."""
    return LayoutConfig(_env_file=None)


@pytest.fixture
def monday_meeting() -> Appointment:
    return make_appointment(
        datetime(2026, 3, 2, 9, 0), datetime(2026, 3, 2, 10, 0), "Standup", "Room 1"
    )


@pytest.fixture
def store(monday_meeting: Appointment) -> InMemoryAppointmentStore:
    return InMemoryAppointmentStore([monday_meeting])
