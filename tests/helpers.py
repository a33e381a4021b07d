"""Dates and helpers shared by the test modules.

  2026-03-01 is a Sunday, so 2026-03-04 is a Wednesday.
  April 2026 has 30 days and starts on a Wednesday.
"""

from datetime import datetime

from calgrid.models import Appointment

WEDNESDAY = datetime(2026, 3, 4, 12, 0)
APRIL_15 = datetime(2026, 4, 15, 9, 30)

# 700 wide so every week column is 100px; 644 high so the grid gets 600px
# below the 44px header.
WIDTH = 700.0
HEIGHT = 644.0


def make_appointment(
    start: datetime, end: datetime, description: str = "", location: str = ""
) -> Appointment:
    return Appointment(description=description, location=location, start=start, end=end)
