"""Pure layout primitives: partition, grid, fragments, hour axes, mapping."""

from calgrid.layout.fragments import fragment_appointments
from calgrid.layout.grid import build_grid
from calgrid.layout.hours import build_hour_axis
from calgrid.layout.mapping import CoordinateMapper
from calgrid.layout.partition import weighted_partition

__all__ = [
    "CoordinateMapper",
    "build_grid",
    "build_hour_axis",
    "fragment_appointments",
    "weighted_partition",
]
