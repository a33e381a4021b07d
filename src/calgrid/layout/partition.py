"""Weighted partition of a numeric interval.

Every layout step (rows, columns, hour bands) splits some interval into
pieces proportional to a weight vector; this is the single place that does it.
"""

from collections.abc import Sequence
from math import isfinite

from calgrid.errors import InvalidArgumentError


def weighted_partition(
    weights: Sequence[float], start: float, end: float
) -> tuple[float, ...]:
    """Split [start, end] into len(weights) pieces sized by weight.

    Args:
        weights: One positive, finite weight per piece.
        start: Lower bound of the interval.
        end: Upper bound of the interval, strictly greater than start.

    Returns:
        len(weights) + 1 strictly increasing boundaries. The first is exactly
        start and the last exactly end; boundary i sits at
        start + (end - start) * sum(weights[:i]) / sum(weights).

    Raises:
        InvalidArgumentError: If weights is empty, contains a non-positive or
            non-finite value, or end <= start.
    """
    if len(weights) == 0:
        raise InvalidArgumentError("weighted partition needs at least one weight")
    for weight in weights:
        if not isfinite(weight) or weight <= 0:
            raise InvalidArgumentError(f"partition weights must be positive, got {weight!r}")
    if not end > start:
        raise InvalidArgumentError(f"partition interval is empty: [{start}, {end}]")

    total = float(sum(weights))
    span = end - start

    boundaries = [float(start)]
    cumulative = 0.0
    for weight in weights[:-1]:
        cumulative += weight
        boundaries.append(start + span * cumulative / total)
    boundaries.append(float(end))
    return tuple(boundaries)
