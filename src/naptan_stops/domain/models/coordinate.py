"""Coordinate domain model."""

import math
from dataclasses import dataclass

from naptan_stops.domain.errors import ValidationError


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        _check_range("latitude", self.latitude, 90.0)
        _check_range("longitude", self.longitude, 180.0)


def _check_range(field: str, value: float, limit: float) -> None:
    expected = f"a finite number in [-{limit:g}, {limit:g}]"
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(field, expected, value)
    if not math.isfinite(value) or not -limit <= value <= limit:
        raise ValidationError(field, expected, value)
