"""Great-circle distance and travel time estimates."""

import math
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, localcontext

from naptan_stops.domain.errors import InvalidArgumentError, ValidationError
from naptan_stops.domain.models.coordinate import Coordinate
from naptan_stops.domain.models.distance_result import DistanceResult
from naptan_stops.domain.models.travel_estimate import TravelEstimate
from naptan_stops.domain.models.travel_mode import TravelMode

EARTH_RADIUS_MILES = 3959.0

# Digits needed to hold the exact value of any finite float times 60.
DECIMAL_PRECISION = 1100


def haversine_miles(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance between two points on a sphere of radius 3959 miles."""
    d_lat = math.radians(b.latitude - a.latitude)
    d_lon = math.radians(b.longitude - a.longitude)

    sin_half_lat = math.sin(d_lat / 2)
    sin_half_lon = math.sin(d_lon / 2)
    cos_a = math.cos(math.radians(a.latitude))
    cos_b = math.cos(math.radians(b.latitude))

    h = sin_half_lat * sin_half_lat + cos_a * cos_b * sin_half_lon * sin_half_lon
    # Rounding can push h just past 1 for near-antipodal points.
    h = min(h, 1.0)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_MILES * c


def round_half_up(value: float | Decimal) -> int:
    """Round to the nearest integer, ties away from zero."""
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def travel_minutes(distance_miles: float, speed_mph: float) -> int:
    """Whole minutes to cover a distance at a speed, computed exactly before rounding."""
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        return round_half_up(Decimal(distance_miles) * 60 / Decimal(speed_mph))


def resolve_mode(mode: TravelMode | str) -> TravelMode:
    """Turn a mode name into a TravelMode.

    Raises:
        InvalidArgumentError: If the mode is not one of walking, cycling or bus.
    """
    if isinstance(mode, TravelMode):
        return mode
    expected = "one of " + ", ".join(m.value for m in TravelMode)
    if not isinstance(mode, str):
        raise InvalidArgumentError("mode", expected, mode)
    try:
        return TravelMode(mode)
    except ValueError as e:
        raise InvalidArgumentError("mode", expected, mode) from e


class GeodesyCalculator:
    """Computes distances between coordinates and derives travel times."""

    def distance(self, a: Coordinate, b: Coordinate) -> DistanceResult:
        """Haversine distance between two coordinates.

        Identical coordinates yield exactly 0.0 miles.
        """
        return DistanceResult.from_miles(haversine_miles(a, b))

    def estimate_travel_time(self, distance_miles: float, mode: TravelMode | str) -> int:
        """Estimated minutes to cover a distance at the mode's fixed speed.

        Args:
            distance_miles: Non-negative distance in miles.
            mode: walking (3 mph), cycling (12 mph) or bus (15 mph).

        Returns:
            Whole minutes, rounded half-up.

        Raises:
            InvalidArgumentError: If the mode is unknown.
            ValidationError: If the distance is negative or not finite.
        """
        travel_mode = resolve_mode(mode)
        if (
            isinstance(distance_miles, bool)
            or not isinstance(distance_miles, (int, float))
            or not math.isfinite(distance_miles)
            or distance_miles < 0
        ):
            raise ValidationError("distance_miles", "a finite, non-negative number", distance_miles)
        return travel_minutes(distance_miles, travel_mode.speed_mph)

    def estimate(self, distance_miles: float, mode: TravelMode | str) -> TravelEstimate:
        travel_mode = resolve_mode(mode)
        return TravelEstimate(
            mode=travel_mode, minutes=self.estimate_travel_time(distance_miles, travel_mode)
        )

    def estimate_all(
        self, distance_miles: float, modes: Iterable[TravelMode | str]
    ) -> tuple[TravelEstimate, ...]:
        return tuple(self.estimate(distance_miles, mode) for mode in modes)
