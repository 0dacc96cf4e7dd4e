"""Trip summary domain model."""

from dataclasses import dataclass

from naptan_stops.domain.models.distance_result import DistanceResult
from naptan_stops.domain.models.stop_record import StopRecord
from naptan_stops.domain.models.travel_estimate import TravelEstimate


@dataclass(frozen=True)
class TripSummary:
    """Distance and travel estimates between two selected stops."""

    from_stop: StopRecord
    to_stop: StopRecord
    distance: DistanceResult
    estimates: tuple[TravelEstimate, ...]
