"""Travel estimate domain model."""

from dataclasses import dataclass

from naptan_stops.domain.models.travel_mode import TravelMode


@dataclass(frozen=True)
class TravelEstimate:
    """Estimated travel time for a distance using one transport mode."""

    mode: TravelMode
    minutes: int
