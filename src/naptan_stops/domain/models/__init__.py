"""Domain models for NaPTAN stop search and trip distances."""

from naptan_stops.domain.models.coordinate import Coordinate
from naptan_stops.domain.models.distance_result import KILOMETRES_PER_MILE, DistanceResult
from naptan_stops.domain.models.error_details import ErrorDetails
from naptan_stops.domain.models.stop_record import (
    ACTIVE_STATUS,
    DEFAULT_STOP_TYPE,
    MISSING_ATCO_CODE,
    StopRecord,
)
from naptan_stops.domain.models.travel_estimate import TravelEstimate
from naptan_stops.domain.models.travel_mode import TRAVEL_SPEEDS_MPH, TravelMode
from naptan_stops.domain.models.trip_selection import TripSelection
from naptan_stops.domain.models.trip_summary import TripSummary

__all__ = [
    "ACTIVE_STATUS",
    "DEFAULT_STOP_TYPE",
    "KILOMETRES_PER_MILE",
    "MISSING_ATCO_CODE",
    "TRAVEL_SPEEDS_MPH",
    "Coordinate",
    "DistanceResult",
    "ErrorDetails",
    "StopRecord",
    "TravelEstimate",
    "TravelMode",
    "TripSelection",
    "TripSummary",
]
