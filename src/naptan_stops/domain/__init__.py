"""Domain layer - core models, errors and ports."""

from naptan_stops.domain.errors import (
    DataSourceError,
    InvalidArgumentError,
    NaptanStopsError,
    ParseError,
    ValidationError,
)
from naptan_stops.domain.models import (
    Coordinate,
    DistanceResult,
    StopRecord,
    TravelEstimate,
    TravelMode,
    TripSelection,
    TripSummary,
)
from naptan_stops.domain.ports import StopDataSource

__all__ = [
    "Coordinate",
    "DataSourceError",
    "DistanceResult",
    "InvalidArgumentError",
    "NaptanStopsError",
    "ParseError",
    "StopDataSource",
    "StopRecord",
    "TravelEstimate",
    "TravelMode",
    "TripSelection",
    "TripSummary",
    "ValidationError",
]
