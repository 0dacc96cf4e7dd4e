"""Trip planning service combining two selected stops with the geodesy calculator."""

import logging
from collections.abc import Iterable

from naptan_stops.application.services.geodesy_calculator import GeodesyCalculator
from naptan_stops.domain.errors import ValidationError
from naptan_stops.domain.models.travel_mode import TravelMode
from naptan_stops.domain.models.trip_selection import TripSelection
from naptan_stops.domain.models.trip_summary import TripSummary

logger = logging.getLogger(__name__)

DEFAULT_TRIP_MODES: tuple[TravelMode, ...] = (TravelMode.WALKING, TravelMode.BUS)


class TripPlanner:
    """Service for summarising the trip between a caller-held pair of stops."""

    def __init__(self, calculator: GeodesyCalculator | None = None) -> None:
        """Initialize with a geodesy calculator."""
        self._calculator = calculator or GeodesyCalculator()

    def summarize(
        self,
        selection: TripSelection,
        modes: Iterable[TravelMode | str] = DEFAULT_TRIP_MODES,
    ) -> TripSummary:
        """Compute distance and travel estimates for a complete selection.

        Args:
            selection: The origin and destination picked by the user.
            modes: Travel modes to estimate, in display order.

        Returns:
            TripSummary for the two stops.

        Raises:
            ValidationError: If either stop is missing or has out-of-range coordinates.
            InvalidArgumentError: If a mode is unknown.
        """
        if selection.from_stop is None:
            raise ValidationError("from_stop", "a selected origin stop", None)
        if selection.to_stop is None:
            raise ValidationError("to_stop", "a selected destination stop", None)

        distance = self._calculator.distance(
            selection.from_stop.coordinate, selection.to_stop.coordinate
        )
        estimates = self._calculator.estimate_all(distance.miles, modes)
        logger.info(
            f"Trip {selection.from_stop.atco_code} -> {selection.to_stop.atco_code}: "
            f"{distance.miles:.2f} miles"
        )
        return TripSummary(
            from_stop=selection.from_stop,
            to_stop=selection.to_stop,
            distance=distance,
            estimates=estimates,
        )
