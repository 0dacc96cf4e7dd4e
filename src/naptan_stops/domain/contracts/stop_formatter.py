"""Protocol for rendering stops and trips as text."""

from typing import Protocol

from naptan_stops.domain.models.stop_record import StopRecord
from naptan_stops.domain.models.trip_summary import TripSummary


class StopFormatterProtocol(Protocol):
    """Protocol for turning matched stops and trip summaries into display text."""

    def format_stop(self, stop: StopRecord) -> str:
        """Format a single stop as a multi-line card."""
        ...

    def format_search_results(self, stops: list[StopRecord]) -> str:
        """Format a result list, or a "no stops found" hint when it is empty."""
        ...

    def format_trip(self, summary: TripSummary) -> str:
        """Format distance and travel estimates between two stops."""
        ...
