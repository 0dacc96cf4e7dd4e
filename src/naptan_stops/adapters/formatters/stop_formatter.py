"""Plain-text formatter for stops and trip summaries."""

from naptan_stops.domain.contracts.stop_formatter import StopFormatterProtocol
from naptan_stops.domain.models.stop_record import StopRecord
from naptan_stops.domain.models.trip_summary import TripSummary

NO_RESULTS_SUGGESTIONS = ("London", "Manchester", "Birmingham", "Leeds")


def format_coordinates(latitude: float, longitude: float) -> str:
    """Format as e.g. "51.5074°N, 0.1278°W"."""
    lat_hemisphere = "N" if latitude >= 0 else "S"
    lon_hemisphere = "E" if longitude >= 0 else "W"
    return f"{abs(latitude):.4f}°{lat_hemisphere}, {abs(longitude):.4f}°{lon_hemisphere}"


class StopFormatter(StopFormatterProtocol):
    """Formats stops and trips for terminal output."""

    def format_stop(self, stop: StopRecord) -> str:
        status_label = "active" if stop.is_active else "inactive"
        lines = [
            stop.common_name,
            f"  ATCO Code:   {stop.atco_code}",
            f"  Type:        {stop.stop_type}",
            f"  Locality:    {stop.locality_name}",
            f"  Status:      {stop.status} ({status_label})",
            f"  Coordinates: {format_coordinates(stop.latitude, stop.longitude)}",
        ]
        return "\n".join(lines)

    def format_search_results(self, stops: list[StopRecord]) -> str:
        if not stops:
            return "No stops found\nTry searching for: " + ", ".join(NO_RESULTS_SUGGESTIONS)

        cards = [f"[{index}] {self.format_stop(stop)}" for index, stop in enumerate(stops, start=1)]
        return f"Found {len(stops)} stop(s):\n\n" + "\n\n".join(cards)

    def format_trip(self, summary: TripSummary) -> str:
        lines = [
            f"{summary.distance.miles:.2f} miles",
            f"{summary.distance.kilometres:.2f} km",
            "",
        ]
        lines.extend(
            f"{estimate.mode.label}: ~{estimate.minutes} minutes" for estimate in summary.estimates
        )
        lines.extend(
            [
                "",
                f"From: {summary.from_stop.display_label}",
                f"To:   {summary.to_stop.display_label}",
            ]
        )
        return "\n".join(lines)
