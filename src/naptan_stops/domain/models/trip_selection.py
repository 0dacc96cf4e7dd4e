"""Trip selection domain model."""

from dataclasses import dataclass, replace

from naptan_stops.domain.models.stop_record import StopRecord


@dataclass(frozen=True)
class TripSelection:
    """The stops a user picked as start and end of a trip.

    Held by the caller and passed around explicitly. Selecting a stop returns
    a new selection: the first pick becomes the origin, every later pick
    replaces the destination.
    """

    from_stop: StopRecord | None = None
    to_stop: StopRecord | None = None

    def select(self, stop: StopRecord) -> "TripSelection":
        if self.from_stop is None:
            return replace(self, from_stop=stop)
        return replace(self, to_stop=stop)

    @property
    def is_complete(self) -> bool:
        return self.from_stop is not None and self.to_stop is not None
