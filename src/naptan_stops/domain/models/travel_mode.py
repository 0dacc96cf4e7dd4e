"""Travel mode domain model."""

from enum import Enum


class TravelMode(str, Enum):
    """Transport modes with a fixed average speed in miles per hour."""

    WALKING = "walking"
    CYCLING = "cycling"
    BUS = "bus"

    @property
    def speed_mph(self) -> float:
        return TRAVEL_SPEEDS_MPH[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()


TRAVEL_SPEEDS_MPH: dict[TravelMode, float] = {
    TravelMode.WALKING: 3.0,
    TravelMode.CYCLING: 12.0,
    TravelMode.BUS: 15.0,
}
