"""Stop record domain model."""

from dataclasses import dataclass

from naptan_stops.domain.models.coordinate import Coordinate

MISSING_ATCO_CODE = "N/A"
DEFAULT_STOP_TYPE = "Bus Stop"
ACTIVE_STATUS = "Active"


@dataclass(frozen=True)
class StopRecord:
    """One NaPTAN access node (bus stop) entry from the dataset."""

    atco_code: str
    common_name: str
    locality_name: str
    stop_type: str = DEFAULT_STOP_TYPE
    status: str = ACTIVE_STATUS
    latitude: float = 0.0
    longitude: float = 0.0

    @property
    def is_active(self) -> bool:
        """Whether the status is "Active", compared case-insensitively."""
        return self.status.lower() == ACTIVE_STATUS.lower()

    @property
    def coordinate(self) -> Coordinate:
        """Location of the stop; raises ValidationError if out of range."""
        return Coordinate(latitude=self.latitude, longitude=self.longitude)

    @property
    def display_label(self) -> str:
        return f"{self.common_name} ({self.atco_code})"
