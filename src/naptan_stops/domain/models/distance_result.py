"""Distance result domain model."""

from dataclasses import dataclass

KILOMETRES_PER_MILE = 1.60934


@dataclass(frozen=True)
class DistanceResult:
    """Great-circle distance between two coordinates in miles and kilometres."""

    miles: float
    kilometres: float

    @classmethod
    def from_miles(cls, miles: float) -> "DistanceResult":
        """Build a result whose kilometres are derived from miles."""
        return cls(miles=miles, kilometres=miles * KILOMETRES_PER_MILE)
