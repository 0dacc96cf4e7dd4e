"""Normalisation of raw field values into StopRecord objects."""

import math
from collections.abc import Mapping
from typing import Any

from naptan_stops.domain.models.stop_record import (
    ACTIVE_STATUS,
    DEFAULT_STOP_TYPE,
    MISSING_ATCO_CODE,
    StopRecord,
)

# Structured feeds come in two schema variants; the first key present wins.
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "atco_code": ("ATCOCode", "atcoCode"),
    "common_name": ("CommonName", "name"),
    "locality_name": ("LocalityName", "locality"),
    "stop_type": ("StopType", "stopType"),
    "status": ("Status", "status"),
    "latitude": ("Latitude", "latitude"),
    "longitude": ("Longitude", "longitude"),
}


def parse_coordinate_value(value: Any) -> float:
    """Parse a latitude/longitude value, falling back to 0.0.

    Unparseable, empty and non-finite values all become 0.0. This is a lossy
    fallback: a stop with a broken coordinate is kept and sits at (0, 0).
    Underscore digit grouping ("1_000") counts as unparseable.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str) and "_" in value:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def text_or_default(value: Any, default: str) -> str:
    """Return value as text, or default when it is missing or empty."""
    if value is None:
        return default
    text = str(value)
    return text if text else default


class StopRecordNormalizer:
    """Builds canonical StopRecord objects from either feed shape."""

    @staticmethod
    def from_fields(
        atco_code: Any = None,
        common_name: Any = None,
        locality_name: Any = None,
        stop_type: Any = None,
        status: Any = None,
        latitude: Any = None,
        longitude: Any = None,
    ) -> StopRecord:
        """Build a StopRecord applying the sentinel policy to every field.

        Args:
            atco_code: ATCO code, "N/A" when absent.
            common_name: Display name, "" when absent.
            locality_name: Locality, "" when absent.
            stop_type: Category label, "Bus Stop" when absent.
            status: Status label, "Active" when absent.
            latitude: Degrees, 0.0 when unparseable.
            longitude: Degrees, 0.0 when unparseable.

        Returns:
            Normalised StopRecord.
        """
        return StopRecord(
            atco_code=text_or_default(atco_code, MISSING_ATCO_CODE),
            common_name=text_or_default(common_name, ""),
            locality_name=text_or_default(locality_name, ""),
            stop_type=text_or_default(stop_type, DEFAULT_STOP_TYPE),
            status=text_or_default(status, ACTIVE_STATUS),
            latitude=parse_coordinate_value(latitude),
            longitude=parse_coordinate_value(longitude),
        )

    @staticmethod
    def from_mapping(data: Mapping[str, Any]) -> StopRecord:
        """Build a StopRecord from a structured (JSON-derived) record.

        Accepts both upstream naming variants, e.g. ``ATCOCode`` and ``atcoCode``.
        """
        fields = {
            field: StopRecordNormalizer._first_present(data, aliases)
            for field, aliases in FIELD_ALIASES.items()
        }
        return StopRecordNormalizer.from_fields(**fields)

    @staticmethod
    def _first_present(data: Mapping[str, Any], aliases: tuple[str, ...]) -> Any:
        for key in aliases:
            value = data.get(key)
            if value is not None and value != "":
                return value
        return None
