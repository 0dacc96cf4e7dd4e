"""Tests for domain models."""

import math

import pytest

from naptan_stops.domain.errors import ValidationError
from naptan_stops.domain.models import (
    Coordinate,
    DistanceResult,
    ErrorDetails,
    StopRecord,
    TravelMode,
    TripSelection,
)


def _stop(atco_code: str = "490000173RF", status: str = "Active") -> StopRecord:
    return StopRecord(
        atco_code=atco_code,
        common_name="Oxford Street",
        locality_name="London",
        stop_type="BCT",
        status=status,
        latitude=51.5154,
        longitude=-0.1410,
    )


def test_stop_record_creation() -> None:
    """Given stop data, when creating a StopRecord, then all fields are set correctly."""
    stop = _stop()

    assert stop.atco_code == "490000173RF"
    assert stop.common_name == "Oxford Street"
    assert stop.locality_name == "London"
    assert stop.stop_type == "BCT"
    assert stop.status == "Active"
    assert stop.latitude == 51.5154
    assert stop.longitude == -0.1410


def test_stop_record_defaults() -> None:
    """Given only identity fields, when creating a StopRecord, then sentinel defaults apply."""
    stop = StopRecord(atco_code="N/A", common_name="", locality_name="")

    assert stop.stop_type == "Bus Stop"
    assert stop.status == "Active"
    assert stop.latitude == 0.0
    assert stop.longitude == 0.0


def test_stop_record_is_frozen() -> None:
    """Given a StopRecord, when trying to modify it, then raises AttributeError."""
    stop = _stop()

    with pytest.raises(AttributeError):
        stop.common_name = "Regent Street"  # type: ignore[misc]


@pytest.mark.parametrize("status", ["Active", "active", "ACTIVE"])
def test_stop_record_is_active_ignores_case(status: str) -> None:
    """Given any casing of "Active", when checking is_active, then returns True."""
    assert _stop(status=status).is_active is True


def test_stop_record_inactive_status() -> None:
    """Given a non-active status, when checking is_active, then returns False."""
    assert _stop(status="Inactive").is_active is False


def test_stop_record_display_label() -> None:
    """Given a stop, when asking for its label, then name and ATCO code are combined."""
    assert _stop().display_label == "Oxford Street (490000173RF)"


def test_stop_record_coordinate() -> None:
    """Given a stop, when asking for its coordinate, then latitude and longitude are used."""
    assert _stop().coordinate == Coordinate(latitude=51.5154, longitude=-0.1410)


def test_coordinate_accepts_boundaries() -> None:
    """Given boundary values, when creating a Coordinate, then no error is raised."""
    Coordinate(latitude=90.0, longitude=180.0)
    Coordinate(latitude=-90.0, longitude=-180.0)


@pytest.mark.parametrize(
    ("latitude", "longitude", "field"),
    [
        (90.0001, 0.0, "latitude"),
        (-91.0, 0.0, "latitude"),
        (0.0, 180.5, "longitude"),
        (0.0, -200.0, "longitude"),
        (math.nan, 0.0, "latitude"),
        (0.0, math.inf, "longitude"),
    ],
)
def test_coordinate_rejects_out_of_range(latitude: float, longitude: float, field: str) -> None:
    """Given an out-of-range value, when creating a Coordinate, then ValidationError names the field."""
    with pytest.raises(ValidationError) as exc_info:
        Coordinate(latitude=latitude, longitude=longitude)

    assert exc_info.value.field == field
    assert "[-" in exc_info.value.expected


def test_coordinate_rejects_non_numeric() -> None:
    """Given a string latitude, when creating a Coordinate, then ValidationError is raised."""
    with pytest.raises(ValidationError):
        Coordinate(latitude="51.5", longitude=0.0)  # type: ignore[arg-type]


def test_validation_error_is_value_error() -> None:
    """Given a ValidationError, when caught as ValueError, then it is handled."""
    with pytest.raises(ValueError, match="Invalid latitude"):
        Coordinate(latitude=100.0, longitude=0.0)


def test_distance_result_from_miles() -> None:
    """Given miles, when building a DistanceResult, then kilometres use the fixed factor."""
    result = DistanceResult.from_miles(10.0)

    assert result.miles == 10.0
    assert result.kilometres == 10.0 * 1.60934


def test_travel_mode_speeds() -> None:
    """Given each travel mode, when reading its speed, then the fixed table is used."""
    assert TravelMode.WALKING.speed_mph == 3.0
    assert TravelMode.CYCLING.speed_mph == 12.0
    assert TravelMode.BUS.speed_mph == 15.0
    assert TravelMode("bus") is TravelMode.BUS
    assert TravelMode.WALKING.label == "Walking"


def test_trip_selection_first_pick_is_origin() -> None:
    """Given an empty selection, when selecting a stop, then it becomes the origin."""
    stop = _stop()

    selection = TripSelection().select(stop)

    assert selection.from_stop == stop
    assert selection.to_stop is None
    assert selection.is_complete is False


def test_trip_selection_later_picks_replace_destination() -> None:
    """Given a complete selection, when selecting again, then only the destination changes."""
    first, second, third = _stop("A"), _stop("B"), _stop("C")

    selection = TripSelection().select(first).select(second).select(third)

    assert selection.from_stop == first
    assert selection.to_stop == third
    assert selection.is_complete is True


def test_trip_selection_select_returns_new_value() -> None:
    """Given a selection, when selecting a stop, then the original selection is unchanged."""
    original = TripSelection()

    original.select(_stop())

    assert original.from_stop is None


def test_error_details_describe() -> None:
    """Given error details with and without status, when describing, then format matches."""
    assert ErrorDetails(status_code=503, reason="Service Unavailable").describe() == (
        "HTTP 503: Service Unavailable"
    )
    assert ErrorDetails(reason="timeout").describe() == "timeout"
