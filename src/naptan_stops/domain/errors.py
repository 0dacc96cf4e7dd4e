"""Error taxonomy for stop matching, geodesy and data loading."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from naptan_stops.domain.models.error_details import ErrorDetails


class NaptanStopsError(Exception):
    """Base class for all errors raised by naptan_stops."""


class ValidationError(NaptanStopsError, ValueError):
    """Caller-correctable input error (empty query, bad coordinate, unknown mode).

    Attributes:
        field: Name of the offending field or argument.
        expected: Human readable description of what was expected.
    """

    def __init__(self, field: str, expected: str, value: object = None) -> None:
        self.field = field
        self.expected = expected
        self.value = value
        super().__init__(f"Invalid {field}: expected {expected}, got {value!r}")


class InvalidArgumentError(ValidationError):
    """An argument outside a fixed enumeration, such as an unknown travel mode."""


class ParseError(NaptanStopsError):
    """The stop corpus could not be parsed (missing header, no data rows).

    Callers should treat this as "no data available" and may re-fetch.
    """


class DataSourceError(NaptanStopsError):
    """Fetching or reading stop data failed."""

    def __init__(self, message: str, details: "ErrorDetails | None" = None) -> None:
        super().__init__(message)
        self.details = details
