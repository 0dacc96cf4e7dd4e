"""Output formatters."""

from naptan_stops.adapters.formatters.stop_formatter import StopFormatter

__all__ = ["StopFormatter"]
