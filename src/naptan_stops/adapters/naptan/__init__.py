"""NaPTAN data source adapters."""

from naptan_stops.adapters.naptan.file_source import FileStopSource
from naptan_stops.adapters.naptan.http_source import NaptanHttpSource

__all__ = ["FileStopSource", "NaptanHttpSource"]
