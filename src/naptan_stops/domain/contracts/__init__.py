"""Contracts (protocols) implemented by services and adapters."""

from naptan_stops.domain.contracts.row_splitter import RowSplitter
from naptan_stops.domain.contracts.stop_formatter import StopFormatterProtocol

__all__ = [
    "RowSplitter",
    "StopFormatterProtocol",
]
