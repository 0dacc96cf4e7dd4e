"""Ports (interfaces) for the ports-and-adapters architecture."""

from naptan_stops.domain.ports.stop_data_source import StopCorpus, StopDataSource

__all__ = [
    "StopCorpus",
    "StopDataSource",
]
