"""Application services (use cases) for stop search and trip distances."""

from naptan_stops.application.services.corpus_parser import ColumnIndex, DelimitedCorpusParser
from naptan_stops.application.services.geodesy_calculator import GeodesyCalculator
from naptan_stops.application.services.record_normalizer import StopRecordNormalizer
from naptan_stops.application.services.row_splitters import CsvModuleSplitter, NaiveCommaSplitter
from naptan_stops.application.services.stop_matcher import StopMatcher
from naptan_stops.application.services.trip_planner import TripPlanner

__all__ = [
    "ColumnIndex",
    "CsvModuleSplitter",
    "DelimitedCorpusParser",
    "GeodesyCalculator",
    "NaiveCommaSplitter",
    "StopMatcher",
    "StopRecordNormalizer",
    "TripPlanner",
]
