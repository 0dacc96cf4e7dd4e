"""Stop matching service."""

import logging
from collections.abc import Iterable, Iterator, Mapping
from itertools import chain
from typing import Any

from naptan_stops.application.services.corpus_parser import DelimitedCorpusParser, split_lines
from naptan_stops.application.services.record_normalizer import StopRecordNormalizer
from naptan_stops.domain.contracts.row_splitter import RowSplitter
from naptan_stops.domain.errors import ParseError, ValidationError
from naptan_stops.domain.models.stop_record import StopRecord

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 10
DEFAULT_SCAN_LIMIT = 50

Corpus = str | Iterable[str] | Iterable[Mapping[str, Any] | StopRecord]


def normalize_query(query: str) -> str:
    """Lower-case a search query, rejecting empty or whitespace-only input."""
    if not isinstance(query, str) or not query.strip():
        raise ValidationError("query", "a non-empty search term", query)
    return query.strip().lower()


def matches_query(stop: StopRecord, query_lower: str) -> bool:
    """Substring match on common name or locality (query already lower-cased)."""
    return query_lower in stop.common_name.lower() or query_lower in stop.locality_name.lower()


class StopMatcher:
    """Finds stops whose name or locality contains a free-text query.

    Results keep corpus order; there is no relevance ranking. Scanning halts
    once ``scan_limit`` candidates are collected, and the result is then cut
    down to ``max_results``.
    """

    def __init__(
        self,
        splitter: RowSplitter | None = None,
        max_results: int = DEFAULT_MAX_RESULTS,
        scan_limit: int = DEFAULT_SCAN_LIMIT,
    ) -> None:
        """Initialize the matcher.

        Args:
            splitter: Row splitting strategy for CSV text. Defaults to a naive comma split.
            max_results: Maximum number of stops returned.
            scan_limit: Number of candidates after which scanning stops.
        """
        if max_results < 1:
            raise ValidationError("max_results", "a positive integer", max_results)
        if scan_limit < 1:
            raise ValidationError("scan_limit", "a positive integer", scan_limit)
        self._parser = DelimitedCorpusParser(splitter)
        self.max_results = max_results
        self.scan_limit = scan_limit

    def match(self, corpus: Corpus, query: str) -> list[StopRecord]:
        """Return up to ``max_results`` stops matching the query, in corpus order.

        Args:
            corpus: CSV text, a sequence of CSV lines, or a sequence of structured
                records (mappings or StopRecord objects).
            query: Free-text search term.

        Returns:
            Matching stops.

        Raises:
            ValidationError: If the query is empty or whitespace only.
            ParseError: If the corpus has no header or no data rows.
        """
        query_lower = normalize_query(query)

        candidates: list[StopRecord] = []
        for stop in self._records(corpus):
            if matches_query(stop, query_lower):
                candidates.append(stop)
                if len(candidates) >= self.scan_limit:
                    logger.debug(f"Scan limit of {self.scan_limit} matches reached, stopping")
                    break

        results = candidates[: self.max_results]
        logger.info(
            f"Query '{query}' matched {len(candidates)} candidate(s), returning {len(results)}"
        )
        return results

    def _records(self, corpus: Corpus) -> Iterator[StopRecord]:
        if isinstance(corpus, str):
            return self._parser.iter_records(split_lines(corpus))
        return self._iter_items(corpus)

    def _iter_items(self, items: Iterable[Any]) -> Iterator[StopRecord]:
        item_iter = iter(items)
        first = next(item_iter, None)
        if first is None:
            raise ParseError("Stop corpus is empty: no records")

        if isinstance(first, str):
            yield from self._parser.iter_records(chain([first], item_iter))
            return

        for item in chain([first], item_iter):
            yield self._to_record(item)

    @staticmethod
    def _to_record(item: Any) -> StopRecord:
        if isinstance(item, StopRecord):
            return item
        if isinstance(item, Mapping):
            return StopRecordNormalizer.from_mapping(item)
        raise ParseError(f"Unsupported stop record type: {type(item).__name__}")
