"""Parser for delimited-text (CSV) NaPTAN exports."""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from naptan_stops.application.services.record_normalizer import StopRecordNormalizer
from naptan_stops.application.services.row_splitters import NaiveCommaSplitter
from naptan_stops.domain.contracts.row_splitter import RowSplitter
from naptan_stops.domain.errors import ParseError
from naptan_stops.domain.models.stop_record import StopRecord

logger = logging.getLogger(__name__)

QUOTE_CHAR = '"'

# Header names are matched by exact, case-sensitive equality.
COLUMN_NAMES: dict[str, str] = {
    "atco_code": "ATCOCode",
    "common_name": "CommonName",
    "locality_name": "LocalityName",
    "latitude": "Latitude",
    "longitude": "Longitude",
    "status": "Status",
    "stop_type": "StopType",
}


@dataclass(frozen=True)
class ColumnIndex:
    """Positional index of each known column; -1 when the header lacks it."""

    atco_code: int = -1
    common_name: int = -1
    locality_name: int = -1
    latitude: int = -1
    longitude: int = -1
    status: int = -1
    stop_type: int = -1

    @property
    def missing_columns(self) -> list[str]:
        return [name for field, name in COLUMN_NAMES.items() if getattr(self, field) < 0]


def strip_quotes(value: str) -> str:
    return value.replace(QUOTE_CHAR, "")


def cell(columns: list[str], index: int) -> str | None:
    """Return the unquoted cell at index, or None when the column is absent."""
    if index < 0 or index >= len(columns):
        return None
    return strip_quotes(columns[index])


class DelimitedCorpusParser:
    """Turns CSV text into StopRecord objects, one row at a time.

    Row splitting is delegated to a RowSplitter so that the default naive
    comma split can be swapped for a quote-aware one without touching the
    matching logic.
    """

    def __init__(self, splitter: RowSplitter | None = None) -> None:
        self._splitter = splitter or NaiveCommaSplitter()

    def parse_header(self, header_line: str) -> ColumnIndex:
        """Map known column names to positional indices.

        Raises:
            ParseError: If the header row is empty.
        """
        headers = [strip_quotes(h.strip()) for h in self._splitter.split(header_line.strip())]
        if not any(headers):
            raise ParseError("Stop corpus header row is empty")

        indices = {
            field: headers.index(name) if name in headers else -1
            for field, name in COLUMN_NAMES.items()
        }
        column_index = ColumnIndex(**indices)
        if column_index.missing_columns:
            logger.debug(
                f"Header lacks columns {column_index.missing_columns}, defaults will be used"
            )
        return column_index

    def parse_row(self, line: str, columns: ColumnIndex) -> StopRecord:
        """Extract one StopRecord from a data line using the header mapping."""
        values = self._splitter.split(line)
        return StopRecordNormalizer.from_fields(
            atco_code=cell(values, columns.atco_code),
            common_name=cell(values, columns.common_name),
            locality_name=cell(values, columns.locality_name),
            stop_type=cell(values, columns.stop_type),
            status=cell(values, columns.status),
            latitude=cell(values, columns.latitude),
            longitude=cell(values, columns.longitude),
        )

    def iter_records(self, lines: Iterable[str]) -> Iterator[StopRecord]:
        """Yield records for every non-blank data line, lazily.

        Raises:
            ParseError: If there is no header row or no data rows at all.
        """
        line_iter = iter(lines)
        header_line = next(line_iter, None)
        if header_line is None:
            raise ParseError("Stop corpus is empty: header row missing")
        columns = self.parse_header(header_line.rstrip("\r"))

        row_count = 0
        for line in line_iter:
            line = line.rstrip("\r")
            if not line.strip():
                continue
            row_count += 1
            yield self.parse_row(line, columns)

        if row_count == 0:
            raise ParseError("Stop corpus has a header row but no data rows")


def split_lines(text: str) -> list[str]:
    return text.split("\n")
