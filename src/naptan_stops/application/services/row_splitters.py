"""Row splitting strategies for delimited NaPTAN text."""

import csv

from naptan_stops.domain.contracts.row_splitter import RowSplitter


class NaiveCommaSplitter(RowSplitter):
    """Splits on every comma.

    Quoted fields containing commas are NOT handled: "Stop, North" becomes two
    columns and shifts every column after it. This matches how the NaPTAN
    export has historically been consumed.
    """

    def split(self, line: str) -> list[str]:
        return line.split(",")


class CsvModuleSplitter(RowSplitter):
    """Quote-aware splitting using the csv module.

    Opting into this splitter changes behaviour for rows with quoted commas:
    they keep their column alignment instead of being misparsed.
    """

    def __init__(self, delimiter: str = ",") -> None:
        self._delimiter = delimiter

    def split(self, line: str) -> list[str]:
        for row in csv.reader([line], delimiter=self._delimiter):
            return row
        return []
