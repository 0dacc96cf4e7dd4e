"""Stop data source adapter reading a locally saved NaPTAN export."""

import asyncio
import json
import logging
from pathlib import Path

from naptan_stops.adapters.naptan.json_payload import extract_records
from naptan_stops.domain.errors import DataSourceError, ParseError
from naptan_stops.domain.models.error_details import ErrorDetails
from naptan_stops.domain.ports.stop_data_source import StopCorpus, StopDataSource

logger = logging.getLogger(__name__)


class FileStopSource(StopDataSource):
    """Adapter for a CSV or JSON export on disk."""

    def __init__(self, path: str | Path, data_format: str | None = None) -> None:
        """Initialize with the export path.

        Args:
            path: Path to the export file.
            data_format: "csv" or "json"; inferred from the file suffix when omitted.
        """
        self.path = Path(path)
        self.data_format = (data_format or self._infer_format(self.path)).lower()

    @staticmethod
    def _infer_format(path: Path) -> str:
        return "json" if path.suffix.lower() == ".json" else "csv"

    async def fetch_corpus(self) -> StopCorpus:
        return await asyncio.to_thread(self.read_corpus)

    def read_corpus(self) -> StopCorpus:
        """Read the export synchronously.

        Raises:
            DataSourceError: If the file is missing or unreadable.
            ParseError: If the export is not UTF-8 or a JSON export is malformed.
        """
        logger.info(f"Reading NaPTAN {self.data_format.upper()} data from {self.path}")
        try:
            text = self.path.read_text(encoding="utf-8-sig")
        except OSError as e:
            raise DataSourceError(
                f"Failed to read stop data from {self.path}: {e}",
                ErrorDetails(reason=e.strerror or str(e)),
            ) from e
        except UnicodeDecodeError as e:
            raise ParseError(f"Stop data in {self.path} is not valid UTF-8: {e}") from e

        if self.data_format != "json":
            return text

        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(f"Invalid JSON in {self.path}: {e}") from e
        return extract_records(payload)
