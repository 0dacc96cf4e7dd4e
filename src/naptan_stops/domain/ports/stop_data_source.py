"""Stop data source port."""

from collections.abc import Mapping
from typing import Any, Protocol

StopCorpus = str | list[Mapping[str, Any]]


class StopDataSource(Protocol):
    """Port for loading the raw NaPTAN stop corpus."""

    async def fetch_corpus(self) -> StopCorpus:
        """Return the corpus as delimited text or as a list of structured records."""
        ...
