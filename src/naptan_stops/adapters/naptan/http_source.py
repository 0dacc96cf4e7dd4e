"""NaPTAN stop data source adapter downloading from the DfT API."""

import asyncio
import json
import logging
from typing import TYPE_CHECKING
from urllib.parse import quote

import aiohttp

from naptan_stops.adapters.api_request_logger import log_api_request
from naptan_stops.adapters.naptan.constants import (
    DATA_FORMAT_PARAM,
    DEFAULT_HEADERS,
    NAPTAN_API_BASE,
)
from naptan_stops.adapters.naptan.json_payload import extract_records
from naptan_stops.domain.errors import DataSourceError, ParseError
from naptan_stops.domain.models.error_details import ErrorDetails
from naptan_stops.domain.ports.stop_data_source import StopCorpus, StopDataSource

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

    from naptan_stops.adapters.config.app_config import AppConfig

# Characters encodeURIComponent leaves alone in addition to the unreserved set.
_PROXY_SAFE_CHARS = "!*'()"


class NaptanHttpSource(StopDataSource):
    """Adapter that downloads the full NaPTAN access-node export."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        base_url: str = NAPTAN_API_BASE,
        data_format: str = "csv",
        cors_proxy: str = "",
        timeout_seconds: int = 60,
        log_requests: bool = False,
    ) -> None:
        """Initialize the source.

        Args:
            session: Optional aiohttp ClientSession. A short-lived one is created per
                fetch when omitted.
            base_url: NaPTAN access-nodes endpoint.
            data_format: "csv" or "json".
            cors_proxy: Optional proxy prefix the encoded target URL is appended to.
            timeout_seconds: Total timeout for the download.
            log_requests: Log each request regardless of NAPTAN_LOG_REQUESTS.
        """
        self._session = session
        self.base_url = base_url
        self.data_format = data_format.lower()
        self.cors_proxy = cors_proxy
        self.timeout_seconds = timeout_seconds
        self.log_requests = log_requests

    @classmethod
    def from_config(
        cls, config: "AppConfig", session: "ClientSession | None" = None
    ) -> "NaptanHttpSource":
        return cls(
            session=session,
            base_url=config.naptan_api_base,
            data_format=config.data_format,
            cors_proxy=config.cors_proxy,
            timeout_seconds=config.api_timeout_seconds,
            log_requests=config.log_requests,
        )

    def build_url(self) -> str:
        """Build the download URL, routed through the proxy when one is configured."""
        target = f"{self.base_url}?{DATA_FORMAT_PARAM}={self.data_format}"
        if not self.cors_proxy:
            return target
        return f"{self.cors_proxy}{quote(target, safe=_PROXY_SAFE_CHARS)}"

    async def fetch_corpus(self) -> StopCorpus:
        """Download the corpus.

        Returns:
            CSV text, or a list of structured records for the JSON format.

        Raises:
            DataSourceError: On non-200 responses, network errors and timeouts.
            ParseError: If the body cannot be decoded or a JSON payload holds no list
                of records.
        """
        if self._session is not None:
            return await self._fetch(self._session)
        async with aiohttp.ClientSession() as session:
            return await self._fetch(session)

    async def _fetch(self, session: "ClientSession") -> StopCorpus:
        url = self.build_url()
        logger.info(f"Fetching NaPTAN {self.data_format.upper()} data from {url}")
        log_api_request("GET", url, headers=DEFAULT_HEADERS, enabled=self.log_requests)

        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        try:
            async with session.get(url, headers=DEFAULT_HEADERS, timeout=timeout) as response:
                return await self._handle_response(response)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Failed to fetch NaPTAN data: {e}")
            raise DataSourceError(
                f"Failed to fetch data: {e}", ErrorDetails(reason=str(e) or type(e).__name__)
            ) from e

    async def _handle_response(self, response: "ClientResponse") -> StopCorpus:
        if response.status != 200:
            details = ErrorDetails(status_code=response.status, reason=response.reason or "")
            logger.warning(f"NaPTAN API returned {details.describe()}")
            raise DataSourceError(f"Failed to fetch data: {details.describe()}", details)

        try:
            if self.data_format == "json":
                payload = await response.json(content_type=None)
            else:
                text = await response.text()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"NaPTAN API returned an undecodable {self.data_format} body: {e}")
            raise ParseError(f"Invalid {self.data_format.upper()} response body: {e}") from e

        if self.data_format == "json":
            records = extract_records(payload)
            logger.info(f"JSON data received, {len(records)} record(s)")
            return records

        logger.info(f"CSV data received, length: {len(text)}")
        return text
