"""Utility for logging NaPTAN API requests when NAPTAN_LOG_REQUESTS is enabled."""

import logging
import os
from urllib.parse import parse_qsl, urlsplit

logger = logging.getLogger(__name__)


def should_log_requests(enabled: bool = False) -> bool:
    """Check if request logging is enabled by flag or NAPTAN_LOG_REQUESTS environment variable."""
    return enabled or os.getenv("NAPTAN_LOG_REQUESTS", "").lower() == "true"


def _redact_sensitive_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact sensitive headers from logging."""
    sensitive_keys = {"authorization", "cookie", "x-api-key"}
    return {k: "***REDACTED***" if k.lower() in sensitive_keys else v for k, v in headers.items()}


def _describe_query(url: str) -> str:
    """List query parameters of the URL, one per line."""
    params = parse_qsl(urlsplit(url).query)
    return "\n".join(f"  {k} = {v}" for k, v in params)


def log_api_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    enabled: bool = False,
) -> None:
    """Log API request details if request logging is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Full request URL, including any proxy prefix.
        headers: Request headers (optional, sensitive headers are redacted).
        enabled: Force logging regardless of the environment variable.
    """
    if not should_log_requests(enabled):
        return

    log_parts = [f"{method} {url}"]

    query = _describe_query(url)
    if query:
        log_parts.append(f"Query:\n{query}")

    if headers:
        safe_headers = _redact_sensitive_headers(headers)
        log_parts.append("Headers: " + ", ".join(f"{k}: {v}" for k, v in safe_headers.items()))

    logger.info("API Request:\n" + "\n".join(log_parts))
