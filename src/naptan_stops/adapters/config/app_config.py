"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _check_data_format(v: str) -> str:
    if v.lower() not in ("csv", "json"):
        raise ValueError("data_format must be either 'csv' or 'json'")
    return v.lower()


def _check_positive(v: int) -> int:
    if isinstance(v, bool) or not isinstance(v, int) or v < 1:
        raise ValueError("value must be a positive integer")
    return v


def _check_bool(name: str, v: bool) -> bool:
    if not isinstance(v, bool):
        raise ValueError(f"{name} must be a boolean (true or false), got {v!r}")
    return v


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # NaPTAN API configuration
    naptan_api_base: str = Field(
        default="https://naptan.api.dft.gov.uk/v1/access-nodes",
        description="Base URL of the NaPTAN access-nodes endpoint",
    )
    cors_proxy: str = Field(
        default="",
        description="Optional proxy prefix; the target URL is URL-encoded and appended to it",
    )
    data_format: str = Field(default="csv", description="Feed format: 'csv' or 'json'")
    api_timeout_seconds: int = Field(
        default=60, description="Timeout for NaPTAN downloads in seconds"
    )

    # Search configuration
    max_results: int = Field(default=10, description="Maximum number of stops returned")
    scan_limit: int = Field(
        default=50, description="Number of matches after which corpus scanning stops"
    )
    quote_aware_csv: bool = Field(
        default=False,
        description="Split CSV rows with the csv module instead of a naive comma split",
    )

    # Logging configuration
    log_level: str = Field(default="INFO", description="Root log level")
    log_requests: bool = Field(default=False, description="Log outgoing API requests")

    # TOML config file path
    config_file: str | None = Field(
        default=None,
        description="Path to an optional TOML file with [api] and [search] sections",
    )

    @field_validator("data_format")
    @classmethod
    def validate_data_format(cls, v: str) -> str:
        """Validate data format is either 'csv' or 'json'."""
        return _check_data_format(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()

    @field_validator("max_results", "scan_limit", "api_timeout_seconds")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate limits and timeouts are positive."""
        return _check_positive(v)

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    def load_toml_overrides(self) -> dict[str, Any]:
        """Load the TOML file and apply its [api] and [search] settings.

        Returns:
            The parsed TOML data, or an empty dict when no config file is set.

        Raises:
            FileNotFoundError: If config_file is set but does not exist.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        api = toml_data.get("api", {})
        if "base_url" in api:
            self.naptan_api_base = api["base_url"]
        if "cors_proxy" in api:
            self.cors_proxy = api["cors_proxy"]
        if "data_format" in api:
            self.data_format = _check_data_format(api["data_format"])
        if "timeout_seconds" in api:
            self.api_timeout_seconds = _check_positive(api["timeout_seconds"])

        search = toml_data.get("search", {})
        if "max_results" in search:
            self.max_results = _check_positive(search["max_results"])
        if "scan_limit" in search:
            self.scan_limit = _check_positive(search["scan_limit"])
        if "quote_aware_csv" in search:
            self.quote_aware_csv = _check_bool("quote_aware_csv", search["quote_aware_csv"])

        return toml_data
