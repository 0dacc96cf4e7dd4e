"""Tests for configuration adapter."""

from pathlib import Path
from tempfile import NamedTemporaryFile

import pytest

from naptan_stops.adapters.config import AppConfig


def _write_toml(content: str) -> str:
    with NamedTemporaryFile(mode="w", suffix=".toml", delete=False) as f:
        f.write(content)
        return f.name


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig()

    assert config.naptan_api_base == "https://naptan.api.dft.gov.uk/v1/access-nodes"
    assert config.cors_proxy == ""
    assert config.data_format == "csv"
    assert config.max_results == 10
    assert config.scan_limit == 50
    assert config.quote_aware_csv is False
    assert config.log_level == "INFO"


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("DATA_FORMAT", "JSON")
    monkeypatch.setenv("CORS_PROXY", "https://corsproxy.io/?")
    monkeypatch.setenv("MAX_RESULTS", "5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = AppConfig()

    assert config.data_format == "json"
    assert config.cors_proxy == "https://corsproxy.io/?"
    assert config.max_results == 5
    assert config.log_level == "DEBUG"
    assert config.log_level_number == 10


def test_config_validates_data_format(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an invalid data format, when loading config, then validation error is raised."""
    monkeypatch.setenv("DATA_FORMAT", "xml")

    with pytest.raises(ValueError, match="data_format must be either"):
        AppConfig()


def test_config_validates_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an invalid log level, when loading config, then validation error is raised."""
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValueError, match="log_level must be one of"):
        AppConfig()


@pytest.mark.parametrize("name", ["MAX_RESULTS", "SCAN_LIMIT", "API_TIMEOUT_SECONDS"])
def test_config_validates_positive_limits(monkeypatch: pytest.MonkeyPatch, name: str) -> None:
    """Given a zero limit, when loading config, then validation error is raised."""
    monkeypatch.setenv(name, "0")

    with pytest.raises(ValueError, match="positive integer"):
        AppConfig()


def test_toml_overrides_without_file_is_noop() -> None:
    """Given no config file, when applying TOML overrides, then nothing changes."""
    config = AppConfig(config_file=None)

    assert config.load_toml_overrides() == {}
    assert config.max_results == 10


def test_toml_overrides_apply_api_and_search_sections() -> None:
    """Given a TOML file, when applying overrides, then api and search settings are updated."""
    temp_path = _write_toml(
        """
[api]
base_url = "https://example.test/access-nodes"
cors_proxy = "https://proxy.test/?"
data_format = "json"
timeout_seconds = 15

[search]
max_results = 3
scan_limit = 20
quote_aware_csv = true
"""
    )

    try:
        config = AppConfig(config_file=temp_path)
        data = config.load_toml_overrides()

        assert "api" in data
        assert config.naptan_api_base == "https://example.test/access-nodes"
        assert config.cors_proxy == "https://proxy.test/?"
        assert config.data_format == "json"
        assert config.api_timeout_seconds == 15
        assert config.max_results == 3
        assert config.scan_limit == 20
        assert config.quote_aware_csv is True
    finally:
        Path(temp_path).unlink()


def test_toml_overrides_validate_values() -> None:
    """Given an invalid value in TOML, when applying overrides, then ValueError is raised."""
    temp_path = _write_toml('[search]\nmax_results = 0\n')

    try:
        config = AppConfig(config_file=temp_path)
        with pytest.raises(ValueError, match="positive integer"):
            config.load_toml_overrides()
    finally:
        Path(temp_path).unlink()


def test_config_raises_error_when_file_not_found() -> None:
    """Given non-existent config file, when loading overrides, then FileNotFoundError is raised."""
    config = AppConfig(config_file="nonexistent.toml")

    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        config.load_toml_overrides()


@pytest.mark.parametrize(
    "line", ['quote_aware_csv = "false"', "quote_aware_csv = 0", 'quote_aware_csv = "yes"']
)
def test_toml_quote_aware_requires_boolean(line: str) -> None:
    """Given a non-boolean quote_aware_csv in TOML, when applying overrides, then it fails."""
    temp_path = _write_toml(f"[search]\n{line}\n")

    try:
        config = AppConfig(config_file=temp_path)
        with pytest.raises(ValueError, match="quote_aware_csv must be a boolean"):
            config.load_toml_overrides()
        assert config.quote_aware_csv is False
    finally:
        Path(temp_path).unlink()


@pytest.mark.parametrize("value", ['"5"', "true", "2.5"])
def test_toml_limits_require_integers(value: str) -> None:
    """Given a non-integer max_results in TOML, when applying overrides, then it fails."""
    temp_path = _write_toml(f"[search]\nmax_results = {value}\n")

    try:
        config = AppConfig(config_file=temp_path)
        with pytest.raises(ValueError, match="positive integer"):
            config.load_toml_overrides()
    finally:
        Path(temp_path).unlink()
