"""Adapters layer - configuration, data sources and formatters."""
