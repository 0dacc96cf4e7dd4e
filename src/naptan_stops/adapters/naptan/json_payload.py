"""Helpers for NaPTAN JSON exports."""

from collections.abc import Mapping
from typing import Any

from naptan_stops.adapters.naptan.constants import JSON_RECORD_KEYS
from naptan_stops.domain.errors import ParseError


def extract_records(payload: Any) -> list[Mapping[str, Any]]:
    """Return the list of stop records held in a decoded JSON payload.

    The payload is either a bare list of records or an object wrapping the
    list under one of the usual keys (``accessNodes``, ``stops``, ...).

    Raises:
        ParseError: If no list of records can be found.
    """
    records = payload
    if isinstance(payload, Mapping):
        records = next(
            (payload[key] for key in JSON_RECORD_KEYS if isinstance(payload.get(key), list)),
            None,
        )
    if not isinstance(records, list):
        raise ParseError("JSON stop data does not contain a list of records")
    return [record for record in records if isinstance(record, Mapping)]
