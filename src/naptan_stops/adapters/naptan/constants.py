"""Constants for the NaPTAN API adapter.

The Department for Transport publishes NaPTAN access nodes at
https://naptan.api.dft.gov.uk/v1/access-nodes. No authentication is required.
A full download is large (hundreds of MB as CSV) and can take a while.
"""

NAPTAN_API_BASE = "https://naptan.api.dft.gov.uk/v1/access-nodes"
DATA_FORMAT_PARAM = "dataFormat"

DEFAULT_HEADERS = {
    "Accept": "text/csv, application/json",
    "User-Agent": "naptan-stops",
}

# Keys under which a JSON export may wrap its list of records.
JSON_RECORD_KEYS = ("accessNodes", "stops", "records", "data", "results")
