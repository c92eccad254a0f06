# Test fixtures
from .sample_stations import (
    SAMPLE_STATIONS,
    SAMPLE_LIST_JSON,
    SAMPLE_README,
    SAMPLE_SPLIT_README,
    SAMPLE_TEMPLATE,
    create_station,
    get_station_batch,
)

__all__ = [
    "SAMPLE_STATIONS",
    "SAMPLE_LIST_JSON",
    "SAMPLE_README",
    "SAMPLE_SPLIT_README",
    "SAMPLE_TEMPLATE",
    "create_station",
    "get_station_batch",
]
