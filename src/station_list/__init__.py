# Station List Module
from .station import Station, StationCategory
from .loader import StationLoader, ParseError, RejectedEntry
from .table import SortPolicy, clean_url, render_table, sort_stations, filter_stations, project_row
from .splicer import (
    MarkerPair,
    MarkerNotFoundError,
    splice_markers,
    splice_all,
    LIST_MARKERS,
    FREE_LIST_MARKERS,
    PAID_LIST_MARKERS,
    README_MARKERS,
)

__all__ = [
    "Station",
    "StationCategory",
    "StationLoader",
    "ParseError",
    "RejectedEntry",
    "SortPolicy",
    "clean_url",
    "render_table",
    "sort_stations",
    "filter_stations",
    "project_row",
    "MarkerPair",
    "MarkerNotFoundError",
    "splice_markers",
    "splice_all",
    "LIST_MARKERS",
    "FREE_LIST_MARKERS",
    "PAID_LIST_MARKERS",
    "README_MARKERS",
]
