"""
Sorting and Markdown table rendering for station lists.
"""

import sys
from enum import Enum
from typing import Callable, Iterable, Optional

from .station import Station

COLUMNS = ["站点名称", "链接", "类型", "备注", "最后可用时间"]

CATEGORY_LABELS = {
    True: "免费",
    False: "收费",
}

PLACEHOLDER = "-"

# Stations without an explicit rank sort after every ranked one
RANK_SENTINEL = sys.maxsize


class SortPolicy(Enum):
    """Ordering applied to stations before rendering."""
    CATEGORY = "category"  # free first, then newest first
    RANK = "rank"  # explicit order ascending, then newest first


def clean_url(url: str) -> str:
    """Strip the query string, i.e. everything from the first '?' onward."""
    return url.split("?", 1)[0]


def _category_key(station: Station) -> tuple:
    return (0 if station.is_free else 1, -station.created_timestamp())


def _rank_key(station: Station) -> tuple:
    rank = station.order if station.order is not None else RANK_SENTINEL
    return (rank, -station.created_timestamp())


_SORT_KEYS = {
    SortPolicy.CATEGORY: _category_key,
    SortPolicy.RANK: _rank_key,
}


def sort_key(policy: SortPolicy) -> Callable[[Station], tuple]:
    """Return the key function implementing a sort policy."""
    return _SORT_KEYS[policy]


def sort_stations(stations: Iterable[Station], policy: SortPolicy = SortPolicy.CATEGORY) -> list[Station]:
    """Return a new, stably sorted list; the input is left untouched."""
    return sorted(stations, key=sort_key(policy))


def filter_stations(stations: Iterable[Station], is_free: Optional[bool] = None) -> list[Station]:
    """Keep the stations of one category. ``None`` keeps everything."""
    if is_free is None:
        return list(stations)
    return [s for s in stations if s.is_free == is_free]


def project_row(station: Station) -> list[str]:
    """Project a station onto the display columns, in COLUMNS order."""
    return [
        station.name,
        f"[{clean_url(station.url)}]({station.url})",
        CATEGORY_LABELS[station.is_free],
        station.description or PLACEHOLDER,
        station.last_available_time or PLACEHOLDER,
    ]


def format_table(header: list[str], rows: list[list[str]]) -> str:
    """Format a header and rows as a Markdown table."""
    md = "| " + " | ".join(header) + " |\n"
    md += "| " + " | ".join(["---"] * len(header)) + " |\n"
    for row in rows:
        cells = [cell.replace("\r\n", " ").replace("\n", " ") for cell in row]
        md += "| " + " | ".join(cells) + " |\n"
    return md.rstrip("\n")


def render_table(
    stations: Iterable[Station],
    is_free: Optional[bool] = None,
    policy: SortPolicy = SortPolicy.CATEGORY,
) -> str:
    """
    Render stations as a Markdown table.

    Args:
        stations: Records to render.
        is_free: Category filter; None renders every station.
        policy: Sort policy applied after filtering.

    Returns:
        The table text, without a trailing newline.
    """
    selected = sort_stations(filter_stations(stations, is_free), policy)
    return format_table(COLUMNS, [project_row(s) for s in selected])
