"""
Marker-delimited region replacement for text documents.
"""

from dataclasses import dataclass
from typing import Iterable


class MarkerNotFoundError(Exception):
    """Raised when a document lacks an expected marker."""

    def __init__(self, marker: str, source: str = "document"):
        self.marker = marker
        self.source = source
        super().__init__(f"Marker {marker} not found in {source}")


@dataclass(frozen=True)
class MarkerPair:
    """Start and end sentinels delimiting a generated region."""
    start: str
    end: str


LIST_MARKERS = MarkerPair("<!-- LISTSTART -->", "<!-- LISTEND -->")
FREE_LIST_MARKERS = MarkerPair("<!-- LISTFREESTART -->", "<!-- LISTFREEEND -->")
PAID_LIST_MARKERS = MarkerPair("<!-- LISTTOLLSTART -->", "<!-- LISTTOLLEND -->")
README_MARKERS = MarkerPair("<!-- READMESTART -->", "<!-- READMEEND -->")


def _locate(document: str, markers: MarkerPair, source: str) -> tuple[int, int]:
    """Return (end of start sentinel, start of end sentinel)."""
    start_index = document.find(markers.start)
    if start_index == -1:
        raise MarkerNotFoundError(markers.start, source)

    content_start = start_index + len(markers.start)
    end_index = document.find(markers.end, content_start)
    if end_index == -1:
        raise MarkerNotFoundError(markers.end, source)

    return content_start, end_index


def splice_markers(
    document: str,
    markers: MarkerPair,
    content: str,
    padding: str = "\n\n",
    source: str = "document",
) -> str:
    """
    Replace the text between a marker pair.

    Only the first start sentinel and the first end sentinel after it are
    used. The sentinels and everything outside them are kept as-is.

    Args:
        document: Full document text.
        markers: The pair delimiting the region.
        content: New region content.
        padding: Inserted on both sides of the content.
        source: Document name used in error messages.

    Returns:
        The updated document.

    Raises:
        MarkerNotFoundError: If either sentinel is missing.
    """
    content_start, content_end = _locate(document, markers, source)
    return document[:content_start] + padding + content + padding + document[content_end:]


def splice_all(
    document: str,
    replacements: Iterable[tuple[MarkerPair, str]],
    padding: str = "\n\n",
    source: str = "document",
) -> str:
    """Apply replacements in order, each on the previous result."""
    for markers, content in replacements:
        document = splice_markers(document, markers, content, padding=padding, source=source)
    return document
