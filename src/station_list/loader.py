"""
Loader for the station list data file.
"""

import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .station import Station


class ParseError(Exception):
    """Raised when a station list cannot be parsed."""
    pass


@dataclass
class RejectedEntry:
    """A station entry that failed validation and was left out."""
    index: int
    reason: str


class StationLoader:
    """
    Reads ``list.json``-style files into Station records.

    The expected document is an object with a ``stations`` array. Each entry
    is validated on the way in; malformed entries are skipped and recorded in
    ``rejected`` unless the loader is strict, in which case the first one
    raises ParseError.
    """

    STATIONS_FIELD = "stations"

    def __init__(self, base_path: Optional[Path] = None, strict: bool = False):
        """
        Initialize the loader.

        Args:
            base_path: Base path for resolving relative file paths.
            strict: Raise on the first malformed entry instead of skipping it.
        """
        self.base_path = base_path or Path.cwd()
        self.strict = strict
        self.rejected: list[RejectedEntry] = []

    def load_file(self, file_path: Path | str) -> list[Station]:
        """
        Load stations from a data file.

        Raises:
            ParseError: If the file is not a valid station list.
            FileNotFoundError: If the file does not exist.
        """
        path = Path(file_path)
        if not path.is_absolute():
            path = self.base_path / path

        if not path.exists():
            raise FileNotFoundError(f"Station list not found: {path}")

        try:
            content = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"Station list {path} is not valid UTF-8: {e}") from e

        return self.load_content(content, source_file=str(path))

    def load_content(self, content: str, source_file: str = "unknown") -> list[Station]:
        """
        Load stations from a JSON string.

        A document without a ``stations`` field yields an empty list.

        Raises:
            ParseError: If the content cannot be parsed.
        """
        self.rejected = []

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ParseError(f"Invalid JSON in {source_file}: {e}") from e

        if not isinstance(data, dict):
            raise ParseError(
                f"Expected a JSON object at the top level of {source_file}, "
                f"got {type(data).__name__}"
            )

        entries = data.get(self.STATIONS_FIELD)
        if entries is None:
            return []
        if not isinstance(entries, list):
            raise ParseError(
                f"'{self.STATIONS_FIELD}' in {source_file} must be a list, "
                f"got {type(entries).__name__}"
            )

        stations = []
        for index, entry in enumerate(entries):
            try:
                stations.append(Station.from_dict(entry))
            except ValueError as e:
                if self.strict:
                    raise ParseError(f"Invalid station #{index} in {source_file}: {e}") from e
                self.rejected.append(RejectedEntry(index=index, reason=str(e)))
                print(f"[WARN] Skipping station #{index} in {source_file}: {e}", file=sys.stderr)

        return stations
