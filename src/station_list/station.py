"""
Core station record structures for the list builder.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional


class StationCategory(Enum):
    """Cost category of a station."""
    FREE = "free"
    PAID = "paid"


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 date or date-time string.

    A trailing "Z" is accepted and naive values are taken as UTC, so every
    result is timezone-aware and comparable.

    Raises:
        ValueError: If the value is not a recognisable timestamp.
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class Station:
    """
    A single entry of the station list.
    """
    name: str
    url: str
    is_free: bool
    created_at: str  # ISO-8601, kept as written in the data file
    description: Optional[str] = None
    last_available_time: Optional[str] = None
    order: Optional[int] = None  # Explicit rank, lower comes first

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError(f"Station name must be a non-empty string, got {self.name!r}")
        if not isinstance(self.url, str) or not self.url.strip():
            raise ValueError(f"Station url must be a non-empty string, got {self.url!r}")
        if not isinstance(self.is_free, bool):
            raise ValueError(f"is_free must be a boolean, got {self.is_free!r}")
        if not isinstance(self.created_at, str):
            raise ValueError(f"created_at must be a string, got {self.created_at!r}")
        try:
            parse_timestamp(self.created_at)
        except ValueError:
            raise ValueError(f"created_at is not a valid timestamp: {self.created_at!r}")
        for field_name in ("description", "last_available_time"):
            value = getattr(self, field_name)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{field_name} must be a string, got {value!r}")
        # bool is an int subclass; a rank of True is a data error
        if self.order is not None and (isinstance(self.order, bool) or not isinstance(self.order, int)):
            raise ValueError(f"order must be an integer, got {self.order!r}")

    @classmethod
    def from_dict(cls, data: Any) -> "Station":
        """
        Build a station from one raw JSON object.

        Unknown keys are ignored.

        Raises:
            ValueError: If a required field is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Station entry must be an object, got {type(data).__name__}")

        missing = [key for key in ("name", "url", "is_free", "created_at") if key not in data]
        if missing:
            raise ValueError(f"Station entry is missing required field(s): {', '.join(missing)}")

        order = data.get("order")
        if isinstance(order, float) and order.is_integer():
            order = int(order)

        return cls(
            name=data["name"],
            url=data["url"],
            is_free=data["is_free"],
            created_at=data["created_at"],
            description=data.get("description") or None,
            last_available_time=data.get("last_available_time") or None,
            order=order,
        )

    @property
    def category(self) -> StationCategory:
        return StationCategory.FREE if self.is_free else StationCategory.PAID

    def created_timestamp(self) -> float:
        """Return created_at as POSIX seconds."""
        return parse_timestamp(self.created_at).timestamp()
