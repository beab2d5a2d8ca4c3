from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

# Single source of truth for the category taxonomy, in report order.
CATEGORIES = ("food", "education", "health", "housing", "sport")

DESCRIPTION_MAX_LENGTH = 100


def to_storage_timestamp(value: datetime) -> str:
    """Serialize a datetime as a fixed-width UTC ISO string.

    Every stored value has the same shape, so string comparison in SQL
    matches chronological order.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="microseconds")


def from_storage_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value).astimezone(timezone.utc)


@dataclass
class Cost:
    id: Optional[int]  # assigned by the store on insert
    description: str
    category: str  # one of CATEGORIES
    userid: int
    sum: float  # sign unconstrained unless the positive-sum policy is on
    date: datetime  # timezone-aware, UTC

    def to_dict(self) -> dict:
        """Convert cost to the JSON shape returned by the API."""
        return {
            "id": self.id,
            "description": self.description,
            "category": self.category,
            "userid": self.userid,
            "sum": self.sum,
            "date": self.date.isoformat(),
        }
