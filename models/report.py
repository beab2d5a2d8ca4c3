"""Monthly report model."""

from dataclasses import dataclass, field
from typing import Dict, List

from models.cost import CATEGORIES


@dataclass
class ReportItem:
    """One cost as it appears inside a category bucket."""

    sum: float
    description: str
    day: int  # day of month in UTC

    def to_dict(self) -> dict:
        return {"sum": self.sum, "description": self.description, "day": self.day}


@dataclass
class MonthlyReport:
    """Costs of one user in one calendar month, grouped by category.

    Attributes:
        userid: Owner of the costs.
        year: Report year.
        month: Report month (1-12).
        buckets: Category name mapped to its items. Always holds every
            category, in CATEGORIES order, even when a bucket is empty.
    """

    userid: int
    year: int
    month: int
    buckets: Dict[str, List[ReportItem]] = field(
        default_factory=lambda: {category: [] for category in CATEGORIES}
    )

    @property
    def total(self) -> float:
        return sum(item.sum for items in self.buckets.values() for item in items)

    def to_dict(self) -> dict:
        """Convert to the wire shape.

        ``costs`` is a list of single-key objects, one per category, rather
        than a flat mapping.
        """
        return {
            "userid": self.userid,
            "year": self.year,
            "month": self.month,
            "costs": [
                {category: [item.to_dict() for item in self.buckets[category]]}
                for category in CATEGORIES
            ],
        }
