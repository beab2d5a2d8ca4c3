"""User model."""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class User:
    """A person who owns cost records.

    Attributes:
        id: Logical user identifier (positive integer, chosen by the caller).
        first_name: Given name.
        last_name: Family name.
        birthday: Optional date of birth.
        marital_status: Optional free-form marital status.
    """

    id: int
    first_name: str
    last_name: str
    birthday: Optional[date] = None
    marital_status: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "birthday": self.birthday.isoformat() if self.birthday else None,
            "marital_status": self.marital_status,
        }


@dataclass
class UserSummary:
    """A user's name fields together with the sum of all their costs."""

    id: int
    first_name: str
    last_name: str
    total: float

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "total": self.total,
        }
