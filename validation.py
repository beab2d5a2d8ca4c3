"""Request validation for cost creation and monthly reports.

User resolution is not done here: the tools resolve the user first and then
call into these checks, so the order of failures is decided in one place per
operation.
"""

import math
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional, Tuple

from dateutil.parser import isoparse

from errors import (
    InvalidCategory,
    InvalidDate,
    InvalidDescription,
    InvalidMonth,
    InvalidMonthFormat,
    InvalidSum,
    InvalidUserId,
    InvalidYearFormat,
    InvalidYearRange,
    MissingUserId,
    UserNotFound,
)
from models.cost import CATEGORIES, DESCRIPTION_MAX_LENGTH

# datetime cannot represent years outside this window
_DATETIME_YEAR_MIN = 1
_DATETIME_YEAR_MAX = 9999

# Largest value an SQLite INTEGER column can hold
USER_ID_MAX = 2**63 - 1

_DIGITS = re.compile(r"[0-9]+")


def _is_digits(value: Any) -> bool:
    """True for a non-empty string of ASCII digits only."""
    return isinstance(value, str) and _DIGITS.fullmatch(value) is not None


def _parse_digits(digits: str, max_digits: int) -> Optional[int]:
    """Convert a digit string, ignoring leading zeros.

    Returns:
        The number, or None if it has more than ``max_digits`` significant
        digits.
    """
    significant = digits.lstrip("0")
    if len(significant) > max_digits:
        return None
    return int(significant or "0")


def is_storable_user_id(user_id: Any) -> bool:
    """True if the value could be the id of a stored user."""
    return (
        isinstance(user_id, int)
        and not isinstance(user_id, bool)
        and 0 < user_id <= USER_ID_MAX
    )


@dataclass
class ValidationPolicy:
    """Configurable validation rules.

    Attributes:
        require_positive_sum: Reject costs whose sum is zero or negative.
        year_min: Lowest accepted report year, or None for no bound.
        year_max: Highest accepted report year, or None for no bound.
    """

    require_positive_sum: bool = False
    year_min: Optional[int] = None
    year_max: Optional[int] = None


@dataclass
class CostRequest:
    """Incoming payload for recording a cost. Fields are raw caller input."""

    description: Any
    category: Any
    userid: Any
    sum: Any
    date: Any = None

    @classmethod
    def from_dict(cls, data: dict) -> "CostRequest":
        return cls(
            description=data.get("description"),
            category=data.get("category"),
            userid=data.get("userid"),
            sum=data.get("sum"),
            date=data.get("date"),
        )


@dataclass
class ValidCost:
    """Normalized cost fields that passed validation."""

    description: str
    category: str
    sum: float
    date: Optional[datetime]  # None means "now, at persistence time"


@dataclass
class ReportRequest:
    """Incoming report query. All fields are raw strings as received."""

    id: Optional[str]
    year: Optional[str]
    month: Optional[str]


def coerce_user_id(value: Any) -> Optional[int]:
    """Turn a caller-supplied user id into a positive int.

    Returns:
        The id, or None if the value can never name an existing user.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        user_id = value
    elif isinstance(value, float) and value.is_integer():
        user_id = int(value)
    elif isinstance(value, str) and _is_digits(value.strip()):
        user_id = _parse_digits(value.strip(), len(str(USER_ID_MAX)))
    else:
        return None
    return user_id if is_storable_user_id(user_id) else None


def validate_category(category: Any) -> str:
    if category not in CATEGORIES:
        raise InvalidCategory(
            f"Category must be one of: {', '.join(CATEGORIES)}"
        )
    return category


def validate_description(description: Any) -> str:
    """Trim the description and check its length.

    Raises:
        InvalidDescription: If the trimmed text is empty or too long.
    """
    text = description.strip() if isinstance(description, str) else ""
    if not text:
        raise InvalidDescription("Description cannot be empty")
    if len(text) > DESCRIPTION_MAX_LENGTH:
        raise InvalidDescription(
            f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters"
        )
    return text


def validate_sum(value: Any, policy: ValidationPolicy) -> float:
    """Coerce the sum to a finite float.

    Raises:
        InvalidSum: If the value is not numeric, or not positive while the
            policy requires it.
    """
    if isinstance(value, bool):
        raise InvalidSum("Sum must be a number")
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise InvalidSum("Sum must be a number")
    except OverflowError:
        raise InvalidSum("Sum must be a finite number")
    if not math.isfinite(amount):
        raise InvalidSum("Sum must be a finite number")
    if policy.require_positive_sum and amount <= 0:
        raise InvalidSum("Sum must be a positive number")
    return amount


def parse_cost_date(value: Any) -> Optional[datetime]:
    """Parse an optional ISO 8601 date or datetime.

    Naive values are taken as UTC.

    Returns:
        A timezone-aware datetime, or None if no date was supplied.

    Raises:
        InvalidDate: If the value does not parse as a calendar date.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        if isinstance(value, datetime):
            parsed = value
        else:
            parsed = isoparse(str(value).strip())
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        # Shifting an offset date to UTC can leave datetime's year range
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        raise InvalidDate(f"Invalid date: {value!r}")


def validate_cost_fields(request: CostRequest, policy: ValidationPolicy) -> ValidCost:
    """Check every cost field except the owner, in a fixed order.

    Order: category, description, sum, date.
    """
    category = validate_category(request.category)
    description = validate_description(request.description)
    amount = validate_sum(request.sum, policy)
    occurred_at = parse_cost_date(request.date)
    return ValidCost(
        description=description, category=category, sum=amount, date=occurred_at
    )


def parse_report_user_id(value: Optional[str]) -> int:
    """Parse the report's user id.

    Raises:
        MissingUserId: If no id was given.
        InvalidUserId: If the id is not all digits.
        UserNotFound: If the id is too large for any user to have it.
    """
    if value is None or value == "":
        raise MissingUserId("User ID is required")
    if not _is_digits(value):
        raise InvalidUserId("User ID must be a valid number")
    user_id = _parse_digits(value, len(str(USER_ID_MAX)))
    if user_id is None or user_id > USER_ID_MAX:
        raise UserNotFound("No user found with that ID")
    return user_id


def parse_report_period(
    year: Optional[str], month: Optional[str], policy: ValidationPolicy
) -> Tuple[int, int]:
    """Validate the report year and month strings.

    Checks run in order: year format, month format, month range, year range.

    Returns:
        Tuple of (year, month) as integers.
    """
    if not _is_digits(year):
        raise InvalidYearFormat("Year must contain only digits")
    if not _is_digits(month):
        raise InvalidMonthFormat("Month must contain only digits")

    # None means too many digits to be in range
    year_num = _parse_digits(year, len(str(_DATETIME_YEAR_MAX)))
    month_num = _parse_digits(month, 2)

    if month_num is None or month_num < 1 or month_num > 12:
        raise InvalidMonth("Month must be between 1 and 12")

    low = policy.year_min if policy.year_min is not None else _DATETIME_YEAR_MIN
    high = policy.year_max if policy.year_max is not None else _DATETIME_YEAR_MAX
    low = max(low, _DATETIME_YEAR_MIN)
    high = min(high, _DATETIME_YEAR_MAX)
    if year_num is None or year_num < low or year_num > high:
        raise InvalidYearRange(f"Year must be between {low} and {high}")

    return year_num, month_num
