"""Monthly cost reports."""

import sqlite3
from datetime import datetime, timezone
from typing import Tuple

from dateutil.relativedelta import relativedelta

from errors import InternalFailure, UserNotFound
from logger import get_logger
from models.report import MonthlyReport, ReportItem
from validation import (
    ReportRequest,
    ValidationPolicy,
    parse_report_period,
    parse_report_user_id,
)

logger = get_logger()


def month_window(year: int, month: int) -> Tuple[datetime, datetime]:
    """Get the first and last instant of a calendar month in UTC.

    Args:
        year: Year (1-9999).
        month: Month (1-12).

    Returns:
        Tuple of (start, end), both inclusive. ``end`` is one microsecond
        before the next month starts.
    """
    start = datetime(year, month, 1, tzinfo=timezone.utc)
    # day=31 is clamped to the last day of the month
    end = start + relativedelta(
        day=31, hour=23, minute=59, second=59, microsecond=999999
    )
    return start, end


def build_monthly_report(services, userid: int, year: int, month: int) -> MonthlyReport:
    """Bucket a user's costs for one month by category.

    Costs keep the order the store returns them in (date, then id).

    Raises:
        InternalFailure: If the store query fails.
    """
    start, end = month_window(year, month)

    try:
        costs = services.costs.find_by_user_in_range(userid, start, end)
    except sqlite3.Error as e:
        raise InternalFailure(f"Failed to generate report: {e}") from e

    report = MonthlyReport(userid=userid, year=year, month=month)
    for cost in costs:
        report.buckets[cost.category].append(
            ReportItem(
                sum=cost.sum,
                description=cost.description,
                day=cost.date.astimezone(timezone.utc).day,
            )
        )

    logger.debug(
        f"Report for user {userid} {year:04d}/{month:02d}: {len(costs)} cost(s)"
    )
    return report


def get_monthly_report(
    services, request: ReportRequest, policy: ValidationPolicy
) -> MonthlyReport:
    """Validate a report request and build the report.

    The user is resolved before year and month are checked.

    Args:
        services: Services container with user and cost services.
        request: Raw report query.
        policy: Validation rules (year bounds).

    Returns:
        MonthlyReport with every category bucket present.

    Raises:
        MissingUserId: If the request has no id.
        InvalidUserId: If the id is not a number.
        UserNotFound: If no user has that id.
        ValidationError: If year or month is invalid.
        InternalFailure: If the store query fails.
    """
    userid = parse_report_user_id(request.id)

    if services.users.find(userid) is None:
        raise UserNotFound(f"No user found with ID: {userid}")

    year, month = parse_report_period(request.year, request.month, policy)
    return build_monthly_report(services, userid, year, month)
