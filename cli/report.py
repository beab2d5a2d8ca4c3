#!/usr/bin/env python3

import sys
from logger import get_logger
from tools.reports import get_monthly_report
from validation import ReportRequest
from errors import SpendbookError

logger = get_logger()


def cmd_report(args, services):
    """Print a user's monthly report, grouped by category."""
    request = ReportRequest(id=args.id, year=args.year, month=args.month)

    try:
        report = get_monthly_report(
            services, request, services.config.validation_policy()
        )
    except SpendbookError as e:
        logger.error(f"{e.code}: {e.message}")
        sys.exit(1)

    logger.info(f"\nReport for user {report.userid}, {report.year:04d}/{report.month:02d}")
    logger.info("=" * 80)
    for category, items in report.buckets.items():
        category_total = sum(item.sum for item in items)
        logger.info(f"{category}: {len(items)} item(s), total {category_total:.2f}")
        for item in items:
            logger.info(f"  day {item.day:>2}  {item.sum:>10.2f}  {item.description}")
    logger.info("-" * 80)
    logger.info(f"Total: {report.total:.2f}")


def setup_parser(subparsers):
    """Setup report subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "report",
        help="Monthly cost report",
        description="Show a user's costs for one month, grouped by category",
    )
    parser.add_argument("--id", required=True, help="User ID")
    parser.add_argument("--year", required=True, help="Year, e.g. 2024")
    parser.add_argument("--month", required=True, help="Month (1-12)")
    parser.set_defaults(func=cmd_report)
