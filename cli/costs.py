#!/usr/bin/env python3

import sys
from logger import get_logger
from models.cost import CATEGORIES
from tools.costs import record_cost
from validation import CostRequest
from errors import SpendbookError

logger = get_logger()


def cmd_add(args, services):
    """Record a cost for an existing user."""
    request = CostRequest(
        description=args.description,
        category=args.category,
        userid=args.userid,
        sum=args.sum,
        date=args.date,
    )

    try:
        cost = record_cost(services, request, services.config.validation_policy())
    except SpendbookError as e:
        logger.error(f"{e.code}: {e.message}")
        sys.exit(1)

    logger.info(f"\n✓ Cost added with ID: {cost.id}")
    logger.info(f"  Description: {cost.description}")
    logger.info(f"  Category: {cost.category}")
    logger.info(f"  Sum: {cost.sum:.2f}")
    logger.info(f"  Date: {cost.date.isoformat()}")


def setup_parser(subparsers):
    """Setup costs subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "costs",
        help="Record costs",
        description="Record cost items for users",
    )

    costs_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available cost commands",
        dest="subcommand",
        required=True,
    )

    # costs add
    add_parser = costs_subparsers.add_parser("add", help="Add a cost item")
    add_parser.add_argument("--userid", required=True, help="Owner user ID")
    add_parser.add_argument(
        "--category", required=True, help=f"One of: {', '.join(CATEGORIES)}"
    )
    add_parser.add_argument("--description", required=True, help="Description")
    add_parser.add_argument("--sum", required=True, help="Amount")
    add_parser.add_argument(
        "--date", help="Occurrence date (ISO 8601), defaults to now"
    )
    add_parser.set_defaults(func=cmd_add)
