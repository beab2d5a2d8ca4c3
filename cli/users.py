#!/usr/bin/env python3

import sys
from datetime import date
from logger import get_logger
from tools.users import summarize_user
from errors import SpendbookError

logger = get_logger()


def cmd_list(args, services):
    """List all users in the database."""
    users = services.users.find_all()

    if not users:
        logger.info("No users found.")
        return

    logger.info("\nUsers:")
    logger.info("=" * 80)
    for user in users:
        logger.info(f"ID: {user.id}")
        logger.info(f"Name: {user.first_name} {user.last_name}")
        if user.birthday:
            logger.info(f"Birthday: {user.birthday.isoformat()}")
        if user.marital_status:
            logger.info(f"Marital status: {user.marital_status}")
        logger.info("-" * 80)

    logger.info(f"\nTotal users: {len(users)}")


def cmd_create(args, services):
    """Create a new user."""
    if args.id <= 0:
        logger.error("User ID must be a positive integer.")
        sys.exit(1)

    if not args.first_name.strip() or not args.last_name.strip():
        logger.error("First and last name cannot be empty.")
        sys.exit(1)

    birthday = None
    if args.birthday:
        try:
            birthday = date.fromisoformat(args.birthday)
        except ValueError:
            logger.error(f"Invalid birthday '{args.birthday}'. Use YYYY-MM-DD.")
            sys.exit(1)

    if services.users.find(args.id) is not None:
        logger.error(f"User with ID {args.id} already exists.")
        sys.exit(1)

    user = services.users.create(
        args.id,
        args.first_name,
        args.last_name,
        birthday=birthday,
        marital_status=args.marital_status,
    )

    logger.info(f"\n✓ User created successfully with ID: {user.id}")
    logger.info(f"  Name: {user.first_name} {user.last_name}")


def cmd_show(args, services):
    """Show a user's name and the total of all their costs."""
    try:
        summary = summarize_user(services, args.id)
    except SpendbookError as e:
        logger.error(f"{e.code}: {e.message}")
        sys.exit(1)

    logger.info(f"ID: {summary.id}")
    logger.info(f"Name: {summary.first_name} {summary.last_name}")
    logger.info(f"Total costs: {summary.total:.2f}")


def setup_parser(subparsers):
    """Setup users subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "users",
        help="Manage users",
        description="Create, list and inspect users",
    )

    users_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available user commands",
        dest="subcommand",
        required=True,
    )

    # users list
    list_parser = users_subparsers.add_parser("list", help="List all users")
    list_parser.set_defaults(func=cmd_list)

    # users create
    create_parser = users_subparsers.add_parser("create", help="Create a new user")
    create_parser.add_argument("--id", type=int, required=True, help="User ID")
    create_parser.add_argument("--first-name", required=True, help="First name")
    create_parser.add_argument("--last-name", required=True, help="Last name")
    create_parser.add_argument("--birthday", help="Birthday (YYYY-MM-DD)")
    create_parser.add_argument("--marital-status", help="Marital status")
    create_parser.set_defaults(func=cmd_create)

    # users show
    show_parser = users_subparsers.add_parser(
        "show", help="Show a user with their cost total"
    )
    show_parser.add_argument("id", type=int, help="User ID")
    show_parser.set_defaults(func=cmd_show)
