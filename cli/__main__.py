#!/usr/bin/env python3
"""
Spendbook CLI - Command-line interface for users, costs and monthly reports.

Usage:
    python -m cli <command> [subcommand] [options]

Commands:
    users    Manage users
    costs    Record costs
    report   Monthly cost report
    migrate  Database migrations
    serve    Run the HTTP API

Examples:
    python -m cli migrate apply
    python -m cli users create --id 123123 --first-name Ada --last-name Lovelace
    python -m cli costs add --userid 123123 --category food --description Lunch --sum 15.5
    python -m cli report --id 123123 --year 2024 --month 6
    python -m cli serve --port 8000
"""

import sys
import argparse
from cli import users, costs, report, migrate, serve
from config import load_config
from services.base import Services
from db.manager import DatabaseManager
from logger import setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Spendbook - Personal cost tracking and monthly reports",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    users.setup_parser(subparsers)
    costs.setup_parser(subparsers)
    report.setup_parser(subparsers)
    migrate.setup_parser(subparsers)
    serve.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)

            # Commands that use db_manager directly: migrate
            if args.command == "migrate":
                db_manager = DatabaseManager(config)
                args.func(args, db_manager)
            else:
                args.func(args, Services(config))
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
