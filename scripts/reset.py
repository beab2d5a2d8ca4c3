#!/usr/bin/env python3
"""Reset script for Spendbook.

This script will:
1. Delete the data directory (database and logs)
2. Run migrations to create a fresh, empty database
"""

import shutil
import sys

from config import load_config, get_config_path
from db.manager import DatabaseManager
from cli.migrate import cmd_apply


def reset():
    """Reset the application state."""
    print("Spendbook Reset Script")
    print("=" * 50)

    config = load_config()

    if not config.enable_reset:
        print("\nReset is disabled in configuration (enable_reset=false).")
        print(f"To enable reset, set enable_reset=true in {get_config_path()}")
        sys.exit(1)

    print(f"\nData directory: {config.base_dir}")
    print(f"Database: {config.db_path}")
    print(f"Logs: {config.log_dir}")

    response = input("\nThis will delete ALL users and costs. Continue? (yes/no): ")
    if response.lower() != "yes":
        print("Reset cancelled.")
        sys.exit(0)

    if config.base_dir.exists():
        print(f"\nDeleting {config.base_dir}...")
        shutil.rmtree(config.base_dir)
        print("✓ Data directory deleted")
    else:
        print(f"\n✓ Data directory does not exist: {config.base_dir}")

    print("\nRunning migrations...")
    db_manager = DatabaseManager(config)

    # cmd_apply takes parsed CLI args but does not read them
    class Args:
        pass

    cmd_apply(Args(), db_manager)

    print("\n" + "=" * 50)
    print("Reset complete! Database has been recreated.")
    print(f"Database location: {config.db_path}")


if __name__ == "__main__":
    reset()
