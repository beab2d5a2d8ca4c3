"""Helper utilities for tests."""

from datetime import datetime
from pathlib import Path
import sqlite3

from models.cost import Cost


def run_migrations(conn: sqlite3.Connection, migrations_dir: Path) -> None:
    """Run all SQL migrations in order.

    Args:
        conn: SQLite connection to run migrations against.
        migrations_dir: Path to directory containing .sql migration files.
    """
    for migration_file in sorted(migrations_dir.glob("*.sql")):
        conn.executescript(migration_file.read_text())

    conn.commit()


def add_cost(
    services,
    userid: int,
    category: str,
    amount: float,
    when: datetime,
    description: str = "Item",
) -> Cost:
    """Insert a cost straight through the store, skipping validation.

    Args:
        services: Services container.
        userid: Owner of the cost.
        category: Category name.
        amount: Cost sum.
        when: Occurrence datetime (timezone-aware).
        description: Description text.

    Returns:
        The stored Cost with its id.
    """
    return services.costs.create(
        Cost(
            id=None,
            description=description,
            category=category,
            userid=userid,
            sum=amount,
            date=when,
        )
    )
