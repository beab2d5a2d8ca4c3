"""Cost service for database operations."""

from datetime import datetime
from typing import List
from models.cost import Cost, from_storage_timestamp, to_storage_timestamp

_COST_SELECT_FIELDS = "id, description, category, userid, amount, occurred_at"


class CostService:
    """Service for storing and querying cost records."""

    def __init__(self, db_manager):
        """Initialize the cost service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def create(self, cost: Cost) -> Cost:
        """Insert a single cost.

        Args:
            cost: Cost object to insert. Its id is ignored.

        Returns:
            A new Cost object with the store-assigned id populated.

        Raises:
            sqlite3.IntegrityError: If the category is unknown or the owner
                does not exist.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                """
                INSERT INTO costs (description, category, userid, amount, occurred_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    cost.description,
                    cost.category,
                    cost.userid,
                    cost.sum,
                    to_storage_timestamp(cost.date),
                ),
            )
            conn.commit()
            cost_id = cursor.lastrowid

        return Cost(
            id=cost_id,
            description=cost.description,
            category=cost.category,
            userid=cost.userid,
            sum=cost.sum,
            date=cost.date,
        )

    def find_by_user(self, userid: int) -> List[Cost]:
        """Get all costs for a user, oldest first."""
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"""
                SELECT {_COST_SELECT_FIELDS}
                FROM costs
                WHERE userid = ?
                ORDER BY occurred_at, id
                """,
                (userid,),
            )
            return [self._row_to_cost(row) for row in cursor.fetchall()]

    def find_by_user_in_range(
        self, userid: int, start: datetime, end: datetime
    ) -> List[Cost]:
        """Get a user's costs whose date falls within [start, end].

        Args:
            userid: Owner of the costs.
            start: Inclusive lower bound.
            end: Inclusive upper bound.

        Returns:
            List of Cost objects ordered by date, then id.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"""
                SELECT {_COST_SELECT_FIELDS}
                FROM costs
                WHERE userid = ? AND occurred_at >= ? AND occurred_at <= ?
                ORDER BY occurred_at, id
                """,
                (userid, to_storage_timestamp(start), to_storage_timestamp(end)),
            )
            return [self._row_to_cost(row) for row in cursor.fetchall()]

    def total_for_user(self, userid: int) -> float:
        """Sum the amounts of all of a user's costs.

        Returns:
            The total, 0 if the user has no costs.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "SELECT COALESCE(SUM(amount), 0) FROM costs WHERE userid = ?",
                (userid,),
            )
            return float(cursor.fetchone()[0])

    def _row_to_cost(self, row: tuple) -> Cost:
        """Convert a database row to a Cost object."""
        return Cost(
            id=row[0],
            description=row[1],
            category=row[2],
            userid=row[3],
            sum=row[4],
            date=from_storage_timestamp(row[5]),
        )
