"""User service for database operations."""

from datetime import date
from typing import List, Optional
from models.user import User

_USER_SELECT_FIELDS = "id, first_name, last_name, birthday, marital_status"


class UserService:
    """Service for managing users."""

    def __init__(self, db_manager):
        """Initialize the user service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def find(self, user_id: int) -> Optional[User]:
        """Get a single user by their logical ID.

        Args:
            user_id: The user ID to find.

        Returns:
            User object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"SELECT {_USER_SELECT_FIELDS} FROM users WHERE id = ?",
                (user_id,),
            )
            row = cursor.fetchone()

            if row:
                return self._row_to_user(row)
            return None

    def find_all(self) -> List[User]:
        """Get all users, ordered by id."""
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"SELECT {_USER_SELECT_FIELDS} FROM users ORDER BY id"
            )
            return [self._row_to_user(row) for row in cursor.fetchall()]

    def create(
        self,
        user_id: int,
        first_name: str,
        last_name: str,
        birthday: Optional[date] = None,
        marital_status: Optional[str] = None,
    ) -> User:
        """Create a new user.

        Args:
            user_id: Logical user ID (positive, unique).
            first_name: Given name, trimmed before storage.
            last_name: Family name, trimmed before storage.
            birthday: Optional date of birth.
            marital_status: Optional marital status.

        Returns:
            The created User object.

        Raises:
            sqlite3.IntegrityError: If the ID is taken, not positive, or a
                name is empty.
        """
        user = User(
            id=user_id,
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            birthday=birthday,
            marital_status=marital_status,
        )
        with self.db_manager.connect() as conn:
            conn.execute(
                f"INSERT INTO users ({_USER_SELECT_FIELDS}) VALUES (?, ?, ?, ?, ?)",
                (
                    user.id,
                    user.first_name,
                    user.last_name,
                    user.birthday.isoformat() if user.birthday else None,
                    user.marital_status,
                ),
            )
            conn.commit()

        return user

    def _row_to_user(self, row: tuple) -> User:
        """Convert a database row to a User object."""
        return User(
            id=row[0],
            first_name=row[1],
            last_name=row[2],
            birthday=date.fromisoformat(row[3]) if row[3] else None,
            marital_status=row[4],
        )
