"""User-level aggregates."""

from typing import Optional

from errors import UserNotFound
from models.user import UserSummary
from validation import is_storable_user_id


def summarize_user(services, user_id: Optional[int]) -> UserSummary:
    """Get a user's name fields and the sum of all their costs.

    Args:
        services: Services container with user and cost services.
        user_id: User ID, or None when the caller's value could not be
            read as one.

    Raises:
        UserNotFound: If no user has that id.
    """
    if not is_storable_user_id(user_id):
        raise UserNotFound("No user found with that ID")

    user = services.users.find(user_id)
    if user is None:
        raise UserNotFound(f"No user found with ID: {user_id}")

    return UserSummary(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        total=services.costs.total_for_user(user.id),
    )
