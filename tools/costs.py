"""Recording new cost items."""

from datetime import datetime, timezone

from errors import UserNotFound
from logger import get_logger
from models.cost import Cost
from validation import CostRequest, ValidationPolicy, coerce_user_id, validate_cost_fields

logger = get_logger()


def record_cost(services, request: CostRequest, policy: ValidationPolicy) -> Cost:
    """Validate and persist a new cost for an existing user.

    The owner is resolved before any other field is looked at. Nothing is
    written unless every check passes.

    Args:
        services: Services container with user and cost services.
        request: Raw cost payload.
        policy: Validation rules to apply.

    Returns:
        The persisted Cost, including its assigned id.

    Raises:
        UserNotFound: If userid does not name an existing user.
        ValidationError: If any other field is invalid.
    """
    userid = coerce_user_id(request.userid)
    user = services.users.find(userid) if userid is not None else None
    if user is None:
        raise UserNotFound("The specified user does not exist in the database")

    fields = validate_cost_fields(request, policy)

    cost = services.costs.create(
        Cost(
            id=None,
            description=fields.description,
            category=fields.category,
            userid=user.id,
            sum=fields.sum,
            date=fields.date or datetime.now(timezone.utc),
        )
    )

    logger.info(
        f"Recorded cost {cost.id} for user {cost.userid}: "
        f"{cost.category} {cost.sum} on {cost.date.date().isoformat()}"
    )
    return cost
