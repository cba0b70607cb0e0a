"""Shared vote helpers."""

from persona.domain.error import NotFoundError, ValidationError
from persona.domain.service import UserService
from persona.domain.value import UserId, parse_id


def parse_voter_id(raw_user_id: str | None) -> UserId:
    """Parse the voting user's ID.

    Raises:
        ValidationError: If the ID is missing or malformed
    """
    user_uuid = parse_id(raw_user_id)
    if user_uuid is None:
        raise ValidationError("userId is required and must be a valid id")
    return UserId(user_uuid)


async def require_voter(user_service: UserService, raw_user_id: str | None) -> UserId:
    """Parse the voting user's ID and check that the user exists.

    Voters must be registered users, the same rule comment authors follow.
    The existence check on upsert is deliberate.

    Raises:
        ValidationError: If the ID is malformed or the user is unknown
    """
    user_id = parse_voter_id(raw_user_id)
    try:
        await user_service.get_by_id(user_id)
    except NotFoundError:
        raise ValidationError("User not found")
    return user_id
