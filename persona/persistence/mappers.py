"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from persona.domain.model import Comment, Profile, User, Vote
from persona.domain.value import CommentId, ProfileId, UserId, VoteId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model."""
    return Profile(
        id=ProfileId(_uuid(row["id"])),
        name=row["name"],
        description=row["description"],
        mbti=row["mbti"],
        enneagram=row["enneagram"],
        variant=row["variant"],
        tritype=row["tritype"],
        socionics=row["socionics"],
        sloan=row["sloan"],
        psyche=row["psyche"],
        temperaments=row.get("temperaments") or "",
        image=row["image"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict."""
    return profile.model_dump()


def row_to_comment(row: Dict[str, Any], liked_by: Iterable[UUID] = ()) -> Comment:
    """Convert database row plus its like rows to Comment domain model.

    Args:
        row: Comment row as dict
        liked_by: User IDs from comment_likes for this comment

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        profile_id=ProfileId(_uuid(row["profile_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        title=row["title"],
        body=row.get("body") or "",
        mbti=row.get("mbti"),
        enneagram=row.get("enneagram"),
        zodiac=row.get("zodiac"),
        liked_by=frozenset(UserId(_uuid(uid)) for uid in liked_by),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to a comments row.

    Likes live in their own table and are not part of the row.
    """
    return comment.model_dump(exclude={"liked_by", "like_count"})


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        profile_id=ProfileId(_uuid(row["profile_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        mbti=row.get("mbti"),
        enneagram=row.get("enneagram"),
        zodiac=row.get("zodiac"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return vote.model_dump()
