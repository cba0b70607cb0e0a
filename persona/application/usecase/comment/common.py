"""Shared comment response models."""

from datetime import datetime
from typing import Optional

from persona.application.usecase.base import CamelModel
from persona.domain.model import Comment, User


class CommentUser(CamelModel):
    """Denormalised author snapshot attached to a comment."""

    id: str
    name: str

    @classmethod
    def from_user(cls, user: User | None) -> "CommentUser":
        # Comments from users that no longer resolve still render
        if user is None:
            return cls(id="", name="")
        return cls(id=str(user.id), name=user.name)


class CommentResponse(CamelModel):
    """A single comment as stored."""

    id: str
    profile_id: str
    user_id: str
    title: str
    body: str
    mbti: Optional[str]
    enneagram: Optional[str]
    zodiac: Optional[str]
    like_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=str(comment.id),
            profile_id=str(comment.profile_id),
            user_id=str(comment.user_id),
            title=comment.title,
            body=comment.body,
            mbti=comment.mbti,
            enneagram=comment.enneagram,
            zodiac=comment.zodiac,
            like_count=comment.like_count,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class CommentItem(CamelModel):
    """Comment in a listing, joined with its author's current name."""

    id: str
    profile_id: str
    user_id: str
    user: CommentUser
    title: str
    body: str
    mbti: Optional[str]
    enneagram: Optional[str]
    zodiac: Optional[str]
    like_count: int
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment, user: User | None) -> "CommentItem":
        return cls(
            id=str(comment.id),
            profile_id=str(comment.profile_id),
            user_id=str(comment.user_id),
            user=CommentUser.from_user(user),
            title=comment.title,
            body=comment.body,
            mbti=comment.mbti,
            enneagram=comment.enneagram,
            zodiac=comment.zodiac,
            like_count=comment.like_count,
            created_at=comment.created_at,
        )
