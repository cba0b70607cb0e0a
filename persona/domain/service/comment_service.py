"""Comment domain service."""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire

from persona.domain.error import NotFoundError, ValidationError
from persona.domain.model import Comment
from persona.domain.repository import CommentRepository
from persona.domain.value import (
    CommentFilter,
    CommentId,
    CommentSort,
    ProfileId,
    UserId,
    trim_or_null,
    validate_personality,
)

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        profile_id: ProfileId,
        user_id: UserId,
        title: Any,
        body: Any = None,
        mbti: Any = None,
        enneagram: Any = None,
        zodiac: Any = None,
    ) -> Comment:
        """Create a comment on a profile.

        The caller is responsible for checking that the profile and user
        exist.

        Args:
            profile_id: Profile being commented on
            user_id: Author
            title: Comment title, required
            body: Comment body, may be empty
            mbti: Optional MBTI guess
            enneagram: Optional Enneagram guess
            zodiac: Optional Zodiac guess

        Returns:
            Created comment with no likes

        Raises:
            ValidationError: If the title is blank or a guess is invalid
        """
        title = str(title).strip() if title is not None else ""
        if not title:
            raise ValidationError("title is required")
        validate_personality(mbti, enneagram, zodiac)

        with logfire.span(
            "comment_service.create_comment",
            profile_id=str(profile_id),
            user_id=str(user_id),
        ):
            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                profile_id=profile_id,
                user_id=user_id,
                title=title,
                body=str(body).strip() if body is not None else "",
                mbti=trim_or_null(mbti),
                enneagram=trim_or_null(enneagram),
                zodiac=trim_or_null(zodiac),
                liked_by=frozenset(),
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created", comment_id=str(saved.id), profile_id=str(profile_id)
            )
            return saved

    async def list_comments(
        self,
        profile_id: ProfileId,
        sort: CommentSort = CommentSort.BEST,
        comment_filter: CommentFilter = CommentFilter.ALL,
    ) -> list[Comment]:
        """List every comment on a profile.

        BEST orders by like count then creation time, both descending.
        RECENT orders by creation time only. Non-ALL filters keep comments
        that carry a non-empty guess for that personality system.

        The whole set is returned; there is no pagination.
        """
        with logfire.span(
            "comment_service.list_comments",
            profile_id=str(profile_id),
            sort=sort.value,
            filter=comment_filter.value,
        ):
            comments = await self.comment_repository.find_by_profile(profile_id)

            kind = comment_filter.kind
            if kind is not None:
                comments = [c for c in comments if c.guess(kind)]

            if sort is CommentSort.RECENT:
                comments.sort(key=lambda c: c.created_at, reverse=True)
            else:
                comments.sort(key=lambda c: (c.like_count, c.created_at), reverse=True)

            return comments

    async def get_comment(self, comment_id: CommentId, profile_id: ProfileId) -> Comment:
        """Get a comment that belongs to the given profile.

        Raises:
            NotFoundError: If no such comment exists under that profile
        """
        comment = await self.comment_repository.find_by_id(comment_id, profile_id)
        if not comment:
            logfire.warn(
                "Comment not found",
                comment_id=str(comment_id),
                profile_id=str(profile_id),
            )
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def like_comment(
        self, comment_id: CommentId, profile_id: ProfileId, user_id: UserId
    ) -> Comment:
        """Like a comment. Liking twice is a no-op.

        Raises:
            NotFoundError: If the comment does not exist under the profile
        """
        with logfire.span(
            "comment_service.like_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.get_comment(comment_id, profile_id)
            if user_id in comment.liked_by:
                return comment
            await self.comment_repository.add_like(comment_id, user_id)
            return await self.get_comment(comment_id, profile_id)

    async def unlike_comment(
        self, comment_id: CommentId, profile_id: ProfileId, user_id: UserId
    ) -> Comment:
        """Remove a like. Removing a like that isn't there is a no-op.

        Raises:
            NotFoundError: If the comment does not exist under the profile
        """
        with logfire.span(
            "comment_service.unlike_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.get_comment(comment_id, profile_id)
            if user_id not in comment.liked_by:
                return comment
            await self.comment_repository.remove_like(comment_id, user_id)
            return await self.get_comment(comment_id, profile_id)
