"""PostgreSQL implementation of Comment repository."""

from collections import defaultdict
from typing import Optional
from uuid import UUID

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from persona.domain.model import Comment
from persona.domain.repository import CommentRepository
from persona.domain.value import CommentId, ProfileId, UserId
from persona.persistence.mappers import comment_to_dict, row_to_comment
from persona.persistence.tables import comment_likes_table, comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    liked_by is stored as rows in comment_likes keyed by
    (comment_id, user_id), which makes the set semantics a primary key.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _likes_for(self, comment_ids: list[UUID]) -> dict[UUID, list[UUID]]:
        """Load liking user IDs for a batch of comments."""
        if not comment_ids:
            return {}
        stmt = select(comment_likes_table.c.comment_id, comment_likes_table.c.user_id).where(
            comment_likes_table.c.comment_id.in_(comment_ids)
        )
        result = await self.session.execute(stmt)
        likes: dict[UUID, list[UUID]] = defaultdict(list)
        for comment_id, user_id in result.all():
            likes[comment_id].append(user_id)
        return likes

    async def find_by_id(
        self, comment_id: CommentId, profile_id: ProfileId
    ) -> Optional[Comment]:
        """Find a comment by ID within a profile."""
        stmt = select(comments_table).where(
            and_(
                comments_table.c.id == comment_id,
                comments_table.c.profile_id == profile_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        likes = await self._likes_for([row["id"]])
        return row_to_comment(dict(row), likes.get(row["id"], []))

    async def find_by_profile(self, profile_id: ProfileId) -> list[Comment]:
        """Find every comment on a profile."""
        stmt = select(comments_table).where(comments_table.c.profile_id == profile_id)
        result = await self.session.execute(stmt)
        rows = result.mappings().all()
        likes = await self._likes_for([row["id"] for row in rows])
        return [row_to_comment(dict(row), likes.get(row["id"], [])) for row in rows]

    async def save(self, comment: Comment) -> Comment:
        """Create a comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def add_like(self, comment_id: CommentId, user_id: UserId) -> None:
        """Atomically add a like; concurrent duplicates collapse to one row."""
        stmt = (
            pg_insert(comment_likes_table)
            .values(comment_id=comment_id, user_id=user_id)
            .on_conflict_do_nothing(index_elements=["comment_id", "user_id"])
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def remove_like(self, comment_id: CommentId, user_id: UserId) -> None:
        """Atomically remove a like."""
        stmt = delete(comment_likes_table).where(
            and_(
                comment_likes_table.c.comment_id == comment_id,
                comment_likes_table.c.user_id == user_id,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
