"""PostgreSQL implementation of Vote repository."""

from typing import Optional

from sqlalchemy import and_, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from persona.domain.model import Vote
from persona.domain.repository import VoteRepository
from persona.domain.value import ProfileId, UserId
from persona.persistence.mappers import row_to_vote, vote_to_dict
from persona.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_profile_and_user(
        self, profile_id: ProfileId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a profile."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.profile_id == profile_id,
                votes_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_vote(dict(row)) if row else None

    async def find_by_profile(self, profile_id: ProfileId) -> list[Vote]:
        """Find all votes on a profile."""
        stmt = (
            select(votes_table)
            .where(votes_table.c.profile_id == profile_id)
            .order_by(votes_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(dict(row)) for row in result.mappings().all()]

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or overwrite the guesses of the existing one.

        Uses ON CONFLICT on the (profile_id, user_id) unique constraint so
        concurrent submissions never produce two rows.
        """
        stmt = pg_insert(votes_table).values(**vote_to_dict(vote))
        stmt = stmt.on_conflict_do_update(
            constraint="uq_votes_profile_user",
            set_={
                "mbti": stmt.excluded.mbti,
                "enneagram": stmt.excluded.enneagram,
                "zodiac": stmt.excluded.zodiac,
                "updated_at": stmt.excluded.updated_at,
            },
        ).returning(*votes_table.c)
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_vote(dict(row))
