"""PostgreSQL implementation of Profile repository."""

from typing import Optional

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from persona.domain.model import Profile
from persona.domain.repository import ProfileRepository
from persona.domain.value import ProfileId
from persona.persistence.mappers import profile_to_dict, row_to_profile
from persona.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID."""
        stmt = select(profiles_table).where(profiles_table.c.id == profile_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def find_earliest(self) -> Optional[Profile]:
        """Find the earliest-created profile."""
        stmt = (
            select(profiles_table)
            .order_by(profiles_table.c.created_at.asc(), profiles_table.c.id.asc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def count(self) -> int:
        """Count all profiles."""
        stmt = select(func.count()).select_from(profiles_table)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, profile: Profile) -> Profile:
        """Create a profile."""
        stmt = insert(profiles_table).values(**profile_to_dict(profile))
        await self.session.execute(stmt)
        await self.session.flush()
        return profile
