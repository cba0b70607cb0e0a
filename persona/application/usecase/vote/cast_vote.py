"""Cast vote use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from persona.application.usecase.base import BaseUseCase, CamelModel
from persona.application.usecase.vote.common import require_voter
from persona.domain.service import ProfileService, UserService, VoteService


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    profile_id: str
    user_id: str | None = None
    mbti: str | None = None
    enneagram: str | None = None
    zodiac: str | None = None


class VoteResponse(CamelModel):
    """Stored vote."""

    id: str
    profile_id: str
    user_id: str
    mbti: Optional[str]
    enneagram: Optional[str]
    zodiac: Optional[str]
    created_at: datetime
    updated_at: datetime


class CastVoteUseCase(BaseUseCase):
    """Use case for submitting (or resubmitting) a user's vote on a profile."""

    def __init__(
        self,
        vote_service: VoteService,
        profile_service: ProfileService,
        user_service: UserService,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            profile_service: Profile domain service
            user_service: User domain service
        """
        self.vote_service = vote_service
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: CastVoteRequest) -> VoteResponse:
        """Execute cast vote flow.

        Raises:
            NotFoundError: If the profile doesn't exist
            ValidationError: If the user is unknown or a guess is invalid
        """
        profile = await self.profile_service.get_profile(request.profile_id)
        user_id = await require_voter(self.user_service, request.user_id)

        vote = await self.vote_service.cast_vote(
            profile_id=profile.id,
            user_id=user_id,
            mbti=request.mbti,
            enneagram=request.enneagram,
            zodiac=request.zodiac,
        )

        return VoteResponse(
            id=str(vote.id),
            profile_id=str(vote.profile_id),
            user_id=str(vote.user_id),
            mbti=vote.mbti,
            enneagram=vote.enneagram,
            zodiac=vote.zodiac,
            created_at=vote.created_at,
            updated_at=vote.updated_at,
        )
