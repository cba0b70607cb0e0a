"""Get my vote use case."""

from typing import Optional

from pydantic import BaseModel

from persona.application.usecase.base import BaseUseCase, CamelModel
from persona.application.usecase.vote.common import parse_voter_id
from persona.domain.service import ProfileService, VoteService


class GetMyVoteRequest(BaseModel):
    """Get my vote request."""

    profile_id: str
    user_id: str | None = None


class MyVoteResponse(CamelModel):
    """A user's current guesses; all None if they haven't voted."""

    mbti: Optional[str] = None
    enneagram: Optional[str] = None
    zodiac: Optional[str] = None


class GetMyVoteUseCase(BaseUseCase):
    """Use case for reading back a user's own vote."""

    def __init__(
        self, vote_service: VoteService, profile_service: ProfileService
    ) -> None:
        """Initialize get my vote use case.

        Args:
            vote_service: Vote domain service
            profile_service: Profile domain service
        """
        self.vote_service = vote_service
        self.profile_service = profile_service

    async def execute(self, request: GetMyVoteRequest) -> MyVoteResponse:
        """Execute get my vote flow.

        Not having voted yet is not an error.

        Raises:
            NotFoundError: If the profile doesn't exist
            ValidationError: If the user ID is malformed
        """
        profile = await self.profile_service.get_profile(request.profile_id)
        user_id = parse_voter_id(request.user_id)

        vote = await self.vote_service.get_vote(profile.id, user_id)
        if not vote:
            return MyVoteResponse()
        return MyVoteResponse(mbti=vote.mbti, enneagram=vote.enneagram, zodiac=vote.zodiac)
