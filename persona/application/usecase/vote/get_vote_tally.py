"""Get vote tally use case."""

from typing import Optional

from pydantic import BaseModel

from persona.application.usecase.base import BaseUseCase, CamelModel
from persona.domain.service import ProfileService, VoteService


class GetVoteTallyRequest(BaseModel):
    """Get vote tally request."""

    profile_id: str


class VoteCounts(CamelModel):
    """Leaderboard per personality system (value -> number of votes)."""

    mbti: dict[str, int]
    enneagram: dict[str, int]
    zodiac: dict[str, int]


class VoteTallyResponse(CamelModel):
    """Winning guess per personality system plus the full counts."""

    mbti: Optional[str]
    enneagram: Optional[str]
    zodiac: Optional[str]
    counts: VoteCounts


class GetVoteTallyUseCase(BaseUseCase):
    """Use case for the community's aggregated guesses about a profile."""

    def __init__(
        self, vote_service: VoteService, profile_service: ProfileService
    ) -> None:
        """Initialize get vote tally use case.

        Args:
            vote_service: Vote domain service
            profile_service: Profile domain service
        """
        self.vote_service = vote_service
        self.profile_service = profile_service

    async def execute(self, request: GetVoteTallyRequest) -> VoteTallyResponse:
        """Execute tally flow.

        Raises:
            NotFoundError: If the profile doesn't exist
        """
        profile = await self.profile_service.get_profile(request.profile_id)
        tally = await self.vote_service.tally_votes(profile.id)

        return VoteTallyResponse(
            mbti=tally.mbti.winner,
            enneagram=tally.enneagram.winner,
            zodiac=tally.zodiac.winner,
            counts=VoteCounts(
                mbti=tally.mbti.counts,
                enneagram=tally.enneagram.counts,
                zodiac=tally.zodiac.counts,
            ),
        )
