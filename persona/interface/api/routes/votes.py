"""Vote routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, ConfigDict, Field

from persona.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    GetMyVoteRequest,
    GetMyVoteUseCase,
    GetVoteTallyRequest,
    GetVoteTallyUseCase,
    MyVoteResponse,
    VoteResponse,
    VoteTallyResponse,
)
from persona.domain.error import NotFoundError, ValidationError

router = APIRouter(prefix="/api/profiles", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for voting on a profile's personality types."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str | None = Field(default=None, alias="userId")
    mbti: str | None = None
    enneagram: str | None = None
    zodiac: str | None = None


@router.post("/{profile_id}/votes", response_model=VoteResponse)
async def cast_vote(
    profile_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> VoteResponse:
    """Cast or replace the user's vote on a profile.

    A repeat vote overwrites all three guesses; omitted ones become null.

    Raises:
        HTTPException: 404 if the profile doesn't exist, 400 if a field is invalid
    """
    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                profile_id=profile_id,
                user_id=request.user_id,
                mbti=request.mbti,
                enneagram=request.enneagram,
                zodiac=request.zodiac,
            )
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found",
        )
    except ValidationError as e:
        logfire.warn("Vote rejected", profile_id=profile_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Failed to cast vote", profile_id=profile_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to cast vote",
        )


@router.get("/{profile_id}/votes/me", response_model=MyVoteResponse)
async def get_my_vote(
    profile_id: str,
    get_my_vote_use_case: FromDishka[GetMyVoteUseCase],
    user_id: str | None = Query(default=None, alias="userId"),
) -> MyVoteResponse:
    """Get the user's own vote; all fields are null if they haven't voted.

    Raises:
        HTTPException: 404 if the profile doesn't exist, 400 if the user ID is malformed
    """
    try:
        return await get_my_vote_use_case.execute(
            GetMyVoteRequest(profile_id=profile_id, user_id=user_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found",
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Failed to get vote", profile_id=profile_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get vote",
        )


@router.get("/{profile_id}/votes", response_model=VoteTallyResponse)
async def get_vote_tally(
    profile_id: str,
    get_vote_tally_use_case: FromDishka[GetVoteTallyUseCase],
) -> VoteTallyResponse:
    """Get the winning guess per personality system and the full counts.

    Raises:
        HTTPException: 404 if the profile doesn't exist
    """
    try:
        return await get_vote_tally_use_case.execute(
            GetVoteTallyRequest(profile_id=profile_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found",
        )
    except Exception as e:
        logfire.error("Failed to tally votes", profile_id=profile_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to tally votes",
        )
