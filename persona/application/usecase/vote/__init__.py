"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteUseCase, VoteResponse
from .get_my_vote import GetMyVoteRequest, GetMyVoteUseCase, MyVoteResponse
from .get_vote_tally import (
    GetVoteTallyRequest,
    GetVoteTallyUseCase,
    VoteCounts,
    VoteTallyResponse,
)

__all__ = [
    "CastVoteRequest",
    "CastVoteUseCase",
    "GetMyVoteRequest",
    "GetMyVoteUseCase",
    "GetVoteTallyRequest",
    "GetVoteTallyUseCase",
    "MyVoteResponse",
    "VoteCounts",
    "VoteResponse",
    "VoteTallyResponse",
]
