"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase, VoteItem
from .get_votes import (
    CallerVoteResponse,
    GetCallerVoteUseCase,
    GetVoteCountUseCase,
    VoteCountResponse,
    VoteLookupRequest,
)
from .remove_vote import RemoveVoteRequest, RemoveVoteResponse, RemoveVoteUseCase

__all__ = [
    "CallerVoteResponse",
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetCallerVoteUseCase",
    "GetVoteCountUseCase",
    "RemoveVoteRequest",
    "RemoveVoteResponse",
    "RemoveVoteUseCase",
    "VoteCountResponse",
    "VoteItem",
    "VoteLookupRequest",
]
