"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .mark_solution import (
    MarkSolutionRequest,
    MarkSolutionResponse,
    MarkSolutionUseCase,
)

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "MarkSolutionRequest",
    "MarkSolutionResponse",
    "MarkSolutionUseCase",
]
