"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import VoteLedger
from stackit.domain.value import PostId, PostKind, UserId, VoteDirection, VoteState


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    post_id: str  # UUID string
    kind: PostKind
    direction: VoteDirection
    user_id: str  # User ID from authenticated user


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    post_id: str
    vote_score: int
    user_vote: VoteState


class CastVoteUseCase:
    """Use case for voting on a question or answer.

    Voting twice in the same direction retracts the vote; voting in the
    other direction switches it.
    """

    def __init__(self, vote_ledger: VoteLedger) -> None:
        """Initialize cast vote use case.

        Args:
            vote_ledger: Vote ledger domain service
        """
        self.vote_ledger = vote_ledger

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Raises:
            NotFoundError: If the post is missing or inactive
            SelfVoteForbiddenError: If the user authored the post
            VersionConflictError: If concurrent writers kept winning
        """
        result = await self.vote_ledger.cast_vote(
            PostId(UUID(request.post_id)),
            UserId(UUID(request.user_id)),
            request.direction,
            kind=request.kind,
        )

        return CastVoteResponse(
            post_id=str(result.post_id),
            vote_score=result.vote_score,
            user_vote=result.user_vote,
        )
