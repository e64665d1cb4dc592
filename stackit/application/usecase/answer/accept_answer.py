"""Accept answer use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import VoteLedger
from stackit.domain.value import PostId, UserId


class AcceptAnswerRequest(BaseModel):
    """Accept answer request."""

    question_id: str  # UUID string
    answer_id: str  # UUID string
    user_id: str  # Must be the question author


class AcceptAnswerResponse(BaseModel):
    """Accept answer response."""

    question_id: str
    answer_id: str
    is_accepted: bool


class AcceptAnswerUseCase:
    """Use case for accepting an answer to one's own question."""

    def __init__(self, vote_ledger: VoteLedger) -> None:
        """Initialize accept answer use case.

        Args:
            vote_ledger: Vote ledger domain service
        """
        self.vote_ledger = vote_ledger

    async def execute(self, request: AcceptAnswerRequest) -> AcceptAnswerResponse:
        """Execute accept answer flow.

        Raises:
            NotFoundError: If question or answer is missing or inactive
            MismatchError: If the answer belongs to another question
            NotAuthorizedError: If the user is not the question author
        """
        answer = await self.vote_ledger.accept_answer(
            PostId(UUID(request.question_id)),
            PostId(UUID(request.answer_id)),
            UserId(UUID(request.user_id)),
        )

        return AcceptAnswerResponse(
            question_id=str(answer.question_id),
            answer_id=str(answer.id),
            is_accepted=answer.is_accepted,
        )
