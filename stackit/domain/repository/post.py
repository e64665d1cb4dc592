"""Post repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, TypeVar

from stackit.domain.model.post import AnyPost, Answer, Question
from stackit.domain.value import PostId, PostKind, TagName, UserId

PostT = TypeVar("PostT", Question, Answer)


class QuestionSortOrder(str, Enum):
    """Sort order for question listings."""

    RECENT = "recent"  # created_at DESC
    VOTES = "votes"  # vote_score DESC, created_at DESC
    POPULAR = "popular"  # views DESC, created_at DESC


class PostRepository(ABC):
    """Repository for the Question and Answer aggregates.

    Writes are optimistic: ``save`` compares the stored version token with
    the one the caller read and refuses the write on mismatch. The accepted
    answer of a question is only moved through ``set_accepted_answer`` and
    ``clear_accepted_answer``.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[AnyPost]:
        """Find a question or answer by ID, including soft-deleted ones.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, post: PostT, expected_version: int | None) -> PostT:
        """Create or update a post with a compare-and-swap on its version.

        With ``expected_version=None`` the post is inserted and must not
        exist yet. Otherwise the stored version must equal
        ``expected_version``. The stored copy gets version
        ``(expected_version or 0) + 1``.

        ``views`` on questions is never written here; it is owned by
        ``increment_views``.

        Args:
            post: The post to save
            expected_version: Version read by the caller, None to create

        Returns:
            The saved post with its new version

        Raises:
            VersionConflictError: If the stored version differs or the post
                already exists on create
        """
        pass

    @abstractmethod
    async def set_accepted_answer(
        self, question_id: PostId, answer_id: PostId, expected_version: int
    ) -> Answer:
        """Make an answer the question's only accepted answer, atomically.

        The question's version is checked and bumped first, so a competing
        acceptance on the same question fails before touching any answer.
        Then every other accepted answer of the question is unset, and
        finally the target answer is set. Answers whose flag changes get a
        new version. Either all of these writes happen or none do.

        Args:
            question_id: The question
            answer_id: Answer to accept
            expected_version: Question version read by the caller

        Returns:
            The accepted answer

        Raises:
            VersionConflictError: If the question's stored version differs,
                or the answer is no longer an active answer of the question
        """
        pass

    @abstractmethod
    async def clear_accepted_answer(
        self, question_id: PostId, expected_version: int
    ) -> Question:
        """Clear a question's accepted answer, atomically.

        Same ordering and guarantees as ``set_accepted_answer``.

        Raises:
            VersionConflictError: If the question's stored version differs
        """
        pass

    @abstractmethod
    async def find_by_author(
        self, author_id: UserId, kind: PostKind, limit: int = 10
    ) -> List[AnyPost]:
        """Find a user's active posts of one kind, newest first."""
        pass

    @abstractmethod
    async def count_by_author(
        self, author_id: UserId, kind: PostKind, accepted_only: bool = False
    ) -> int:
        """Count a user's active posts of one kind.

        With ``accepted_only`` only accepted answers are counted.
        """
        pass

    @abstractmethod
    async def find_questions(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.RECENT,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        include_inactive: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering and pagination.

        Args:
            sort: Sort order
            tag: Only questions carrying this tag
            search: Case-insensitive keyword matched against title and body
            include_inactive: Whether to include soft-deleted questions
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            Matching questions
        """
        pass

    @abstractmethod
    async def count_questions(
        self,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        include_inactive: bool = False,
    ) -> int:
        """Count questions matching the given filters."""
        pass

    @abstractmethod
    async def find_answers(
        self, question_id: PostId, include_inactive: bool = False
    ) -> List[Answer]:
        """Find answers to a question, best first.

        Ordered by vote score descending, then oldest first.
        """
        pass

    @abstractmethod
    async def count_answers(self, question_id: PostId) -> int:
        """Count active answers to a question."""
        pass

    @abstractmethod
    async def increment_views(self, question_id: PostId) -> None:
        """Atomically increment a question's view counter.

        Does not touch the version token.

        Args:
            question_id: The question ID
        """
        pass
