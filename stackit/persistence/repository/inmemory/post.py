"""In-memory post repository for testing."""

from typing import Optional

from stackit.domain.error import VersionConflictError
from stackit.domain.model import AnyPost, Answer, Question
from stackit.domain.repository.post import PostRepository, PostT, QuestionSortOrder
from stackit.domain.value import PostId, PostKind, TagName, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Version checks and view ownership behave like the PostgreSQL adapter.
    Multi-post writes never await, so they are atomic on the event loop.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, AnyPost] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[AnyPost]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def set_accepted_answer(
        self, question_id: PostId, answer_id: PostId, expected_version: int
    ) -> Answer:
        """Make an answer the question's only accepted answer."""
        question = self._claim(question_id, expected_version)
        target = self._posts.get(answer_id)
        if (
            not isinstance(target, Answer)
            or not target.is_active
            or target.question_id != question_id
        ):
            raise VersionConflictError("post", str(answer_id))

        self._posts[question_id] = question.model_copy(
            update={"accepted_answer_id": answer_id, "version": expected_version + 1}
        )
        self._unset_accepted(question_id, keep=answer_id)

        if target.is_accepted:
            return target
        accepted = target.model_copy(
            update={"is_accepted": True, "version": target.version + 1}
        )
        self._posts[answer_id] = accepted
        return accepted

    async def clear_accepted_answer(
        self, question_id: PostId, expected_version: int
    ) -> Question:
        """Clear the question's accepted answer."""
        question = self._claim(question_id, expected_version)
        saved = question.model_copy(
            update={"accepted_answer_id": None, "version": expected_version + 1}
        )
        self._posts[question_id] = saved
        self._unset_accepted(question_id)
        return saved

    def _claim(self, question_id: PostId, expected_version: int) -> Question:
        question = self._posts.get(question_id)
        if not isinstance(question, Question) or question.version != expected_version:
            raise VersionConflictError(
                "post", str(question_id), expected_version=expected_version
            )
        return question

    def _unset_accepted(
        self, question_id: PostId, keep: Optional[PostId] = None
    ) -> None:
        for post in list(self._posts.values()):
            if (
                isinstance(post, Answer)
                and post.question_id == question_id
                and post.is_accepted
                and post.id != keep
            ):
                self._posts[post.id] = post.model_copy(
                    update={"is_accepted": False, "version": post.version + 1}
                )

    async def find_by_author(
        self, author_id: UserId, kind: PostKind, limit: int = 10
    ) -> list[AnyPost]:
        """Find a user's active posts of one kind, newest first."""
        posts = [
            p
            for p in self._posts.values()
            if p.author_id == author_id and p.kind == kind and p.is_active
        ]
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts[:limit]

    async def count_by_author(
        self, author_id: UserId, kind: PostKind, accepted_only: bool = False
    ) -> int:
        """Count a user's active posts of one kind."""
        return sum(
            1
            for p in self._posts.values()
            if p.author_id == author_id
            and p.kind == kind
            and p.is_active
            and (not accepted_only or (isinstance(p, Answer) and p.is_accepted))
        )

    async def save(self, post: PostT, expected_version: int | None) -> PostT:
        """Create or update a post with a compare-and-swap on its version."""
        stored = self._posts.get(post.id)

        if expected_version is None:
            if stored is not None:
                raise VersionConflictError("post", str(post.id))
        elif stored is None or stored.version != expected_version:
            raise VersionConflictError(
                "post", str(post.id), expected_version=expected_version
            )

        update: dict = {"version": (expected_version or 0) + 1}
        if isinstance(stored, Question):
            update["views"] = stored.views

        saved = post.model_copy(update=update)
        self._posts[post.id] = saved
        return saved

    def _questions(
        self,
        tag: Optional[TagName],
        search: Optional[str],
        include_inactive: bool,
    ) -> list[Question]:
        questions = [p for p in self._posts.values() if isinstance(p, Question)]

        if tag is not None:
            questions = [q for q in questions if tag in q.tags]

        if search:
            needle = search.lower()
            questions = [
                q
                for q in questions
                if needle in q.title.lower() or needle in q.body.lower()
            ]

        if not include_inactive:
            questions = [q for q in questions if q.is_active]

        return questions

    async def find_questions(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.RECENT,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        include_inactive: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions with filtering and pagination."""
        questions = self._questions(tag, search, include_inactive)

        # Stable sorts: tiebreaker (newest first) before the primary key
        questions.sort(key=lambda q: q.created_at, reverse=True)
        if sort == QuestionSortOrder.VOTES:
            questions.sort(key=lambda q: q.vote_score, reverse=True)
        elif sort == QuestionSortOrder.POPULAR:
            questions.sort(key=lambda q: q.views, reverse=True)

        return questions[offset : offset + limit]

    async def count_questions(
        self,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        include_inactive: bool = False,
    ) -> int:
        """Count questions matching the given filters."""
        return len(self._questions(tag, search, include_inactive))

    async def find_answers(
        self, question_id: PostId, include_inactive: bool = False
    ) -> list[Answer]:
        """Find answers to a question, best first."""
        answers = [
            p
            for p in self._posts.values()
            if isinstance(p, Answer)
            and p.question_id == question_id
            and (include_inactive or p.is_active)
        ]
        answers.sort(key=lambda a: (-a.vote_score, a.created_at))
        return answers

    async def count_answers(self, question_id: PostId) -> int:
        """Count active answers to a question."""
        return len(await self.find_answers(question_id))

    async def increment_views(self, question_id: PostId) -> None:
        """Increment views without touching the version."""
        question = self._posts.get(question_id)
        if isinstance(question, Question):
            self._posts[question_id] = question.model_copy(
                update={"views": question.views + 1}
            )
