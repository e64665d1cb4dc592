"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import Select, asc, case, desc, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.error import VersionConflictError
from stackit.domain.model import AnyPost, Answer, Question
from stackit.domain.repository.post import PostRepository, PostT, QuestionSortOrder
from stackit.domain.value import PostId, PostKind, TagName, UserId
from stackit.persistence.mappers import (
    post_to_dict,
    row_to_answer,
    row_to_post,
    row_to_question,
)
from stackit.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository.

    Updates are compare-and-swap statements:
    ``UPDATE posts ... WHERE id = :id AND version = :expected``.
    Acceptance moves run inside a savepoint; the question's row lock taken
    by the first statement serializes them per question.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[AnyPost]:
        """Find a question or answer by ID, including inactive ones."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post(dict(row)) if row else None

    async def set_accepted_answer(
        self, question_id: PostId, answer_id: PostId, expected_version: int
    ) -> Answer:
        """Make an answer the question's only accepted answer, atomically."""
        with logfire.span(
            "post_repository.set_accepted_answer",
            question_id=str(question_id),
            answer_id=str(answer_id),
            expected_version=expected_version,
        ):
            async with self.session.begin_nested():
                await self._claim_question(question_id, answer_id, expected_version)
                await self._unset_accepted(question_id, keep=answer_id)

                result = await self.session.execute(
                    update(posts_table)
                    .where(posts_table.c.id == answer_id)
                    .where(posts_table.c.question_id == question_id)
                    .where(posts_table.c.is_active.is_(True))
                    .values(
                        is_accepted=True,
                        # Bump only when the flag actually changes
                        version=case(
                            (
                                posts_table.c.is_accepted.is_(True),
                                posts_table.c.version,
                            ),
                            else_=posts_table.c.version + 1,
                        ),
                    )
                    .returning(posts_table)
                )
                row = result.mappings().first()
                if row is None:
                    logfire.warn(
                        "Answer gone before acceptance", answer_id=str(answer_id)
                    )
                    raise VersionConflictError("post", str(answer_id))

            logfire.info(
                "Accepted answer moved",
                question_id=str(question_id),
                answer_id=str(answer_id),
            )
            return row_to_answer(dict(row))

    async def clear_accepted_answer(
        self, question_id: PostId, expected_version: int
    ) -> Question:
        """Clear a question's accepted answer, atomically."""
        with logfire.span(
            "post_repository.clear_accepted_answer",
            question_id=str(question_id),
            expected_version=expected_version,
        ):
            async with self.session.begin_nested():
                question = await self._claim_question(
                    question_id, None, expected_version
                )
                await self._unset_accepted(question_id)

            logfire.info("Accepted answer cleared", question_id=str(question_id))
            return question

    async def _claim_question(
        self,
        question_id: PostId,
        answer_id: Optional[PostId],
        expected_version: int,
    ) -> Question:
        """Point the question at ``answer_id`` with a compare-and-swap.

        Runs first so the question's row lock serializes acceptance moves.
        """
        result = await self.session.execute(
            update(posts_table)
            .where(posts_table.c.id == question_id)
            .where(posts_table.c.kind == PostKind.QUESTION.value)
            .where(posts_table.c.version == expected_version)
            .values(accepted_answer_id=answer_id, version=expected_version + 1)
            .returning(posts_table)
        )
        row = result.mappings().first()
        if row is None:
            logfire.warn(
                "Stale question version",
                question_id=str(question_id),
                expected_version=expected_version,
            )
            raise VersionConflictError(
                "post", str(question_id), expected_version=expected_version
            )
        return row_to_question(dict(row))

    async def _unset_accepted(
        self, question_id: PostId, keep: Optional[PostId] = None
    ) -> None:
        stmt = (
            update(posts_table)
            .where(posts_table.c.kind == PostKind.ANSWER.value)
            .where(posts_table.c.question_id == question_id)
            .where(posts_table.c.is_accepted.is_(True))
            .values(is_accepted=False, version=posts_table.c.version + 1)
        )
        if keep is not None:
            stmt = stmt.where(posts_table.c.id != keep)
        await self.session.execute(stmt)

    async def find_by_author(
        self, author_id: UserId, kind: PostKind, limit: int = 10
    ) -> List[AnyPost]:
        """Find a user's active posts of one kind, newest first."""
        stmt = (
            select(posts_table)
            .where(
                posts_table.c.author_id == author_id,
                posts_table.c.kind == kind.value,
                posts_table.c.is_active.is_(True),
            )
            .order_by(desc(posts_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_post(dict(row)) for row in result.mappings().all()]

    async def count_by_author(
        self, author_id: UserId, kind: PostKind, accepted_only: bool = False
    ) -> int:
        """Count a user's active posts of one kind."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(
                posts_table.c.author_id == author_id,
                posts_table.c.kind == kind.value,
                posts_table.c.is_active.is_(True),
            )
        )
        if accepted_only:
            stmt = stmt.where(posts_table.c.is_accepted.is_(True))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: PostT, expected_version: int | None) -> PostT:
        """Create or update a post with a compare-and-swap on its version."""
        with logfire.span(
            "post_repository.save",
            post_id=str(post.id),
            kind=post.kind.value,
            expected_version=expected_version,
        ):
            values = post_to_dict(post)

            if expected_version is None:
                exists = await self.session.execute(
                    select(posts_table.c.id).where(posts_table.c.id == post.id)
                )
                if exists.first() is not None:
                    logfire.warn("Post already exists", post_id=str(post.id))
                    raise VersionConflictError("post", str(post.id))

                if isinstance(post, Question):
                    values["views"] = post.views
                stmt = (
                    posts_table.insert()
                    .values(**values, version=1)
                    .returning(posts_table)
                )
            else:
                stmt = (
                    update(posts_table)
                    .where(posts_table.c.id == post.id)
                    .where(posts_table.c.version == expected_version)
                    .values(**values, version=expected_version + 1)
                    .returning(posts_table)
                )

            result = await self.session.execute(stmt)
            row = result.mappings().first()

            if row is None:
                logfire.warn(
                    "Stale post version",
                    post_id=str(post.id),
                    expected_version=expected_version,
                )
                raise VersionConflictError(
                    "post", str(post.id), expected_version=expected_version
                )

            await self.session.flush()
            saved = row_to_post(dict(row))
            logfire.info("Post saved", post_id=str(post.id), version=saved.version)
            return saved

    def _questions_query(
        self,
        stmt: Select,
        tag: Optional[TagName],
        search: Optional[str],
        include_inactive: bool,
    ) -> Select:
        stmt = stmt.where(posts_table.c.kind == PostKind.QUESTION.value)

        if tag:
            stmt = stmt.where(posts_table.c.tags.any(tag.root))

        if search:
            stmt = stmt.where(
                or_(
                    posts_table.c.title.icontains(search, autoescape=True),
                    posts_table.c.body.icontains(search, autoescape=True),
                )
            )

        if not include_inactive:
            stmt = stmt.where(posts_table.c.is_active.is_(True))

        return stmt

    async def find_questions(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.RECENT,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        include_inactive: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering and pagination."""
        with logfire.span(
            "post_repository.find_questions",
            sort=sort.value,
            tag=tag.root if tag else None,
            search=search,
            limit=limit,
            offset=offset,
        ):
            stmt = self._questions_query(
                select(posts_table), tag, search, include_inactive
            )

            if sort == QuestionSortOrder.VOTES:
                stmt = stmt.order_by(desc(posts_table.c.vote_score))
            elif sort == QuestionSortOrder.POPULAR:
                stmt = stmt.order_by(desc(posts_table.c.views))
            stmt = stmt.order_by(desc(posts_table.c.created_at))

            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            questions = [row_to_post(dict(row)) for row in result.mappings().all()]
            logfire.info("Found questions", count=len(questions))
            return [q for q in questions if isinstance(q, Question)]

    async def count_questions(
        self,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        include_inactive: bool = False,
    ) -> int:
        """Count questions matching the given filters."""
        stmt = self._questions_query(
            select(func.count()).select_from(posts_table),
            tag,
            search,
            include_inactive,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_answers(
        self, question_id: PostId, include_inactive: bool = False
    ) -> List[Answer]:
        """Find answers to a question, best first."""
        stmt = select(posts_table).where(
            posts_table.c.kind == PostKind.ANSWER.value,
            posts_table.c.question_id == question_id,
        )
        if not include_inactive:
            stmt = stmt.where(posts_table.c.is_active.is_(True))
        stmt = stmt.order_by(
            desc(posts_table.c.vote_score), asc(posts_table.c.created_at)
        )

        result = await self.session.execute(stmt)
        answers = [row_to_post(dict(row)) for row in result.mappings().all()]
        return [a for a in answers if isinstance(a, Answer)]

    async def count_answers(self, question_id: PostId) -> int:
        """Count active answers to a question."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(
                posts_table.c.kind == PostKind.ANSWER.value,
                posts_table.c.question_id == question_id,
                posts_table.c.is_active.is_(True),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def increment_views(self, question_id: PostId) -> None:
        """Atomically increment views by 1, leaving the version alone."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == question_id)
            .where(posts_table.c.kind == PostKind.QUESTION.value)
            .values(views=posts_table.c.views + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
