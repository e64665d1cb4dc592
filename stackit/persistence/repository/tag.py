"""PostgreSQL implementation of Tag repository."""

from typing import Optional

from sqlalchemy import asc, desc, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Tag
from stackit.domain.repository.tag import TagRepository
from stackit.domain.value import TagName
from stackit.persistence.mappers import row_to_tag, tag_to_dict
from stackit.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag.

        Two requests creating the same tag concurrently both succeed; the
        row is keyed by name.
        """
        values = tag_to_dict(tag)
        stmt = insert(tags_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[tags_table.c.name],
            set_={
                "description": stmt.excluded.description,
                "color": stmt.excluded.color,
                "questions_count": stmt.excluded.questions_count,
                "updated_at": stmt.excluded.updated_at,
            },
        ).returning(tags_table)
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_tag(dict(row))

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        stmt = select(tags_table).where(tags_table.c.name == name.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_tag(dict(row)) if row else None

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query."""
        if not names:
            return []

        stmt = select(tags_table).where(tags_table.c.name.in_([n.root for n in names]))
        result = await self.session.execute(stmt)
        return [row_to_tag(dict(row)) for row in result.mappings().all()]

    async def find_all(
        self,
        search: Optional[str] = None,
        min_questions: int = 0,
        limit: int = 50,
    ) -> list[Tag]:
        """Find tags, most used first, then by name."""
        stmt = select(tags_table)

        if search:
            stmt = stmt.where(
                tags_table.c.name.icontains(search.strip().lower(), autoescape=True)
            )
        if min_questions > 0:
            stmt = stmt.where(tags_table.c.questions_count >= min_questions)

        stmt = stmt.order_by(
            desc(tags_table.c.questions_count), asc(tags_table.c.name)
        ).limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_tag(dict(row)) for row in result.mappings().all()]
