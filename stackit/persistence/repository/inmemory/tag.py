"""In-memory tag repository for testing."""

from typing import Optional

from stackit.domain.model import Tag
from stackit.domain.repository.tag import TagRepository
from stackit.domain.value import TagName


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing.

    Tags are keyed by name, like the unique constraint in PostgreSQL.
    """

    def __init__(self) -> None:
        self._tags: dict[str, Tag] = {}

    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag, keeping the original ID on name clashes."""
        existing = self._tags.get(tag.name.root)
        if existing is not None and existing.id != tag.id:
            tag = tag.model_copy(
                update={"id": existing.id, "created_at": existing.created_at}
            )
        self._tags[tag.name.root] = tag
        return tag

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        return self._tags.get(name.root)

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names."""
        return [self._tags[n.root] for n in dict.fromkeys(names) if n.root in self._tags]

    async def find_all(
        self,
        search: Optional[str] = None,
        min_questions: int = 0,
        limit: int = 50,
    ) -> list[Tag]:
        """Find tags, most used first, then by name."""
        tags = list(self._tags.values())

        if search:
            needle = search.strip().lower()
            tags = [t for t in tags if needle in t.name.root]
        if min_questions > 0:
            tags = [t for t in tags if t.questions_count >= min_questions]

        tags.sort(key=lambda t: (-t.questions_count, t.name.root))
        return tags[:limit]
