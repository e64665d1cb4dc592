"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from stackit.domain.model.tag import Tag
from stackit.domain.value import TagName


class TagRepository(ABC):
    """Repository interface for Tag entities."""

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag.

        Args:
            tag: Tag to save

        Returns:
            Saved tag
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name.

        Args:
            name: Tag name

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query.

        Args:
            names: List of tag names

        Returns:
            List of found tags (may be fewer than requested if some don't exist)
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        search: Optional[str] = None,
        min_questions: int = 0,
        limit: int = 50,
    ) -> list[Tag]:
        """Find tags, most used first, then by name.

        Args:
            search: Case-insensitive substring of the tag name
            min_questions: Only tags used by at least this many questions
            limit: Maximum number of tags to return

        Returns:
            List of tags
        """
        pass
