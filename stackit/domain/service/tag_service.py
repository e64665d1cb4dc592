"""Tag domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from stackit.domain.model.tag import Tag
from stackit.domain.repository import PostRepository
from stackit.domain.repository.tag import TagRepository
from stackit.domain.value import TagId, TagName

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(
        self, tag_repository: TagRepository, post_repository: PostRepository
    ) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
            post_repository: Post repository, source of truth for tag counts
        """
        self.tag_repository = tag_repository
        self.post_repository = post_repository

    async def ensure_tags(self, tag_names: list[TagName]) -> list[Tag]:
        """Return the named tags, creating the ones that don't exist yet.

        Args:
            tag_names: Tag names used by a question

        Returns:
            One tag per distinct name
        """
        with logfire.span(
            "tag_service.ensure_tags", tags=[t.root for t in tag_names]
        ):
            tags = await self.tag_repository.find_by_names(tag_names)
            found = {tag.name.root for tag in tags}

            for name in dict.fromkeys(tag_names):
                if name.root in found:
                    continue
                created = await self.tag_repository.save(
                    Tag(id=TagId(uuid4()), name=name)
                )
                tags.append(created)
                found.add(name.root)
                logfire.info("Tag created", tag_name=name.root)

            return tags

    async def refresh_counts(self, tag_names: list[TagName]) -> None:
        """Recompute ``questions_count`` from active questions.

        Args:
            tag_names: Tags whose counts may have changed
        """
        with logfire.span(
            "tag_service.refresh_counts", tags=[t.root for t in tag_names]
        ):
            tags = await self.tag_repository.find_by_names(list(dict.fromkeys(tag_names)))
            for tag in tags:
                count = await self.post_repository.count_questions(tag=tag.name)
                if count == tag.questions_count:
                    continue
                await self.tag_repository.save(
                    tag.model_copy(
                        update={"questions_count": count, "updated_at": datetime.now()}
                    )
                )
                logfire.info(
                    "Tag count refreshed", tag_name=tag.name.root, questions_count=count
                )

    async def list_tags(self, search: Optional[str] = None, limit: int = 50) -> list[Tag]:
        """List tags, most used first.

        Args:
            search: Case-insensitive substring of the tag name
            limit: Maximum number of tags to return

        Returns:
            List of tags
        """
        with logfire.span("tag_service.list_tags", search=search, limit=limit):
            tags = await self.tag_repository.find_all(search=search, limit=limit)
            logfire.info("Tags retrieved", count=len(tags))
            return tags

    async def popular_tags(self, limit: int = 10) -> list[Tag]:
        """List tags used by at least one active question, most used first."""
        with logfire.span("tag_service.popular_tags", limit=limit):
            return await self.tag_repository.find_all(min_questions=1, limit=limit)
