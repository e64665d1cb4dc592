"""List tags use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from stackit.domain.service import TagService


class TagItem(BaseModel):
    """Tag item in response."""

    name: str
    description: str | None
    color: str
    questions_count: int
    created_at: datetime


class ListTagsRequest(BaseModel):
    """List tags request.

    With ``popular`` set, only tags used by at least one question are
    returned.
    """

    search: str | None = None
    popular: bool = False
    limit: int = Field(default=50, ge=1, le=100)


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagItem]


class ListTagsUseCase:
    """Use case for listing tags."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow."""
        with logfire.span(
            "list_tags.execute",
            search=request.search,
            popular=request.popular,
            limit=request.limit,
        ):
            if request.popular:
                tags = await self.tag_service.popular_tags(limit=request.limit)
            else:
                tags = await self.tag_service.list_tags(
                    search=request.search, limit=request.limit
                )

            return ListTagsResponse(
                tags=[
                    TagItem(
                        name=tag.name.root,
                        description=tag.description,
                        color=tag.color,
                        questions_count=tag.questions_count,
                        created_at=tag.created_at,
                    )
                    for tag in tags
                ]
            )
