"""Tag routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from stackit.application.usecase.tag import (
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
)
from stackit.interface.error import to_http_exception

router = APIRouter(prefix="/tags", tags=["tags"], route_class=DishkaRoute)


@router.get("", response_model=ListTagsResponse)
async def list_tags(
    list_tags_use_case: FromDishka[ListTagsUseCase],
    search: str | None = None,
    limit: int = 50,
) -> ListTagsResponse:
    """List tags, most used first.

    Args:
        list_tags_use_case: List tags use case from DI
        search: Substring of the tag name (optional)
        limit: Maximum number of tags to return (1-100)

    Returns:
        List of tags
    """
    try:
        return await list_tags_use_case.execute(
            ListTagsRequest(search=search, limit=limit)
        )
    except Exception as e:
        raise to_http_exception(e, "list tags")


@router.get("/popular", response_model=ListTagsResponse)
async def popular_tags(
    list_tags_use_case: FromDishka[ListTagsUseCase],
    limit: int = 10,
) -> ListTagsResponse:
    """List tags used by at least one question, most used first."""
    try:
        return await list_tags_use_case.execute(
            ListTagsRequest(popular=True, limit=limit)
        )
    except Exception as e:
        raise to_http_exception(e, "list popular tags")
