"""Tag use cases."""

from .list_tags import ListTagsRequest, ListTagsResponse, ListTagsUseCase, TagItem

__all__ = ["ListTagsRequest", "ListTagsResponse", "ListTagsUseCase", "TagItem"]
