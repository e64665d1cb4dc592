"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from stackit.domain.model import (
    AnyPost,
    Answer,
    Comment,
    Notification,
    Question,
    Tag,
    User,
)
from stackit.domain.value import (
    CommentId,
    Handle,
    NotificationId,
    NotificationType,
    PostId,
    PostKind,
    TagId,
    TagName,
    UserId,
    UserRole,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        handle=Handle(row["handle"]),
        email=row.get("email"),
        role=UserRole(row["role"]),
        is_active=row["is_active"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "handle": user.handle.root,
        "email": user.email,
        "role": user.role.value,
        "is_active": user.is_active,
        "created_at": user.created_at,
    }


def row_to_post(row: Dict[str, Any]) -> AnyPost:
    """Convert database row to Question or Answer domain model.

    Args:
        row: Database row as dict

    Returns:
        Question or Answer depending on the row's kind
    """
    if PostKind(row["kind"]) == PostKind.QUESTION:
        return row_to_question(row)
    return row_to_answer(row)


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert a question row to the Question domain model."""
    return Question(
        **_post_fields(row),
        title=row["title"],
        tags=[TagName(t) for t in row["tags"] or []],
        views=row["views"],
        accepted_answer_id=(
            PostId(_uuid(row["accepted_answer_id"]))
            if row.get("accepted_answer_id")
            else None
        ),
    )


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert an answer row to the Answer domain model."""
    return Answer(
        **_post_fields(row),
        question_id=PostId(_uuid(row["question_id"])),
        is_accepted=row["is_accepted"],
    )


def _post_fields(row: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": PostId(_uuid(row["id"])),
        "author_id": UserId(_uuid(row["author_id"])),
        "author_handle": Handle(row["author_handle"]),
        "body": row["body"],
        "upvoters": frozenset(UserId(_uuid(u)) for u in row["upvoters"] or []),
        "downvoters": frozenset(UserId(_uuid(u)) for u in row["downvoters"] or []),
        "is_active": row["is_active"],
        "version": row["version"],
        "created_at": row["created_at"],
        "updated_at": row["updated_at"],
    }


def post_to_dict(post: AnyPost) -> Dict[str, Any]:
    """Convert a post to a database dict.

    ``version`` and ``views`` are left out: both are owned by the
    repository.
    """
    values: Dict[str, Any] = {
        "id": post.id,
        "kind": post.kind.value,
        "author_id": post.author_id,
        "author_handle": post.author_handle.root,
        "body": post.body,
        "upvoters": sorted(post.upvoters),
        "downvoters": sorted(post.downvoters),
        "vote_score": post.vote_score,
        "is_active": post.is_active,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }

    if isinstance(post, Question):
        values.update(
            title=post.title,
            tags=[tag.root for tag in post.tags],
            accepted_answer_id=post.accepted_answer_id,
        )
    else:
        values.update(question_id=post.question_id, is_accepted=post.is_accepted)

    return values


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=TagName(row["name"]),
        description=row.get("description"),
        color=row["color"],
        questions_count=row["questions_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict."""
    return {
        "id": tag.id,
        "name": tag.name.root,
        "description": tag.description,
        "color": tag.color,
        "questions_count": tag.questions_count,
        "created_at": tag.created_at,
        "updated_at": tag.updated_at,
    }


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        type=NotificationType(row["type"]),
        recipient_id=UserId(_uuid(row["recipient_id"])),
        sender_id=UserId(_uuid(row["sender_id"])),
        message=row["message"],
        question_id=PostId(_uuid(row["question_id"])),
        answer_id=PostId(_uuid(row["answer_id"])) if row.get("answer_id") else None,
        is_read=row["is_read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    return {
        "id": notification.id,
        "type": notification.type.value,
        "recipient_id": notification.recipient_id,
        "sender_id": notification.sender_id,
        "message": notification.message,
        "question_id": notification.question_id,
        "answer_id": notification.answer_id,
        "is_read": notification.is_read,
        "created_at": notification.created_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        answer_id=PostId(_uuid(row["answer_id"])),
        question_id=PostId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_handle=Handle(row["author_handle"]),
        content=row["content"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return {
        "id": comment.id,
        "answer_id": comment.answer_id,
        "question_id": comment.question_id,
        "author_id": comment.author_id,
        "author_handle": comment.author_handle.root,
        "content": comment.content,
        "created_at": comment.created_at,
    }
