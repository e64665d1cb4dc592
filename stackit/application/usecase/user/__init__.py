"""User use cases."""

from .get_profile import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    ProfileAnswerItem,
    ProfileQuestionItem,
)

__all__ = [
    "GetUserProfileRequest",
    "GetUserProfileResponse",
    "GetUserProfileUseCase",
    "ProfileAnswerItem",
    "ProfileQuestionItem",
]
