"""Question use cases."""

from .create_question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
)
from .delete_question import DeleteQuestionRequest, DeleteQuestionUseCase
from .get_question import (
    AnswerItem,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
)
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    QuestionListItem,
)
from .update_question import (
    UpdateQuestionRequest,
    UpdateQuestionResponse,
    UpdateQuestionUseCase,
)

__all__ = [
    "AnswerItem",
    "CreateQuestionRequest",
    "CreateQuestionResponse",
    "CreateQuestionUseCase",
    "DeleteQuestionRequest",
    "DeleteQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionResponse",
    "GetQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "QuestionListItem",
    "UpdateQuestionRequest",
    "UpdateQuestionResponse",
    "UpdateQuestionUseCase",
]
