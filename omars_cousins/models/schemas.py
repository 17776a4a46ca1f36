from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Role(str, Enum):
    """Speaker of a chat message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single chat message in a session transcript.

    Attributes:
        role: The speaker (system, user, or assistant).
        content: The message text.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class Session(BaseModel):
    """One independent chat transcript.

    Attributes:
        id: Unique session identifier.
        name: Display name shown in the session list.
        messages: Chronological transcript, primer first.
        created_at: Session creation timestamp.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    messages: list[Message] = Field(..., min_length=1)
    created_at: datetime = Field(..., alias="createdAt")


class QuestionRequest(BaseModel):
    """Request payload for the Omar's cousins endpoint.

    Attributes:
        question: The user's question.
    """

    question: str = Field(..., min_length=1)

    @field_validator("question", mode="before")
    @classmethod
    def strip_question(cls, v: str) -> str:
        """Strip whitespace from question before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class AnswerResponse(BaseModel):
    """Response from the Omar's cousins endpoint.

    Attributes:
        answer: The persona's answer, or the fallback text.
    """

    answer: str
