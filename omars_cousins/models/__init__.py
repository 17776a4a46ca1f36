"""Pydantic models for API payloads and chat sessions.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - Role: Message speaker enumeration
    - Message: Individual message in a transcript
    - Session: Named chat session with its transcript
    - QuestionRequest: Incoming question payload
    - AnswerResponse: Outgoing answer payload
"""

from omars_cousins.models.schemas import (
    AnswerResponse,
    Message,
    QuestionRequest,
    Role,
    Session,
)

__all__ = ["AnswerResponse", "Message", "QuestionRequest", "Role", "Session"]
