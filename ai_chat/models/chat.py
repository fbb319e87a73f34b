from datetime import datetime
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

TIMESTAMP_FORMAT = "%d-%m-%Y %I:%M %p"


class ChatRole(str, Enum):
    USER = "USER"
    AI = "AI"


class ResponseFormat(str, Enum):
    HTML = "html"
    JSON = "json"


def parse_format(raw: Optional[str]) -> ResponseFormat:
    """Map the ``format`` query value to a ResponseFormat, defaulting to HTML."""
    if not raw:
        return ResponseFormat.HTML
    try:
        return ResponseFormat(raw.strip().lower())
    except ValueError:
        return ResponseFormat.HTML


def format_timestamp(moment: Optional[datetime] = None) -> str:
    return (moment or datetime.now()).strftime(TIMESTAMP_FORMAT)


class ChatMessage(BaseModel):
    role: ChatRole
    message: str
    timestamp: str = Field(default_factory=format_timestamp)


class ChatSuccessResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_message: ChatMessage = Field(alias="userMessage")
    ai_message: ChatMessage = Field(alias="aiMessage")
    format: Literal["json"] = "json"
    success: Literal[True] = True


class ChatErrorResponse(BaseModel):
    error: str
    success: Literal[False] = False
    format: Literal["json"] = "json"


class MissingQuestionResponse(BaseModel):
    error: str = "Please pass a question in the query string"
    example: str = "?question=What is AI?&format=json"
    success: Literal[False] = False
