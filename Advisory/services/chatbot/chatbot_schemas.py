from datetime import datetime
from enum import Enum
from typing import Literal, Optional
from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    message: Optional[str] = None

class ChatResponse(BaseModel):
    reply: str

class ErrorResponse(BaseModel):
    error: str


class Language(str, Enum):
    english = "en"
    finnish = "fi"
    swedish = "sv"
    chinese = "zh"
    russian = "ru"


class ChatMessage(BaseModel):
    id: str
    text: str
    sender: Literal["user", "bot"]
    timestamp: datetime = Field(default_factory=datetime.now)
