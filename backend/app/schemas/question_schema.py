from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class QuestionResponse(BaseModel):
    id: int
    question: str
    answer: str
    video_path: Optional[str] = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class DeleteQuestionRequest(BaseModel):
    question: Optional[str] = None
    video_path: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "question": "How do I reset my password?",
                "video_path": "3f2a9c0d1e4b4a8f9c7d6e5f4a3b2c1d.mp4",
            }
        }
    )


class MessageResponse(BaseModel):
    message: str
