from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MainQuestionRequest(BaseModel):
    mainQuestion: Optional[str] = None
    answer: Optional[str] = None
    questions: Optional[List[str]] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "mainQuestion": "What are your opening hours?",
                "answer": "We are open 9am to 5pm, Monday to Friday.",
                "questions": ["When are you open?", "What time do you close?"],
            }
        }
    )


class MainQuestionResponse(BaseModel):
    id: int
    mainQuestion: str = Field(validation_alias="main_question")
    answer: str
    questions: List[str] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class SuccessResponse(BaseModel):
    success: bool
