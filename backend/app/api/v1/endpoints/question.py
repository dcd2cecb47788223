from typing import List, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, BackgroundTasks, Depends, File, Form, UploadFile

from app.core.container import Container
from app.schemas.question_schema import DeleteQuestionRequest, MessageResponse, QuestionResponse
from app.services.question_service import QuestionService

router = APIRouter(tags=["Questions"])


@router.get("/get-questions", response_model=List[QuestionResponse])
@inject
async def get_questions(
    service: QuestionService = Depends(Provide[Container.question_service]),
):
    records = await service.list_questions()
    return [QuestionResponse.model_validate(r) for r in records]


@router.post("/save-question", response_model=MessageResponse)
@inject
async def save_question(
    background_tasks: BackgroundTasks,
    question: str = Form(""),
    answer: str = Form(""),
    video: Optional[UploadFile] = File(None),
    service: QuestionService = Depends(Provide[Container.question_service]),
):
    """
    Create or update a question by its text.

    - **question**, **answer**: required, non-empty
    - **video**: optional file; replaces the current video, whose file is deleted
    """
    await service.save_question(question, answer, video, background_tasks)
    return {"message": "Question saved successfully"}


@router.delete("/delete_custom_question", response_model=MessageResponse)
@inject
async def delete_custom_question(
    payload: DeleteQuestionRequest,
    background_tasks: BackgroundTasks,
    service: QuestionService = Depends(Provide[Container.question_service]),
):
    await service.delete_question(payload.question, payload.video_path, background_tasks)
    return {"message": "Question and video deleted successfully."}
