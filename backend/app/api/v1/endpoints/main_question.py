from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from app.core.container import Container
from app.schemas.main_question_schema import MainQuestionRequest, MainQuestionResponse, SuccessResponse
from app.services.main_question_service import MainQuestionService

router = APIRouter(tags=["Main Questions"])


@router.post("/update", response_model=SuccessResponse)
@inject
async def update_main_question(
    payload: MainQuestionRequest,
    service: MainQuestionService = Depends(Provide[Container.main_question_service]),
):
    """
    Create or update a main question with its alternative phrasings.
    Repeated phrasings are stored once.
    """
    await service.save_main_question(payload.mainQuestion, payload.answer, payload.questions)
    return {"success": True}


@router.get("/responses", response_model=List[MainQuestionResponse])
@inject
async def get_responses(
    service: MainQuestionService = Depends(Provide[Container.main_question_service]),
):
    records = await service.list_main_questions()
    return [MainQuestionResponse.model_validate(r) for r in records]
